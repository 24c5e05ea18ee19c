"""
Currency name normalization utilities.

Maps currency codes and common names found in free text ("dollar",
"sterling", "sgd") to canonical ISO-like codes.
"""

import re
from typing import Optional

from config import CURRENCY_ALIASES


def _alias_pattern(alias: str) -> str:
    # Codes must stand alone ("aud" not in "audit"); names may be plural
    if alias.upper() == CURRENCY_ALIASES[alias]:
        return re.escape(alias) + r"(?![a-z])"
    return re.escape(alias)


# Longer aliases first so "euro" wins over "eur" at the same position.
# No letter may precede a match, but digits may ("5000usd").
CURRENCY_PATTERN = re.compile(
    r"(?<![a-z])(?:"
    + "|".join(
        _alias_pattern(alias)
        for alias in sorted(CURRENCY_ALIASES, key=len, reverse=True)
    )
    + ")",
    re.IGNORECASE,
)


def normalize_currency(text: Optional[str]) -> Optional[str]:
    """
    Find the first currency mentioned in text and return its code.

    Args:
        text: Free text, a currency code or a currency name

    Returns:
        Canonical code (e.g. "USD"), or None if no currency is mentioned

    Example:
        >>> normalize_currency("how many pounds is that")
        "GBP"
        >>> normalize_currency("singapore dollar")
        "SGD"
    """
    if not text:
        return None

    match = CURRENCY_PATTERN.search(text)
    if not match:
        return None

    return CURRENCY_ALIASES[match.group(0).lower()]


def format_amount(amount: float) -> str:
    """Render an amount without a trailing .0 for whole numbers."""
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)
