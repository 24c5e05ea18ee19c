"""
Rate Client - Wholesale vs Retail Quote Board

Holds the current INR mid-market rates and prices a transfer two ways:
through a retail bank (wide spread plus a fixed SWIFT fee) and through
wholesale rails (thin spread, no fee).

Rates are loaded by the caller (live feed or the configured fallback
table); fetching them is not this module's job.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from config import (
    BANK_SPREAD,
    BANK_FIXED_FEE,
    WHOLESALE_SPREAD,
    WHOLESALE_FIXED_FEE,
    FALLBACK_RATES,
)

logger = logging.getLogger(__name__)


# ============================================================================
# DATA STRUCTURES
# ============================================================================

class Direction(str, Enum):
    """Which way the money moves relative to India."""
    INFLOW = "INFLOW"    # Export: selling foreign currency
    OUTFLOW = "OUTFLOW"  # Import: buying foreign currency


@dataclass(frozen=True)
class Quote:
    """
    Priced comparison for one transfer.

    Attributes:
        currency: Currency code quoted
        amount: Foreign currency amount
        direction: Inflow or outflow
        mid_rate: Live mid-market INR rate
        bank_rate: Retail bank INR rate after spread
        wholesale_rate: Wholesale INR rate after spread
        bank_total: INR cost (or proceeds) through the bank
        wholesale_total: INR cost (or proceeds) through wholesale rails
        savings: Absolute INR difference between the two totals
    """
    currency: str
    amount: float
    direction: Direction
    mid_rate: float
    bank_rate: float
    wholesale_rate: float
    bank_total: float
    wholesale_total: float
    savings: float


# ============================================================================
# RATE BOARD
# ============================================================================

class RateBoard:
    """
    In-memory board of INR mid rates with quote pricing.

    The board is ready once it holds at least one rate.
    """

    def __init__(self, rates: Optional[Dict[str, float]] = None):
        self._rates: Dict[str, float] = {}
        if rates:
            self.update_rates(rates)

    @classmethod
    def from_fallback(cls) -> "RateBoard":
        """Build a board seeded with the configured fallback rates."""
        logger.info("📉 Rate board seeded from fallback rates")
        return cls(FALLBACK_RATES)

    @property
    def is_ready(self) -> bool:
        return bool(self._rates)

    @property
    def supported_currencies(self) -> List[str]:
        return list(self._rates)

    def update_rates(self, rates: Dict[str, float]) -> None:
        """
        Replace rates for the given currencies.

        Args:
            rates: Mapping of currency code to INR mid rate. Entries with
                missing or non-positive rates are skipped.
        """
        for currency, rate in rates.items():
            if rate is None or rate <= 0:
                logger.warning(f"⚠️  Ignoring invalid rate for {currency}: {rate}")
                continue
            self._rates[currency.upper()] = float(rate)

        logger.info(f"✅ Rates loaded: {', '.join(self._rates)}")

    def get_rate(self, currency: str) -> Optional[float]:
        """Return the INR mid rate for a currency, or None if unknown."""
        return self._rates.get(currency.upper())

    def get_quote(
        self,
        amount: float,
        currency: str,
        direction: Direction = Direction.OUTFLOW,
    ) -> Optional[Quote]:
        """
        Price a transfer through a retail bank and through wholesale rails.

        For outflows the buyer pays spread and fees on top; for inflows the
        spread lowers the rate received and fees are deducted.

        Args:
            amount: Foreign currency amount
            currency: Currency code (e.g. "USD")
            direction: Direction.OUTFLOW (import) or Direction.INFLOW (export)

        Returns:
            Quote, or None if the currency has no rate on the board
        """
        mid_rate = self.get_rate(currency)
        if mid_rate is None:
            return None

        direction = Direction(direction)

        if direction is Direction.OUTFLOW:
            bank_rate = mid_rate * (1 + BANK_SPREAD)
            wholesale_rate = mid_rate * (1 + WHOLESALE_SPREAD)
            bank_total = amount * bank_rate + BANK_FIXED_FEE
            wholesale_total = amount * wholesale_rate + WHOLESALE_FIXED_FEE
        else:
            bank_rate = mid_rate * (1 - BANK_SPREAD)
            wholesale_rate = mid_rate * (1 - WHOLESALE_SPREAD)
            bank_total = amount * bank_rate - BANK_FIXED_FEE
            wholesale_total = amount * wholesale_rate - WHOLESALE_FIXED_FEE

        return Quote(
            currency=currency.upper(),
            amount=amount,
            direction=direction,
            mid_rate=mid_rate,
            bank_rate=bank_rate,
            wholesale_rate=wholesale_rate,
            bank_total=bank_total,
            wholesale_total=wholesale_total,
            savings=abs(bank_total - wholesale_total),
        )


# ============================================================================
# FORMATTING
# ============================================================================

def format_currency(amount: float) -> str:
    """
    Format an INR amount with Indian digit grouping and no decimals.

    Example:
        >>> format_currency(1234567.6)
        "₹12,34,568"
    """
    rounded = math.floor(abs(amount) + 0.5)
    sign = "-" if amount < 0 and rounded else ""

    digits = str(rounded)
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])

    return f"{sign}₹{digits}"
