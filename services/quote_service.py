"""
Quote Service - Rate and Conversion Replies

Turns rate board quotes into chat replies:
- Per-unit live wholesale rate against the bank rate
- Full cost breakdown for an amount

Every reply degrades to a fixed message when the rate board is not
ready or does not quote the requested currency.
"""

import logging
from typing import Optional

from clients.rate_client import RateBoard, Direction, format_currency
from config import RATE_QUOTE_AMOUNT
from config.knowledge import (
    CURRENCY_NAMES,
    RATES_NOT_READY,
    RATE_UNAVAILABLE,
    RATE_REPLY,
    CONVERSION_UNAVAILABLE,
    CONVERSION_REPLY,
)
from utils.currency import format_amount

logger = logging.getLogger(__name__)


class QuoteService:
    """Formats rate board quotes for the conversation."""

    def __init__(self, rate_board: Optional[RateBoard]):
        """
        Args:
            rate_board: Source of quotes. None behaves like a board that
                never becomes ready.
        """
        self.rate_board = rate_board

    @property
    def is_ready(self) -> bool:
        return self.rate_board is not None and self.rate_board.is_ready

    def supported_label(self) -> str:
        """Human-readable list of quotable currencies ("USD, SGD and EUR")."""
        currencies = self.rate_board.supported_currencies if self.is_ready else []
        if not currencies:
            return "USD, SGD, GBP, or EUR"
        if len(currencies) == 1:
            return currencies[0]
        return f"{', '.join(currencies[:-1])}, and {currencies[-1]}"

    def rate_reply(self, currency: str) -> str:
        """Live wholesale rate for one unit of currency versus the bank rate."""
        if not self.is_ready:
            logger.warning("⏳ Rate board not ready for rate request")
            return RATES_NOT_READY

        quote = self.rate_board.get_quote(RATE_QUOTE_AMOUNT, currency, Direction.OUTFLOW)
        if quote is None:
            logger.info(f"💱 No rate available for {currency}")
            return RATE_UNAVAILABLE.format(
                currency_label=_currency_label(currency),
                currencies=self.supported_label(),
            )

        saving_pct = (quote.bank_rate - quote.wholesale_rate) / quote.bank_rate * 100

        logger.info(f"💱 Rate quoted for {currency}: {quote.wholesale_rate:.4f}")
        return RATE_REPLY.format(
            currency=quote.currency,
            wholesale_rate=quote.wholesale_rate,
            bank_rate=quote.bank_rate,
            saving_pct=saving_pct,
        )

    def conversion_reply(self, amount: float, currency: str) -> str:
        """Bank versus wholesale cost breakdown for an amount."""
        if not self.is_ready:
            logger.warning("⏳ Rate board not ready for conversion request")
            return RATES_NOT_READY

        quote = self.rate_board.get_quote(amount, currency, Direction.OUTFLOW)
        if quote is None:
            logger.info(f"🧮 Conversion not possible for {currency}")
            return CONVERSION_UNAVAILABLE.format(currencies=self.supported_label())

        logger.info(f"🧮 Conversion priced: {amount} {currency}, savings {quote.savings:.2f}")
        return CONVERSION_REPLY.format(
            amount=format_amount(amount),
            currency=quote.currency,
            bank_total=format_currency(quote.bank_total),
            wholesale_total=format_currency(quote.wholesale_total),
            savings=format_currency(quote.savings),
        )


def _currency_label(currency: str) -> str:
    name = CURRENCY_NAMES.get(currency)
    return f"{name} ({currency})" if name else currency
