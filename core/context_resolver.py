"""
Context Resolver

Interprets a message against the question the assistant asked on the
previous turn. The pending context tag is consumed on every call; a
handler re-sets it only when it needs yet another answer.

Handlers return None to let the message fall through to normal intent
handling.
"""

import logging
from typing import Callable, Dict, Optional

from config.knowledge import (
    RATE_LATER_REPLY,
    CURRENCY_NOT_UNDERSTOOD,
    GOT_AMOUNT,
    GOT_CURRENCY,
    STILL_NEED_DETAILS,
    TERM_NOT_FOUND,
)
from utils.currency import normalize_currency, format_amount
from .analyzer import AnalysisResult, Intent
from .responder import lookup_term
from .state import ContextTag, SessionState

logger = logging.getLogger(__name__)

ContextHandler = Callable[[AnalysisResult, SessionState], Optional[str]]


class ContextResolver:
    """
    Resolves follow-up answers for pending context tags.

    Args:
        quotes: Quote formatter exposing rate_reply(currency),
            conversion_reply(amount, currency) and supported_label()
    """

    def __init__(self, quotes):
        self.quotes = quotes
        self.handlers: Dict[ContextTag, ContextHandler] = {
            ContextTag.AWAITING_CURRENCY_FOR_RATE: self._currency_for_rate,
            ContextTag.AWAITING_CALCULATION_DETAILS: self._calculation_details,
            ContextTag.AWAITING_TERM_DEFINITION: self._term_definition,
        }

    def resolve(self, analysis: AnalysisResult, state: SessionState) -> Optional[str]:
        """
        Handle a message while a context tag is pending.

        Args:
            analysis: Result of analyzing the message
            state: Session holding the pending tag and slots

        Returns:
            Reply text, or None if standard response generation should run
        """
        tag = state.context_tag
        state.clear_context()

        handler = self.handlers.get(tag)
        if handler is None:
            return None

        logger.info(f"🔁 Resolving context: {tag.value}")
        return handler(analysis, state)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _currency_for_rate(self, analysis: AnalysisResult, state: SessionState) -> str:
        currency = normalize_currency(analysis.raw_text)
        if currency:
            return self.quotes.rate_reply(currency)

        if analysis.intent is Intent.GOODBYE:
            return RATE_LATER_REPLY

        # One retry only: the tag stays cleared
        return CURRENCY_NOT_UNDERSTOOD.format(currencies=self.quotes.supported_label())

    def _calculation_details(self, analysis: AnalysisResult, state: SessionState) -> str:
        amount = analysis.amount if analysis.amount is not None else state.slots.get("amount")
        currency = analysis.currency or state.slots.get("currency")

        if amount is not None and currency:
            state.slots.pop("amount", None)
            state.slots.pop("currency", None)
            return self.quotes.conversion_reply(amount, currency)

        if amount is not None:
            state.slots["amount"] = amount
            state.set_context(ContextTag.AWAITING_CALCULATION_DETAILS)
            return GOT_AMOUNT.format(amount=format_amount(amount))

        if currency:
            state.slots["currency"] = currency
            state.set_context(ContextTag.AWAITING_CALCULATION_DETAILS)
            return GOT_CURRENCY.format(currency=currency)

        return STILL_NEED_DETAILS

    def _term_definition(self, analysis: AnalysisResult, state: SessionState) -> str:
        return lookup_term(analysis.raw_text) or TERM_NOT_FOUND

