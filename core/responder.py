"""
Response Generator

Maps an analyzed message to a reply. Dispatch is an ordered table of
(intent, handler) pairs; the first entry for the message's intent wins
and anything unmatched gets the fallback reply.

Some handlers have side effects on the session: they set a context tag
when a follow-up answer is needed, or start a guided workflow.
"""

import logging
import random
from typing import Callable, Optional, Tuple

from config.knowledge import (
    FAQ,
    TRADE_DICTIONARY,
    TROUBLESHOOTING,
    TROUBLESHOOTING_TRIGGERS,
    GREETINGS,
    THANKS_REPLY,
    GOODBYE_REPLY,
    PERSONALITY_REPLY,
    FALLBACK_REPLY,
    SUPPORT_REPLY,
    ASK_RATE_CURRENCY,
    ASK_CALCULATION_DETAILS,
    ASK_TERM,
    ONBOARDING_OFFER,
    TICKET_OFFER,
    TERM_DEFINITION,
    APOLOGY_PREFIX,
    PRIORITY_PREFIX,
)
from .analyzer import AnalysisResult, Intent
from .state import ContextTag, Sentiment, SessionState, WorkflowName

logger = logging.getLogger(__name__)

Handler = Callable[[AnalysisResult, SessionState], str]


# ============================================================================
# DICTIONARY LOOKUP
# ============================================================================

def _squash(term: str) -> str:
    return "".join(ch for ch in term.lower() if "a" <= ch <= "z")


# "hs code", "HS-Code" and "hs_code" all resolve to the same entry
_DICTIONARY_INDEX = {_squash(key): key for key in TRADE_DICTIONARY}


def lookup_term(term: str) -> Optional[str]:
    """
    Look up a trade term, ignoring case, spacing and punctuation.

    Returns:
        Formatted definition reply, or None if the term is unknown
    """
    key = _DICTIONARY_INDEX.get(_squash(term))
    if key is None:
        return None
    return TERM_DEFINITION.format(term=key.upper(), definition=TRADE_DICTIONARY[key])


# ============================================================================
# TONE
# ============================================================================

def adjust_tone(reply: str, sentiment: Sentiment) -> str:
    """Prefix an apology for negative messages or a banner for urgent ones."""
    if sentiment is Sentiment.NEGATIVE:
        return APOLOGY_PREFIX + reply
    if sentiment is Sentiment.URGENT:
        return PRIORITY_PREFIX + reply
    return reply


# ============================================================================
# RESPONSE GENERATOR
# ============================================================================

class ResponseGenerator:
    """
    Intent-driven reply builder.

    Args:
        quotes: Quote formatter exposing rate_reply(currency),
            conversion_reply(amount, currency) and supported_label()
        rng: Random source for greeting selection
    """

    def __init__(self, quotes, rng: Optional[random.Random] = None):
        self.quotes = quotes
        self.rng = rng or random.Random()

        self.handlers: Tuple[Tuple[Intent, Handler], ...] = (
            (Intent.GREETING, self._greeting),
            (Intent.THANKS, lambda analysis, state: THANKS_REPLY),
            (Intent.GOODBYE, lambda analysis, state: GOODBYE_REPLY),
            (Intent.RATE_INQUIRY, self._rate_inquiry),
            (Intent.CALCULATOR, self._calculator),
            (Intent.COMPLIANCE_FIRA, lambda analysis, state: FAQ["fira"]),
            (Intent.COMPLIANCE_RODTEP, lambda analysis, state: FAQ["rodtep"]),
            (Intent.COMPLIANCE_BOE, lambda analysis, state: FAQ["boe"]),
            (Intent.SPEED, lambda analysis, state: FAQ["speed"]),
            (Intent.SECURITY, lambda analysis, state: FAQ["security"]),
            (Intent.LIMITS, lambda analysis, state: FAQ["limit"]),
            (Intent.ONBOARDING, self._onboarding),
            (Intent.SUPPORT, self._support),
            (Intent.TROUBLESHOOT, self._support),
            (Intent.EXPLAIN_CONCEPT, self._explain_concept),
            (Intent.PERSONALITY, lambda analysis, state: PERSONALITY_REPLY),
        )

    def generate(self, analysis: AnalysisResult, state: SessionState) -> str:
        """
        Build the reply for an analyzed message.

        Args:
            analysis: Result of analyzing the message
            state: Session to update with any context or workflow

        Returns:
            Reply text (without tone adjustment)
        """
        for intent, handler in self.handlers:
            if analysis.intent is intent:
                return handler(analysis, state)

        logger.info("🤷 No handler matched, using fallback")
        return FALLBACK_REPLY

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _greeting(self, analysis: AnalysisResult, state: SessionState) -> str:
        return self.rng.choice(GREETINGS)

    def _rate_inquiry(self, analysis: AnalysisResult, state: SessionState) -> str:
        if analysis.currency:
            return self.quotes.rate_reply(analysis.currency)

        state.set_context(ContextTag.AWAITING_CURRENCY_FOR_RATE)
        return ASK_RATE_CURRENCY.format(currencies=self.quotes.supported_label())

    def _calculator(self, analysis: AnalysisResult, state: SessionState) -> str:
        if analysis.amount is not None and analysis.currency:
            return self.quotes.conversion_reply(analysis.amount, analysis.currency)

        # Start slot filling fresh; keep whichever piece this message gave
        state.slots.pop("amount", None)
        state.slots.pop("currency", None)
        if analysis.amount is not None:
            state.slots["amount"] = analysis.amount
        if analysis.currency:
            state.slots["currency"] = analysis.currency

        state.set_context(ContextTag.AWAITING_CALCULATION_DETAILS)
        return ASK_CALCULATION_DETAILS

    def _onboarding(self, analysis: AnalysisResult, state: SessionState) -> str:
        state.start_workflow(WorkflowName.ONBOARDING)
        return ONBOARDING_OFFER

    def _support(self, analysis: AnalysisResult, state: SessionState) -> str:
        if analysis.sentiment in (Sentiment.URGENT, Sentiment.NEGATIVE):
            state.start_workflow(WorkflowName.TICKET)
            return TICKET_OFFER

        lower = analysis.raw_text.lower()
        for triggers, guide in TROUBLESHOOTING_TRIGGERS:
            if any(trigger in lower for trigger in triggers):
                logger.info(f"🛠️  Troubleshooting guide: {guide}")
                return TROUBLESHOOTING[guide]

        return SUPPORT_REPLY

    def _explain_concept(self, analysis: AnalysisResult, state: SessionState) -> str:
        words = analysis.raw_text.split()
        term = words[-1].lower() if words else ""

        definition = lookup_term(term) if term else None
        if definition:
            return definition

        state.set_context(ContextTag.AWAITING_TERM_DEFINITION)
        return ASK_TERM
