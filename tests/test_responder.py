"""
Unit Tests for the Response Generator

Tests intent dispatch, session side effects and tone adjustment.
"""

import random

import pytest
from unittest.mock import Mock

from config.knowledge import (
    FAQ,
    GREETINGS,
    THANKS_REPLY,
    GOODBYE_REPLY,
    PERSONALITY_REPLY,
    FALLBACK_REPLY,
    SUPPORT_REPLY,
    ASK_CALCULATION_DETAILS,
    ASK_TERM,
    ONBOARDING_OFFER,
    TICKET_OFFER,
    TROUBLESHOOTING,
    APOLOGY_PREFIX,
    PRIORITY_PREFIX,
)
from core.analyzer import analyze
from core.responder import ResponseGenerator, adjust_tone, lookup_term
from core.state import ContextTag, Sentiment, SessionState, WorkflowName


@pytest.fixture
def quotes():
    """Fixture providing a stand-in quote formatter."""
    quotes = Mock()
    quotes.rate_reply.side_effect = lambda currency: f"RATE {currency}"
    quotes.conversion_reply.side_effect = lambda amount, currency: f"CONVERT {amount} {currency}"
    quotes.supported_label.return_value = "USD, SGD, and GBP"
    return quotes


@pytest.fixture
def responder(quotes):
    return ResponseGenerator(quotes, rng=random.Random(3))


@pytest.fixture
def state():
    return SessionState(max_history=10)


def _reply(responder, state, text):
    return responder.generate(analyze(text), state)


class TestSocialIntents:
    """Test fixed conversational replies."""

    def test_greeting(self, responder, state):
        assert _reply(responder, state, "hello") in GREETINGS

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("thank you", THANKS_REPLY),
            ("bye", GOODBYE_REPLY),
            ("who are you", PERSONALITY_REPLY),
            ("xyzzy", FALLBACK_REPLY),
        ],
    )
    def test_fixed_replies(self, responder, state, text, expected):
        assert _reply(responder, state, text) == expected
        assert state.context_tag is None


class TestRates:
    """Test rate and calculator intents."""

    def test_rate_with_currency(self, responder, state, quotes):
        assert _reply(responder, state, "current usd rate") == "RATE USD"
        assert state.context_tag is None

    def test_rate_without_currency_asks(self, responder, state):
        reply = _reply(responder, state, "what's the rate")

        assert "USD, SGD, and GBP" in reply
        assert state.context_tag is ContextTag.AWAITING_CURRENCY_FOR_RATE

    def test_calculator_complete(self, responder, state):
        assert _reply(responder, state, "convert 5000 usd") == "CONVERT 5000.0 USD"
        assert state.context_tag is None

    def test_calculator_partial_stores_slot(self, responder, state):
        assert _reply(responder, state, "convert 5000") == ASK_CALCULATION_DETAILS
        assert state.slots == {"amount": 5000.0}
        assert state.context_tag is ContextTag.AWAITING_CALCULATION_DETAILS

    def test_calculator_drops_stale_slots(self, responder, state):
        state.slots.update({"amount": 1.0, "currency": "EUR"})

        _reply(responder, state, "calculate in gbp")

        assert state.slots == {"currency": "GBP"}


class TestKnowledge:
    """Test FAQ answers and dictionary lookups."""

    @pytest.mark.parametrize(
        "text,key",
        [
            ("bill of entry", "boe"),
            ("how long does settlement take", "speed"),
            ("is my money safe", "security"),
            ("what is the limit", "limit"),
            ("what is rodtep", "rodtep"),
            ("download fira", "fira"),
        ],
    )
    def test_faq(self, responder, state, text, key):
        assert _reply(responder, state, text) == FAQ[key]

    def test_explain_known_term(self, responder, state):
        reply = _reply(responder, state, "what is fema")

        assert "**FEMA**" in reply
        assert state.context_tag is None

    def test_explain_unknown_term_asks(self, responder, state):
        assert _reply(responder, state, "define vostro please") == ASK_TERM
        assert state.context_tag is ContextTag.AWAITING_TERM_DEFINITION

    def test_lookup_term_normalizes(self):
        assert "**HS_CODE**" in lookup_term("hs code")
        assert lookup_term("unknown") is None


class TestWorkflowsAndSupport:
    """Test intents that start workflows or route support requests."""

    def test_onboarding_starts_workflow(self, responder, state):
        assert _reply(responder, state, "sign up") == ONBOARDING_OFFER
        assert state.active_workflow is WorkflowName.ONBOARDING
        assert state.workflow_step == 0

    def test_urgent_help_offers_ticket(self, responder, state):
        assert _reply(responder, state, "I need help urgently") == TICKET_OFFER
        assert state.active_workflow is WorkflowName.TICKET

    def test_negative_problem_offers_ticket(self, responder, state):
        assert _reply(responder, state, "my payment failed") == TICKET_OFFER
        assert state.active_workflow is WorkflowName.TICKET

    @pytest.mark.parametrize(
        "text,guide",
        [
            ("help with login", "login_issue"),
            ("my document was rejected", "payment_failed"),
            ("document upload issue", "doc_rejected"),
        ],
    )
    def test_troubleshooting_guides(self, responder, state, text, guide):
        assert _reply(responder, state, text) == TROUBLESHOOTING[guide]
        assert state.in_workflow is False

    def test_general_support(self, responder, state):
        assert _reply(responder, state, "I want to contact a human") == SUPPORT_REPLY


class TestAdjustTone:
    """Test sentiment-based reply prefixes."""

    def test_negative(self):
        assert adjust_tone("Reply", Sentiment.NEGATIVE) == APOLOGY_PREFIX + "Reply"

    def test_urgent(self):
        assert adjust_tone("Reply", Sentiment.URGENT) == PRIORITY_PREFIX + "Reply"

    @pytest.mark.parametrize("sentiment", [Sentiment.NEUTRAL, Sentiment.POSITIVE])
    def test_unchanged(self, sentiment):
        assert adjust_tone("Reply", sentiment) == "Reply"
