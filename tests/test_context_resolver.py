"""
Unit Tests for the Context Resolver

Tests follow-up handling for each pending context tag.
"""

import pytest
from unittest.mock import Mock

from config.knowledge import RATE_LATER_REPLY, STILL_NEED_DETAILS, TERM_NOT_FOUND
from core.analyzer import analyze
from core.context_resolver import ContextResolver
from core.state import ContextTag, SessionState


@pytest.fixture
def quotes():
    """Fixture providing a stand-in quote formatter."""
    quotes = Mock()
    quotes.rate_reply.side_effect = lambda currency: f"RATE {currency}"
    quotes.conversion_reply.side_effect = lambda amount, currency: f"CONVERT {amount} {currency}"
    quotes.supported_label.return_value = "USD, SGD, and GBP"
    return quotes


@pytest.fixture
def resolver(quotes):
    return ContextResolver(quotes)


@pytest.fixture
def state():
    return SessionState(max_history=10)


def _resolve(resolver, state, text):
    return resolver.resolve(analyze(text), state)


class TestCurrencyForRate:
    """Test the awaiting_currency_for_rate context."""

    def test_currency_resolves(self, resolver, state, quotes):
        state.set_context(ContextTag.AWAITING_CURRENCY_FOR_RATE)

        reply = _resolve(resolver, state, "USD")

        assert reply == "RATE USD"
        quotes.rate_reply.assert_called_once_with("USD")
        assert state.context_tag is None

    def test_currency_name_resolves(self, resolver, state, quotes):
        state.set_context(ContextTag.AWAITING_CURRENCY_FOR_RATE)

        assert _resolve(resolver, state, "pounds please") == "RATE GBP"

    def test_goodbye_closes(self, resolver, state, quotes):
        state.set_context(ContextTag.AWAITING_CURRENCY_FOR_RATE)

        assert _resolve(resolver, state, "bye") == RATE_LATER_REPLY
        assert state.context_tag is None
        quotes.rate_reply.assert_not_called()

    def test_unknown_currency_reprompts_once(self, resolver, state):
        """A failed retry names the supported currencies and drops the context."""
        state.set_context(ContextTag.AWAITING_CURRENCY_FOR_RATE)

        reply = _resolve(resolver, state, "banana")

        assert "didn't catch that currency" in reply
        assert "USD, SGD, and GBP" in reply
        assert state.context_tag is None


class TestCalculationDetails:
    """Test the awaiting_calculation_details slot-filling loop."""

    def test_amount_then_currency(self, resolver, state, quotes):
        state.set_context(ContextTag.AWAITING_CALCULATION_DETAILS)

        reply = _resolve(resolver, state, "5000")

        assert "5000" in reply
        assert state.slots["amount"] == 5000
        assert state.context_tag is ContextTag.AWAITING_CALCULATION_DETAILS

        reply = _resolve(resolver, state, "usd")

        assert reply == "CONVERT 5000.0 USD"
        assert "amount" not in state.slots
        assert state.context_tag is None

    def test_currency_then_amount(self, resolver, state, quotes):
        state.set_context(ContextTag.AWAITING_CALCULATION_DETAILS)

        reply = _resolve(resolver, state, "GBP")

        assert "GBP" in reply
        assert state.slots["currency"] == "GBP"
        assert state.context_tag is ContextTag.AWAITING_CALCULATION_DETAILS

        assert _resolve(resolver, state, "10k") == "CONVERT 10000.0 GBP"
        assert state.slots == {}

    def test_both_in_one_message(self, resolver, state, quotes):
        state.set_context(ContextTag.AWAITING_CALCULATION_DETAILS)

        assert _resolve(resolver, state, "1,200 sgd") == "CONVERT 1200.0 SGD"

    def test_uses_stored_slot(self, resolver, state, quotes):
        state.slots["currency"] = "SGD"
        state.set_context(ContextTag.AWAITING_CALCULATION_DETAILS)

        assert _resolve(resolver, state, "750") == "CONVERT 750.0 SGD"

    def test_neither_reprompts_without_slots(self, resolver, state, quotes):
        state.set_context(ContextTag.AWAITING_CALCULATION_DETAILS)

        reply = _resolve(resolver, state, "not sure")

        assert reply == STILL_NEED_DETAILS
        assert state.slots == {}
        quotes.conversion_reply.assert_not_called()


class TestTermDefinition:
    """Test the awaiting_term_definition context."""

    @pytest.mark.parametrize(
        "text,term",
        [("FEMA", "**FEMA**"), ("HS Code", "**HS_CODE**"), ("pa-cb?", "**PA_CB**")],
    )
    def test_term_found(self, resolver, state, text, term):
        state.set_context(ContextTag.AWAITING_TERM_DEFINITION)

        reply = _resolve(resolver, state, text)

        assert term in reply
        assert state.context_tag is None

    def test_term_not_found(self, resolver, state):
        state.set_context(ContextTag.AWAITING_TERM_DEFINITION)

        assert _resolve(resolver, state, "blockchain") == TERM_NOT_FOUND
        assert state.context_tag is None


def test_no_context_falls_through(resolver, state):
    """Without a pending tag the resolver defers to response generation."""
    assert _resolve(resolver, state, "hello") is None
