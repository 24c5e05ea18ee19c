"""
Unit Tests for the Workflow Engine

Tests the onboarding and priority-ticket state machines.
"""

import pytest
from unittest.mock import Mock

from config.knowledge import (
    WORKFLOW_CANCELLED,
    ONBOARDING_ASK_IEC,
    ONBOARDING_DECLINED,
    ONBOARDING_ASK_PAN,
    ONBOARDING_NO_IEC,
    ONBOARDING_ASK_COMPANY,
    ONBOARDING_INVALID_PAN,
    ONBOARDING_INVALID_GSTIN,
    TICKET_ASK_ISSUE,
    TICKET_DECLINED,
    TICKET_ASK_REFERENCE,
)
from core.state import SessionState, WorkflowName
from core.workflows import WorkflowEngine


@pytest.fixture
def engine():
    """Fixture providing an engine with a fixed ticket number."""
    rng = Mock()
    rng.randint.return_value = 42
    return WorkflowEngine(rng=rng)


@pytest.fixture
def onboarding_state():
    state = SessionState(max_history=10)
    state.start_workflow(WorkflowName.ONBOARDING)
    return state


@pytest.fixture
def ticket_state():
    state = SessionState(max_history=10)
    state.start_workflow(WorkflowName.TICKET)
    return state


class TestOnboarding:
    """Test the onboarding pre-check."""

    def test_full_run(self, engine, onboarding_state):
        """Invalid inputs repeat the step; valid ones advance to completion."""
        inputs = [
            "yes",
            "yes",
            "ABC12345F",
            "ABCDE1234F",
            "Acme Exports",
            "bad",
            "29ABCDE1234F1Z5",
        ]
        steps = []
        replies = []
        for text in inputs:
            replies.append(engine.handle(onboarding_state, text))
            steps.append(onboarding_state.workflow_step)

        assert steps == [1, 2, 2, 3, 4, 4, None]
        assert replies[0] == ONBOARDING_ASK_IEC
        assert replies[1] == ONBOARDING_ASK_PAN
        assert replies[2] == ONBOARDING_INVALID_PAN
        assert replies[3] == ONBOARDING_ASK_COMPANY
        assert "Acme Exports" in replies[4]
        assert replies[5] == ONBOARDING_INVALID_GSTIN
        assert "Pre-Check Complete" in replies[6]
        assert "Company: Acme Exports" in replies[6]
        assert "IEC:" not in replies[6]

        assert onboarding_state.active_workflow is None
        assert onboarding_state.slots == {}

    def test_decline_at_confirmation(self, engine, onboarding_state):
        assert engine.handle(onboarding_state, "no thanks") == ONBOARDING_DECLINED
        assert onboarding_state.in_workflow is False

    def test_no_iec_ends_workflow(self, engine, onboarding_state):
        engine.handle(onboarding_state, "yes")

        assert engine.handle(onboarding_state, "no") == ONBOARDING_NO_IEC
        assert onboarding_state.active_workflow is None

    def test_iec_number_is_accepted_and_reported(self, engine, onboarding_state):
        """Typing the IEC itself counts as a yes and shows up in the summary."""
        engine.handle(onboarding_state, "yes")
        assert engine.handle(onboarding_state, "0123456789") == ONBOARDING_ASK_PAN

        engine.handle(onboarding_state, "abcde1234f")
        engine.handle(onboarding_state, "Acme Exports")
        reply = engine.handle(onboarding_state, "29ABCDE1234F1Z5")

        assert "IEC: 0123456789" in reply

    def test_input_is_trimmed(self, engine, onboarding_state):
        engine.handle(onboarding_state, "  yes  ")
        engine.handle(onboarding_state, "yes")
        engine.handle(onboarding_state, " ABCDE1234F ")

        assert onboarding_state.workflow_step == 3
        assert onboarding_state.slots["pan"] == "ABCDE1234F"


class TestCancel:
    """Test workflow cancellation."""

    @pytest.mark.parametrize("command", ["cancel", "stop", "exit", "CANCEL"])
    def test_cancel_at_any_step(self, engine, onboarding_state, command):
        engine.handle(onboarding_state, "yes")
        engine.handle(onboarding_state, "yes")

        assert engine.handle(onboarding_state, command) == WORKFLOW_CANCELLED
        assert onboarding_state.active_workflow is None
        assert onboarding_state.workflow_step is None
        assert onboarding_state.context_tag is None

    def test_cancel_ticket(self, engine, ticket_state):
        assert engine.handle(ticket_state, "stop") == WORKFLOW_CANCELLED
        assert ticket_state.in_workflow is False


class TestTicket:
    """Test the priority ticket workflow."""

    def test_ticket_created(self, engine, ticket_state):
        assert engine.handle(ticket_state, "yes") == TICKET_ASK_ISSUE
        assert engine.handle(ticket_state, "Payout stuck for 3 days") == TICKET_ASK_REFERENCE

        reply = engine.handle(ticket_state, "NA")

        assert "TKT-0042" in reply
        assert "Issue: Payout stuck for 3 days" in reply
        assert "Ref: NA" in reply
        assert ticket_state.active_workflow is None

    def test_ticket_declined(self, engine, ticket_state):
        assert engine.handle(ticket_state, "nah") == TICKET_DECLINED
        assert ticket_state.active_workflow is None

    def test_ticket_id_format(self):
        rng = Mock()
        rng.randint.return_value = 7
        engine = WorkflowEngine(rng=rng)

        assert engine.new_ticket_id() == "TKT-0007"
        rng.randint.assert_called_once_with(0, 9999)
