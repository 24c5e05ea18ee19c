"""
Workflow Engine

Runs the guided multi-turn procedures as small state machines. Each
workflow is a sequence of steps indexed by the session's step counter;
a step bundles the validator for the expected input with what happens
when the input is accepted or rejected.

Step 0 of every workflow is a yes/no confirmation gate. Typing "cancel",
"stop" or "exit" at any step abandons the workflow.

Workflows:
- onboarding: IEC check, PAN, company name, GSTIN pre-check
- ticket: issue description and transaction reference for a priority ticket
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from config.knowledge import (
    WORKFLOW_CANCELLED,
    ONBOARDING_ASK_IEC,
    ONBOARDING_DECLINED,
    ONBOARDING_ASK_PAN,
    ONBOARDING_NO_IEC,
    ONBOARDING_ASK_COMPANY,
    ONBOARDING_INVALID_PAN,
    ONBOARDING_ASK_GSTIN,
    ONBOARDING_INVALID_GSTIN,
    ONBOARDING_COMPLETE,
    TICKET_ASK_ISSUE,
    TICKET_DECLINED,
    TICKET_ASK_REFERENCE,
    TICKET_CREATED,
)
from utils.validators import (
    is_affirmative,
    is_cancel_command,
    is_valid_gstin,
    is_valid_iec,
    is_valid_pan,
)
from .state import SessionState, WorkflowName

logger = logging.getLogger(__name__)


# ============================================================================
# DATA STRUCTURES
# ============================================================================

class Transition(Enum):
    """What happens to the workflow after a step."""
    ADVANCE = "advance"  # move to the next step
    STAY = "stay"        # repeat the current step
    END = "end"          # clear the workflow


@dataclass(frozen=True)
class StepOutcome:
    transition: Transition
    reply: str


StepAction = Callable[[SessionState, str], StepOutcome]


def _always(text: str) -> bool:
    return True


def _reply(transition: Transition, reply: str) -> StepAction:
    """Action that ignores its input and returns a fixed outcome."""
    return lambda state, text: StepOutcome(transition, reply)


@dataclass(frozen=True)
class WorkflowStep:
    """
    One step of a workflow.

    Attributes:
        name: Short label used in logs
        validate: Predicate over the trimmed user input
        on_accept: Action when validate() passes
        on_reject: Action when validate() fails (unused for free-text steps)
    """
    name: str
    validate: Callable[[str], bool]
    on_accept: StepAction
    on_reject: Optional[StepAction] = None


# ============================================================================
# ONBOARDING
# ============================================================================

def _has_iec(text: str) -> bool:
    return is_affirmative(text) or is_valid_iec(text)


def _store_iec(state: SessionState, text: str) -> StepOutcome:
    if is_valid_iec(text):
        state.slots["iec"] = text
    return StepOutcome(Transition.ADVANCE, ONBOARDING_ASK_PAN)


def _store_pan(state: SessionState, text: str) -> StepOutcome:
    state.slots["pan"] = text.upper()
    return StepOutcome(Transition.ADVANCE, ONBOARDING_ASK_COMPANY)


def _store_company(state: SessionState, text: str) -> StepOutcome:
    state.slots["company_name"] = text
    return StepOutcome(Transition.ADVANCE, ONBOARDING_ASK_GSTIN.format(company=text))


def _complete_onboarding(state: SessionState, text: str) -> StepOutcome:
    iec = state.slots.get("iec")
    reply = ONBOARDING_COMPLETE.format(
        company=state.slots.get("company_name", ""),
        iec_line=f"IEC: {iec}\n" if iec else "",
    )
    logger.info(f"🎉 Onboarding pre-check complete for {state.slots.get('company_name')}")
    return StepOutcome(Transition.END, reply)


ONBOARDING_STEPS: Tuple[WorkflowStep, ...] = (
    WorkflowStep(
        "confirm",
        is_affirmative,
        _reply(Transition.ADVANCE, ONBOARDING_ASK_IEC),
        _reply(Transition.END, ONBOARDING_DECLINED),
    ),
    WorkflowStep(
        "iec",
        _has_iec,
        _store_iec,
        _reply(Transition.END, ONBOARDING_NO_IEC),
    ),
    WorkflowStep(
        "pan",
        is_valid_pan,
        _store_pan,
        _reply(Transition.STAY, ONBOARDING_INVALID_PAN),
    ),
    WorkflowStep(
        "company_name",
        _always,
        _store_company,
    ),
    WorkflowStep(
        "gstin",
        is_valid_gstin,
        _complete_onboarding,
        _reply(Transition.STAY, ONBOARDING_INVALID_GSTIN),
    ),
)


# ============================================================================
# WORKFLOW ENGINE
# ============================================================================

class WorkflowEngine:
    """
    Drives the active workflow of a session one message at a time.

    Args:
        rng: Random source for ticket identifiers
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.workflows: Dict[WorkflowName, Tuple[WorkflowStep, ...]] = {
            WorkflowName.ONBOARDING: ONBOARDING_STEPS,
            WorkflowName.TICKET: self._ticket_steps(),
        }

    def handle(self, state: SessionState, text: str) -> str:
        """
        Apply a message to the session's active workflow.

        Args:
            state: Session with an active workflow
            text: The user's message

        Returns:
            Reply text for this step
        """
        text = text.strip()

        if is_cancel_command(text):
            logger.info(f"🛑 Workflow cancelled: {state.active_workflow.value}")
            state.end_workflow()
            return WORKFLOW_CANCELLED

        steps = self.workflows[state.active_workflow]
        step = steps[state.workflow_step]

        if step.validate(text):
            outcome = step.on_accept(state, text)
        else:
            outcome = step.on_reject(state, text)

        logger.info(
            f"🧩 {state.active_workflow.value}[{state.workflow_step}:{step.name}] "
            f"-> {outcome.transition.value}"
        )

        if outcome.transition is Transition.ADVANCE:
            state.advance_workflow()
        elif outcome.transition is Transition.END:
            state.end_workflow()

        return outcome.reply

    # ------------------------------------------------------------------
    # Ticket
    # ------------------------------------------------------------------

    def new_ticket_id(self) -> str:
        return f"TKT-{self.rng.randint(0, 9999):04d}"

    def _ticket_steps(self) -> Tuple[WorkflowStep, ...]:
        def store_issue(state: SessionState, text: str) -> StepOutcome:
            state.slots["ticket_issue"] = text
            return StepOutcome(Transition.ADVANCE, TICKET_ASK_REFERENCE)

        def create_ticket(state: SessionState, text: str) -> StepOutcome:
            ticket_id = self.new_ticket_id()
            logger.info(f"🎫 Ticket created: {ticket_id}")
            return StepOutcome(
                Transition.END,
                TICKET_CREATED.format(
                    ticket_id=ticket_id,
                    issue=state.slots.get("ticket_issue", ""),
                    reference=text,
                ),
            )

        return (
            WorkflowStep(
                "confirm",
                is_affirmative,
                _reply(Transition.ADVANCE, TICKET_ASK_ISSUE),
                _reply(Transition.END, TICKET_DECLINED),
            ),
            WorkflowStep("issue", _always, store_issue),
            WorkflowStep("reference", _always, create_ticket),
        )
