"""
Dialogue State

Per-conversation record of everything the assistant remembers between
turns: the pending context, the active workflow and its step, collected
slot values, the latest sentiment and a bounded message history.

One SessionState belongs to one conversation. It is created by the chat
service and passed explicitly into every component that reads or
changes it.
"""

import logging
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Deque, Dict, List, Optional

from config import MAX_HISTORY_SIZE

logger = logging.getLogger(__name__)


# ============================================================================
# ENUMERATIONS
# ============================================================================

class Sentiment(Enum):
    """Coarse emotional tone of a message."""
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    URGENT = "urgent"


class ContextTag(Enum):
    """Piece of information the assistant is waiting for."""
    AWAITING_CURRENCY_FOR_RATE = "awaiting_currency_for_rate"
    AWAITING_CALCULATION_DETAILS = "awaiting_calculation_details"
    AWAITING_TERM_DEFINITION = "awaiting_term_definition"


class WorkflowName(Enum):
    """Multi-step guided procedures."""
    ONBOARDING = "onboarding"
    TICKET = "ticket"


# ============================================================================
# DATA STRUCTURES
# ============================================================================

@dataclass(frozen=True)
class HistoryEntry:
    """A message received from the user."""
    timestamp: float
    text: str


@dataclass
class SessionState:
    """
    Mutable state of one conversation.

    Attributes:
        context_tag: What the next message is expected to supply, if anything
        active_workflow: Workflow in progress, if any
        workflow_step: Current step index; None while no workflow is active
        slots: Values collected across turns (amount, currency, company, ...)
        sentiment: Sentiment of the most recently analyzed message
        history: Most recent user messages, oldest evicted first
        session_start: Unix timestamp of session creation
    """
    max_history: int = MAX_HISTORY_SIZE
    context_tag: Optional[ContextTag] = None
    active_workflow: Optional[WorkflowName] = None
    workflow_step: Optional[int] = None
    slots: Dict[str, Any] = field(default_factory=dict)
    sentiment: Sentiment = Sentiment.NEUTRAL
    history: Deque[HistoryEntry] = field(init=False)
    session_start: float = field(default_factory=time.time)

    def __post_init__(self):
        if self.max_history < 1:
            raise ValueError("max_history must be at least 1")
        self.history = deque(maxlen=self.max_history)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def record(self, text: str) -> None:
        """Append a message to the history, evicting the oldest when full."""
        self.history.append(HistoryEntry(timestamp=time.time(), text=text))

    def recent_messages(self) -> List[str]:
        return [entry.text for entry in self.history]

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    def set_context(self, tag: ContextTag) -> None:
        self.context_tag = tag

    def clear_context(self) -> None:
        self.context_tag = None

    # ------------------------------------------------------------------
    # Workflows
    # ------------------------------------------------------------------

    @property
    def in_workflow(self) -> bool:
        return self.active_workflow is not None

    def start_workflow(self, name: WorkflowName) -> None:
        """Begin a workflow at its confirmation step with empty slots."""
        self.active_workflow = name
        self.workflow_step = 0
        self.context_tag = None
        self.slots.clear()
        logger.info(f"🧩 Workflow started: {name.value}")

    def advance_workflow(self) -> None:
        self.workflow_step += 1

    def end_workflow(self) -> None:
        """Clear the workflow, its step, any context and collected slots."""
        if self.active_workflow is not None:
            logger.info(f"🏁 Workflow ended: {self.active_workflow.value}")
        self.active_workflow = None
        self.workflow_step = None
        self.context_tag = None
        self.slots.clear()

    def summary(self) -> Dict[str, Any]:
        """Diagnostic snapshot of the session."""
        return {
            "context": self.context_tag.value if self.context_tag else None,
            "workflow": self.active_workflow.value if self.active_workflow else None,
            "step": self.workflow_step,
            "sentiment": self.sentiment.value,
            "slots": dict(self.slots),
            "history_size": len(self.history),
            "session_age": time.time() - self.session_start,
        }
