"""
Chat Service - Session Loop

Orchestrates one conversation turn:
1. Records the message in the session history
2. Routes to the workflow engine when a guided workflow is active
3. Otherwise analyzes the message, resolves any pending context and
   falls back to intent-driven response generation
4. Applies the sentiment-based tone adjustment once to the final reply

Each ChatService owns exactly one SessionState. This is the main entry
point for the Streamlit UI.
"""

import logging
import random
import uuid
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Optional

from clients.rate_client import RateBoard
from config import MAX_HISTORY_SIZE
from config.knowledge import UNEXPECTED_ERROR_REPLY
from core import (
    analyze,
    adjust_tone,
    AnalysisResult,
    ContextResolver,
    Intent,
    ResponseGenerator,
    Sentiment,
    SessionState,
    WorkflowEngine,
)
from core.state import HistoryEntry
from .quote_service import QuoteService

logger = logging.getLogger(__name__)


# ============================================================================
# DATA STRUCTURES
# ============================================================================

@dataclass
class ChatResponse:
    """
    Response from the chat service.

    Attributes:
        message: The reply text to display to the user
        success: Whether the turn was handled without an internal error
        metadata: Intent, sentiment and session state after the turn
        suggestions: Follow-up prompts the user could send next
    """
    message: str
    success: bool
    metadata: Dict[str, Any] = field(default_factory=dict)
    suggestions: Optional[List[str]] = None


# Follow-up prompts offered after a reply, keyed by intent
SUGGESTIONS: Dict[Intent, List[str]] = {
    Intent.GREETING: ["Current USD rate", "Convert 5000 SGD", "What is RoDTEP?"],
    Intent.RATE_INQUIRY: ["Convert 10k USD", "How fast is settlement?", "Is my money safe?"],
    Intent.CALCULATOR: ["Current GBP rate", "Open an account", "What are the limits?"],
    Intent.COMPLIANCE_FIRA: ["What is EDPMS?", "What is RoDTEP?", "FIRA not received, still missing"],
    Intent.COMPLIANCE_RODTEP: ["Define HS_Code", "Download FIRA", "Sign up"],
    Intent.COMPLIANCE_BOE: ["What is AD_Code?", "Customs clearance time", "Help with login"],
    Intent.EXPLAIN_CONCEPT: ["What is FEMA?", "What is EEFC?", "What is SWIFT?"],
    Intent.UNKNOWN: ["Current USD rate", "What is RoDTEP?", "Convert 5000 SGD"],
}


# ============================================================================
# CHAT SERVICE
# ============================================================================

class ChatService:
    """
    Session loop for one conversation.

    Wires the analyzer, context resolver, response generator and workflow
    engine around a single SessionState.
    """

    def __init__(
        self,
        rate_board: Optional[RateBoard] = None,
        rng: Optional[random.Random] = None,
        max_history: int = MAX_HISTORY_SIZE,
        session_id: Optional[str] = None,
    ):
        """
        Initialize the chat service.

        Args:
            rate_board: Quote source; defaults to a board seeded with the
                configured fallback rates
            rng: Random source for greetings and ticket identifiers
            max_history: Number of user messages kept in the history
            session_id: Identifier used in logs and response metadata
        """
        self.session_id = session_id or str(uuid.uuid4())
        self.rng = rng or random.Random()
        self.state = SessionState(max_history=max_history)

        if rate_board is None:
            rate_board = RateBoard.from_fallback()
        self.quotes = QuoteService(rate_board)

        self.resolver = ContextResolver(self.quotes)
        self.responder = ResponseGenerator(self.quotes, rng=self.rng)
        self.workflows = WorkflowEngine(rng=self.rng)

        logger.info(f"✅ ChatService initialized (session: {self.session_id})")

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def sentiment(self) -> Sentiment:
        return self.state.sentiment

    @property
    def history(self) -> Deque[HistoryEntry]:
        return self.state.history

    # ------------------------------------------------------------------
    # Turn processing
    # ------------------------------------------------------------------

    def process(self, message: Optional[str]) -> str:
        """
        Process a user message and return the reply text.

        Empty input returns an empty string and leaves the session untouched.
        """
        return self.process_message(message).message

    def process_message(self, message: Optional[str]) -> ChatResponse:
        """
        Process a user message and generate a response.

        Args:
            message: The user's input text

        Returns:
            ChatResponse with the reply and metadata
        """
        if not message or not message.strip():
            return ChatResponse(message="", success=True, metadata=self._metadata(None))

        text = message.strip()
        self.state.record(text)
        logger.info(
            f"💬 [Analytics] Processing (session: {self.session_id}): \"{text[:50]}\" "
            f"| Sentiment: {self.state.sentiment.value}"
        )

        try:
            if self.state.in_workflow:
                # Step prompts go out verbatim; tone applies to context and intent replies only
                reply = self.workflows.handle(self.state, text)
                return ChatResponse(message=reply, success=True, metadata=self._metadata(None))

            analysis = analyze(text)
            self.state.sentiment = analysis.sentiment

            reply = None
            if self.state.context_tag is not None:
                reply = self.resolver.resolve(analysis, self.state)
            if reply is None:
                reply = self.responder.generate(analysis, self.state)

            return ChatResponse(
                message=adjust_tone(reply, analysis.sentiment),
                success=True,
                metadata=self._metadata(analysis),
                suggestions=self._suggestions(analysis),
            )

        except Exception as e:
            logger.error(f"❌ ChatService error: {e}", exc_info=True)
            return ChatResponse(
                message=UNEXPECTED_ERROR_REPLY,
                success=False,
                metadata={**self._metadata(None), "error": str(e)},
            )

    def _metadata(self, analysis: Optional[AnalysisResult]) -> Dict[str, Any]:
        metadata = {"session_id": self.session_id, **self.state.summary()}
        if analysis is not None:
            metadata["intent"] = analysis.intent.value
            metadata["score"] = analysis.score
        return metadata

    def _suggestions(self, analysis: AnalysisResult) -> Optional[List[str]]:
        # No suggestions while waiting for an answer or inside a workflow
        if self.state.context_tag is not None or self.state.in_workflow:
            return None
        return SUGGESTIONS.get(analysis.intent)
