"""
Core Conversation Logic Module

This module contains the brain of the Atlas trade assistant:
- Message analysis (analyzer): Intent, entities and sentiment
- Dialogue state: Context tags, workflows, slots and history
- Context resolution: Follow-up answers to the assistant's questions
- Response generation: Intent-driven replies and tone adjustment
- Workflow engine: Guided onboarding and support-ticket procedures
"""

from .analyzer import (
    analyze,
    Intent,
    AnalysisResult,
)

from .state import (
    SessionState,
    Sentiment,
    ContextTag,
    WorkflowName,
)

from .context_resolver import ContextResolver

from .responder import (
    ResponseGenerator,
    adjust_tone,
    lookup_term,
)

from .workflows import (
    WorkflowEngine,
    WorkflowStep,
    Transition,
)

__all__ = [
    # Analyzer
    "analyze",
    "Intent",
    "AnalysisResult",

    # State
    "SessionState",
    "Sentiment",
    "ContextTag",
    "WorkflowName",

    # Context
    "ContextResolver",

    # Responses
    "ResponseGenerator",
    "adjust_tone",
    "lookup_term",

    # Workflows
    "WorkflowEngine",
    "WorkflowStep",
    "Transition",
]
