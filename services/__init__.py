"""
Business Logic Services Module

This module contains the conversation services for the Atlas assistant:
- Chat service: Session loop coordinating analysis, context, responses
  and workflows for one conversation
- Quote service: Rate and conversion replies built from rate board quotes
"""

from .chat_service import (
    ChatService,
    ChatResponse,
)

from .quote_service import QuoteService

__all__ = [
    # Chat Service
    "ChatService",
    "ChatResponse",

    # Quote Service
    "QuoteService",
]
