"""
Utility Clients Module

This module contains low-level clients for external data. These are
pure utilities that don't contain conversation logic.

Clients:
- Rate Client: INR rate board, wholesale vs bank quote pricing, INR formatting
"""

from .rate_client import (
    RateBoard,
    Quote,
    Direction,
    format_currency,
)

__all__ = [
    "RateBoard",
    "Quote",
    "Direction",
    "format_currency",
]
