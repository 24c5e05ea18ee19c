"""
Configuration module for the Atlas trade assistant.

This module provides centralized configuration management including:
- Application settings (identity, limits, pricing, fallback rates)
- Lexicon tables used for intent and sentiment scoring
- Knowledge base text and reply templates

All configurable values should be imported from this module to ensure
consistency across the application.
"""

from .settings import (
    # Paths
    BASE_DIR,

    # Identity
    BOT_NAME,
    COMPANY_NAME,
    BOT_VERSION,
    SUPPORT_EMAIL,

    # Session
    MAX_HISTORY_SIZE,

    # Pricing
    BANK_SPREAD,
    BANK_FIXED_FEE,
    WHOLESALE_SPREAD,
    WHOLESALE_FIXED_FEE,
    FALLBACK_RATES,
    RATE_QUOTE_AMOUNT,

    # UI / Debug
    APP_TITLE,
    APP_SUBTITLE,
    PAGE_ICON,
    DEBUG,
    LOG_LEVEL,
)

from .lexicon import (
    IntentSpec,
    INTENT_SPECS,
    SUPPORT_OVERRIDE_WORDS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    URGENT_WORDS,
    URGENCY_MARKERS,
    CURRENCY_ALIASES,
)

__all__ = [
    # Settings
    "BASE_DIR",
    "BOT_NAME",
    "COMPANY_NAME",
    "BOT_VERSION",
    "SUPPORT_EMAIL",
    "MAX_HISTORY_SIZE",
    "BANK_SPREAD",
    "BANK_FIXED_FEE",
    "WHOLESALE_SPREAD",
    "WHOLESALE_FIXED_FEE",
    "FALLBACK_RATES",
    "RATE_QUOTE_AMOUNT",
    "APP_TITLE",
    "APP_SUBTITLE",
    "PAGE_ICON",
    "DEBUG",
    "LOG_LEVEL",

    # Lexicon
    "IntentSpec",
    "INTENT_SPECS",
    "SUPPORT_OVERRIDE_WORDS",
    "NEGATIVE_WORDS",
    "POSITIVE_WORDS",
    "URGENT_WORDS",
    "URGENCY_MARKERS",
    "CURRENCY_ALIASES",
]
