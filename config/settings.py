"""
Application settings and configuration values.

This module centralizes all configuration values including:
- Assistant identity and support contacts
- Session limits
- Pricing parameters used for rate comparisons
- Fallback market rates
- UI and debug settings

Environment variables are loaded via python-dotenv.
"""

import os
from pathlib import Path
from typing import Dict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# ============================================================================
# PATHS
# ============================================================================

BASE_DIR = Path(__file__).parent.parent

# ============================================================================
# ASSISTANT IDENTITY
# ============================================================================

BOT_NAME = os.getenv("BOT_NAME", "Atlas")
COMPANY_NAME = os.getenv("COMPANY_NAME", "SettleX")
BOT_VERSION = "4.0.0-Enterprise"
SUPPORT_EMAIL = os.getenv("SUPPORT_EMAIL", "priority.desk@settlex.com")

# ============================================================================
# SESSION SETTINGS
# ============================================================================

# Oldest messages are evicted once the history reaches this size
MAX_HISTORY_SIZE = int(os.getenv("MAX_HISTORY_SIZE", "50"))

if MAX_HISTORY_SIZE < 1:
    raise ValueError("MAX_HISTORY_SIZE must be at least 1")

# ============================================================================
# PRICING MODEL
# ============================================================================

# Retail bank: ~2.5% spread + ₹2,500 SWIFT fee
BANK_SPREAD = float(os.getenv("BANK_SPREAD", "0.025"))
BANK_FIXED_FEE = float(os.getenv("BANK_FIXED_FEE", "2500"))

# Wholesale: 0.20% spread, no fixed fee
WHOLESALE_SPREAD = float(os.getenv("WHOLESALE_SPREAD", "0.002"))
WHOLESALE_FIXED_FEE = float(os.getenv("WHOLESALE_FIXED_FEE", "0"))

# Recent INR averages, used when no live feed has been loaded
FALLBACK_RATES: Dict[str, float] = {
    "USD": 83.50,
    "SGD": 62.40,
    "GBP": 106.20,
    "EUR": 90.50,
    "AED": 22.74,
    "VND": 0.0034,
}

# Nominal amount used when only the per-unit rate is wanted
RATE_QUOTE_AMOUNT = 1000

# ============================================================================
# UI SETTINGS
# ============================================================================

APP_TITLE = f"{BOT_NAME} · {COMPANY_NAME} Trade Assistant"
APP_SUBTITLE = "Live FX rates, compliance answers and guided onboarding"
PAGE_ICON = "🧭"

# ============================================================================
# DEVELOPMENT / DEBUG SETTINGS
# ============================================================================

DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Print configuration summary on import (only in debug mode)
if DEBUG:
    print("\n" + "="*60)
    print(f"🔧 {BOT_NAME} Configuration Loaded")
    print("="*60)
    print(f"Version: {BOT_VERSION}")
    print(f"Max History: {MAX_HISTORY_SIZE}")
    print(f"Fallback Rates: {', '.join(FALLBACK_RATES)}")
    print(f"Log Level: {LOG_LEVEL}")
    print("="*60 + "\n")
