"""
Utilities package for shared helper functions.
"""

from utils.currency import normalize_currency, format_amount
from utils.validators import (
    is_valid_pan,
    is_valid_gstin,
    is_valid_iec,
    is_valid_email,
    is_affirmative,
    is_cancel_command,
)

__all__ = [
    'normalize_currency',
    'format_amount',
    'is_valid_pan',
    'is_valid_gstin',
    'is_valid_iec',
    'is_valid_email',
    'is_affirmative',
    'is_cancel_command',
]
