"""
Input validators for workflow steps.

All validators are pure boolean predicates over trimmed user input and
accept upper or lower case.
"""

import re

PAN_REGEX = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]", re.IGNORECASE)

# 2-digit state code, PAN body, entity digit, literal Z, checksum
GSTIN_REGEX = re.compile(r"\d{2}[A-Z]{5}\d{4}[A-Z][A-Z\d]Z[A-Z\d]", re.IGNORECASE)

IEC_REGEX = re.compile(r"\d{10}")

EMAIL_REGEX = re.compile(r"\S+@\S+\.\S+")

AFFIRMATIVE_REPLIES = {"y", "yeah", "yep", "sure", "ok", "okay"}

CANCEL_COMMANDS = {"cancel", "stop", "exit"}


def is_valid_pan(text: str) -> bool:
    """Check a PAN: 5 letters, 4 digits, 1 letter (e.g. ABCDE1234F)."""
    return PAN_REGEX.fullmatch(text.strip()) is not None


def is_valid_gstin(text: str) -> bool:
    """Check a 15-character GSTIN (e.g. 29ABCDE1234F1Z5)."""
    return GSTIN_REGEX.fullmatch(text.strip()) is not None


def is_valid_iec(text: str) -> bool:
    """Check a 10-digit Import Export Code."""
    return IEC_REGEX.fullmatch(text.strip()) is not None


def is_valid_email(text: str) -> bool:
    return EMAIL_REGEX.fullmatch(text.strip()) is not None


def is_affirmative(text: str) -> bool:
    """
    Check whether a reply confirms a yes/no question.

    Any reply containing "yes" counts, as do a few short forms
    ("y", "ok", "sure") when they are the whole reply.
    """
    lower = text.strip().lower()
    return "yes" in lower or lower in AFFIRMATIVE_REPLIES


def is_cancel_command(text: str) -> bool:
    return text.strip().lower() in CANCEL_COMMANDS
