"""
Message Analyzer

Turns a raw user message into an AnalysisResult: the most likely intent,
its keyword score, any currency and amount mentioned, and a coarse
sentiment. Classification is keyword based: each intent in the lexicon
scores its weight for every keyword found in the message.

Intent types:
- greeting / goodbye / thanks: Social interaction
- rate_inquiry: Live exchange rate for a currency
- calculator: Cost comparison for an amount and currency
- compliance_fira / compliance_rodtep / compliance_boe: Regulatory FAQ
- onboarding: Account opening pre-check
- speed / security / limits: Product information
- support / troubleshoot: Help requests and known problems
- explain_concept: Trade dictionary lookups
- personality: Questions about the assistant itself
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from config import (
    INTENT_SPECS,
    SUPPORT_OVERRIDE_WORDS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    URGENT_WORDS,
    URGENCY_MARKERS,
)
from utils.currency import normalize_currency
from .state import Sentiment

logger = logging.getLogger(__name__)


# ============================================================================
# INTENT TYPES
# ============================================================================

class Intent(Enum):
    """Enumeration of possible user intents."""

    GREETING = "greeting"
    GOODBYE = "goodbye"
    THANKS = "thanks"
    CALCULATOR = "calculator"
    RATE_INQUIRY = "rate_inquiry"
    COMPLIANCE_FIRA = "compliance_fira"
    COMPLIANCE_RODTEP = "compliance_rodtep"
    COMPLIANCE_BOE = "compliance_boe"
    ONBOARDING = "onboarding"
    SPEED = "speed"
    SECURITY = "security"
    SUPPORT = "support"
    TROUBLESHOOT = "troubleshoot"
    EXPLAIN_CONCEPT = "explain_concept"
    LIMITS = "limits"
    PERSONALITY = "personality"
    UNKNOWN = "unknown"


# ============================================================================
# DATA STRUCTURES
# ============================================================================

@dataclass(frozen=True)
class AnalysisResult:
    """
    Result of analyzing one message.

    Attributes:
        intent: The classified intent (UNKNOWN if no keyword matched)
        score: Cumulative keyword score of the winning intent
        currency: Canonical currency code mentioned, if any
        amount: First numeric amount mentioned, with k/m/b applied
        sentiment: Coarse tone of the message
        raw_text: The message as received
    """
    intent: Intent
    score: int
    currency: Optional[str]
    amount: Optional[float]
    sentiment: Sentiment
    raw_text: str


# ============================================================================
# PATTERNS
# ============================================================================

# "10k", "1,200", "2.5m", "2bn"; the suffix must not start a longer word ("10kg")
AMOUNT_REGEX = re.compile(r"(\d+(?:,\d{3})*(?:\.\d+)?)(?:([kmb])n?(?![a-z]))?")

MAGNITUDES = {"k": 1_000, "m": 1_000_000, "b": 1_000_000_000}


def _word_pattern(words: Tuple[str, ...]) -> "re.Pattern":
    # Anchored at a word start so "now" does not fire inside "know"
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + ")")


URGENCY_REGEX = _word_pattern(URGENCY_MARKERS)

SENTIMENT_WORDS = (
    (tuple(re.compile(r"\b" + re.escape(w)) for w in NEGATIVE_WORDS), -1),
    (tuple(re.compile(r"\b" + re.escape(w)) for w in POSITIVE_WORDS), 1),
    (tuple(re.compile(r"\b" + re.escape(w)) for w in URGENT_WORDS), -2),
)

INTENTS = tuple((Intent(spec.name), spec) for spec in INTENT_SPECS)


# ============================================================================
# ANALYSIS
# ============================================================================

def analyze(text: Optional[str]) -> AnalysisResult:
    """
    Classify a message and extract its entities.

    Never fails: empty or unrecognized input yields Intent.UNKNOWN with
    score 0.

    Args:
        text: The user's message

    Returns:
        AnalysisResult for the message

    Example:
        >>> result = analyze("convert 10k usd")
        >>> result.intent, result.amount, result.currency
        (Intent.CALCULATOR, 10000.0, "USD")
    """
    text = text or ""
    lower = text.lower()

    intent, score = _score_intents(lower)

    if any(word in lower for word in SUPPORT_OVERRIDE_WORDS):
        intent = Intent.SUPPORT

    result = AnalysisResult(
        intent=intent,
        score=score,
        currency=normalize_currency(lower),
        amount=extract_amount(lower),
        sentiment=detect_sentiment(lower),
        raw_text=text,
    )

    logger.info(
        f"🧭 Intent classified: {result.intent.value} "
        f"(score: {result.score}, sentiment: {result.sentiment.value})"
    )

    return result


def _score_intents(lower: str) -> Tuple[Intent, int]:
    """Return the highest scoring intent; earlier intents win ties."""
    best_intent = Intent.UNKNOWN
    best_score = 0

    for intent, spec in INTENTS:
        score = sum(spec.weight for keyword in spec.keywords if keyword in lower)
        if score > best_score:
            best_intent, best_score = intent, score

    return best_intent, best_score


def extract_amount(text: str) -> Optional[float]:
    """
    Extract the first numeric amount from text.

    Handles thousands separators, decimals and k/m/b magnitude suffixes.

    Example:
        >>> extract_amount("send 2.5m to vendor")
        2500000.0
    """
    match = AMOUNT_REGEX.search(text.lower())
    if not match:
        return None

    value = float(match.group(1).replace(",", ""))
    suffix = match.group(2)
    if suffix:
        value *= MAGNITUDES[suffix]

    return value


def detect_sentiment(text: str) -> Sentiment:
    """
    Score the tone of a message.

    Negative words count -1, positive +1 and urgent -2. Any urgency
    marker overrides the score and makes the message urgent.
    """
    lower = text.lower()

    if URGENCY_REGEX.search(lower):
        return Sentiment.URGENT

    score = 0
    for patterns, delta in SENTIMENT_WORDS:
        score += delta * sum(1 for pattern in patterns if pattern.search(lower))

    if score > 0:
        return Sentiment.POSITIVE
    if score < 0:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL
