"""
Keyword tables for message analysis.

Contains the static vocabulary the analyzer scores messages against:
- Intent keyword/weight tables (declaration order is the tie-break)
- Sentiment word sets and urgency markers
- Currency aliases and their canonical codes

Pure data. Nothing here is mutated at runtime.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class IntentSpec:
    """
    Keyword definition for one intent.

    Attributes:
        name: Intent identifier (matches an ``Intent`` enum value)
        keywords: Substrings that count towards this intent
        weight: Score added for each keyword found
    """
    name: str
    keywords: Tuple[str, ...]
    weight: int


# ============================================================================
# INTENTS
# ============================================================================

INTENT_SPECS: Tuple[IntentSpec, ...] = (
    IntentSpec(
        "greeting",
        ("hello", "hi", "hey", "greetings", "morning", "evening", "start", "begin"),
        1,
    ),
    IntentSpec(
        "goodbye",
        ("bye", "goodbye", "see ya", "exit", "quit", "end", "close"),
        1,
    ),
    IntentSpec(
        "thanks",
        ("thank", "thanks", "cool", "awesome", "great", "helpful", "cheers"),
        1,
    ),
    IntentSpec(
        "calculator",
        ("convert", "calculator", "how much", "change", "swap", "calculate",
         "exchange", "value of"),
        2,
    ),
    IntentSpec(
        "rate_inquiry",
        ("rate", "price", "cost", "spread", "margin", "fees", "charges",
         "commission", "fx rate", "dollar rate"),
        2,
    ),
    IntentSpec(
        "compliance_fira",
        ("fira", "advice", "certificate", "proof", "remittance advice", "efira",
         "download fira"),
        3,
    ),
    IntentSpec(
        "compliance_rodtep",
        ("rodtep", "incentive", "benefit", "claim", "duty", "drawback", "rebate",
         "government scheme"),
        3,
    ),
    IntentSpec(
        "compliance_boe",
        ("boe", "bill of entry", "import doc", "customs", "clearance", "idpms",
         "entry bill"),
        3,
    ),
    IntentSpec(
        "onboarding",
        ("sign up", "register", "account", "kyc", "join", "open account",
         "documents needed", "iec", "gstin"),
        2,
    ),
    IntentSpec(
        "speed",
        ("time", "speed", "fast", "how long", "days", "settlement", "duration",
         "when", "timeline"),
        1,
    ),
    IntentSpec(
        "security",
        ("safe", "secure", "trust", "fraud", "rbi", "license", "audit", "iso",
         "escrow", "money safe"),
        2,
    ),
    IntentSpec(
        "support",
        ("help", "support", "contact", "human", "agent", "representative", "call",
         "email", "issue", "problem", "error", "ticket", "complain"),
        2,
    ),
    IntentSpec(
        "troubleshoot",
        ("failed", "rejected", "declined", "stuck", "pending", "not received",
         "missing", "issue", "bug"),
        2,
    ),
    IntentSpec(
        "explain_concept",
        ("what is", "define", "meaning", "explain", "definition", "term"),
        1,
    ),
    IntentSpec(
        "limits",
        ("limit", "maximum", "max amount", "ceiling", "threshold"),
        2,
    ),
    IntentSpec(
        "personality",
        ("who are you", "your name", "are you a bot", "are you real"),
        2,
    ),
)

# Any of these forces the support intent regardless of score
SUPPORT_OVERRIDE_WORDS: Tuple[str, ...] = ("ticket", "complaint")

# ============================================================================
# SENTIMENT
# ============================================================================

NEGATIVE_WORDS: Tuple[str, ...] = (
    "bad", "slow", "fail", "error", "angry", "waiting", "stuck", "useless",
    "broken", "waste", "lost",
)

POSITIVE_WORDS: Tuple[str, ...] = (
    "good", "fast", "great", "amazing", "thanks", "love", "easy", "smooth", "best",
)

URGENT_WORDS: Tuple[str, ...] = (
    "urgent", "emergency", "asap", "immediately", "now", "critical", "blocked",
    "money stuck",
)

# Presence of any marker forces the urgent sentiment
URGENCY_MARKERS: Tuple[str, ...] = ("urgent", "asap", "now")

# ============================================================================
# CURRENCIES
# ============================================================================

# Alias -> canonical code. Matched as one alternation; earliest position wins.
CURRENCY_ALIASES: Dict[str, str] = {
    "usd": "USD",
    "dollar": "USD",
    "greenback": "USD",
    "sgd": "SGD",
    "singapore": "SGD",
    "gbp": "GBP",
    "pound": "GBP",
    "sterling": "GBP",
    "eur": "EUR",
    "euro": "EUR",
    "aed": "AED",
    "dirham": "AED",
    "vnd": "VND",
    "dong": "VND",
    "thb": "THB",
    "baht": "THB",
    "jpy": "JPY",
    "yen": "JPY",
    "aud": "AUD",
    "cad": "CAD",
    "inr": "INR",
    "rupee": "INR",
}
