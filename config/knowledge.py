"""
Knowledge base and reply templates.

This module contains the static text the assistant answers with:
- Compliance and product FAQ entries
- Trade dictionary used for term definitions
- Troubleshooting guides
- Currency metadata
- Fixed replies and prompts for intents, contexts and workflows

Templates use str.format placeholders; everything else is returned verbatim.
"""

from typing import Dict, Tuple

from .settings import BOT_NAME, COMPANY_NAME, SUPPORT_EMAIL

# ============================================================================
# FAQ
# ============================================================================

FAQ: Dict[str, str] = {
    "rodtep": (
        "RoDTEP (Remission of Duties and Taxes on Exported Products) is a scheme "
        "for exporters. Since we generate e-FIRAs in T+1 days, you can claim these "
        "benefits approx. 10 days faster than with traditional banks."
    ),
    "fira": (
        "An e-FIRA (Foreign Inward Remittance Advice) is proof of foreign payment. "
        "We automate this via our partner banks (YES Bank/DBS) so you don't have to "
        "chase relationship managers."
    ),
    "boe": (
        "Bill of Entry (BoE) is required for imports. Upload it to the 'Compliance "
        "Vault', and our OCR will auto-match it with your payment within 15 minutes."
    ),
    "limit": (
        "Under OPGSP/PA-CB guidelines, the per-transaction limit is generally USD "
        f"10,000 equivalent for imports, though {COMPANY_NAME} supports higher volumes "
        "via direct AD-I partnerships for specific goods."
    ),
    "security": (
        "We are ISO 27001 certified and compliant with RBI's PA-CB (Payment "
        "Aggregator - Cross Border) guidelines. Your funds are held in escrow, never "
        "in our working capital."
    ),
    "speed": (
        "We move at the speed of data. Using DBS 'Golden Rail' intra-bank transfers, "
        "payments from major hubs (SG, US, UK) settle T+0 (Same Day) if booked before "
        "2:00 PM IST. Traditional SWIFT takes T+3."
    ),
}

# ============================================================================
# TRADE DICTIONARY
# ============================================================================

TRADE_DICTIONARY: Dict[str, str] = {
    "ad_code": (
        "Authorized Dealer Code. A 14-digit code assigned by the bank where you have "
        "a current account. You must register this at every customs port where you "
        "export/import."
    ),
    "brc": (
        "Bank Realization Certificate. A legacy term, now largely replaced by e-FIRA "
        "and EDPMS status updates. It certifies that export proceeds have been realized."
    ),
    "edpms": (
        "Export Data Processing and Monitoring System. An RBI platform where banks "
        f"report export realizations. {COMPANY_NAME} updates this automatically."
    ),
    "idpms": (
        "Import Data Processing and Monitoring System. The RBI platform for tracking "
        "import remittances against Bills of Entry."
    ),
    "fema": (
        "Foreign Exchange Management Act, 1999. The primary law governing FX in India. "
        f"{COMPANY_NAME} ensures all transactions comply with FEMA guidelines automatically."
    ),
    "swift": (
        "Society for Worldwide Interbank Financial Telecommunication. The legacy "
        "messaging network. We bypass this using DBS Intra-Bank rails for 80% lower costs."
    ),
    "nostro": (
        "An account held by an Indian bank in a foreign country (e.g., YES BANK's "
        "account with Wells Fargo US)."
    ),
    "vostro": (
        "An account held by a foreign bank in India (e.g., DBS Singapore's INR "
        "account in India)."
    ),
    "eefc": (
        "Exchange Earners' Foreign Currency Account. An account where exporters can "
        "retain 100% of their earnings in foreign currency to hedge against future payments."
    ),
    "hs_code": (
        "Harmonized System Code. A standardized numerical method of classifying "
        "traded products. Crucial for RoDTEP claims."
    ),
    "opgsp": (
        "Online Payment Gateway Service Provider. The older regulatory framework for "
        "small value exports, now being superseded by PA-CB."
    ),
    "pa_cb": (
        "Payment Aggregator - Cross Border. The new RBI master direction (2025) "
        f"regulating fintechs like {COMPANY_NAME}."
    ),
    "kyc": (
        "Know Your Customer. Mandatory verification involving PAN, Aadhaar, and "
        "business registration docs."
    ),
    "aml": (
        f"Anti-Money Laundering. {COMPANY_NAME} uses real-time screening against OFAC "
        "and UN lists to prevent illicit flows."
    ),
    "neft": "National Electronic Funds Transfer. Used for domestic INR payouts under ₹2 Lakhs.",
    "rtgs": "Real Time Gross Settlement. Used for domestic INR payouts over ₹2 Lakhs.",
}

# ============================================================================
# TROUBLESHOOTING
# ============================================================================

TROUBLESHOOTING: Dict[str, str] = {
    "payment_failed": (
        "If your payment failed, check: 1) Is the beneficiary account active? "
        "2) Does the purpose code match the invoice? 3) Do you have sufficient "
        "balance? If all look good, raise a priority ticket."
    ),
    "login_issue": (
        "Ensure you are using your registered corporate email. If you forgot your "
        "password, click 'Forgot Password' on the login screen. Accounts are locked "
        "after 5 failed attempts."
    ),
    "doc_rejected": (
        "Documents are usually rejected due to: Blurry scans, Name mismatch between "
        "Invoice and IEC, or Expired validity. Please re-upload a clear PDF."
    ),
    "fira_missing": (
        "If you haven't received an e-FIRA after 48 hours, the funds might be held "
        "for AML review. Check your email for a 'Request for Information' (RFI) from "
        "our compliance team."
    ),
}

# Raw-text triggers checked in order; the first hit picks the guide
TROUBLESHOOTING_TRIGGERS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("fail", "reject"), "payment_failed"),
    (("login", "password"), "login_issue"),
    (("document",), "doc_rejected"),
    (("fira",), "fira_missing"),
)

# ============================================================================
# CURRENCY METADATA
# ============================================================================

CURRENCY_NAMES: Dict[str, str] = {
    "USD": "United States Dollar",
    "SGD": "Singapore Dollar",
    "GBP": "British Pound",
    "EUR": "Euro",
    "AED": "UAE Dirham",
    "VND": "Vietnamese Dong",
    "THB": "Thai Baht",
    "JPY": "Japanese Yen",
    "AUD": "Australian Dollar",
    "CAD": "Canadian Dollar",
    "INR": "Indian Rupee",
}

# ============================================================================
# INTENT REPLIES
# ============================================================================

GREETINGS: Tuple[str, ...] = (
    f"Hello! I'm {BOT_NAME}, your {COMPANY_NAME} Trade Assistant. I'm connected to "
    "the Live Interbank Market. How can I optimize your cash flow?",
    "Hi there! Ready to save on FX spreads? Ask me about live rates, compliance, "
    "or transfers.",
    f"Greetings from the {COMPANY_NAME} team. What can I help you clear today?",
)

THANKS_REPLY = f"You're very welcome! {COMPANY_NAME} is always here to help."
GOODBYE_REPLY = "Goodbye! Keep your margins high and your compliance clean. 👋"
PERSONALITY_REPLY = (
    f"I'm {BOT_NAME}, a digital assistant built on the {COMPANY_NAME} infrastructure. "
    "I process trade data faster than you can say 'Letter of Credit'."
)

FALLBACK_REPLY = (
    "I'm trained on Trade Finance, Live FX Rates, and Compliance rules. You can ask: "
    "'Current USD Rate', 'What is RoDTEP?', 'Convert 5000 SGD', or 'Help with login'."
)

SUPPORT_REPLY = (
    f"You can reach our human Ops Team at {SUPPORT_EMAIL}. Or I can help you debug "
    "'failed payments' or 'login issues' here."
)

ASK_RATE_CURRENCY = (
    "I can check live wholesale rates for you. Which currency? ({currencies})"
)
ASK_CALCULATION_DETAILS = (
    "I can calculate that instant savings for you. How much do you want to convert? "
    "(e.g., '5000 USD')"
)
ASK_TERM = (
    "I have a full trade dictionary. Which term do you want defined? "
    "(e.g., 'EEFC', 'HS Code', 'FEMA')"
)

ONBOARDING_OFFER = (
    "Opening an account is fully digital. Would you like me to guide you through "
    "the requirements? (Type 'Yes' to start)"
)
TICKET_OFFER = (
    "I detect this is urgent. Would you like to raise a **Priority Support Ticket** "
    "right now? (Type 'Yes')"
)

TERM_DEFINITION = "📖 **{term}**: {definition}"

# ============================================================================
# CONTEXT REPLIES
# ============================================================================

RATE_LATER_REPLY = "No problem. Let me know if you need rates later."
CURRENCY_NOT_UNDERSTOOD = (
    "I didn't catch that currency. We support {currencies}. "
    "Which one are you interested in?"
)
GOT_AMOUNT = "Got the amount ({amount}). Now, which currency? (e.g. USD)"
GOT_CURRENCY = "Got the currency ({currency}). How much do you want to convert?"
STILL_NEED_DETAILS = (
    "I still need an amount and a currency to help (e.g., '1000 USD')."
)
TERM_NOT_FOUND = (
    "I couldn't find a definition for that specific term in my trade dictionary. "
    "Try 'FEMA', 'HS Code', or 'BRC'."
)

# ============================================================================
# QUOTE REPLIES
# ============================================================================

RATES_NOT_READY = (
    "I'm currently establishing a secure handshake with the GIFT City server to get "
    "live rates. Please try again in 2 seconds."
)
RATE_UNAVAILABLE = (
    "I don't have live data for {currency_label} right now. Please try {currencies}."
)
RATE_REPLY = (
    "🎯 **{currency} Live Wholesale**: ₹{wholesale_rate:.2f} \n\n"
    "Compare that to your bank's rate (approx ₹{bank_rate:.2f}). "
    "We save you ~{saving_pct:.1f}% per unit."
)
CONVERSION_UNAVAILABLE = (
    "Currency not supported or live data unavailable. We currently quote {currencies}."
)
CONVERSION_REPLY = (
    "🧮 **Cost Analysis for {amount} {currency}**\n"
    "• Traditional Bank Cost: {bank_total}\n"
    f"• {COMPANY_NAME} Wholesale Cost: {{wholesale_total}}\n"
    "----------------------------------\n"
    "✅ **Total Profit Recovered: {savings}**"
)

# ============================================================================
# TONE
# ============================================================================

APOLOGY_PREFIX = "I apologize if you're facing issues. "
PRIORITY_PREFIX = "🚨 **Priority Response**: "

# ============================================================================
# WORKFLOWS
# ============================================================================

WORKFLOW_CANCELLED = "Workflow cancelled. How else can I help?"

ONBOARDING_ASK_IEC = (
    "Great! Step 1: Do you have a valid **IEC (Import Export Code)**? (Yes/No)"
)
ONBOARDING_DECLINED = "No problem. You can start anytime via the 'Open Account' button."
ONBOARDING_ASK_PAN = (
    "Perfect. Step 2: Please enter your **10-digit PAN Number** for validation simulation."
)
ONBOARDING_NO_IEC = (
    f"You need an IEC to operate on {COMPANY_NAME}. Please apply via the DGFT portal first."
)
ONBOARDING_ASK_COMPANY = "✅ PAN Validated. Step 3: Enter your Company Name."
ONBOARDING_INVALID_PAN = (
    "❌ Invalid PAN format. It should be 5 letters, 4 numbers, 1 letter "
    "(e.g., ABCDE1234F). Try again."
)
ONBOARDING_ASK_GSTIN = "Thanks. Last Step: Enter your GSTIN for {company}."
ONBOARDING_INVALID_GSTIN = (
    "❌ Invalid GSTIN format. It typically starts with state code "
    "(e.g., 29ABCDE1234F1Z5). Try again."
)
ONBOARDING_COMPLETE = (
    "🎉 **Pre-Check Complete!**\n\n"
    "Company: {company}\n"
    "{iec_line}"
    "PAN: Verified\n"
    "GSTIN: Verified\n\n"
    "Please click the 'Open Account' button in the top right to upload your docs "
    "and go live."
)

TICKET_ASK_ISSUE = (
    "Okay, I'm opening a priority ticket. Please describe the issue in one sentence."
)
TICKET_DECLINED = "Understood. Let me know if you need anything else."
TICKET_ASK_REFERENCE = (
    "Got it. Please provide a valid **Transaction ID** (if applicable) or type 'NA'."
)
TICKET_CREATED = (
    "✅ **Ticket Created: {ticket_id}**\n\n"
    "Issue: {issue}\n"
    "Ref: {reference}\n\n"
    "Our Ops Team has been alerted. ETA: < 2 hours."
)

UNEXPECTED_ERROR_REPLY = (
    "I encountered an error while processing your message. "
    "Could you try rephrasing it?"
)
