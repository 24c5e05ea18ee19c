"""
Atlas - Trade Finance Assistant
Streamlit Web Application

Entry point for the chat interface. Keeps one ChatService per browser
session and renders the conversation; all conversation logic lives in
the services and core packages.
"""

import streamlit as st
import time
from typing import Any, Dict, Optional
import logging

from config import APP_TITLE, APP_SUBTITLE, PAGE_ICON, BOT_VERSION, LOG_LEVEL

# Configure logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)

# Import services
try:
    from services.chat_service import ChatService, ChatResponse
except ImportError as e:
    st.error(f"❌ Failed to import required modules: {e}")
    st.stop()

# ============================================================================
# PAGE CONFIGURATION
# ============================================================================

st.set_page_config(
    page_title=APP_TITLE,
    page_icon=PAGE_ICON,
    layout="centered",
    initial_sidebar_state="expanded",
)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================

def initialize_session_state():
    """Initialize Streamlit session state variables."""

    if "chat_service" not in st.session_state:
        st.session_state.chat_service = ChatService(
            session_id=f"session_{int(time.time())}",
        )

    if "messages" not in st.session_state:
        st.session_state.messages = []


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def add_message(role: str, content: str, metadata: Optional[Dict] = None):
    """Add a message to the displayed conversation."""
    st.session_state.messages.append({
        "role": role,
        "content": content,
        "metadata": metadata or {},
        "timestamp": time.time(),
    })


def render_chat_message(message: Dict[str, Any]):
    """Render a single chat message."""
    if message["role"] == "user":
        with st.chat_message("user", avatar="👤"):
            st.markdown(message["content"])
        return

    with st.chat_message("assistant", avatar=PAGE_ICON):
        st.markdown(message["content"])

        metadata = message.get("metadata", {})
        if metadata.get("intent"):
            with st.expander("ℹ️ Message Details", expanded=False):
                st.caption(f"**Intent:** {metadata['intent']}")
                st.caption(f"**Sentiment:** {metadata.get('sentiment', 'neutral')}")
                if metadata.get("context"):
                    st.caption(f"**Waiting for:** {metadata['context']}")


def handle_user_message(text: str):
    """Send a message through the chat service and store both sides."""
    add_message("user", text)
    response: ChatResponse = st.session_state.chat_service.process_message(text)
    if response.message:
        add_message("assistant", response.message, response.metadata)
    st.session_state.suggestions = response.suggestions or []


# ============================================================================
# SIDEBAR
# ============================================================================

def render_sidebar():
    """Session diagnostics and reset control."""
    with st.sidebar:
        st.markdown(f"### {PAGE_ICON} Session")
        summary = st.session_state.chat_service.state.summary()

        if summary["workflow"]:
            st.info(f"Workflow: **{summary['workflow']}** (step {summary['step']})")
        st.caption(f"Sentiment: {summary['sentiment']}")
        st.caption(f"Messages remembered: {summary['history_size']}")

        if st.button("🔄 New Conversation"):
            st.session_state.clear()
            st.rerun()

        st.caption(f"v{BOT_VERSION}")


# ============================================================================
# MAIN
# ============================================================================

def main():
    initialize_session_state()

    st.title(APP_TITLE)
    st.caption(APP_SUBTITLE)

    render_sidebar()

    for message in st.session_state.messages:
        render_chat_message(message)

    suggestions = st.session_state.get("suggestions", [])
    if suggestions:
        columns = st.columns(len(suggestions))
        for column, suggestion in zip(columns, suggestions):
            if column.button(suggestion, key=f"suggest_{suggestion}"):
                handle_user_message(suggestion)
                st.rerun()

    prompt = st.chat_input("Ask about rates, compliance or onboarding...")
    if prompt:
        handle_user_message(prompt)
        st.rerun()


if __name__ == "__main__":
    main()
