"""Session helpers shared by every page.

Keeps one AppState per browser session in st.session_state, advances the
randomizer clock to wall-clock time on each rerun, and renders the
sidebar (current user, logout, reachable pages).
"""

import logging
import time

import streamlit as st

from roster.config import find_settings
from roster.core.entities import NAVIGATION
from roster.state import AppState

STATE_KEY = "app_state"
STARTED_KEY = "app_started_at"


def get_state() -> AppState:
    """Return the session's AppState, creating it on first use."""
    if STATE_KEY not in st.session_state:
        settings = find_settings()
        logging.basicConfig(
            level=getattr(logging, settings.log_level, logging.INFO),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
        st.session_state[STATE_KEY] = AppState(settings=settings)
        st.session_state[STARTED_KEY] = time.monotonic()

    state: AppState = st.session_state[STATE_KEY]
    state.advance_clock(time.monotonic() - st.session_state[STARTED_KEY])
    return state


def render_sidebar(state: AppState) -> None:
    """User card, logout button and the pages this role can open."""
    with st.sidebar:
        if state.user is None:
            st.info("Not signed in")
            return

        st.markdown(f"**{state.user.name}**")
        st.caption(state.user.role.value)

        st.markdown("---")
        st.markdown("### Sections")
        for section, label in NAVIGATION:
            if state.has_permission(section):
                st.markdown(f"- {label}")
            else:
                st.markdown(f"- ~~{label}~~ (restricted)")

        st.markdown("---")
        if st.button("Sign out", use_container_width=True):
            state.logout()
            st.rerun()


def require_section(state: AppState, section: str) -> None:
    """Stop the page unless a user is signed in and may view the section."""
    render_sidebar(state)

    if state.user is None:
        st.warning("Please sign in on the Home page.")
        st.stop()

    if not state.has_permission(section):
        st.error("Access Restricted")
        st.caption("You don't have permission to view this section.")
        st.stop()

    state.visit(section)


SEVERITY_LABELS = {
    "critical": "[CRITICAL]",
    "warning": "[WARNING]",
    "info": "[INFO]",
}


def render_alert(severity: str, title: str, body: str) -> None:
    """Render an alert/insight with the Streamlit call matching its severity."""
    text = f"**{SEVERITY_LABELS.get(severity, '[UNKNOWN]')} {title}**\n\n{body}"
    if severity == "critical":
        st.error(text)
    elif severity == "warning":
        st.warning(text)
    else:
        st.info(text)
