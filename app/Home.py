"""Pj ROSTER - Home page."""

import sys
from pathlib import Path

import streamlit as st

# Add app directory to path for component imports
app_dir = Path(__file__).parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from roster.auth.accounts import ACCOUNTS
from roster.core.errors import AuthenticationError
from components.session import get_state, render_alert, render_sidebar

st.set_page_config(
    page_title="Pj ROSTER",
    page_icon="",
    layout="wide",
)

state = get_state()
render_sidebar(state)

st.title("Pj ROSTER: Personnel Readiness Dashboard")

if state.user is None:
    st.markdown("""
    Sign in to view the roster, match candidates to missions and model
    readiness under what-if scenarios. What you can see depends on your role.
    """)

    with st.form("login"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in", type="primary")

    if submitted:
        try:
            state.login(username, password)
        except AuthenticationError as e:
            st.error(str(e))
        else:
            st.rerun()

    with st.expander("Demo accounts"):
        for username, (password, user) in ACCOUNTS.items():
            st.markdown(f"- **{user.role.value}**: `{username}` / `{password}`")
    st.stop()

st.success(f"Signed in as **{state.user.name}** ({state.user.role.value})")

st.markdown("""
---

**Use the sidebar** to navigate:
1. **Dashboard** - Readiness summary, charts and alerts
2. **Personnel** - Roster, profiles, CSV import/export
3. **Missions** - Score and assign candidates
4. **Insights** - Predictive planning cards
5. **Simulator** - What-if unavailability scenarios
6. **Activity Logs** - Audit trail
7. **Settings** - Real-time simulation, backup and restore
""")

if state.alerts:
    st.subheader("Active Alerts")
    for alert in state.alerts:
        render_alert(alert.severity.value, alert.title, alert.description)
