"""Readiness dashboard page.

Headline stat cards, role and training charts, and the alert panel.
Health averages are shown only to roles with the health-scores
permission. With real-time simulation on, the page body refreshes on a
timer so randomizer ticks show up without user input.
"""

import sys
from pathlib import Path

import pandas as pd
import plotly.express as px
import streamlit as st

# Add app directory to path for component imports
app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from roster.core.entities import SECTION_DASHBOARD, SECTION_HEALTH_SCORES
from components.session import get_state, render_alert, require_section

st.set_page_config(page_title="Dashboard - ROSTER", page_icon="", layout="wide")

state = get_state()
require_section(state, SECTION_DASHBOARD)

st.title("Readiness Dashboard")

live = st.toggle("Real-time simulation", value=state.realtime_enabled)
if live != state.realtime_enabled:
    state.set_realtime(live)

run_every = state.settings.tick_interval_s if state.realtime_enabled else None


@st.fragment(run_every=run_every)
def render_dashboard():
    """Stat cards, charts and alerts for the current roster."""
    current = get_state()
    summary = current.store.summary()

    # ============== Stat cards ==============
    cols = st.columns(4)
    cols[0].metric("Total Personnel", summary.total)
    cols[1].metric("Available", summary.available)
    cols[2].metric("Deployed", summary.deployed)
    cols[3].metric("Unit Readiness", f"{summary.readiness}%")

    if current.has_permission(SECTION_HEALTH_SCORES):
        cols = st.columns(4)
        cols[0].metric("Avg Health", f"{summary.avg_health}%")
        cols[1].metric("Avg Training", f"{summary.avg_training}%")

    st.divider()

    # ============== Charts ==============
    chart_cols = st.columns(2)

    with chart_cols[0]:
        st.subheader("Personnel by Role")
        roles = current.store.role_distribution()
        if roles:
            fig = px.pie(
                pd.DataFrame({"Role": list(roles), "Count": list(roles.values())}),
                values="Count",
                names="Role",
                title="Headcount by Role",
            )
            st.plotly_chart(fig, use_container_width=True)
        else:
            st.info("No personnel on the roster.")

    with chart_cols[1]:
        st.subheader("Training Levels")
        bands = current.store.training_bands()
        fig = px.bar(
            pd.DataFrame({"Band": list(bands), "Personnel": list(bands.values())}),
            x="Band",
            y="Personnel",
            title="Training Score Distribution",
            color="Band",
            color_discrete_sequence=["#00cc96", "#636efa", "#ffa62b", "#ff4b4b"],
        )
        fig.update_layout(showlegend=False)
        st.plotly_chart(fig, use_container_width=True)

    st.divider()

    # ============== Alerts ==============
    st.subheader("Alerts")
    if not current.alerts:
        st.success("No active alerts.")
    for alert in current.alerts:
        render_alert(alert.severity.value, alert.title, alert.description)
        st.caption(f"Generated {alert.timestamp:%H:%M:%S}")


render_dashboard()
