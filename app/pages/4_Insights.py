"""Predictive insights page.

Five heuristic forecast cards over the current roster.
"""

import sys
from pathlib import Path

import streamlit as st

# Add app directory to path for component imports
app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from roster.agents.insights import generate_insights
from roster.core.entities import SECTION_INSIGHTS, Severity
from components.session import get_state, render_alert, require_section

st.set_page_config(page_title="Insights - ROSTER", page_icon="", layout="wide")

state = get_state()
require_section(state, SECTION_INSIGHTS)

st.title("Predictive Insights")
st.caption("Heuristic forecasts for strategic planning")

insights = generate_insights(state.store.records)
if not insights:
    st.info("No personnel on the roster.")
    st.stop()

severity_filter = st.multiselect(
    "Severity",
    [s.value for s in Severity],
    default=[s.value for s in Severity],
)

for insight in insights:
    if insight.severity.value not in severity_filter:
        continue
    render_alert(insight.severity.value, insight.title, insight.description)
    cols = st.columns(3)
    cols[0].markdown(f"**Impact:** {insight.impact or '-'}")
    cols[1].markdown(f"**Recommendation:** {insight.recommendation}")
    cols[2].markdown(f"**Timeline:** {insight.timeline}")
