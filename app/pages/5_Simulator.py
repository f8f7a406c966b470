"""What-if readiness simulator page.

Take the N most ready available people offline (optionally from one
role) and see the effect on readiness, per-role availability and
mission capability. The live roster is never changed.
"""

import sys
from pathlib import Path

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

# Add app directory to path for component imports
app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from roster.core.entities import SECTION_SIMULATOR
from roster.simulation.what_if import max_simulated_unavailable, simulate_unavailability
from components.session import get_state, require_section

st.set_page_config(page_title="Simulator - ROSTER", page_icon="", layout="wide")

state = get_state()
require_section(state, SECTION_SIMULATOR)

st.title("What-If Simulator")

records = state.store.records
limit = max_simulated_unavailable(len(records))

# ============== Scenario ==============

scenario_cols = st.columns(2)
with scenario_cols[0]:
    if limit > 0:
        count = st.slider("Personnel unavailable", 0, limit, min(1, limit))
    else:
        st.info("The roster is too small to simulate.")
        count = 0
with scenario_cols[1]:
    role = st.selectbox("Restrict to role", ["All roles"] + state.store.roles())

# Recomputed on every rerun from the live roster
selected_role = None if role == "All roles" else role
result = simulate_unavailability(records, count, selected_role)
state.record_simulation(count, selected_role)

st.divider()

# ============== Results ==============

metric_cols = st.columns(4)
metric_cols[0].metric("Original Readiness", f"{result.original_readiness}%")
metric_cols[1].metric(
    "New Readiness",
    f"{result.new_readiness}%",
    delta=f"{-result.readiness_impact}%",
)
metric_cols[2].metric("Capacity Impact", f"{result.capacity_impact}%")
metric_cols[3].metric("Remaining Capable", result.remaining_capable)

if result.selected_ids:
    by_id = {r.id: r.name for r in records}
    names = [by_id.get(pid, pid) for pid in result.selected_ids]
    st.caption("Taken offline: " + ", ".join(names))

st.subheader("Role Impact")

if not result.role_impact:
    st.info("No personnel on the roster.")
else:
    role_df = pd.DataFrame([
        {
            "Role": r.role,
            "Before": r.original_count,
            "After": r.new_count,
            "Impact %": r.impact,
            "Critical": "Yes" if r.critical else "",
        }
        for r in result.role_impact
    ])

    fig = go.Figure()
    fig.add_trace(go.Bar(name="Before", x=role_df["Role"], y=role_df["Before"], marker_color="#636efa"))
    fig.add_trace(go.Bar(name="After", x=role_df["Role"], y=role_df["After"], marker_color="#ff4b4b"))
    fig.update_layout(
        barmode="group",
        title="Available Personnel by Role",
        yaxis_title="Available",
    )
    st.plotly_chart(fig, use_container_width=True)
    st.dataframe(role_df, use_container_width=True, hide_index=True)

st.subheader("Mission Capability")

cap_cols = st.columns(len(result.mission_capability))
for col, cap in zip(cap_cols, result.mission_capability):
    with col:
        st.metric(cap.role, f"{cap.capability}%", help=f"{cap.available}/{cap.total} available")
        if cap.status == "Operational":
            st.success(cap.status)
        elif cap.status == "Limited":
            st.warning(cap.status)
        else:
            st.error(cap.status)
