"""Mission assignment page.

Pick a role and/or skills, rank the available personnel, then deploy a
selection to a named mission.
"""

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# Add app directory to path for component imports
app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from roster.core.entities import SECTION_MISSIONS
from roster.core.errors import AssignmentError, SearchCriteriaError
from roster.matching.missions import assign_mission, search_candidates
from roster.matching.scorer import MissionRequirement, score_band
from components.session import get_state, require_section

st.set_page_config(page_title="Missions - ROSTER", page_icon="", layout="wide")

state = get_state()
require_section(state, SECTION_MISSIONS)

st.title("Mission Assignment")

# ============== Requirement ==============

req_cols = st.columns(2)
with req_cols[0]:
    role = st.selectbox("Required role", ["Any role"] + state.store.roles())
    mission_name = st.text_input("Mission name", placeholder="Unnamed Mission")
with req_cols[1]:
    skills = st.multiselect("Required skills", state.store.skills())

requirement = MissionRequirement(
    required_role=None if role == "Any role" else role,
    required_skills=tuple(skills),
)

if st.button("Find Candidates", type="primary"):
    try:
        st.session_state.mission_candidates = search_candidates(state, requirement)
        st.session_state.mission_requirement = requirement
    except SearchCriteriaError as e:
        st.warning(str(e))
        st.session_state.mission_candidates = None

candidates = st.session_state.get("mission_candidates")

# ============== Candidates ==============

if candidates is not None:
    st.divider()
    st.header("Top Candidates")

    if not candidates:
        st.info("No available personnel match this requirement.")
    else:
        st.dataframe(
            pd.DataFrame([
                {
                    "Name": c.record.name,
                    "Role": c.record.role,
                    "Score": c.score,
                    "Band": score_band(c.score),
                    "Why": c.rationale,
                }
                for c in candidates
            ]),
            use_container_width=True,
            hide_index=True,
        )

        names = {c.record.id: f"{c.record.name} ({c.score})" for c in candidates}
        selected = st.multiselect("Select personnel to deploy", list(names), format_func=names.get)

        if st.button("Assign to Mission"):
            try:
                mission = assign_mission(
                    state,
                    selected,
                    st.session_state.mission_requirement,
                    mission_name,
                )
            except AssignmentError as e:
                st.warning(str(e))
            else:
                st.session_state.mission_candidates = None
                st.success(
                    f"Assigned {len(mission.assigned_personnel)} personnel to {mission.name}"
                )

# ============== Missions ==============

if state.missions:
    st.divider()
    st.header("Missions")
    st.dataframe(
        pd.DataFrame([
            {
                "Mission": m.name,
                "Role": m.required_role or "-",
                "Skills": ", ".join(m.required_skills),
                "Personnel": len(m.assigned_personnel),
                "Status": m.status.value,
            }
            for m in state.missions
        ]),
        use_container_width=True,
        hide_index=True,
    )
