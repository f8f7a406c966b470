"""Personnel roster page.

Search and filter the roster, import or export it as CSV, and open a
profile to view or edit one person. Medical restrictions and health
scores are only shown to roles allowed to see them.
"""

import sys
from datetime import date, datetime
from pathlib import Path

import streamlit as st

# Add app directory to path for component imports
app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from roster.agents.insights import recommend_for
from roster.core.entities import (
    SECTION_EXPORT,
    SECTION_HEALTH_SCORES,
    SECTION_MEDICAL_DETAILS,
    SECTION_PERSONNEL,
    Availability,
)
from roster.core.errors import ImportFormatError
from roster.io.tabular import export_filename, export_personnel_csv, personnel_dataframe
from components.session import get_state, require_section

st.set_page_config(page_title="Personnel - ROSTER", page_icon="", layout="wide")

state = get_state()
require_section(state, SECTION_PERSONNEL)

st.title("Personnel")

show_health = state.has_permission(SECTION_HEALTH_SCORES)
show_medical = state.has_permission(SECTION_MEDICAL_DETAILS)

# ============== Filters ==============

filter_cols = st.columns([2, 1, 1])
with filter_cols[0]:
    search = st.text_input("Search", placeholder="Name, rank or skill")
with filter_cols[1]:
    role = st.selectbox("Role", ["All roles"] + state.store.roles())
with filter_cols[2]:
    availability_label = st.selectbox(
        "Availability",
        ["All"] + [s.value for s in Availability.roster_states()],
    )

records = state.store.filter(
    search=search,
    role=None if role == "All roles" else role,
    availability=None if availability_label == "All" else Availability(availability_label),
)

table = personnel_dataframe(records)
if not show_health:
    table = table.drop(columns=["Health Score"])
if not show_medical:
    table = table.drop(columns=["Medical Restrictions"])

st.caption(f"Showing {len(records)} of {len(state.store)} personnel")
st.dataframe(table, use_container_width=True, hide_index=True)

# ============== Import / Export ==============

io_cols = st.columns(2)

with io_cols[0]:
    if state.has_permission(SECTION_EXPORT):
        if st.download_button(
            "Export CSV",
            data=export_personnel_csv(state.store.records),
            file_name=export_filename(datetime.now()),
            mime="text/csv",
        ):
            state.record_export()
    else:
        st.caption("Roster export is restricted for your role.")

with io_cols[1]:
    uploaded = st.file_uploader("Import CSV (replaces the roster)", type=["csv"])
    if uploaded is not None and st.button("Import"):
        try:
            count = state.import_csv(uploaded)
        except ImportFormatError as e:
            st.error(str(e))
        else:
            st.success(f"Imported {count} personnel records")
            st.rerun()

st.divider()

# ============== Profile ==============

st.header("Profile")

if not records:
    st.info("No personnel match the current filters.")
    st.stop()

labels = {r.id: f"{r.name} ({r.role})" for r in records}
selected_id = st.selectbox("Select personnel", list(labels), format_func=labels.get)

if st.session_state.get("viewed_personnel") != selected_id:
    st.session_state.viewed_personnel = selected_id
    person = state.store.get(selected_id)
    state.record_activity("View Personnel", f"Viewed profile of {person.name}")

person = state.store.get(selected_id)

profile_cols = st.columns(3)
with profile_cols[0]:
    st.markdown(f"**{person.name}**")
    st.markdown(f"{person.rank} | {person.role}")
    st.markdown(f"Service: {person.years_of_service} years")
    st.markdown(f"Status: {person.availability.value}")
    st.markdown(f"Deployment: {person.deployment_status}")
with profile_cols[1]:
    st.metric("Readiness", f"{person.readiness}%")
    st.metric("Training", f"{person.training_score}%")
    if show_health:
        st.metric("Health", f"{person.health_score}%")
with profile_cols[2]:
    st.markdown("**Skills**")
    for skill in person.skills:
        st.markdown(f"- {skill}")
    st.markdown(f"Last training: {person.last_training_date}")
    if person.email:
        st.markdown(f"Contact: {person.email} / {person.phone_number or '-'}")

if show_medical:
    with st.expander("Medical Details", expanded=bool(person.medical_restrictions)):
        if person.medical_restrictions:
            for restriction in person.medical_restrictions:
                st.markdown(f"- {restriction}")
        else:
            st.markdown("No medical restrictions.")

recommendation = recommend_for(person, date.today())
if recommendation.level == "red":
    st.error(recommendation.text)
elif recommendation.level == "yellow":
    st.warning(recommendation.text)
else:
    st.success(recommendation.text)

# ============== Edit ==============

with st.expander("Edit record"):
    with st.form(f"edit-{person.id}"):
        edit_cols = st.columns(2)
        with edit_cols[0]:
            training = st.slider("Training score", 0, 100, person.training_score)
            if show_health:
                health = st.slider("Health score", 0, 100, person.health_score)
            else:
                health = person.health_score
        with edit_cols[1]:
            states = Availability.roster_states()
            new_availability = st.selectbox(
                "Availability",
                states,
                index=states.index(person.availability),
                format_func=lambda s: s.value,
            )
            deployment = st.text_input("Deployment status", person.deployment_status)
        saved = st.form_submit_button("Save", type="primary")

    if saved:
        state.update_personnel(
            person.id,
            training_score=training,
            health_score=health,
            availability=new_availability,
            deployment_status=deployment,
        )
        st.success("Record updated")
        st.rerun()
