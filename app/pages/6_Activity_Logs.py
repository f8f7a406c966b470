"""Activity log page.

Newest-first audit trail with action/user filters and CSV export.
"""

import sys
from datetime import datetime
from pathlib import Path

import streamlit as st

# Add app directory to path for component imports
app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from roster.activity.log import ActivityLog, export_filename
from roster.core.entities import SECTION_LOGS
from roster.core.errors import PermissionDeniedError
from components.session import get_state, require_section

st.set_page_config(page_title="Activity Logs - ROSTER", page_icon="", layout="wide")

state = get_state()
require_section(state, SECTION_LOGS)

st.title("Activity Logs")

try:
    entries = state.activity_log.read(state.role)
except PermissionDeniedError as e:
    st.error(str(e))
    st.stop()

filter_cols = st.columns(2)
with filter_cols[0]:
    action = st.selectbox("Action", ["All actions"] + ActivityLog.actions(entries))
with filter_cols[1]:
    username = st.selectbox("User", ["All users"] + ActivityLog.usernames(entries))

filtered = ActivityLog.filter(
    entries,
    action="" if action == "All actions" else action,
    username="" if username == "All users" else username,
)

st.caption(f"{len(filtered)} of {len(entries)} entries (last {state.activity_log.capacity} kept)")
st.dataframe(ActivityLog.to_dataframe(filtered), use_container_width=True, hide_index=True)

st.download_button(
    "Export CSV",
    data=ActivityLog.export_csv(filtered),
    file_name=export_filename(datetime.now()),
    mime="text/csv",
    disabled=not filtered,
)
