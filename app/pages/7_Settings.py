"""Settings page.

Real-time simulation toggle, JSON backup and restore, and a summary of
the signed-in user's access.
"""

import sys
from datetime import datetime
from pathlib import Path

import streamlit as st

# Add app directory to path for component imports
app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from roster.core.entities import (
    NAVIGATION,
    SECTION_HEALTH_SCORES,
    SECTION_MEDICAL_DETAILS,
    SECTION_SETTINGS,
)
from roster.core.errors import ImportFormatError
from roster.io.backup import backup_filename, backup_json
from components.session import get_state, require_section

st.set_page_config(page_title="Settings - ROSTER", page_icon="", layout="wide")

state = get_state()
require_section(state, SECTION_SETTINGS)

st.title("Settings")

# ============== Simulation ==============

st.header("Real-time Simulation")

live = st.toggle(
    "Simulate live roster updates",
    value=state.realtime_enabled,
    help=f"Randomly adjusts one record every {state.settings.tick_interval_s:.0f} seconds",
)
if live != state.realtime_enabled:
    state.set_realtime(live)
    st.rerun()

st.caption(f"Ticks so far: {state.randomizer.ticks}")

st.divider()

# ============== Backup ==============

st.header("Backup and Restore")

backup_cols = st.columns(2)
with backup_cols[0]:
    if st.download_button(
        "Download Backup",
        data=backup_json(state.store.records),
        file_name=backup_filename(datetime.now()),
        mime="application/json",
    ):
        state.record_activity("Export Backup", f"Exported {len(state.store)} personnel records")

with backup_cols[1]:
    uploaded = st.file_uploader("Restore from backup", type=["json"])
    if uploaded is not None and st.button("Restore"):
        try:
            count = state.restore_backup(uploaded.getvalue().decode("utf-8"))
        except (ImportFormatError, UnicodeDecodeError) as e:
            st.error(f"Restore failed: {e}")
        else:
            st.success(f"Restored {count} personnel records")

st.divider()

# ============== Access ==============

st.header("Your Access")

st.markdown(f"**{state.user.name}** ({state.user.username}) | {state.user.role.value}")

sections = list(NAVIGATION) + [
    (SECTION_MEDICAL_DETAILS, "Medical details"),
    (SECTION_HEALTH_SCORES, "Health scores"),
]
for section, label in sections:
    allowed = state.has_permission(section)
    st.markdown(f"- {label}: {'Allowed' if allowed else 'Restricted'}")
