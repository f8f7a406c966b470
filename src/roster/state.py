"""Application state.

AppState is the one object the dashboard pages share. It owns the
personnel store, activity log, alerts, missions, session and randomizer,
and exposes the user-facing mutation operations so every one of them is
logged under the current user. Streamlit keeps a single instance in
st.session_state; tests build their own.

Example usage:
    from roster.state import AppState

    state = AppState()
    state.login("commander", "admin123")
    state.update_personnel("001", health_score=70)
    print([a.title for a in state.alerts])
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import IO, Callable, Iterable, Optional, Union

import numpy as np
import simpy

from roster.activity.log import ActivityLog
from roster.agents.alerts import Alert, generate_alerts
from roster.auth.accounts import SessionStore, User, authenticate
from roster.auth.permissions import has_permission
from roster.config import DashboardSettings
from roster.core.entities import UserRole
from roster.core.errors import AuthenticationError
from roster.core.personnel import PersonnelRecord
from roster.core.seed import seed_personnel
from roster.core.store import PersonnelStore
from roster.io.backup import restore_backup
from roster.io.tabular import import_personnel_csv
from roster.matching.missions import Mission
from roster.simulation.randomizer import start_randomizer

logger = logging.getLogger(__name__)


class AppState:
    """Explicit application state shared by all pages.

    Attributes:
        settings: Runtime settings.
        store: Personnel store (single mutable resource).
        activity_log: Bounded audit log.
        sessions: Persisted session identity.
        user: Authenticated user, or None.
        alerts: Alerts for the current roster, regenerated on every change.
        missions: Missions created this session.
        current_section: Section last opened by the user.
        env: SimPy environment driving the randomizer.
        randomizer: Periodic roster mutation task.
    """

    def __init__(
        self,
        settings: Optional[DashboardSettings] = None,
        records: Optional[Iterable[PersonnelRecord]] = None,
        env: Optional[simpy.Environment] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.settings = settings or DashboardSettings()
        self._clock = clock or datetime.now

        self.store = PersonnelStore(seed_personnel() if records is None else records)
        self.activity_log = ActivityLog(capacity=self.settings.log_capacity, clock=self._clock)
        self.sessions = SessionStore(Path(self.settings.session_path))
        self.user: Optional[User] = self.sessions.load_user()
        self.missions: list[Mission] = []
        self.current_section: Optional[str] = None
        self._simulation_params: Optional[tuple[int, Optional[str]]] = None

        self.alerts: list[Alert] = generate_alerts(self.store.records, now=self._clock())
        self.store.add_change_hook(self._refresh_alerts)

        self.env = env or simpy.Environment()
        self.randomizer = start_randomizer(
            self.env,
            self.store,
            rng=rng if rng is not None else np.random.default_rng(self.settings.random_seed),
            interval=self.settings.tick_interval_s,
            enabled=self.settings.simulate_realtime,
        )

    def _refresh_alerts(self, records: list[PersonnelRecord]) -> None:
        self.alerts = generate_alerts(records, now=self._clock())

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    @property
    def role(self) -> Optional[UserRole]:
        return self.user.role if self.user else None

    def has_permission(self, section: str) -> bool:
        return has_permission(self.role, section)

    def login(self, username: str, password: str) -> User:
        """Authenticate and persist the session identity.

        Raises:
            AuthenticationError: If the credentials are wrong.
        """
        user = authenticate(username, password)
        if user is None:
            raise AuthenticationError("Invalid username or password")
        self.user = user
        self.sessions.save_user(user)
        self.record_activity("Authentication", f"{user.name} logged in")
        logger.info(f"User {user.username} logged in as {user.role.value}")
        return user

    def logout(self) -> None:
        if self.user is not None:
            self.record_activity("Authentication", f"{self.user.name} logged out")
            logger.info(f"User {self.user.username} logged out")
        self.user = None
        self.current_section = None
        self._simulation_params = None
        self.sessions.clear()

    def record_activity(self, action: str, details: str) -> None:
        """Log an action for the current user (no-op when logged out)."""
        self.activity_log.record(self.user, action, details)

    def visit(self, section: str) -> bool:
        """Note that a section was opened; log it when the section changed.

        Streamlit reruns a page on every interaction, so only a move to a
        different section counts as navigation.

        Returns:
            True if a Navigation entry was recorded.
        """
        if self.user is None or section == self.current_section:
            return False
        self.current_section = section
        self.record_activity("Navigation", f"Accessed {section} page")
        return True

    def record_export(self) -> None:
        """Log a roster CSV download."""
        self.record_activity("Export Data", f"Exported {len(self.store)} personnel records")

    def record_simulation(self, count: int, role: Optional[str]) -> bool:
        """Log a what-if run when its parameters differ from the last one.

        Returns:
            True if a Simulation entry was recorded.
        """
        params = (count, role)
        if self.user is None or params == self._simulation_params:
            return False
        self._simulation_params = params
        self.record_activity(
            "Simulation",
            f"Simulated {count} personnel unavailable ({role or 'All roles'})",
        )
        return True

    # ------------------------------------------------------------------
    # Roster mutations
    # ------------------------------------------------------------------

    def update_personnel(self, person_id: str, **changes) -> PersonnelRecord:
        """Edit one record through the store and log it."""
        record = self.store.update(person_id, **changes)
        self.record_activity("Update Personnel", f"Updated personnel {person_id}")
        return record

    def import_personnel(self, records: Iterable[PersonnelRecord]) -> int:
        """Replace the roster wholesale. Returns the record count."""
        records = list(records)
        self.store.replace_all(records)
        self.record_activity("Import Data", f"Imported {len(records)} personnel records")
        return len(records)

    def import_csv(self, source: Union[str, Path, IO]) -> int:
        """Parse a roster CSV and replace the roster.

        Raises:
            ImportFormatError: If the file is malformed; the roster is
                left unchanged.
        """
        records = import_personnel_csv(source, now=self._clock())
        return self.import_personnel(records)

    def restore_backup(self, text: str) -> int:
        """Replace the roster from a JSON backup.

        Raises:
            ImportFormatError: If the backup is malformed; the roster is
                left unchanged.
        """
        records = restore_backup(text)
        self.store.replace_all(records)
        self.record_activity("Restore Backup", f"Restored {len(records)} personnel records")
        return len(records)

    def add_mission(self, mission: Mission) -> None:
        self.missions.append(mission)
        self.record_activity("Create Mission", f"Created mission: {mission.name}")

    # ------------------------------------------------------------------
    # Real-time simulation
    # ------------------------------------------------------------------

    @property
    def realtime_enabled(self) -> bool:
        return self.randomizer.enabled

    def set_realtime(self, enabled: bool) -> None:
        """Toggle the randomizer; a toggle restarts its timer."""
        if enabled == self.randomizer.enabled:
            return
        self.randomizer.set_enabled(enabled)
        self.record_activity(
            "Settings", f"Real-time simulation {'enabled' if enabled else 'disabled'}"
        )

    def advance_clock(self, elapsed_s: float) -> None:
        """Advance simulated time (and due randomizer ticks) to elapsed_s."""
        self.randomizer.advance_to(elapsed_s)
