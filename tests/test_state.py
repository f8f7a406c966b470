"""Tests for the shared application state."""

import io

import numpy as np
import pytest
import simpy

from roster.core.entities import Availability, UserRole
from roster.core.errors import AuthenticationError, ImportFormatError
from roster.io.backup import backup_json
from roster.state import AppState


def _actions(state):
    return [e.action for e in state.activity_log.read(UserRole.COMMANDER)]


class TestSession:
    """Test suite for login and logout."""

    def test_starts_logged_out_on_seed(self, app_state):
        assert app_state.user is None
        assert app_state.role is None
        assert len(app_state.store) == 10
        assert app_state.has_permission("dashboard") is False

    def test_login_logs_and_persists(self, app_state, settings):
        """A successful login is logged and survives a reload."""
        app_state.login("commander", "admin123")

        assert _actions(app_state) == ["Authentication"]
        reloaded = AppState(settings=settings)
        assert reloaded.user == app_state.user

    def test_bad_login_raises(self, app_state):
        with pytest.raises(AuthenticationError):
            app_state.login("commander", "wrong")
        assert app_state.user is None

    def test_logout_clears_session(self, commander_state, settings):
        commander_state.logout()

        assert commander_state.user is None
        assert AppState(settings=settings).user is None

    def test_nothing_logged_when_logged_out(self, app_state):
        app_state.update_personnel("001", health_score=60)

        assert len(app_state.activity_log) == 0


class TestMutations:
    """Test suite for logged roster mutations."""

    def test_update_logs_and_refreshes_alerts(self, commander_state):
        """An edit is logged and the alert list follows the roster."""
        assert commander_state.alerts == []

        commander_state.update_personnel("001", training_score=70)

        assert _actions(commander_state)[0] == "Update Personnel"
        assert [a.id for a in commander_state.alerts] == ["training-alert"]

    def test_import_csv_replaces_roster(self, commander_state):
        text = "ID,Name,Role,Health Score,Training Score\nA1,New Person,Pilot,80,90\n"

        count = commander_state.import_csv(io.StringIO(text))

        assert count == 1
        assert [r.id for r in commander_state.store.records] == ["A1"]
        latest = commander_state.activity_log.read(UserRole.COMMANDER)[0]
        assert latest.details == "Imported 1 personnel records"

    def test_failed_import_leaves_roster(self, commander_state):
        before = commander_state.store.records

        with pytest.raises(ImportFormatError):
            commander_state.import_csv(io.StringIO("ID,Name\n001,A\n002,B,C,D,E\n"))

        assert commander_state.store.records == before
        assert "Import Data" not in _actions(commander_state)

    def test_restore_backup(self, commander_state):
        text = backup_json(commander_state.store.records[:3])

        assert commander_state.restore_backup(text) == 3
        assert len(commander_state.store) == 3
        assert _actions(commander_state)[0] == "Restore Backup"


class TestRealtime:
    """Test suite for the real-time toggle."""

    def test_toggle_logs_once(self, commander_state):
        commander_state.set_realtime(True)
        commander_state.set_realtime(True)

        assert commander_state.realtime_enabled is True
        assert _actions(commander_state).count("Settings") == 1

    def test_advance_clock_ticks(self, settings):
        """With real-time on, advancing the clock mutates the roster."""
        settings.simulate_realtime = True
        settings.tick_interval_s = 1
        state = AppState(settings=settings, env=simpy.Environment(), rng=np.random.default_rng(3))
        before = state.store.records

        state.advance_clock(200)

        assert state.randomizer.ticks == 199
        assert state.store.records != before
        assert all(r.availability != Availability.SIMULATED_UNAVAILABLE for r in state.store.records)


class TestPageActivity:
    """Test suite for navigation, export and simulation logging."""

    def test_navigation_logged_on_section_change(self, commander_state):
        """Reruns of the same page do not add Navigation entries."""
        assert commander_state.visit("dashboard") is True
        assert commander_state.visit("dashboard") is False
        assert commander_state.visit("personnel") is True

        entries = commander_state.activity_log.read(UserRole.COMMANDER)
        assert [e.details for e in entries if e.action == "Navigation"] == [
            "Accessed personnel page",
            "Accessed dashboard page",
        ]

    def test_navigation_not_logged_when_logged_out(self, app_state):
        assert app_state.visit("dashboard") is False
        assert len(app_state.activity_log) == 0

    def test_logout_resets_current_section(self, commander_state):
        commander_state.visit("dashboard")
        commander_state.logout()
        commander_state.login("commander", "admin123")

        assert commander_state.visit("dashboard") is True

    def test_export_logged_with_count(self, commander_state):
        commander_state.record_export()

        latest = commander_state.activity_log.read(UserRole.COMMANDER)[0]
        assert latest.action == "Export Data"
        assert latest.details == "Exported 10 personnel records"

    def test_simulation_logged_when_parameters_change(self, commander_state):
        """The same scenario rerun is logged once."""
        assert commander_state.record_simulation(2, None) is True
        assert commander_state.record_simulation(2, None) is False
        assert commander_state.record_simulation(2, "Pilot") is True

        entries = commander_state.activity_log.read(UserRole.COMMANDER)
        assert [e.details for e in entries if e.action == "Simulation"] == [
            "Simulated 2 personnel unavailable (Pilot)",
            "Simulated 2 personnel unavailable (All roles)",
        ]
