"""Tests for the bounded activity log."""

from datetime import datetime, timedelta

import pytest

from roster.activity.log import ActivityLog, EXPORT_COLUMNS, export_filename
from roster.core.entities import UserRole
from roster.core.errors import PermissionDeniedError


class TestActivityLog:
    """Test suite for ActivityLog."""

    def test_record_prepends(self, commander, fixed_now):
        """Newest entry comes first."""
        log = ActivityLog(clock=lambda: fixed_now)

        log.record(commander, "First", "one")
        log.record(commander, "Second", "two")

        entries = log.read(UserRole.COMMANDER)
        assert [e.action for e in entries] == ["Second", "First"]
        assert entries[0].username == "Col. Sarah Johnson"
        assert entries[0].user_id == "1"
        assert entries[0].timestamp == fixed_now

    def test_no_user_is_noop(self):
        """Nothing is recorded without an authenticated user."""
        log = ActivityLog()

        assert log.record(None, "Anything", "ignored") is None
        assert len(log) == 0

    def test_capacity_drops_oldest(self, commander):
        """Only the most recent entries are kept."""
        log = ActivityLog(capacity=100)

        for i in range(150):
            log.record(commander, "Action", str(i))

        entries = log.read(UserRole.COMMANDER)
        assert len(entries) == 100
        assert entries[0].details == "149"
        assert entries[-1].details == "50"

    def test_ids_unique(self, commander, fixed_now):
        """Entries created in the same millisecond still get distinct ids."""
        log = ActivityLog(clock=lambda: fixed_now)

        for _ in range(5):
            log.record(commander, "Action", "x")

        ids = [e.id for e in log.read(UserRole.COMMANDER)]
        assert len(set(ids)) == 5

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ActivityLog(capacity=0)

    def test_read_gated_by_role(self, commander):
        """HR and Commander may read; Medical Officer and nobody may not."""
        log = ActivityLog()
        log.record(commander, "Action", "x")

        assert len(log.read(UserRole.HR)) == 1
        with pytest.raises(PermissionDeniedError):
            log.read(UserRole.MEDICAL_OFFICER)
        with pytest.raises(PermissionDeniedError):
            log.read(None)


class TestLogHelpers:
    """Test suite for filtering and export."""

    @pytest.fixture
    def entries(self, commander, hr_user, fixed_now):
        times = iter(fixed_now + timedelta(seconds=i) for i in range(10))
        log = ActivityLog(clock=lambda: next(times))
        log.record(commander, "Mission Search", "Searched Pilot")
        log.record(hr_user, "Update Personnel", "Updated personnel 001")
        log.record(commander, "Mission Assignment", "Assigned someone")
        return log.read(UserRole.COMMANDER)

    def test_filter_by_action_substring(self, entries):
        """Action filter is a case-insensitive substring match."""
        filtered = ActivityLog.filter(entries, action="mission")

        assert [e.action for e in filtered] == ["Mission Assignment", "Mission Search"]

    def test_filter_by_username(self, entries):
        filtered = ActivityLog.filter(entries, username="david")

        assert len(filtered) == 1
        assert filtered[0].action == "Update Personnel"

    def test_distinct_actions_and_users(self, entries):
        assert ActivityLog.actions(entries) == [
            "Mission Assignment", "Update Personnel", "Mission Search",
        ]
        assert ActivityLog.usernames(entries) == ["Col. Sarah Johnson", "Maj. David Chen"]

    def test_export_csv(self, entries):
        """CSV has the fixed header and one row per entry."""
        lines = ActivityLog.export_csv(entries).strip().splitlines()

        assert lines[0] == ",".join(EXPORT_COLUMNS)
        assert len(lines) == 4
        assert "Mission Assignment" in lines[1]

    def test_export_filename(self):
        assert export_filename(datetime(2025, 1, 15)) == "activity-logs-2025-01-15.csv"
