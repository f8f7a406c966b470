"""Bounded activity log.

Records who did what, newest first. The log keeps the most recent
`capacity` entries and silently drops older ones. Reading the whole log
is gated by the "logs" section permission.

Example usage:
    from roster.activity.log import ActivityLog

    log = ActivityLog()
    log.record(user, "Mission Search", "Searched candidates for Pilot")
    entries = log.read(user.role)
"""

import itertools
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import pandas as pd

from roster.auth.accounts import User
from roster.auth.permissions import has_permission
from roster.core.entities import SECTION_LOGS, UserRole
from roster.core.errors import PermissionDeniedError

DEFAULT_CAPACITY = 100

EXPORT_COLUMNS = ["Timestamp", "User", "Action", "Details"]


@dataclass(frozen=True)
class ActivityLogEntry:
    """One immutable audit entry."""
    id: str
    timestamp: datetime
    user_id: str
    username: str
    action: str
    details: str


class ActivityLog:
    """Append-only, newest-first log capped at `capacity` entries.

    Attributes:
        capacity: Maximum number of retained entries.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._clock = clock or datetime.now
        self._entries: list[ActivityLogEntry] = []
        self._seq = itertools.count(1)

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, user: Optional[User], action: str, details: str) -> Optional[ActivityLogEntry]:
        """Prepend an entry for the user.

        Does nothing when there is no authenticated user.

        Returns:
            The new entry, or None if nothing was recorded.
        """
        if user is None:
            return None
        now = self._clock()
        entry = ActivityLogEntry(
            id=f"{int(now.timestamp() * 1000)}-{next(self._seq)}",
            timestamp=now,
            user_id=user.id,
            username=user.name,
            action=action,
            details=details,
        )
        self._entries.insert(0, entry)
        del self._entries[self.capacity:]
        return entry

    def read(self, role: Optional[UserRole]) -> list[ActivityLogEntry]:
        """Return all entries, newest first.

        Raises:
            PermissionDeniedError: If the role may not view the logs section.
        """
        if not has_permission(role, SECTION_LOGS):
            raise PermissionDeniedError("You don't have permission to view activity logs.")
        return list(self._entries)

    @staticmethod
    def filter(
        entries: list[ActivityLogEntry],
        action: str = "",
        username: str = "",
    ) -> list[ActivityLogEntry]:
        """Case-insensitive substring filter on action and username."""
        action, username = action.lower(), username.lower()
        return [
            e for e in entries
            if action in e.action.lower() and username in e.username.lower()
        ]

    @staticmethod
    def actions(entries: list[ActivityLogEntry]) -> list[str]:
        return list(dict.fromkeys(e.action for e in entries))

    @staticmethod
    def usernames(entries: list[ActivityLogEntry]) -> list[str]:
        return list(dict.fromkeys(e.username for e in entries))

    @staticmethod
    def to_dataframe(entries: list[ActivityLogEntry]) -> pd.DataFrame:
        """Tabular view with the export column names."""
        rows = [
            {
                "Timestamp": e.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
                "User": e.username,
                "Action": e.action,
                "Details": e.details,
            }
            for e in entries
        ]
        return pd.DataFrame(rows, columns=EXPORT_COLUMNS)

    @classmethod
    def export_csv(cls, entries: list[ActivityLogEntry]) -> str:
        """CSV text of the given entries."""
        return cls.to_dataframe(entries).to_csv(index=False)


def export_filename(today: datetime) -> str:
    return f"activity-logs-{today.strftime('%Y-%m-%d')}.csv"
