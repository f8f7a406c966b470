"""Activity logging layer."""

from .log import ActivityLog, ActivityLogEntry, DEFAULT_CAPACITY

__all__ = ["ActivityLog", "ActivityLogEntry", "DEFAULT_CAPACITY"]
