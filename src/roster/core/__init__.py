"""Core foundation layer: entities, personnel records, the store."""

from roster.core.entities import Availability, UserRole, Severity, MissionStatus
from roster.core.personnel import (
    PersonnelRecord,
    RosterSummary,
    compute_readiness,
    round_half_up,
)
from roster.core.store import PersonnelStore
from roster.core.seed import seed_personnel

__all__ = [
    "Availability",
    "UserRole",
    "Severity",
    "MissionStatus",
    "PersonnelRecord",
    "RosterSummary",
    "compute_readiness",
    "round_half_up",
    "PersonnelStore",
    "seed_personnel",
]
