"""Core entity definitions for the dashboard.

This module contains enums and section identifiers that are used across
the codebase, placed here to avoid circular imports.
"""

from enum import Enum


class Availability(Enum):
    """Deployability state of a person.

    SIMULATED_UNAVAILABLE only ever appears inside the what-if simulator's
    working copy of the roster; it is never written to the store.
    """
    AVAILABLE = "Available"
    DEPLOYED = "Deployed"
    LEAVE = "Leave"
    MEDICAL = "Medical"
    SIMULATED_UNAVAILABLE = "Simulated Unavailable"

    @classmethod
    def roster_states(cls) -> list["Availability"]:
        """States a stored record may hold (excludes the simulation state)."""
        return [cls.AVAILABLE, cls.DEPLOYED, cls.LEAVE, cls.MEDICAL]


class UserRole(Enum):
    """Fixed dashboard roles with static capabilities."""
    COMMANDER = "Commander"
    HR = "HR"
    MEDICAL_OFFICER = "Medical Officer"


class Severity(Enum):
    """Alert and insight severity, least to most urgent."""
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class MissionStatus(Enum):
    """Lifecycle of a mission record."""
    PLANNING = "Planning"
    ACTIVE = "Active"
    COMPLETED = "Completed"


# Section identifiers. Kept as plain strings so new pages can be gated
# without touching the permission evaluator.
SECTION_DASHBOARD = "dashboard"
SECTION_PERSONNEL = "personnel"
SECTION_MISSIONS = "missions"
SECTION_INSIGHTS = "insights"
SECTION_SIMULATOR = "simulator"
SECTION_LOGS = "logs"
SECTION_SETTINGS = "settings"
SECTION_MEDICAL_DETAILS = "medical-details"
SECTION_HEALTH_SCORES = "health-scores"
SECTION_EXPORT = "export"

# Navigation table: (section id, label) in sidebar order
NAVIGATION = [
    (SECTION_DASHBOARD, "Dashboard"),
    (SECTION_PERSONNEL, "Personnel"),
    (SECTION_MISSIONS, "Mission Assignment"),
    (SECTION_INSIGHTS, "Predictive Insights"),
    (SECTION_SIMULATOR, "What-If Simulator"),
    (SECTION_LOGS, "Activity Logs"),
    (SECTION_SETTINGS, "Settings"),
]

# Roles assessed by the mission-capability check
CRITICAL_ROLES = ("Pilot", "Medic", "Engineer")
