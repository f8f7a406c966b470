"""Personnel record dataclass and score helpers."""

import math
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Optional

from roster.core.entities import Availability


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (84.5 -> 85).

    Python's built-in round() uses banker's rounding, which disagrees
    with the seed data for half-point averages.
    """
    return int(math.floor(value + 0.5))


def compute_readiness(health_score: float, training_score: float) -> int:
    """Readiness is the rounded mean of health and training."""
    return round_half_up((health_score + training_score) / 2)


@dataclass(frozen=True)
class PersonnelRecord:
    """A single person on the roster.

    Records are immutable; every change produces a new record through
    with_changes(), and readiness is recomputed on construction so it can
    never drift from health and training.

    Attributes:
        id: Stable identity used for updates.
        name: Display name including rank abbreviation.
        rank: Full rank title.
        role: Trade (Pilot, Engineer, ...). Open set.
        skills: Skill tags.
        health_score: 0-100.
        training_score: 0-100.
        readiness: Derived, round_half_up((health + training) / 2).
        availability: Current deployability state.
        years_of_service: Whole years served.
        deployment_status: Free-text location/deployment note.
        last_training_date: ISO date (YYYY-MM-DD).
        medical_restrictions: Restriction descriptions.
        location: Optional base name.
        phone_number: Optional contact number.
        email: Optional contact address.
    """
    id: str
    name: str
    rank: str
    role: str
    skills: tuple[str, ...] = ()
    health_score: int = 0
    training_score: int = 0
    readiness: int = 0
    availability: Availability = Availability.AVAILABLE
    years_of_service: int = 0
    deployment_status: str = ""
    last_training_date: str = ""
    medical_restrictions: tuple[str, ...] = ()
    location: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None

    def __post_init__(self):
        # Accept lists from callers and keep the record hashable
        object.__setattr__(self, "skills", tuple(self.skills))
        object.__setattr__(
            self, "medical_restrictions", tuple(self.medical_restrictions)
        )
        if not isinstance(self.availability, Availability):
            object.__setattr__(
                self, "availability", Availability(self.availability)
            )
        object.__setattr__(
            self,
            "readiness",
            compute_readiness(self.health_score, self.training_score),
        )

    @property
    def is_available(self) -> bool:
        return self.availability == Availability.AVAILABLE

    def with_changes(self, **changes: Any) -> "PersonnelRecord":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Full-fidelity plain dict (JSON-serialisable)."""
        data = asdict(self)
        data["skills"] = list(self.skills)
        data["medical_restrictions"] = list(self.medical_restrictions)
        data["availability"] = self.availability.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PersonnelRecord":
        """Build a record from a to_dict() payload.

        Unknown keys are ignored so older backups still load.
        """
        known = {f for f in cls.__dataclass_fields__}
        kwargs = {k: v for k, v in data.items() if k in known}
        return cls(**kwargs)


@dataclass
class RosterSummary:
    """Headline numbers for the dashboard stat cards."""
    total: int = 0
    available: int = 0
    deployed: int = 0
    readiness: int = 0
    avg_health: int = 0
    avg_training: int = 0
    by_availability: dict[str, int] = field(default_factory=dict)
