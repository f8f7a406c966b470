"""What-if readiness simulator.

Takes N available people offline (optionally from one role) and reports
the effect on unit readiness, capacity, per-role availability and
mission capability. The most ready people are removed first, which
models the worst-case operational impact.

The roster passed in is never modified; the simulator works on a copy.

Example usage:
    from roster.simulation.what_if import simulate_unavailability

    result = simulate_unavailability(store.records, count=3, role="Pilot")
    print(result.readiness_impact, result.capacity_impact)
    for cap in result.mission_capability:
        print(cap.role, cap.capability, cap.status)
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from roster.core.entities import CRITICAL_ROLES, Availability
from roster.core.personnel import PersonnelRecord, round_half_up

# At most this share of the roster may be simulated as unavailable
MAX_UNAVAILABLE_FRACTION = 0.5

# Role loses "critical" status above this percentage drop
ROLE_CRITICAL_IMPACT = 50

# Mission capability status thresholds (percent of role available)
OPERATIONAL_THRESHOLD = 75
LIMITED_THRESHOLD = 50


@dataclass
class RoleImpact:
    """Availability change for one role."""
    role: str
    original_count: int
    new_count: int
    impact: int
    critical: bool


@dataclass
class MissionCapability:
    """Capability of a mission-critical role after the simulation."""
    role: str
    available: int
    total: int
    capability: int
    status: str  # "Operational" | "Limited" | "Critical"


@dataclass
class SimulationResult:
    """Aggregate what-if snapshot.

    Attributes:
        original_readiness: Mean readiness of the whole roster (rounded).
        new_readiness: Mean readiness of those still available (rounded),
            0 if nobody is, or original_readiness when count is 0.
        readiness_impact: round(original mean - new mean); 0 when count
            is 0.
        capacity_impact: Percentage of the roster newly unavailable.
        role_impact: One entry per distinct role, roster order.
        mission_capability: One entry per mission-critical role.
        affected_personnel: How many people were actually taken offline.
        selected_ids: Ids of those people, in selection order.
        remaining_capable: Number of people still available.
    """
    original_readiness: int
    new_readiness: int
    readiness_impact: int
    capacity_impact: int
    role_impact: list[RoleImpact] = field(default_factory=list)
    mission_capability: list[MissionCapability] = field(default_factory=list)
    affected_personnel: int = 0
    selected_ids: list[str] = field(default_factory=list)
    remaining_capable: int = 0


def max_simulated_unavailable(total_personnel: int) -> int:
    """Largest N the simulator accepts for a roster of this size."""
    return math.floor(total_personnel * MAX_UNAVAILABLE_FRACTION)


def select_for_removal(
    records: Sequence[PersonnelRecord],
    count: int,
    role: Optional[str] = None,
) -> list[PersonnelRecord]:
    """Pick the people the simulation takes offline.

    Available people (optionally of one role), most ready first; ties
    keep roster order.
    """
    pool = [r for r in records if r.is_available and (not role or r.role == role)]
    pool = sorted(pool, key=lambda r: r.readiness, reverse=True)
    return pool[:min(count, len(pool))]


def _mean_readiness(records: Sequence[PersonnelRecord]) -> float:
    if not records:
        return 0.0
    return sum(r.readiness for r in records) / len(records)


def _capability_status(capability: int) -> str:
    if capability >= OPERATIONAL_THRESHOLD:
        return "Operational"
    elif capability >= LIMITED_THRESHOLD:
        return "Limited"
    return "Critical"


def simulate_unavailability(
    records: Sequence[PersonnelRecord],
    count: int,
    role: Optional[str] = None,
) -> SimulationResult:
    """Run the what-if scenario.

    Args:
        records: Current roster (not modified).
        count: Number of people to take offline.
        role: Restrict the removal pool to this role. None or "" for all.

    Returns:
        SimulationResult with every aggregate recomputed from scratch.

    Raises:
        ValueError: If count is negative or above max_simulated_unavailable().
    """
    total = len(records)
    limit = max_simulated_unavailable(total)
    if count < 0 or count > limit:
        raise ValueError(f"count must be between 0 and {limit}, got {count}")

    selected = select_for_removal(records, count, role)
    selected_ids = {r.id for r in selected}

    simulated = [
        r.with_changes(availability=Availability.SIMULATED_UNAVAILABLE)
        if r.id in selected_ids else r
        for r in records
    ]

    available_before = [r for r in records if r.is_available]
    available_after = [r for r in simulated if r.is_available]

    original_mean = _mean_readiness(records)
    if count == 0:
        # Empty scenario: the baseline itself
        new_mean = original_mean
    else:
        new_mean = _mean_readiness(available_after)

    if total:
        capacity = (len(available_before) - len(available_after)) / total * 100
    else:
        capacity = 0.0

    role_impact = []
    for role_name in dict.fromkeys(r.role for r in records):
        before = sum(1 for r in available_before if r.role == role_name)
        after = sum(1 for r in available_after if r.role == role_name)
        impact = (before - after) / before * 100 if before > 0 else 0.0
        role_impact.append(RoleImpact(
            role=role_name,
            original_count=before,
            new_count=after,
            impact=round_half_up(impact),
            critical=impact > ROLE_CRITICAL_IMPACT,
        ))

    mission_capability = []
    for role_name in CRITICAL_ROLES:
        available = sum(1 for r in available_after if r.role == role_name)
        role_total = sum(1 for r in records if r.role == role_name)
        capability = round_half_up(available / role_total * 100) if role_total > 0 else 100
        mission_capability.append(MissionCapability(
            role=role_name,
            available=available,
            total=role_total,
            capability=capability,
            status=_capability_status(capability),
        ))

    return SimulationResult(
        original_readiness=round_half_up(original_mean),
        new_readiness=round_half_up(new_mean),
        readiness_impact=round_half_up(original_mean - new_mean),
        capacity_impact=round_half_up(capacity),
        role_impact=role_impact,
        mission_capability=mission_capability,
        affected_personnel=len(selected),
        selected_ids=[r.id for r in selected],
        remaining_capable=len(available_after),
    )
