"""Simulation layer: what-if readiness engine and the roster randomizer."""

from roster.simulation.what_if import (
    MissionCapability,
    RoleImpact,
    SimulationResult,
    max_simulated_unavailable,
    select_for_removal,
    simulate_unavailability,
)
from roster.simulation.randomizer import (
    DEFAULT_TICK_INTERVAL_S,
    RosterRandomizer,
    start_randomizer,
)

__all__ = [
    "MissionCapability",
    "RoleImpact",
    "SimulationResult",
    "max_simulated_unavailable",
    "select_for_removal",
    "simulate_unavailability",
    "DEFAULT_TICK_INTERVAL_S",
    "RosterRandomizer",
    "start_randomizer",
]
