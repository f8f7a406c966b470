"""
Pj ROSTER - Personnel Readiness and Mission Matching.

A role-gated personnel dashboard: roster management, mission candidate
scoring, what-if readiness simulation and threshold alerts, built with
Streamlit and SimPy.
"""

__version__ = "0.1.0"

from roster.state import AppState
from roster.matching.scorer import MissionRequirement, rank_candidates
from roster.simulation.what_if import simulate_unavailability

__all__ = [
    "AppState",
    "MissionRequirement",
    "rank_candidates",
    "simulate_unavailability",
    "__version__",
]
