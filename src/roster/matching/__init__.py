"""Mission matching layer: candidate scoring and assignment."""

from .scorer import (
    Candidate,
    MissionRequirement,
    MAX_CANDIDATES,
    rank_candidates,
    score_band,
    score_candidate,
)
from .missions import Mission, assign_mission, search_candidates

__all__ = [
    "Candidate",
    "MissionRequirement",
    "MAX_CANDIDATES",
    "rank_candidates",
    "score_band",
    "score_candidate",
    "Mission",
    "assign_mission",
    "search_candidates",
]
