"""Mission search and assignment workflow.

Wraps the candidate scorer with the checks and side effects the mission
page needs: input validation, activity logging, and deploying the chosen
candidates through the store's update entry point.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from roster.core.entities import Availability, MissionStatus
from roster.core.errors import AssignmentError, SearchCriteriaError
from roster.matching.scorer import Candidate, MissionRequirement, rank_candidates

if TYPE_CHECKING:
    from roster.state import AppState

logger = logging.getLogger(__name__)

UNNAMED_MISSION = "Unnamed Mission"


@dataclass
class Mission:
    """A mission created by an assignment."""
    id: str
    name: str
    required_role: str
    required_skills: list[str] = field(default_factory=list)
    assigned_personnel: list[str] = field(default_factory=list)
    status: MissionStatus = MissionStatus.PLANNING


def search_candidates(state: "AppState", requirement: MissionRequirement) -> list[Candidate]:
    """Rank candidates for the requirement and log the search.

    Raises:
        SearchCriteriaError: If neither a role nor any skill was given.
    """
    if requirement.is_empty:
        raise SearchCriteriaError("Please select a role or skills requirement")

    candidates = rank_candidates(requirement, state.store.records)
    state.record_activity(
        "Mission Search",
        f"Searched candidates for {requirement.required_role or ''} with skills: "
        f"{', '.join(requirement.required_skills)}",
    )
    return candidates


def assign_mission(
    state: "AppState",
    candidate_ids: list[str],
    requirement: MissionRequirement,
    mission_name: str = "",
) -> Mission:
    """Deploy the selected candidates and record the mission.

    Args:
        state: Application state holding the store and log.
        candidate_ids: Ids of the selected personnel.
        requirement: The requirement the candidates were found for.
        mission_name: Optional display name.

    Returns:
        The new Mission (status Active).

    Raises:
        AssignmentError: If no candidates were selected.
        KeyError: If an id is not on the roster. Nothing is changed.
    """
    if not candidate_ids:
        raise AssignmentError("Please select at least one candidate")

    # Resolve every id first so an unknown id mutates nothing
    people = [state.store.get(pid) for pid in candidate_ids]

    for person in people:
        state.update_personnel(person.id, availability=Availability.DEPLOYED)

    name = mission_name.strip() or UNNAMED_MISSION
    mission = Mission(
        id=f"mission-{uuid.uuid4().hex[:8]}",
        name=name,
        required_role=requirement.required_role or "",
        required_skills=list(requirement.required_skills),
        assigned_personnel=[p.id for p in people],
        status=MissionStatus.ACTIVE,
    )
    state.add_mission(mission)

    assigned_names = ", ".join(p.name for p in people)
    state.record_activity(
        "Mission Assignment", f"Assigned {assigned_names} to mission: {name}"
    )
    logger.info(f"Assigned {len(people)} personnel to mission '{name}'")
    return mission
