"""Candidate scoring for mission assignment.

Each available person is scored out of 100 against a mission requirement:

    role match         40  exact, case-sensitive
    skills coverage    30  share of required skills held
    readiness          20  readiness x 0.2
    experience         10  2 per year of service, capped

Anyone not Available scores 0. Weights are fixed.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from roster.core.personnel import PersonnelRecord, round_half_up

ROLE_POINTS = 40
SKILL_POINTS = 30
READINESS_WEIGHT = 0.2
EXPERIENCE_POINTS_PER_YEAR = 2
EXPERIENCE_CAP = 10

MAX_CANDIDATES = 5


@dataclass(frozen=True)
class MissionRequirement:
    """What a mission needs.

    Attributes:
        required_role: Role to match exactly, or None for any role.
        required_skills: Skills to look for. Empty means skills add nothing.
    """
    required_role: Optional[str] = None
    required_skills: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "required_skills", tuple(self.required_skills))

    @property
    def is_empty(self) -> bool:
        return not self.required_role and not self.required_skills


@dataclass(frozen=True)
class Candidate:
    """A person paired with their match score and its explanation."""
    record: PersonnelRecord
    score: int
    rationale: str


def score_candidate(requirement: MissionRequirement, record: PersonnelRecord) -> Candidate:
    """Score one person against the requirement.

    Returns:
        Candidate with the total score and a comma-separated rationale
        listing each contribution.
    """
    if not record.is_available:
        return Candidate(
            record=record,
            score=0,
            rationale=f"Not available ({record.availability.value})",
        )

    score = 0
    factors = []

    if requirement.required_role is not None and record.role == requirement.required_role:
        score += ROLE_POINTS
        factors.append(f"Role match (+{ROLE_POINTS})")

    required = requirement.required_skills
    matched = [s for s in required if s in record.skills]
    skill_score = round_half_up(len(matched) / max(len(required), 1) * SKILL_POINTS)
    score += skill_score
    if skill_score > 0:
        factors.append(f"Skills match: {len(matched)}/{len(required)} (+{skill_score})")

    readiness_score = round_half_up(record.readiness * READINESS_WEIGHT)
    score += readiness_score
    factors.append(f"Readiness {record.readiness}% (+{readiness_score})")

    experience_score = max(
        0, min(record.years_of_service * EXPERIENCE_POINTS_PER_YEAR, EXPERIENCE_CAP)
    )
    score += experience_score
    factors.append(f"Experience {record.years_of_service} years (+{experience_score})")

    return Candidate(record=record, score=score, rationale=", ".join(factors))


def rank_candidates(
    requirement: MissionRequirement,
    records: Iterable[PersonnelRecord],
    limit: int = MAX_CANDIDATES,
) -> list[Candidate]:
    """Score everyone, drop zero scores, return the best `limit`.

    Ties keep roster order (sorted() is stable).
    """
    scored = [score_candidate(requirement, r) for r in records]
    scored = [c for c in scored if c.score > 0]
    scored = sorted(scored, key=lambda c: c.score, reverse=True)
    return scored[:limit]


def score_band(score: int) -> str:
    """Display band for a match score."""
    if score >= 80:
        return "excellent"
    elif score >= 60:
        return "good"
    elif score >= 40:
        return "fair"
    return "poor"
