"""Predictive insights for strategic planning.

Heuristic forecasts over the current roster: attrition exposure, training
backlog, fitness trend, deployment capacity and critical skill coverage.
Also provides the per-person recommendation shown on a profile.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Sequence

from roster.core.entities import Availability, Severity
from roster.core.personnel import PersonnelRecord, round_half_up

SENIOR_SERVICE_YEARS = 15
URGENT_TRAINING_SCORE = 70
CRITICAL_SKILLS = ("Night Ops", "Emergency Medicine", "Electronic Warfare")
MIN_SKILL_HOLDERS = 3
TRAINING_STALE_DAYS = 90


@dataclass(frozen=True)
class Insight:
    """One forecast card."""
    id: str
    severity: Severity
    title: str
    description: str
    impact: str
    recommendation: str
    timeline: str


@dataclass(frozen=True)
class Recommendation:
    """Profile recommendation and its display level ("red", "yellow", "green")."""
    text: str
    level: str


def _pct(part: int, whole: int) -> int:
    return round_half_up(part / whole * 100) if whole else 0


def generate_insights(records: Sequence[PersonnelRecord]) -> list[Insight]:
    """Build the five forecast cards for the roster.

    Returns an empty list for an empty roster.
    """
    total = len(records)
    if total == 0:
        return []

    insights = []

    senior = [r for r in records if r.years_of_service >= SENIOR_SERVICE_YEARS]
    attrition = _pct(len(senior), total)
    insights.append(Insight(
        id="attrition",
        severity=(Severity.CRITICAL if attrition > 30
                  else Severity.WARNING if attrition > 20 else Severity.INFO),
        title="Attrition Risk Analysis",
        description=(
            f"{attrition}% of personnel have {SENIOR_SERVICE_YEARS}+ years service "
            "and may retire within 2 years"
        ),
        impact=f"Potential loss of {len(senior)} experienced personnel",
        recommendation="Implement knowledge transfer programs and recruitment initiatives",
        timeline="24 months",
    ))

    needs_training = [r for r in records if r.training_score < 80]
    urgent = [r for r in needs_training if r.training_score < URGENT_TRAINING_SCORE]
    insights.append(Insight(
        id="training",
        severity=(Severity.CRITICAL if len(urgent) > 3
                  else Severity.WARNING if len(needs_training) > 5 else Severity.INFO),
        title="Training Requirements Forecast",
        description=(
            f"{len(needs_training)} personnel need training updates, "
            f"{len(urgent)} urgently"
        ),
        impact=(
            f"{_pct(len(needs_training), total)}% of force requires training intervention"
        ),
        recommendation=(
            "Schedule immediate training for critical cases, plan quarterly updates for others"
        ),
        timeline="3-6 months",
    ))

    health_risk = [r for r in records if r.health_score < 75]
    avg_health = round_half_up(sum(r.health_score for r in records) / total)
    insights.append(Insight(
        id="health",
        severity=Severity.WARNING if len(health_risk) > 3 else Severity.INFO,
        title="Health & Fitness Trends",
        description=f"{len(health_risk)} personnel below optimal fitness levels",
        impact=f"Unit fitness average: {avg_health}%",
        recommendation="Implement unit-wide fitness improvement program",
        timeline="6 months",
    ))

    available = [r for r in records if r.availability == Availability.AVAILABLE]
    capacity = _pct(len(available), total)
    insights.append(Insight(
        id="deployment",
        severity=(Severity.CRITICAL if capacity < 60
                  else Severity.WARNING if capacity < 75 else Severity.INFO),
        title="Deployment Capacity Forecast",
        description=f"{capacity}% deployment capacity currently available",
        impact=f"{len(available)} personnel ready for immediate deployment",
        recommendation=(
            "Consider rotation schedule adjustments" if capacity < 60
            else "Maintain current deployment tempo"
        ),
        timeline="1-3 months",
    ))

    coverage = {s: sum(1 for r in records if s in r.skills) for s in CRITICAL_SKILLS}
    gaps = {s: n for s, n in coverage.items() if n < MIN_SKILL_HOLDERS}
    insights.append(Insight(
        id="skills",
        severity=Severity.WARNING if gaps else Severity.INFO,
        title="Critical Skills Analysis",
        description=(
            "Shortages detected in critical skill areas" if gaps
            else "Critical skills adequately covered"
        ),
        impact=", ".join(f"{s}: {n} qualified" for s, n in gaps.items()),
        recommendation=(
            "Prioritize training for critical skill gaps" if gaps
            else "Continue skill development programs"
        ),
        timeline="6-12 months",
    ))

    return insights


def _training_is_stale(record: PersonnelRecord, today: date) -> bool:
    try:
        last = date.fromisoformat(record.last_training_date)
    except ValueError:
        return False
    return last < today - timedelta(days=TRAINING_STALE_DAYS)


def recommend_for(record: PersonnelRecord, today: date) -> Recommendation:
    """First matching recommendation for a person's profile."""
    if record.training_score < URGENT_TRAINING_SCORE:
        return Recommendation(
            "Immediate training required. Schedule refresher course within 30 days.",
            "red",
        )
    if record.health_score < 75:
        return Recommendation(
            "Health assessment recommended. Consider fitness improvement program.",
            "red",
        )
    if record.readiness < 80:
        return Recommendation(
            "Overall readiness below optimal. Review training and health metrics.",
            "red",
        )
    if _training_is_stale(record, today):
        return Recommendation(
            "Training update due soon. Schedule within 60 days to maintain proficiency.",
            "yellow",
        )
    return Recommendation(
        "Personnel performing well. Continue current training schedule.",
        "green",
    )
