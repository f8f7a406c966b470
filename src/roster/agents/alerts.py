"""Threshold-based roster alerts.

Applies fixed readiness thresholds to a snapshot of the roster. Alerts
are regenerated wholesale whenever the roster changes: one alert per rule
at most, with a stable id per rule so the UI can key on it.

Example usage:
    from roster.agents.alerts import generate_alerts

    for alert in generate_alerts(store.records):
        print(f"[{alert.severity.value}] {alert.title}: {alert.description}")
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional, Sequence

from roster.core.entities import Availability, Severity
from roster.core.personnel import PersonnelRecord, round_half_up

TRAINING_SCORE_MIN = 80
HEALTH_SCORE_MIN = 75


@dataclass(frozen=True)
class Alert:
    """A derived, non-persisted alert."""
    id: str
    severity: Severity
    title: str
    description: str
    timestamp: datetime


@dataclass
class RosterMetrics:
    """Counts and fractions the alert rules are evaluated against."""
    total: int
    training_below_min: int
    health_below_min: int
    unavailable: int
    deployed: int

    @property
    def unavailable_fraction(self) -> float:
        return self.unavailable / self.total if self.total else 0.0

    @property
    def deployed_fraction(self) -> float:
        return self.deployed / self.total if self.total else 0.0

    @property
    def unavailable_pct(self) -> int:
        return round_half_up(self.unavailable_fraction * 100)

    @property
    def deployed_pct(self) -> int:
        return round_half_up(self.deployed_fraction * 100)

    @classmethod
    def from_records(cls, records: Sequence[PersonnelRecord]) -> "RosterMetrics":
        return cls(
            total=len(records),
            training_below_min=sum(1 for r in records if r.training_score < TRAINING_SCORE_MIN),
            health_below_min=sum(1 for r in records if r.health_score < HEALTH_SCORE_MIN),
            unavailable=sum(1 for r in records if r.availability != Availability.AVAILABLE),
            deployed=sum(1 for r in records if r.availability == Availability.DEPLOYED),
        )


@dataclass(frozen=True)
class AlertRule:
    """A single-metric alert threshold.

    Attributes:
        alert_id: Stable id of the alert this rule emits.
        metric: RosterMetrics attribute to check.
        threshold: Value the metric must strictly exceed.
        severity: Severity when triggered.
        title: Short headline.
        description_template: Format string; receives the RosterMetrics
            fields and properties as keyword arguments.
        escalate_above: Optional second threshold on the same metric;
            above it the alert is raised to escalated_severity.
        escalated_severity: Severity used past escalate_above.
    """
    alert_id: str
    metric: str
    threshold: float
    severity: Severity
    title: str
    description_template: str
    escalate_above: Optional[float] = None
    escalated_severity: Optional[Severity] = None

    def evaluate(self, metrics: RosterMetrics, now: datetime) -> Optional[Alert]:
        value = getattr(metrics, self.metric)
        if not value > self.threshold:
            return None
        severity = self.severity
        if self.escalate_above is not None and value > self.escalate_above:
            severity = self.escalated_severity or severity
        return Alert(
            id=self.alert_id,
            severity=severity,
            title=self.title,
            description=self.description_template.format(**_template_fields(metrics)),
            timestamp=now,
        )


def _template_fields(metrics: RosterMetrics) -> dict:
    return {
        "total": metrics.total,
        "training_below_min": metrics.training_below_min,
        "health_below_min": metrics.health_below_min,
        "unavailable": metrics.unavailable,
        "deployed": metrics.deployed,
        "unavailable_pct": metrics.unavailable_pct,
        "deployed_pct": metrics.deployed_pct,
    }


READINESS_RULES = [
    AlertRule(
        alert_id="training-alert",
        metric="training_below_min",
        threshold=0,
        severity=Severity.WARNING,
        escalate_above=3,
        escalated_severity=Severity.CRITICAL,
        title="Training Requirements",
        description_template=(
            "{training_below_min} personnel require immediate training updates"
        ),
    ),
    AlertRule(
        alert_id="health-alert",
        metric="health_below_min",
        threshold=0,
        severity=Severity.WARNING,
        title="Health & Fitness",
        description_template=(
            "{health_below_min} personnel have health scores below 75"
        ),
    ),
    # Compared on the rounded percentage the description reports
    AlertRule(
        alert_id="readiness-alert",
        metric="unavailable_pct",
        threshold=30,
        severity=Severity.CRITICAL,
        title="Readiness Impact",
        description_template=(
            "{unavailable_pct}% of personnel are unavailable, impacting unit readiness"
        ),
    ),
    AlertRule(
        alert_id="deployment-alert",
        metric="deployed_fraction",
        threshold=0.40,
        severity=Severity.WARNING,
        title="Deployment Rotation",
        description_template=(
            "High deployment rate ({deployed} personnel, {deployed_pct}%) "
            "may require rotation planning"
        ),
    ),
]


def _evaluate(rules: Sequence[AlertRule], metrics: RosterMetrics, now: datetime) -> Iterator[Alert]:
    for rule in rules:
        alert = rule.evaluate(metrics, now)
        if alert is not None:
            yield alert


def generate_alerts(
    records: Sequence[PersonnelRecord],
    now: Optional[datetime] = None,
    rules: Optional[Sequence[AlertRule]] = None,
) -> list[Alert]:
    """Evaluate every rule against the roster.

    Args:
        records: Current roster snapshot.
        now: Generation timestamp shared by all alerts. Defaults to now.
        rules: Override rule set. Defaults to READINESS_RULES.

    Returns:
        Triggered alerts in rule order. Empty for an empty roster.
    """
    if not records:
        return []
    now = now or datetime.now()
    metrics = RosterMetrics.from_records(records)
    return list(_evaluate(rules if rules is not None else READINESS_RULES, metrics, now))
