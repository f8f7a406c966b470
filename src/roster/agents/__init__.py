"""Roster Agent Layer - alerts and forecasts derived from the roster.

Example usage:
    from roster.agents import generate_alerts, generate_insights

    alerts = generate_alerts(store.records)
    insights = generate_insights(store.records)
"""

from .alerts import (
    Alert,
    AlertRule,
    READINESS_RULES,
    RosterMetrics,
    generate_alerts,
)
from .insights import Insight, Recommendation, generate_insights, recommend_for

__all__ = [
    "Alert",
    "AlertRule",
    "READINESS_RULES",
    "RosterMetrics",
    "generate_alerts",
    "Insight",
    "Recommendation",
    "generate_insights",
    "recommend_for",
]
