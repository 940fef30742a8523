"""
Tool: Insights
Purpose: Turn patterns and metrics into short observations for display

Insight Types:
- energy-pattern: the top peak hours (average energy of 4 or more)
- productivity-trend: completion rate below 70%

Usage:
    from studypulse.learning.insights import generate_insights
    insights = generate_insights(profile, metrics)
"""

from datetime import datetime

from studypulse.learning.models import (
    EnergyProfile,
    PatternType,
    PersonalizedInsight,
    ProductivityMetrics,
)

PEAK_ENERGY_THRESHOLD = 4
MAX_PEAK_HOURS = 3
LOW_COMPLETION_RATE = 70


def generate_insights(
    profile: EnergyProfile, metrics: ProductivityMetrics, now: datetime | None = None
) -> list[PersonalizedInsight]:
    ts = now or datetime.now()
    stamp = int(ts.timestamp() * 1000)
    insights = []

    daily = profile.pattern(PatternType.DAILY)
    if daily is not None:
        peaks = sorted(
            (e for e in daily.entries if e.average_energy >= PEAK_ENERGY_THRESHOLD),
            key=lambda e: e.average_energy,
            reverse=True,
        )[:MAX_PEAK_HOURS]

        if peaks:
            slots = ", ".join(e.time_slot for e in peaks)
            insights.append(
                PersonalizedInsight(
                    id=f"peak-hours-{stamp}",
                    type="energy-pattern",
                    insight=(
                        f"Your peak energy hours are {slots}. "
                        "Schedule your most important tasks during these times."
                    ),
                    data={"peak_hours": [e.time_slot for e in peaks]},
                    actionable=True,
                    confidence=0.8,
                    timestamp=ts,
                )
            )

    if metrics.completion_rate < LOW_COMPLETION_RATE:
        insights.append(
            PersonalizedInsight(
                id=f"completion-rate-{stamp}",
                type="productivity-trend",
                insight=(
                    f"Your task completion rate is {metrics.completion_rate}%. "
                    "Consider breaking larger tasks into smaller chunks or adjusting time estimates."
                ),
                data={"completion_rate": metrics.completion_rate},
                actionable=True,
                confidence=0.9,
                timestamp=ts,
            )
        )

    return insights
