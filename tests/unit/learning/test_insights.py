"""Tests for studypulse/learning/insights.py"""

from studypulse.learning.insights import generate_insights
from studypulse.learning.metrics import aggregate_metrics
from studypulse.learning.models import (
    EnergyPattern,
    EnergyProfile,
    PatternEntry,
    PatternType,
    ProductivityMetrics,
)
from studypulse.learning.pattern_analyzer import analyze_patterns


def metrics_with(completion_rate: int) -> ProductivityMetrics:
    return ProductivityMetrics(
        focus_score=50,
        completion_rate=completion_rate,
        consistency_score=100,
        energy_utilization=50,
        adaptation_success=75,
        streak_quality=80,
        time_optimization=70,
    )


def profile_with(averages: dict[int, float]) -> EnergyProfile:
    daily = EnergyPattern(
        type=PatternType.DAILY,
        entries=tuple(
            PatternEntry(f"{hour:02d}:00", hour, avg, 1.0) for hour, avg in averages.items()
        ),
    )
    return EnergyProfile(energy_patterns=(daily,))


class TestGenerateInsights:
    def test_nothing_to_say(self, now):
        assert generate_insights(EnergyProfile(), metrics_with(90), now=now) == []

    def test_peak_hours_top_three(self, now):
        profile = profile_with({7: 4.0, 9: 5.0, 11: 4.5, 14: 4.2, 20: 2.0})
        insights = generate_insights(profile, metrics_with(90), now=now)

        assert len(insights) == 1
        insight = insights[0]
        assert insight.type == "energy-pattern"
        assert insight.data == {"peak_hours": ["09:00", "11:00", "14:00"]}
        assert "09:00, 11:00, 14:00" in insight.insight
        assert insight.confidence == 0.8
        assert insight.actionable is True
        assert insight.id.startswith("peak-hours-")

    def test_no_peak_hours_below_four(self, now):
        profile = profile_with({9: 3.9, 15: 3.0})
        assert generate_insights(profile, metrics_with(90), now=now) == []

    def test_low_completion_rate(self, now):
        insights = generate_insights(EnergyProfile(), metrics_with(40), now=now)

        assert len(insights) == 1
        assert insights[0].type == "productivity-trend"
        assert insights[0].data == {"completion_rate": 40}
        assert "40%" in insights[0].insight
        assert insights[0].confidence == 0.9

    def test_completion_rate_of_70_is_fine(self, now):
        assert generate_insights(EnergyProfile(), metrics_with(70), now=now) == []

    def test_both_insights_share_timestamp(self, now, samples_at_hour):
        history = samples_at_hour(9, "very-high", count=7, completed=False)
        profile = EnergyProfile(
            energy_history=history, energy_patterns=tuple(analyze_patterns(history))
        )
        insights = generate_insights(profile, aggregate_metrics(profile), now=now)

        assert [i.type for i in insights] == ["energy-pattern", "productivity-trend"]
        assert all(i.timestamp == now for i in insights)
        assert insights[0].to_dict()["timestamp"] == now.isoformat()
