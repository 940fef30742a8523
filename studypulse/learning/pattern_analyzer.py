"""
Tool: Pattern Analyzer
Purpose: Derive hourly and weekday energy patterns from the history

Pattern Types:
- daily: average energy per hour of day (0-23)
- weekly: average energy per day of week (Sunday = 0)

Each pattern entry carries a confidence score: the number of samples behind
it divided by a minimum sample count, capped at 1. Each pattern also carries a
one-line recommendation naming its peak hour or day.

With fewer than seven samples there is nothing worth reporting yet and the
analyzer returns an empty list.

Usage:
    from studypulse.learning.pattern_analyzer import analyze_patterns
    patterns = analyze_patterns(history)
"""

from studypulse.learning import (
    DAILY_CONFIDENCE_THRESHOLD,
    DAY_NAMES,
    MIN_SAMPLES_FOR_PATTERN,
    WEEKLY_CONFIDENCE_THRESHOLD,
)
from studypulse.learning.models import (
    Aggregate,
    EnergyHistory,
    EnergyPattern,
    EnergySample,
    PatternEntry,
    PatternType,
)
from studypulse.logging_config import get_logger

logger = get_logger(__name__)


def day_of_week(sample: EnergySample) -> int:
    """Sunday-first weekday index (Sunday = 0)."""
    return (sample.timestamp.weekday() + 1) % 7


def hour_label(hour: int) -> str:
    return f"{hour:02d}:00"


def _aggregate(history: EnergyHistory, key_fn) -> dict[int, Aggregate]:
    # dict keeps first-seen order, which decides ties in find_peak
    aggregates: dict[int, Aggregate] = {}
    for sample in history:
        key = key_fn(sample)
        if key not in aggregates:
            aggregates[key] = Aggregate(key=key)
        agg = aggregates[key]
        agg.count += 1
        agg.energy_sum += sample.score
    return aggregates


def aggregate_by_hour(history: EnergyHistory) -> dict[int, Aggregate]:
    return _aggregate(history, lambda s: s.timestamp.hour)


def aggregate_by_weekday(history: EnergyHistory) -> dict[int, Aggregate]:
    return _aggregate(history, day_of_week)


def find_peak(aggregates: dict[int, Aggregate]) -> int | None:
    """Key with the highest average energy; the first seen wins a tie."""
    if not aggregates:
        return None
    return max(aggregates.values(), key=lambda a: a.average).key


def daily_recommendations(hourly: dict[int, Aggregate]) -> list[str]:
    peak_hour = find_peak(hourly)
    if peak_hour is None:
        return []
    return [f"Your peak energy hour is {peak_hour}:00 - schedule important tasks then"]


def weekly_recommendations(weekly: dict[int, Aggregate]) -> list[str]:
    best_day = find_peak(weekly)
    if best_day is None:
        return []
    return [f"{DAY_NAMES[best_day]} is your most productive day"]


def analyze_patterns(
    history: EnergyHistory, min_samples: int = MIN_SAMPLES_FOR_PATTERN
) -> list[EnergyPattern]:
    """
    Build the daily and weekly energy patterns.

    Args:
        history: Energy samples, any order
        min_samples: Below this many samples no pattern is produced

    Returns:
        [daily, weekly] patterns, or [] when data is insufficient
    """
    if len(history) < min_samples:
        logger.debug(
            f"[PATTERNS] Insufficient data: {len(history)}/{min_samples} samples"
        )
        return []

    hourly = aggregate_by_hour(history)
    daily = EnergyPattern(
        type=PatternType.DAILY,
        entries=tuple(
            PatternEntry(
                time_slot=hour_label(hour),
                key=hour,
                average_energy=agg.average,
                confidence=agg.confidence(DAILY_CONFIDENCE_THRESHOLD),
            )
            for hour, agg in hourly.items()
        ),
        recommendations=tuple(daily_recommendations(hourly)),
    )

    weekly_aggregates = aggregate_by_weekday(history)
    weekly = EnergyPattern(
        type=PatternType.WEEKLY,
        entries=tuple(
            PatternEntry(
                time_slot=DAY_NAMES[day],
                key=day,
                average_energy=agg.average,
                confidence=agg.confidence(WEEKLY_CONFIDENCE_THRESHOLD),
            )
            for day, agg in weekly_aggregates.items()
        ),
        recommendations=tuple(weekly_recommendations(weekly_aggregates)),
    )

    return [daily, weekly]
