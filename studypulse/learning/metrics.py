"""
Tool: Metrics Aggregator
Purpose: Normalized 0-100 productivity scores from recent history and feedback

Only the most recent 14 samples count (roughly two weeks of check-ins).

Scores:
- focus: mean session focus rating scaled to 0-100 (50 without feedback)
- completion rate: share of samples with a completed session
- consistency: 100 minus 20x the energy variance (0 for an empty window)
- energy utilization: share of high-energy samples that were put to use

Adaptation success, streak quality and time optimization are not modeled yet
and report fixed placeholder values.

Usage:
    from studypulse.learning.metrics import aggregate_metrics
    metrics = aggregate_metrics(profile, feedback)
"""

import math
from collections.abc import Sequence
from statistics import mean, pvariance
from typing import Any

from studypulse.learning.models import (
    EnergyHistory,
    EnergyLevel,
    EnergyProfile,
    ProductivityMetrics,
    SessionFeedback,
)
from studypulse.logging_config import get_logger

logger = get_logger(__name__)

METRICS_WINDOW = 14
DEFAULT_FOCUS_SCORE = 50
DEFAULT_ENERGY_UTILIZATION = 50

# Not yet modeled
PLACEHOLDER_ADAPTATION_SUCCESS = 75
PLACEHOLDER_STREAK_QUALITY = 80
PLACEHOLDER_TIME_OPTIMIZATION = 70

HIGH_ENERGY_LEVELS = (EnergyLevel.HIGH, EnergyLevel.VERY_HIGH)


def _round_half_up(value: float) -> int:
    # round() would send 12.5 to 12
    return math.floor(value + 0.5)


def focus_score(feedback: Sequence[SessionFeedback]) -> float:
    if not feedback:
        return DEFAULT_FOCUS_SCORE
    return mean(f.focus_rating * 20 for f in feedback)


def completion_rate(window: EnergyHistory) -> float:
    if not window:
        return 0.0
    completed = sum(1 for s in window if s.session_completed)
    return completed / len(window) * 100


def consistency_score(window: EnergyHistory) -> float:
    if not window:
        return 0.0
    variance = pvariance([s.score for s in window])
    return max(0.0, 100 - variance * 20)


def energy_utilization(window: EnergyHistory) -> float:
    high = [s for s in window if s.energy_level in HIGH_ENERGY_LEVELS]
    if not high:
        return DEFAULT_ENERGY_UTILIZATION
    used = sum(1 for s in high if s.session_completed)
    return used / len(high) * 100


def aggregate_metrics(
    source: EnergyProfile | EnergyHistory,
    feedback: Sequence[SessionFeedback] = (),
    plans: Sequence[Any] = (),
    window_size: int = METRICS_WINDOW,
) -> ProductivityMetrics:
    """
    Compute productivity metrics.

    Args:
        source: A profile, or its energy history
        feedback: Recent session feedback
        plans: Study plans (not scored yet)
        window_size: How many of the most recent samples to score

    Returns:
        ProductivityMetrics with integer 0-100 scores
    """
    history = source.energy_history if isinstance(source, EnergyProfile) else source
    window = tuple(history[-window_size:]) if window_size else ()

    if not window:
        logger.debug("[METRICS] Empty sample window, using defaults")

    return ProductivityMetrics(
        focus_score=_round_half_up(focus_score(feedback)),
        completion_rate=_round_half_up(completion_rate(window)),
        consistency_score=_round_half_up(consistency_score(window)),
        energy_utilization=_round_half_up(energy_utilization(window)),
        adaptation_success=PLACEHOLDER_ADAPTATION_SUCCESS,
        streak_quality=PLACEHOLDER_STREAK_QUALITY,
        time_optimization=PLACEHOLDER_TIME_OPTIMIZATION,
    )
