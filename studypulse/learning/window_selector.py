"""
Tool: Optimal-Window Selector
Purpose: Pick the hours of the day that have worked well for studying

An hour qualifies as an optimal window when, across the history:
- its average energy is at least 3 (medium), and
- at least 70% of its samples ended with a completed session.

Each window carries suitability scores per task type. Problem-solving leans
hardest on energy, reading the least.

Usage:
    from studypulse.learning.window_selector import select_windows
    windows = select_windows(history)
"""

from dataclasses import dataclass

from studypulse.learning import MIN_SAMPLES_FOR_PATTERN
from studypulse.learning.models import EnergyHistory, SuitabilityScores, TimeSlot
from studypulse.logging_config import get_logger

logger = get_logger(__name__)

MIN_WINDOW_ENERGY = 3.0
MIN_COMPLETION_RATE = 0.7

# (energy weight, productivity weight) per task type
SUITABILITY_WEIGHTS = {
    "reading": (20, 5),
    "writing": (25, 10),
    "problem_solving": (30, 15),
    "creative": (25, 12),
    "review": (15, 8),
}


@dataclass
class HourlyPerformance:
    hour: int
    count: int = 0
    energy_sum: int = 0
    productivity_sum: int = 0
    productivity_count: int = 0
    completed: int = 0

    @property
    def average_energy(self) -> float:
        return self.energy_sum / self.count

    @property
    def average_productivity(self) -> float:
        if not self.productivity_count:
            return 0.0
        return self.productivity_sum / self.productivity_count

    @property
    def completion_rate(self) -> float:
        return self.completed / self.count


def suitability_scores(energy: float, productivity: float) -> SuitabilityScores:
    """Weighted energy/productivity fit per task type, capped at 100."""
    return SuitabilityScores(
        **{
            task: min(100.0, energy * e_weight + productivity * p_weight)
            for task, (e_weight, p_weight) in SUITABILITY_WEIGHTS.items()
        }
    )


def hourly_performance(history: EnergyHistory) -> dict[int, HourlyPerformance]:
    performance: dict[int, HourlyPerformance] = {}
    for sample in history:
        hour = sample.timestamp.hour
        perf = performance.setdefault(hour, HourlyPerformance(hour=hour))
        perf.count += 1
        perf.energy_sum += sample.score
        if sample.productivity is not None:
            perf.productivity_sum += sample.productivity
            perf.productivity_count += 1
        if sample.session_completed:
            perf.completed += 1
    return performance


def select_windows(
    history: EnergyHistory, min_samples: int = MIN_SAMPLES_FOR_PATTERN
) -> list[TimeSlot]:
    """
    Recommend one-hour study windows, highest energy first.

    Returns:
        TimeSlots for qualifying hours, or [] when data is insufficient
    """
    if len(history) < min_samples:
        logger.debug(f"[WINDOWS] Insufficient data: {len(history)}/{min_samples} samples")
        return []

    slots = []
    for hour, perf in hourly_performance(history).items():
        if perf.average_energy < MIN_WINDOW_ENERGY or perf.completion_rate < MIN_COMPLETION_RATE:
            continue
        slots.append(
            TimeSlot(
                start_hour=hour,
                end_hour=hour + 1,
                energy_level=perf.average_energy,
                suitability_scores=suitability_scores(
                    perf.average_energy, perf.average_productivity
                ),
                completion_rate=perf.completion_rate,
                average_productivity=perf.average_productivity,
            )
        )

    slots.sort(key=lambda s: s.energy_level, reverse=True)
    return slots
