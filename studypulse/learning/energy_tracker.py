"""
Tool: Energy Tracker
Purpose: Keep a rolling 30-day history of self-reported energy

The history is append-only and time-windowed. Each record call stamps the new
sample with the current time and prunes anything older than the retention
window right away, so a stored history never carries stale samples.

Recording at the profile level also refreshes everything derived from the
history (patterns and optimal study windows), replacing the profile as a
whole rather than editing it.

Usage:
    from studypulse.learning import energy_tracker

    history = energy_tracker.record((), "high", productivity=7, completed=True)
    profile = energy_tracker.record_energy_data(profile, "low")

Dependencies:
    - pattern_analyzer, window_selector (sibling modules)
"""

import json
from dataclasses import replace
from datetime import datetime, timedelta
from pathlib import Path

from studypulse.config_models import AdaptivePreferences, StudyPulseConfig
from studypulse.learning import MIN_SAMPLES_FOR_PATTERN, RETENTION_DAYS
from studypulse.learning.models import (
    EnergyContext,
    EnergyHistory,
    EnergyLevel,
    EnergyProfile,
    EnergySample,
)
from studypulse.learning.pattern_analyzer import analyze_patterns
from studypulse.learning.window_selector import select_windows
from studypulse.logging_config import get_logger

logger = get_logger(__name__)


def prune(history: EnergyHistory, now: datetime, retention_days: int = RETENTION_DAYS) -> EnergyHistory:
    """Drop samples strictly older than the retention window."""
    cutoff = now - timedelta(days=retention_days)
    return tuple(s for s in history if s.timestamp >= cutoff)


def record(
    history: EnergyHistory,
    level: EnergyLevel | str,
    context: EnergyContext | None = None,
    productivity: int | None = None,
    completed: bool | None = None,
    *,
    now: datetime | None = None,
    retention_days: int = RETENTION_DAYS,
) -> EnergyHistory:
    """
    Append a new energy sample and prune the history.

    Args:
        history: Existing history (left untouched)
        level: Energy level name or EnergyLevel
        context: Optional circumstances (sleep, caffeine, ...)
        productivity: Optional 1-10 productivity rating
        completed: Whether the study session was completed
        now: Timestamp for the new sample (defaults to now)
        retention_days: Samples older than this are dropped

    Returns:
        New history tuple ending with the new sample
    """
    ts = now or datetime.now()
    sample = EnergySample(
        timestamp=ts,
        energy_level=EnergyLevel(level),
        context=context,
        productivity=productivity,
        session_completed=completed,
    )

    updated = prune((*history, sample), ts, retention_days)

    dropped = len(history) + 1 - len(updated)
    if dropped:
        logger.debug(f"[ENERGY] Pruned {dropped} samples older than {retention_days}d")

    return updated


def initialize_profile(
    preferences: AdaptivePreferences | None = None, now: datetime | None = None
) -> EnergyProfile:
    """Create an empty profile with medium energy and default preferences."""
    return EnergyProfile(
        current_energy_level=EnergyLevel.MEDIUM,
        last_updated=now or datetime.now(),
        preferences=preferences or AdaptivePreferences(),
    )


def record_energy_data(
    profile: EnergyProfile,
    level: EnergyLevel | str,
    context: EnergyContext | None = None,
    productivity: int | None = None,
    completed: bool | None = None,
    *,
    now: datetime | None = None,
    config: StudyPulseConfig | None = None,
) -> EnergyProfile:
    """
    Record a sample on a profile and recompute everything derived from it.

    Returns:
        A new EnergyProfile; the input profile is not modified
    """
    ts = now or datetime.now()
    retention_days = config.tracking.retention_days if config else RETENTION_DAYS
    min_samples = (
        config.scheduling.min_data_points_for_pattern if config else MIN_SAMPLES_FOR_PATTERN
    )

    history = record(
        profile.energy_history,
        level,
        context,
        productivity,
        completed,
        now=ts,
        retention_days=retention_days,
    )

    logger.info(
        f"[ENERGY] Recorded {EnergyLevel(level).value} energy "
        f"({len(history)} samples in window)"
    )

    return replace(
        profile,
        current_energy_level=EnergyLevel(level),
        energy_history=history,
        last_updated=ts,
        energy_patterns=tuple(analyze_patterns(history, min_samples)),
        optimal_study_times=tuple(select_windows(history, min_samples)),
    )


def rebuild_profile(
    history: EnergyHistory,
    *,
    now: datetime | None = None,
    config: StudyPulseConfig | None = None,
) -> EnergyProfile:
    """
    Rebuild a profile from a stored history.

    The current level is the level of the last sample, or medium when the
    history is empty.
    """
    ts = now or datetime.now()
    config = config or StudyPulseConfig()
    min_samples = config.scheduling.min_data_points_for_pattern
    history = prune(tuple(history), ts, config.tracking.retention_days)

    return EnergyProfile(
        current_energy_level=history[-1].energy_level if history else EnergyLevel.MEDIUM,
        energy_history=history,
        optimal_study_times=tuple(select_windows(history, min_samples)),
        energy_patterns=tuple(analyze_patterns(history, min_samples)),
        last_updated=ts,
        preferences=config.preferences,
    )


def load_history(path: Path) -> EnergyHistory:
    """Read a history saved by save_history. A missing file is an empty history."""
    if not path.exists():
        return ()
    with open(path) as f:
        data = json.load(f)
    return tuple(EnergySample.from_dict(item) for item in data.get("energy_history", []))


def save_history(path: Path, history: EnergyHistory) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump({"energy_history": [s.to_dict() for s in history]}, f, indent=2)
