"""Shared test fixtures for StudyPulse tests.

This module provides common fixtures used across all test modules:
- A fixed clock (Monday 2026-03-16, 12:00)
- Energy sample and history builders
- Context providers with a controllable clock
- Temporary data and config files

Usage:
    def test_something(now, samples_at_hour):
        history = samples_at_hour(9, "high", count=7)
        ...
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from studypulse.config_models import StudyPulseConfig
from studypulse.context.provider import DeviceClass, HostContextProvider, build_context
from studypulse.learning.models import EnergyLevel, EnergySample

# Monday; Sunday-first weekday index 1
BASE_TIME = datetime(2026, 3, 16, 12, 0)


# ─────────────────────────────────────────────────────────────────────────────
# Clock Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def now() -> datetime:
    """Fixed "current time" shared by the builders below."""
    return BASE_TIME


class FakeClock:
    """Callable clock that tests can move forward."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current += timedelta(**kwargs)
        return self.current


@pytest.fixture
def clock(now: datetime) -> FakeClock:
    return FakeClock(now)


# ─────────────────────────────────────────────────────────────────────────────
# Energy History Fixtures
# ─────────────────────────────────────────────────────────────────────────────


def make_sample(
    timestamp: datetime,
    level: EnergyLevel | str = "medium",
    productivity: int | None = None,
    completed: bool | None = None,
) -> EnergySample:
    return EnergySample(
        timestamp=timestamp,
        energy_level=EnergyLevel(level),
        productivity=productivity,
        session_completed=completed,
    )


@pytest.fixture
def sample_factory() -> Callable[..., EnergySample]:
    """Build a single EnergySample.

    Example:
        sample_factory(now, "high", productivity=8, completed=True)
    """
    return make_sample


@pytest.fixture
def samples_at_hour(now: datetime) -> Callable[..., tuple[EnergySample, ...]]:
    """Build `count` samples at the same hour on consecutive days ending today.

    Samples are returned oldest first, all inside the 30-day retention window.
    """

    def _build(
        hour: int,
        level: EnergyLevel | str = "medium",
        count: int = 7,
        *,
        productivity: int | None = None,
        completed: bool | None = None,
    ) -> tuple[EnergySample, ...]:
        day = now.replace(hour=hour, minute=0, second=0, microsecond=0)
        return tuple(
            make_sample(day - timedelta(days=count - 1 - i), level, productivity, completed)
            for i in range(count)
        )

    return _build


# ─────────────────────────────────────────────────────────────────────────────
# Context Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def provider(clock: FakeClock) -> HostContextProvider:
    return HostContextProvider(clock=clock, online=True, device=DeviceClass.DESKTOP)


@pytest.fixture
def context_at() -> Callable[..., object]:
    """Build a RealTimeContext for a given time and device state."""

    def _build(when: datetime, *, online: bool = True, battery: int | None = None):
        provider = HostContextProvider(clock=lambda: when, online=online, battery=battery)
        return build_context(provider)

    return _build


# ─────────────────────────────────────────────────────────────────────────────
# Config and File Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def config() -> StudyPulseConfig:
    return StudyPulseConfig()


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory.

    Returns:
        Path to temporary data directory
    """
    data_dir = tmp_path / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


@pytest.fixture
def history_file(temp_data_dir: Path) -> Path:
    return temp_data_dir / "energy_history.json"
