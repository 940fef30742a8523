"""
Tool: Learning Models
Purpose: Data structures for energy tracking and study analytics

Usage:
    from studypulse.learning.models import (
        EnergyLevel,
        EnergySample,
        EnergyPattern,
        TimeSlot,
        UserPersona,
        ProductivityMetrics,
        EnergyProfile,
    )
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from studypulse.config_models import AdaptivePreferences
from studypulse.learning import ENERGY_SCORES


class EnergyLevel(str, Enum):
    """Self-reported energy, five-point ordinal scale."""

    VERY_LOW = "very-low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very-high"

    @property
    def score(self) -> int:
        """Numeric value on the 1-5 scale."""
        return ENERGY_SCORES[self.value]


class SleepQuality(str, Enum):
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


class MealState(str, Enum):
    EMPTY = "empty"
    LIGHT = "light"
    FULL = "full"


class StressLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PatternType(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"


class PersonaType(str, Enum):
    EARLY_BIRD = "early-bird"
    NIGHT_OWL = "night-owl"
    FLEXIBLE = "flexible"
    INCONSISTENT = "inconsistent"


@dataclass(frozen=True)
class EnergyContext:
    """Optional circumstances captured alongside an energy sample."""

    time_of_day: str | None = None
    day_of_week: int | None = None
    weather: str | None = None
    sleep_quality: SleepQuality | None = None
    caffeine: bool | None = None
    exercise: bool | None = None
    meals: MealState | None = None
    stress: StressLevel | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for key in ("sleep_quality", "meals", "stress"):
            if data[key] is not None:
                data[key] = data[key].value
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EnergyContext":
        data = dict(data)
        if data.get("sleep_quality") is not None:
            data["sleep_quality"] = SleepQuality(data["sleep_quality"])
        if data.get("meals") is not None:
            data["meals"] = MealState(data["meals"])
        if data.get("stress") is not None:
            data["stress"] = StressLevel(data["stress"])
        return cls(**data)


@dataclass(frozen=True)
class EnergySample:
    """
    One energy observation.

    Immutable once created. Histories keep samples in insertion order,
    which is not guaranteed to be chronological.
    """

    timestamp: datetime
    energy_level: EnergyLevel
    context: EnergyContext | None = None
    productivity: int | None = None  # 1-10, how productive the user felt
    session_completed: bool | None = None

    @property
    def score(self) -> int:
        return self.energy_level.score

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "energy_level": self.energy_level.value,
        }
        if self.context is not None:
            data["context"] = self.context.to_dict()
        if self.productivity is not None:
            data["productivity"] = self.productivity
        if self.session_completed is not None:
            data["session_completed"] = self.session_completed
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EnergySample":
        context = data.get("context")
        return cls(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            energy_level=EnergyLevel(data["energy_level"]),
            context=EnergyContext.from_dict(context) if context else None,
            productivity=data.get("productivity"),
            session_completed=data.get("session_completed"),
        )


EnergyHistory = tuple[EnergySample, ...]


@dataclass
class Aggregate:
    """Running count and energy sum for one hour of day or day of week."""

    key: int
    count: int = 0
    energy_sum: int = 0

    @property
    def average(self) -> float:
        return self.energy_sum / self.count if self.count else 0.0

    def confidence(self, threshold: int) -> float:
        """Share of the minimum sample count observed, capped at 1."""
        return min(self.count / threshold, 1.0)


@dataclass(frozen=True)
class PatternEntry:
    time_slot: str  # "09:00" for daily patterns, "Monday" for weekly
    key: int  # hour 0-23 or weekday 0-6 (Sunday = 0)
    average_energy: float
    confidence: float


@dataclass(frozen=True)
class EnergyPattern:
    type: PatternType
    entries: tuple[PatternEntry, ...]
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "pattern": [asdict(e) for e in self.entries],
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class SuitabilityScores:
    """0-100 fit of an hour for each kind of study work."""

    reading: float
    writing: float
    problem_solving: float
    creative: float
    review: float


@dataclass(frozen=True)
class TimeSlot:
    """A recommended one-hour study window."""

    start_hour: int
    end_hour: int
    energy_level: float  # hour average on the 1-5 scale
    suitability_scores: SuitabilityScores
    completion_rate: float = 0.0
    average_productivity: float = 0.0

    def contains(self, hour: int) -> bool:
        return self.start_hour <= hour < self.end_hour

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class UserPersona:
    type: PersonaType
    characteristics: tuple[str, ...]
    optimal_scheduling: tuple[str, ...]
    challenges: tuple[str, ...]
    recommendations: tuple[str, ...]
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type.value
        return data


@dataclass(frozen=True)
class SessionFeedback:
    """Post-session self assessment, every rating on a 1-5 scale."""

    session_id: str
    timestamp: datetime
    focus_rating: int
    difficulty_rating: int = 3
    energy_before: int = 3
    energy_after: int = 3
    environment_rating: int = 3
    satisfaction: int = 3
    distractions: tuple[str, ...] = ()
    notes: str | None = None
    recommend_next_session: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SessionFeedback":
        data = dict(data)
        data["timestamp"] = datetime.fromisoformat(data["timestamp"])
        data["distractions"] = tuple(data.get("distractions", ()))
        return cls(**data)


@dataclass(frozen=True)
class ProductivityMetrics:
    """Normalized 0-100 productivity scores."""

    focus_score: int
    completion_rate: int
    consistency_score: int
    energy_utilization: int
    adaptation_success: int
    streak_quality: int
    time_optimization: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class StudyTask:
    """The slice of a study task the suggestion rules look at."""

    id: str
    title: str
    task_type: str
    status: str = "pending"

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"


@dataclass(frozen=True)
class PersonalizedInsight:
    id: str
    type: str  # energy-pattern, productivity-trend, optimization-opportunity, streak-analysis
    insight: str
    data: dict[str, Any]
    actionable: bool
    confidence: float
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


@dataclass(frozen=True)
class EnergyProfile:
    """
    Per-user aggregate owning the history and everything derived from it.

    Updates replace the whole profile; nothing inside is mutated.
    """

    current_energy_level: EnergyLevel = EnergyLevel.MEDIUM
    energy_history: EnergyHistory = ()
    optimal_study_times: tuple[TimeSlot, ...] = ()
    energy_patterns: tuple[EnergyPattern, ...] = ()
    last_updated: datetime = field(default_factory=datetime.now)
    preferences: AdaptivePreferences = field(default_factory=AdaptivePreferences)

    def pattern(self, pattern_type: PatternType) -> EnergyPattern | None:
        return next((p for p in self.energy_patterns if p.type == pattern_type), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_energy_level": self.current_energy_level.value,
            "energy_history": [s.to_dict() for s in self.energy_history],
            "optimal_study_times": [t.to_dict() for t in self.optimal_study_times],
            "energy_patterns": [p.to_dict() for p in self.energy_patterns],
            "last_updated": self.last_updated.isoformat(),
            "preferences": self.preferences.model_dump(),
        }
