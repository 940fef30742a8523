from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from studypulse import ARGS_DIR
from studypulse.logging_config import get_logger

logger = get_logger(__name__)

TaskTypeName = Literal[
    "reading",
    "writing",
    "problem-solving",
    "creative",
    "review",
    "research",
    "practice",
    "memorization",
]


# =============================================================================
# Adaptive preferences (per-user toggles)
# =============================================================================

class AdaptivePreferences(BaseModel):
    model_config = ConfigDict(extra="allow")
    adjust_difficulty_by_energy: bool = Field(default=True)
    suggest_breaks_based_on_energy: bool = Field(default=True)
    adapt_session_length_by_energy: bool = Field(default=True)
    enable_energy_notifications: bool = Field(default=True)
    auto_reschedule_on_low_energy: bool = Field(default=False)
    preferred_low_energy_activities: list[TaskTypeName] = Field(
        default_factory=lambda: ["reading", "review"]
    )
    preferred_high_energy_activities: list[TaskTypeName] = Field(
        default_factory=lambda: ["problem-solving", "creative", "writing"]
    )


# =============================================================================
# Adaptive scheduling
# =============================================================================

class ContextualWeights(BaseModel):
    model_config = ConfigDict(extra="forbid")
    energy: float = Field(default=0.4, ge=0.0, le=1.0)
    time: float = Field(default=0.3, ge=0.0, le=1.0)
    environment: float = Field(default=0.2, ge=0.0, le=1.0)
    history: float = Field(default=0.1, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _weights_sum_to_one(self) -> "ContextualWeights":
        total = self.energy + self.time + self.environment + self.history
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"contextual weights must sum to 1.0, got {total:.3f}")
        return self


class AdaptiveSchedulingConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    enable_energy_adaptation: bool = Field(default=True)
    enable_contextual_scheduling: bool = Field(default=True)
    learning_mode: Literal["passive", "active", "aggressive"] = Field(default="active")
    adaptation_sensitivity: Literal["low", "medium", "high"] = Field(default="medium")
    min_data_points_for_pattern: int = Field(default=7, ge=1)
    energy_threshold_for_rescheduling: int = Field(default=2, ge=1, le=5)
    contextual_weights: ContextualWeights = Field(default_factory=ContextualWeights)


# =============================================================================
# Tracking windows and polling cadence
# =============================================================================

class TrackingConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    retention_days: int = Field(default=30, ge=1)
    metrics_window: int = Field(default=14, ge=1)
    recent_activity_minutes: int = Field(default=60, ge=1)
    break_sample_threshold: int = Field(default=4, ge=1)
    max_suggestions: int = Field(default=5, ge=1)


class PollingConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    context_refresh_seconds: float = Field(default=60.0, gt=0)
    idle_check_seconds: float = Field(default=10.0, gt=0)
    session_tick_seconds: float = Field(default=60.0, gt=0)
    suggestion_cleanup_seconds: float = Field(default=60.0, gt=0)
    time_check_seconds: float = Field(default=1800.0, gt=0)


class StudyPulseConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    preferences: AdaptivePreferences = Field(default_factory=AdaptivePreferences)
    scheduling: AdaptiveSchedulingConfig = Field(default_factory=AdaptiveSchedulingConfig)
    tracking: TrackingConfig = Field(default_factory=TrackingConfig)
    polling: PollingConfig = Field(default_factory=PollingConfig)


# =============================================================================
# Loader
# =============================================================================

def config_path() -> Path:
    override = os.environ.get("STUDYPULSE_CONFIG")
    if override:
        return Path(override)
    return ARGS_DIR / "studypulse.yaml"


def load_and_validate(path: Path | None = None) -> StudyPulseConfig:
    yaml_path = path or config_path()

    try:
        if yaml_path.exists():
            with open(yaml_path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            raw = {}

        return StudyPulseConfig.model_validate(raw.get("studypulse", raw))
    except (OSError, yaml.YAMLError, ValidationError, AttributeError) as e:
        logger.warning(f"Config validation failed for {yaml_path}: {e}, using defaults")
        return StudyPulseConfig()


__all__ = [
    "AdaptivePreferences",
    "AdaptiveSchedulingConfig",
    "ContextualWeights",
    "PollingConfig",
    "StudyPulseConfig",
    "TrackingConfig",
    "config_path",
    "load_and_validate",
]
