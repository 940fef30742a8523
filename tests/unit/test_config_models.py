"""Tests for studypulse/config_models.py"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from studypulse import ARGS_DIR
from studypulse.config_models import (
    AdaptivePreferences,
    AdaptiveSchedulingConfig,
    ContextualWeights,
    PollingConfig,
    StudyPulseConfig,
    TrackingConfig,
    config_path,
    load_and_validate,
)


class TestAdaptivePreferences:
    def test_defaults(self):
        prefs = AdaptivePreferences()
        assert prefs.suggest_breaks_based_on_energy is True
        assert prefs.auto_reschedule_on_low_energy is False
        assert prefs.preferred_low_energy_activities == ["reading", "review"]
        assert prefs.preferred_high_energy_activities == ["problem-solving", "creative", "writing"]

    def test_unknown_activity_rejected(self):
        with pytest.raises(ValidationError):
            AdaptivePreferences(preferred_low_energy_activities=["napping"])

    def test_extra_keys_allowed(self):
        prefs = AdaptivePreferences(theme="dark")
        assert prefs.suggest_breaks_based_on_energy is True


class TestAdaptiveSchedulingConfig:
    def test_defaults(self):
        config = AdaptiveSchedulingConfig()
        assert config.learning_mode == "active"
        assert config.adaptation_sensitivity == "medium"
        assert config.min_data_points_for_pattern == 7
        assert config.energy_threshold_for_rescheduling == 2
        assert config.contextual_weights.energy == 0.4

    def test_invalid_learning_mode(self):
        with pytest.raises(ValidationError):
            AdaptiveSchedulingConfig(learning_mode="turbo")

    def test_threshold_range(self):
        with pytest.raises(ValidationError):
            AdaptiveSchedulingConfig(energy_threshold_for_rescheduling=6)


class TestContextualWeights:
    def test_default_weights_sum_to_one(self):
        weights = ContextualWeights()
        assert weights.energy + weights.time + weights.environment + weights.history == pytest.approx(1.0)

    def test_valid_override(self):
        weights = ContextualWeights(energy=0.5, time=0.2, environment=0.2, history=0.1)
        assert weights.energy == 0.5

    def test_weights_not_summing_to_one(self):
        with pytest.raises(ValidationError, match="sum to 1.0"):
            ContextualWeights(energy=0.9)

    def test_unknown_weight_rejected(self):
        with pytest.raises(ValidationError):
            ContextualWeights(mood=0.0)


class TestTrackingAndPolling:
    def test_tracking_defaults(self):
        config = TrackingConfig()
        assert config.retention_days == 30
        assert config.metrics_window == 14
        assert config.recent_activity_minutes == 60
        assert config.break_sample_threshold == 4
        assert config.max_suggestions == 5

    def test_polling_defaults(self):
        config = PollingConfig()
        assert config.context_refresh_seconds == 60
        assert config.idle_check_seconds == 10
        assert config.time_check_seconds == 1800

    def test_polling_interval_must_be_positive(self):
        with pytest.raises(ValidationError):
            PollingConfig(idle_check_seconds=0)


# ─────────────────────────────────────────────────────────────────────────────
# Loader
# ─────────────────────────────────────────────────────────────────────────────


class TestLoadAndValidate:
    def test_env_override_path(self, tmp_path, monkeypatch):
        custom = tmp_path / "custom.yaml"
        monkeypatch.setenv("STUDYPULSE_CONFIG", str(custom))
        assert config_path() == custom

    def test_default_path(self, tmp_path, monkeypatch):
        monkeypatch.delenv("STUDYPULSE_CONFIG", raising=False)
        with patch("studypulse.config_models.ARGS_DIR", tmp_path):
            assert config_path() == tmp_path / "studypulse.yaml"

    def test_missing_file_returns_defaults(self, tmp_path):
        config = load_and_validate(tmp_path / "missing.yaml")
        assert isinstance(config, StudyPulseConfig)
        assert config.tracking.retention_days == 30

    def test_valid_yaml_loads(self, tmp_path):
        yaml_file = tmp_path / "studypulse.yaml"
        yaml_file.write_text(
            "studypulse:\n"
            "  tracking:\n"
            "    retention_days: 14\n"
            "  preferences:\n"
            "    auto_reschedule_on_low_energy: true\n"
        )
        config = load_and_validate(yaml_file)
        assert config.tracking.retention_days == 14
        assert config.preferences.auto_reschedule_on_low_energy is True
        assert config.tracking.metrics_window == 14

    def test_yaml_without_top_level_key(self, tmp_path):
        yaml_file = tmp_path / "studypulse.yaml"
        yaml_file.write_text("scheduling:\n  min_data_points_for_pattern: 3\n")
        assert load_and_validate(yaml_file).scheduling.min_data_points_for_pattern == 3

    def test_invalid_values_return_defaults(self, tmp_path):
        yaml_file = tmp_path / "studypulse.yaml"
        yaml_file.write_text("studypulse:\n  tracking:\n    retention_days: -5\n")
        config = load_and_validate(yaml_file)
        assert config.tracking.retention_days == 30

    def test_malformed_yaml_returns_defaults(self, tmp_path):
        yaml_file = tmp_path / "studypulse.yaml"
        yaml_file.write_text("studypulse: [unclosed\n")
        assert isinstance(load_and_validate(yaml_file), StudyPulseConfig)

    def test_empty_yaml_returns_defaults(self, tmp_path):
        yaml_file = tmp_path / "studypulse.yaml"
        yaml_file.write_text("")
        config = load_and_validate(yaml_file)
        assert config.scheduling.min_data_points_for_pattern == 7

    def test_shipped_config_matches_defaults(self):
        config = load_and_validate(ARGS_DIR / "studypulse.yaml")
        assert config.model_dump() == StudyPulseConfig().model_dump()
