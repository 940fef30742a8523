"""Tests for studypulse/cli.py"""

import json

import pytest

from studypulse import __version__
from studypulse.cli import main


@pytest.fixture
def run(history_file, tmp_path, capsys):
    """Run the CLI against a temporary history and default config.

    Returns (exit code, parsed JSON output).
    """

    def _run(*args: str):
        argv = ["--history", str(history_file), "--config", str(tmp_path / "none.yaml"), *args]
        code = main(argv)
        out = capsys.readouterr().out
        return code, json.loads(out)

    return _run


class TestBasics:
    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == f"studypulse {__version__}"

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: studypulse" in capsys.readouterr().out

    def test_invalid_level_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            main(["record", "--level", "sleepy"])


class TestRecordAndRead:
    def test_record_saves_history(self, run, history_file):
        code, result = run("record", "--level", "high", "--productivity", "7", "--completed")

        assert code == 0
        assert result["success"] is True
        assert result["energy_level"] == "high"
        assert result["samples"] == 1

        saved = json.loads(history_file.read_text())
        assert saved["energy_history"][0]["energy_level"] == "high"
        assert saved["energy_history"][0]["session_completed"] is True

    def test_record_with_context(self, run, history_file):
        run("record", "--level", "low", "--sleep", "poor", "--caffeine", "--stress", "high")

        sample = json.loads(history_file.read_text())["energy_history"][0]
        assert sample["context"] == {"sleep_quality": "poor", "caffeine": True, "stress": "high"}

    def test_patterns_need_seven_samples(self, run):
        run("record", "--level", "medium")
        code, result = run("patterns")

        assert code == 0
        assert result["patterns"] == []
        assert "message" in result

    def test_patterns_and_windows_after_a_week(self, run):
        for _ in range(7):
            run("record", "--level", "high", "--completed")

        _, patterns = run("patterns")
        assert [p["type"] for p in patterns["patterns"]] == ["daily", "weekly"]

        _, windows = run("windows")
        assert len(windows["optimal_study_times"]) >= 1
        assert all(w["energy_level"] == 4.0 for w in windows["optimal_study_times"])

    def test_persona_without_data(self, run):
        code, result = run("persona")
        assert code == 0
        assert result["persona"]["type"] == "inconsistent"
        assert result["persona"]["confidence"] == 0.1


class TestMetricsAndInsights:
    def test_metrics_with_feedback(self, run, tmp_path):
        feedback = tmp_path / "feedback.json"
        feedback.write_text(
            json.dumps([{"session_id": "s1", "timestamp": "2026-03-16T10:00:00", "focus_rating": 5}])
        )
        code, result = run("metrics", "--feedback", str(feedback))

        assert code == 0
        assert result["metrics"]["focus_score"] == 100
        assert result["metrics"]["completion_rate"] == 0
        assert result["metrics"]["consistency_score"] == 0

    def test_metrics_missing_feedback_file(self, run, tmp_path):
        code, result = run("metrics", "--feedback", str(tmp_path / "missing.json"))
        assert code == 1
        assert result["success"] is False

    def test_insights_flag_low_completion(self, run):
        run("record", "--level", "medium")
        _, result = run("insights")
        assert [i["type"] for i in result["insights"]] == ["productivity-trend"]


class TestSuggest:
    def test_low_energy_suggestion(self, run):
        code, result = run("suggest", "--level", "very-low")

        assert code == 0
        assert [s["priority"] for s in result["suggestions"]] == ["high"]
        assert result["suggestions"][0]["on_accept"]["command"] == "suggest_light_tasks"

    def test_device_state(self, run):
        _, result = run(
            "suggest",
            "--level",
            "medium",
            "--offline",
            "--battery",
            "15",
            "--user-agent",
            "Mozilla/5.0 (iPad; CPU OS 17_0 like Mac OS X)",
        )

        assert result["context"]["network_status"] == "offline"
        assert result["context"]["device_type"] == "tablet"
        titles = [s["title"] for s in result["suggestions"]]
        assert titles == ["Low Battery Detected", "You're offline"]

    def test_tasks_file(self, run, tmp_path):
        tasks = tmp_path / "tasks.json"
        tasks.write_text(
            json.dumps([{"id": "t1", "title": "Problem set", "task_type": "problem-solving"}])
        )
        _, result = run("suggest", "--level", "high", "--tasks", str(tasks))
        assert [s["on_accept"]["command"] for s in result["suggestions"]] == [
            "start_difficult_task"
        ]

    def test_tasks_file_must_be_list(self, run, tmp_path):
        tasks = tmp_path / "tasks.json"
        tasks.write_text(json.dumps({"id": "t1"}))
        code, result = run("suggest", "--tasks", str(tasks))

        assert code == 1
        assert "JSON list" in result["error"]
