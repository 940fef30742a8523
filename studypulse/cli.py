#!/usr/bin/env python3
"""
StudyPulse Command Line Interface

Main entry point for the `studypulse` command. Every command prints a JSON
result with a success flag.

Usage:
    studypulse record --level high --productivity 7 --completed
    studypulse patterns
    studypulse windows
    studypulse persona
    studypulse metrics --feedback feedback.json
    studypulse suggest --tasks tasks.json --offline --battery 15
    studypulse insights
    studypulse --version
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from studypulse import PROJECT_ROOT, __version__
from studypulse.config_models import StudyPulseConfig, load_and_validate
from studypulse.context.provider import (
    HostContextProvider,
    build_context,
    device_class_from_user_agent,
)
from studypulse.learning import ENERGY_LEVELS
from studypulse.learning import energy_tracker
from studypulse.learning.insights import generate_insights
from studypulse.learning.metrics import aggregate_metrics
from studypulse.learning.models import (
    EnergyContext,
    MealState,
    SessionFeedback,
    SleepQuality,
    StressLevel,
    StudyTask,
)
from studypulse.learning.persona import classify_persona
from studypulse.logging_config import get_logger, setup_logging
from studypulse.suggestions.generator import device_suggestions, generate_suggestions
from studypulse.suggestions.queue import SuggestionQueue

logger = get_logger(__name__)

DEFAULT_HISTORY_PATH = PROJECT_ROOT / "data" / "energy_history.json"


def _load_json_list(path: str | None) -> list[dict[str, Any]]:
    if not path:
        return []
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON list")
    return data


def _profile(args, config: StudyPulseConfig):
    history = energy_tracker.load_history(Path(args.history))
    return energy_tracker.rebuild_profile(history, config=config)


def cmd_record(args, config: StudyPulseConfig) -> dict[str, Any]:
    """Record an energy sample and save the pruned history."""
    path = Path(args.history)
    context = None
    if any([args.sleep, args.caffeine, args.exercise, args.meals, args.stress]):
        context = EnergyContext(
            sleep_quality=SleepQuality(args.sleep) if args.sleep else None,
            caffeine=args.caffeine or None,
            exercise=args.exercise or None,
            meals=MealState(args.meals) if args.meals else None,
            stress=StressLevel(args.stress) if args.stress else None,
        )

    profile = energy_tracker.rebuild_profile(energy_tracker.load_history(path), config=config)
    profile = energy_tracker.record_energy_data(
        profile,
        args.level,
        context,
        args.productivity,
        args.completed,
        config=config,
    )
    energy_tracker.save_history(path, profile.energy_history)

    return {
        "success": True,
        "energy_level": profile.current_energy_level.value,
        "samples": len(profile.energy_history),
        "patterns": len(profile.energy_patterns),
        "optimal_windows": len(profile.optimal_study_times),
    }


def cmd_patterns(args, config: StudyPulseConfig) -> dict[str, Any]:
    profile = _profile(args, config)
    result = {"success": True, "patterns": [p.to_dict() for p in profile.energy_patterns]}
    if not profile.energy_patterns:
        result["message"] = "Not enough check-ins yet - a few more and patterns will show up."
    return result


def cmd_windows(args, config: StudyPulseConfig) -> dict[str, Any]:
    profile = _profile(args, config)
    return {
        "success": True,
        "optimal_study_times": [t.to_dict() for t in profile.optimal_study_times],
    }


def cmd_persona(args, config: StudyPulseConfig) -> dict[str, Any]:
    profile = _profile(args, config)
    return {"success": True, "persona": classify_persona(profile).to_dict()}


def cmd_metrics(args, config: StudyPulseConfig) -> dict[str, Any]:
    profile = _profile(args, config)
    feedback = [SessionFeedback.from_dict(item) for item in _load_json_list(args.feedback)]
    metrics = aggregate_metrics(profile, feedback, window_size=config.tracking.metrics_window)
    return {"success": True, "metrics": metrics.to_dict()}


def cmd_suggest(args, config: StudyPulseConfig) -> dict[str, Any]:
    profile = _profile(args, config)
    tasks = [StudyTask(**item) for item in _load_json_list(args.tasks)]

    provider = HostContextProvider(
        online=not args.offline,
        device=device_class_from_user_agent(args.user_agent or ""),
        battery=args.battery,
    )
    context = build_context(provider)

    queue = SuggestionQueue(max_size=config.tracking.max_suggestions)
    queue.extend(
        generate_suggestions(
            args.level or profile.current_energy_level,
            context,
            profile.energy_history,
            profile.optimal_study_times,
            tasks,
            config=config,
        )
    )
    queue.extend(device_suggestions(context))

    return {
        "success": True,
        "context": context.to_dict(),
        "suggestions": [s.to_dict() for s in queue.suggestions],
    }


def cmd_insights(args, config: StudyPulseConfig) -> dict[str, Any]:
    profile = _profile(args, config)
    metrics = aggregate_metrics(profile, window_size=config.tracking.metrics_window)
    return {
        "success": True,
        "insights": [i.to_dict() for i in generate_insights(profile, metrics)],
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="studypulse",
        description="StudyPulse - energy-aware study analytics",
    )
    parser.add_argument("--version", "-V", action="store_true", help="Show version and exit")
    parser.add_argument(
        "--history",
        default=str(DEFAULT_HISTORY_PATH),
        help=f"Energy history JSON file (default: {DEFAULT_HISTORY_PATH})",
    )
    parser.add_argument("--config", help="Path to a studypulse.yaml config file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # record
    record_parser = subparsers.add_parser("record", help="Record a new energy check-in")
    record_parser.add_argument("--level", required=True, choices=ENERGY_LEVELS)
    record_parser.add_argument("--productivity", type=int, choices=range(1, 11), metavar="1-10")
    record_parser.add_argument("--completed", action="store_true", default=None)
    record_parser.add_argument("--sleep", choices=[s.value for s in SleepQuality])
    record_parser.add_argument("--caffeine", action="store_true")
    record_parser.add_argument("--exercise", action="store_true")
    record_parser.add_argument("--meals", choices=[m.value for m in MealState])
    record_parser.add_argument("--stress", choices=[s.value for s in StressLevel])
    record_parser.set_defaults(func=cmd_record)

    subparsers.add_parser("patterns", help="Show daily and weekly energy patterns").set_defaults(
        func=cmd_patterns
    )
    subparsers.add_parser("windows", help="Show optimal study windows").set_defaults(
        func=cmd_windows
    )
    subparsers.add_parser("persona", help="Classify morning/evening persona").set_defaults(
        func=cmd_persona
    )

    # metrics
    metrics_parser = subparsers.add_parser("metrics", help="Productivity metrics")
    metrics_parser.add_argument("--feedback", help="JSON list of session feedback")
    metrics_parser.set_defaults(func=cmd_metrics)

    # suggest
    suggest_parser = subparsers.add_parser("suggest", help="Generate suggestions for right now")
    suggest_parser.add_argument("--level", choices=ENERGY_LEVELS, help="Override current level")
    suggest_parser.add_argument("--tasks", help="JSON list of study tasks")
    suggest_parser.add_argument("--offline", action="store_true", help="Device is offline")
    suggest_parser.add_argument("--battery", type=int, help="Battery level percent")
    suggest_parser.add_argument("--user-agent", help="Browser User-Agent for device class")
    suggest_parser.set_defaults(func=cmd_suggest)

    subparsers.add_parser("insights", help="Personalized insights").set_defaults(
        func=cmd_insights
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"studypulse {__version__}")
        return 0

    if not getattr(args, "func", None):
        parser.print_help()
        return 0

    config = load_and_validate(Path(args.config) if args.config else None)

    try:
        result = args.func(args, config)
    except (OSError, ValueError, TypeError, KeyError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"{args.command} failed: {e}")
        result = {"success": False, "error": str(e)}

    print(json.dumps(result, indent=2, default=str))
    return 0 if result.get("success") else 1


if __name__ == "__main__":
    sys.exit(main())
