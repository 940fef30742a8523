"""
Tool: Suggestion Generator
Purpose: Turn current energy, learned windows, and live context into prompts

Energy rules (generate_suggestions), each checked independently:
1. Low energy (very-low / low)          -> high priority, lighter tasks
2. High energy + pending hard task      -> medium, start something challenging
3. Inside an optimal study window        -> medium, start a session
4. 4+ check-ins in the last hour, none
   in a low band                         -> medium, take a break
5. Auto-reschedule enabled and energy at
   or below the rescheduling threshold   -> medium, move demanding tasks

Context rules, evaluated by the poller as signals change:
- activity_suggestions: idle-but-not-studying, long session, away mid-session
- device_suggestions: low battery, offline
- time_suggestions: late night, meal time

Suggestions come back in rule order. Ranking and capping happen in the
SuggestionQueue.

Usage:
    from studypulse.suggestions.generator import generate_suggestions
    suggestions = generate_suggestions("high", context, history, windows, tasks)
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

from studypulse.config_models import StudyPulseConfig
from studypulse.context.activity import ActivitySnapshot
from studypulse.context.provider import NetworkStatus, RealTimeContext
from studypulse.learning import DEMANDING_TASK_TYPES
from studypulse.learning.models import (
    EnergyHistory,
    EnergyLevel,
    StudyTask,
    TimeSlot,
)
from studypulse.logging_config import get_logger
from studypulse.suggestions.models import (
    Command,
    Suggestion,
    SuggestionCategory,
    SuggestionPriority,
    SuggestionType,
)

logger = get_logger(__name__)

LOW_ENERGY_LEVELS = (EnergyLevel.VERY_LOW, EnergyLevel.LOW)
HIGH_ENERGY_LEVELS = (EnergyLevel.HIGH, EnergyLevel.VERY_HIGH)

IDLE_PROMPT_MINUTES = (2, 5)
IDLE_PROMPT_TTL = timedelta(minutes=10)
LONG_SESSION_MINUTES = 45
LOW_BATTERY_PERCENT = 20
LATE_NIGHT_START = 23
LATE_NIGHT_END = 5
MEAL_HOURS = (12, 18)


def _stamp(now: datetime) -> int:
    return int(now.timestamp() * 1000)


def _join_activities(activities: Sequence[str]) -> str:
    names = [a.replace("-", " ") for a in activities]
    if len(names) <= 1:
        return "".join(names) or "lighter work"
    return ", ".join(names[:-1]) + " or " + names[-1]


def generate_suggestions(
    current_level: EnergyLevel | str,
    context: RealTimeContext,
    history: EnergyHistory,
    optimal_windows: Sequence[TimeSlot],
    tasks: Sequence[StudyTask] = (),
    config: StudyPulseConfig | None = None,
) -> list[Suggestion]:
    """
    Evaluate the energy rules against the current state.

    Args:
        current_level: The user's latest energy level
        context: Live context snapshot (supplies the current time)
        history: Energy history
        optimal_windows: Windows from select_windows()
        tasks: Study tasks to consider for challenge/reschedule prompts
        config: Preferences and thresholds (defaults when omitted)

    Returns:
        Suggestions in rule order
    """
    config = config or StudyPulseConfig()
    preferences = config.preferences
    level = EnergyLevel(current_level)
    now = context.current_time
    stamp = _stamp(now)
    suggestions: list[Suggestion] = []

    pending_demanding = [
        t for t in tasks if not t.is_completed and t.task_type in DEMANDING_TASK_TYPES
    ]

    if level in LOW_ENERGY_LEVELS:
        light = _join_activities(preferences.preferred_low_energy_activities)
        suggestions.append(
            Suggestion(
                id=f"energy-low-{stamp}",
                type=SuggestionType.ENERGY_BASED,
                priority=SuggestionPriority.HIGH,
                title="Low Energy Detected",
                description=f"Consider taking a break or switching to lighter tasks like {light}.",
                action_text="Suggest Light Tasks",
                icon="😴",
                category=SuggestionCategory.ENERGY,
                command=Command.SUGGEST_LIGHT_TASKS,
                created_at=now,
            )
        )

    if level in HIGH_ENERGY_LEVELS and pending_demanding:
        suggestions.append(
            Suggestion(
                id=f"energy-high-{stamp}",
                type=SuggestionType.ENERGY_BASED,
                priority=SuggestionPriority.MEDIUM,
                title="High Energy - Perfect for Challenging Tasks!",
                description=(
                    "You have high energy right now. "
                    "Great time for problem-solving or creative work."
                ),
                action_text="Start Difficult Task",
                icon="⚡",
                category=SuggestionCategory.SCHEDULING,
                command=Command.START_DIFFICULT_TASK,
                created_at=now,
            )
        )

    if any(window.contains(now.hour) for window in optimal_windows):
        suggestions.append(
            Suggestion(
                id=f"optimal-time-{stamp}",
                type=SuggestionType.PATTERN_BASED,
                priority=SuggestionPriority.MEDIUM,
                title="This is your optimal study time!",
                description="Based on your patterns, you're most productive at this time.",
                action_text="Start Study Session",
                icon="🎯",
                category=SuggestionCategory.SCHEDULING,
                command=Command.START_SESSION,
                created_at=now,
            )
        )

    if preferences.suggest_breaks_based_on_energy:
        since = now - timedelta(minutes=config.tracking.recent_activity_minutes)
        recent = [s for s in history if s.timestamp > since]
        if len(recent) >= config.tracking.break_sample_threshold and not any(
            s.energy_level in LOW_ENERGY_LEVELS for s in recent
        ):
            suggestions.append(
                Suggestion(
                    id=f"break-suggestion-{stamp}",
                    type=SuggestionType.CONTEXT_BASED,
                    priority=SuggestionPriority.MEDIUM,
                    title="Time for a break?",
                    description=(
                        "You've been working for a while. "
                        "A short break might help maintain your energy."
                    ),
                    action_text="Take Break",
                    icon="☕",
                    category=SuggestionCategory.BREAK,
                    command=Command.TAKE_BREAK,
                    created_at=now,
                )
            )

    threshold = config.scheduling.energy_threshold_for_rescheduling
    if preferences.auto_reschedule_on_low_energy and level.score <= threshold and pending_demanding:
        suggestions.append(
            Suggestion(
                id=f"reschedule-{stamp}",
                type=SuggestionType.ENERGY_BASED,
                priority=SuggestionPriority.MEDIUM,
                title="Move demanding work to a better time?",
                description=(
                    f"{len(pending_demanding)} demanding task(s) could wait for "
                    "one of your higher-energy windows."
                ),
                action_text="Reschedule",
                icon="📅",
                category=SuggestionCategory.SCHEDULING,
                command=Command.RESCHEDULE_TASKS,
                created_at=now,
            )
        )

    logger.debug(f"[SUGGEST] {len(suggestions)} energy suggestions for level={level.value}")
    return suggestions


def activity_suggestions(activity: ActivitySnapshot, now: datetime) -> list[Suggestion]:
    """Session prompts driven by activity and idle time."""
    stamp = _stamp(now)
    suggestions = []

    low, high = IDLE_PROMPT_MINUTES
    if activity.is_user_active and not activity.in_session and low <= activity.idle_minutes < high:
        suggestions.append(
            Suggestion(
                id=f"idle-suggest-{stamp}",
                type=SuggestionType.CONTEXT_BASED,
                priority=SuggestionPriority.LOW,
                title="Ready to start studying?",
                description="You've been active but not studying. Perfect time to begin a session!",
                action_text="Start Session",
                icon="📚",
                category=SuggestionCategory.SESSION,
                command=Command.START_SESSION,
                created_at=now,
                expires_at=now + IDLE_PROMPT_TTL,
            )
        )

    if activity.in_session and activity.session_minutes >= LONG_SESSION_MINUTES:
        suggestions.append(
            Suggestion(
                id=f"break-suggest-{stamp}",
                type=SuggestionType.CONTEXT_BASED,
                priority=SuggestionPriority.MEDIUM,
                title="Time for a break?",
                description=(
                    f"You've been studying for {activity.session_minutes} minutes. "
                    "Consider taking a short break."
                ),
                action_text="Take Break",
                icon="☕",
                category=SuggestionCategory.BREAK,
                command=Command.END_SESSION,
                created_at=now,
            )
        )

    if activity.in_session and not activity.is_user_active:
        suggestions.append(
            Suggestion(
                id=f"idle-end-{stamp}",
                type=SuggestionType.CONTEXT_BASED,
                priority=SuggestionPriority.HIGH,
                title="Still studying?",
                description="You seem to be away. Would you like to end this session?",
                action_text="End Session",
                icon="💤",
                category=SuggestionCategory.SESSION,
                command=Command.END_SESSION,
                created_at=now,
            )
        )

    return suggestions


def device_suggestions(context: RealTimeContext) -> list[Suggestion]:
    """Prompts for low battery and lost connectivity."""
    now = context.current_time
    stamp = _stamp(now)
    suggestions = []

    if context.battery_level is not None and context.battery_level < LOW_BATTERY_PERCENT:
        suggestions.append(
            Suggestion(
                id=f"battery-low-{stamp}",
                type=SuggestionType.CONTEXT_BASED,
                priority=SuggestionPriority.HIGH,
                title="Low Battery Detected",
                description="Your device battery is low. Consider shorter sessions or finding a charger.",
                action_text="Got it",
                icon="🔋",
                category=SuggestionCategory.SESSION,
                command=Command.ACKNOWLEDGE,
                created_at=now,
            )
        )

    if context.network_status == NetworkStatus.OFFLINE:
        suggestions.append(
            Suggestion(
                id=f"offline-{stamp}",
                type=SuggestionType.CONTEXT_BASED,
                priority=SuggestionPriority.MEDIUM,
                title="You're offline",
                description="No internet connection. Focus on offline tasks or review materials.",
                action_text="Continue offline",
                icon="📡",
                category=SuggestionCategory.SESSION,
                command=Command.ACKNOWLEDGE,
                created_at=now,
            )
        )

    return suggestions


def time_suggestions(context: RealTimeContext) -> list[Suggestion]:
    """Late-night wind-down and meal reminders."""
    now = context.current_time
    stamp = _stamp(now)
    hour = now.hour
    suggestions = []

    if hour >= LATE_NIGHT_START or hour <= LATE_NIGHT_END:
        suggestions.append(
            Suggestion(
                id=f"late-night-{stamp}",
                type=SuggestionType.CONTEXT_BASED,
                priority=SuggestionPriority.MEDIUM,
                title="It's getting late",
                description="Consider wrapping up for better sleep and tomorrow's productivity.",
                action_text="Finish up",
                icon="🌙",
                category=SuggestionCategory.SESSION,
                command=Command.END_SESSION,
                created_at=now,
            )
        )

    if hour in MEAL_HOURS:
        suggestions.append(
            Suggestion(
                id=f"meal-time-{stamp}",
                type=SuggestionType.CONTEXT_BASED,
                priority=SuggestionPriority.LOW,
                title="Meal time!",
                description="Don't forget to eat. Proper nutrition helps maintain energy levels.",
                action_text="Take break",
                icon="🍽️",
                category=SuggestionCategory.BREAK,
                command=Command.ACKNOWLEDGE,
                created_at=now,
            )
        )

    return suggestions
