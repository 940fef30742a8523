"""Learning Tools - Energy patterns and study-time personalization

Philosophy:
    A thirty-second tap on an energy scale is all we ask for.
    Everything else is inferred from the history that builds up.

Components:
    models.py: Samples, aggregates, patterns, time slots, persona, metrics

    energy_tracker.py: Append-only, 30-day energy history
        - Every record prunes samples older than the retention window
        - Profile-level update recomputes patterns and study windows

    pattern_analyzer.py: Hourly and weekday energy aggregates
        - Daily pattern (by hour of day)
        - Weekly pattern (by day of week)
        - Peak hour / peak day recommendations

    window_selector.py: Hours worth studying in
        - Average energy >= 3 and completion rate >= 0.7
        - Suitability per task type

    persona.py: Morning vs evening chronotype
    metrics.py: Productivity scores over the last two weeks
    insights.py: Short, actionable observations for display

Safety Rules:
    1. Insufficient data is never an error - return empty results
    2. Energy levels are rhythms, not moral judgments
    3. Every function returns a new value, inputs are never mutated
"""

# Energy levels, lowest first
ENERGY_LEVELS = ["very-low", "low", "medium", "high", "very-high"]

# Numeric scale used by every aggregate
ENERGY_SCORES = {"very-low": 1, "low": 2, "medium": 3, "high": 4, "very-high": 5}

# Day names indexed Sunday-first
DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

# Task types that need a sharp mind
DEMANDING_TASK_TYPES = ("problem-solving", "creative")

# Defaults shared by the analyzers
MIN_SAMPLES_FOR_PATTERN = 7
RETENTION_DAYS = 30
DAILY_CONFIDENCE_THRESHOLD = 7
WEEKLY_CONFIDENCE_THRESHOLD = 4
