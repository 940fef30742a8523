"""
Suggestion Tools - Small, timely prompts instead of dashboards

Components:
    models.py: Suggestion plus the tagged accept/dismiss actions
    generator.py: Rule-based suggestions from energy, patterns, and context
    queue.py: Deduplicated, priority-ordered, size-capped suggestion list

Suggestions never carry callbacks. Accepting or dismissing one produces an
action value that the host dispatches through the queue, which keeps the
generator free of UI side effects.

Usage:
    from studypulse.suggestions.generator import generate_suggestions
    from studypulse.suggestions.queue import SuggestionQueue

    queue = SuggestionQueue()
    for suggestion in generate_suggestions(level, context, history, windows, tasks):
        queue.add(suggestion)
"""

# Priority rank used for ordering, highest first
PRIORITY_ORDER = {"critical": 4, "high": 3, "medium": 2, "low": 1}

MAX_SUGGESTIONS = 5

__all__ = ["PRIORITY_ORDER", "MAX_SUGGESTIONS"]
