"""
Tool: Suggestion Queue
Purpose: Hold the suggestions currently on screen

A list of five things is already a lot. The queue keeps at most five
suggestions, highest priority first, ignores repeats of an id it already
holds, and drops suggestions once they expire.

Accept/dismiss actions from the UI come back through dispatch(). Accepting
runs the handler the host registered for the suggestion's command.

Usage:
    queue = SuggestionQueue()
    queue.register_handler(Command.START_SESSION, monitor.start_session)
    queue.add(suggestion)
    queue.dispatch(suggestion.accept_action)
"""

from collections.abc import Callable, Iterable
from datetime import datetime

from studypulse.logging_config import get_logger
from studypulse.suggestions import MAX_SUGGESTIONS
from studypulse.suggestions.models import (
    AcceptAction,
    Command,
    DismissAction,
    Suggestion,
    SuggestionAction,
)

logger = get_logger(__name__)

CommandHandler = Callable[[AcceptAction], None]


class SuggestionQueue:
    def __init__(self, max_size: int = MAX_SUGGESTIONS):
        self.max_size = max_size
        self._suggestions: list[Suggestion] = []
        self._handlers: dict[Command, CommandHandler] = {}

    def __len__(self) -> int:
        return len(self._suggestions)

    def __contains__(self, suggestion_id: str) -> bool:
        return any(s.id == suggestion_id for s in self._suggestions)

    @property
    def suggestions(self) -> list[Suggestion]:
        return list(self._suggestions)

    def add(self, suggestion: Suggestion) -> bool:
        """
        Add a suggestion unless one with the same id is already queued.

        Returns:
            True if the suggestion is in the queue after ranking and capping
        """
        if suggestion.id in self:
            return False

        # sort is stable, so equal priorities keep arrival order
        ranked = sorted(
            [*self._suggestions, suggestion], key=lambda s: s.priority.rank, reverse=True
        )
        self._suggestions = ranked[: self.max_size]

        kept = suggestion.id in self
        if not kept:
            logger.debug(f"[QUEUE] Dropped {suggestion.id}: queue full of higher priorities")
        return kept

    def extend(self, suggestions: Iterable[Suggestion]) -> int:
        return sum(1 for s in suggestions if self.add(s))

    def has_kind(self, kind: str) -> bool:
        return any(s.kind == kind for s in self._suggestions)

    def add_new_kinds(self, suggestions: Iterable[Suggestion]) -> int:
        """Add only suggestions whose kind is not already on screen."""
        return sum(1 for s in suggestions if not self.has_kind(s.kind) and self.add(s))

    def dismiss(self, suggestion_id: str) -> bool:
        before = len(self._suggestions)
        self._suggestions = [s for s in self._suggestions if s.id != suggestion_id]
        return len(self._suggestions) < before

    def expire(self, now: datetime) -> int:
        """Remove expired suggestions. Returns how many were removed."""
        before = len(self._suggestions)
        self._suggestions = [s for s in self._suggestions if not s.is_expired(now)]
        removed = before - len(self._suggestions)
        if removed:
            logger.debug(f"[QUEUE] Expired {removed} suggestions")
        return removed

    def register_handler(self, command: Command, handler: CommandHandler) -> None:
        self._handlers[command] = handler

    def dispatch(self, action: SuggestionAction) -> bool:
        """
        Apply an accept or dismiss action.

        Returns:
            False when the suggestion is no longer queued
        """
        if action.suggestion_id not in self:
            logger.debug(f"[QUEUE] Ignoring action for unknown suggestion {action.suggestion_id}")
            return False

        if isinstance(action, AcceptAction):
            handler = self._handlers.get(action.command)
            if handler is not None:
                handler(action)
            else:
                logger.info(f"[QUEUE] No handler for command {action.command.value}")
        elif not isinstance(action, DismissAction):
            raise TypeError(f"Unknown suggestion action: {action!r}")

        return self.dismiss(action.suggestion_id)
