"""
Tool: Suggestion Models
Purpose: Data structures for suggestions and the actions taken on them

Usage:
    from studypulse.suggestions.models import (
        Suggestion,
        SuggestionType,
        SuggestionPriority,
        SuggestionCategory,
        AcceptAction,
        DismissAction,
    )
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from studypulse.suggestions import PRIORITY_ORDER


class SuggestionType(str, Enum):
    ENERGY_BASED = "energy-based"
    CONTEXT_BASED = "context-based"
    PATTERN_BASED = "pattern-based"
    URGENT = "urgent"


class SuggestionPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return PRIORITY_ORDER[self.value]


class SuggestionCategory(str, Enum):
    SCHEDULING = "scheduling"
    ENERGY = "energy"
    PRODUCTIVITY = "productivity"
    BREAK = "break"
    SESSION = "session"


class Command(str, Enum):
    """What accepting a suggestion asks the host to do."""

    SUGGEST_LIGHT_TASKS = "suggest_light_tasks"
    START_DIFFICULT_TASK = "start_difficult_task"
    START_SESSION = "start_session"
    END_SESSION = "end_session"
    TAKE_BREAK = "take_break"
    RESCHEDULE_TASKS = "reschedule_tasks"
    ACKNOWLEDGE = "acknowledge"


@dataclass(frozen=True)
class AcceptAction:
    suggestion_id: str
    command: Command

    def to_dict(self) -> dict[str, str]:
        return {"kind": "accept", "suggestion_id": self.suggestion_id, "command": self.command.value}


@dataclass(frozen=True)
class DismissAction:
    suggestion_id: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": "dismiss", "suggestion_id": self.suggestion_id}


SuggestionAction = AcceptAction | DismissAction


@dataclass(frozen=True)
class Suggestion:
    """
    A transient, rule-triggered recommendation.

    Generated fresh on every evaluation and never stored with the history.
    """

    id: str
    type: SuggestionType
    priority: SuggestionPriority
    title: str
    description: str
    action_text: str
    icon: str
    category: SuggestionCategory
    command: Command
    created_at: datetime = field(default_factory=datetime.now)
    expires_at: datetime | None = None

    @property
    def accept_action(self) -> AcceptAction:
        return AcceptAction(suggestion_id=self.id, command=self.command)

    @property
    def dismiss_action(self) -> DismissAction:
        return DismissAction(suggestion_id=self.id)

    @property
    def kind(self) -> str:
        """The id without its timestamp suffix, e.g. "offline"."""
        return self.id.rsplit("-", 1)[0]

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at <= now

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "priority": self.priority.value,
            "title": self.title,
            "description": self.description,
            "action_text": self.action_text,
            "icon": self.icon,
            "category": self.category.value,
            "on_accept": self.accept_action.to_dict(),
            "on_dismiss": self.dismiss_action.to_dict(),
            "created_at": self.created_at.isoformat(),
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
        }
