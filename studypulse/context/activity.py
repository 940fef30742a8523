"""
Tool: Activity Monitor
Purpose: Track user activity, idle time, and the current study session

The host calls record_activity() on input events (clicks, key presses,
scrolls). Presence is derived from the minutes since the last one:
active up to 5 minutes, idle after that, away after 15.
"""

from dataclasses import dataclass
from datetime import datetime

from studypulse.context import AWAY_AFTER_MINUTES, IDLE_AFTER_MINUTES
from studypulse.context.provider import Presence


@dataclass(frozen=True)
class ActivitySnapshot:
    """What the context suggestion rules need to know about the user right now."""

    is_user_active: bool
    in_session: bool
    idle_minutes: int
    session_minutes: int


class ActivityMonitor:
    def __init__(self, now: datetime | None = None):
        self.last_activity = now or datetime.now()
        self.in_session = False
        self.session_minutes = 0

    def record_activity(self, now: datetime | None = None) -> None:
        self.last_activity = now or datetime.now()

    def start_session(self, now: datetime | None = None) -> None:
        self.in_session = True
        self.session_minutes = 0
        self.record_activity(now)

    def end_session(self) -> None:
        self.in_session = False
        self.session_minutes = 0

    def tick_session(self) -> None:
        """Advance the session clock by one minute."""
        if self.in_session:
            self.session_minutes += 1

    def idle_minutes(self, now: datetime) -> int:
        seconds = (now - self.last_activity).total_seconds()
        return max(0, int(seconds // 60))

    def presence(self, now: datetime) -> Presence:
        idle = self.idle_minutes(now)
        if idle > AWAY_AFTER_MINUTES:
            return Presence.AWAY
        if idle > IDLE_AFTER_MINUTES:
            return Presence.IDLE
        return Presence.ACTIVE

    def snapshot(self, now: datetime) -> ActivitySnapshot:
        return ActivitySnapshot(
            is_user_active=self.presence(now) == Presence.ACTIVE,
            in_session=self.in_session,
            idle_minutes=self.idle_minutes(now),
            session_minutes=self.session_minutes,
        )
