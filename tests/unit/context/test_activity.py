"""Tests for studypulse/context/activity.py"""

from datetime import timedelta

import pytest

from studypulse.context.activity import ActivityMonitor
from studypulse.context.provider import Presence


@pytest.fixture
def monitor(now):
    return ActivityMonitor(now=now)


class TestPresence:
    @pytest.mark.parametrize(
        "minutes,expected",
        [
            (0, Presence.ACTIVE),
            (5, Presence.ACTIVE),
            (6, Presence.IDLE),
            (15, Presence.IDLE),
            (16, Presence.AWAY),
            (120, Presence.AWAY),
        ],
    )
    def test_presence_by_idle_minutes(self, monitor, now, minutes, expected):
        assert monitor.presence(now + timedelta(minutes=minutes)) == expected

    def test_idle_minutes_floor(self, monitor, now):
        assert monitor.idle_minutes(now + timedelta(minutes=2, seconds=59)) == 2

    def test_clock_behind_last_activity(self, monitor, now):
        assert monitor.idle_minutes(now - timedelta(minutes=3)) == 0

    def test_activity_resets_idle(self, monitor, now):
        later = now + timedelta(minutes=30)
        monitor.record_activity(later)
        assert monitor.presence(later + timedelta(minutes=1)) == Presence.ACTIVE


class TestSession:
    def test_tick_only_counts_in_session(self, monitor):
        monitor.tick_session()
        assert monitor.session_minutes == 0

        monitor.start_session()
        monitor.tick_session()
        monitor.tick_session()
        assert monitor.session_minutes == 2

    def test_start_resets_clock(self, monitor, now):
        monitor.start_session(now)
        monitor.tick_session()
        monitor.start_session(now + timedelta(minutes=1))
        assert monitor.session_minutes == 0
        assert monitor.last_activity == now + timedelta(minutes=1)

    def test_end_session(self, monitor, now):
        monitor.start_session(now)
        monitor.tick_session()
        monitor.end_session()
        assert monitor.in_session is False
        assert monitor.session_minutes == 0

    def test_snapshot(self, monitor, now):
        monitor.start_session(now)
        for _ in range(50):
            monitor.tick_session()

        snapshot = monitor.snapshot(now + timedelta(minutes=7))

        assert snapshot.is_user_active is False
        assert snapshot.in_session is True
        assert snapshot.idle_minutes == 7
        assert snapshot.session_minutes == 50
