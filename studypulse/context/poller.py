"""
Tool: Context Poller
Purpose: Run the periodic context jobs on an asyncio event loop

Jobs (default intervals from args/studypulse.yaml, polling section):
- context_refresh (60s): re-read the provider, raise device prompts on change
- idle_check (10s): update presence, raise session prompts
- session_tick (60s): advance the study-session clock
- suggestion_cleanup (60s): drop expired suggestions
- time_check (30 min): late-night and meal-time prompts

Every job calls one pure function and merges its result into the poller's
state or the suggestion queue. All jobs run on the same event loop, so state
is replaced without locks. Each job is an independent task that can be
cancelled on its own; stop() cancels all of them.

Usage:
    poller = ContextPoller(provider, ActivityMonitor(), SuggestionQueue())
    poller.start()          # inside a running event loop
    ...
    await poller.stop()

Dependencies:
    - asyncio (stdlib)
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from studypulse.config_models import PollingConfig
from studypulse.context.activity import ActivityMonitor
from studypulse.context.provider import (
    ContextProvider,
    NetworkStatus,
    RealTimeContext,
    build_context,
)
from studypulse.logging_config import get_logger
from studypulse.suggestions.generator import (
    LOW_BATTERY_PERCENT,
    activity_suggestions,
    device_suggestions,
    time_suggestions,
)
from studypulse.suggestions.queue import SuggestionQueue

logger = get_logger(__name__)


@dataclass
class PeriodicJob:
    name: str
    interval: float
    func: Callable[[], None]
    runs: int = 0
    errors: int = 0
    last_run: datetime | None = None


class ContextPoller:
    """Owns the periodic jobs that keep context and suggestions current."""

    def __init__(
        self,
        provider: ContextProvider,
        monitor: ActivityMonitor,
        queue: SuggestionQueue,
        config: PollingConfig | None = None,
        on_context_change: Callable[[RealTimeContext], None] | None = None,
    ):
        self.provider = provider
        self.monitor = monitor
        self.queue = queue
        self.config = config or PollingConfig()
        self.on_context_change = on_context_change

        self.context = build_context(provider, monitor.presence(provider.now()))
        self._device_checked = False
        self.running = False
        self.jobs: dict[str, PeriodicJob] = {}
        self._tasks: dict[str, asyncio.Task] = {}

        self.add_job("context_refresh", self.config.context_refresh_seconds, self.refresh_context)
        self.add_job("idle_check", self.config.idle_check_seconds, self.check_idle)
        self.add_job("session_tick", self.config.session_tick_seconds, self.monitor.tick_session)
        self.add_job(
            "suggestion_cleanup", self.config.suggestion_cleanup_seconds, self.cleanup_suggestions
        )
        self.add_job("time_check", self.config.time_check_seconds, self.check_time)

    # ─────────────────────────────────────────────────────────────────────
    # Job bodies
    # ─────────────────────────────────────────────────────────────────────

    def refresh_context(self) -> RealTimeContext:
        previous = self.context
        now = self.provider.now()
        self.context = build_context(self.provider, self.monitor.presence(now))

        went_offline = (
            self.context.network_status != previous.network_status
            and self.context.network_status == NetworkStatus.OFFLINE
        )
        battery_dropped = (
            self.context.battery_level is not None
            and self.context.battery_level < LOW_BATTERY_PERCENT
            and (previous.battery_level is None or previous.battery_level >= LOW_BATTERY_PERCENT)
        )
        # First refresh reports a device that started offline or low
        if went_offline or battery_dropped or not self._device_checked:
            self.queue.add_new_kinds(device_suggestions(self.context))
        self._device_checked = True

        if self.on_context_change and self.context != previous:
            self.on_context_change(self.context)

        return self.context

    def check_idle(self) -> None:
        now = self.provider.now()
        presence = self.monitor.presence(now)
        if presence != self.context.user_presence:
            self.context = build_context(self.provider, presence)
            logger.debug(f"[POLLER] Presence is now {presence.value}")
        self.queue.add_new_kinds(activity_suggestions(self.monitor.snapshot(now), now))

    def cleanup_suggestions(self) -> None:
        self.queue.expire(self.provider.now())

    def check_time(self) -> None:
        context = build_context(self.provider, self.context.user_presence)
        self.queue.add_new_kinds(time_suggestions(context))

    # ─────────────────────────────────────────────────────────────────────
    # Scheduling
    # ─────────────────────────────────────────────────────────────────────

    def add_job(self, name: str, interval: float, func: Callable[[], None]) -> PeriodicJob:
        if name in self.jobs:
            self.cancel_job(name)
        job = PeriodicJob(name=name, interval=interval, func=func)
        self.jobs[name] = job
        if self.running:
            self._tasks[name] = asyncio.create_task(self._run_job(job), name=name)
        return job

    def cancel_job(self, name: str) -> bool:
        task = self._tasks.pop(name, None)
        self.jobs.pop(name, None)
        if task is None:
            return False
        task.cancel()
        return True

    def start(self) -> None:
        """Start every job. Must be called from inside a running event loop."""
        if self.running:
            return
        self.running = True
        for name, job in self.jobs.items():
            self._tasks[name] = asyncio.create_task(self._run_job(job), name=name)
        logger.info(f"[POLLER] Started {len(self._tasks)} jobs")

    async def stop(self) -> None:
        self.running = False
        tasks = list(self._tasks.values())
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("[POLLER] Stopped")

    async def _run_job(self, job: PeriodicJob) -> None:
        while self.running:
            await asyncio.sleep(job.interval)
            try:
                job.func()
                job.runs += 1
                job.last_run = self.provider.now()
            except Exception as e:
                job.errors += 1
                logger.error(f"[POLLER] Job {job.name} failed: {e}")

    def status(self) -> dict:
        return {
            "running": self.running,
            "jobs": {
                name: {
                    "interval": job.interval,
                    "runs": job.runs,
                    "errors": job.errors,
                    "last_run": job.last_run.isoformat() if job.last_run else None,
                    "active": name in self._tasks,
                }
                for name, job in self.jobs.items()
            },
        }
