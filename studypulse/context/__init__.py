"""
Context Tools - Environment signals for the suggestion rules

Nothing in the core reads clocks, devices, or the network directly. The host
application supplies those signals through a ContextProvider and the
suggestion generator receives them as plain values.

Components:
    provider.py: ContextProvider protocol, HostContextProvider, RealTimeContext
    activity.py: Activity, idle-time, and study-session tracking
    poller.py: Cancellable periodic jobs (context refresh, idle checks,
               suggestion cleanup, time-of-day checks) on asyncio
"""

# Minutes without activity before presence changes
IDLE_AFTER_MINUTES = 5
AWAY_AFTER_MINUTES = 15

__all__ = ["IDLE_AFTER_MINUTES", "AWAY_AFTER_MINUTES"]
