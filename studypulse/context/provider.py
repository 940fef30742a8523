"""
Tool: Context Provider
Purpose: Injected access to wall-clock time and device signals

The host (web backend, desktop shell, test) owns the real signals and pushes
them into a HostContextProvider, or implements ContextProvider itself.
build_context() turns a provider into an immutable RealTimeContext snapshot
for the suggestion generator.

Usage:
    provider = HostContextProvider(device=device_class_from_user_agent(ua))
    provider.update(online=False, battery=15)
    context = build_context(provider)
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol, runtime_checkable


class DeviceClass(str, Enum):
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


class NetworkStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    SLOW = "slow"


class Presence(str, Enum):
    ACTIVE = "active"
    IDLE = "idle"
    AWAY = "away"


@runtime_checkable
class ContextProvider(Protocol):
    def now(self) -> datetime: ...

    def is_online(self) -> bool: ...

    def device_class(self) -> DeviceClass: ...

    def battery_level(self) -> int | None: ...


class HostContextProvider:
    """ContextProvider whose signals are pushed in by the host application."""

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        online: bool = True,
        device: DeviceClass = DeviceClass.DESKTOP,
        battery: int | None = None,
    ):
        self._clock = clock
        self._online = online
        self._device = device
        self._battery = battery

    def update(
        self,
        *,
        online: bool | None = None,
        device: DeviceClass | None = None,
        battery: int | None = None,
    ) -> None:
        if online is not None:
            self._online = online
        if device is not None:
            self._device = device
        if battery is not None:
            self._battery = battery

    def now(self) -> datetime:
        return self._clock()

    def is_online(self) -> bool:
        return self._online

    def device_class(self) -> DeviceClass:
        return self._device

    def battery_level(self) -> int | None:
        return self._battery


_TABLET_RE = re.compile(r"Tablet|iPad", re.IGNORECASE)
_MOBILE_RE = re.compile(r"Mobile|Android|iPhone", re.IGNORECASE)


def device_class_from_user_agent(user_agent: str) -> DeviceClass:
    """Coarse device class from a browser User-Agent string."""
    if _TABLET_RE.search(user_agent):
        return DeviceClass.TABLET
    if _MOBILE_RE.search(user_agent):
        return DeviceClass.MOBILE
    return DeviceClass.DESKTOP


@dataclass(frozen=True)
class RealTimeContext:
    current_time: datetime
    day_of_week: int  # Sunday = 0
    user_presence: Presence
    device_type: DeviceClass
    network_status: NetworkStatus
    battery_level: int | None = None

    @property
    def hour(self) -> int:
        return self.current_time.hour

    def to_dict(self) -> dict:
        return {
            "current_time": self.current_time.isoformat(),
            "day_of_week": self.day_of_week,
            "user_presence": self.user_presence.value,
            "device_type": self.device_type.value,
            "network_status": self.network_status.value,
            "battery_level": self.battery_level,
        }


def build_context(provider: ContextProvider, presence: Presence = Presence.ACTIVE) -> RealTimeContext:
    """Snapshot the provider's signals."""
    now = provider.now()
    return RealTimeContext(
        current_time=now,
        day_of_week=(now.weekday() + 1) % 7,
        user_presence=presence,
        device_type=provider.device_class(),
        network_status=NetworkStatus.ONLINE if provider.is_online() else NetworkStatus.OFFLINE,
        battery_level=provider.battery_level(),
    )
