"""Platform-independent access to the system's batteries."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, Protocol

from .device import BatteryDevice
from .errors import BatteryError
from .state import State
from .technology import Technology


class PlatformManager(Protocol):
    """What a platform battery manager provides."""

    def batteries(self) -> Iterator[Any]: ...

    def refresh(self, device: Any) -> None: ...


class Battery:
    """Information about one battery, as read at the last refresh.

    Repeated calls of a method return the same value until the battery is
    refreshed with :meth:`Manager.refresh`. Quantities are in SI units.
    """

    def __init__(self, device: BatteryDevice) -> None:
        self._device = device

    @property
    def device(self) -> BatteryDevice:
        """The platform device behind this battery."""
        return self._device

    def state_of_charge(self) -> float:
        """Energy held as a fraction of the full energy, ``0..1``."""
        return self._device.state_of_charge()

    def energy(self) -> float:
        """Energy currently available, in joules."""
        return self._device.energy()

    def energy_full(self) -> float:
        """Energy when considered full, in joules."""
        return self._device.energy_full()

    def energy_full_design(self) -> float:
        """Energy the battery was designed to hold when full, in joules."""
        return self._device.energy_full_design()

    def energy_rate(self) -> float:
        """Energy flow, in watts."""
        return self._device.energy_rate()

    def voltage(self) -> float:
        """Voltage, in volts."""
        return self._device.voltage()

    def state_of_health(self) -> float:
        """Full energy as a fraction of the design energy, ``0..1``."""
        return self._device.state_of_health()

    def state(self) -> State:
        """Current charging state."""
        return self._device.state()

    def technology(self) -> Technology:
        """Battery chemistry."""
        return self._device.technology()

    def temperature(self) -> float | None:
        """Temperature in kelvin, if known."""
        return self._device.temperature()

    def cycle_count(self) -> int | None:
        """Number of charge cycles, if known."""
        return self._device.cycle_count()

    def vendor(self) -> str | None:
        """Manufacturer, if known."""
        return self._device.vendor()

    def model(self) -> str | None:
        """Model name, if known."""
        return self._device.model()

    def serial_number(self) -> str | None:
        """Serial number, if known."""
        return self._device.serial_number()

    def time_to_full(self) -> float | None:
        """Seconds until full; ``None`` when not charging."""
        return self._device.time_to_full()

    def time_to_empty(self) -> float | None:
        """Seconds until empty; ``None`` when not discharging."""
        return self._device.time_to_empty()

    def __repr__(self) -> str:
        fields = {
            "impl": self._device,
            "vendor": self.vendor(),
            "model": self.model(),
            "serial_number": self.serial_number(),
            "technology": self.technology(),
            "state": self.state(),
            "capacity": self.state_of_health(),
            "temperature": self.temperature(),
            "percentage": self.state_of_charge(),
            "cycle_count": self.cycle_count(),
            "energy": self.energy(),
            "energy_full": self.energy_full(),
            "energy_full_design": self.energy_full_design(),
            "energy_rate": self.energy_rate(),
            "voltage": self.voltage(),
            "time_to_full": self.time_to_full(),
            "time_to_empty": self.time_to_empty(),
        }
        body = ", ".join(f"{name}={value!r}" for name, value in fields.items())
        return f"Battery({body})"


class Batteries:
    """Iterator over the batteries a manager finds.

    A battery that cannot be read raises ``BatteryError`` from ``next``.
    """

    def __init__(self, inner: Iterator[BatteryDevice]) -> None:
        self._inner = inner

    def __iter__(self) -> Batteries:
        return self

    def __next__(self) -> Battery:
        return Battery(next(self._inner))

    def __length_hint__(self) -> int:
        return operator.length_hint(self._inner)

    def __repr__(self) -> str:
        return f"Batteries(impl={self._inner!r})"


def _platform_manager() -> PlatformManager:
    platform = sys.platform
    if platform.startswith("linux"):
        from .linux import SysFsManager

        return SysFsManager()
    if platform.startswith(("freebsd", "dragonfly")):
        from .freebsd import IoCtlManager

        return IoCtlManager()
    raise BatteryError(f"Battery information is not supported on {platform}")


class Manager:
    """Finds the system's batteries and refreshes their information."""

    def __init__(self, platform_manager: PlatformManager | None = None) -> None:
        self._inner = _platform_manager() if platform_manager is None else platform_manager

    def batteries(self) -> Batteries:
        """Iterate over the available batteries, in no guaranteed order."""
        return Batteries(iter(self._inner.batteries()))

    def refresh(self, battery: Battery) -> None:
        """Refresh a battery's information in place."""
        self._inner.refresh(battery.device)

    def __repr__(self) -> str:
        return f"Manager(impl={self._inner!r})"