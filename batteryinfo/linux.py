"""Batteries exposed through the Linux sysfs power-supply class."""

from __future__ import annotations

import errno
import os
from collections import deque
from pathlib import Path

from . import sysfs
from .device import BatteryDevice
from .errors import BatteryError, ErrorKind
from .state import State
from .sysfs_source import DataBuilder, InstantData
from .technology import Technology

SYSFS_ROOT = "/sys/class/power_supply"


class SysFsDevice(BatteryDevice):
    """A battery backed by one sysfs power-supply directory."""

    def __init__(
        self,
        root: str | os.PathLike,
        source: InstantData,
        *,
        vendor: str | None = None,
        model: str | None = None,
        serial_number: str | None = None,
        technology: Technology = Technology.UNKNOWN,
    ) -> None:
        self._root = Path(root)
        self._source = source
        # These cannot change between refreshes, so they are read once.
        self._vendor = vendor
        self._model = model
        self._serial_number = serial_number
        self._technology = technology

    @staticmethod
    def is_system_battery(path: str | os.PathLike) -> bool:
        """Whether the directory describes a battery that powers the system."""
        path = Path(path)
        return (
            sysfs.read_type(path / "type") is sysfs.SupplyType.BATTERY
            and sysfs.read_scope(path / "scope") is sysfs.Scope.SYSTEM
        )

    @classmethod
    def from_path(cls, root: str | os.PathLike) -> SysFsDevice:
        """Load a device from its sysfs directory."""
        builder = DataBuilder(root)
        vendor = builder.manufacturer()
        model = builder.model()
        serial_number = builder.serial_number()
        technology = builder.technology()
        source = builder.collect()
        return cls(
            root,
            source,
            vendor=vendor,
            model=model,
            serial_number=serial_number,
            technology=technology,
        )

    @property
    def root(self) -> Path:
        """The device's sysfs directory."""
        return self._root

    def refresh(self) -> None:
        """Re-read the changing values; the directory must still exist."""
        if not self._root.is_dir():
            missing = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(self._root))
            raise BatteryError(
                f"Device directory `{self._root}` is missing",
                kind=ErrorKind.NOT_FOUND,
                source=missing,
            )
        self._source = DataBuilder(self._root).collect()

    def state_of_health(self) -> float:
        return self._source.state_of_health

    def state_of_charge(self) -> float:
        return self._source.state_of_charge

    def energy(self) -> float:
        return self._source.energy

    def energy_full(self) -> float:
        return self._source.energy_full

    def energy_full_design(self) -> float:
        return self._source.energy_full_design

    def energy_rate(self) -> float:
        return self._source.energy_rate

    def state(self) -> State:
        return self._source.state

    def voltage(self) -> float:
        return self._source.voltage

    def temperature(self) -> float | None:
        return self._source.temperature

    def vendor(self) -> str | None:
        return self._vendor

    def model(self) -> str | None:
        return self._model

    def serial_number(self) -> str | None:
        return self._serial_number

    def technology(self) -> Technology:
        return self._technology

    def cycle_count(self) -> int | None:
        return self._source.cycle_count

    def __repr__(self) -> str:
        return f"SysFsDevice(root={str(self._root)!r})"


class _SysFsBatteries:
    """Iterator over the system batteries among sysfs entries.

    A device that fails to load raises ``BatteryError`` from ``next``;
    iteration may then continue with the remaining entries.
    """

    def __init__(self, manager: SysFsManager, entries: list[Path]) -> None:
        self._manager = manager
        self._entries = deque(entries)

    def __iter__(self) -> _SysFsBatteries:
        return self

    def __next__(self) -> SysFsDevice:
        while self._entries:
            path = self._entries.popleft()
            if SysFsDevice.is_system_battery(path):
                return SysFsDevice.from_path(path)
        raise StopIteration

    def __length_hint__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SysFsBatteries(remaining={len(self._entries)})"


class SysFsManager:
    """Finds and refreshes batteries under a sysfs power-supply directory."""

    def __init__(self, root: str | os.PathLike = SYSFS_ROOT) -> None:
        self._root = Path(root)

    @property
    def path(self) -> Path:
        """The power-supply class directory."""
        return self._root

    def batteries(self) -> _SysFsBatteries:
        """Iterate over the system batteries; raises if the directory is unreadable."""
        try:
            with os.scandir(self._root) as listing:
                entries = sorted(Path(entry.path) for entry in listing)
        except OSError as exc:
            raise BatteryError(source=exc) from exc
        return _SysFsBatteries(self, entries)

    def refresh(self, device: SysFsDevice) -> None:
        """Refresh a device's information in place."""
        device.refresh()

    def __repr__(self) -> str:
        return f"SysFsManager(root={str(self._root)!r})"