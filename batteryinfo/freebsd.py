"""Batteries read through the BSD ACPI control device."""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar

from .errors import BatteryError
from .freebsd_acpi import AcpiBif, AcpiBst, AcpiDevice
from .freebsd_device import IoCtlDevice

T = TypeVar("T")


class _AcpiQueries(Protocol):
    def count(self) -> int: ...

    def bif(self, unit: int) -> AcpiBif | None: ...

    def bst(self, unit: int) -> AcpiBst | None: ...


def _attempt(query: Callable[[int], T], unit: int) -> tuple[T | None, BatteryError | None]:
    try:
        return query(unit), None
    except BatteryError as exc:
        return None, exc


class _IoCtlBatteries:
    """Iterator over the ACPI battery units.

    Units whose information or status the driver reports as invalid are
    skipped silently. A failed query raises ``BatteryError`` from ``next``;
    iteration may then continue with the following units.
    """

    def __init__(self, manager: IoCtlManager, count: int) -> None:
        self._manager = manager
        self._next = 0
        self._end = count

    def __iter__(self) -> _IoCtlBatteries:
        return self

    def __next__(self) -> IoCtlDevice:
        acpi = self._manager.acpi
        while self._next < self._end:
            unit = self._next
            self._next += 1
            bif, bif_error = _attempt(acpi.bif, unit)
            bst, bst_error = _attempt(acpi.bst, unit)
            if bif_error is not None:
                raise bif_error
            if bst_error is not None:
                raise bst_error
            if bif is not None and bst is not None:
                return IoCtlDevice(unit, bif, bst)
        raise StopIteration

    def __length_hint__(self) -> int:
        return max(self._end - self._next, 0)

    def __repr__(self) -> str:
        return f"IoCtlBatteries(start={self._next}, end={self._end})"


class IoCtlManager:
    """Finds and refreshes batteries through ACPI battery queries."""

    def __init__(self, acpi: _AcpiQueries | None = None) -> None:
        self.acpi: _AcpiQueries = AcpiDevice() if acpi is None else acpi

    def batteries(self) -> _IoCtlBatteries:
        """Iterate over the available battery units."""
        return _IoCtlBatteries(self, self.acpi.count())

    def refresh(self, device: IoCtlDevice) -> None:
        """Re-read a device's information and status in place."""
        bif = self.acpi.bif(device.unit)
        bst = self.acpi.bst(device.unit)
        if bif is None:
            raise BatteryError.invalid_data("Returned bif struct is invalid")
        if bst is None:
            raise BatteryError.invalid_data("Returned bst struct is invalid")
        device.refresh(bif, bst)

    def __repr__(self) -> str:
        return f"IoCtlManager(acpi={self.acpi!r})"