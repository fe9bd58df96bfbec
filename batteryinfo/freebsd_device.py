"""A battery read through BSD ACPI battery queries."""

from __future__ import annotations

from . import units
from .device import BatteryDevice
from .freebsd_acpi import AcpiBif, AcpiBst, Units
from .state import State
from .technology import Technology


class IoCtlDevice(BatteryDevice):
    """One ACPI battery unit with its values in SI units."""

    def __init__(self, unit: int, bif: AcpiBif, bst: AcpiBst) -> None:
        self._unit = unit
        self._manufacturer = bif.oem()
        self._model = bif.model()
        self._serial_number = bif.serial()
        self._technology = bif.technology()
        self.refresh(bif, bst)

    @property
    def unit(self) -> int:
        """ACPI battery unit number."""
        return self._unit

    def refresh(self, bif: AcpiBif, bst: AcpiBst) -> None:
        """Update the changing values from fresh bif and bst readings."""
        # Values in mA/mAh are turned into power/energy using the design voltage.
        battery_units = bif.units()
        design_voltage = units.millivolt(bif.design_voltage)
        if battery_units is Units.MILLIWATTS:
            self._energy_rate = units.milliwatt(bst.rate)
            self._current_capacity = units.milliwatt_hour(bst.capacity)
            self._design_capacity = units.milliwatt_hour(bif.design_capacity)
            self._max_capacity = units.milliwatt_hour(bif.last_full_capacity)
        else:
            self._energy_rate = units.milliampere(bst.rate) * design_voltage
            self._current_capacity = units.milliampere_hour(bst.capacity) * design_voltage
            self._design_capacity = units.milliampere_hour(bif.design_capacity) * design_voltage
            self._max_capacity = units.milliampere_hour(bif.last_full_capacity) * design_voltage
        self._state = bst.state()
        self._voltage = units.millivolt(bst.voltage)

    def energy(self) -> float:
        return self._current_capacity

    def energy_full(self) -> float:
        return self._max_capacity

    def energy_full_design(self) -> float:
        return self._design_capacity

    def energy_rate(self) -> float:
        return self._energy_rate

    def state(self) -> State:
        return self._state

    def voltage(self) -> float:
        return self._voltage

    def temperature(self) -> float | None:
        return None

    def vendor(self) -> str | None:
        return self._manufacturer

    def model(self) -> str | None:
        return self._model

    def serial_number(self) -> str | None:
        return self._serial_number

    def technology(self) -> Technology:
        return self._technology

    def cycle_count(self) -> int | None:
        return None

    def __repr__(self) -> str:
        return f"IoCtlDevice(unit={self._unit})"