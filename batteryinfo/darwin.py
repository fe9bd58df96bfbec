"""Batteries backed by power-source property readings."""

from __future__ import annotations

import abc

from .device import BatteryDevice
from .state import State
from .technology import Technology


class DataSource(abc.ABC):
    """Raw readings of one power source, in SI units."""

    @abc.abstractmethod
    def refresh(self) -> None:
        """Re-read the changing values."""

    @abc.abstractmethod
    def fully_charged(self) -> bool:
        """Whether the source reports being fully charged."""

    @abc.abstractmethod
    def external_connected(self) -> bool:
        """Whether external power is connected."""

    @abc.abstractmethod
    def is_charging(self) -> bool:
        """Whether the battery is charging."""

    @abc.abstractmethod
    def voltage(self) -> float:
        """Voltage, in volts."""

    @abc.abstractmethod
    def amperage(self) -> float:
        """Absolute current, in amperes."""

    @abc.abstractmethod
    def design_capacity(self) -> float:
        """Design capacity, in coulombs."""

    @abc.abstractmethod
    def max_capacity(self) -> float:
        """Current full capacity, in coulombs."""

    @abc.abstractmethod
    def current_capacity(self) -> float:
        """Remaining capacity, in coulombs."""

    @abc.abstractmethod
    def temperature(self) -> float | None:
        """Temperature in kelvin, if known."""

    @abc.abstractmethod
    def cycle_count(self) -> int | None:
        """Number of charge cycles, if known."""

    @abc.abstractmethod
    def time_remaining(self) -> float | None:
        """Reported time to full or to empty in seconds, if known."""

    @abc.abstractmethod
    def manufacturer(self) -> str | None:
        """Manufacturer, if known."""

    @abc.abstractmethod
    def device_name(self) -> str | None:
        """Device name, if known."""

    @abc.abstractmethod
    def serial_number(self) -> str | None:
        """Serial number, if known."""


class IoKitDevice(BatteryDevice):
    """A battery whose values come from a :class:`DataSource`."""

    def __init__(self, source: DataSource) -> None:
        self.source = source

    def refresh(self) -> None:
        """Re-read the source."""
        self.source.refresh()

    def energy(self) -> float:
        return self.source.current_capacity() * self.source.voltage()

    def energy_full(self) -> float:
        return self.source.max_capacity() * self.source.voltage()

    def energy_full_design(self) -> float:
        return self.source.design_capacity() * self.source.voltage()

    def energy_rate(self) -> float:
        return self.source.amperage() * self.source.voltage()

    def state(self) -> State:
        source = self.source
        if not source.external_connected():
            return State.DISCHARGING
        if source.is_charging():
            return State.CHARGING
        if source.current_capacity() == 0:
            return State.EMPTY
        if source.fully_charged():
            return State.FULL
        return State.UNKNOWN

    def voltage(self) -> float:
        return self.source.voltage()

    def temperature(self) -> float | None:
        return self.source.temperature()

    def vendor(self) -> str | None:
        return self.source.manufacturer()

    def model(self) -> str | None:
        return self.source.device_name()

    def serial_number(self) -> str | None:
        return self.source.serial_number()

    def technology(self) -> Technology:
        return Technology.UNKNOWN

    def cycle_count(self) -> int | None:
        return self.source.cycle_count()

    def time_to_full(self) -> float | None:
        """The source's own estimate, when charging."""
        if self.state() is State.CHARGING:
            return self.source.time_remaining()
        return None

    def time_to_empty(self) -> float | None:
        """The source's own estimate, when discharging."""
        if self.state() is State.DISCHARGING:
            return self.source.time_remaining()
        return None

    def __repr__(self) -> str:
        return f"IoKitDevice(source={self.source!r})"