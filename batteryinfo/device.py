"""Common interface of platform battery devices."""

from __future__ import annotations

import abc
import math

from . import units
from .state import State
from .technology import Technology

_MAX_HOURS_TO_FULL = 10.0
_MAX_DAYS_TO_EMPTY = 10.0


def _divide(numerator: float, denominator: float) -> float:
    """Divide the way IEEE floats do, without raising on zero."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class BatteryDevice(abc.ABC):
    """A platform battery with its values already loaded.

    All quantities are in SI units (see :mod:`batteryinfo.units`).
    """

    def state_of_health(self) -> float:
        """Full energy relative to design energy, capped to ``0..1``."""
        return units.bounded(_divide(self.energy_full(), self.energy_full_design()))

    def state_of_charge(self) -> float:
        """Current energy relative to full energy, capped to ``0..1``."""
        return units.bounded(_divide(self.energy(), self.energy_full()))

    @abc.abstractmethod
    def energy(self) -> float:
        """Energy currently held, in joules."""

    @abc.abstractmethod
    def energy_full(self) -> float:
        """Energy held when considered full, in joules."""

    @abc.abstractmethod
    def energy_full_design(self) -> float:
        """Energy the battery was designed to hold when full, in joules."""

    @abc.abstractmethod
    def energy_rate(self) -> float:
        """Energy flow, in watts."""

    @abc.abstractmethod
    def state(self) -> State:
        """Current charging state."""

    @abc.abstractmethod
    def voltage(self) -> float:
        """Voltage, in volts."""

    @abc.abstractmethod
    def temperature(self) -> float | None:
        """Temperature in kelvin, if known."""

    @abc.abstractmethod
    def vendor(self) -> str | None:
        """Manufacturer, if known."""

    @abc.abstractmethod
    def model(self) -> str | None:
        """Model name, if known."""

    @abc.abstractmethod
    def serial_number(self) -> str | None:
        """Serial number, if known."""

    @abc.abstractmethod
    def technology(self) -> Technology:
        """Battery chemistry."""

    @abc.abstractmethod
    def cycle_count(self) -> int | None:
        """Number of charge cycles, if known."""

    def time_to_full(self) -> float | None:
        """Seconds until full, estimated from the current energy flow.

        ``None`` unless charging with a non-zero rate, when the battery
        reports more energy than its full value, or when the estimate
        exceeds ten hours.
        """
        rate = self.energy_rate()
        if self.state() is not State.CHARGING or rate == 0:
            return None
        energy_left = self.energy_full() - self.energy()
        if math.copysign(1.0, energy_left) < 0:
            return None
        seconds = _divide(energy_left, rate)
        if units.to_hours(seconds) > _MAX_HOURS_TO_FULL:
            return None
        return seconds

    def time_to_empty(self) -> float | None:
        """Seconds until empty, estimated from the current energy flow.

        ``None`` unless discharging with a non-zero rate, or when the
        estimate exceeds ten days.
        """
        rate = self.energy_rate()
        if self.state() is not State.DISCHARGING or rate == 0:
            return None
        seconds = _divide(self.energy(), rate)
        if units.to_days(seconds) > _MAX_DAYS_TO_EMPTY:
            return None
        return seconds