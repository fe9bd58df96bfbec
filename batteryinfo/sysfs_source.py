"""Computing battery values from a sysfs power-supply directory."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Callable, Iterable

from . import sysfs, units
from .errors import BatteryError, ErrorKind
from .state import State
from .technology import Technology

# Smallest difference the drivers' single-precision values can express near 1.
_F32_EPSILON = 1.1920929e-07
_ACPI_ONES_WATTS = 65535.0
_MAX_SANE_WATTS = 100.0


def _divide(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class InstantData:
    """Battery values read at one moment, in SI units."""

    state_of_health: float
    state_of_charge: float
    energy: float
    energy_full: float
    energy_full_design: float
    energy_rate: float
    voltage: float
    state: State
    temperature: float | None
    cycle_count: int | None


class DataBuilder:
    """Reads and derives battery values from one sysfs device directory.

    Derived values are computed on first use and then kept.
    """

    def __init__(self, root: str | os.PathLike) -> None:
        self._root = Path(root)

    def _path(self, name: str) -> Path:
        return self._root / name

    def _first(self, reader: Callable[[Path], float | None], names: Iterable[str]) -> float | None:
        """First value any of the files gives; read errors count as missing."""
        for name in names:
            try:
                value = reader(self._path(name))
            except BatteryError:
                continue
            if value is not None:
                return value
        return None

    def collect(self) -> InstantData:
        """Read everything that may change between refreshes."""
        return InstantData(
            state_of_charge=self._state_of_charge,
            state_of_health=self._state_of_health,
            energy=self._energy,
            energy_full=self._energy_full,
            energy_full_design=self._energy_full_design,
            energy_rate=self._energy_rate,
            voltage=self._voltage(),
            state=self._state,
            temperature=self._temperature(),
            cycle_count=self._cycle_count(),
        )

    @cached_property
    def _design_voltage(self) -> float:
        value = self._first(
            sysfs.voltage,
            ("voltage_max_design", "voltage_min_design", "voltage_present", "voltage_now"),
        )
        if value is None:
            raise BatteryError(kind=ErrorKind.NOT_FOUND)
        return value

    def _energy_now(self) -> float | None:
        return self._first(sysfs.energy, ("energy_now", "energy_avg"))

    def _charge_now(self) -> float | None:
        return self._first(sysfs.charge, ("charge_now", "charge_avg"))

    def _charge_full(self) -> float:
        value = self._first(sysfs.charge, ("charge_full", "charge_full_design"))
        return units.microampere_hour(0.0) if value is None else value

    def state_of_health(self) -> float:
        """Full energy relative to design energy, capped to ``0..1``."""
        return self._state_of_health

    @cached_property
    def _state_of_health(self) -> float:
        energy_full = self._energy_full
        if energy_full != 0:
            return units.bounded(_divide(energy_full, self._energy_full_design))
        return units.percent(100.0)

    @cached_property
    def _energy(self) -> float:
        energy_now = self._energy_now()
        if energy_now is not None:
            return energy_now
        charge_now = self._charge_now()
        if charge_now is not None:
            return charge_now * self._design_voltage
        try:
            capacity = sysfs.get(self._path("capacity"), sysfs.parse_float)
        except BatteryError:
            capacity = None
        if capacity is None:
            raise BatteryError.not_found("Unable to calculate device energy value")
        return self._energy_full * units.bounded(units.percent(capacity))

    @cached_property
    def _energy_full(self) -> float:
        value = sysfs.energy(self._path("energy_full"))
        if value is not None:
            return value
        charge_full = sysfs.charge(self._path("charge_full"))
        if charge_full is not None:
            return charge_full * self._design_voltage
        return self._energy_full_design

    @cached_property
    def _energy_full_design(self) -> float:
        value = sysfs.energy(self._path("energy_full_design"))
        if value is not None:
            return value
        charge_full_design = sysfs.charge(self._path("charge_full_design"))
        if charge_full_design is not None:
            return charge_full_design * self._design_voltage
        # Both design files may be missing; fall back to zero.
        return units.microwatt_hour(0.0)

    @cached_property
    def _energy_rate(self) -> float:
        value = sysfs.power(self._path("power_now"))
        if value is None:
            current_now = sysfs.get(self._path("current_now"), sysfs.parse_float)
            if current_now is not None:
                # With charge files present current_now is in µA, otherwise it is µW.
                if self._charge_full() != 0:
                    value = units.microampere(current_now) * self._design_voltage
                else:
                    value = units.microwatt(current_now)
        if value is None:
            return units.microwatt(0.0)
        if value > _MAX_SANE_WATTS:
            return units.watt(0.0)
        # Some batteries report huge rates when nearly empty.
        if value < units.microwatt(10.0):
            return units.watt(0.0)
        # ACPI reports all ones when it cannot compute the rate.
        if abs(value - _ACPI_ONES_WATTS) < _F32_EPSILON:
            return units.watt(0.0)
        return value

    @cached_property
    def _state_of_charge(self) -> float:
        capacity = sysfs.get(self._path("capacity"), sysfs.parse_float)
        if capacity is not None:
            return units.bounded(units.percent(capacity))
        energy_full = self._energy_full
        if math.copysign(1.0, energy_full) > 0:
            return _divide(self._energy, energy_full)
        return units.percent(0.0)

    @cached_property
    def _state(self) -> State:
        value = sysfs.get(self._path("status"), State.parse)
        return State.UNKNOWN if value is None else value

    def _voltage(self) -> float:
        value = self._first(sysfs.voltage, ("voltage_now", "voltage_avg"))
        if value is None:
            raise BatteryError.not_found("Unable to calculate device voltage value")
        return value

    def _temperature(self) -> float | None:
        value = sysfs.get(self._path("temp"), sysfs.parse_float)
        return None if value is None else units.celsius(value / 10.0)

    def _cycle_count(self) -> int | None:
        # Many drivers report zero cycles even for old batteries.
        value = sysfs.get(self._path("cycle_count"), sysfs.parse_u32)
        return value or None

    def manufacturer(self) -> str | None:
        """Manufacturer name, if present."""
        return sysfs.get_string(self._path("manufacturer"))

    def model(self) -> str | None:
        """Model name, if present."""
        return sysfs.get_string(self._path("model_name"))

    def serial_number(self) -> str | None:
        """Serial number, if present."""
        return sysfs.get_string(self._path("serial_number"))

    def technology(self) -> Technology:
        """Battery chemistry; ``UNKNOWN`` when missing."""
        value = sysfs.get(self._path("technology"), Technology.parse)
        return Technology.UNKNOWN if value is None else value