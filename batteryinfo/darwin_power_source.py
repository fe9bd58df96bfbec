"""Power-source readings taken from a property dictionary."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from . import units
from .darwin import DataSource
from .errors import BatteryError

T = TypeVar("T")

FULLY_CHARGED_KEY = "FullyCharged"
EXTERNAL_CONNECTED_KEY = "ExternalConnected"
IS_CHARGING_KEY = "IsCharging"
VOLTAGE_KEY = "Voltage"
AMPERAGE_KEY = "Amperage"
DESIGN_CAPACITY_KEY = "DesignCapacity"
MAX_CAPACITY_KEY = "MaxCapacity"
CURRENT_CAPACITY_KEY = "CurrentCapacity"
TEMPERATURE_KEY = "Temperature"
CYCLE_COUNT_KEY = "CycleCount"
TIME_REMAINING_KEY = "TimeRemaining"
MANUFACTURER_KEY = "Manufacturer"
DEVICE_NAME_KEY = "DeviceName"
BATTERY_SERIAL_NUMBER_KEY = "BatterySerialNumber"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MASK = 0xFFFF_FFFF

Properties = Mapping[str, Any]


def _get_bool(props: Properties, key: str) -> bool:
    value = props.get(key)
    if isinstance(value, bool):
        return value
    raise BatteryError.not_found(key)


def _get_i32(props: Properties, key: str) -> int:
    value = props.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BatteryError.not_found(key)
    if isinstance(value, float):
        if not value.is_integer():
            raise BatteryError.not_found(key)
        value = int(value)
    if not _I32_MIN <= value <= _I32_MAX:
        raise BatteryError.not_found(key)
    return value


def _get_u32(props: Properties, key: str) -> int:
    # Read as a signed 32-bit number and reinterpret the bits as unsigned.
    return _get_i32(props, key) & _U32_MASK


def _get_string(props: Properties, key: str) -> str:
    value = props.get(key)
    if isinstance(value, str):
        return value
    raise BatteryError.not_found(key)


def _optional(getter: Callable[[Properties, str], T], props: Properties, key: str) -> T | None:
    try:
        return getter(props, key)
    except BatteryError:
        return None


def _time_remaining(props: Properties) -> float | None:
    value = _optional(_get_i32, props, TIME_REMAINING_KEY)
    if value is None or value == _I32_MAX:
        return None
    return units.minute(value)


@dataclass(frozen=True)
class PowerSourceData:
    """Changing values of a power source, in SI units."""

    fully_charged: bool | None
    external_connected: bool
    is_charging: bool
    voltage: float
    amperage: float
    design_capacity: float | None
    max_capacity: float
    current_capacity: float
    temperature: float | None
    cycle_count: int | None
    time_remaining: float | None

    @classmethod
    def from_properties(cls, props: Properties) -> PowerSourceData:
        """Decode a property dictionary; a missing required key raises ``BatteryError``."""
        design_capacity = _optional(_get_u32, props, DESIGN_CAPACITY_KEY)
        temperature = _optional(_get_i32, props, TEMPERATURE_KEY)
        return cls(
            fully_charged=_optional(_get_bool, props, FULLY_CHARGED_KEY),
            external_connected=_get_bool(props, EXTERNAL_CONNECTED_KEY),
            is_charging=_get_bool(props, IS_CHARGING_KEY),
            voltage=units.millivolt(_get_u32(props, VOLTAGE_KEY)),
            amperage=units.milliampere(abs(_get_i32(props, AMPERAGE_KEY))),
            design_capacity=None if design_capacity is None else units.milliampere_hour(design_capacity),
            max_capacity=units.milliampere_hour(_get_u32(props, MAX_CAPACITY_KEY)),
            current_capacity=units.milliampere_hour(_get_u32(props, CURRENT_CAPACITY_KEY)),
            temperature=None if temperature is None else units.celsius(temperature / 100.0),
            cycle_count=_optional(_get_u32, props, CYCLE_COUNT_KEY),
            time_remaining=_time_remaining(props),
        )


class PowerSource(DataSource):
    """A power source whose properties are fetched by a callable.

    Identification strings are read once; the other values are re-read on
    every refresh.
    """

    def __init__(self, read_properties: Callable[[], Properties]) -> None:
        self._read_properties = read_properties
        props = self._read()
        self.data = PowerSourceData.from_properties(props)
        self._manufacturer = _optional(_get_string, props, MANUFACTURER_KEY)
        self._device_name = _optional(_get_string, props, DEVICE_NAME_KEY)
        self._serial_number = _optional(_get_string, props, BATTERY_SERIAL_NUMBER_KEY)

    def _read(self) -> Properties:
        try:
            return self._read_properties()
        except OSError as exc:
            raise BatteryError(source=exc) from exc

    def refresh(self) -> None:
        self.data = PowerSourceData.from_properties(self._read())

    def fully_charged(self) -> bool:
        return True if self.data.fully_charged is None else self.data.fully_charged

    def external_connected(self) -> bool:
        return self.data.external_connected

    def is_charging(self) -> bool:
        return self.data.is_charging

    def voltage(self) -> float:
        return self.data.voltage

    def amperage(self) -> float:
        return self.data.amperage

    def design_capacity(self) -> float:
        return 0.0 if self.data.design_capacity is None else self.data.design_capacity

    def max_capacity(self) -> float:
        return self.data.max_capacity

    def current_capacity(self) -> float:
        return self.data.current_capacity

    def temperature(self) -> float | None:
        return self.data.temperature

    def cycle_count(self) -> int | None:
        return self.data.cycle_count

    def time_remaining(self) -> float | None:
        return self.data.time_remaining

    def manufacturer(self) -> str | None:
        return self._manufacturer

    def device_name(self) -> str | None:
        return self._device_name

    def serial_number(self) -> str | None:
        return self._serial_number

    def __repr__(self) -> str:
        return f"PowerSource(device_name={self._device_name!r})"