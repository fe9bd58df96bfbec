"""Battery structures exchanged with the Windows battery IOCTL interface."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

from .errors import BatteryError
from .state import State
from .technology import Technology

IOCTL_BATTERY_QUERY_TAG = 0x294040
IOCTL_BATTERY_QUERY_INFORMATION = 0x294044
IOCTL_BATTERY_QUERY_STATUS = 0x29404C

BATTERY_CAPACITY_RELATIVE = 0x40000000
BATTERY_SYSTEM_BATTERY = 0x80000000

BATTERY_UNKNOWN_CAPACITY = 0xFFFFFFFF
BATTERY_UNKNOWN_VOLTAGE = 0xFFFFFFFF
BATTERY_UNKNOWN_RATE = -0x80000000

BATTERY_POWER_ON_LINE = 0x00000001
BATTERY_DISCHARGING = 0x00000002
BATTERY_CHARGING = 0x00000004
BATTERY_CRITICAL = 0x00000008


class InfoLevel(enum.IntEnum):
    """Kind of information requested with a battery query."""

    INFORMATION = 0
    GRANULARITY_INFORMATION = 1
    TEMPERATURE = 2
    ESTIMATED_TIME = 3
    DEVICE_NAME = 4
    MANUFACTURE_DATE = 5
    MANUFACTURE_NAME = 6
    UNIQUE_ID = 7
    SERIAL_NUMBER = 8


_INFORMATION = struct.Struct("<IB3s4s6I")
_STATUS = struct.Struct("<IIIi")
_QUERY_INFORMATION = struct.Struct("<IIi")
_WAIT_STATUS = struct.Struct("<5I")


def _unpack(layout: struct.Struct, data: bytes, what: str) -> tuple:
    try:
        return layout.unpack_from(data)
    except struct.error as exc:
        raise BatteryError.invalid_data(
            f"{what} needs {layout.size} bytes, got {len(data)}"
        ) from exc


@dataclass(frozen=True)
class BatteryInformation:
    """Static battery information; capacities are in mWh."""

    capabilities: int = 0
    technology_kind: int = 0
    chemistry: bytes = b"\0\0\0\0"
    designed_capacity: int = 0
    full_charged_capacity: int = 0
    default_alert1: int = 0
    default_alert2: int = 0
    critical_bias: int = 0
    raw_cycle_count: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> BatteryInformation:
        """Decode the little-endian structure."""
        (
            capabilities,
            technology_kind,
            _reserved,
            chemistry,
            designed,
            full,
            alert1,
            alert2,
            bias,
            cycles,
        ) = _unpack(_INFORMATION, data, "battery information")
        return cls(capabilities, technology_kind, chemistry, designed, full, alert1, alert2, bias, cycles)

    def to_bytes(self) -> bytes:
        """Encode as the little-endian structure."""
        return _INFORMATION.pack(
            self.capabilities,
            self.technology_kind,
            b"\0\0\0",
            self.chemistry,
            self.designed_capacity,
            self.full_charged_capacity,
            self.default_alert1,
            self.default_alert2,
            self.critical_bias,
            self.raw_cycle_count,
        )

    def is_system_battery(self) -> bool:
        """Whether the battery powers the system."""
        return bool(self.capabilities & BATTERY_SYSTEM_BATTERY)

    def is_relative(self) -> bool:
        """Whether capacities are relative rather than in mWh."""
        return bool(self.capabilities & BATTERY_CAPACITY_RELATIVE)

    def technology(self) -> Technology:
        """Chemistry decoded from its four-character code."""
        return Technology.parse(self.chemistry.decode("latin-1"))

    def cycle_count(self) -> int | None:
        """Charge cycles, or ``None`` when reported as zero."""
        return self.raw_cycle_count or None


@dataclass(frozen=True)
class BatteryStatus:
    """Instant battery status; capacity in mWh, voltage in mV, rate in mW."""

    power_state: int = 0
    raw_capacity: int = 0
    raw_voltage: int = 0
    raw_rate: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> BatteryStatus:
        """Decode the little-endian structure."""
        return cls(*_unpack(_STATUS, data, "battery status"))

    def to_bytes(self) -> bytes:
        """Encode as the little-endian structure."""
        return _STATUS.pack(self.power_state, self.raw_capacity, self.raw_voltage, self.raw_rate)

    def is_charging(self) -> bool:
        return bool(self.power_state & BATTERY_CHARGING)

    def is_critical(self) -> bool:
        return bool(self.power_state & BATTERY_CRITICAL)

    def is_discharging(self) -> bool:
        return bool(self.power_state & BATTERY_DISCHARGING)

    def is_power_on_line(self) -> bool:
        return bool(self.power_state & BATTERY_POWER_ON_LINE)

    def state(self) -> State:
        """Charging state derived from the power-state flags."""
        if self.is_charging():
            return State.CHARGING
        if self.is_critical():
            return State.EMPTY
        if self.is_discharging():
            return State.DISCHARGING
        if self.is_power_on_line():
            return State.FULL
        return State.UNKNOWN

    def voltage(self) -> int | None:
        """Voltage in mV, if known."""
        return None if self.raw_voltage == BATTERY_UNKNOWN_VOLTAGE else self.raw_voltage

    def capacity(self) -> int | None:
        """Remaining capacity in mWh, if known."""
        return None if self.raw_capacity == BATTERY_UNKNOWN_CAPACITY else self.raw_capacity

    def rate(self) -> int | None:
        """Absolute charge or discharge rate in mW, if known."""
        return None if self.raw_rate == BATTERY_UNKNOWN_RATE else abs(self.raw_rate)


@dataclass(frozen=True)
class BatteryQueryInformation:
    """Request for one kind of battery information."""

    battery_tag: int = 0
    information_level: InfoLevel = InfoLevel.INFORMATION
    at_rate: int = 0

    def to_bytes(self) -> bytes:
        """Encode as the little-endian structure."""
        return _QUERY_INFORMATION.pack(self.battery_tag, int(self.information_level), self.at_rate)


@dataclass(frozen=True)
class BatteryWaitStatus:
    """Request for the battery status."""

    battery_tag: int = 0
    timeout: int = 0
    power_state: int = 0
    low_capacity: int = 0
    high_capacity: int = 0

    def to_bytes(self) -> bytes:
        """Encode as the little-endian structure."""
        return _WAIT_STATUS.pack(
            self.battery_tag, self.timeout, self.power_state, self.low_capacity, self.high_capacity
        )