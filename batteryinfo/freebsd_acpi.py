"""ACPI battery structures and queries of the BSD ``/dev/acpi`` device."""

from __future__ import annotations

import enum
import os
import struct
from dataclasses import dataclass

from .errors import BatteryError
from .state import State
from .technology import Technology

ACPI_CMBAT_MAXSTRLEN = 32

ACPI_BATT_STAT_FULL = 0x0000
ACPI_BATT_STAT_DISCHARG = 0x0001
ACPI_BATT_STAT_CHARGING = 0x0002
ACPI_BATT_STAT_CRITICAL = 0x0004
ACPI_BATT_STAT_INVALID = ACPI_BATT_STAT_DISCHARG | ACPI_BATT_STAT_CHARGING
ACPI_BATT_STAT_BST_MASK = ACPI_BATT_STAT_INVALID | ACPI_BATT_STAT_CRITICAL
ACPI_BATT_STAT_NOT_PRESENT = ACPI_BATT_STAT_BST_MASK

ACPI_BATT_UNKNOWN = 0xFFFF_FFFF

ACPI_BIF_UNITS_MW = 0
ACPI_BIF_UNITS_MA = 1

_BIF = struct.Struct(f"=9I{ACPI_CMBAT_MAXSTRLEN}s{ACPI_CMBAT_MAXSTRLEN}s{ACPI_CMBAT_MAXSTRLEN}s{ACPI_CMBAT_MAXSTRLEN}s")
_BST = struct.Struct("=4I")
_UNIT = struct.Struct("=i")
_ARG_SIZE = max(_BIF.size, _BST.size, _UNIT.size)

_IOC_OUT = 0x40000000
_IOC_IN = 0x80000000
_IOCPARM_MASK = 0x1FFF


def _ioc(direction: int, group: str, number: int, size: int) -> int:
    return direction | ((size & _IOCPARM_MASK) << 16) | (ord(group) << 8) | number


ACPIIO_BATT_GET_UNITS = _ioc(_IOC_OUT, "B", 0x01, _UNIT.size)
ACPIIO_BATT_GET_BIF = _ioc(_IOC_IN | _IOC_OUT, "B", 0x10, _ARG_SIZE)
ACPIIO_BATT_GET_BST = _ioc(_IOC_IN | _IOC_OUT, "B", 0x11, _ARG_SIZE)


class Units(enum.Enum):
    """Units of the capacity and rate values in battery information."""

    MILLIWATTS = ACPI_BIF_UNITS_MW
    MILLIAMPERES = ACPI_BIF_UNITS_MA


def _unpack(layout: struct.Struct, data: bytes, what: str) -> tuple:
    try:
        return layout.unpack_from(data)
    except struct.error as exc:
        raise BatteryError.invalid_data(f"{what} needs {layout.size} bytes, got {len(data)}") from exc


def _decode_string(raw: bytes) -> str | None:
    """Text up to the first NUL; ``None`` when there is no NUL."""
    end = raw.find(b"\0")
    if end < 0:
        return None
    return raw[:end].decode("utf-8", errors="replace")


@dataclass(frozen=True)
class AcpiBif:
    """Static battery information; capacities in mWh or mAh, see :meth:`units`."""

    raw_units: int = 0
    design_capacity: int = 0
    last_full_capacity: int = 0
    technology_code: int = 0
    design_voltage: int = 0
    warn_capacity: int = 0
    low_capacity: int = 0
    granularity1: int = 0
    granularity2: int = 0
    raw_model: bytes = b""
    raw_serial: bytes = b""
    raw_type: bytes = b""
    raw_oem: bytes = b""

    @classmethod
    def from_bytes(cls, data: bytes) -> AcpiBif:
        """Decode the native-order structure."""
        return cls(*_unpack(_BIF, data, "battery information"))

    def to_bytes(self) -> bytes:
        """Encode as the native-order structure."""
        return _BIF.pack(
            self.raw_units,
            self.design_capacity,
            self.last_full_capacity,
            self.technology_code,
            self.design_voltage,
            self.warn_capacity,
            self.low_capacity,
            self.granularity1,
            self.granularity2,
            self.raw_model,
            self.raw_serial,
            self.raw_type,
            self.raw_oem,
        )

    def is_valid(self) -> bool:
        """Whether the last full capacity is known."""
        return self.last_full_capacity != 0

    def units(self) -> Units:
        """Units of capacity and rate values."""
        try:
            return Units(self.raw_units)
        except ValueError:
            raise BatteryError.invalid_data(f"Unknown units from acpi_bif: {self.raw_units}") from None

    def model(self) -> str | None:
        return _decode_string(self.raw_model)

    def serial(self) -> str | None:
        return _decode_string(self.raw_serial)

    def type_(self) -> str | None:
        return _decode_string(self.raw_type)

    def oem(self) -> str | None:
        return _decode_string(self.raw_oem)

    def technology(self) -> Technology:
        """Chemistry decoded from the type string."""
        kind = self.type_()
        return Technology.UNKNOWN if kind is None else Technology.parse(kind)


@dataclass(frozen=True)
class AcpiBst:
    """Instant battery status; rate and capacity in the units of the matching bif."""

    raw_state: int = 0
    rate: int = 0
    capacity: int = 0
    voltage: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> AcpiBst:
        """Decode the native-order structure."""
        return cls(*_unpack(_BST, data, "battery status"))

    def to_bytes(self) -> bytes:
        """Encode as the native-order structure."""
        return _BST.pack(self.raw_state, self.rate, self.capacity, self.voltage)

    def is_valid(self) -> bool:
        """Whether the battery is present with known capacity and voltage."""
        return (
            self.raw_state != ACPI_BATT_STAT_NOT_PRESENT
            and self.capacity != ACPI_BATT_UNKNOWN
            and self.voltage != ACPI_BATT_UNKNOWN
        )

    def state(self) -> State:
        """Charging state derived from the state flags."""
        value = self.raw_state
        if value == ACPI_BATT_STAT_FULL:
            return State.FULL
        if value & ACPI_BATT_STAT_DISCHARG:
            return State.DISCHARGING
        if value & ACPI_BATT_STAT_CHARGING:
            return State.CHARGING
        if value & ACPI_BATT_STAT_CRITICAL:
            return State.DISCHARGING
        return State.UNKNOWN


class AcpiDevice:
    """An open ACPI control device."""

    def __init__(self, path: str | os.PathLike = "/dev/acpi") -> None:
        try:
            self._fd: int | None = os.open(path, os.O_RDONLY)
        except OSError as exc:
            raise BatteryError(source=exc) from exc

    def fileno(self) -> int:
        if self._fd is None:
            raise ValueError("ACPI device is closed")
        return self._fd

    def _ioctl(self, request: int, buffer: bytearray) -> bytearray:
        import fcntl

        try:
            fcntl.ioctl(self.fileno(), request, buffer, True)
        except OSError as exc:
            raise BatteryError(source=exc) from exc
        return buffer

    def count(self) -> int:
        """Number of available batteries."""
        buffer = self._ioctl(ACPIIO_BATT_GET_UNITS, bytearray(_UNIT.size))
        return _UNIT.unpack_from(buffer)[0]

    def _query(self, request: int, unit: int) -> bytearray:
        buffer = bytearray(_ARG_SIZE)
        _UNIT.pack_into(buffer, 0, unit)
        return self._ioctl(request, buffer)

    def bif(self, unit: int) -> AcpiBif | None:
        """Battery information of a unit; ``None`` when the driver reports it invalid."""
        info = AcpiBif.from_bytes(self._query(ACPIIO_BATT_GET_BIF, unit))
        return info if info.is_valid() else None

    def bst(self, unit: int) -> AcpiBst | None:
        """Battery status of a unit; ``None`` when the driver reports it invalid."""
        info = AcpiBst.from_bytes(self._query(ACPIIO_BATT_GET_BST, unit))
        return info if info.is_valid() else None

    def close(self) -> None:
        """Close the device; closing twice does nothing."""
        if self._fd is not None:
            fd, self._fd = self._fd, None
            os.close(fd)

    def __enter__(self) -> AcpiDevice:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"AcpiDevice(fd={self._fd})"