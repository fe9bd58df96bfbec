"""Reading power-supply attribute files of the Linux sysfs tree."""

from __future__ import annotations

import enum
import errno
import os
import re
import string
from pathlib import Path
from typing import Callable, TypeVar

from . import units
from .errors import BatteryError, ErrorKind

T = TypeVar("T")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_U32_PATTERN = re.compile(r"\+?[0-9]+")
_U32_MAX = 0xFFFF_FFFF

PathLike = str | os.PathLike


class SupplyType(enum.Enum):
    """Kind of power supply, as given by its ``type`` file."""

    BATTERY = "battery"
    MAINS = "mains"
    UPS = "ups"
    USB = "usb"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, text: str) -> SupplyType:
        """Parse a supply type ignoring ASCII case; anything else is ``UNKNOWN``."""
        try:
            return cls(text.translate(_ASCII_LOWER))
        except ValueError:
            return cls.UNKNOWN


class Scope(enum.Enum):
    """What a power supply powers.

    A supply without a ``scope`` file is taken to have ``SYSTEM`` scope.
    """

    DEVICE = "device"
    SYSTEM = "system"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, text: str) -> Scope:
        """Parse a scope ignoring ASCII case; anything else is ``UNKNOWN``."""
        try:
            return cls(text.translate(_ASCII_LOWER))
        except ValueError:
            return cls.UNKNOWN


def parse_float(text: str) -> float:
    """Parse a decimal number, rejecting surrounding whitespace and underscores."""
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid number: {text!r}")
    return float(text)


def parse_u32(text: str) -> int:
    """Parse an unsigned 32-bit integer."""
    if not _U32_PATTERN.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value > _U32_MAX:
        raise ValueError(f"unsigned integer out of range: {text!r}")
    return value


def get_string(path: PathLike) -> str | None:
    """Read an attribute file without its trailing newline.

    Returns ``None`` when the file is missing or the driver reports that the
    device is gone; raises ``BatteryError`` for any other failure.
    """
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        # Some drivers create the files but reading them fails with ENODEV.
        if exc.errno == errno.ENODEV:
            return None
        raise BatteryError(source=exc) from exc
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BatteryError(kind=ErrorKind.INVALID_DATA, source=exc) from exc
    if content.startswith("\0"):
        raise BatteryError(kind=ErrorKind.INVALID_DATA)
    return content.removesuffix("\n")


def get(path: PathLike, parse: Callable[[str], T]) -> T | None:
    """Read an attribute file and parse it; unparsable content gives ``None``."""
    content = get_string(path)
    if content is None:
        return None
    try:
        return parse(content)
    except ValueError:
        return None


def energy(path: PathLike) -> float | None:
    """Read a µWh value from an ``energy_*`` file, as joules."""
    value = get(path, parse_float)
    return None if value is None else units.microwatt_hour(value)


def charge(path: PathLike) -> float | None:
    """Read a µAh value from a ``charge_*`` file, as coulombs."""
    value = get(path, parse_float)
    if value is None or not value > 1.0:
        return None
    return units.microampere_hour(value)


def voltage(path: PathLike) -> float | None:
    """Read a µV value from a ``voltage_*`` file, as volts."""
    value = get(path, parse_float)
    if value is None or not value > 1.0:
        return None
    return units.microvolt(value)


def power(path: PathLike) -> float | None:
    """Read a µW value from a ``power_*`` file, as watts."""
    value = get(path, parse_float)
    if value is None or not value > 10_000.0:
        return None
    return units.microwatt(value)


def read_type(path: PathLike) -> SupplyType:
    """Read a device ``type`` file; a missing file gives ``UNKNOWN``."""
    value = get(path, SupplyType.parse)
    return SupplyType.UNKNOWN if value is None else value


def read_scope(path: PathLike) -> Scope:
    """Read a device ``scope`` file; a missing file gives ``SYSTEM``."""
    value = get(path, Scope.parse)
    return Scope.SYSTEM if value is None else value