"""Conversions between device-reported units and SI values.

All battery quantities are kept as plain floats in SI units:
charge in coulombs, energy in joules, current in amperes, power in watts,
potential in volts, temperature in kelvin, ratio as a fraction in ``0..1``
and time in seconds.
"""

from __future__ import annotations

import math

_SECONDS_PER_HOUR = 3600.0
_SECONDS_PER_DAY = 86400.0
_ZERO_CELSIUS = 273.15


def milliampere_hour(value: float) -> float:
    """Electric charge in mAh, as coulombs."""
    return value * 1e-3 * _SECONDS_PER_HOUR


def microampere_hour(value: float) -> float:
    """Electric charge in µAh, as coulombs."""
    return value * 1e-6 * _SECONDS_PER_HOUR


def milliwatt_hour(value: float) -> float:
    """Energy in mWh, as joules."""
    return value * 1e-3 * _SECONDS_PER_HOUR


def microwatt_hour(value: float) -> float:
    """Energy in µWh, as joules."""
    return value * 1e-6 * _SECONDS_PER_HOUR


def milliampere(value: float) -> float:
    """Electric current in mA, as amperes."""
    return value * 1e-3


def microampere(value: float) -> float:
    """Electric current in µA, as amperes."""
    return value * 1e-6


def watt(value: float) -> float:
    """Power in W, as watts."""
    return float(value)


def milliwatt(value: float) -> float:
    """Power in mW, as watts."""
    return value * 1e-3


def microwatt(value: float) -> float:
    """Power in µW, as watts."""
    return value * 1e-6


def volt(value: float) -> float:
    """Electric potential in V, as volts."""
    return float(value)


def millivolt(value: float) -> float:
    """Electric potential in mV, as volts."""
    return value * 1e-3


def microvolt(value: float) -> float:
    """Electric potential in µV, as volts."""
    return value * 1e-6


def celsius(value: float) -> float:
    """Temperature in °C, as kelvin."""
    return value + _ZERO_CELSIUS


def decikelvin(value: float) -> float:
    """Temperature in tenths of a kelvin, as kelvin."""
    return value / 10.0


def percent(value: float) -> float:
    """Ratio in percent, as a fraction."""
    return value / 100.0


def second(value: float) -> float:
    """Time in seconds, as seconds."""
    return float(value)


def minute(value: float) -> float:
    """Time in minutes, as seconds."""
    return value * 60.0


def bounded(value: float) -> float:
    """Clamp a ratio into the ``0..1`` range; NaN is left as it is."""
    if math.isnan(value):
        return value
    return min(max(value, 0.0), 1.0)


def to_watt_hour(joules: float) -> float:
    """Energy in joules, as Wh."""
    return joules / _SECONDS_PER_HOUR


def to_milliwatt(watts: float) -> float:
    """Power in watts, as mW."""
    return watts * 1e3


def to_celsius(kelvin: float) -> float:
    """Temperature in kelvin, as °C."""
    return kelvin - _ZERO_CELSIUS


def to_hours(seconds: float) -> float:
    """Time in seconds, as hours."""
    return seconds / _SECONDS_PER_HOUR


def to_days(seconds: float) -> float:
    """Time in seconds, as days."""
    return seconds / _SECONDS_PER_DAY