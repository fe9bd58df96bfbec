import errno
from pathlib import Path
from unittest import mock

import pytest

from batteryinfo import sysfs, units
from batteryinfo.errors import BatteryError, ErrorKind


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)
    return path


def test_get_string_strips_one_trailing_newline(tmp_path):
    path = write(tmp_path, "model_name", "abc\n\n")
    assert sysfs.get_string(path) == "abc\n"


def test_get_string_missing_file_is_none(tmp_path):
    assert sysfs.get_string(tmp_path / "nothing") is None


def test_get_string_leading_nul_is_invalid_data(tmp_path):
    path = write(tmp_path, "manufacturer", "\0abc\n")
    with pytest.raises(BatteryError) as info:
        sysfs.get_string(path)
    assert info.value.kind is ErrorKind.INVALID_DATA


def test_get_string_invalid_utf8_is_invalid_data(tmp_path):
    path = tmp_path / "serial_number"
    path.write_bytes(b"\xff\xfe\n")
    with pytest.raises(BatteryError) as info:
        sysfs.get_string(path)
    assert info.value.kind is ErrorKind.INVALID_DATA


def test_get_string_other_os_error_is_raised(tmp_path):
    with pytest.raises(BatteryError) as info:
        sysfs.get_string(tmp_path)
    assert isinstance(info.value.source, OSError)


def test_get_string_enodev_is_none(tmp_path):
    path = write(tmp_path, "status", "Full\n")
    with mock.patch.object(Path, "read_bytes", side_effect=OSError(errno.ENODEV, "No such device")):
        assert sysfs.get_string(path) is None


def test_get_parses_or_gives_none(tmp_path):
    good = write(tmp_path, "capacity", "12.5\n")
    bad = write(tmp_path, "temp", "abc\n")
    assert sysfs.get(good, sysfs.parse_float) == 12.5
    assert sysfs.get(bad, sysfs.parse_float) is None
    assert sysfs.get(tmp_path / "missing", sysfs.parse_float) is None


def test_parse_u32_accepts_plus_and_rejects_overflow():
    assert sysfs.parse_u32("+7") == 7
    assert sysfs.parse_u32("4294967295") == 0xFFFF_FFFF
    with pytest.raises(ValueError):
        sysfs.parse_u32("4294967296")
    with pytest.raises(ValueError):
        sysfs.parse_u32("-1")
    with pytest.raises(ValueError):
        sysfs.parse_u32(" 7")


@pytest.mark.parametrize("text", [" 1", "1 ", "1_0", ""])
def test_parse_float_rejects_loose_text(text):
    with pytest.raises(ValueError):
        sysfs.parse_float(text)


def test_energy_is_converted_from_microwatt_hours(tmp_path):
    path = write(tmp_path, "energy_now", "1000000\n")
    assert sysfs.energy(path) == pytest.approx(units.microwatt_hour(1000000.0))


def test_energy_missing_is_none(tmp_path):
    assert sysfs.energy(tmp_path / "energy_full") is None


def test_charge_threshold(tmp_path):
    assert sysfs.charge(write(tmp_path, "charge_now", "1\n")) is None
    value = sysfs.charge(write(tmp_path, "charge_full", "2\n"))
    assert value == pytest.approx(units.microampere_hour(2.0))


def test_voltage_threshold(tmp_path):
    assert sysfs.voltage(write(tmp_path, "voltage_now", "0\n")) is None
    value = sysfs.voltage(write(tmp_path, "voltage_avg", "10663000\n"))
    assert value == pytest.approx(10.663)


def test_power_threshold(tmp_path):
    assert sysfs.power(write(tmp_path, "power_now", "10000\n")) is None
    value = sysfs.power(write(tmp_path, "power_avg", "10001\n"))
    assert value == pytest.approx(units.microwatt(10001.0))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Battery", sysfs.SupplyType.BATTERY),
        ("bAtTeRy", sysfs.SupplyType.BATTERY),
        ("Mains", sysfs.SupplyType.MAINS),
        ("USB", sysfs.SupplyType.USB),
        ("Ups", sysfs.SupplyType.UPS),
        ("Wireless", sysfs.SupplyType.UNKNOWN),
    ],
)
def test_read_type(tmp_path, text, expected):
    assert sysfs.read_type(write(tmp_path, "type", text + "\n")) is expected


def test_read_type_missing_is_unknown(tmp_path):
    assert sysfs.read_type(tmp_path / "type") is sysfs.SupplyType.UNKNOWN


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Device", sysfs.Scope.DEVICE),
        ("SYSTEM", sysfs.Scope.SYSTEM),
        ("Unknown", sysfs.Scope.UNKNOWN),
        ("other", sysfs.Scope.UNKNOWN),
    ],
)
def test_read_scope(tmp_path, text, expected):
    assert sysfs.read_scope(write(tmp_path, "scope", text + "\n")) is expected


def test_read_scope_missing_is_system(tmp_path):
    assert sysfs.read_scope(tmp_path / "scope") is sysfs.Scope.SYSTEM