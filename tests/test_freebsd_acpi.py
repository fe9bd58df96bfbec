import pytest

from batteryinfo.errors import BatteryError, ErrorKind
from batteryinfo.freebsd_acpi import (
    ACPI_BATT_STAT_NOT_PRESENT,
    ACPI_BATT_UNKNOWN,
    AcpiBif,
    AcpiBst,
    AcpiDevice,
    Units,
)
from batteryinfo.state import State
from batteryinfo.technology import Technology


def _bif(**overrides):
    fields = dict(
        raw_units=0,
        design_capacity=50000,
        last_full_capacity=45000,
        design_voltage=11100,
        raw_model=b"MODEL-X\0",
        raw_serial=b"TEST-SERIAL-0001\0",
        raw_type=b"LION\0",
        raw_oem=b"Acme\0",
    )
    fields.update(overrides)
    return AcpiBif(**fields)


def test_bif_round_trip():
    bif = _bif()
    decoded = AcpiBif.from_bytes(bif.to_bytes())
    assert decoded.design_capacity == 50000
    assert decoded.last_full_capacity == 45000
    assert decoded.design_voltage == 11100
    assert decoded.model() == "MODEL-X"
    assert decoded.serial() == "TEST-SERIAL-0001"
    assert decoded.oem() == "Acme"
    assert decoded.type_() == "LION"


def test_bif_strings_without_nul_are_none():
    bif = _bif(raw_model=b"A" * 32, raw_type=b"B" * 32)
    assert bif.model() is None
    assert bif.type_() is None
    assert bif.technology() is Technology.UNKNOWN


def test_bif_technology():
    assert _bif().technology() is Technology.LITHIUM_ION
    assert _bif(raw_type=b"unobtainium\0").technology() is Technology.UNKNOWN


def test_bif_validity():
    assert _bif().is_valid() is True
    assert _bif(last_full_capacity=0).is_valid() is False


def test_bif_units():
    assert _bif(raw_units=0).units() is Units.MILLIWATTS
    assert _bif(raw_units=1).units() is Units.MILLIAMPERES
    with pytest.raises(BatteryError) as info:
        _bif(raw_units=2).units()
    assert info.value.kind is ErrorKind.INVALID_DATA


def test_bif_from_short_bytes():
    with pytest.raises(BatteryError) as info:
        AcpiBif.from_bytes(b"\0" * 10)
    assert info.value.kind is ErrorKind.INVALID_DATA


def test_bst_round_trip():
    bst = AcpiBst(raw_state=1, rate=1500, capacity=30000, voltage=11800)
    assert AcpiBst.from_bytes(bst.to_bytes()) == bst


def test_bst_from_short_bytes():
    with pytest.raises(BatteryError):
        AcpiBst.from_bytes(b"\0" * 4)


@pytest.mark.parametrize(
    ("raw_state", "expected"),
    [
        (0, State.FULL),
        (1, State.DISCHARGING),
        (2, State.CHARGING),
        (3, State.DISCHARGING),
        (4, State.DISCHARGING),
        (6, State.CHARGING),
        (8, State.UNKNOWN),
    ],
)
def test_bst_state(raw_state, expected):
    assert AcpiBst(raw_state=raw_state).state() is expected


def test_bst_validity():
    assert AcpiBst(raw_state=1, capacity=10, voltage=10).is_valid() is True
    assert AcpiBst(raw_state=ACPI_BATT_STAT_NOT_PRESENT, capacity=10, voltage=10).is_valid() is False
    assert AcpiBst(raw_state=1, capacity=ACPI_BATT_UNKNOWN, voltage=10).is_valid() is False
    assert AcpiBst(raw_state=1, capacity=10, voltage=ACPI_BATT_UNKNOWN).is_valid() is False


def test_device_missing_path(tmp_path):
    with pytest.raises(BatteryError) as info:
        AcpiDevice(tmp_path / "missing")
    assert info.value.kind is ErrorKind.NOT_FOUND


def test_device_ioctl_on_regular_file_fails(tmp_path):
    path = tmp_path / "acpi"
    path.write_bytes(b"")
    with AcpiDevice(path) as device:
        with pytest.raises(BatteryError) as info:
            device.count()
    assert isinstance(info.value.source, OSError)


def test_device_closed(tmp_path):
    path = tmp_path / "acpi"
    path.write_bytes(b"")
    device = AcpiDevice(path)
    device.close()
    device.close()
    with pytest.raises(ValueError):
        device.bst(0)