import math
from dataclasses import dataclass

from batteryinfo import units
from batteryinfo.darwin import DataSource, IoKitDevice
from batteryinfo.state import State
from batteryinfo.technology import Technology


@dataclass
class FakeSource(DataSource):
    """Readings in mV, mA, mAh and minutes, as a power-source registry shows them."""

    is_fully_charged: bool = False
    is_external_connected: bool = False
    charging: bool = False
    voltage_mv: int = 0
    amperage_ma: int = 0
    design_capacity_mah: int = 0
    max_capacity_mah: int = 0
    current_capacity_mah: int = 0
    temperature_c: float | None = None
    cycles: int | None = None
    remaining_minutes: int | None = None
    refreshes: int = 0

    def refresh(self):
        self.refreshes += 1

    def fully_charged(self):
        return self.is_fully_charged

    def external_connected(self):
        return self.is_external_connected

    def is_charging(self):
        return self.charging

    def voltage(self):
        return units.millivolt(self.voltage_mv)

    def amperage(self):
        return units.milliampere(abs(self.amperage_ma))

    def design_capacity(self):
        return units.milliampere_hour(self.design_capacity_mah)

    def max_capacity(self):
        return units.milliampere_hour(self.max_capacity_mah)

    def current_capacity(self):
        return units.milliampere_hour(self.current_capacity_mah)

    def temperature(self):
        return None if self.temperature_c is None else units.celsius(self.temperature_c)

    def cycle_count(self):
        return self.cycles

    def time_remaining(self):
        return None if self.remaining_minutes is None else units.minute(self.remaining_minutes)

    def manufacturer(self):
        return None

    def device_name(self):
        return None

    def serial_number(self):
        return None


def test_energy_calculation():
    source = FakeSource(
        current_capacity_mah=3938,
        design_capacity_mah=4315,
        max_capacity_mah=4119,
        voltage_mv=12818,
        amperage_ma=-1037,
    )
    device = IoKitDevice(source)

    assert math.floor(units.to_milliwatt(device.energy_rate())) == 13292
    assert math.floor(units.to_watt_hour(device.energy())) == 50
    assert math.floor(units.to_watt_hour(device.energy_full())) == 52
    assert math.floor(units.to_watt_hour(device.energy_full_design())) == 55


def test_state_discharging_without_external_power():
    device = IoKitDevice(FakeSource(charging=True, current_capacity_mah=100))
    assert device.state() is State.DISCHARGING


def test_state_charging():
    device = IoKitDevice(FakeSource(is_external_connected=True, charging=True))
    assert device.state() is State.CHARGING


def test_state_empty():
    device = IoKitDevice(FakeSource(is_external_connected=True, is_fully_charged=True))
    assert device.state() is State.EMPTY


def test_state_full():
    device = IoKitDevice(
        FakeSource(is_external_connected=True, is_fully_charged=True, current_capacity_mah=100)
    )
    assert device.state() is State.FULL


def test_state_unknown():
    device = IoKitDevice(FakeSource(is_external_connected=True, current_capacity_mah=100))
    assert device.state() is State.UNKNOWN


def test_time_to_full_uses_reported_time_when_charging():
    device = IoKitDevice(
        FakeSource(is_external_connected=True, charging=True, remaining_minutes=42)
    )
    assert device.time_to_full() == units.minute(42)
    assert device.time_to_empty() is None


def test_time_to_empty_uses_reported_time_when_discharging():
    device = IoKitDevice(FakeSource(remaining_minutes=90, current_capacity_mah=100))
    assert device.time_to_empty() == units.minute(90)
    assert device.time_to_full() is None


def test_technology_is_unknown():
    assert IoKitDevice(FakeSource()).technology() is Technology.UNKNOWN


def test_state_of_health_is_capped():
    source = FakeSource(voltage_mv=12000, design_capacity_mah=4000, max_capacity_mah=4500)
    assert IoKitDevice(source).state_of_health() == 1.0


def test_refresh_delegates_to_source():
    source = FakeSource()
    device = IoKitDevice(source)
    device.refresh()
    device.refresh()
    assert source.refreshes == 2


def test_optional_values_pass_through():
    device = IoKitDevice(FakeSource(temperature_c=30.0, cycles=123))
    assert device.temperature() == units.celsius(30.0)
    assert device.cycle_count() == 123
    assert device.vendor() is None