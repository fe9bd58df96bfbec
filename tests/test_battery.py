import operator
import sys

import pytest

from batteryinfo.battery import Battery, Manager
from batteryinfo.device import BatteryDevice
from batteryinfo.errors import BatteryError
from batteryinfo.state import State
from batteryinfo.technology import Technology


class FakeDevice(BatteryDevice):
    def __init__(self, energy=1000.0, energy_full=2000.0, design=4000.0, rate=5.0, state=State.DISCHARGING):
        self._energy = energy
        self._energy_full = energy_full
        self._design = design
        self._rate = rate
        self._state = state

    def energy(self):
        return self._energy

    def energy_full(self):
        return self._energy_full

    def energy_full_design(self):
        return self._design

    def energy_rate(self):
        return self._rate

    def state(self):
        return self._state

    def voltage(self):
        return 12.0

    def temperature(self):
        return None

    def vendor(self):
        return "Example Corp"

    def model(self):
        return "Model X"

    def serial_number(self):
        return "0000"

    def technology(self):
        return Technology.LITHIUM_ION

    def cycle_count(self):
        return 7


class FakePlatform:
    def __init__(self, items):
        self.items = items
        self.refreshed = []

    def batteries(self):
        for item in self.items:
            if isinstance(item, BaseException):
                raise item
            yield item

    def refresh(self, device):
        self.refreshed.append(device)
        device._energy = 1500.0


def test_battery_delegates_to_device():
    device = FakeDevice()
    battery = Battery(device)
    assert battery.device is device
    assert battery.state_of_charge() == device.state_of_charge()
    assert battery.state_of_health() == device.state_of_health()
    assert battery.energy() == device.energy()
    assert battery.energy_full_design() == device.energy_full_design()
    assert battery.time_to_empty() == device.time_to_empty()
    assert battery.time_to_full() is None
    assert battery.state() is State.DISCHARGING
    assert battery.technology() is Technology.LITHIUM_ION
    assert battery.vendor() == "Example Corp"
    assert battery.cycle_count() == 7


def test_battery_repr_lists_fields():
    text = repr(Battery(FakeDevice()))
    assert text.startswith("Battery(")
    assert "vendor='Example Corp'" in text
    assert "model='Model X'" in text
    assert "State.DISCHARGING" in text


def test_manager_wraps_devices_in_batteries():
    devices = [FakeDevice(), FakeDevice(state=State.CHARGING)]
    batteries = list(Manager(FakePlatform(devices)).batteries())
    assert [battery.device for battery in batteries] == devices
    assert all(isinstance(battery, Battery) for battery in batteries)


def test_manager_propagates_device_error():
    error = BatteryError("cannot read")
    batteries = Manager(FakePlatform([error])).batteries()
    with pytest.raises(BatteryError) as info:
        next(batteries)
    assert info.value is error


def test_manager_refresh_passes_device():
    device = FakeDevice()
    platform = FakePlatform([device])
    manager = Manager(platform)
    battery = next(manager.batteries())
    manager.refresh(battery)
    assert platform.refreshed == [device]
    assert battery.energy() == 1500.0


def test_length_hint_follows_platform_iterator():
    class Listed:
        def batteries(self):
            return iter([FakeDevice(), FakeDevice()])

        def refresh(self, device):
            pass

    assert operator.length_hint(Manager(Listed()).batteries()) == 2


def test_unsupported_platform_raises(monkeypatch):
    monkeypatch.setattr(sys, "platform", "plan9")
    with pytest.raises(BatteryError, match="plan9"):
        Manager()


def test_linux_platform_uses_sysfs(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    assert "SysFsManager" in repr(Manager())