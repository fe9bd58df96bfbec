# batteryinfo

Read battery information and get it back in SI units: energy in joules,
power in watts, voltage in volts, charge in coulombs, temperature in kelvin,
time in seconds and ratios as fractions in the range `0.0 … 1.0`.

No third-party libraries are needed.

## Installation

```
pip install batteryinfo
```

For running the test suite:

```
pip install "batteryinfo[test]"
pytest
```

## Command line

```
batteryinfo [--interval SECONDS] [--count N] [--sysfs-root DIR]
```

Finds the first battery and prints its information, then keeps refreshing it
in place and printing it again.

* `--interval` – seconds between readings (default `1.0`)
* `--count` – number of readings to print; without it the command runs until
  interrupted
* `--sysfs-root` – read batteries from this power-supply directory instead of
  the system default

It prints `Unable to find any batteries` and exits with status 1 when no
battery is found, and prints `error: …` and exits with status 1 when a
battery cannot be read or refreshed. Ctrl-C ends it with status 0.

## Library use

`batteryinfo.battery.Manager` lists batteries and refreshes them in place.
Without an argument it picks the platform manager for the running system
(Linux or FreeBSD/DragonFly); any object with `batteries()` and
`refresh(device)` methods can be passed instead.

```python
from batteryinfo.battery import Manager
from batteryinfo.linux import SysFsManager

manager = Manager(SysFsManager("/sys/class/power_supply"))
for battery in manager.batteries():
    print(battery.state(), battery.state_of_charge(), battery.energy())
    manager.refresh(battery)
```

A `Battery` has the methods `state`, `technology`, `state_of_charge`,
`state_of_health`, `energy`, `energy_full`, `energy_full_design`,
`energy_rate`, `voltage`, `temperature`, `cycle_count`, `vendor`, `model`,
`serial_number`, `time_to_full` and `time_to_empty`. Values stay the same
until the battery is refreshed. `time_to_full` is only given while charging
and `time_to_empty` only while discharging; by default they are estimated
from the energy flow and dropped when above ten hours or ten days.

Iterating over `manager.batteries()` raises `BatteryError` for a battery that
cannot be read; iteration can then continue with the rest.

States are `batteryinfo.state.State` (`UNKNOWN`, `CHARGING`, `DISCHARGING`,
`EMPTY`, `FULL`); `State.parse` reads a name ignoring case. Chemistries are
`batteryinfo.technology.Technology`; `Technology.parse` maps driver codes
such as `Li-ion`, `LiPo` or `NiMH` and gives `UNKNOWN` for anything else.

### Units

`batteryinfo.units` holds the conversions from device units into SI values
(`milliwatt_hour`, `microampere_hour`, `millivolt`, `celsius`, `decikelvin`,
`percent`, `minute`, …), `bounded` to clamp a ratio into `0..1`, and helpers
for display:

```python
from batteryinfo import units

units.to_watt_hour(180000.0)   # joules to watt-hours
units.to_milliwatt(12.5)       # watts to milliwatts
units.to_celsius(298.15)       # kelvin to degrees Celsius
units.to_hours(5400.0)         # seconds to hours
units.to_days(172800.0)        # seconds to days
```

### Platform parts

* `batteryinfo.linux` – `SysFsManager` and `SysFsDevice` for the sysfs
  power-supply class. Only entries of type battery with system scope are
  listed. The attribute files are read by `batteryinfo.sysfs` and combined
  into values by `batteryinfo.sysfs_source.DataBuilder`, which falls back
  from energy files to charge files times the design voltage, and to the
  `capacity` percentage.
* `batteryinfo.freebsd` – `IoCtlManager` queries the ACPI control device
  (`/dev/acpi`) through `batteryinfo.freebsd_acpi.AcpiDevice`; units whose
  information is reported invalid are skipped. `AcpiBif` and `AcpiBst` decode
  the records, and `batteryinfo.freebsd_device.IoCtlDevice` turns them into a
  battery, converting mA/mAh values with the design voltage.
* `batteryinfo.darwin_power_source` – `PowerSource` takes a callable that
  returns a power-source property mapping (`Voltage`, `Amperage`,
  `MaxCapacity`, `CurrentCapacity`, `ExternalConnected`, `IsCharging`, …) and
  decodes it; `batteryinfo.darwin.IoKitDevice` wraps any `DataSource` as a
  battery, taking the time to full or to empty from the source.
* `batteryinfo.windows_ioctl` – `BatteryInformation` and `BatteryStatus`
  decode (`from_bytes`) and encode (`to_bytes`) the battery information and
  status records, with the IOCTL codes and query records.

```python
from batteryinfo.battery import Battery
from batteryinfo.darwin import IoKitDevice
from batteryinfo.darwin_power_source import PowerSource

props = {
    "ExternalConnected": False, "IsCharging": False,
    "Voltage": 12818, "Amperage": -1037,
    "MaxCapacity": 4119, "CurrentCapacity": 3938, "DesignCapacity": 4315,
}
battery = Battery(IoKitDevice(PowerSource(lambda: props)))
print(battery.state(), battery.energy_rate())
```

Errors are raised as `batteryinfo.errors.BatteryError`, which carries a
`kind` (`ErrorKind.NOT_FOUND`, `INVALID_DATA`, `OTHER`), an optional
description and the underlying `OSError` as `source`.

## What it does not do

On macOS and Windows the package does not query the operating system itself:
`Manager()` raises `BatteryError` there. The property mappings and the
binary records have to be obtained by the caller and handed to
`PowerSource`, `BatteryInformation.from_bytes` and `BatteryStatus.from_bytes`.