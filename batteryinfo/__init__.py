"""Battery information in SI units, read from sysfs or ACPI, or decoded from power-source records."""

__version__ = "0.7.9"