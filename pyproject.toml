[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "batteryinfo"
version = "0.7.9"
description = "Battery information in SI units: charge, energy, power, voltage and state"
requires-python = ">=3.10"
dependencies = []
keywords = ["battery", "power", "sysfs", "acpi", "laptop", "energy", "hardware"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Operating System :: POSIX :: BSD :: FreeBSD",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
batteryinfo = "batteryinfo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["batteryinfo"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
