[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solartrack"
version = "0.1.0"
description = "Console monitor, telemetry parsing and control logic for a two-axis light-seeking solar tracker"
requires-python = ">=3.10"
keywords = ["solar", "tracker", "serial", "telemetry", "ldr", "servo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]
dependencies = [
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
solartrack-monitor = "solartrack.monitor:main"
solartrack-panel = "solartrack.telemetry:main"

[tool.hatch.build.targets.wheel]
packages = ["solartrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
