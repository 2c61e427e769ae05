[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dronefleet"
version = "0.1.0"
description = "Tick-based simulation of a drone fleet delivering prioritised packages"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "drones", "delivery", "priority-queue", "heap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dronefleet = "dronefleet.delivery:main"

[tool.hatch.build.targets.wheel]
packages = ["dronefleet"]

[tool.pytest.ini_options]
addopts = "-ra"
