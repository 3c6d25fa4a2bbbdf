[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadekit"
version = "0.1.0"
description = "Tick-driven handheld-style games and gadgets: stopwatch, two-player tic-tac-toe and missile command, drawn through a pluggable display."
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["games", "tic-tac-toe", "missile-command", "stopwatch", "state-machine", "display"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["arcadekit"]

[tool.pytest.ini_options]
addopts = "-ra"
