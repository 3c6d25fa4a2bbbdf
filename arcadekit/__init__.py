"""Tick-driven games drawn through a pluggable display: stopwatch, tic-tac-toe and missile command."""

__version__ = "0.1.0"