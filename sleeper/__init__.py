"""Countdown and suspend helpers used by sleep_cli."""

__version__ = "0.1.0"
