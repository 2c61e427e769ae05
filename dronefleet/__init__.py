"""Tick-based simulation of a drone fleet delivering prioritised packages."""

__version__ = "0.1.0"