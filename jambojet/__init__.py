"""Airline booking interface: flight timetable, widget tree, and home, booking and ticket screens."""

__version__ = "0.1.0"