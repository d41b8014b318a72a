"""Event calendar with dates, times, event filtering and a text screen buffer."""

__version__ = "0.1.0"