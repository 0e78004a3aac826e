"""Trading data toolkit: records, securities, periods, trade calendars, statistics and storage helpers."""

__version__ = "0.1.0"