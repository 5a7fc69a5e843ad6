"""Solar calendar units: years, half years, seasons, months, weeks, days and times."""

__version__ = "1.3.8"

__all__ = ["units", "julian", "day", "month", "week", "time"]