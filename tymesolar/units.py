"""Plain calendar units shared by the solar types, with their range checks."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "YearUnit",
    "MonthUnit",
    "DayUnit",
    "SecondUnit",
    "WeekUnit",
    "validate_time",
    "validate_week",
    "index_of",
]


def index_of(index: int, size: int) -> int:
    """Wrap ``index`` into ``range(size)``, counting negative values from the end."""
    return index % size


def validate_time(hour: int, minute: int, second: int) -> None:
    """Raise ``ValueError`` unless the clock values form a valid time of day."""
    if not 0 <= hour <= 23:
        raise ValueError(f"illegal hour: {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"illegal minute: {minute}")
    if not 0 <= second <= 59:
        raise ValueError(f"illegal second: {second}")


def validate_week(index: int, start: int) -> None:
    """Raise ``ValueError`` unless the week index (0-5) and start weekday (0-6) are valid."""
    if not 0 <= index <= 5:
        raise ValueError(f"illegal week index: {index}")
    if not 0 <= start <= 6:
        raise ValueError(f"illegal week start: {start}")


@dataclass(frozen=True)
class YearUnit:
    """A calendar year."""

    year: int


@dataclass(frozen=True)
class MonthUnit(YearUnit):
    """A month within a year."""

    month: int


@dataclass(frozen=True)
class DayUnit(MonthUnit):
    """A day within a month."""

    day: int


@dataclass(frozen=True)
class SecondUnit(DayUnit):
    """A moment within a day, to the second."""

    hour: int
    minute: int
    second: int


@dataclass(frozen=True)
class WeekUnit(MonthUnit):
    """A week of a month, identified by its index and starting weekday."""

    index: int
    start: int