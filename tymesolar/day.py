"""Days of the solar calendar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .julian import day_number, from_day_number, weekday
from .units import DayUnit

if TYPE_CHECKING:
    from .month import SolarMonth
    from .week import SolarWeek

__all__ = ["SolarDay", "WEEK_NAMES"]

WEEK_NAMES = ("日", "一", "二", "三", "四", "五", "六")


@dataclass(frozen=True, order=True)
class SolarDay(DayUnit):
    """A single day, validated on creation."""

    def __post_init__(self) -> None:
        self.validate(self.year, self.month, self.day)

    @staticmethod
    def validate(year: int, month: int, day: int) -> None:
        """Raise ``ValueError`` unless the date exists on the solar calendar."""
        day_number(year, month, day)

    @property
    def _number(self) -> int:
        return day_number(self.year, self.month, self.day)

    def next(self, n: int) -> SolarDay:
        """The day ``n`` days later (earlier when ``n`` is negative)."""
        return SolarDay(*from_day_number(self._number + n))

    def name(self) -> str:
        """Name of the day within its month, such as ``1日``."""
        return f"{self.day}日"

    def solar_month(self) -> SolarMonth:
        """The month this day belongs to."""
        from .month import SolarMonth

        return SolarMonth(self.year, self.month)

    def week(self) -> int:
        """Day of the week, 0 for Sunday through 6 for Saturday."""
        return weekday(self.year, self.month, self.day)

    def week_name(self) -> str:
        """Chinese name of the day of the week."""
        return WEEK_NAMES[self.week()]

    def solar_week(self, start: int) -> SolarWeek:
        """The week of the month holding this day, weeks starting on ``start``."""
        from .week import SolarWeek

        offset = (weekday(self.year, self.month, 1) - start) % 7
        index = (self.day + offset + 6) // 7 - 1
        return SolarWeek(self.year, self.month, index, start)

    def is_before(self, target: SolarDay) -> bool:
        """Whether this day comes strictly before ``target``."""
        return (self.year, self.month, self.day) < (target.year, target.month, target.day)

    def is_after(self, target: SolarDay) -> bool:
        """Whether this day comes strictly after ``target``."""
        return (self.year, self.month, self.day) > (target.year, target.month, target.day)

    def index_in_year(self) -> int:
        """Zero-based position of the day within its year."""
        return self.subtract(SolarDay(self.year, 1, 1))

    def subtract(self, target: SolarDay) -> int:
        """Number of days from ``target`` to this day."""
        return self._number - target._number

    def __str__(self) -> str:
        return f"{self.year}年{self.month}月{self.name()}"