"""Weeks of the solar calendar, counted within their month."""

from __future__ import annotations

from dataclasses import dataclass

from .day import SolarDay
from .month import SolarMonth
from .units import WeekUnit, index_of, validate_week

__all__ = ["SolarWeek", "WEEK_INDEX_NAMES"]

WEEK_INDEX_NAMES = ("第一周", "第二周", "第三周", "第四周", "第五周", "第六周")


@dataclass(frozen=True, eq=False)
class SolarWeek(WeekUnit):
    """A week of a solar month; ``start`` is the weekday a week begins on (0 is Sunday).

    Two weeks are equal when they begin on the same day, so the last week of
    one month and the first week of the next may compare equal.
    """

    def __post_init__(self) -> None:
        self.validate(self.year, self.month, self.index, self.start)

    @staticmethod
    def validate(year: int, month: int, index: int, start: int) -> None:
        """Raise ``ValueError`` unless the month holds a week with this index."""
        validate_week(index, start)
        solar_month = SolarMonth(year, month)
        if index >= solar_month.week_count(start):
            raise ValueError(
                f"illegal solar week index: {index} in month: {solar_month}"
            )

    def next(self, n: int) -> SolarWeek:
        """The week ``n`` weeks later (earlier when ``n`` is negative)."""
        d = self.index
        m = self.solar_month()
        start = self.start
        if n > 0:
            d += n
            week_count = m.week_count(start)
            while d >= week_count:
                d -= week_count
                m = m.next(1)
                # The month's first week continues the previous month's last one.
                if m.first_day().week() != start:
                    d += 1
                week_count = m.week_count(start)
        elif n < 0:
            d += n
            while d < 0:
                if m.first_day().week() != start:
                    d -= 1
                m = m.next(-1)
                d += m.week_count(start)
        return SolarWeek(m.year, m.month, d, start)

    def name(self) -> str:
        """Name of the week within its month, such as ``第一周``."""
        return WEEK_INDEX_NAMES[self.index]

    def solar_month(self) -> SolarMonth:
        """The month this week is counted in."""
        return SolarMonth(self.year, self.month)

    def first_day(self) -> SolarDay:
        """The day the week begins on, possibly in the previous month."""
        first = SolarDay(self.year, self.month, 1)
        return first.next(self.index * 7 - index_of(first.week() - self.start, 7))

    def days(self) -> list[SolarDay]:
        """The seven days of the week in order."""
        first = self.first_day()
        return [first.next(i) for i in range(7)]

    def index_in_year(self) -> int:
        """Zero-based position of the week among the weeks of its year."""
        target = self.first_day()
        week = SolarWeek(self.year, 1, 0, self.start)
        count = 0
        while week.first_day() != target:
            week = week.next(1)
            count += 1
        return count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SolarWeek):
            return NotImplemented
        return self.first_day() == other.first_day()

    def __hash__(self) -> int:
        return hash(self.first_day())

    def __str__(self) -> str:
        return f"{self.solar_month()}{self.name()}"