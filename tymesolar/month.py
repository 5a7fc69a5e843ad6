"""Years, half years, seasons and months of the solar calendar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .day import SolarDay
from .julian import days_in_month, is_leap_year, validate_year, weekday
from .units import MonthUnit, YearUnit, index_of

if TYPE_CHECKING:
    from .week import SolarWeek

__all__ = [
    "SolarYear",
    "SolarHalfYear",
    "SolarSeason",
    "SolarMonth",
    "HALF_YEAR_NAMES",
    "SEASON_NAMES",
]

HALF_YEAR_NAMES = ("上半年", "下半年")
SEASON_NAMES = ("一季度", "二季度", "三季度", "四季度")


@dataclass(frozen=True)
class SolarYear(YearUnit):
    """A solar year between 1 and 9999."""

    def __post_init__(self) -> None:
        self.validate(self.year)

    @staticmethod
    def validate(year: int) -> None:
        """Raise ``ValueError`` unless ``year`` lies in 1-9999."""
        validate_year(year)

    def next(self, n: int) -> SolarYear:
        """The year ``n`` years later (earlier when ``n`` is negative)."""
        return SolarYear(self.year + n)

    def name(self) -> str:
        """Name of the year, such as ``2023年``."""
        return f"{self.year}年"

    def day_count(self) -> int:
        """Number of days in the year; 1582 has 355."""
        if self.year == 1582:
            return 355
        return 366 if self.is_leap() else 365

    def is_leap(self) -> bool:
        """Whether the year is a leap year."""
        return is_leap_year(self.year)

    def months(self) -> list[SolarMonth]:
        """The twelve months of the year."""
        return [SolarMonth(self.year, month) for month in range(1, 13)]

    def seasons(self) -> list[SolarSeason]:
        """The four seasons of the year."""
        return [SolarSeason(self.year, index) for index in range(4)]

    def half_years(self) -> list[SolarHalfYear]:
        """The two half years of the year."""
        return [SolarHalfYear(self.year, index) for index in range(2)]

    def __str__(self) -> str:
        return self.name()


@dataclass(frozen=True)
class SolarHalfYear(YearUnit):
    """First (index 0) or second (index 1) half of a solar year."""

    index: int

    def __post_init__(self) -> None:
        self.validate(self.year, self.index)

    @staticmethod
    def validate(year: int, index: int) -> None:
        """Raise ``ValueError`` unless the year and half-year index are valid."""
        if not 0 <= index <= 1:
            raise ValueError(f"illegal solar half year index: {index}")
        validate_year(year)

    def next(self, n: int) -> SolarHalfYear:
        """The half year ``n`` halves later (earlier when ``n`` is negative)."""
        i = self.index + n
        return SolarHalfYear((self.year * 2 + i) // 2, index_of(i, 2))

    def name(self) -> str:
        """Name of the half year, ``上半年`` or ``下半年``."""
        return HALF_YEAR_NAMES[self.index]

    def solar_year(self) -> SolarYear:
        """The year this half belongs to."""
        return SolarYear(self.year)

    def months(self) -> list[SolarMonth]:
        """The six months of the half year."""
        return [SolarMonth(self.year, self.index * 6 + i) for i in range(1, 7)]

    def seasons(self) -> list[SolarSeason]:
        """The two seasons of the half year."""
        return [SolarSeason(self.year, self.index * 2 + i) for i in range(2)]

    def __str__(self) -> str:
        return f"{self.solar_year()}{self.name()}"


@dataclass(frozen=True)
class SolarSeason(YearUnit):
    """A quarter of a solar year, index 0 to 3."""

    index: int

    def __post_init__(self) -> None:
        self.validate(self.year, self.index)

    @staticmethod
    def validate(year: int, index: int) -> None:
        """Raise ``ValueError`` unless the year and season index are valid."""
        if not 0 <= index <= 3:
            raise ValueError(f"illegal solar season index: {index}")
        validate_year(year)

    def next(self, n: int) -> SolarSeason:
        """The season ``n`` seasons later (earlier when ``n`` is negative)."""
        i = self.index + n
        return SolarSeason((self.year * 4 + i) // 4, index_of(i, 4))

    def name(self) -> str:
        """Name of the season, such as ``一季度``."""
        return SEASON_NAMES[self.index]

    def solar_year(self) -> SolarYear:
        """The year this season belongs to."""
        return SolarYear(self.year)

    def months(self) -> list[SolarMonth]:
        """The three months of the season."""
        return [SolarMonth(self.year, self.index * 3 + i) for i in range(1, 4)]

    def __str__(self) -> str:
        return f"{self.solar_year()}{self.name()}"


@dataclass(frozen=True)
class SolarMonth(MonthUnit):
    """A month of the solar calendar."""

    def __post_init__(self) -> None:
        self.validate(self.year, self.month)

    @staticmethod
    def validate(year: int, month: int) -> None:
        """Raise ``ValueError`` unless the month (1-12) and year are valid."""
        days_in_month(year, month)

    def next(self, n: int) -> SolarMonth:
        """The month ``n`` months later (earlier when ``n`` is negative)."""
        i = self.month - 1 + n
        return SolarMonth((self.year * 12 + i) // 12, index_of(i, 12) + 1)

    def name(self) -> str:
        """Name of the month, such as ``5月``."""
        return f"{self.month}月"

    def solar_year(self) -> SolarYear:
        """The year this month belongs to."""
        return SolarYear(self.year)

    def day_count(self) -> int:
        """Number of days in the month; October 1582 has 21."""
        return days_in_month(self.year, self.month)

    def index_in_year(self) -> int:
        """Zero-based position of the month within its year."""
        return self.month - 1

    def week_count(self, start: int) -> int:
        """Number of weeks the month spans when weeks begin on weekday ``start``."""
        offset = index_of(weekday(self.year, self.month, 1) - start, 7)
        return -(-(offset + self.day_count()) // 7)

    def season(self) -> SolarSeason:
        """The season holding this month."""
        return SolarSeason(self.year, self.index_in_year() // 3)

    def weeks(self, start: int) -> list[SolarWeek]:
        """The weeks of the month, weeks beginning on weekday ``start``."""
        from .week import SolarWeek

        return [
            SolarWeek(self.year, self.month, index, start)
            for index in range(self.week_count(start))
        ]

    def days(self) -> list[SolarDay]:
        """Every day of the month in order."""
        first = self.first_day()
        return [first.next(i) for i in range(self.day_count())]

    def first_day(self) -> SolarDay:
        """The first day of the month."""
        return SolarDay(self.year, self.month, 1)

    def __str__(self) -> str:
        return f"{self.solar_year()}{self.name()}"