"""Day counting on the historical solar calendar.

Dates before 1582-10-15 follow the Julian calendar and later ones the
Gregorian calendar; the ten days 1582-10-05 to 1582-10-14 do not exist.
Days are numbered by their Julian day number.
"""

from __future__ import annotations

__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "validate_year",
    "is_leap_year",
    "days_in_month",
    "day_number",
    "from_day_number",
    "weekday",
]

MIN_YEAR = 1
MAX_YEAR = 9999

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_REFORM = (1582, 10, 15)
_REFORM_DAY_NUMBER = 2299161


def validate_year(year: int) -> None:
    """Raise ``ValueError`` unless ``year`` lies in 1-9999."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"illegal solar year: {year}")


def is_leap_year(year: int) -> bool:
    """Whether ``year`` is a leap year (Julian rule before 1600)."""
    if year < 1600:
        return year % 4 == 0
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _validate_month(year: int, month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"illegal solar month: {month}")
    validate_year(year)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the month; October 1582 has 21."""
    _validate_month(year, month)
    if year == 1582 and month == 10:
        return 21
    days = _MONTH_DAYS[month - 1]
    if month == 2 and is_leap_year(year):
        days += 1
    return days


def _validate_day(year: int, month: int, day: int) -> None:
    error = ValueError(f"illegal solar day: {year}-{month}-{day}")
    if day < 1:
        raise error
    if year == 1582 and month == 10:
        if 4 < day < 15 or day > 31:
            raise error
    elif day > days_in_month(year, month):
        raise error


def day_number(year: int, month: int, day: int) -> int:
    """Julian day number of the date; raises ``ValueError`` for invalid dates."""
    _validate_day(year, month, day)
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    base = day + (153 * m + 2) // 5 + 365 * y + y // 4
    if (year, month, day) >= _REFORM:
        return base - y // 100 + y // 400 - 32045
    return base - 32083


def from_day_number(number: int) -> tuple[int, int, int]:
    """The ``(year, month, day)`` with the given Julian day number."""
    if number >= _REFORM_DAY_NUMBER:
        a = number + 32044
        b = (4 * a + 3) // 146097
        c = a - 146097 * b // 4
    else:
        b = 0
        c = number + 32082
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    validate_year(year)
    return year, month, day


def weekday(year: int, month: int, day: int) -> int:
    """Day of the week, 0 for Sunday through 6 for Saturday."""
    return (day_number(year, month, day) + 1) % 7