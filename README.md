# tymesolar

Calendar arithmetic over the solar calendar for years 1 to 9999. Dates up to
1582-10-04 follow the Julian calendar and dates from 1582-10-15 on follow the
Gregorian calendar; the ten days in between do not exist, so October 1582 has
21 days and the year 1582 has 355. Names are given in Chinese, for example
`2023年1月1日` or `第一周`.

## Installation

```
pip install tymesolar
```

For the test suite:

```
pip install "tymesolar[test]"
pytest
```

## Modules

| Module              | Contents                                                       |
|---------------------|----------------------------------------------------------------|
| `tymesolar.month`   | `SolarYear`, `SolarHalfYear`, `SolarSeason`, `SolarMonth`      |
| `tymesolar.week`    | `SolarWeek`                                                    |
| `tymesolar.day`     | `SolarDay`                                                     |
| `tymesolar.time`    | `SolarTime`                                                    |
| `tymesolar.julian`  | day numbering: `validate_year`, `is_leap_year`, `days_in_month`, `day_number`, `from_day_number`, `weekday` |
| `tymesolar.units`   | base dataclasses and checks: `YearUnit`, `MonthUnit`, `DayUnit`, `SecondUnit`, `WeekUnit`, `validate_time`, `validate_week`, `index_of` |

All units are frozen dataclasses, checked when created: an invalid value raises
`ValueError`. Each has a `validate(...)` static method, `name()`, a string form
via `str()`, and `next(n)` to step forward or, with a negative `n`, backward.

- `SolarYear`: `day_count()`, `is_leap()` (Julian rule before 1600),
  `months()`, `seasons()`, `half_years()`.
- `SolarHalfYear(year, index)` and `SolarSeason(year, index)`: `solar_year()`,
  `months()`; half years also have `seasons()`.
- `SolarMonth`: `solar_year()`, `day_count()`, `index_in_year()`,
  `week_count(start)`, `season()`, `weeks(start)`, `days()`, `first_day()`.
- `SolarWeek(year, month, index, start)`: `solar_month()`, `first_day()`,
  `days()`, `index_in_year()`. Two weeks are equal when they begin on the same
  day.
- `SolarDay`: `solar_month()`, `week()` (0 is Sunday), `week_name()`,
  `solar_week(start)`, `is_before()`, `is_after()`, `index_in_year()`,
  `subtract()` (difference in days).
- `SolarTime`: `solar_day()`, `is_before()`, `is_after()`, `subtract()`
  (difference in seconds); `next(n)` steps by seconds.

Weeks take a `start` day from 0 (Sunday) to 6 (Saturday); a month has up to
six weeks, indexed 0 to 5.

## Examples

```python
from tymesolar.day import SolarDay
from tymesolar.month import SolarHalfYear, SolarMonth, SolarSeason, SolarYear
from tymesolar.time import SolarTime
from tymesolar.week import SolarWeek

day = SolarDay(2023, 1, 1)
str(day)                                   # '2023年1月1日'
day.name()                                 # '1日'
str(SolarDay(1582, 10, 15).next(-1))       # '1582年10月4日'
SolarDay(2024, 1, 1).subtract(day)         # 365
SolarDay(2023, 12, 31).index_in_year()     # 364
SolarDay(2023, 10, 31).week()              # 2
str(SolarDay(2024, 2, 11).solar_week(0))   # '2024年2月第三周'

month = SolarMonth(2023, 10)
str(month.next(3))                         # '2024年1月'
SolarMonth(2023, 1).week_count(1)          # 6
[str(d) for d in month.days()][:2]         # ['2023年10月1日', '2023年10月2日']

SolarYear(1500).is_leap()                  # True
SolarYear(1582).day_count()                # 355
str(SolarHalfYear(2023, 0).next(-3))       # '2021年下半年'
str(SolarSeason(2023, 0).next(-5))         # '2021年四季度'

week = SolarWeek(2023, 1, 0, 2)            # weeks starting on Tuesday
str(week.first_day())                      # '2022年12月27日'
str(SolarWeek(2023, 10, 0, 0).next(5))     # '2023年11月第二周'

t = SolarTime(2023, 1, 1, 13, 5, 20)
t.name()                                   # '13:05:20'
t.next(3641).name()                        # '14:06:01'
str(t)                                     # '2023年1月1日 13:05:20'
```

## What it does not do

The package covers the solar calendar only. It has no lunar calendar, solar
terms, zodiac signs, sexagenary cycles, festivals or holidays, and no
conversion between the solar calendar and any other calendar.