import pytest
from hypothesis import given
from hypothesis import strategies as st

from tymesolar.day import SolarDay


def test_name_and_str():
    assert SolarDay(2023, 1, 1).name() == "1日"
    assert str(SolarDay(2023, 1, 1)) == "2023年1月1日"
    assert SolarDay(2000, 2, 29).name() == "29日"
    assert str(SolarDay(2000, 2, 29)) == "2000年2月29日"


def test_index_in_year():
    assert SolarDay(2023, 1, 1).index_in_year() == 0
    assert SolarDay(2023, 12, 31).index_in_year() == 364
    assert SolarDay(2020, 12, 31).index_in_year() == 365


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((2023, 1, 1), (2023, 1, 1), 0),
        ((2023, 1, 2), (2023, 1, 1), 1),
        ((2023, 1, 1), (2023, 1, 2), -1),
        ((2023, 2, 1), (2023, 1, 1), 31),
        ((2023, 1, 1), (2023, 2, 1), -31),
        ((2024, 1, 1), (2023, 1, 1), 365),
        ((2023, 1, 1), (2024, 1, 1), -365),
        ((1582, 10, 15), (1582, 10, 4), 1),
        ((2020, 5, 24), (2020, 4, 23), 31),
    ],
)
def test_subtract(a, b, expected):
    assert SolarDay(*a).subtract(SolarDay(*b)) == expected


def test_next_across_reform():
    assert str(SolarDay(1582, 10, 15).next(-1)) == "1582年10月4日"
    assert SolarDay(1582, 10, 4).next(1) == SolarDay(1582, 10, 15)


def test_next_across_leap_day():
    assert str(SolarDay(2000, 2, 28).next(2)) == "2000年3月1日"


@pytest.mark.parametrize(
    "ymd, index",
    [
        ((1582, 10, 1), 1),
        ((1582, 10, 15), 5),
        ((1129, 11, 17), 0),
        ((1129, 11, 1), 5),
        ((8, 11, 1), 4),
        ((1582, 9, 30), 0),
        ((1582, 1, 1), 1),
        ((1500, 2, 29), 6),
        ((9865, 7, 26), 3),
        ((2023, 10, 31), 2),
    ],
)
def test_week(ymd, index):
    assert SolarDay(*ymd).week() == index


def test_week_name():
    assert SolarDay(1582, 10, 1).week_name() == "一"
    assert SolarDay(1582, 10, 15).week_name() == "五"


def test_is_before_and_after():
    a = SolarDay(2023, 1, 31)
    b = SolarDay(2023, 2, 1)
    assert a.is_before(b)
    assert not b.is_before(a)
    assert b.is_after(a)
    assert not a.is_after(a)
    assert not a.is_before(a)


def test_equality():
    assert SolarDay(2024, 2, 10) == SolarDay(2024, 2, 10)
    assert not SolarDay(2024, 2, 10) == SolarDay(2024, 2, 11)


@pytest.mark.parametrize(
    "ymd, index",
    [
        ((2024, 2, 11), 2),
        ((2024, 2, 17), 2),
        ((2024, 2, 10), 1),
        ((2024, 2, 18), 3),
    ],
)
def test_solar_week(ymd, index):
    week = SolarDay(*ymd).solar_week(0)
    assert (week.year, week.month, week.index, week.start) == (2024, 2, index, 0)


def test_solar_month():
    month = SolarDay(2000, 1, 29).solar_month()
    assert (month.year, month.month) == (2000, 1)


@pytest.mark.parametrize(
    "ymd",
    [(2023, 2, 29), (1582, 10, 10), (2023, 13, 1), (0, 1, 1), (2023, 1, 0), (2023, 4, 31)],
)
def test_invalid_days(ymd):
    with pytest.raises(ValueError):
        SolarDay(*ymd)


def test_validate_raises():
    with pytest.raises(ValueError, match="illegal solar day"):
        SolarDay.validate(2023, 2, 30)


def test_next_out_of_range():
    with pytest.raises(ValueError):
        SolarDay(9999, 12, 31).next(1)
    with pytest.raises(ValueError):
        SolarDay(1, 1, 1).next(-1)


_years = st.integers(min_value=2, max_value=9998)
_months = st.integers(min_value=1, max_value=12)
_days_of_month = st.integers(min_value=1, max_value=28)


@given(_years, _months, _days_of_month, st.integers(min_value=-300, max_value=300))
def test_next_subtract_round_trip(year, month, day_of_month, n):
    day = SolarDay(year, month, day_of_month)
    moved = day.next(n)
    assert moved.subtract(day) == n
    assert moved.next(-n) == day


@given(_years, _months, _days_of_month, st.integers(min_value=1, max_value=300))
def test_next_keeps_weekday_cycle(year, month, day_of_month, n):
    day = SolarDay(year, month, day_of_month)
    assert day.next(n).week() == (day.week() + n) % 7
    assert day.next(n).is_after(day)