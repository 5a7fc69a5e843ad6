"""Moments of the solar calendar, to the second."""

from __future__ import annotations

from dataclasses import dataclass

from .day import SolarDay
from .units import SecondUnit, validate_time

__all__ = ["SolarTime"]

_SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class SolarTime(SecondUnit):
    """A moment on a solar day, validated on creation."""

    def __post_init__(self) -> None:
        self.validate(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    @staticmethod
    def validate(
        year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> None:
        """Raise ``ValueError`` unless the clock values and the date are valid."""
        validate_time(hour, minute, second)
        SolarDay.validate(year, month, day)

    @property
    def _seconds_of_day(self) -> int:
        return self.hour * 3600 + self.minute * 60 + self.second

    def next(self, n: int) -> SolarTime:
        """The moment ``n`` seconds later (earlier when ``n`` is negative)."""
        if n == 0:
            return self
        days, seconds = divmod(self._seconds_of_day + n, _SECONDS_PER_DAY)
        target = self.solar_day().next(days)
        minutes, second = divmod(seconds, 60)
        hour, minute = divmod(minutes, 60)
        return SolarTime(target.year, target.month, target.day, hour, minute, second)

    def name(self) -> str:
        """Clock reading in the form ``HH:MM:SS``."""
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def solar_day(self) -> SolarDay:
        """The day this moment falls on."""
        return SolarDay(self.year, self.month, self.day)

    def _key(self) -> tuple[int, int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def is_before(self, target: SolarTime) -> bool:
        """Whether this moment comes strictly before ``target``."""
        return self._key() < target._key()

    def is_after(self, target: SolarTime) -> bool:
        """Whether this moment comes strictly after ``target``."""
        return self._key() > target._key()

    def subtract(self, target: SolarTime) -> int:
        """Number of seconds from ``target`` to this moment."""
        days = self.solar_day().subtract(target.solar_day())
        return days * _SECONDS_PER_DAY + self._seconds_of_day - target._seconds_of_day

    def __str__(self) -> str:
        return f"{self.solar_day()} {self.name()}"