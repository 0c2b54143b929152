"""Rules that generate holiday dates for a given year."""

from __future__ import annotations

import calendar
import datetime as dt
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum

from .exceptions import DateNotInYearError, InvalidDateError, OccurrenceNotFoundError

_MIN_MONTH = 1
_MAX_MONTH = 12
_MIN_DAY = 1
_MAX_DAY = 31
_DAYS_PER_WEEK = 7


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday (0) to Saturday (6)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_date(cls, value):
        """Return the weekday on which ``value`` falls."""
        return cls(value.isoweekday() % _DAYS_PER_WEEK)


class Occurrence(IntEnum):
    """Which occurrence of a weekday within a month."""

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    LAST = -1


def _to_date(value, message):
    """Accept a date or a (year, month, day) triple; raise ValueError if invalid."""
    if isinstance(value, dt.date):
        return value
    try:
        year, month, day = value
        return dt.date(year, month, day)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(message) from None


def _check_month(month):
    if not _MIN_MONTH <= month <= _MAX_MONTH:
        raise ValueError("Month must be between 1 and 12")


class HolidayRule(ABC):
    """A rule that yields at most one holiday date per year."""

    name: str

    @abstractmethod
    def applies_to(self, year):
        """Return True if the rule yields a holiday in ``year``."""

    @abstractmethod
    def calculate_date(self, year):
        """Return the holiday's date in ``year``; raise if there is none."""


@dataclass(frozen=True)
class ExplicitDateRule(HolidayRule):
    """A one-off holiday on a specific date."""

    name: str
    date: dt.date

    def __post_init__(self):
        object.__setattr__(self, "date", _to_date(self.date, "Invalid date"))

    def applies_to(self, year):
        return self.date.year == year

    def calculate_date(self, year):
        if self.date.year == year:
            return self.date
        raise DateNotInYearError("Explicit date does not exist in this year")


@dataclass(frozen=True)
class FixedDateRule(HolidayRule):
    """A holiday on the same month and day every year."""

    name: str
    month: int
    day: int

    def __post_init__(self):
        _check_month(self.month)
        if not _MIN_DAY <= self.day <= _MAX_DAY:
            raise ValueError("Day must be between 1 and 31")

    def _resolve(self, year):
        try:
            return dt.date(year, self.month, self.day)
        except (ValueError, OverflowError):
            return None

    def applies_to(self, year):
        return self._resolve(year) is not None

    def calculate_date(self, year):
        result = self._resolve(year)
        if result is None:
            raise InvalidDateError("Invalid date for this year")
        return result


@dataclass(frozen=True)
class NthWeekdayRule(HolidayRule):
    """A holiday on the Nth (or last) given weekday of a month."""

    name: str
    month: int
    weekday: Weekday
    occurrence: Occurrence

    def __post_init__(self):
        _check_month(self.month)
        if not 0 <= self.weekday <= 6:
            raise ValueError("Weekday must be between 0 and 6")
        object.__setattr__(self, "weekday", Weekday(self.weekday))
        try:
            occurrence = Occurrence(self.occurrence)
        except ValueError:
            raise ValueError("Occurrence must be First through Fifth or Last") from None
        object.__setattr__(self, "occurrence", occurrence)

    def _nth(self, year):
        first = dt.date(year, self.month, 1)
        offset = (self.weekday - Weekday.from_date(first)) % _DAYS_PER_WEEK
        weeks = self.occurrence - 1
        return first + dt.timedelta(days=offset + weeks * _DAYS_PER_WEEK)

    def _last(self, year):
        last_day = calendar.monthrange(year, self.month)[1]
        last = dt.date(year, self.month, last_day)
        back = (Weekday.from_date(last) - self.weekday) % _DAYS_PER_WEEK
        return last - dt.timedelta(days=back)

    def applies_to(self, year):
        if self.occurrence is Occurrence.LAST:
            return True
        try:
            return self._nth(year).month == self.month
        except (ValueError, OverflowError):
            return False

    def calculate_date(self, year):
        if self.occurrence is Occurrence.LAST:
            return self._last(year)
        result = self._nth(year)
        if result.month != self.month:
            raise OccurrenceNotFoundError(
                "Requested occurrence does not exist in this month"
            )
        return result