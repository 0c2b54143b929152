"""Business-day checks and date adjustment by market convention."""

from __future__ import annotations

import datetime as dt
from enum import Enum

from .exceptions import BusinessDaySearchError, UnhandledEnumError
from .rules import Weekday

# One year's worth of days: how far a search may move before giving up.
_MAX_DAYS_TO_SEARCH = 366
_ONE_DAY = dt.timedelta(days=1)

DEFAULT_WEEKEND = frozenset({Weekday.SATURDAY, Weekday.SUNDAY})


class BusinessDayConvention(Enum):
    """How a non-business day is rolled onto a business day."""

    FOLLOWING = "following"
    """Move forward to the next business day."""

    MODIFIED_FOLLOWING = "modified_following"
    """Move forward, unless that crosses into a new month; then move backward."""

    PRECEDING = "preceding"
    """Move backward to the previous business day."""

    MODIFIED_PRECEDING = "modified_preceding"
    """Move backward, unless that crosses into another month; then move forward."""

    UNADJUSTED = "unadjusted"
    """Leave the date as it is."""


def _to_date(value, message):
    """Accept a date or a (year, month, day) triple; raise ValueError if invalid."""
    if isinstance(value, dt.date):
        return value
    try:
        year, month, day = value
        return dt.date(year, month, day)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(message) from None


def _is_business_day(date, calendar, weekend_days):
    return Weekday.from_date(date) not in weekend_days and not calendar.is_holiday(date)


def _search(start, calendar, weekend_days, step, direction):
    current = start
    for _ in range(_MAX_DAYS_TO_SEARCH + 1):
        if _is_business_day(current, calendar, weekend_days):
            return current
        current += step
    raise BusinessDaySearchError(
        f"Unable to find {direction} business day within reasonable range"
    )


def _next(start, calendar, weekend_days):
    return _search(start, calendar, weekend_days, _ONE_DAY, "next")


def _previous(start, calendar, weekend_days):
    return _search(start, calendar, weekend_days, -_ONE_DAY, "previous")


def is_business_day(date, calendar, weekend_days=DEFAULT_WEEKEND):
    """Return True if ``date`` is neither a weekend day nor a holiday.

    ``date`` may be a ``datetime.date`` or a ``(year, month, day)`` triple;
    a triple that names no real date raises ValueError.
    """
    date = _to_date(date, "Invalid date provided to is_business_day")
    return _is_business_day(date, calendar, frozenset(weekend_days))


def adjust(date, convention, calendar, weekend_days=DEFAULT_WEEKEND):
    """Roll ``date`` onto a business day according to ``convention``.

    Raises ValueError for an invalid date, BusinessDaySearchError when no
    business day lies within a year's search, and UnhandledEnumError for an
    unknown convention.
    """
    date = _to_date(date, "Invalid date provided to adjust")
    weekend_days = frozenset(weekend_days)

    if _is_business_day(date, calendar, weekend_days):
        return date

    if convention is BusinessDayConvention.FOLLOWING:
        return _next(date, calendar, weekend_days)
    if convention is BusinessDayConvention.MODIFIED_FOLLOWING:
        adjusted = _next(date, calendar, weekend_days)
        if adjusted.month != date.month:
            adjusted = _previous(date, calendar, weekend_days)
        return adjusted
    if convention is BusinessDayConvention.PRECEDING:
        return _previous(date, calendar, weekend_days)
    if convention is BusinessDayConvention.MODIFIED_PRECEDING:
        adjusted = _previous(date, calendar, weekend_days)
        if adjusted.month != date.month:
            adjusted = _next(date, calendar, weekend_days)
        return adjusted
    if convention is BusinessDayConvention.UNADJUSTED:
        return date
    raise UnhandledEnumError("Unhandled BusinessDayConvention in adjust()")