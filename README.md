# datelib

Business-day arithmetic for Python: decide whether a date is a working day,
roll non-working days with the usual market conventions, and describe holidays
with simple rules instead of long lists of dates.

The package has no dependencies beyond the standard library. Dates are plain
`datetime.date` objects.

## Installation

```
pip install datelib
```

To run the test suite:

```
pip install "datelib[test]"
pytest
```

## Holiday rules

Three kinds of rule are available in `datelib.rules`. All of them are frozen
dataclasses with a `name` attribute.

- `FixedDateRule(name, month, day)` – the same month and day every year
  (Christmas, New Year's Day). The month must be 1–12 and the day 1–31,
  otherwise `ValueError` is raised. A rule such as February 30 can be created
  but does not apply to any year.
- `NthWeekdayRule(name, month, weekday, occurrence)` – the first to fifth, or
  the last, given weekday of a month (Thanksgiving, Memorial Day). Weekdays are
  numbered 0 for Sunday to 6 for Saturday; the `Weekday` enum names them, and
  `Weekday.from_date(d)` gives the weekday of a date. `Occurrence` holds
  `FIRST` to `FIFTH` and `LAST`. An out-of-range month, weekday or occurrence
  raises `ValueError`.
- `ExplicitDateRule(name, date)` – a single, one-off date that applies only to
  its own year. `date` may be a `datetime.date` or a `(year, month, day)`
  tuple; a tuple that names no real date raises `ValueError`.

Each rule answers `applies_to(year)` and `calculate_date(year)`. Asking for a
date the rule cannot produce raises, from `datelib.exceptions`:

- `InvalidDateError` – a fixed date that does not exist that year (February 29
  outside a leap year);
- `DateNotInYearError` – an explicit date asked for in another year;
- `OccurrenceNotFoundError` – for example a fifth Saturday in a month that has
  only four.

```python
from datelib.rules import FixedDateRule, NthWeekdayRule, Occurrence, Weekday

thanksgiving = NthWeekdayRule("Thanksgiving", 11, Weekday.THURSDAY, Occurrence.FOURTH)
thanksgiving.calculate_date(2024)   # datetime.date(2024, 11, 28)

christmas = FixedDateRule("Christmas", 12, 25)
christmas.calculate_date(2025)      # datetime.date(2025, 12, 25)
```

## Holiday calendars

A `HolidayCalendar` (in `datelib.holiday_calendar`) collects rules and answers
questions about them. It can be built empty or from an iterable of rules.

```python
import datetime
from datelib.holiday_calendar import HolidayCalendar
from datelib.rules import FixedDateRule, NthWeekdayRule, Occurrence, Weekday

us = HolidayCalendar()
us.add_rule(FixedDateRule("New Year's Day", 1, 1))
us.add_rule(NthWeekdayRule("Memorial Day", 5, Weekday.MONDAY, Occurrence.LAST))
us.add_holiday("Solar Eclipse", datetime.date(2024, 4, 8))

us.is_holiday(datetime.date(2024, 5, 27))      # True
us.holidays(2024)                              # sorted list of distinct dates
us.holiday_names(datetime.date(2024, 4, 8))    # ["Solar Eclipse"]
len(us)                                        # 3 rules

backup = us.copy()                             # rules added later to `us` do not reach `backup`
```

`holiday_names` returns the names in the order the rules were added; several
rules falling on the same date each contribute a name, while `holidays` lists
that date once.

## Business days and date adjustment

`datelib.business_days` provides `is_business_day` and `adjust`. A business day
is neither a weekend day nor a holiday in the calendar. The weekend is Saturday
and Sunday (`DEFAULT_WEEKEND`) unless you pass another set of weekdays; an
empty set means every day is a working day. Both functions accept a
`datetime.date` or a `(year, month, day)` tuple, and raise `ValueError` for a
tuple that names no real date, such as `(2023, 2, 29)`.

```python
import datetime
from datelib.business_days import BusinessDayConvention, adjust, is_business_day
from datelib.holiday_calendar import HolidayCalendar
from datelib.rules import Weekday

calendar = HolidayCalendar()

is_business_day(datetime.date(2024, 1, 6), calendar)   # False, a Saturday

adjust(datetime.date(2024, 6, 29), BusinessDayConvention.MODIFIED_FOLLOWING, calendar)
# datetime.date(2024, 6, 28): moving forward would leave June

adjust(
    datetime.date(2024, 1, 5),
    BusinessDayConvention.FOLLOWING,
    calendar,
    {Weekday.FRIDAY, Weekday.SATURDAY},
)
# datetime.date(2024, 1, 7)
```

A date that is already a business day is returned unchanged. Otherwise the
conventions are:

| Convention           | Behaviour                                                           |
|----------------------|---------------------------------------------------------------------|
| `FOLLOWING`          | next business day                                                   |
| `MODIFIED_FOLLOWING` | next business day, or the previous one if that would change month   |
| `PRECEDING`          | previous business day                                               |
| `MODIFIED_PRECEDING` | previous business day, or the next one if that would change month   |
| `UNADJUSTED`         | the date as given                                                   |

If no business day turns up within 366 days, `adjust` raises
`BusinessDaySearchError`. A convention that is not a `BusinessDayConvention`
member raises `UnhandledEnumError`. All of the package's own exceptions derive
from `DatelibError`.

## What it does not do

`datelib` is a library only: it has no command-line tool, and it does not load
or save calendars. Holiday sets are built in code from rules each time they
are needed. There is no rule type for movable feasts such as Easter, and no
observed-holiday shifting (moving a holiday that falls on a weekend).