"""A calendar of holidays generated from rules."""

from __future__ import annotations

from .rules import ExplicitDateRule


class HolidayCalendar:
    """A collection of holiday rules that can be queried by date or year."""

    def __init__(self, rules=()):
        self._rules = list(rules)

    def add_holiday(self, name, date):
        """Add a one-off holiday on ``date``."""
        self._rules.append(ExplicitDateRule(name, date))

    def add_rule(self, rule):
        """Add a rule that generates holidays."""
        self._rules.append(rule)

    def _matching(self, date):
        year = date.year
        for rule in self._rules:
            if rule.applies_to(year) and rule.calculate_date(year) == date:
                yield rule

    def is_holiday(self, date):
        """Return True if any rule puts a holiday on ``date``."""
        return any(True for _ in self._matching(date))

    def holidays(self, year):
        """Return the sorted, distinct holiday dates of ``year``."""
        return sorted(
            {rule.calculate_date(year) for rule in self._rules if rule.applies_to(year)}
        )

    def holiday_names(self, date):
        """Return the names of all holidays on ``date``, in rule order."""
        return [rule.name for rule in self._matching(date)]

    def copy(self):
        """Return an independent calendar holding the same rules."""
        return HolidayCalendar(self._rules)

    __copy__ = copy

    def __len__(self):
        return len(self._rules)