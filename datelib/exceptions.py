"""Exceptions raised by the date library."""


class DatelibError(Exception):
    """Base class for all errors raised by this package."""


class BusinessDaySearchError(DatelibError, RuntimeError):
    """No business day could be found within a reasonable range."""


class InvalidDateError(DatelibError, RuntimeError):
    """A rule's date does not exist in the requested year."""


class DateNotInYearError(DatelibError, RuntimeError):
    """An explicit date was requested for a year it does not belong to."""


class OccurrenceNotFoundError(DatelibError, RuntimeError):
    """The requested occurrence of a weekday does not exist in the month."""


class UnhandledEnumError(DatelibError, ValueError):
    """An enumeration value is not one the library knows how to handle."""