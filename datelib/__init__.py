"""Business-day checks, date rolling conventions and rule-based holiday calendars."""

__version__ = "1.0.3"