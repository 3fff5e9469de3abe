class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidDateInput(CalendarError, ValueError):
    """A date string could not be parsed or a calendar field is out of range."""


class InvalidPeriod(CalendarError, ValueError):
    """A period's start falls after its end."""
