"""
Domain-specific exception hierarchy for the calendar utilities.
"""


class CalendarError(Exception):
    """Base class for all library-level errors."""


class InvalidDate(CalendarError, ValueError):
    """Raised when a value cannot be interpreted as a date."""


class InvalidArgument(CalendarError, ValueError):
    """Raised when a numeric or structural argument is out of range."""
