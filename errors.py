"""Exception types raised by the calendar core."""


class CalendarError(Exception):
    """Base error."""


class DateRangeError(CalendarError):
    """Raised when date arithmetic leaves the supported year 1..9999 range."""
