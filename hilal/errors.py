"""Hilal exception hierarchy.

All Hilal-specific exceptions inherit from HilalError. Everything the
date engine rejects for being out of range inherits from RangeError, so
callers that only care about "bad input" can catch a single class.
"""

from __future__ import annotations


class HilalError(Exception):
    """Base exception for all Hilal errors."""

    pass


class ParseError(HilalError):
    """Failed to parse string representation.

    Examples:
        - Malformed ISO 8601 date string
        - Malformed ISO 8601 duration string
        - Unterminated calendar annotation
    """

    pass


class RangeError(HilalError):
    """A value falls outside what the date engine supports.

    Raised directly for dates that a calendar cannot represent (for
    example an Umm al-Qura date outside the published tables) and for
    operations mixing incompatible calendars.
    """

    pass


class InvalidCalendarSystem(RangeError):
    """Unknown calendar system name.

    Examples:
        - PlainDate(2024, 1, 1, calendar="julian-ish")
        - date.with_calendar("")
    """

    pass


class InvalidFieldValue(RangeError):
    """A date field is out of range for its calendar.

    Examples:
        - Month 13 in a twelve-month calendar
        - Day 30 of a 29-day Hijri month with overflow="reject"
        - month and month_code given together but disagreeing
    """

    pass


class InvalidDuration(RangeError):
    """A duration or day offset cannot be used.

    Examples:
        - Fractional components (days=1.5)
        - Mixed signs (years=1, days=-1)
        - Unsupported units (hours on a date)
    """

    pass


class InvalidOption(RangeError):
    """An option value is not recognized.

    Examples:
        - overflow="wrap"
        - largest_unit="fortnight"
        - date_style="tiny"
    """

    pass


__all__ = [
    "HilalError",
    "ParseError",
    "RangeError",
    "InvalidCalendarSystem",
    "InvalidFieldValue",
    "InvalidDuration",
    "InvalidOption",
]
