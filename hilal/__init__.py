"""Hilal: Hijri-aware calendar dates with locally adjusted display.

Hilal provides immutable calendar dates in ISO, Gregorian and Islamic
calendars, and AdjustedDate, which reads a date as if shifted by a fixed
number of days. The shift lets a display follow a locally announced Hijri
month start without changing the calendar's own rules.

Core Types:
    PlainDate: Calendar date bound to a named calendar system
    Duration: Calendar duration (years, months, weeks, days)
    PlainYearMonth: Month of a year, without a day
    PlainMonthDay: Day of a month, without a year
    AdjustedDate: A date read through a fixed day offset

Calendars:
    iso8601, gregory, islamic-umalqura, islamic-civil, islamic-tbla

Exceptions:
    HilalError: Base exception
    ParseError: Failed to parse string
    RangeError: Value outside what the engine supports
    InvalidCalendarSystem: Unknown calendar name
    InvalidFieldValue: Field out of range
    InvalidDuration: Unusable duration or offset
    InvalidOption: Unrecognized option value

Example:
    >>> from hilal import AdjustedDate, PlainDate
    >>> hijri = PlainDate(2024, 7, 6).with_calendar("islamic-umalqura")
    >>> local = AdjustedDate(hijri, "islamic-umalqura", offset_days=1)
    >>> local.day, local.month, local.year
    (1, 1, 1446)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from hilal.core.adjusted import AdjustedDate
from hilal.core.duration import Duration
from hilal.core.plain_date import PlainDate
from hilal.core.projections import PlainMonthDay, PlainYearMonth

# Calendars
from hilal.calendars import available_calendars, get_calendar

# Exceptions
from hilal.errors import (
    HilalError,
    InvalidCalendarSystem,
    InvalidDuration,
    InvalidFieldValue,
    InvalidOption,
    ParseError,
    RangeError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "AdjustedDate",
    "Duration",
    "PlainDate",
    "PlainMonthDay",
    "PlainYearMonth",
    # Calendars
    "available_calendars",
    "get_calendar",
    # Exceptions
    "HilalError",
    "ParseError",
    "RangeError",
    "InvalidCalendarSystem",
    "InvalidFieldValue",
    "InvalidDuration",
    "InvalidOption",
]
