"""ISO 8601 and Gregorian calendar systems.

Both use the proleptic Gregorian rules. They differ only in identity:
"iso8601" is the calendar of plain ISO dates and is left out of string
annotations, "gregory" is the named Gregorian calendar.
"""

from __future__ import annotations

from hilal._internal import gregorian
from hilal._internal.constants import (
    GREGORY_CALENDAR,
    ISO_CALENDAR,
    MAX_YEAR,
    MIN_YEAR,
)
from hilal._internal.validation import validate_day, validate_month, validate_year
from hilal.calendars.base import CalendarSystem
from hilal.errors import RangeError


class IsoCalendar(CalendarSystem):
    """The proleptic Gregorian calendar with ISO 8601 identity.

    Examples:
        >>> cal = IsoCalendar()
        >>> cal.days_to_fields(cal.fields_to_days(2024, 2, 29))
        (2024, 2, 29)
    """

    id = ISO_CALENDAR

    def fields_to_days(self, year: int, month: int, day: int) -> int:
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day, gregorian.days_in_month(year, month))
        return gregorian.ymd_to_mjd(year, month, day)

    def days_to_fields(self, days: int) -> tuple[int, int, int]:
        return gregorian.mjd_to_ymd(days)

    def days_in_month(self, year: int, month: int) -> int:
        return gregorian.days_in_month(year, month)

    def days_in_year(self, year: int) -> int:
        return gregorian.days_in_year(year)

    def in_leap_year(self, year: int) -> bool:
        return gregorian.is_leap_year(year)

    def check_days(self, days: int) -> None:
        year, _, _ = gregorian.mjd_to_ymd(days)
        if year < MIN_YEAR or year > MAX_YEAR:
            raise RangeError(
                f"date is outside the supported range of years {MIN_YEAR}..{MAX_YEAR}"
            )


class GregorianCalendar(IsoCalendar):
    """The named Gregorian calendar ("gregory")."""

    id = GREGORY_CALENDAR


__all__ = ["IsoCalendar", "GregorianCalendar"]
