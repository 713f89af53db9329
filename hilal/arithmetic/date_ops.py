"""Duration arithmetic for calendar dates.

This module adds Duration values to dates of any calendar system,
implementing the overflow behavior of PlainDate.add():

    1. Years are added, then months, balancing across year boundaries
       with the calendar's own months_in_year().
    2. The day is regulated against the target month: clamped with
       overflow="constrain", rejected with overflow="reject".
    3. Weeks and days are added as absolute days, so they roll over
       month and year boundaries by the calendar's month lengths.

Dates are passed around as (calendar, MJD) pairs; PlainDate wraps the
resulting day number.

Examples:
    ISO 2024-01-31 + 1 month          -> 2024-02-29  (constrain)
    Umm al-Qura 1445-12-30 + 1 day    -> 1446-01-01
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hilal._internal.constants import DAYS_PER_WEEK
from hilal._internal.validation import OVERFLOW_MODES, validate_option

if TYPE_CHECKING:
    from hilal.calendars.base import CalendarSystem
    from hilal.core.duration import Duration


def balance_year_month(
    calendar: CalendarSystem, year: int, month: int
) -> tuple[int, int]:
    """Carry an out-of-range ordinal month into the year.

    Examples:
        >>> from hilal.calendars import get_calendar
        >>> balance_year_month(get_calendar("iso8601"), 2024, 14)
        (2025, 2)
        >>> balance_year_month(get_calendar("iso8601"), 2024, 0)
        (2023, 12)
    """
    while month > calendar.months_in_year(year):
        month -= calendar.months_in_year(year)
        year += 1
    while month < 1:
        year -= 1
        month += calendar.months_in_year(year)
    return (year, month)


def add_duration(
    calendar: CalendarSystem,
    days: int,
    duration: Duration,
    overflow: str = "constrain",
) -> int:
    """Add a Duration to the date at MJD `days`, returning the new MJD.

    Args:
        calendar: The calendar whose rules govern months and years.
        days: The starting date as an MJD number.
        duration: The amount to add.
        overflow: "constrain" to clamp the day to the target month,
            "reject" to raise when it does not fit.

    Raises:
        InvalidFieldValue: If overflow="reject" and the day does not
            exist in the target month.
        InvalidOption: If overflow is not recognized.
        RangeError: If the calendar cannot represent an intermediate date.
    """
    validate_option(overflow, "overflow", OVERFLOW_MODES)

    if duration.years or duration.months:
        year, month, day = calendar.days_to_fields(days)
        year, month = balance_year_month(
            calendar, year + duration.years, month + duration.months
        )
        year, month, day = calendar.regulate(year, month, day, overflow)
        days = calendar.fields_to_days(year, month, day)

    return days + duration.weeks * DAYS_PER_WEEK + duration.days


def subtract_duration(
    calendar: CalendarSystem,
    days: int,
    duration: Duration,
    overflow: str = "constrain",
) -> int:
    """Subtract a Duration; equivalent to adding its negation."""
    return add_duration(calendar, days, duration.negated(), overflow)


__all__ = [
    "balance_year_month",
    "add_duration",
    "subtract_duration",
]
