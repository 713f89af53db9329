"""Year-month and month-day projections of calendar dates.

PlainYearMonth and PlainMonthDay are what PlainDate.to_plain_year_month()
and PlainDate.to_plain_month_day() return: a date with the day, or the
year, dropped. Each keeps a reference ISO day so it can be written as an
ISO 8601 string in any calendar.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hilal._internal import gregorian
from hilal._internal.constants import ISO_CALENDAR
from hilal.calendars import CalendarSystem, get_calendar
from hilal.errors import InvalidFieldValue, RangeError
from hilal.format.iso8601 import (
    format_calendar_annotation,
    format_iso_date,
    format_iso_year,
)

if TYPE_CHECKING:
    from hilal.core.plain_date import PlainDate

# Month-days are anchored in the latest year on or before this ISO year
_REFERENCE_ISO_YEAR = 1972
_REFERENCE_SEARCH_YEARS = 60


class PlainYearMonth:
    """A month of a particular year in a named calendar.

    Examples:
        >>> from hilal.core.plain_date import PlainDate
        >>> ym = PlainDate(2024, 7, 6).to_plain_year_month()
        >>> ym.year, ym.month, ym.days_in_month
        (2024, 7, 31)
        >>> ym.to_string()
        '2024-07'
    """

    __slots__ = ("_days", "_calendar")

    def __init__(
        self,
        year: int,
        month: int,
        calendar: str | CalendarSystem = ISO_CALENDAR,
    ) -> None:
        """Create a PlainYearMonth from calendar year and month.

        Raises:
            InvalidFieldValue: If the month does not exist in that year.
        """
        cal = get_calendar(calendar)
        self._days = cal.fields_to_days(year, month, 1)
        self._calendar = cal

    @classmethod
    def _from_days(cls, days: int, calendar: CalendarSystem) -> PlainYearMonth:
        result = cls.__new__(cls)
        result._days = days
        result._calendar = calendar
        return result

    @property
    def calendar_id(self) -> str:
        return self._calendar.id

    @property
    def year(self) -> int:
        return self._calendar.days_to_fields(self._days)[0]

    @property
    def month(self) -> int:
        return self._calendar.days_to_fields(self._days)[1]

    @property
    def month_code(self) -> str:
        year, month, _ = self._calendar.days_to_fields(self._days)
        return self._calendar.month_code(year, month)

    @property
    def days_in_month(self) -> int:
        year, month, _ = self._calendar.days_to_fields(self._days)
        return self._calendar.days_in_month(year, month)

    @property
    def days_in_year(self) -> int:
        return self._calendar.days_in_year(self.year)

    @property
    def months_in_year(self) -> int:
        return self._calendar.months_in_year(self.year)

    @property
    def in_leap_year(self) -> bool:
        return self._calendar.in_leap_year(self.year)

    def to_plain_date(self, day: int) -> PlainDate:
        """Return the given day of this month as a PlainDate."""
        from hilal.core.plain_date import PlainDate

        return PlainDate.from_fields(
            self.year, self.month, day, calendar=self._calendar, overflow="reject"
        )

    def to_string(self, calendar_name: str = "auto") -> str:
        """Return "YYYY-MM" for ISO, else the reference ISO date annotated."""
        annotation = format_calendar_annotation(self.calendar_id, calendar_name)
        year, month, day = gregorian.mjd_to_ymd(self._days)
        if self.calendar_id == ISO_CALENDAR and not annotation:
            return f"{format_iso_year(year)}-{month:02d}"
        return format_iso_date(year, month, day) + annotation

    def equals(self, other: PlainYearMonth) -> bool:
        return (
            isinstance(other, PlainYearMonth)
            and self._days == other._days
            and self.calendar_id == other.calendar_id
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlainYearMonth):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._days, self.calendar_id))

    def __repr__(self) -> str:
        return f"PlainYearMonth({self.year}, {self.month}, calendar={self.calendar_id!r})"

    def __str__(self) -> str:
        return self.to_string()


class PlainMonthDay:
    """A day of a month, without a year, in a named calendar.

    Examples:
        >>> md = PlainMonthDay("M02", 29)
        >>> md.to_string()
        '02-29'
        >>> md.to_plain_date(2023).to_string()  # constrained in a common year
        '2023-02-28'
    """

    __slots__ = ("_month_code", "_day", "_calendar", "_reference_days")

    def __init__(
        self,
        month_code: str,
        day: int,
        calendar: str | CalendarSystem = ISO_CALENDAR,
    ) -> None:
        """Create a PlainMonthDay from a month code and day.

        Raises:
            InvalidFieldValue: If that month and day never occur together in
                the calendar.
        """
        cal = get_calendar(calendar)
        self._month_code = month_code
        self._day = day
        self._calendar = cal
        self._reference_days = _reference_days(cal, month_code, day)

    @property
    def calendar_id(self) -> str:
        return self._calendar.id

    @property
    def month_code(self) -> str:
        return self._month_code

    @property
    def day(self) -> int:
        return self._day

    def to_plain_date(self, year: int) -> PlainDate:
        """Return this month-day in the given year, constraining the day."""
        from hilal.core.plain_date import PlainDate

        return PlainDate.from_fields(
            year, day=self._day, month_code=self._month_code, calendar=self._calendar
        )

    def to_string(self, calendar_name: str = "auto") -> str:
        """Return "MM-DD" for ISO, else the reference ISO date annotated."""
        annotation = format_calendar_annotation(self.calendar_id, calendar_name)
        year, month, day = gregorian.mjd_to_ymd(self._reference_days)
        if self.calendar_id == ISO_CALENDAR and not annotation:
            return f"{month:02d}-{day:02d}"
        return format_iso_date(year, month, day) + annotation

    def equals(self, other: PlainMonthDay) -> bool:
        return (
            isinstance(other, PlainMonthDay)
            and self._month_code == other._month_code
            and self._day == other._day
            and self.calendar_id == other.calendar_id
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlainMonthDay):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._month_code, self._day, self.calendar_id))

    def __repr__(self) -> str:
        return (
            f"PlainMonthDay({self._month_code!r}, {self._day}, "
            f"calendar={self.calendar_id!r})"
        )

    def __str__(self) -> str:
        return self.to_string()


def _reference_days(calendar: CalendarSystem, month_code: str, day: int) -> int:
    """Return the latest occurrence of a month-day on or before 1972-12-31.

    Raises:
        InvalidFieldValue: If no year in the search window has that day.
    """
    if day < 1:
        raise InvalidFieldValue(f"day must be positive, got {day}")
    end = gregorian.ymd_to_mjd(_REFERENCE_ISO_YEAR, 12, 31)
    start_year = calendar.days_to_fields(end)[0]
    for year in range(start_year, start_year - _REFERENCE_SEARCH_YEARS, -1):
        month = calendar.month_from_code(year, month_code)
        try:
            if day > calendar.days_in_month(year, month):
                continue
            days = calendar.fields_to_days(year, month, day)
        except RangeError:
            break
        if days <= end:
            return days
    raise InvalidFieldValue(
        f"{month_code}-{day:02d} does not occur in the {calendar.id} calendar"
    )


__all__ = ["PlainYearMonth", "PlainMonthDay"]
