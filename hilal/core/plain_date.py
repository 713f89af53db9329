"""PlainDate class representing a calendar date in a named calendar.

This module provides the PlainDate class: an immutable calendar day bound
to a calendar system. It is the date engine the rest of Hilal builds on;
all calendar rules are delegated to the CalendarSystem it carries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Union

from hilal._internal import gregorian
from hilal._internal.constants import DAYS_PER_WEEK, ISO_CALENDAR
from hilal._internal.validation import (
    OVERFLOW_MODES,
    normalize_rounding_mode,
    validate_option,
)
from hilal.arithmetic import (
    add_duration,
    difference,
    negate_rounding_mode,
    subtract_duration,
)
from hilal.calendars import CalendarSystem, get_calendar
from hilal.core.duration import Duration, DurationLike
from hilal.errors import InvalidFieldValue, RangeError
from hilal.format.iso8601 import (
    format_calendar_annotation,
    format_iso_date,
    parse_iso_date,
)
from hilal.format.locale import LocalesLike, format_locale_date

if TYPE_CHECKING:
    from hilal.core.projections import PlainMonthDay, PlainYearMonth

PlainDateLike = Union["PlainDate", str, Mapping[str, Any]]


class PlainDate:
    """A calendar date in a named calendar system.

    PlainDate stores a single day number (Modified Julian Day) and a
    calendar. The calendar decides how that day reads as year, month and
    day, so the same day can be viewed in several calendars through
    with_calendar() without changing which day it is.

    The constructor takes ISO fields, like a date literal; use
    from_fields() to build a date from fields of its own calendar.

    Attributes:
        year: The calendar year.
        month: The ordinal month (1-based).
        day: The day of the month.
        calendar_id: The calendar identifier.

    Examples:
        >>> d = PlainDate(2024, 7, 6)
        >>> d.year, d.month, d.day
        (2024, 7, 6)

        >>> h = d.with_calendar("islamic-umalqura")
        >>> h.year, h.month, h.day
        (1445, 12, 30)

        >>> PlainDate.from_fields(1446, 1, 1, calendar="islamic-umalqura")
        PlainDate(2024, 7, 7, calendar='islamic-umalqura')
    """

    __slots__ = ("_days", "_calendar")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        calendar: str | CalendarSystem = ISO_CALENDAR,
    ) -> None:
        """Create a PlainDate from ISO year, month and day.

        Args:
            year: The ISO year (-9999..9999).
            month: The ISO month (1-12).
            day: The ISO day of the month.
            calendar: Calendar the date is read in.

        Raises:
            InvalidFieldValue: If the ISO fields do not form a valid date.
            InvalidCalendarSystem: If the calendar is unknown.
            RangeError: If the calendar cannot represent the date.
        """
        cal = get_calendar(calendar)
        days = get_calendar(ISO_CALENDAR).fields_to_days(year, month, day)
        cal.check_days(days)
        self._days = days
        self._calendar = cal

    @classmethod
    def _from_days(cls, days: int, calendar: CalendarSystem) -> PlainDate:
        """Create a PlainDate from an MJD number, validating the range."""
        get_calendar(ISO_CALENDAR).check_days(days)
        calendar.check_days(days)
        result = cls.__new__(cls)
        result._days = days
        result._calendar = calendar
        return result

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int | None = None,
        day: int = 1,
        *,
        month_code: str | None = None,
        calendar: str | CalendarSystem = ISO_CALENDAR,
        overflow: str = "constrain",
    ) -> PlainDate:
        """Create a PlainDate from fields of its own calendar.

        Args:
            year: The calendar year.
            month: The ordinal month. Either month or month_code is required.
            day: The day of the month.
            month_code: The month code ("M01".."M12").
            calendar: Calendar the fields belong to.
            overflow: "constrain" clamps month and day into range,
                "reject" raises for out-of-range fields.

        Raises:
            InvalidFieldValue: For missing, conflicting, or (with "reject")
                out-of-range fields.

        Examples:
            >>> PlainDate.from_fields(2023, 2, 31).to_string()
            '2023-02-28'
        """
        cal = get_calendar(calendar)
        validate_option(overflow, "overflow", OVERFLOW_MODES)
        month = _resolve_month(cal, year, month, month_code)
        year, month, day = cal.regulate(year, month, day, overflow)
        return cls._from_days(cal.fields_to_days(year, month, day), cal)

    @classmethod
    def from_string(cls, s: str) -> PlainDate:
        """Parse a date string such as "2024-07-06[u-ca=islamic-umalqura]".

        Raises:
            ParseError: If the string is not a valid date string.
            InvalidFieldValue: If the ISO fields are out of range.
            InvalidCalendarSystem: If the annotated calendar is unknown.
        """
        year, month, day, calendar = parse_iso_date(s)
        return cls(year, month, day, calendar or ISO_CALENDAR)

    @classmethod
    def from_like(cls, value: PlainDateLike) -> PlainDate:
        """Convert a date-like value to a PlainDate.

        Accepts a PlainDate, a date string, a mapping of calendar fields
        (with an optional "calendar" key), or any object providing
        to_plain_date().

        Raises:
            ParseError: If a string cannot be parsed.
            TypeError: For unsupported values.
        """
        if isinstance(value, PlainDate):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, Mapping):
            fields = dict(value)
            if "year" not in fields:
                raise InvalidFieldValue("date fields require a year")
            return cls.from_fields(**fields)
        to_plain_date = getattr(value, "to_plain_date", None)
        if callable(to_plain_date):
            return to_plain_date()
        raise TypeError(f"expected a date-like value, got {type(value).__name__}")

    @classmethod
    def compare(cls, one: PlainDateLike, two: PlainDateLike) -> int:
        """Return -1, 0 or 1 comparing two dates by day, ignoring calendars."""
        a = cls.from_like(one)
        b = cls.from_like(two)
        return (a._days > b._days) - (a._days < b._days)

    def _fields(self) -> tuple[int, int, int]:
        return self._calendar.days_to_fields(self._days)

    @property
    def calendar(self) -> CalendarSystem:
        """Return the calendar system this date is read in."""
        return self._calendar

    @property
    def calendar_id(self) -> str:
        """Return the calendar identifier, such as "islamic-umalqura"."""
        return self._calendar.id

    @property
    def year(self) -> int:
        """Return the year in this date's calendar.

        Returns:
            Year number; an AH year for the Hijri calendars.
        """
        return self._fields()[0]

    @property
    def month(self) -> int:
        """Return the ordinal month, starting at 1."""
        return self._fields()[1]

    @property
    def month_code(self) -> str:
        """Return the calendar's identifier for this month, e.g. "M12"."""
        year, month, _ = self._fields()
        return self._calendar.month_code(year, month)

    @property
    def day(self) -> int:
        """Return the day of the month.

        Returns:
            Day of the month, starting at 1.
        """
        return self._fields()[2]

    @property
    def day_of_week(self) -> int:
        """Return the ISO day of the week (1=Monday, 7=Sunday).

        Examples:
            >>> PlainDate(2024, 7, 6).day_of_week  # Saturday
            6
        """
        return gregorian.mjd_to_iso_weekday(self._days)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year, starting at 1."""
        return self._calendar.day_of_year(self._days)

    @property
    def days_in_week(self) -> int:
        return DAYS_PER_WEEK

    @property
    def days_in_month(self) -> int:
        """Return the length of this date's month.

        Returns:
            Number of days in the month (29 or 30 for Hijri months).
        """
        year, month, _ = self._fields()
        return self._calendar.days_in_month(year, month)

    @property
    def days_in_year(self) -> int:
        """Return the length of this date's year in days."""
        return self._calendar.days_in_year(self.year)

    @property
    def months_in_year(self) -> int:
        return self._calendar.months_in_year(self.year)

    @property
    def in_leap_year(self) -> bool:
        """Return True if this date's year is longer than a common year."""
        return self._calendar.in_leap_year(self.year)

    @property
    def iso_year(self) -> int:
        """Return the ISO (proleptic Gregorian) year of this day."""
        return gregorian.mjd_to_ymd(self._days)[0]

    @property
    def iso_month(self) -> int:
        """Return the ISO month of this day."""
        return gregorian.mjd_to_ymd(self._days)[1]

    @property
    def iso_day(self) -> int:
        """Return the ISO day of the month of this day."""
        return gregorian.mjd_to_ymd(self._days)[2]

    def with_calendar(self, calendar: str | CalendarSystem) -> PlainDate:
        """Return the same day read in another calendar.

        Raises:
            InvalidCalendarSystem: If the calendar is unknown.
            RangeError: If the calendar cannot represent this day.

        Examples:
            >>> PlainDate(2024, 7, 7).with_calendar("islamic-umalqura").to_string()
            '2024-07-07[u-ca=islamic-umalqura]'
        """
        return PlainDate._from_days(self._days, get_calendar(calendar))

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        *,
        month_code: str | None = None,
        overflow: str = "constrain",
    ) -> PlainDate:
        """Return a new date with calendar fields replaced.

        Any unspecified fields keep their current values. month and
        month_code may both be given only if they agree.

        Raises:
            InvalidFieldValue: If the resulting fields are invalid.

        Examples:
            >>> PlainDate(2024, 1, 31).replace(month=2)
            PlainDate(2024, 2, 29)

            >>> PlainDate(2024, 1, 31).replace(month=2, overflow="reject")
            Traceback (most recent call last):
            ...
            hilal.errors.InvalidFieldValue: day must be between 1 and 29 for 2024-02, got 31
        """
        y, m, d = self._fields()
        new_year = year if year is not None else y
        if month is None and month_code is None:
            month = m
        return PlainDate.from_fields(
            new_year,
            month,
            day if day is not None else d,
            month_code=month_code,
            calendar=self._calendar,
            overflow=overflow,
        )

    def add(self, duration: DurationLike, overflow: str = "constrain") -> PlainDate:
        """Return a new date advanced by a duration.

        Years and months are applied first using this calendar's month
        lengths, then weeks and days. With overflow="constrain" a day that
        does not exist in the target month is clamped; with "reject" it
        raises InvalidFieldValue.

        Examples:
            >>> PlainDate(2024, 1, 31).add({"months": 1})
            PlainDate(2024, 2, 29)

            >>> h = PlainDate.from_fields(1445, 12, 30, calendar="islamic-umalqura")
            >>> h.add({"days": 1}).year
            1446
        """
        amount = Duration.from_like(duration)
        days = add_duration(self._calendar, self._days, amount, overflow)
        return PlainDate._from_days(days, self._calendar)

    def subtract(self, duration: DurationLike, overflow: str = "constrain") -> PlainDate:
        """Return a new date moved back by a duration."""
        amount = Duration.from_like(duration)
        days = subtract_duration(self._calendar, self._days, amount, overflow)
        return PlainDate._from_days(days, self._calendar)

    def _difference_to(self, other: PlainDateLike, options: dict[str, Any]) -> Duration:
        target = PlainDate.from_like(other)
        if target.calendar_id != self.calendar_id:
            raise RangeError(
                f"cannot compute a difference between {self.calendar_id} "
                f"and {target.calendar_id} dates"
            )
        return difference(self._calendar, self._days, target._days, **options)

    def until(
        self,
        other: PlainDateLike,
        largest_unit: str = "auto",
        smallest_unit: str = "day",
        rounding_increment: int = 1,
        rounding_mode: str = "trunc",
    ) -> Duration:
        """Return the Duration from this date to another.

        Args:
            other: The end date; must use the same calendar.
            largest_unit: "auto" (days), "year", "month", "week" or "day".
            smallest_unit: Unit to round to; default "day".
            rounding_increment: Round to multiples of this many units.
            rounding_mode: How to round; default "trunc".

        Raises:
            RangeError: If the calendars differ.
            InvalidOption: For invalid unit or rounding options.

        Examples:
            >>> PlainDate(2024, 1, 15).until(PlainDate(2024, 3, 20), largest_unit="month")
            Duration(years=0, months=2, weeks=0, days=5)
        """
        return self._difference_to(
            other,
            {
                "largest_unit": largest_unit,
                "smallest_unit": smallest_unit,
                "rounding_increment": rounding_increment,
                "rounding_mode": rounding_mode,
            },
        )

    def since(
        self,
        other: PlainDateLike,
        largest_unit: str = "auto",
        smallest_unit: str = "day",
        rounding_increment: int = 1,
        rounding_mode: str = "trunc",
    ) -> Duration:
        """Return the Duration from another date to this one.

        Same options as until(); the rounding mode is applied as seen from
        this date, so "floor" and "ceil" keep their meaning.

        Examples:
            >>> PlainDate(2024, 3, 20).since(PlainDate(2024, 1, 15))
            Duration(years=0, months=0, weeks=0, days=65)
        """
        return self._difference_to(
            other,
            {
                "largest_unit": largest_unit,
                "smallest_unit": smallest_unit,
                "rounding_increment": rounding_increment,
                "rounding_mode": negate_rounding_mode(
                    normalize_rounding_mode(rounding_mode)
                ),
            },
        ).negated()

    def equals(self, other: PlainDateLike) -> bool:
        """Return True if other is the same day in the same calendar."""
        other_date = PlainDate.from_like(other)
        return self._days == other_date._days and self.calendar_id == other_date.calendar_id

    def to_string(self, calendar_name: str = "auto") -> str:
        """Return the ISO 8601 string with an optional calendar annotation.

        Args:
            calendar_name: "auto" (annotate non-ISO calendars), "always",
                "never" or "critical".

        Examples:
            >>> PlainDate(2024, 7, 6).to_string()
            '2024-07-06'
            >>> PlainDate(2024, 7, 6, "islamic-umalqura").to_string()
            '2024-07-06[u-ca=islamic-umalqura]'
        """
        year, month, day = gregorian.mjd_to_ymd(self._days)
        return format_iso_date(year, month, day) + format_calendar_annotation(
            self.calendar_id, calendar_name
        )

    def to_json(self) -> str:
        """Return the JSON representation, identical to to_string()."""
        return self.to_string()

    def to_locale_string(
        self,
        locales: LocalesLike = None,
        *,
        date_style: str | None = None,
        calendar: str | None = None,
    ) -> str:
        """Return a display string for a locale.

        Examples:
            >>> h = PlainDate(2024, 7, 7, "islamic-umalqura")
            >>> h.to_locale_string("en-US", date_style="long")
            '1 Muharram 1446 AH'
        """
        return format_locale_date(
            self, locales, date_style=date_style, calendar=calendar
        )

    def to_plain_year_month(self) -> PlainYearMonth:
        """Return the year and month of this date."""
        from hilal.core.projections import PlainYearMonth

        year, month, _ = self._fields()
        return PlainYearMonth._from_days(
            self._calendar.fields_to_days(year, month, 1), self._calendar
        )

    def to_plain_month_day(self) -> PlainMonthDay:
        """Return the month code and day of this date."""
        from hilal.core.projections import PlainMonthDay

        year, month, day = self._fields()
        return PlainMonthDay(self._calendar.month_code(year, month), day, self._calendar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlainDate):
            return NotImplemented
        return self._days == other._days and self.calendar_id == other.calendar_id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PlainDate):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PlainDate):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PlainDate):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PlainDate):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash((self._days, self.calendar_id))

    def __repr__(self) -> str:
        year, month, day = gregorian.mjd_to_ymd(self._days)
        if self.calendar_id == ISO_CALENDAR:
            return f"PlainDate({year}, {month}, {day})"
        return f"PlainDate({year}, {month}, {day}, calendar={self.calendar_id!r})"

    def __str__(self) -> str:
        return self.to_string()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


def _resolve_month(
    calendar: CalendarSystem,
    year: int,
    month: int | None,
    month_code: str | None,
) -> int:
    """Return the ordinal month from month and/or month_code.

    Raises:
        InvalidFieldValue: If neither is given or they disagree.
    """
    if month_code is None:
        if month is None:
            raise InvalidFieldValue("either month or month_code is required")
        return month
    from_code = calendar.month_from_code(year, month_code)
    if month is not None and month != from_code:
        raise InvalidFieldValue(
            f"month {month} and month_code {month_code} disagree"
        )
    return from_code


__all__ = ["PlainDate", "PlainDateLike"]
