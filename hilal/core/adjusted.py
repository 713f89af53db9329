"""AdjustedDate: a calendar date read through a fixed day offset.

Hijri month starts are announced locally, and the announced date can run
a day or two apart from a computed calendar such as Umm al-Qura. An
AdjustedDate shows a date as if it had been shifted by a fixed number of
days, so a display can follow the local announcement while the calendar
itself (month lengths, leap years, epoch) stays untouched.

The offset is only a display shift. It is not a calendar variant: month
lengths still come from the underlying calendar, and results of
arithmetic are plain PlainDate values without the offset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hilal._internal.constants import DEFAULT_CALENDAR
from hilal._internal.validation import to_integer, validate_option
from hilal.core.duration import Duration, DurationLike
from hilal.core.plain_date import PlainDate, PlainDateLike
from hilal.format.locale import LocalesLike

if TYPE_CHECKING:
    from hilal.calendars import CalendarSystem
    from hilal.core.projections import PlainMonthDay, PlainYearMonth

_LOCALE_OPTIONS = ("date_style", "calendar")


class AdjustedDate:
    """A date whose every field is read after shifting by offset_days.

    The wrapped date is stored unshifted. Every accessor computes
    base + offset_days afresh and reads the answer from that shifted date,
    so the adjustment is applied exactly once no matter how the wrapper
    is used.

    Arithmetic (add, subtract, replace, with_calendar) works from the
    shifted date and returns a plain PlainDate: the offset is not carried
    into derived dates.

    Examples:
        >>> from hilal import PlainDate
        >>> base = PlainDate(2024, 7, 6).with_calendar("islamic-umalqura")
        >>> base.day, base.month, base.year
        (30, 12, 1445)

        >>> adjusted = AdjustedDate(base, "islamic-umalqura", offset_days=1)
        >>> adjusted.day, adjusted.month, adjusted.year
        (1, 1, 1446)

        >>> adjusted.add({"days": 1})
        PlainDate(2024, 7, 8, calendar='islamic-umalqura')
    """

    __slots__ = ("_base", "_offset")

    def __init__(
        self,
        date: PlainDateLike,
        calendar: str | CalendarSystem = DEFAULT_CALENDAR,
        offset_days: int = 0,
    ) -> None:
        """Wrap a date, bound to a calendar, with a fixed day offset.

        Args:
            date: The date to adjust (a PlainDate or anything
                PlainDate.from_like() accepts).
            calendar: Calendar to read the date in.
            offset_days: Days to shift by; any integer, positive or
                negative.

        Raises:
            InvalidCalendarSystem: If the calendar is unknown.
            InvalidDuration: If offset_days is not an integer.
            RangeError: If the calendar cannot represent the date.
        """
        self._base = PlainDate.from_like(date).with_calendar(calendar)
        self._offset = to_integer(offset_days, "offset_days")

    def _resolve(self) -> PlainDate:
        return self._base.add(Duration(days=self._offset))

    @property
    def calendar_id(self) -> str:
        """Return the identifier of the calendar the date is read in."""
        return self._resolve().calendar_id

    @property
    def day(self) -> int:
        """Return the day of the month of the shifted date.

        Returns:
            Day of the month, starting at 1.
        """
        return self._resolve().day

    @property
    def day_of_week(self) -> int:
        """Return the ISO day of the week (1=Monday) of the shifted date."""
        return self._resolve().day_of_week

    @property
    def day_of_year(self) -> int:
        """Return the day of the year of the shifted date, starting at 1."""
        return self._resolve().day_of_year

    @property
    def days_in_week(self) -> int:
        return self._resolve().days_in_week

    @property
    def days_in_month(self) -> int:
        """Return the length of the shifted date's month.

        Returns:
            Number of days in the month, taken from the calendar.
        """
        return self._resolve().days_in_month

    @property
    def days_in_year(self) -> int:
        """Return the length of the shifted date's year."""
        return self._resolve().days_in_year

    @property
    def month(self) -> int:
        """Return the ordinal month (1-based) of the shifted date."""
        return self._resolve().month

    @property
    def month_code(self) -> str:
        """Return the month code of the shifted date, such as "M01"."""
        return self._resolve().month_code

    @property
    def months_in_year(self) -> int:
        return self._resolve().months_in_year

    @property
    def year(self) -> int:
        """Return the year of the shifted date.

        Returns:
            Year number in the date's calendar (AH for Hijri calendars).
        """
        return self._resolve().year

    @property
    def in_leap_year(self) -> bool:
        """Return True if the shifted date falls in a leap year."""
        return self._resolve().in_leap_year

    def to_plain_date(self) -> PlainDate:
        """Return the shifted date as a PlainDate."""
        return self._resolve()

    def to_string(self, calendar_name: str = "auto") -> str:
        """Return the shifted date as an ISO 8601 string.

        Args:
            calendar_name: "auto", "always", "never" or "critical"; controls
                the [u-ca=...] annotation.

        Returns:
            The ISO date, e.g. "2024-07-07[u-ca=islamic-umalqura]".
        """
        return self._resolve().to_string(calendar_name)

    def to_json(self) -> str:
        """Return the same string as to_string()."""
        return self._resolve().to_json()

    def to_locale_string(self, locales: LocalesLike = None, **options: str) -> str:
        """Format the shifted date for display in a locale.

        Options are passed to PlainDate.to_locale_string() unchanged; the
        accepted ones are date_style and calendar.

        Raises:
            InvalidOption: For any other option name.

        Examples:
            >>> from hilal import PlainDate
            >>> base = PlainDate(2024, 7, 6, "islamic-umalqura")
            >>> AdjustedDate(base, offset_days=1).to_locale_string(
            ...     "en-SG", date_style="full", calendar="islamic-umalqura"
            ... )
            'Sunday, 1 Muharram 1446 AH'
        """
        for name in options:
            validate_option(name, "to_locale_string option", _LOCALE_OPTIONS)
        return self._resolve().to_locale_string(locales, **options)

    def to_plain_year_month(self) -> PlainYearMonth:
        return self._resolve().to_plain_year_month()

    def to_plain_month_day(self) -> PlainMonthDay:
        return self._resolve().to_plain_month_day()

    def add(self, duration: DurationLike, overflow: str = "constrain") -> PlainDate:
        """Return the shifted date advanced by a duration, as a PlainDate."""
        return self._resolve().add(duration, overflow)

    def subtract(self, duration: DurationLike, overflow: str = "constrain") -> PlainDate:
        """Return the shifted date moved back by a duration.

        Returns:
            A PlainDate; the offset is not carried into the result.
        """
        return self._resolve().subtract(duration, overflow)

    def until(self, other: PlainDateLike, **options: object) -> Duration:
        """Return the Duration from the shifted date to another date.

        Accepts the same options as PlainDate.until().

        Returns:
            The difference, positive when other is later.
        """
        return self._resolve().until(other, **options)

    def since(self, other: PlainDateLike, **options: object) -> Duration:
        """Return the Duration from another date to the shifted date."""
        return self._resolve().since(other, **options)

    def replace(self, **fields: object) -> PlainDate:
        """Return the shifted date with fields replaced, as a PlainDate."""
        return self._resolve().replace(**fields)

    def with_calendar(self, calendar: str | CalendarSystem) -> PlainDate:
        """Return the shifted date read in another calendar.

        Returns:
            A PlainDate for the same day in the new calendar.
        """
        return self._resolve().with_calendar(calendar)

    def equals(self, other: AdjustedDate | PlainDateLike) -> bool:
        """Compare the shifted date with another date.

        Another AdjustedDate is compared by its own shifted date; anything
        else is compared with PlainDate.equals().
        """
        if isinstance(other, AdjustedDate):
            return self._resolve().equals(other._resolve())
        return self._resolve().equals(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (AdjustedDate, PlainDate)):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._resolve())

    def __repr__(self) -> str:
        return f"AdjustedDate({self._base!r}, offset_days={self._offset})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["AdjustedDate"]
