"""Islamic (Hijri) calendar systems.

Two families are provided:

    - "islamic-umalqura": the Umm al-Qura calendar of Saudi Arabia. Month
      starts come from the published tables shipped with the hijridate
      library, so only the years those tables cover (1343-1500 AH) can be
      represented.
    - "islamic-civil" and "islamic-tbla": the arithmetical (tabular)
      calendar with a 30-year cycle. They share month lengths and leap
      years and differ only in epoch (Friday vs. Thursday 1 Muharram 1 AH),
      which makes them the usual "alternative epoch" choices.

Tabular months alternate 30 and 29 days and a leap year has 355 days
instead of 354. Umm al-Qura months follow the tables, where a few early
years run to 353 or 356 days; any year longer than 354 days is a leap year.
"""

from __future__ import annotations

import logging

from hijridate import Gregorian, Hijri

from hilal._internal import gregorian
from hilal._internal.constants import (
    ISLAMIC_CIVIL_CALENDAR,
    ISLAMIC_CIVIL_EPOCH_MJD,
    ISLAMIC_CYCLE_DAYS,
    ISLAMIC_CYCLE_YEARS,
    ISLAMIC_TBLA_CALENDAR,
    ISLAMIC_TBLA_EPOCH_MJD,
    UMALQURA_CALENDAR,
)
from hilal._internal.decorators import memoize
from hilal._internal.validation import validate_day, validate_month
from hilal.calendars.base import CalendarSystem
from hilal.errors import InvalidFieldValue, RangeError

logger = logging.getLogger(__name__)

# Leap years of the 30-year cycle: 2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29
_LEAP_YEAR_OFFSET = 14
_LEAP_YEARS_PER_CYCLE = 11


class TabularIslamicCalendar(CalendarSystem):
    """The arithmetical Islamic calendar anchored at a given epoch.

    Odd months have 30 days, even months 29, and the twelfth month gains
    a day in leap years.

    Examples:
        >>> civil = TabularIslamicCalendar("islamic-civil", -451561)
        >>> civil.days_in_year(2), civil.days_in_year(3)
        (355, 354)
    """

    def __init__(self, calendar_id: str, epoch_mjd: int) -> None:
        self.id = calendar_id
        self._epoch = epoch_mjd

    def in_leap_year(self, year: int) -> bool:
        return (
            (_LEAP_YEAR_OFFSET + _LEAP_YEARS_PER_CYCLE * year) % ISLAMIC_CYCLE_YEARS
            < _LEAP_YEARS_PER_CYCLE
        )

    def days_in_year(self, year: int) -> int:
        return 355 if self.in_leap_year(year) else 354

    def days_in_month(self, year: int, month: int) -> int:
        validate_month(month)
        if month % 2 == 1 or (month == 12 and self.in_leap_year(year)):
            return 30
        return 29

    def _days_before_year(self, year: int) -> int:
        return (year - 1) * 354 + (3 + _LEAP_YEARS_PER_CYCLE * year) // ISLAMIC_CYCLE_YEARS

    @staticmethod
    def _days_before_month(month: int) -> int:
        return 29 * (month - 1) + month // 2

    def fields_to_days(self, year: int, month: int, day: int) -> int:
        validate_month(month)
        validate_day(year, month, day, self.days_in_month(year, month))
        return (
            self._epoch
            + self._days_before_year(year)
            + self._days_before_month(month)
            + day
            - 1
        )

    def days_to_fields(self, days: int) -> tuple[int, int, int]:
        elapsed = days - self._epoch
        year = (ISLAMIC_CYCLE_YEARS * elapsed + 10646) // ISLAMIC_CYCLE_DAYS
        while self._days_before_year(year + 1) <= elapsed:
            year += 1
        while self._days_before_year(year) > elapsed:
            year -= 1

        day_of_year = elapsed - self._days_before_year(year) + 1
        month = 1
        while day_of_year > self.days_in_month(year, month):
            day_of_year -= self.days_in_month(year, month)
            month += 1
        return (year, month, day_of_year)

    def day_of_year(self, days: int) -> int:
        year, _, _ = self.days_to_fields(days)
        return days - self._epoch - self._days_before_year(year) + 1


class UmmAlQuraCalendar(CalendarSystem):
    """The Umm al-Qura calendar, backed by the hijridate tables.

    Examples:
        >>> cal = UmmAlQuraCalendar()
        >>> cal.days_to_fields(gregorian.ymd_to_mjd(2024, 7, 7))
        (1446, 1, 1)
    """

    id = UMALQURA_CALENDAR

    def fields_to_days(self, year: int, month: int, day: int) -> int:
        validate_month(month)
        hijri = _hijri(year, month, day)
        g = hijri.to_gregorian()
        return gregorian.ymd_to_mjd(g.year, g.month, g.day)

    def days_to_fields(self, days: int) -> tuple[int, int, int]:
        year, month, day = gregorian.mjd_to_ymd(days)
        try:
            hijri = Gregorian(year, month, day).to_hijri()
        except (OverflowError, ValueError) as exc:
            logger.debug("ISO date %04d-%02d-%02d has no Umm al-Qura equivalent", year, month, day)
            raise RangeError(
                f"{year:04d}-{month:02d}-{day:02d} is outside the Umm al-Qura tables"
            ) from exc
        return (hijri.year, hijri.month, hijri.day)

    def days_in_month(self, year: int, month: int) -> int:
        validate_month(month)
        return _hijri(year, month, 1).month_length()

    def days_in_year(self, year: int) -> int:
        return _umalqura_year_length(year)

    def in_leap_year(self, year: int) -> bool:
        # Tabulated years run from 353 to 356 days
        return self.days_in_year(year) > 354

    def check_days(self, days: int) -> None:
        self.days_to_fields(days)


def _hijri(year: int, month: int, day: int) -> Hijri:
    """Build a validated hijridate Hijri, translating its errors."""
    try:
        return Hijri(year, month, day)
    except OverflowError as exc:
        logger.debug("Umm al-Qura year %d is outside the tables", year)
        raise RangeError(
            f"Umm al-Qura year {year} is outside the supported tables"
        ) from exc
    except ValueError as exc:
        raise InvalidFieldValue(
            f"invalid Umm al-Qura date {year}-{month:02d}-{day:02d}: {exc}"
        ) from exc


@memoize
def _umalqura_year_length(year: int) -> int:
    return sum(_hijri(year, month, 1).month_length() for month in range(1, 13))


ISLAMIC_CIVIL = TabularIslamicCalendar(ISLAMIC_CIVIL_CALENDAR, ISLAMIC_CIVIL_EPOCH_MJD)
ISLAMIC_TBLA = TabularIslamicCalendar(ISLAMIC_TBLA_CALENDAR, ISLAMIC_TBLA_EPOCH_MJD)


__all__ = [
    "TabularIslamicCalendar",
    "UmmAlQuraCalendar",
    "ISLAMIC_CIVIL",
    "ISLAMIC_TBLA",
]
