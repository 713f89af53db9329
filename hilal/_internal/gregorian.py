"""Proleptic Gregorian day counts.

Every calendar system in Hilal reads and writes dates as MJD (Modified
Julian Day) numbers, so these functions are the bridge between ISO fields
and day numbers for all of them.

The conversions count from 1 March of year 0, which puts the leap day
last in the year, and split the count into 400-year eras of 146097 days.
Floor division keeps this valid for years at or before 0.

This module is not part of the public API.
"""

from __future__ import annotations

from hilal._internal.constants import MJD_EPOCH_YMD

_DAYS_PER_ERA = 146097

# Days in a March-based year before each month, March first
_MARCH_MONTH_STARTS = (0, 31, 61, 92, 122, 153, 184, 214, 245, 275, 306, 337)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def _days_from_march_zero(year: int, month: int, day: int) -> int:
    march_year = year - 1 if month <= 2 else year
    era, year_of_era = divmod(march_year, 400)
    day_of_year = _MARCH_MONTH_STARTS[(month + 9) % 12] + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * _DAYS_PER_ERA + day_of_era


_MJD_OFFSET = _days_from_march_zero(*MJD_EPOCH_YMD)


def ymd_to_mjd(year: int, month: int, day: int) -> int:
    """Convert an ISO date to its MJD number.

    Fields are not validated; callers check them first.

    Examples:
        >>> ymd_to_mjd(1858, 11, 17)
        0
        >>> ymd_to_mjd(2024, 1, 1)
        60310
    """
    return _days_from_march_zero(year, month, day) - _MJD_OFFSET


def mjd_to_ymd(mjd: int) -> tuple[int, int, int]:
    """Convert an MJD number to (year, month, day).

    Examples:
        >>> mjd_to_ymd(60310)
        (2024, 1, 1)
        >>> mjd_to_ymd(-678881)
        (0, 3, 1)
    """
    era, day_of_era = divmod(mjd + _MJD_OFFSET, _DAYS_PER_ERA)
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // (_DAYS_PER_ERA - 1)
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    march_month = (5 * day_of_year + 2) // 153
    day = day_of_year - _MARCH_MONTH_STARTS[march_month] + 1
    month = march_month + 3 if march_month < 10 else march_month - 9
    year = era * 400 + year_of_era + (1 if month <= 2 else 0)
    return (year, month, day)


def mjd_to_iso_weekday(mjd: int) -> int:
    """Convert MJD to ISO day of week (Monday=1, Sunday=7)."""
    # MJD 0 was a Wednesday
    return (mjd + 2) % 7 + 1


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_mjd",
    "mjd_to_ymd",
    "mjd_to_iso_weekday",
]
