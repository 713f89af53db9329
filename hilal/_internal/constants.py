"""Internal constants for Hilal.

Calendar identifiers, defaults, limits and the epochs the calendar systems
are anchored at. This module is not part of the public API.
"""

from __future__ import annotations

# Calendar identifiers
ISO_CALENDAR: str = "iso8601"
GREGORY_CALENDAR: str = "gregory"
UMALQURA_CALENDAR: str = "islamic-umalqura"
ISLAMIC_CIVIL_CALENDAR: str = "islamic-civil"
ISLAMIC_TBLA_CALENDAR: str = "islamic-tbla"

# Calendar an AdjustedDate binds to when none is given
DEFAULT_CALENDAR: str = UMALQURA_CALENDAR

# Locale used by to_locale_string() when none is given
DEFAULT_LOCALE: str = "en-US"

# Range of ISO years a PlainDate can hold
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

DAYS_PER_WEEK: int = 7

# ISO date of MJD (Modified Julian Day) 0
MJD_EPOCH_YMD: tuple[int, int, int] = (1858, 11, 17)

# 1 Muharram 1 AH as MJD for the tabular Islamic calendars
# civil: Friday 16 July 622 (Julian), JD 1948439.5
# tbla:  Thursday 15 July 622 (Julian), JD 1948438.5
ISLAMIC_CIVIL_EPOCH_MJD: int = -451561
ISLAMIC_TBLA_EPOCH_MJD: int = -451562

# Tabular Islamic calendar: 30-year cycle of 10631 days, 11 leap years
ISLAMIC_CYCLE_YEARS: int = 30
ISLAMIC_CYCLE_DAYS: int = 10631


__all__ = [
    "ISO_CALENDAR",
    "GREGORY_CALENDAR",
    "UMALQURA_CALENDAR",
    "ISLAMIC_CIVIL_CALENDAR",
    "ISLAMIC_TBLA_CALENDAR",
    "DEFAULT_CALENDAR",
    "DEFAULT_LOCALE",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_PER_WEEK",
    "MJD_EPOCH_YMD",
    "ISLAMIC_CIVIL_EPOCH_MJD",
    "ISLAMIC_TBLA_EPOCH_MJD",
    "ISLAMIC_CYCLE_YEARS",
    "ISLAMIC_CYCLE_DAYS",
]
