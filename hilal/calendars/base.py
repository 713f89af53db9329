"""Calendar system interface.

A CalendarSystem maps calendar fields (year, month, day) to and from
MJD day numbers and answers questions about the shape of its years and
months. PlainDate stores only an MJD number plus a CalendarSystem, so
every calendar rule lives behind this interface.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from hilal._internal.validation import (
    OVERFLOW_MODES,
    validate_day,
    validate_month,
    validate_option,
)
from hilal.errors import InvalidFieldValue

_MONTH_CODE_PATTERN = re.compile(r"^M(\d{2})$")


class CalendarSystem(ABC):
    """Rules of one named calendar.

    Subclasses implement the day-number conversions and month lengths;
    the base class derives month codes, field regulation and day-of-year
    from those.

    Attributes:
        id: The calendar identifier, e.g. "islamic-umalqura".
    """

    id: str = ""

    @abstractmethod
    def fields_to_days(self, year: int, month: int, day: int) -> int:
        """Return the MJD number of a valid calendar date."""

    @abstractmethod
    def days_to_fields(self, days: int) -> tuple[int, int, int]:
        """Return (year, month, day) for an MJD number."""

    @abstractmethod
    def days_in_month(self, year: int, month: int) -> int:
        """Return the number of days in a month of this calendar."""

    @abstractmethod
    def days_in_year(self, year: int) -> int:
        """Return the number of days in a year of this calendar."""

    @abstractmethod
    def in_leap_year(self, year: int) -> bool:
        """Return True if the year is a leap year of this calendar."""

    def months_in_year(self, year: int) -> int:
        """Return the number of months in a year."""
        return 12

    def check_days(self, days: int) -> None:
        """Raise RangeError if this calendar cannot represent the day."""

    def month_code(self, year: int, month: int) -> str:
        """Return the month code ("M01".."M12") for an ordinal month."""
        return f"M{month:02d}"

    def month_from_code(self, year: int, code: str) -> int:
        """Return the ordinal month for a month code in the given year.

        Raises:
            InvalidFieldValue: If the code is malformed or does not exist
                in that year.
        """
        match = _MONTH_CODE_PATTERN.match(code) if isinstance(code, str) else None
        if not match:
            raise InvalidFieldValue(f"invalid month code: {code!r}")
        month = int(match.group(1))
        if month < 1 or month > self.months_in_year(year):
            raise InvalidFieldValue(
                f"month code {code} does not exist in {self.id} year {year}"
            )
        return month

    def day_of_year(self, days: int) -> int:
        """Return the 1-based day of year for an MJD number."""
        year, _, _ = self.days_to_fields(days)
        return days - self.fields_to_days(year, 1, 1) + 1

    def regulate(
        self, year: int, month: int, day: int, overflow: str = "constrain"
    ) -> tuple[int, int, int]:
        """Bring fields into range for this calendar.

        With overflow="constrain" the month and day are clamped to the
        nearest valid value; with overflow="reject" any out-of-range field
        raises.

        Raises:
            InvalidFieldValue: For out-of-range fields under "reject", or
                for month/day values below 1.
            InvalidOption: If overflow is not a recognized mode.
        """
        validate_option(overflow, "overflow", OVERFLOW_MODES)
        months = self.months_in_year(year)
        if overflow == "reject":
            validate_month(month, months)
            validate_day(year, month, day, self.days_in_month(year, month))
            return (year, month, day)

        if month < 1:
            raise InvalidFieldValue(f"month must be positive, got {month}")
        if day < 1:
            raise InvalidFieldValue(f"day must be positive, got {day}")
        month = min(month, months)
        day = min(day, self.days_in_month(year, month))
        return (year, month, day)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id!r}>"


__all__ = ["CalendarSystem"]
