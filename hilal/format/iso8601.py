"""ISO 8601 formatting and parsing for calendar dates.

Dates are always written with their ISO fields, followed by a calendar
annotation when the date belongs to another calendar:

    2024-07-06
    2024-07-06[u-ca=islamic-umalqura]
    2024-07-06[!u-ca=islamic-umalqura]     (critical annotation)
    +012345-01-01                          (extended years)

Functions:
    format_iso_date: Format ISO fields as YYYY-MM-DD.
    format_calendar_annotation: Format the [u-ca=...] suffix.
    parse_iso_date: Parse a date string into ISO fields and a calendar id.

Examples:
    >>> format_iso_date(2024, 7, 6)
    '2024-07-06'
    >>> parse_iso_date("2024-07-06[u-ca=islamic-umalqura]")
    (2024, 7, 6, 'islamic-umalqura')
"""

from __future__ import annotations

import re

from hilal._internal.constants import ISO_CALENDAR
from hilal._internal.validation import CALENDAR_NAME_MODES, validate_option
from hilal.errors import ParseError

_DATE_PATTERN = re.compile(
    r"^(?P<year>[+-]\d{6}|\d{4})-?(?P<month>\d{2})-?(?P<day>\d{2})"
    r"(?:\[(?P<critical>!)?u-ca=(?P<calendar>[A-Za-z0-9-]+)\])?$"
)


def format_iso_year(year: int) -> str:
    """Format a year as four digits, or signed six digits outside 0..9999."""
    if 0 <= year <= 9999:
        return f"{year:04d}"
    sign = "-" if year < 0 else "+"
    return f"{sign}{abs(year):06d}"


def format_iso_date(year: int, month: int, day: int) -> str:
    """Format ISO fields as YYYY-MM-DD (extended years as +/-YYYYYY)."""
    return f"{format_iso_year(year)}-{month:02d}-{day:02d}"


def format_calendar_annotation(calendar_id: str, calendar_name: str = "auto") -> str:
    """Return the calendar annotation for a date string.

    Args:
        calendar_id: The date's calendar identifier.
        calendar_name: "auto" (omit for iso8601), "always", "never" or
            "critical".

    Raises:
        InvalidOption: If calendar_name is not recognized.
    """
    validate_option(calendar_name, "calendar_name", CALENDAR_NAME_MODES)
    if calendar_name == "never":
        return ""
    if calendar_name == "auto" and calendar_id == ISO_CALENDAR:
        return ""
    flag = "!" if calendar_name == "critical" else ""
    return f"[{flag}u-ca={calendar_id}]"


def parse_iso_date(s: str) -> tuple[int, int, int, str | None]:
    """Parse a date string into ISO fields and an optional calendar id.

    Accepts the extended (YYYY-MM-DD) and basic (YYYYMMDD) forms, with or
    without a calendar annotation.

    Raises:
        ParseError: If the string is not a valid date string.
    """
    if not isinstance(s, str):
        raise ParseError(f"expected str, got {type(s).__name__}")
    match = _DATE_PATTERN.match(s.strip())
    if not match:
        raise ParseError(
            f"Invalid ISO 8601 date format: {s!r}. "
            "Expected YYYY-MM-DD with an optional [u-ca=<calendar>] annotation"
        )
    year_text = match.group("year")
    if year_text == "-000000":
        raise ParseError("year -000000 is not allowed; use 0000")
    return (
        int(year_text),
        int(match.group("month")),
        int(match.group("day")),
        match.group("calendar"),
    )


__all__ = [
    "format_iso_year",
    "format_iso_date",
    "format_calendar_annotation",
    "parse_iso_date",
]
