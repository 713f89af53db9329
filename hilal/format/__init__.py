"""Date formatting and parsing.

This module provides functions for converting calendar dates to and from
string representations:
    - ISO 8601 date strings with calendar annotations
    - Locale-aware display strings

Functions:
    format_iso_date: Format ISO fields as YYYY-MM-DD.
    format_calendar_annotation: Format a [u-ca=...] annotation.
    parse_iso_date: Parse a date string into ISO fields and calendar.
    format_locale_date: Format a PlainDate for a locale.
"""

from __future__ import annotations

from hilal.format.iso8601 import (
    format_calendar_annotation,
    format_iso_date,
    format_iso_year,
    parse_iso_date,
)
from hilal.format.locale import DATE_STYLES, format_locale_date, parse_locale

__all__: list[str] = [
    # ISO 8601
    "format_iso_year",
    "format_iso_date",
    "format_calendar_annotation",
    "parse_iso_date",
    # Locale
    "DATE_STYLES",
    "format_locale_date",
    "parse_locale",
]
