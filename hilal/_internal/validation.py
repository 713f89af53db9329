"""Validation utilities for Hilal.

This module provides helpers for ensuring field values, integral
amounts and option strings are acceptable before the date engine uses
them.

This module is not part of the public API.
"""

from __future__ import annotations

import math
from typing import Iterable

from hilal._internal.constants import MAX_YEAR, MIN_YEAR
from hilal.errors import InvalidDuration, InvalidFieldValue, InvalidOption

OVERFLOW_MODES: tuple[str, ...] = ("constrain", "reject")

CALENDAR_NAME_MODES: tuple[str, ...] = ("auto", "always", "never", "critical")

# Largest first; index order is used to compare units
DATE_UNITS: tuple[str, ...] = ("year", "month", "week", "day")

ROUNDING_MODES: tuple[str, ...] = (
    "ceil",
    "floor",
    "expand",
    "trunc",
    "half_ceil",
    "half_floor",
    "half_expand",
    "half_trunc",
    "half_even",
)


def validate_year(year: int) -> None:
    """Validate that an ISO year is within the supported range.

    Raises:
        InvalidFieldValue: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidFieldValue(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int, months_in_year: int = 12) -> None:
    """Validate that a month is within 1..months_in_year.

    Raises:
        InvalidFieldValue: If month is out of range.
    """
    if month < 1 or month > months_in_year:
        raise InvalidFieldValue(
            f"month must be between 1 and {months_in_year}, got {month}"
        )


def validate_day(year: int, month: int, day: int, max_day: int) -> None:
    """Validate that a day is valid for a month of max_day days.

    Raises:
        InvalidFieldValue: If day is invalid for the month.
    """
    if day < 1 or day > max_day:
        raise InvalidFieldValue(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def to_integer(value: object, name: str) -> int:
    """Return value as an int, rejecting anything non-integral.

    Integral floats (2.0) are accepted; bools, NaN, infinities and
    fractional values are not.

    Raises:
        InvalidDuration: If value is not a finite integer.
    """
    if isinstance(value, bool):
        raise InvalidDuration(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidDuration(f"{name} must be a finite integer, got {value!r}")
        return int(value)
    raise InvalidDuration(
        f"{name} must be an integer, got {type(value).__name__}"
    )


def validate_option(value: str, name: str, allowed: Iterable[str]) -> str:
    """Return value if it is one of the allowed option strings.

    Raises:
        InvalidOption: If value is not allowed.
    """
    allowed = tuple(allowed)
    if value not in allowed:
        raise InvalidOption(
            f"{name} must be one of {', '.join(allowed)}; got {value!r}"
        )
    return value


def normalize_unit(value: str, name: str, allow_auto: bool = False) -> str:
    """Normalize a date unit name ("days" -> "day").

    Raises:
        InvalidOption: If value is not a date unit.
    """
    if allow_auto and value == "auto":
        return value
    unit = value[:-1] if isinstance(value, str) and value.endswith("s") else value
    if unit not in DATE_UNITS:
        raise InvalidOption(
            f"{name} must be one of {', '.join(DATE_UNITS)}; got {value!r}"
        )
    return unit


def normalize_rounding_mode(value: str) -> str:
    """Normalize a rounding mode name ("halfExpand" -> "half_expand").

    Raises:
        InvalidOption: If value is not a rounding mode.
    """
    mode = value
    if isinstance(value, str) and value.startswith("half") and "_" not in value:
        mode = "half_" + value[4:].lower()
    return validate_option(mode, "rounding_mode", ROUNDING_MODES)


__all__ = [
    "OVERFLOW_MODES",
    "CALENDAR_NAME_MODES",
    "DATE_UNITS",
    "ROUNDING_MODES",
    "validate_year",
    "validate_month",
    "validate_day",
    "to_integer",
    "validate_option",
    "normalize_unit",
    "normalize_rounding_mode",
]
