"""Difference between two dates of one calendar.

This module computes the Duration between two dates, in the units and
with the rounding PlainDate.until() and PlainDate.since() accept.

Units:
    year, month, week, day ("auto" for largest_unit means day, or
    smallest_unit if that is larger)

Rounding modes:
    ceil, floor, expand, trunc, half_ceil, half_floor, half_expand,
    half_trunc, half_even

Calendar units (years, months) are counted the way a calendar reader
would: a month has passed once the same day of the next month has been
reached, so 2024-01-31 until 2024-02-29 is 29 days, not one month.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import TYPE_CHECKING

from hilal._internal.constants import DAYS_PER_WEEK
from hilal._internal.validation import (
    DATE_UNITS,
    normalize_rounding_mode,
    normalize_unit,
)
from hilal.arithmetic.date_ops import add_duration, balance_year_month
from hilal.core.duration import Duration
from hilal.errors import InvalidOption

if TYPE_CHECKING:
    from hilal.calendars.base import CalendarSystem

_NEGATED_MODES = {
    "ceil": "floor",
    "floor": "ceil",
    "half_ceil": "half_floor",
    "half_floor": "half_ceil",
}


def negate_rounding_mode(mode: str) -> str:
    """Return the mode that rounds a negated value the same way."""
    return _NEGATED_MODES.get(mode, mode)


def round_to_increment(value: Fraction, increment: int, mode: str) -> int:
    """Round value to a multiple of increment using a rounding mode.

    Examples:
        >>> round_to_increment(Fraction(5, 2), 1, "half_even")
        2
        >>> round_to_increment(Fraction(-5, 2), 1, "half_expand")
        -3
        >>> round_to_increment(Fraction(7), 5, "ceil")
        10
    """
    quotient = Fraction(value) / increment
    lower = math.floor(quotient)
    upper = math.ceil(quotient)
    if lower == upper:
        return lower * increment

    away_from_zero = upper if quotient > 0 else lower
    toward_zero = lower if quotient > 0 else upper

    if mode == "ceil":
        result = upper
    elif mode == "floor":
        result = lower
    elif mode == "expand":
        result = away_from_zero
    elif mode == "trunc":
        result = toward_zero
    else:
        remainder = quotient - lower
        if remainder < Fraction(1, 2):
            result = lower
        elif remainder > Fraction(1, 2):
            result = upper
        elif mode == "half_ceil":
            result = upper
        elif mode == "half_floor":
            result = lower
        elif mode == "half_expand":
            result = away_from_zero
        elif mode == "half_trunc":
            result = toward_zero
        else:  # half_even
            result = lower if lower % 2 == 0 else upper
    return result * increment


def _surpasses(sign: int, candidate: tuple[int, int, int], target: tuple[int, int, int]) -> bool:
    return sign * ((candidate > target) - (candidate < target)) > 0


def _split_weeks(total_days: int) -> tuple[int, int]:
    sign = -1 if total_days < 0 else 1
    weeks, days = divmod(abs(total_days), DAYS_PER_WEEK)
    return (sign * weeks, sign * days)


def calendar_difference(
    calendar: CalendarSystem, one: int, two: int, largest_unit: str
) -> Duration:
    """Return the unrounded Duration from MJD `one` to MJD `two`.

    Args:
        calendar: The calendar both dates are read in.
        one: Start date as an MJD number.
        two: End date as an MJD number.
        largest_unit: "year", "month", "week" or "day".
    """
    if largest_unit == "day":
        return Duration(days=two - one)
    if largest_unit == "week":
        weeks, days = _split_weeks(two - one)
        return Duration(weeks=weeks, days=days)

    sign = (two > one) - (two < one)
    if sign == 0:
        return Duration()

    y1, m1, d1 = calendar.days_to_fields(one)
    target = calendar.days_to_fields(two)
    y2, m2, _ = target

    years = 0
    if largest_unit == "year":
        years = y2 - y1
        while years and _surpasses(sign, (y1 + years, m1, d1), target):
            years -= sign

    base_year = y1 + years
    months = (y2 - base_year) * calendar.months_in_year(base_year) + (m2 - m1)
    while months and _surpasses(
        sign, balance_year_month(calendar, base_year, m1 + months) + (d1,), target
    ):
        months -= sign

    year, month = balance_year_month(calendar, base_year, m1 + months)
    intermediate = calendar.fields_to_days(
        *calendar.regulate(year, month, d1, "constrain")
    )
    return Duration(years=years, months=months, days=two - intermediate)


def _bubble(
    calendar: CalendarSystem,
    one: int,
    rounded: Duration,
    largest: str,
    smallest: str,
) -> Duration:
    """Carry a rounded duration into months and years.

    Rounding up can push weeks or days past the end of a month, or months
    past a year. When the end date reaches a whole extra month, the
    duration becomes that month count with weeks and days dropped; whole
    years of months are then carried into years.
    """
    sign = rounded.sign
    if sign == 0 or largest not in ("year", "month"):
        return rounded

    result = rounded
    if smallest in ("week", "day"):
        end = add_duration(calendar, one, rounded)
        while True:
            candidate = Duration(years=result.years, months=result.months + sign)
            if sign * (add_duration(calendar, one, candidate) - end) > 0:
                break
            result = candidate

    if largest == "year":
        months_per_year = calendar.months_in_year(calendar.days_to_fields(one)[0])
        carry = sign * (abs(result.months) // months_per_year)
        if carry:
            result = Duration(
                years=result.years + carry,
                months=result.months - carry * months_per_year,
                weeks=result.weeks,
                days=result.days,
            )
    return result


def _round_calendar_unit(
    calendar: CalendarSystem,
    one: int,
    two: int,
    raw: Duration,
    largest: str,
    smallest: str,
    increment: int,
    mode: str,
) -> Duration:
    sign = raw.sign

    if smallest == "year":
        count = raw.years

        def build(n: int) -> Duration:
            return Duration(years=n)

    elif smallest == "month":
        count = raw.months

        def build(n: int) -> Duration:
            return Duration(years=raw.years, months=n)

    elif largest == "week":
        count = raw.weeks

        def build(n: int) -> Duration:
            return Duration(weeks=n)

    else:
        count, _ = _split_weeks(raw.days)

        def build(n: int) -> Duration:
            return Duration(years=raw.years, months=raw.months, weeks=n)

    start_count = sign * (abs(count) // increment) * increment
    end_count = start_count + sign * increment
    start = add_duration(calendar, one, build(start_count))
    end = add_duration(calendar, one, build(end_count))

    progress = Fraction(two - start, end - start)
    total = start_count + progress * increment * sign
    rounded = round_to_increment(total, increment, mode)
    return _bubble(calendar, one, build(rounded), largest, smallest)


def difference(
    calendar: CalendarSystem,
    one: int,
    two: int,
    largest_unit: str = "auto",
    smallest_unit: str = "day",
    rounding_increment: int = 1,
    rounding_mode: str = "trunc",
) -> Duration:
    """Return the Duration from MJD `one` to MJD `two`, rounded.

    Raises:
        InvalidOption: For unknown units or rounding modes, a largest_unit
            smaller than smallest_unit, or a non-positive increment.
    """
    smallest = normalize_unit(smallest_unit, "smallest_unit")
    largest = normalize_unit(largest_unit, "largest_unit", allow_auto=True)
    if largest == "auto":
        largest = min("day", smallest, key=DATE_UNITS.index)
    if DATE_UNITS.index(largest) > DATE_UNITS.index(smallest):
        raise InvalidOption(
            f"largest_unit {largest!r} must not be smaller than smallest_unit {smallest!r}"
        )
    if (
        isinstance(rounding_increment, bool)
        or not isinstance(rounding_increment, int)
        or rounding_increment < 1
    ):
        raise InvalidOption(
            f"rounding_increment must be a positive integer, got {rounding_increment!r}"
        )
    mode = normalize_rounding_mode(rounding_mode)

    raw = calendar_difference(calendar, one, two, largest)
    if raw.is_zero or (smallest == "day" and rounding_increment == 1):
        return raw

    if smallest == "day":
        if largest == "week":
            total = raw.weeks * DAYS_PER_WEEK + raw.days
            weeks, days = _split_weeks(
                round_to_increment(Fraction(total), rounding_increment, mode)
            )
            return Duration(weeks=weeks, days=days)
        days = round_to_increment(Fraction(raw.days), rounding_increment, mode)
        return _bubble(
            calendar,
            one,
            Duration(years=raw.years, months=raw.months, days=days),
            largest,
            smallest,
        )

    return _round_calendar_unit(
        calendar, one, two, raw, largest, smallest, rounding_increment, mode
    )


__all__ = [
    "calendar_difference",
    "difference",
    "negate_rounding_mode",
    "round_to_increment",
]
