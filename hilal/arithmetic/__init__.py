"""Date arithmetic.

This module provides the calendar arithmetic behind PlainDate:
    - add_duration / subtract_duration: Duration addition with overflow
      handling
    - difference: Duration between two dates with unit and rounding
      options

Examples:
    >>> from hilal.calendars import get_calendar
    >>> from hilal.core.duration import Duration
    >>> iso = get_calendar("iso8601")
    >>> add_duration(iso, 60340, Duration(months=1)) - 60340  # 2024-01-31
    29
"""

from __future__ import annotations

from hilal.arithmetic.date_ops import (
    add_duration,
    balance_year_month,
    subtract_duration,
)
from hilal.arithmetic.difference import (
    calendar_difference,
    difference,
    negate_rounding_mode,
    round_to_increment,
)

__all__: list[str] = [
    "add_duration",
    "balance_year_month",
    "subtract_duration",
    "calendar_difference",
    "difference",
    "negate_rounding_mode",
    "round_to_increment",
]
