"""Core date types.

This module provides the fundamental types:
    - PlainDate: Calendar date bound to a named calendar system
    - Duration: Calendar duration (years, months, weeks, days)
    - PlainYearMonth: Month of a year, without a day
    - PlainMonthDay: Day of a month, without a year
    - AdjustedDate: A date read through a fixed day offset
"""

from __future__ import annotations

from hilal.core.duration import Duration
from hilal.core.plain_date import PlainDate
from hilal.core.projections import PlainMonthDay, PlainYearMonth
from hilal.core.adjusted import AdjustedDate

__all__: list[str] = [
    "AdjustedDate",
    "Duration",
    "PlainDate",
    "PlainMonthDay",
    "PlainYearMonth",
]
