"""Internal utilities for Hilal.

This module contains private implementation details:
    - Constants, limits and defaults
    - Proleptic Gregorian day-count math
    - Field and option validation
    - The @memoize decorator

Note: This module is not part of the public API.
"""

from __future__ import annotations

from hilal._internal.decorators import memoize
from hilal._internal.validation import (
    normalize_rounding_mode,
    normalize_unit,
    to_integer,
    validate_day,
    validate_month,
    validate_option,
    validate_year,
)

__all__: list[str] = [
    "memoize",
    "normalize_rounding_mode",
    "normalize_unit",
    "to_integer",
    "validate_day",
    "validate_month",
    "validate_option",
    "validate_year",
]
