"""Duration class representing calendar-based durations.

This module provides the Duration class for the amounts PlainDate
arithmetic works with: years, months, weeks and days. Months and years
vary in length by calendar and context, so a Duration is never converted
to a fixed number of days on its own.
"""

from __future__ import annotations

import re
from typing import Mapping, Union

from hilal._internal.validation import to_integer
from hilal.errors import InvalidDuration, ParseError

_FIELDS = ("years", "months", "weeks", "days")

_ISO_DURATION_PATTERN = re.compile(
    r"^([+-])?P(?:(\d+)Y)?(?:(\d+)M)?(?:(\d+)W)?(?:(\d+)D)?$", re.IGNORECASE
)

DurationLike = Union["Duration", Mapping[str, int], str]


class Duration:
    """A calendar duration with year, month, week, and day components.

    Components are stored as given without normalization: Duration(days=40)
    stays 40 days, since converting it to months depends on the date it is
    applied to. All non-zero components must share one sign.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        weeks: Number of weeks (can be negative).
        days: Number of days (can be negative).

    Examples:
        >>> Duration(months=1, days=3)
        Duration(years=0, months=1, weeks=0, days=3)

        >>> str(Duration(years=1, weeks=2))
        'P1Y2W'

        >>> Duration(days=1, months=-1)
        Traceback (most recent call last):
        ...
        hilal.errors.InvalidDuration: duration components must not have mixed signs
    """

    __slots__ = ("_years", "_months", "_weeks", "_days")

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        Raises:
            InvalidDuration: If a component is not an integer or the
                components have mixed signs.
        """
        self._years = to_integer(years, "years")
        self._months = to_integer(months, "months")
        self._weeks = to_integer(weeks, "weeks")
        self._days = to_integer(days, "days")

        signs = {
            (value > 0) - (value < 0)
            for value in (self._years, self._months, self._weeks, self._days)
        }
        signs.discard(0)
        if len(signs) > 1:
            raise InvalidDuration("duration components must not have mixed signs")

    @classmethod
    def from_like(cls, value: DurationLike) -> Duration:
        """Create a Duration from a Duration, mapping, or ISO 8601 string.

        Mapping keys may be singular or plural ("day" or "days").

        Raises:
            InvalidDuration: For unknown or unsupported units, or an
                unsupported value type.
            ParseError: For a malformed ISO 8601 duration string.

        Examples:
            >>> Duration.from_like({"days": 1})
            Duration(years=0, months=0, weeks=0, days=1)

            >>> Duration.from_like("P1M15D")
            Duration(years=0, months=1, weeks=0, days=15)
        """
        if isinstance(value, Duration):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, Mapping):
            fields: dict[str, int] = {}
            for key, amount in value.items():
                if not isinstance(key, str):
                    raise InvalidDuration(
                        f"duration units must be strings, got {key!r}"
                    )
                name = key if key.endswith("s") else key + "s"
                if name not in _FIELDS:
                    raise InvalidDuration(
                        f"unsupported duration unit {key!r} for a date; "
                        f"expected one of {', '.join(_FIELDS)}"
                    )
                fields[name] = amount
            if not fields:
                raise InvalidDuration("duration must have at least one unit")
            return cls(**fields)
        raise InvalidDuration(
            f"expected Duration, mapping, or string, got {type(value).__name__}"
        )

    @classmethod
    def from_string(cls, s: str) -> Duration:
        """Parse an ISO 8601 date duration such as "P1Y2M", "-P10D".

        Raises:
            ParseError: If the string is not a date-only ISO 8601 duration.
        """
        match = _ISO_DURATION_PATTERN.match(s.strip())
        if not match or not any(match.group(i) for i in range(2, 6)):
            raise ParseError(
                f"Invalid ISO 8601 duration: {s!r}. Expected e.g. P1Y2M3W4D"
            )
        sign = -1 if match.group(1) == "-" else 1
        years, months, weeks, days = (
            sign * int(match.group(i) or 0) for i in range(2, 6)
        )
        return cls(years=years, months=months, weeks=weeks, days=days)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def weeks(self) -> int:
        return self._weeks

    @property
    def days(self) -> int:
        return self._days

    @property
    def sign(self) -> int:
        """Return -1, 0, or 1 for negative, zero, or positive durations."""
        for value in (self._years, self._months, self._weeks, self._days):
            if value:
                return 1 if value > 0 else -1
        return 0

    @property
    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return self.sign == 0

    def negated(self) -> Duration:
        """Return the duration with every component negated."""
        return Duration(
            years=-self._years,
            months=-self._months,
            weeks=-self._weeks,
            days=-self._days,
        )

    def __neg__(self) -> Duration:
        return self.negated()

    def __abs__(self) -> Duration:
        return self.negated() if self.sign < 0 else self

    def __eq__(self, other: object) -> bool:
        """Check component-wise equality.

        Duration(months=12) != Duration(years=1) because components are
        compared directly.
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._weeks == other._weeks
            and self._days == other._days
        )

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._weeks, self._days))

    def __repr__(self) -> str:
        return (
            f"Duration(years={self._years}, months={self._months}, "
            f"weeks={self._weeks}, days={self._days})"
        )

    def __str__(self) -> str:
        """Return the ISO 8601 representation, e.g. "P1Y2M" or "-P3D"."""
        if self.is_zero:
            return "PT0S"

        parts = []
        for value, designator in (
            (self._years, "Y"),
            (self._months, "M"),
            (self._weeks, "W"),
            (self._days, "D"),
        ):
            if value:
                parts.append(f"{abs(value)}{designator}")

        prefix = "-P" if self.sign < 0 else "P"
        return prefix + "".join(parts)

    def __bool__(self) -> bool:
        return not self.is_zero


__all__ = ["Duration", "DurationLike"]
