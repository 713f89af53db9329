"""Tests for date arithmetic: add, subtract, until and since."""

from __future__ import annotations

from fractions import Fraction

import pytest

from hilal import (
    Duration,
    InvalidFieldValue,
    InvalidOption,
    PlainDate,
    RangeError,
)
from hilal.arithmetic import negate_rounding_mode, round_to_increment


class TestAdd:
    """Tests for PlainDate.add() and subtract()."""

    def test_add_days(self) -> None:
        """Days roll over month and year boundaries."""
        assert PlainDate(2024, 12, 31).add({"days": 1}) == PlainDate(2025, 1, 1)
        assert PlainDate(2024, 2, 28).add("P1D") == PlainDate(2024, 2, 29)

    def test_add_weeks(self) -> None:
        """Weeks are seven days."""
        assert PlainDate(2024, 1, 1).add(Duration(weeks=2)) == PlainDate(2024, 1, 15)

    def test_add_month_constrain(self) -> None:
        """The day is clamped to the end of the target month."""
        assert PlainDate(2024, 1, 31).add({"months": 1}) == PlainDate(2024, 2, 29)
        assert PlainDate(2023, 1, 31).add({"months": 1}) == PlainDate(2023, 2, 28)

    def test_add_month_reject(self) -> None:
        """Reject mode raises when the day does not exist."""
        with pytest.raises(InvalidFieldValue):
            PlainDate(2023, 1, 31).add({"months": 1}, overflow="reject")

    def test_add_year_from_leap_day(self) -> None:
        """Feb 29 plus a year is Feb 28."""
        assert PlainDate(2024, 2, 29).add({"years": 1}) == PlainDate(2025, 2, 28)

    def test_add_months_across_years(self) -> None:
        """Months carry into years."""
        assert PlainDate(2024, 11, 15).add({"months": 3}) == PlainDate(2025, 2, 15)
        assert PlainDate(2024, 2, 15).subtract({"months": 3}) == PlainDate(2023, 11, 15)

    def test_years_months_before_days(self) -> None:
        """Months are applied before days."""
        d = PlainDate(2024, 1, 31).add(Duration(months=1, days=1))
        assert d == PlainDate(2024, 3, 1)

    def test_hijri_day_rollover(self, hijri_eve: PlainDate) -> None:
        """The last day of 1445 plus one day is 1 Muharram 1446."""
        d = hijri_eve.add({"days": 1})
        assert (d.year, d.month, d.day) == (1446, 1, 1)
        assert d.calendar_id == "islamic-umalqura"

    def test_tabular_month_constrain(self) -> None:
        """Hijri months are clamped using the calendar's own lengths."""
        d = PlainDate.from_fields(1445, 1, 30, calendar="islamic-civil")
        result = d.add({"months": 1})
        assert (result.year, result.month, result.day) == (1445, 2, 29)
        with pytest.raises(InvalidFieldValue):
            d.add({"months": 1}, overflow="reject")

    def test_subtract_is_negated_add(self) -> None:
        """subtract(d) equals add(-d)."""
        d = PlainDate(2024, 3, 31)
        assert d.subtract({"months": 1}) == d.add({"months": -1})
        assert d.subtract({"months": 1}) == PlainDate(2024, 2, 29)

    def test_unknown_overflow(self) -> None:
        """Unknown overflow modes raise InvalidOption."""
        with pytest.raises(InvalidOption):
            PlainDate(2024, 1, 1).add({"days": 1}, overflow="clamp")

    def test_out_of_range(self) -> None:
        """Results outside the supported years raise RangeError."""
        with pytest.raises(RangeError):
            PlainDate(9999, 12, 31).add({"days": 1})


class TestUntil:
    """Tests for PlainDate.until()."""

    def test_default_is_days(self) -> None:
        """Without options, the difference is in days."""
        assert PlainDate(2024, 1, 1).until(PlainDate(2024, 3, 1)) == Duration(days=60)

    def test_weeks(self) -> None:
        """largest_unit="week" splits into weeks and days."""
        d = PlainDate(2024, 1, 1).until("2024-01-20", largest_unit="weeks")
        assert d == Duration(weeks=2, days=5)

    def test_months(self) -> None:
        """Months count whole calendar months."""
        d = PlainDate(2024, 1, 15).until(PlainDate(2024, 3, 20), largest_unit="month")
        assert d == Duration(months=2, days=5)

    def test_month_end_is_not_a_month(self) -> None:
        """Jan 31 until Feb 29 is 29 days, not a month."""
        d = PlainDate(2024, 1, 31).until(PlainDate(2024, 2, 29), largest_unit="month")
        assert d == Duration(days=29)

    def test_years(self) -> None:
        """Leap day to the day before the next leap day."""
        d = PlainDate(2020, 2, 29).until(PlainDate(2024, 2, 28), largest_unit="year")
        assert d == Duration(years=3, months=11, days=30)

    def test_negative(self) -> None:
        """Differences into the past are negative."""
        d = PlainDate(2024, 3, 20).until(PlainDate(2024, 1, 15), largest_unit="month")
        assert d == Duration(months=-2, days=-5)

    def test_same_day(self) -> None:
        """Equal dates give a zero duration."""
        assert PlainDate(2024, 1, 1).until("2024-01-01", largest_unit="year").is_zero

    def test_hijri_month(self, hijri_eve: PlainDate) -> None:
        """Months are Hijri months in a Hijri calendar."""
        start = PlainDate.from_fields(1445, 9, 1, calendar="islamic-umalqura")
        d = start.until(hijri_eve, largest_unit="month")
        assert d == Duration(months=3, days=29)

    def test_calendar_mismatch(self) -> None:
        """Dates of different calendars cannot be compared."""
        with pytest.raises(RangeError):
            PlainDate(2024, 1, 1).until(PlainDate(2024, 2, 1, "islamic-umalqura"))


class TestRounding:
    """Tests for smallest_unit and rounding options."""

    def test_weeks_half_expand(self) -> None:
        """19 days round to 3 weeks with half_expand, 2 with trunc."""
        start = PlainDate(2024, 1, 1)
        end = PlainDate(2024, 1, 20)
        assert start.until(
            end, largest_unit="week", smallest_unit="week", rounding_mode="half_expand"
        ) == Duration(weeks=3)
        assert start.until(end, largest_unit="week", smallest_unit="week") == Duration(
            weeks=2
        )

    def test_months_rounding(self) -> None:
        """Month rounding uses the length of the month being crossed."""
        start = PlainDate(2024, 1, 1)
        end = PlainDate(2024, 2, 20)
        assert start.until(
            end, largest_unit="month", smallest_unit="month", rounding_mode="halfExpand"
        ) == Duration(months=2)
        assert start.until(end, smallest_unit="month") == Duration(months=1)

    def test_day_increment(self) -> None:
        """Days round to multiples of the increment."""
        start = PlainDate(2024, 1, 1)
        end = PlainDate(2024, 1, 18)
        assert start.until(
            end, rounding_increment=5, rounding_mode="half_expand"
        ) == Duration(days=15)
        assert start.until(end, rounding_increment=5, rounding_mode="ceil") == Duration(
            days=20
        )

    def test_month_carry_into_year(self) -> None:
        """Rounding up to 12 months carries into a year."""
        d = PlainDate(2023, 1, 15).until(
            PlainDate(2024, 1, 10),
            largest_unit="year",
            smallest_unit="month",
            rounding_mode="half_expand",
        )
        assert d == Duration(years=1)

    def test_rounded_days_carry_into_month(self) -> None:
        """Days rounded up past a month end become a whole month."""
        d = PlainDate(2024, 1, 1).until(
            PlainDate(2024, 2, 28),
            largest_unit="month",
            rounding_increment=5,
            rounding_mode="ceil",
        )
        assert d == Duration(months=2)

    def test_rounded_weeks_carry_into_month(self) -> None:
        """Weeks rounded up past a month end become a whole month."""
        d = PlainDate(2024, 1, 1).until(
            PlainDate(2024, 3, 30),
            largest_unit="month",
            smallest_unit="week",
            rounding_mode="ceil",
        )
        assert d == Duration(months=3)

    def test_rounded_weeks_carry_into_year(self) -> None:
        """A carried month that completes a year becomes a year."""
        d = PlainDate(2023, 1, 1).until(
            PlainDate(2023, 12, 30),
            largest_unit="year",
            smallest_unit="week",
            rounding_mode="ceil",
        )
        assert d == Duration(years=1)

    def test_rounded_days_carry_backwards(self) -> None:
        """Carrying works the same way for negative differences."""
        d = PlainDate(2024, 4, 1).until(
            PlainDate(2024, 2, 3),
            largest_unit="month",
            rounding_increment=5,
            rounding_mode="expand",
        )
        assert d == Duration(months=-2)

    def test_rounding_short_of_month_end_is_kept(self) -> None:
        """Rounded days that stay inside the month are not carried."""
        d = PlainDate(2024, 1, 1).until(
            PlainDate(2024, 2, 20),
            largest_unit="month",
            rounding_increment=5,
            rounding_mode="ceil",
        )
        assert d == Duration(months=1, days=20)

    def test_since_keeps_floor_meaning(self) -> None:
        """since() with floor rounds the positive result down."""
        later = PlainDate(2024, 1, 20)
        earlier = PlainDate(2024, 1, 1)
        d = later.since(earlier, largest_unit="week", smallest_unit="week", rounding_mode="floor")
        assert d == Duration(weeks=2)
        d = later.since(earlier, largest_unit="week", smallest_unit="week", rounding_mode="ceil")
        assert d == Duration(weeks=3)

    def test_since_is_negated_until(self) -> None:
        """Without rounding, since is the negation of until."""
        a = PlainDate(2024, 3, 20)
        b = PlainDate(2024, 1, 15)
        assert a.since(b, largest_unit="month") == -a.until(b, largest_unit="month")

    def test_invalid_unit_order(self) -> None:
        """largest_unit must not be smaller than smallest_unit."""
        with pytest.raises(InvalidOption):
            PlainDate(2024, 1, 1).until(
                "2024-03-01", largest_unit="day", smallest_unit="month"
            )

    @pytest.mark.parametrize(
        "options",
        [
            {"largest_unit": "hour"},
            {"smallest_unit": "fortnight"},
            {"rounding_increment": 0},
            {"rounding_increment": 1.5},
            {"rounding_mode": "bankers"},
        ],
    )
    def test_invalid_options(self, options: dict[str, object]) -> None:
        """Invalid options raise InvalidOption."""
        with pytest.raises(InvalidOption):
            PlainDate(2024, 1, 1).until("2024-03-01", **options)


class TestRoundingHelpers:
    """Tests for round_to_increment() and negate_rounding_mode()."""

    @pytest.mark.parametrize(
        ("value", "mode", "expected"),
        [
            (Fraction(5, 2), "half_even", 2),
            (Fraction(7, 2), "half_even", 4),
            (Fraction(5, 2), "half_trunc", 2),
            (Fraction(-5, 2), "half_expand", -3),
            (Fraction(-5, 2), "half_ceil", -2),
            (Fraction(-5, 2), "half_floor", -3),
            (Fraction(-9, 4), "expand", -3),
            (Fraction(-9, 4), "trunc", -2),
            (Fraction(-9, 4), "ceil", -2),
            (Fraction(-9, 4), "floor", -3),
        ],
    )
    def test_modes(self, value: Fraction, mode: str, expected: int) -> None:
        """Each rounding mode on exact halves and plain fractions."""
        assert round_to_increment(value, 1, mode) == expected

    def test_negate(self) -> None:
        """Directional modes swap; symmetric ones are kept."""
        assert negate_rounding_mode("ceil") == "floor"
        assert negate_rounding_mode("half_floor") == "half_ceil"
        assert negate_rounding_mode("half_even") == "half_even"
