"""Tests for the calendar systems and the calendar registry."""

from __future__ import annotations

import pytest

from hilal import (
    InvalidCalendarSystem,
    InvalidFieldValue,
    PlainDate,
    RangeError,
    available_calendars,
    get_calendar,
)
from hilal._internal import gregorian
from hilal.calendars import CalendarSystem
from hilal.calendars.islamic import _umalqura_year_length

CIVIL_LEAP_YEARS = {2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29}


class TestRegistry:
    """Tests for get_calendar() and available_calendars()."""

    def test_available(self) -> None:
        """All calendars are registered."""
        assert available_calendars() == [
            "gregory",
            "islamic-civil",
            "islamic-tbla",
            "islamic-umalqura",
            "iso8601",
        ]

    def test_case_insensitive(self) -> None:
        """Names are matched case-insensitively."""
        assert get_calendar("Islamic-UmAlQura").id == "islamic-umalqura"

    def test_instance_passthrough(self) -> None:
        """A CalendarSystem is returned unchanged."""
        cal = get_calendar("islamic-civil")
        assert isinstance(cal, CalendarSystem)
        assert get_calendar(cal) is cal

    @pytest.mark.parametrize("name", ["", "islamic", "hijri", 42])
    def test_unknown(self, name: object) -> None:
        """Unknown names and non-strings raise InvalidCalendarSystem."""
        with pytest.raises(InvalidCalendarSystem):
            get_calendar(name)  # type: ignore[arg-type]


class TestGregorianHelpers:
    """Tests for MJD conversions."""

    def test_mjd_epoch(self) -> None:
        """MJD 0 is 1858-11-17, a Wednesday."""
        assert gregorian.ymd_to_mjd(1858, 11, 17) == 0
        assert gregorian.mjd_to_iso_weekday(0) == 3

    def test_known_day(self) -> None:
        """2024-01-01 is MJD 60310."""
        assert gregorian.ymd_to_mjd(2024, 1, 1) == 60310
        assert gregorian.mjd_to_ymd(60310) == (2024, 1, 1)

    @pytest.mark.parametrize(
        "ymd", [(1, 1, 1), (0, 2, 29), (-44, 3, 15), (-9999, 1, 1), (9999, 12, 31)]
    )
    def test_round_trip(self, ymd: tuple[int, int, int]) -> None:
        """Conversions round-trip across the supported range."""
        assert gregorian.mjd_to_ymd(gregorian.ymd_to_mjd(*ymd)) == ymd

    def test_leap_years(self) -> None:
        """Gregorian leap year rules."""
        assert gregorian.is_leap_year(2000)
        assert not gregorian.is_leap_year(1900)
        assert gregorian.is_leap_year(2024)
        assert not gregorian.is_leap_year(2023)


class TestTabularIslamic:
    """Tests for islamic-civil and islamic-tbla."""

    @pytest.mark.parametrize("name", ["islamic-civil", "islamic-tbla"])
    def test_leap_years(self, name: str) -> None:
        """Eleven leap years in each 30-year cycle."""
        cal = get_calendar(name)
        leaps = {year for year in range(1, 31) if cal.in_leap_year(year)}
        assert leaps == CIVIL_LEAP_YEARS
        assert cal.in_leap_year(1445 + 30) == cal.in_leap_year(1445)

    def test_cycle_length(self) -> None:
        """A 30-year cycle has 10631 days."""
        cal = get_calendar("islamic-civil")
        assert sum(cal.days_in_year(year) for year in range(1, 31)) == 10631

    def test_month_lengths(self) -> None:
        """Odd months have 30 days, even 29, Dhu al-Hijjah 30 in leap years."""
        cal = get_calendar("islamic-civil")
        assert [cal.days_in_month(3, m) for m in range(1, 13)] == [30, 29] * 6
        assert cal.days_in_month(2, 12) == 30

    def test_epochs(self) -> None:
        """The two epochs are one day apart."""
        civil = PlainDate.from_fields(1, 1, 1, calendar="islamic-civil")
        tbla = PlainDate.from_fields(1, 1, 1, calendar="islamic-tbla")
        assert civil.to_string(calendar_name="never") == "0622-07-19"
        assert tbla.to_string(calendar_name="never") == "0622-07-18"

    def test_known_new_year(self) -> None:
        """1 Muharram 1445 in the civil calendar."""
        d = PlainDate.from_fields(1445, 1, 1, calendar="islamic-civil")
        assert (d.iso_year, d.iso_month, d.iso_day) == (2023, 7, 19)
        tbla = PlainDate.from_fields(1445, 1, 1, calendar="islamic-tbla")
        assert (tbla.iso_year, tbla.iso_month, tbla.iso_day) == (2023, 7, 18)

    @pytest.mark.parametrize("name", ["islamic-civil", "islamic-tbla"])
    def test_round_trip(self, name: str) -> None:
        """days_to_fields inverts fields_to_days across many years."""
        cal = get_calendar(name)
        start = gregorian.ymd_to_mjd(2020, 1, 1)
        for days in range(start, start + 3 * 366, 7):
            assert cal.fields_to_days(*cal.days_to_fields(days)) == days

    def test_invalid_day(self) -> None:
        """Day 30 of an even month is invalid."""
        with pytest.raises(InvalidFieldValue):
            get_calendar("islamic-civil").fields_to_days(1445, 2, 30)


class TestUmmAlQura:
    """Tests for islamic-umalqura."""

    def test_new_year_1446(self) -> None:
        """1 Muharram 1446 is 2024-07-07."""
        d = PlainDate(2024, 7, 7, "islamic-umalqura")
        assert (d.year, d.month, d.day) == (1446, 1, 1)

    def test_last_day_of_1445(self, hijri_eve: PlainDate) -> None:
        """2024-07-06 is the 30th of Dhu al-Hijjah 1445."""
        assert (hijri_eve.year, hijri_eve.month, hijri_eve.day) == (1445, 12, 30)
        assert hijri_eve.days_in_month == 30

    def test_year_length(self) -> None:
        """The year length is the sum of the month lengths."""
        cal = get_calendar("islamic-umalqura")
        total = sum(cal.days_in_month(1445, m) for m in range(1, 13))
        assert cal.days_in_year(1445) == total
        assert total in (354, 355)

    def test_year_length_is_cached(self) -> None:
        """Year lengths are looked up once per year."""
        _umalqura_year_length.cache_clear()
        get_calendar("islamic-umalqura").days_in_year(1446)
        assert (1446,) in _umalqura_year_length.cache

    @pytest.mark.parametrize("year", [1343, 1349])
    def test_long_years_are_leap(self, year: int) -> None:
        """Years longer than 355 days still count as leap years."""
        cal = get_calendar("islamic-umalqura")
        assert cal.days_in_year(year) == 356
        assert cal.in_leap_year(year)

    def test_short_year_is_not_leap(self) -> None:
        """A 353-day year is a common year."""
        cal = get_calendar("islamic-umalqura")
        assert cal.days_in_year(1344) == 353
        assert not cal.in_leap_year(1344)

    def test_round_trip(self) -> None:
        """Conversions round-trip over a few years."""
        cal = get_calendar("islamic-umalqura")
        start = gregorian.ymd_to_mjd(2022, 1, 1)
        for days in range(start, start + 3 * 366, 5):
            assert cal.fields_to_days(*cal.days_to_fields(days)) == days

    def test_outside_tables(self) -> None:
        """Dates outside the Umm al-Qura tables raise RangeError."""
        with pytest.raises(RangeError):
            PlainDate(1900, 1, 1).with_calendar("islamic-umalqura")
        with pytest.raises(RangeError):
            PlainDate.from_fields(1300, 1, 1, calendar="islamic-umalqura")
