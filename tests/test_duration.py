"""Tests for the Duration class."""

from __future__ import annotations

import math

import pytest

from hilal import Duration, InvalidDuration, ParseError


class TestDurationConstruction:
    """Tests for Duration construction."""

    def test_default_is_zero(self) -> None:
        """Test that the default duration is zero."""
        d = Duration()
        assert d.is_zero
        assert d.sign == 0
        assert not d

    def test_components_are_kept(self) -> None:
        """Components are stored without normalization."""
        d = Duration(days=40)
        assert d.days == 40
        assert d.months == 0

    def test_integral_float(self) -> None:
        """Integral floats are accepted as integers."""
        assert Duration(days=2.0).days == 2

    @pytest.mark.parametrize("value", [1.5, math.nan, math.inf, True, "1"])
    def test_non_integral(self, value: object) -> None:
        """Non-integral components raise InvalidDuration."""
        with pytest.raises(InvalidDuration):
            Duration(days=value)  # type: ignore[arg-type]

    def test_mixed_signs(self) -> None:
        """Test that mixed signs raise InvalidDuration."""
        with pytest.raises(InvalidDuration, match="mixed signs"):
            Duration(months=1, days=-1)

    def test_negative(self) -> None:
        """All-negative durations are allowed."""
        d = Duration(years=-1, days=-3)
        assert d.sign == -1


class TestDurationFromLike:
    """Tests for Duration.from_like()."""

    def test_plural_and_singular_keys(self) -> None:
        """Mapping keys may be plural or singular."""
        assert Duration.from_like({"days": 1}) == Duration(days=1)
        assert Duration.from_like({"month": 2, "day": 3}) == Duration(months=2, days=3)

    def test_passthrough(self) -> None:
        """A Duration is returned unchanged."""
        d = Duration(weeks=1)
        assert Duration.from_like(d) is d

    def test_time_units_rejected(self) -> None:
        """Time units are not date units."""
        with pytest.raises(InvalidDuration, match="hours"):
            Duration.from_like({"hours": 1})

    def test_non_string_key(self) -> None:
        """Mapping keys must be unit names."""
        with pytest.raises(InvalidDuration, match="strings"):
            Duration.from_like({1: 2})  # type: ignore[dict-item]

    def test_empty_mapping(self) -> None:
        """An empty mapping is not a duration."""
        with pytest.raises(InvalidDuration):
            Duration.from_like({})

    def test_unsupported_type(self) -> None:
        """Numbers are not durations."""
        with pytest.raises(InvalidDuration):
            Duration.from_like(5)  # type: ignore[arg-type]


class TestDurationFromString:
    """Tests for ISO 8601 duration parsing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("P1Y", Duration(years=1)),
            ("P1M15D", Duration(months=1, days=15)),
            ("P2W", Duration(weeks=2)),
            ("-P10D", Duration(days=-10)),
            ("+P1Y2M3W4D", Duration(years=1, months=2, weeks=3, days=4)),
        ],
    )
    def test_valid(self, text: str, expected: Duration) -> None:
        """Test parsing valid duration strings."""
        assert Duration.from_string(text) == expected

    @pytest.mark.parametrize("text", ["P", "1D", "PT1H", "P1D2M", ""])
    def test_invalid(self, text: str) -> None:
        """Test that malformed strings raise ParseError."""
        with pytest.raises(ParseError):
            Duration.from_string(text)


class TestDurationOperations:
    """Tests for negation, equality and string forms."""

    def test_negation(self) -> None:
        """Negation flips every component."""
        d = Duration(months=1, days=3)
        assert -d == Duration(months=-1, days=-3)
        assert d.negated() == -d
        assert abs(-d) == d

    def test_equality_is_componentwise(self) -> None:
        """Duration(months=12) is not Duration(years=1)."""
        assert Duration(months=12) != Duration(years=1)
        assert Duration(days=7) != Duration(weeks=1)
        assert hash(Duration(days=7)) == hash(Duration(days=7))

    def test_str(self) -> None:
        """Test the ISO 8601 string form."""
        assert str(Duration(years=1, weeks=2)) == "P1Y2W"
        assert str(Duration(days=-3)) == "-P3D"
        assert str(Duration()) == "PT0S"

    def test_repr(self) -> None:
        """Test repr output."""
        assert repr(Duration(months=1, days=3)) == (
            "Duration(years=0, months=1, weeks=0, days=3)"
        )
