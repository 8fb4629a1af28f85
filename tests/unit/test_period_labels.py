"""
Tests for period labels and year ranges

Covers:
1. Year label formatting across the era boundary
2. Label parsing as the exact inverse
3. Range labels and YearRange
"""

import pytest

from podcube_catalog.core.domain import (
    PeriodGroup,
    PeriodLabelError,
    YearRange,
    format_range_label,
    format_year_label,
    parse_period_label,
    parse_year_label,
)


# =============================================================================
# SINGLE YEARS
# =============================================================================


class TestYearLabels:
    """Single-year labels"""

    @pytest.mark.parametrize(
        "year, label",
        [(1, "1"), (1971, "1971"), (0, "1 BCE"), (-1, "2 BCE"), (-134999, "135000 BCE")],
    )
    def test_format(self, year: int, label: str) -> None:
        assert format_year_label(year) == label

    @pytest.mark.parametrize(
        "year, label",
        [(1, "1"), (1971, "1971"), (0, "1 BCE"), (-1, "2 BCE"), (-134999, "135000 BCE")],
    )
    def test_parse_is_inverse(self, year: int, label: str) -> None:
        assert parse_year_label(label) == year

    @pytest.mark.parametrize("year", [-500000, -134999, -2, -1, 0, 1, 2, 1971, 999999])
    def test_round_trip(self, year: int) -> None:
        assert parse_year_label(format_year_label(year)) == year

    def test_lowercase_bce(self) -> None:
        assert parse_year_label("500 bce") == -499

    @pytest.mark.parametrize("text", ["", "BCE", "abc BCE", "twelve", "1.5"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(PeriodLabelError):
            parse_year_label(text)


# =============================================================================
# RANGES
# =============================================================================


class TestRangeLabels:
    """Range labels"""

    def test_single_year_range_has_no_dash(self) -> None:
        assert format_range_label(1971, 1971) == "1971"

    def test_bce_range(self) -> None:
        assert format_range_label(-134999, 0) == "135000 BCE-1 BCE"

    def test_parse_bce_range(self) -> None:
        assert parse_period_label("135000 BCE-1 BCE") == YearRange(-134999, 0)

    def test_parse_mixed_range(self) -> None:
        assert parse_period_label("1 BCE-1") == YearRange(0, 1)

    def test_parse_plain_range(self) -> None:
        assert parse_period_label("1971-1980") == YearRange(1971, 1980)

    def test_parse_single(self) -> None:
        assert parse_period_label("1971") == YearRange(1971, 1971)

    def test_leading_sign_belongs_to_number(self) -> None:
        assert parse_period_label("-5") == YearRange(-5, -5)

    def test_reversed_endpoints_are_reordered(self) -> None:
        assert parse_period_label("1980-1971") == YearRange(1971, 1980)

    @pytest.mark.parametrize("label", ["", "All Years", "1971-", "1971 to 1980", "x-y"])
    def test_invalid(self, label: str) -> None:
        with pytest.raises(PeriodLabelError):
            parse_period_label(label)

    @pytest.mark.parametrize("bounds", [(-134999, 0), (0, 1), (1971, 1980), (-3, -3)])
    def test_round_trip(self, bounds) -> None:
        assert parse_period_label(format_range_label(*bounds)) == YearRange(*bounds)


class TestYearRange:
    """YearRange and PeriodGroup"""

    def test_contains_inclusive(self) -> None:
        r = YearRange(-134999, 0)
        assert r.contains(-134999)
        assert r.contains(0)
        assert not r.contains(1)

    def test_start_after_end_rejected(self) -> None:
        with pytest.raises(ValueError):
            YearRange(5, 1)

    def test_group_label(self) -> None:
        group = PeriodGroup(start_year=-134999, end_year=0, episode_count=7)
        assert group.label == "135000 BCE-1 BCE"
        assert group.year_range == YearRange(-134999, 0)
