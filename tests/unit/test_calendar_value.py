"""
Tests for CalendarValue

Covers:
1. String parsing (ISO, US slash, long form, eras, fallback)
2. Normalization on construction
3. ISO and locale formatting
4. Time axis (JDN, epoch milliseconds)
5. Ordering, hashing, immutability
"""

import datetime as dt
import pickle

import pytest

from podcube_catalog.core.calendar import (
    CalendarParseError,
    CalendarValue,
    parse_date_string,
)


# =============================================================================
# PARSING
# =============================================================================


class TestParsing:
    """Accepted string forms"""

    def test_iso_deep_past(self) -> None:
        cv = CalendarValue("-134999-07-21")
        assert (cv.year, cv.month, cv.day) == (-134999, 6, 21)

    def test_iso_padded_positive(self) -> None:
        cv = CalendarValue("001971-05-13")
        assert (cv.year, cv.month, cv.day) == (1971, 4, 13)

    def test_us_slash(self) -> None:
        cv = CalendarValue("5/13/1971")
        assert (cv.year, cv.month, cv.day) == (1971, 4, 13)

    def test_us_slash_bce(self) -> None:
        cv = CalendarValue("1/1/500 BCE")
        assert (cv.year, cv.month, cv.day) == (-499, 0, 1)

    def test_one_bce_is_year_zero(self) -> None:
        assert CalendarValue("12/31/1 BCE").year == 0

    def test_era_is_case_insensitive(self) -> None:
        assert CalendarValue("1/1/500 bc").year == -499
        assert CalendarValue("1/1/500 AD").year == 500

    def test_long_form(self) -> None:
        cv = CalendarValue("May 13, 1971")
        assert (cv.year, cv.month, cv.day) == (1971, 4, 13)

    def test_long_form_bce(self) -> None:
        cv = CalendarValue("March 1, 44 BCE")
        assert (cv.year, cv.month, cv.day) == (-43, 2, 1)

    def test_surrounding_whitespace(self) -> None:
        assert CalendarValue("  2024-02-29 ") == CalendarValue(2024, 1, 29)

    def test_unparsed_triple_is_raw(self) -> None:
        assert parse_date_string("2023-02-30") == (2023, 1, 30)

    def test_overflowing_string_is_normalized(self) -> None:
        assert CalendarValue("2023-02-30") == CalendarValue(2023, 2, 2)

    @pytest.mark.parametrize("text", ["", "garbage", "13th of Never", "2023/05/13"])
    def test_fallback(self, text: str) -> None:
        cv = CalendarValue(text)
        assert (cv.year, cv.month, cv.day) == (0, 0, 1)

    def test_strict_parse_raises(self) -> None:
        with pytest.raises(CalendarParseError):
            CalendarValue.parse("garbage")

    def test_strict_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            CalendarValue.parse("not a date")

    def test_try_parse(self) -> None:
        assert CalendarValue.try_parse("garbage") is None
        assert CalendarValue.try_parse("5/13/1971") == CalendarValue(1971, 4, 13)


class TestFactories:
    """Alternate constructors"""

    def test_from_date(self) -> None:
        assert CalendarValue.from_date(dt.date(2024, 2, 29)) == CalendarValue(2024, 1, 29)

    def test_from_any_passthrough(self) -> None:
        cv = CalendarValue(1971, 4, 13)
        assert CalendarValue.from_any(cv) is cv

    def test_from_any_string_and_date(self) -> None:
        assert CalendarValue.from_any("May 13, 1971") == CalendarValue(1971, 4, 13)
        assert CalendarValue.from_any(dt.date(1971, 5, 13)) == CalendarValue(1971, 4, 13)

    def test_from_any_rejects_numbers(self) -> None:
        with pytest.raises(TypeError):
            CalendarValue.from_any(1971)

    def test_today_matches_system_date(self) -> None:
        today = dt.date.today()
        cv = CalendarValue.today()
        # Guard against a midnight rollover between the two calls
        assert cv in (
            CalendarValue.from_date(today),
            CalendarValue.from_date(today + dt.timedelta(days=1)),
        )


# =============================================================================
# NORMALIZATION
# =============================================================================


class TestConstruction:
    """Numeric construction"""

    def test_default_day_is_zero(self) -> None:
        cv = CalendarValue(2000)
        assert (cv.year, cv.month, cv.day) == (1999, 11, 31)

    def test_overflow_folds(self) -> None:
        assert CalendarValue(2023, 0, 32) == CalendarValue(2023, 1, 1)
        assert CalendarValue(2023, 12, 1) == CalendarValue(2024, 0, 1)
        assert CalendarValue(0, -1, 1) == CalendarValue(-1, 11, 1)

    @pytest.mark.parametrize("bad", [1.5, "x".encode(), None, True])
    def test_non_int_components_rejected(self, bad) -> None:
        with pytest.raises(TypeError):
            CalendarValue(2000, bad, 1)

    def test_add_days(self) -> None:
        assert CalendarValue(2024, 1, 28).add_days(2) == CalendarValue(2024, 2, 1)
        assert CalendarValue(1, 0, 1).add_days(-1) == CalendarValue(0, 11, 31)

    def test_with_year_folds_leap_day(self) -> None:
        assert CalendarValue(2024, 1, 29).with_year(2023) == CalendarValue(2023, 2, 1)

    def test_era_properties(self) -> None:
        assert CalendarValue(0, 0, 1).is_bce
        assert CalendarValue(0, 0, 1).display_year == 1
        assert CalendarValue(-134999, 6, 21).display_year == 135000
        assert not CalendarValue(1, 0, 1).is_bce
        assert CalendarValue(1971, 4, 13).display_year == 1971

    def test_calendar_helpers(self) -> None:
        assert CalendarValue(0, 1, 1).is_leap_year()
        assert CalendarValue(0, 1, 1).days_in_month() == 29
        assert CalendarValue(-100, 1, 1).days_in_month() == 28


# =============================================================================
# FORMATTING
# =============================================================================


class TestIsoString:
    """Extended ISO form"""

    def test_positive_year_padded(self) -> None:
        assert CalendarValue(1971, 4, 13).to_iso_string() == "001971-05-13"

    def test_small_negative_year_padded(self) -> None:
        assert CalendarValue(-5, 0, 1).to_iso_string() == "-000005-01-01"

    def test_deep_past(self) -> None:
        assert CalendarValue(-134999, 6, 21).to_iso_string() == "-134999-07-21"

    def test_year_zero(self) -> None:
        assert CalendarValue(0, 0, 1).to_iso_string() == "000000-01-01"

    @pytest.mark.parametrize(
        "ymd", [(1971, 4, 13), (-5, 0, 1), (0, 11, 31), (-134999, 6, 21), (1234567, 1, 3)]
    )
    def test_round_trip(self, ymd) -> None:
        cv = CalendarValue(*ymd)
        assert CalendarValue(cv.to_iso_string()) == cv

    def test_str_and_json(self) -> None:
        cv = CalendarValue(1971, 4, 13)
        assert str(cv) == cv.to_json() == "001971-05-13"


class TestLocaleString:
    """Intl-style formatting"""

    def test_two_digit_numeric(self) -> None:
        cv = CalendarValue(1971, 4, 13)
        assert cv.to_locale_string(month="2-digit", day="2-digit", year="numeric") == "05/13/1971"

    def test_long_with_weekday(self) -> None:
        cv = CalendarValue(1971, 4, 13)
        text = cv.to_locale_string(weekday="long", month="long", day="numeric", year="numeric")
        assert text == "Thursday, May 13, 1971"

    def test_bce_suffix(self) -> None:
        cv = CalendarValue(-499, 0, 1)
        assert cv.to_locale_string(month="numeric", day="numeric", year="numeric") == "1/1/500 BCE"

    def test_era_short_on_positive_year(self) -> None:
        cv = CalendarValue(1971, 4, 13)
        text = cv.to_locale_string(month="numeric", day="numeric", year="numeric", era="short")
        assert text == "5/13/1971 CE"

    def test_long_month_without_year(self) -> None:
        assert CalendarValue(1971, 4, 13).to_locale_string(month="long", day="numeric") == "May 13"

    def test_weekday_only(self) -> None:
        assert CalendarValue(2000, 0, 1).to_locale_string(weekday="long") == "Saturday"

    def test_two_digit_year(self) -> None:
        assert CalendarValue(1971, 4, 13).to_locale_string(year="2-digit") == "71"

    def test_printed_form_parses_back(self) -> None:
        cv = CalendarValue(-499, 0, 1)
        text = cv.to_locale_string(month="numeric", day="numeric", year="numeric")
        assert CalendarValue(text) == cv


# =============================================================================
# TIME AXIS
# =============================================================================


class TestTimeAxis:
    """JDN and epoch milliseconds"""

    def test_get_time_epoch(self) -> None:
        assert CalendarValue(1970, 0, 1).get_time() == 0
        assert CalendarValue(1970, 0, 2).get_time() == 86400000

    def test_jdn_epoch(self) -> None:
        assert CalendarValue(1970, 0, 1).julian_day_number() == 2440587.5

    def test_get_time_orders_like_values(self) -> None:
        dates = [CalendarValue(-134999, 6, 21), CalendarValue(0, 0, 1), CalendarValue(1971, 4, 13)]
        assert [d.get_time() for d in dates] == sorted(d.get_time() for d in dates)

    def test_weekday_cached(self) -> None:
        assert CalendarValue(2000, 0, 1).weekday == 6
        assert CalendarValue(1970, 0, 1).weekday == 4


# =============================================================================
# VALUE SEMANTICS
# =============================================================================


class TestValueSemantics:
    """Equality, ordering, hashing, immutability"""

    def test_equality_after_normalization(self) -> None:
        assert CalendarValue(2023, 0, 32) == CalendarValue("2023-02-01")

    def test_ordering(self) -> None:
        assert CalendarValue(-1, 11, 31) < CalendarValue(0, 0, 1) < CalendarValue(1971, 4, 13)
        assert CalendarValue(1971, 4, 14) >= CalendarValue(1971, 4, 13)

    def test_hash_consistent(self) -> None:
        assert len({CalendarValue(2023, 0, 32), CalendarValue(2023, 1, 1)}) == 1

    def test_not_equal_to_other_types(self) -> None:
        assert CalendarValue(1971, 4, 13) != "001971-05-13"

    def test_immutable(self) -> None:
        cv = CalendarValue(1971, 4, 13)
        with pytest.raises(AttributeError):
            cv.year = 2000
        with pytest.raises(AttributeError):
            cv._year = 2000
        with pytest.raises(AttributeError):
            del cv._day
        assert cv == CalendarValue(1971, 4, 13)

    def test_pickle(self) -> None:
        cv = CalendarValue(-134999, 6, 21)
        assert pickle.loads(pickle.dumps(cv)) == cv

    def test_repr(self) -> None:
        assert repr(CalendarValue(1971, 4, 13)) == "CalendarValue(1971, 4, 13)"
