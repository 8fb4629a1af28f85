"""
CalendarValue: Immutable proleptic-Gregorian date

Astronomical year numbering (0 = 1 BCE, -1 = 2 BCE), 0-indexed months and
1-indexed days. Values are normalized on construction and never change
afterwards.

Accepted string forms, tried in order:
- Extended ISO: "-134999-07-21", "001971-05-13"
- US slash with optional era: "5/13/1971", "1/1/500 BCE"
- Long form with optional era: "May 13, 1971"

Anything else falls back to year 0, January 1. try_parse() exposes the
strict variant that returns None instead.
"""

import datetime as _dt
import re
from functools import total_ordering
from typing import Any, Final, Optional

from podcube_catalog.core.calendar.gregorian import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    days_in_month,
    epoch_milliseconds,
    is_leap_year,
    julian_day_number,
    normalize_ymd,
    weekday,
)

# =============================================================================
# PARSING
# =============================================================================

FALLBACK_YMD: Final[tuple[int, int, int]] = (0, 0, 1)

# Minimum number of year digits written by to_iso_string()
ISO_YEAR_DIGITS: Final[int] = 6

_ISO_RE: Final = re.compile(r"^([+-]?\d+)-(\d{2})-(\d{2})$")
_US_RE: Final = re.compile(
    r"^(\d{1,2})/(\d{1,2})/(\d+)(?:\s*(BCE|BC|CE|AD))?$", re.IGNORECASE
)
_LONG_RE: Final = re.compile(
    r"^(" + "|".join(MONTH_NAMES) + r")\s+(\d{1,2}),\s+(\d+)(?:\s*(BCE|BC|CE|AD))?$",
    re.IGNORECASE,
)
_MONTH_INDEX: Final[dict[str, int]] = {name.lower(): i for i, name in enumerate(MONTH_NAMES)}


class CalendarParseError(ValueError):
    """Raised by CalendarValue.parse() when no supported form matches."""


def _apply_era(display_year: int, era: Optional[str]) -> int:
    # 1 BCE -> 0, 2 BCE -> -1
    if era and era.upper() in ("BCE", "BC"):
        return -display_year + 1
    return display_year


def parse_date_string(text: str) -> Optional[tuple[int, int, int]]:
    """
    Parse a date string into a raw (year, month, day) triple.

    The triple is not normalized yet: "2023-02-30" yields (2023, 1, 30).

    Args:
        text: Date string (surrounding whitespace ignored)

    Returns:
        (year, month, day) or None if no form matches
    """
    text = text.strip()

    match = _ISO_RE.match(text)
    if match:
        return int(match.group(1)), int(match.group(2)) - 1, int(match.group(3))

    match = _US_RE.match(text)
    if match:
        mm, dd, yyyy, era = match.groups()
        return _apply_era(int(yyyy), era), int(mm) - 1, int(dd)

    match = _LONG_RE.match(text)
    if match:
        month_name, dd, yyyy, era = match.groups()
        return _apply_era(int(yyyy), era), _MONTH_INDEX[month_name.lower()], int(dd)

    return None


# =============================================================================
# CALENDAR VALUE
# =============================================================================


@total_ordering
class CalendarValue:
    """
    Proleptic-Gregorian calendar date with contiguous year numbering.

    CalendarValue(year, month=0, day=0) folds overflow in both directions,
    so CalendarValue(2000) is 1999-12-31 (day 0 of January).
    CalendarValue("May 13, 1971") parses a string.

    Ordering, equality and hashing follow (year, month, day).
    """

    __slots__ = ("_year", "_month", "_day", "_weekday")

    def __init__(self, year: Any = 0, month: int = 0, day: int = 0):
        if isinstance(year, str):
            year, month, day = parse_date_string(year) or FALLBACK_YMD

        for name, value in (("year", year), ("month", month), ("day", day)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int, got {type(value).__name__}")

        y, m, d = normalize_ymd(year, month, day)
        object.__setattr__(self, "_year", y)
        object.__setattr__(self, "_month", m)
        object.__setattr__(self, "_day", d)
        object.__setattr__(self, "_weekday", weekday(y, m, d))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Factories ---

    @classmethod
    def parse(cls, text: str) -> "CalendarValue":
        """
        Strict parse.

        Raises:
            CalendarParseError: If text matches no supported form
        """
        parsed = parse_date_string(text)
        if parsed is None:
            raise CalendarParseError(f"Unrecognized date string: {text!r}")
        return cls(*parsed)

    @classmethod
    def try_parse(cls, text: str) -> Optional["CalendarValue"]:
        """Strict parse returning None for unrecognized input."""
        parsed = parse_date_string(text)
        if parsed is None:
            return None
        return cls(*parsed)

    @classmethod
    def from_iso(cls, text: str) -> "CalendarValue":
        return cls(text)

    @classmethod
    def from_date(cls, value: _dt.date) -> "CalendarValue":
        return cls(value.year, value.month - 1, value.day)

    @classmethod
    def from_any(cls, value: Any) -> "CalendarValue":
        """Coerce a CalendarValue, datetime.date or string."""
        if isinstance(value, CalendarValue):
            return value
        if isinstance(value, _dt.date):
            return cls.from_date(value)
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"Cannot build CalendarValue from {type(value).__name__}")

    @classmethod
    def today(cls) -> "CalendarValue":
        return cls.from_date(_dt.date.today())

    # --- Accessors ---

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def weekday(self) -> int:
        """0 = Sunday .. 6 = Saturday."""
        return self._weekday

    @property
    def is_bce(self) -> bool:
        return self._year <= 0

    @property
    def display_year(self) -> int:
        """Year as written with an era: 1971 -> 1971, 0 -> 1 (BCE), -1 -> 2 (BCE)."""
        if self._year > 0:
            return self._year
        return -self._year + 1

    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def days_in_month(self) -> int:
        return days_in_month(self._year, self._month)

    def add_days(self, days: int) -> "CalendarValue":
        return CalendarValue(self._year, self._month, self._day + days)

    def with_year(self, year: int) -> "CalendarValue":
        return CalendarValue(year, self._month, self._day)

    # --- Time axis ---

    def julian_day_number(self) -> float:
        """JDN at midnight (standard noon JDN minus 0.5)."""
        return julian_day_number(self._year, self._month, self._day)

    def get_time(self) -> int:
        """Milliseconds since 1970-01-01, timezone independent."""
        return epoch_milliseconds(self._year, self._month, self._day)

    # --- Formatting ---

    def to_iso_string(self) -> str:
        """
        Extended ISO form.

        Returns:
            Sign-aware, zero-padded year of at least six digits,
            e.g. "-134999-07-21", "-000005-01-01", "001971-05-13"
        """
        sign = "-" if self._year < 0 else ""
        return (
            f"{sign}{abs(self._year):0{ISO_YEAR_DIGITS}d}"
            f"-{self._month + 1:02d}-{self._day:02d}"
        )

    def to_locale_string(
        self,
        locale: str = "en-US",
        *,
        weekday: Optional[str] = None,
        month: Optional[str] = None,
        day: Optional[str] = None,
        year: Optional[str] = None,
        era: Optional[str] = None,
    ) -> str:
        """
        Intl-style formatting with English names.

        Args:
            locale: Accepted for call compatibility; English output only
            weekday: "long"
            month: "long" | "2-digit" | "numeric"
            day: "2-digit" | "numeric"
            year: "2-digit" | "numeric"
            era: "short" adds " CE" to positive years

        Returns:
            e.g. "05/13/1971", "Thursday, May 13, 1971", "1/1/500 BCE"
        """
        if month == "long":
            month_str = MONTH_NAMES[self._month]
        elif month == "2-digit":
            month_str = f"{self._month + 1:02d}"
        elif month == "numeric":
            month_str = str(self._month + 1)
        else:
            month_str = ""

        if day == "2-digit":
            day_str = f"{self._day:02d}"
        elif day == "numeric":
            day_str = str(self._day)
        else:
            day_str = ""

        if year == "2-digit":
            year_str = f"{self.display_year % 100:02d}"
        elif year == "numeric":
            year_str = str(self.display_year)
        else:
            year_str = ""

        if year_str and self.is_bce:
            year_str += " BCE"
        elif year_str and era == "short":
            year_str += " CE"

        if month == "long":
            if day_str and year_str:
                day_str += ","
            date_str = " ".join(p for p in (month_str, day_str, year_str) if p)
        else:
            date_str = "/".join(p for p in (month_str, day_str, year_str) if p)

        if weekday == "long":
            weekday_str = WEEKDAY_NAMES[self._weekday]
            return f"{weekday_str}, {date_str}" if date_str else weekday_str
        return date_str

    def to_json(self) -> str:
        return self.to_iso_string()

    # --- Dunder ---

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarValue):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "CalendarValue") -> bool:
        if not isinstance(other, CalendarValue):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self):
        return (CalendarValue, self._key())

    def __repr__(self) -> str:
        return f"CalendarValue({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_iso_string()
