"""
Period: Year labels and year ranges

Period labels are the display strings of year groups and double as filter
keys, so formatting and parsing are exact inverses:

    format_year_label(1971)   -> "1971"
    format_year_label(0)      -> "1 BCE"
    format_year_label(-1)     -> "2 BCE"
    parse_period_label("135000 BCE-1 BCE") -> YearRange(-134999, 0)
"""

import re
from dataclasses import dataclass
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

ALL_YEARS_LABEL: Final[str] = "All Years"

BCE_SUFFIX: Final[str] = "BCE"

_YEAR_TOKEN: Final[str] = r"[+-]?\d+(?:\s*BCE)?"
_LABEL_RE: Final = re.compile(
    rf"^\s*(?P<start>{_YEAR_TOKEN})\s*(?:-\s*(?P<end>{_YEAR_TOKEN})\s*)?$",
    re.IGNORECASE,
)


class PeriodLabelError(ValueError):
    """Label is not a year, a "N BCE" year or a range of those."""


# =============================================================================
# MODELS
# =============================================================================


@dataclass(frozen=True)
class YearRange:
    """Inclusive range of astronomical years, start <= end."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"YearRange start {self.start} must be <= end {self.end}")

    def contains(self, year: int) -> bool:
        return self.start <= year <= self.end

    @property
    def label(self) -> str:
        return format_range_label(self.start, self.end)


@dataclass(frozen=True)
class PeriodGroup:
    """A run of years-with-data and the number of episodes it holds."""

    start_year: int
    end_year: int
    episode_count: int

    @property
    def year_range(self) -> YearRange:
        return YearRange(self.start_year, self.end_year)

    @property
    def label(self) -> str:
        return format_range_label(self.start_year, self.end_year)


# =============================================================================
# FORMAT / PARSE
# =============================================================================


def format_year_label(year: int) -> str:
    """
    Display label for one astronomical year (no "CE" suffix).

    Examples:
        >>> format_year_label(1971)
        '1971'
        >>> format_year_label(-134999)
        '135000 BCE'
    """
    if year > 0:
        return str(year)
    return f"{-year + 1} {BCE_SUFFIX}"


def format_range_label(start: int, end: int) -> str:
    if start == end:
        return format_year_label(start)
    return f"{format_year_label(start)}-{format_year_label(end)}"


def parse_year_label(text: str) -> int:
    """
    Inverse of format_year_label().

    Raises:
        PeriodLabelError: If text is not a single year label
    """
    token = text.strip()
    if token.upper().endswith(BCE_SUFFIX):
        number = token[: -len(BCE_SUFFIX)].strip()
        if not number.isdigit():
            raise PeriodLabelError(f"Invalid BCE year label: {text!r}")
        return -(int(number) - 1)

    try:
        return int(token)
    except ValueError:
        raise PeriodLabelError(f"Invalid year label: {text!r}") from None


def parse_period_label(label: str) -> YearRange:
    """
    Parse a single-year or range label into an inclusive YearRange.

    A "-" splits a range only when it stands between two year tokens; a
    leading sign on a bare number is part of the number. Endpoints are
    reordered so start <= end.

    Raises:
        PeriodLabelError: If the label cannot be parsed
    """
    match = _LABEL_RE.match(label)
    if not match:
        raise PeriodLabelError(f"Invalid period label: {label!r}")

    start = parse_year_label(match.group("start"))
    end_token = match.group("end")
    end = parse_year_label(end_token) if end_token is not None else start

    return YearRange(min(start, end), max(start, end))
