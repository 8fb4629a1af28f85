"""
Interval: Humanized distance between two calendar dates

Decomposes the gap between two CalendarValues into whole years, months and
days, then renders it as "N years, M months, and D days ago/from now".

Borrowing rules:
- A negative day count borrows one month; the borrowed month is the month
  before the later date's month, in the later date's year
- A month count still negative after that borrows one year
"""

from dataclasses import dataclass
from typing import Optional

from podcube_catalog.core.calendar.calendar_value import CalendarValue
from podcube_catalog.core.calendar.gregorian import days_in_month


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class IntervalParts:
    """Calendar distance between two dates."""

    years: int
    months: int
    days: int

    # True when the reference date lies before the comparison date
    is_past: bool

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0


# =============================================================================
# DECOMPOSITION
# =============================================================================


def interval_between(reference: CalendarValue, now: CalendarValue) -> IntervalParts:
    """
    Split the distance from reference to now into (years, months, days).

    Args:
        reference: Date being described (e.g. an episode date)
        now: Date it is measured against (e.g. today)

    Returns:
        IntervalParts with non-negative components
    """
    is_past = reference < now
    start, end = (reference, now) if is_past else (now, reference)

    years = end.year - start.year
    if (start.month, start.day) > (end.month, end.day):
        years -= 1

    # Anniversary of start in the last full year; Feb 29 folds into Mar 1
    anchor = start.with_year(start.year + years)

    months = end.month - anchor.month
    if months < 0:
        months += 12

    days = end.day - anchor.day
    if days < 0:
        months -= 1
        borrowed_month = 11 if end.month == 0 else end.month - 1
        days += days_in_month(end.year, borrowed_month)
        # Jan 31 -> Mar 1: the borrowed month is shorter than anchor.day
        days = max(days, 0)

    if months < 0:
        years -= 1
        months += 12

    return IntervalParts(years=years, months=months, days=days, is_past=is_past)


# =============================================================================
# RENDERING
# =============================================================================


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def join_parts(parts: list[str]) -> str:
    """
    English list join.

    Examples:
        >>> join_parts(["1 year"])
        '1 year'
        >>> join_parts(["1 year", "2 days"])
        '1 year and 2 days'
        >>> join_parts(["1 year", "2 months", "3 days"])
        '1 year, 2 months, and 3 days'
    """
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return f"{parts[0]} and {parts[1]}"
    return f"{', '.join(parts[:-1])}, and {parts[-1]}"


def format_interval(interval: IntervalParts) -> str:
    parts = []
    if interval.years > 0:
        parts.append(_plural(interval.years, "year"))
    if interval.months > 0:
        parts.append(_plural(interval.months, "month"))
    if interval.days > 0:
        parts.append(_plural(interval.days, "day"))

    if not parts:
        return "today"

    return f"{join_parts(parts)} {'ago' if interval.is_past else 'from now'}"


def humanize_interval(reference: CalendarValue, now: Optional[CalendarValue] = None) -> str:
    """
    Render the distance from reference to now.

    Args:
        reference: Date being described
        now: Comparison date (default: today)

    Returns:
        "today", "3 days from now", "1 year, 2 months, and 3 days ago", ...
    """
    if now is None:
        now = CalendarValue.today()
    return format_interval(interval_between(reference, now))
