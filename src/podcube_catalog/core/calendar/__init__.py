"""
Calendar primitives: proleptic-Gregorian arithmetic, the CalendarValue type
and humanized intervals.
"""

from podcube_catalog.core.calendar.calendar_value import (
    FALLBACK_YMD,
    CalendarParseError,
    CalendarValue,
    parse_date_string,
)
from podcube_catalog.core.calendar.gregorian import (
    MONTH_NAMES,
    MS_PER_DAY,
    UNIX_EPOCH_JDN_MIDNIGHT,
    WEEKDAY_NAMES,
    days_in_month,
    epoch_milliseconds,
    is_leap_year,
    julian_day_number,
    normalize_ymd,
    weekday,
)
from podcube_catalog.core.calendar.interval import (
    IntervalParts,
    format_interval,
    humanize_interval,
    interval_between,
    join_parts,
)

__all__ = [
    # Gregorian: Constants
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "MS_PER_DAY",
    "UNIX_EPOCH_JDN_MIDNIGHT",
    # Gregorian: Functions
    "is_leap_year",
    "days_in_month",
    "normalize_ymd",
    "weekday",
    "julian_day_number",
    "epoch_milliseconds",
    # CalendarValue
    "CalendarValue",
    "CalendarParseError",
    "FALLBACK_YMD",
    "parse_date_string",
    # Interval
    "IntervalParts",
    "interval_between",
    "format_interval",
    "humanize_interval",
    "join_parts",
]
