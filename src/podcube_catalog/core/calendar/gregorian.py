"""
Gregorian: Proleptic Gregorian calendar arithmetic

Pure functions over (year, month, day) triples using astronomical year
numbering: year 0 is 1 BCE, year -1 is 2 BCE, year 1 is 1 CE. Months are
0-indexed (0 = January), days are 1-indexed.

INVARIANTS:
1. Leap-year rules apply uniformly to the signed year (0, -4, -400 are leap)
2. julian_day_number() advances by exactly 1.0 per consecutive calendar day,
   across month, year and era boundaries
3. weekday() agrees with julian_day_number() for every date
4. All arithmetic uses floor division, so negative years behave like
   positive ones shifted by whole 400-year cycles
"""

from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# Days per month in a common year
DAYS_IN_MONTH_COMMON: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# JDN of 1970-01-01 at midnight (the noon-based JDN is 2440588)
UNIX_EPOCH_JDN_MIDNIGHT: Final[float] = 2440588 - 0.5

MS_PER_DAY: Final[int] = 24 * 60 * 60 * 1000


# =============================================================================
# LEAP YEARS AND MONTH LENGTHS
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Gregorian leap-year rule on the astronomical year.

    Args:
        year: Signed astronomical year

    Returns:
        True for years divisible by 4, except centuries not divisible by 400

    Examples:
        >>> is_leap_year(0)
        True
        >>> is_leap_year(-100)
        False
        >>> is_leap_year(2000)
        True
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in a month.

    Args:
        year: Signed astronomical year
        month: Month index 0..11

    Returns:
        28..31

    Raises:
        ValueError: If month is outside 0..11
    """
    if not 0 <= month <= 11:
        raise ValueError(f"month must be in 0..11, got {month}")

    if month == 1 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH_COMMON[month]


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize_ymd(year: int, month: int, day: int) -> tuple[int, int, int]:
    """
    Fold out-of-range month/day values into a valid date.

    Day overflow is resolved before month overflow, so e.g. (2023, 0, 60)
    walks forward through January and February into March. While the day
    loop runs, the month may temporarily leave 0..11; month lengths are
    looked up on the wrapped (year, month) so the cascade stays exact.

    Args:
        year: Signed astronomical year
        month: Month index, any integer
        day: Day of month, any integer

    Returns:
        (year, month, day) with 0 <= month <= 11 and
        1 <= day <= days_in_month(year, month)

    Examples:
        >>> normalize_ymd(2023, 0, 32)
        (2023, 1, 1)
        >>> normalize_ymd(1, 0, 0)
        (0, 11, 31)
    """
    while day <= 0:
        month -= 1
        day += days_in_month(year + month // 12, month % 12)

    while day > days_in_month(year + month // 12, month % 12):
        day -= days_in_month(year + month // 12, month % 12)
        month += 1

    year += month // 12
    month %= 12

    return year, month, day


# =============================================================================
# WEEKDAY AND JULIAN DAY NUMBER
# =============================================================================


def weekday(year: int, month: int, day: int) -> int:
    """
    Day of week by Zeller's congruence.

    January and February count as months 13 and 14 of the previous year.
    K and J use floor semantics, which keeps the formula valid for negative
    years.

    Args:
        year: Signed astronomical year
        month: Month index 0..11
        day: Day of month

    Returns:
        0 = Sunday .. 6 = Saturday

    Examples:
        >>> weekday(2000, 0, 1)
        6
    """
    q = day
    m = month + 1
    y = year

    if m < 3:
        m += 12
        y -= 1

    k = y % 100
    j = y // 100

    h = (q + (13 * (m + 1)) // 5 + k + k // 4 + j // 4 + 5 * j) % 7

    # Zeller yields 0 = Saturday
    return (h + 6) % 7


def julian_day_number(year: int, month: int, day: int) -> float:
    """
    Julian Day Number referenced to midnight.

    Meeus' Gregorian formula on astronomical years, with the floor terms
    written in integer form (floor(365.25 * x) == 1461 * x // 4 and
    floor(30.6001 * x) == 153 * x // 5 for the month range used here).

    Args:
        year: Signed astronomical year
        month: Month index 0..11
        day: Day of month

    Returns:
        JDN at 00:00, i.e. the noon JDN minus 0.5

    Examples:
        >>> julian_day_number(1970, 0, 1)
        2440587.5
    """
    y = year
    m = month + 1

    if m <= 2:
        y -= 1
        m += 12

    a = y // 100
    b = 2 - a + a // 4

    return (1461 * (y + 4716)) // 4 + (153 * (m + 1)) // 5 + day + b - 1524.5


def epoch_milliseconds(year: int, month: int, day: int) -> int:
    """
    Milliseconds since 1970-01-01, derived only from the JDN delta.

    No timezone is involved; the result is always a whole multiple of
    MS_PER_DAY.

    Args:
        year: Signed astronomical year
        month: Month index 0..11
        day: Day of month

    Returns:
        Signed integer milliseconds
    """
    days = julian_day_number(year, month, day) - UNIX_EPOCH_JDN_MIDNIGHT
    return int(days) * MS_PER_DAY
