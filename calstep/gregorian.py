"""Proleptic Gregorian calendar arithmetic.

Pure functions over the ``year``/``month``/``day``/weekday decomposition of a
date or datetime. Weekdays are numbered from Sunday (0) to Saturday (6).
"""

import math
from datetime import date, timedelta
from types import MappingProxyType
from typing import Literal, TypeAlias

from calstep.errors import UnknownMonth, UnknownWeekday

LEAP_YEAR_MONTH_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
COMMON_YEAR_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

Day: TypeAlias = Literal[
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"
]

Month: TypeAlias = Literal[
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]

# Mapping from day names to Sunday-based weekday integers
DAYS: MappingProxyType[str, int] = MappingProxyType(
    {
        "sunday": 0,
        "monday": 1,
        "tuesday": 2,
        "wednesday": 3,
        "thursday": 4,
        "friday": 5,
        "saturday": 6,
    }
)

MONTHS: MappingProxyType[str, int] = MappingProxyType(
    {
        "january": 1,
        "february": 2,
        "march": 3,
        "april": 4,
        "may": 5,
        "june": 6,
        "july": 7,
        "august": 8,
        "september": 9,
        "october": 10,
        "november": 11,
        "december": 12,
    }
)

# Safe day-of-month for stepping: every month has a 27th
_SAFE_DAY = 27


def is_leap(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _month_table(year: int) -> tuple[int, ...]:
    return LEAP_YEAR_MONTH_DAYS if is_leap(year) else COMMON_YEAR_MONTH_DAYS


def days_in_month(time: date) -> int:
    """Number of days in the month ``time`` falls in."""
    return _month_table(time.year)[time.month - 1]


def days_in_year(time: date) -> int:
    """Number of days in the year ``time`` falls in."""
    return 366 if is_leap(time.year) else 365


def days_before_month(year: int, month: int) -> int:
    """Days from January 1st of ``year`` up to the 1st of ``month``."""
    return sum(_month_table(year)[: month - 1])


def wday(time: date) -> int:
    """Weekday of ``time`` with Sunday as 0 and Saturday as 6."""
    return time.isoweekday() % 7


def symbol_to_month(name: Month | str) -> int:
    """
    Convert a month name to its number.

    Args:
        name: Month name, case-insensitive ("january" .. "december")

    Returns:
        Month number in 1..12

    Raises:
        UnknownMonth: If ``name`` is not a month
    """
    month = MONTHS.get(name.lower()) if isinstance(name, str) else None
    if month is None:
        raise UnknownMonth(name, MONTHS.keys())
    return month


def symbol_to_day(name: Day | str) -> int:
    """
    Convert a weekday name to its Sunday-based number.

    Args:
        name: Day name, case-insensitive ("sunday" .. "saturday")

    Returns:
        Weekday number in 0..6 (sunday=0)

    Raises:
        UnknownWeekday: If ``name`` is not a day of the week
    """
    day = DAYS.get(name.lower()) if isinstance(name, str) else None
    if day is None:
        raise UnknownWeekday(name, DAYS.keys())
    return day


def which_occurrence_in_month(time: date, weekday: int) -> tuple[int, int]:
    """
    Locate ``time`` among the occurrences of its weekday in its month.

    Args:
        time: Date or datetime to inspect
        weekday: Weekday the caller is matching on. Callers pass
            ``wday(time)``; the ordinal is always computed from the weekday
            ``time`` itself falls on.

    Returns:
        ``(index, count)``: ``time`` is the index-th of ``count`` occurrences
        of its weekday in the month, e.g. ``(2, 4)`` for the 2nd of 4
        Tuesdays.

    Example:
        >>> which_occurrence_in_month(date(2025, 1, 14), 2)
        (2, 4)
    """
    first_weekday = wday(date(time.year, time.month, 1))
    first_occurrence = ((7 - first_weekday) + wday(time)) % 7 + 1
    count = math.ceil((days_in_month(time) - first_occurrence + 1) / 7)
    index = (time.day - first_occurrence) // 7 + 1
    return index, count


def days_in_n_years(time: date, year_distance: int) -> int:
    """
    Number of days spanned by stepping ``year_distance`` years from ``time``.

    Each forward step counts the length of the year the marker is in and
    moves the marker by that many days. Backward steps count the length of
    the year before the marker's, so stepping forward and then back by the
    same distance returns to the start. The result is negative when
    ``year_distance`` is.
    """
    total = 0
    mark = time
    if year_distance >= 0:
        for _ in range(year_distance):
            diy = days_in_year(mark)
            total += diy
            mark += timedelta(days=diy)
    else:
        for _ in range(-year_distance):
            diy = 366 if is_leap(mark.year - 1) else 365
            total -= diy
            mark -= timedelta(days=diy)
    return total


def days_in_n_months(time: date, month_distance: int) -> int:
    """
    Day delta that moves ``time`` by ``month_distance`` months.

    The day-of-month is preserved when the target month has it, and clamped
    to the target month's last day otherwise (January 31st plus one month is
    the last day of February). Negative distances step backward.

    Example:
        >>> days_in_n_months(date(2025, 1, 31), 1)
        28
    """
    desired_day = time.day

    # Work from a day every month has, so stepping never spills over
    mark = time
    if desired_day > _SAFE_DAY:
        mark -= timedelta(days=desired_day - _SAFE_DAY)

    total = 0
    if month_distance >= 0:
        for _ in range(month_distance):
            dim = days_in_month(mark)
            total += dim
            mark += timedelta(days=dim)
    else:
        for _ in range(-month_distance):
            dim = days_in_month(mark - timedelta(days=mark.day))
            total -= dim
            mark -= timedelta(days=dim)

    target_days = days_in_month(mark)
    if desired_day > target_days:
        total -= desired_day - target_days
    return total
