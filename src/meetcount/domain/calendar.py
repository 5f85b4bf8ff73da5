"""Calendar primitives for the proleptic Gregorian calendar.

Pure functions over plain integers and the date values in
:mod:`meetcount.domain.dates`. Weekdays are indexed 0 = Sunday ... 6 = Saturday.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from meetcount.domain.errors import InvalidInputError

if TYPE_CHECKING:
    from meetcount.domain.dates import Date, FixedDate

MONTH_DAYS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_CODES: tuple[int, ...] = (0, 3, 3, 6, 1, 4, 6, 2, 5, 0, 3, 5)

# Century code for 2000-2099; other centuries follow the 400-year cycle.
BASE_CENTURY_CODE = 6


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Length of *month* (1-12) in *year*."""
    if month == 2 and is_leap_year(year):
        return 29
    return MONTH_DAYS[month - 1]


def century_code(year: int) -> int:
    """Gregorian century code: 1700s -> 4, 1800s -> 2, 1900s -> 0, 2000s -> 6.

    Examples:
        >>> century_code(2024)
        6
        >>> century_code(1999)
        0
    """
    return (3 - (year // 100) % 4) * 2


def days_before_date(date: FixedDate) -> int:
    """Number of days in ``date.year`` that precede *date*.

    January 1st returns 0; December 31st of a leap year returns 365.
    """
    _require_fixed(date)
    count = sum(days_in_month(date.year, m) for m in range(1, date.month))
    return count + date.day - 1


def weekday_from_date(date: FixedDate) -> int:
    """Weekday of *date*, 0 = Sunday ... 6 = Saturday.

    Closed-form "year code + month code + century code + day" rule, with
    one day taken off for January and February of a leap year.
    """
    _require_fixed(date)
    yy = date.year % 100
    year_code = (yy + yy // 4) % 7
    month_code = MONTH_CODES[date.month - 1]
    leap_correction = 1 if is_leap_year(date.year) and date.month <= 2 else 0
    total = year_code + month_code + century_code(date.year) + date.day - leap_correction
    return total % 7


def is_date_before(first: Date, second: Date) -> bool:
    """Return True if *first* is on or before *second*.

    Only defined for fixed dates; a recurring date has no position on
    the timeline until it is materialized in a year.
    """
    _require_fixed(first)
    _require_fixed(second)
    return (first.year, first.month, first.day) <= (second.year, second.month, second.day)


def _require_fixed(date: Date) -> None:
    if date.is_recurring:
        msg = f"{date} recurs yearly and has no fixed year"
        raise InvalidInputError(msg)
