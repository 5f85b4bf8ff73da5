"""Weekday counting over inclusive date ranges, with holiday exclusion.

``count_in_range`` splits a range into full weeks plus a remainder; every
full week contributes exactly one of each weekday, and a remainder rule
decides whether the leftover days contain the target weekday.

Recurring holidays spanning several years are not re-evaluated from
scratch each year: a fixed month/day moves forward one weekday per year,
or two when a February 29th lies in between.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from meetcount.domain.calendar import (
    days_before_date,
    days_in_year,
    is_date_before,
    is_leap_year,
    weekday_from_date,
)
from meetcount.domain.dates import DateRange, FixedDate, Holiday, RecurringDate
from meetcount.domain.errors import InvalidInputError

logger = logging.getLogger(__name__)

RemainderRule = Callable[[int, int, int], bool]


# ── Remainder rules ──────────────────────────────────────────────────


def legacy_remainder_hit(weekday: int, start_weekday: int, remainder: int) -> bool:
    """Legacy remainder test: ``|weekday - start_weekday| <= remainder``.

    Does not wrap around the end of the week (start on Saturday, target
    Sunday) and counts one day too many when the remainder is zero.
    """
    return abs(weekday - start_weekday) <= remainder


def wrapped_remainder_hit(weekday: int, start_weekday: int, remainder: int) -> bool:
    """Exact test: the target falls within the *remainder* leftover days."""
    return (weekday - start_weekday) % 7 < remainder


REMAINDER_RULES: dict[str, RemainderRule] = {
    "legacy": legacy_remainder_hit,
    "wrapped": wrapped_remainder_hit,
}

DEFAULT_REMAINDER_RULE = "legacy"


def get_remainder_rule(name: str) -> RemainderRule:
    try:
        return REMAINDER_RULES[name]
    except KeyError:
        known = ", ".join(sorted(REMAINDER_RULES))
        msg = f"Unknown remainder rule {name!r} (expected one of: {known})"
        raise InvalidInputError(msg) from None


# ── Range counter ────────────────────────────────────────────────────


def days_between(start: FixedDate, end: FixedDate) -> int:
    """Count the days from *start* to *end*, both included."""
    if not is_date_before(start, end):
        msg = f"start {start} is after end {end}"
        raise InvalidInputError(msg)

    if start.year == end.year:
        if start.month == end.month:
            return end.day - start.day + 1
        return days_before_date(end) - days_before_date(start) + 1

    total = days_in_year(start.year) - days_before_date(start)
    total += days_before_date(end) + 1
    for year in range(start.year + 1, end.year):
        total += days_in_year(year)
    return total


def count_in_range(
    start: FixedDate,
    end: FixedDate,
    weekday: int,
    holidays: Iterable[Holiday] | None = None,
    *,
    remainder_rule: RemainderRule = legacy_remainder_hit,
) -> int:
    """Count occurrences of *weekday* between *start* and *end*, inclusive.

    When *holidays* is given, occurrences that fall on a holiday are not
    counted.
    """
    _check_weekday(weekday)
    range_days = days_between(start, end)

    count = range_days // 7
    if remainder_rule(weekday, weekday_from_date(start), range_days % 7):
        count += 1

    if holidays is not None:
        count -= intersecting_holidays(start, end, weekday, holidays)
    return count


# ── Holiday exclusion ────────────────────────────────────────────────


def intersecting_holidays(
    start: FixedDate,
    end: FixedDate,
    weekday: int,
    holidays: Iterable[Holiday],
) -> int:
    """Count the distinct days in [start, end] that are holidays on *weekday*.

    A day named by more than one entry (``01-01`` and ``2024-01-01``, or the
    same line twice) is excluded once.
    """
    _check_weekday(weekday)
    window = DateRange(start, end)

    excluded: set[FixedDate] = set()
    for holiday in holidays:
        if isinstance(holiday, RecurringDate):
            hits = _recurring_hits(window, weekday, holiday)
        else:
            hits = _fixed_hits(window, weekday, holiday)
        new = hits - excluded
        if new:
            logger.debug("Holiday %s removes %d occurrence(s)", holiday, len(new))
        excluded |= new
    return len(excluded)


def _fixed_hits(window: DateRange, weekday: int, holiday: FixedDate) -> set[FixedDate]:
    if holiday in window and weekday_from_date(holiday) == weekday:
        return {holiday}
    return set()


def _recurring_hits(window: DateRange, weekday: int, holiday: RecurringDate) -> set[FixedDate]:
    first_year, last_year = window.start.year, window.end.year
    hits: set[FixedDate] = set()
    for year in {first_year, last_year}:
        if holiday.occurs_in(year):
            hits |= _fixed_hits(window, weekday, holiday.in_year(year))
    if last_year - first_year < 2:
        return hits

    # Feb 29 drifts with its Feb 28 anchor and shows up one weekday later.
    leap_day = holiday.month == 2 and holiday.day == 29
    anchor = RecurringDate(2, 28) if leap_day else holiday
    shift = 1 if leap_day else 0

    running = weekday_from_date(anchor.in_year(first_year))
    for year in range(first_year + 1, last_year):
        running = (running + weekday_drift(year, anchor.month)) % 7
        if holiday.occurs_in(year) and (running + shift) % 7 == weekday:
            hits.add(holiday.in_year(year))
    return hits


def weekday_drift(year: int, month: int) -> int:
    """Weekday shift of a month/day from ``year - 1`` to *year*.

    A date in January or February crosses the leap day of the previous
    year; any later date crosses the leap day of *year* itself.
    """
    leap = is_leap_year(year - 1) if month <= 2 else is_leap_year(year)
    return 2 if leap else 1


def _check_weekday(weekday: int) -> None:
    if not 0 <= weekday <= 6:
        msg = f"weekday must be in 0..6, got {weekday}"
        raise InvalidInputError(msg)
