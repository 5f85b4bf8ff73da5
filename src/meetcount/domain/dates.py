"""Immutable date values, weekday names, and meeting queries.

A holiday is either a :class:`FixedDate` or a :class:`RecurringDate`
(month/day only, repeating every year). Meeting ranges always use fixed
dates. Every value validates itself on construction and raises
:class:`~meetcount.domain.errors.InvalidInputError` when an invariant
does not hold.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias

from meetcount.domain.calendar import days_in_month, is_date_before, weekday_from_date
from meetcount.domain.errors import InvalidInputError

SENTINEL_NO_YEAR = -1
UNRECOGNIZED_WEEKDAY = -1


class Weekday(IntEnum):
    """Day of the week, 0 = Sunday ... 6 = Saturday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()


def weekday_from_name(name: str) -> int:
    """Map an English day name to its index, or -1 if unrecognized.

    Examples:
        >>> weekday_from_name(" Monday ")
        1
        >>> weekday_from_name("mon")
        -1
    """
    key = name.strip().upper()
    if key in Weekday.__members__:
        return int(Weekday[key])
    return UNRECOGNIZED_WEEKDAY


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        msg = f"month must be in 1..12, got {month}"
        raise InvalidInputError(msg)


@dataclass(frozen=True, order=True)
class FixedDate:
    """A calendar date with a known year."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.year < 1:
            msg = f"year must be positive, got {self.year}"
            raise InvalidInputError(msg)
        _check_month(self.month)
        limit = days_in_month(self.year, self.month)
        if not 1 <= self.day <= limit:
            msg = f"day must be in 1..{limit} for {self.year:04d}-{self.month:02d}, got {self.day}"
            raise InvalidInputError(msg)

    @property
    def is_recurring(self) -> bool:
        return False

    @property
    def weekday(self) -> Weekday:
        return Weekday(weekday_from_date(self))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class RecurringDate:
    """A month/day that repeats every year (e.g. ``12-25``).

    February 29th is accepted and only occurs in leap years.
    """

    month: int
    day: int

    def __post_init__(self) -> None:
        _check_month(self.month)
        limit = 29 if self.month == 2 else days_in_month(1, self.month)
        if not 1 <= self.day <= limit:
            msg = f"day must be in 1..{limit} for month {self.month}, got {self.day}"
            raise InvalidInputError(msg)

    @property
    def year(self) -> int:
        return SENTINEL_NO_YEAR

    @property
    def is_recurring(self) -> bool:
        return True

    def occurs_in(self, year: int) -> bool:
        return self.day <= days_in_month(year, self.month)

    def in_year(self, year: int) -> FixedDate:
        """Materialize this holiday in *year*."""
        return FixedDate(year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.month:02d}-{self.day:02d}"


Date: TypeAlias = FixedDate | RecurringDate
Holiday: TypeAlias = FixedDate | RecurringDate


@dataclass(frozen=True)
class DateRange:
    """An inclusive span of fixed dates with ``start <= end``."""

    start: FixedDate
    end: FixedDate

    def __post_init__(self) -> None:
        for value in (self.start, self.end):
            if not isinstance(value, FixedDate):
                msg = f"range bounds need a fixed year, got {value}"
                raise InvalidInputError(msg)
        if not is_date_before(self.start, self.end):
            msg = f"range start {self.start} is after end {self.end}"
            raise InvalidInputError(msg)

    def __contains__(self, date: object) -> bool:
        if not isinstance(date, FixedDate):
            return False
        return is_date_before(self.start, date) and is_date_before(date, self.end)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class Query:
    """A recurring meeting: every *weekday* within *range*."""

    range: DateRange
    weekday: Weekday
    label: str = ""

    def __post_init__(self) -> None:
        if not 0 <= int(self.weekday) <= 6:
            msg = f"weekday must be in 0..6, got {self.weekday}"
            raise InvalidInputError(msg)
        object.__setattr__(self, "weekday", Weekday(self.weekday))
