"""Pure text parsing for dates and meeting rows.

File I/O lives in :mod:`meetcount.infrastructure.csv_input`; this module
only turns already-read strings into domain values.
"""

from __future__ import annotations

import re

from meetcount.domain.dates import (
    UNRECOGNIZED_WEEKDAY,
    DateRange,
    FixedDate,
    Holiday,
    Query,
    RecurringDate,
    Weekday,
    weekday_from_name,
)
from meetcount.domain.errors import InvalidInputError

_NON_DIGITS = re.compile(r"\D+")
_CELL_SEPARATOR = re.compile(r",\s?")


def split_row(line: str) -> list[str]:
    """Split a CSV line on commas, each optionally followed by one space."""
    return _CELL_SEPARATOR.split(line.rstrip("\r\n"))


def parse_date(text: str) -> FixedDate | RecurringDate:
    """Parse ``YYYY-MM-DD`` into a fixed date, or ``MM-DD`` into a recurring one.

    Any run of non-digit characters separates the components, so
    ``2024/01/31`` and ``2024.1.31`` are accepted as well.

    Examples:
        >>> parse_date("2024-01-31")
        FixedDate(year=2024, month=1, day=31)
        >>> parse_date("12-25")
        RecurringDate(month=12, day=25)
    """
    parts = [p for p in _NON_DIGITS.split(text.strip()) if p]
    numbers = [int(p) for p in parts]
    if len(numbers) == 3:
        return FixedDate(*numbers)
    if len(numbers) == 2:
        return RecurringDate(*numbers)
    msg = f"Expected YYYY-MM-DD or MM-DD, got {text!r}"
    raise InvalidInputError(msg)


def parse_fixed_date(text: str) -> FixedDate:
    """Parse a date that must carry a year."""
    date = parse_date(text)
    if not isinstance(date, FixedDate):
        msg = f"Expected a full YYYY-MM-DD date, got {text!r}"
        raise InvalidInputError(msg)
    return date


def parse_weekday(text: str) -> Weekday:
    """Parse a day name, rejecting anything unrecognized."""
    index = weekday_from_name(text)
    if index == UNRECOGNIZED_WEEKDAY:
        msg = f"Unrecognized day of the week: {text.strip()!r}"
        raise InvalidInputError(msg)
    return Weekday(index)


def parse_query(cells: list[str], *, label: str = "") -> Query:
    """Build a :class:`Query` from ``[start, end, weekday-name]`` cells."""
    if len(cells) != 3:
        msg = f"Expected 3 columns (start, end, weekday), got {len(cells)}"
        raise InvalidInputError(msg)
    start_text, end_text, day_text = cells
    date_range = DateRange(parse_fixed_date(start_text), parse_fixed_date(end_text))
    return Query(range=date_range, weekday=parse_weekday(day_text), label=label)


def parse_holidays(cells: list[str]) -> list[Holiday]:
    """Parse every non-empty cell of a holiday row."""
    return [parse_date(cell) for cell in cells if cell.strip()]
