"""Reading meeting and holiday CSV files.

Meetings file: one meeting per line, ``start, end, weekday-name``.
Holidays file: dates separated by commas and/or newlines; ``MM-DD``
entries recur every year. In both files, lines starting with the
comment prefix (``#`` by default) and blank lines are ignored.

Pure parsing lives in :mod:`meetcount.domain.parsing`. This module only
reads files and attaches file/line context to parse errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from meetcount.domain.dates import Holiday, Query
from meetcount.domain.errors import InvalidInputError
from meetcount.domain.parsing import parse_holidays, parse_query, split_row

logger = logging.getLogger(__name__)

DEFAULT_COMMENT_PREFIX = "#"


def read_rows(
    path: Path,
    *,
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line_number, cells)`` for every data line in *path*.

    Raises:
        FileNotFoundError: If *path* does not exist.
        InvalidInputError: If *comment_prefix* is empty.
    """
    if not comment_prefix:
        msg = "comment prefix must not be empty"
        raise InvalidInputError(msg)
    with path.open(encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            if not line.strip() or line.startswith(comment_prefix):
                continue
            yield line_number, split_row(line.strip())


def load_queries(
    path: Path,
    *,
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> list[Query]:
    """Read all meetings from *path*, labelled by their position in the file."""
    queries: list[Query] = []
    for line_number, cells in read_rows(path, comment_prefix=comment_prefix):
        try:
            query = parse_query(cells, label=str(len(queries)))
        except InvalidInputError as exc:
            msg = f"{path}:{line_number}: {exc}"
            raise InvalidInputError(msg) from exc
        queries.append(query)
    logger.debug("Loaded %d meeting(s) from %s", len(queries), path)
    return queries


def load_holidays(
    path: Path,
    *,
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> list[Holiday]:
    """Read all holidays from *path*."""
    holidays: list[Holiday] = []
    for line_number, cells in read_rows(path, comment_prefix=comment_prefix):
        try:
            holidays.extend(parse_holidays(cells))
        except InvalidInputError as exc:
            msg = f"{path}:{line_number}: {exc}"
            raise InvalidInputError(msg) from exc
    logger.debug("Loaded %d holiday(s) from %s", len(holidays), path)
    return holidays
