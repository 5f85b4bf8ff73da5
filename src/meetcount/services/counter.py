"""CounterService — meeting counts for a whole input file.

Loads the meetings (and, optionally, holidays) named by the settings or
passed explicitly, runs each query through the domain counter, and
reports per-meeting results. Also exposes the calendar primitives for
single-date lookups.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from meetcount.domain.counting import (
    RemainderRule,
    count_in_range,
    days_between,
    get_remainder_rule,
    intersecting_holidays,
)
from meetcount.domain.dates import Holiday, Query
from meetcount.domain.errors import InvalidInputError
from meetcount.domain.parsing import parse_fixed_date
from meetcount.infrastructure.csv_input import load_holidays, load_queries
from meetcount.services.base import BaseService
from meetcount.services.result import ServiceResult
from meetcount.services.telemetry import current_span, trace_span, traced

logger = logging.getLogger(__name__)


class CounterService(BaseService):
    """Counts recurring meetings, minus the ones falling on holidays."""

    @traced
    def count_meetings(
        self,
        meetings_path: Path | None = None,
        holidays_path: Path | None = None,
        *,
        exclude_holidays: bool | None = None,
        remainder_rule: str | None = None,
    ) -> ServiceResult:
        """Count every meeting in *meetings_path*.

        Paths default to ``[input]`` in the config. A missing default
        holidays file only produces a warning; a missing file that was
        asked for explicitly is an error.
        """
        op = "count_meetings"
        cfg = self._settings
        warnings: list[str] = []
        rule_name = remainder_rule or cfg.counting.remainder_rule
        if exclude_holidays is None:
            exclude_holidays = cfg.counting.exclude_holidays

        try:
            rule = get_remainder_rule(rule_name)
        except InvalidInputError as exc:
            return ServiceResult.failure(op, "INVALID_INPUT", str(exc))

        meetings_file = cfg.resolve_path(meetings_path or cfg.input.meetings_file)
        try:
            with trace_span("load_meetings"):
                queries = load_queries(meetings_file, comment_prefix=cfg.input.comment_prefix)
        except FileNotFoundError:
            return ServiceResult.failure(
                op, "FILE_NOT_FOUND", f"Meetings file not found: {meetings_file}"
            )
        except InvalidInputError as exc:
            return ServiceResult.failure(op, "INVALID_INPUT", str(exc), path=str(meetings_file))

        holidays: list[Holiday] | None = None
        holidays_file: Path | None = None
        if exclude_holidays:
            holidays_file = cfg.resolve_path(holidays_path or cfg.input.holidays_file)
            try:
                with trace_span("load_holidays"):
                    holidays = load_holidays(
                        holidays_file, comment_prefix=cfg.input.comment_prefix
                    )
            except FileNotFoundError:
                if holidays_path is not None:
                    return ServiceResult.failure(
                        op, "FILE_NOT_FOUND", f"Holidays file not found: {holidays_file}"
                    )
                warnings.append(f"No holidays file at {holidays_file}; counting all days")
                holidays_file = None
            except InvalidInputError as exc:
                return ServiceResult.failure(
                    op, "INVALID_INPUT", str(exc), path=str(holidays_file)
                )

        with trace_span("count") as span:
            meetings = [self._count_one(q, holidays, rule) for q in queries]
            if span is not None:
                span.annotate("meetings", len(meetings))

        logger.debug("Counted %d meeting(s) with rule %s", len(meetings), rule_name)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "meetings": meetings,
                "total": sum(m["count"] for m in meetings),
                "remainder_rule": rule_name,
                "meetings_file": str(meetings_file),
                "holidays_file": str(holidays_file) if holidays_file else None,
                "holiday_count": len(holidays) if holidays is not None else 0,
            },
            warnings=warnings,
        )

    @staticmethod
    def _count_one(
        query: Query,
        holidays: list[Holiday] | None,
        rule: RemainderRule,
    ) -> dict[str, Any]:
        start, end = query.range.start, query.range.end
        base = count_in_range(start, end, query.weekday, remainder_rule=rule)
        excluded = intersecting_holidays(start, end, query.weekday, holidays) if holidays else 0
        return {
            "index": int(query.label) if query.label.isdigit() else query.label,
            "start": str(start),
            "end": str(end),
            "weekday": query.weekday.label,
            "base_count": base,
            "holidays_excluded": excluded,
            "count": base - excluded,
        }

    @traced
    def weekday(self, date_text: str) -> ServiceResult:
        """Report the weekday of a single ``YYYY-MM-DD`` date."""
        try:
            date = parse_fixed_date(date_text)
        except InvalidInputError as exc:
            return ServiceResult.failure("weekday", "INVALID_INPUT", str(exc))
        day = date.weekday
        return ServiceResult(
            ok=True,
            op="weekday",
            data={"date": str(date), "weekday": int(day), "name": day.label},
        )

    @traced
    def days(self, start_text: str, end_text: str) -> ServiceResult:
        """Report the inclusive number of days between two dates."""
        try:
            start = parse_fixed_date(start_text)
            end = parse_fixed_date(end_text)
            total = days_between(start, end)
        except InvalidInputError as exc:
            return ServiceResult.failure("days", "INVALID_INPUT", str(exc))
        span = current_span()
        if span is not None:
            span.annotate("years", end.year - start.year + 1)
        return ServiceResult(
            ok=True,
            op="days",
            data={"start": str(start), "end": str(end), "days": total},
        )
