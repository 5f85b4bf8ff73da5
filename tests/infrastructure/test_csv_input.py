"""Tests for reading meeting and holiday files."""

from pathlib import Path

import pytest

from meetcount.domain.dates import FixedDate, RecurringDate, Weekday
from meetcount.domain.errors import InvalidInputError
from meetcount.infrastructure.csv_input import load_holidays, load_queries, read_rows


class TestReadRows:
    def test_skips_comments_and_blanks(self, tmp_path: Path) -> None:
        path = tmp_path / "in.csv"
        path.write_text("# header\n\na, b\n#skipped, row\nc\n", encoding="utf-8")
        assert list(read_rows(path)) == [(3, ["a", "b"]), (5, ["c"])]

    def test_custom_comment_prefix(self, tmp_path: Path) -> None:
        path = tmp_path / "in.csv"
        path.write_text("; note\n# kept\n", encoding="utf-8")
        assert list(read_rows(path, comment_prefix=";")) == [(2, ["# kept"])]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list(read_rows(tmp_path / "nope.csv"))

    def test_empty_comment_prefix_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "in.csv"
        path.write_text("2024-01-01, 2024-01-31, Monday\n", encoding="utf-8")
        with pytest.raises(InvalidInputError, match="comment prefix"):
            load_queries(path, comment_prefix="")


class TestLoadQueries:
    def test_loads_and_labels(self, tmp_path: Path) -> None:
        path = tmp_path / "input.csv"
        path.write_text(
            "# start, end, weekday\n"
            "2024-01-01, 2024-01-31, Monday\n"
            "2024-02-01,2024-02-29,friday\n",
            encoding="utf-8",
        )
        queries = load_queries(path)
        assert [q.label for q in queries] == ["0", "1"]
        assert queries[0].weekday is Weekday.MONDAY
        assert queries[1].range.end == FixedDate(2024, 2, 29)
        assert queries[1].weekday is Weekday.FRIDAY

    def test_error_names_file_and_line(self, tmp_path: Path) -> None:
        path = tmp_path / "input.csv"
        path.write_text("# header\n2024-01-01, 2024-01-31, Someday\n", encoding="utf-8")
        with pytest.raises(InvalidInputError, match=r"input\.csv:2: Unrecognized"):
            load_queries(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "input.csv"
        path.write_text("# only a comment\n", encoding="utf-8")
        assert load_queries(path) == []


class TestLoadHolidays:
    def test_single_line(self, tmp_path: Path) -> None:
        path = tmp_path / "holidays.csv"
        path.write_text("01-01, 12-25, 2024-01-15\n", encoding="utf-8")
        assert load_holidays(path) == [
            RecurringDate(1, 1),
            RecurringDate(12, 25),
            FixedDate(2024, 1, 15),
        ]

    def test_one_per_line(self, tmp_path: Path) -> None:
        path = tmp_path / "holidays.csv"
        path.write_text("# US\n07-04\n11-28\n", encoding="utf-8")
        assert load_holidays(path) == [RecurringDate(7, 4), RecurringDate(11, 28)]

    def test_invalid_holiday(self, tmp_path: Path) -> None:
        path = tmp_path / "holidays.csv"
        path.write_text("02-30\n", encoding="utf-8")
        with pytest.raises(InvalidInputError, match=r"holidays\.csv:1"):
            load_holidays(path)
