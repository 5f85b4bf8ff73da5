"""Tests for the count CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from meetcount.cli import cli


@pytest.mark.usefixtures("workdir")
class TestCountCommand:
    def test_default_files(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["count"])
        assert result.exit_code == 0
        assert "Meeting 0: 3" in result.output
        assert "Meeting 1: 155" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "count"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "count_meetings"
        assert [m["count"] for m in data["data"]["meetings"]] == [3, 155]

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "count"])
        assert result.exit_code == 0
        assert result.output.split() == ["3", "155"]

    def test_no_holidays(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "count", "--no-holidays"])
        assert result.exit_code == 0
        assert result.output.split() == ["5", "157"]

    def test_explicit_paths(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "m.csv").write_text("2024-12-01, 2024-12-31, Wednesday\n")
        (workdir / "h.csv").write_text("12-25\n")
        args = ["-q", "count", "m.csv", "--holidays", "h.csv", "--remainder-rule", "wrapped"]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        # Wednesdays in December 2024: 4, 11, 18, 25; the 25th is a holiday.
        assert result.output.split() == ["3"]

    def test_remainder_rule_option(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "m.csv").write_text("2024-01-06, 2024-01-07, Sunday\n")
        legacy = cli_runner.invoke(cli, ["-q", "count", "m.csv"])
        wrapped = cli_runner.invoke(cli, ["-q", "count", "m.csv", "--remainder-rule", "wrapped"])
        assert legacy.output.split() == ["0"]
        assert wrapped.output.split() == ["1"]

    def test_remainder_rule_from_config(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "m.csv").write_text("2024-01-06, 2024-01-07, Sunday\n")
        cfg = workdir / "alt.toml"
        cfg.write_text('[counting]\nremainder_rule = "wrapped"\n')
        result = cli_runner.invoke(cli, ["-c", str(cfg), "-q", "count", "m.csv"])
        assert result.exit_code == 0
        assert result.output.split() == ["1"]

    def test_missing_meetings_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["count", "nope.csv"])
        assert result.exit_code == 1
        assert "Meetings file not found" in result.output

    def test_missing_explicit_holidays(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["count", "--holidays", "nope.csv"])
        assert result.exit_code == 1
        assert "Holidays file not found" in result.output

    def test_missing_default_holidays_warns(
        self, cli_runner: CliRunner, workdir: Path
    ) -> None:
        (workdir / "holidays.csv").unlink()
        result = cli_runner.invoke(cli, ["count"])
        assert result.exit_code == 0
        assert "WARNING: No holidays file" in result.output
        assert "Meeting 0: 5" in result.output

    def test_invalid_row(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "input.csv").write_text("2024-01-01, 2024-01-31, Someday\n")
        result = cli_runner.invoke(cli, ["count"])
        assert result.exit_code == 1
        assert "Unrecognized" in result.output
        assert "Someday" in result.output

    def test_verbose_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "count"])
        assert result.exit_code == 0
        assert "Holidays" in result.output
        assert "meta" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["count", "--examples"])
        assert result.exit_code == 0
        assert "meetcount count meetings.csv" in result.output
