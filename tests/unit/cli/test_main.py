"""
Tests for simplefind.cli.main module.

Tests are organized by CLI command, matching the structure of main.py:
- TestCliGroup: cli group, version, help
- TestFindCmd: find command
- TestReadInputs: file acquisition helper
- TestMainFunction: main() entry point
"""

import importlib
import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from simplefind import __version__
from simplefind.cli import cli, main
from simplefind.cli.main import EXIT_ERROR, EXIT_MATCH, EXIT_NO_MATCH, read_inputs

pytestmark = [pytest.mark.unit, pytest.mark.cli]


# ---------------------------------------------------------------------------
# cli group
# ---------------------------------------------------------------------------


class TestCliGroup:
    """Tests for the top-level cli group."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_help(self):
        result = self.runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "in-memory multi-file regular expression search" in result.output

    def test_version(self):
        result = self.runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "simplefind" in result.output
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# find command
# ---------------------------------------------------------------------------


class TestFindCmd:
    """Tests for the find command."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_help(self):
        result = self.runner.invoke(cli, ["find", "--help"])
        assert result.exit_code == 0
        assert "Search FILES for PATTERN" in result.output

    def test_text_output(self, disk_files: Path):
        main_py = str(disk_files / "main.py")
        result = self.runner.invoke(cli, ["find", r"def \w+", main_py])
        assert result.exit_code == EXIT_MATCH
        assert result.output.splitlines() == [f"{main_py}:1:1:def main():"]

    def test_files_reported_in_argument_order(self, disk_files: Path):
        main_py = str(disk_files / "main.py")
        notes = str(disk_files / "notes.txt")
        result = self.runner.invoke(cli, ["find", "-i", "hello", notes, main_py])
        assert result.exit_code == EXIT_MATCH
        assert result.output.splitlines() == [
            f"{notes}:1:1:hello again",
            f"{notes}:2:1:HELLO loud",
            f"{main_py}:2:12:    print('Hello World')",
        ]

    def test_case_sensitive_by_default(self, disk_files: Path):
        notes = str(disk_files / "notes.txt")
        result = self.runner.invoke(cli, ["find", "HELLO", notes])
        assert result.exit_code == EXIT_MATCH
        assert result.output.splitlines() == [f"{notes}:2:1:HELLO loud"]

    def test_json_output(self, disk_files: Path):
        notes = str(disk_files / "notes.txt")
        result = self.runner.invoke(cli, ["find", "--format", "json", "again", notes])
        assert result.exit_code == EXIT_MATCH
        data = json.loads(result.output)
        assert data["matches"] == [
            {"path": notes, "line": 1, "column": 7, "line_text": "hello again"}
        ]
        assert data["stats"]["files_scanned"] == 1
        assert data["stats"]["items"] == 1

    def test_no_match_exit_code(self, disk_files: Path):
        result = self.runner.invoke(cli, ["find", "absent", str(disk_files / "main.py")])
        assert result.exit_code == EXIT_NO_MATCH
        assert result.output == ""

    def test_invalid_pattern(self, disk_files: Path):
        result = self.runner.invoke(cli, ["find", "(", str(disk_files / "main.py")])
        assert result.exit_code == EXIT_ERROR
        assert "Error: Invalid regex pattern '('" in result.output

    def test_missing_file(self, disk_files: Path):
        missing = str(disk_files / "missing.txt")
        result = self.runner.invoke(cli, ["find", "hello", str(disk_files / "notes.txt"), missing])
        assert result.exit_code == EXIT_ERROR
        assert "hello again" in result.output
        assert f"File error: {missing}" in result.output

    def test_stdin(self):
        result = self.runner.invoke(cli, ["find", "foo", "-"], input="a foo\nbar\n")
        assert result.exit_code == EXIT_MATCH
        assert result.output.splitlines() == ["-:1:3:a foo"]

    def test_stdin_undecodable_bytes_are_replaced(self):
        result = self.runner.invoke(cli, ["find", "ok", "-"], input=b"ok \xff\n")
        assert result.exit_code == EXIT_MATCH
        assert result.output.splitlines() == ["-:1:1:ok \ufffd"]

    def test_stdin_given_twice_counts_as_two_files(self):
        result = self.runner.invoke(cli, ["find", "--stats", "a", "-", "-"], input="a\n")
        assert result.exit_code == EXIT_MATCH
        assert "# files_scanned=2 files_matched=1 items=1" in result.output

    def test_stats(self, disk_files: Path):
        result = self.runner.invoke(cli, ["find", "--stats", "o", str(disk_files / "notes.txt")])
        assert result.exit_code == EXIT_MATCH
        assert "# files_scanned=1 files_matched=1 items=2" in result.output

    def test_parallel(self, disk_files: Path):
        main_py = str(disk_files / "main.py")
        notes = str(disk_files / "notes.txt")
        sequential = self.runner.invoke(cli, ["find", "-i", "l", notes, main_py])
        parallel = self.runner.invoke(
            cli, ["find", "-i", "--parallel", "--workers", "2", "l", notes, main_py]
        )
        assert parallel.exit_code == EXIT_MATCH
        assert parallel.output == sequential.output

    def test_negative_workers(self, disk_files: Path):
        result = self.runner.invoke(
            cli, ["find", "--workers", "-1", "x", str(disk_files / "main.py")]
        )
        assert result.exit_code == EXIT_ERROR
        assert "Worker count must be non-negative" in result.output

    def test_requires_files(self):
        result = self.runner.invoke(cli, ["find", "x"])
        assert result.exit_code == 2

    def test_log_file(self, disk_files: Path, tmp_path: Path):
        log_file = tmp_path / "logs" / "run.log"
        result = self.runner.invoke(
            cli,
            [
                "find",
                "--log-level",
                "INFO",
                "--log-format",
                "json",
                "--log-file",
                str(log_file),
                "hello",
                str(disk_files / "notes.txt"),
            ],
        )
        assert result.exit_code == EXIT_MATCH
        entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert any(e.get("operation") == "search_complete" for e in entries)

    def test_debug_flag_logs_search_start(self, disk_files: Path):
        result = self.runner.invoke(cli, ["find", "--debug", "hello", str(disk_files / "notes.txt")])
        assert result.exit_code == EXIT_MATCH
        assert "Starting search for pattern: 'hello'" in result.output


# ---------------------------------------------------------------------------
# read_inputs
# ---------------------------------------------------------------------------


class TestReadInputs:
    def test_reads_in_order(self, disk_files: Path):
        names = (str(disk_files / "notes.txt"), str(disk_files / "main.py"))
        files, failures = read_inputs(names)
        assert [f.path for f in files] == list(names)
        assert files[0].content == "hello again\nHELLO loud\n"
        assert failures == []

    def test_undecodable_bytes_are_replaced(self, tmp_path: Path):
        (tmp_path / "bin.dat").write_bytes(b"ok \xff ok")
        files, failures = read_inputs((str(tmp_path / "bin.dat"),))
        assert files[0].content == "ok \ufffd ok"
        assert failures == []

    def test_failures_are_collected(self, tmp_path: Path):
        files, failures = read_inputs((str(tmp_path / "nope.txt"), str(tmp_path)))
        assert files == []
        assert [name for name, _ in failures] == [str(tmp_path / "nope.txt"), str(tmp_path)]


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------


class TestMainFunction:
    def test_main_invokes_cli(self):
        # the package re-exports main(), which shadows the submodule attribute
        cli_module = importlib.import_module("simplefind.cli.main")
        with patch.object(cli_module, "cli") as mock_cli:
            main()
        mock_cli.assert_called_once_with(prog_name="simplefind")
