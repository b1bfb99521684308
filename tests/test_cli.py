"""Tests for the memo command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from memo.cli import cli

SAMPLE = "1: 2001-01-01 01:01:01 one\n2: 2002-02-02 02:02:02 two\n"


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "data"
    monkeypatch.setenv("MEMO_DATA_DIR", str(path))
    monkeypatch.setenv("MEMO_CONFIG", str(tmp_path / "absent.toml"))
    for key in ["MEMO_FILE", "MEMO_LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)
    return path


@pytest.fixture
def data_file(data_dir: Path) -> Path:
    data_dir.mkdir(parents=True)
    path = data_dir / "memo.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestInit:
    def test_creates_file(self, runner: CliRunner, data_dir: Path):
        result = runner.invoke(cli, ["--init"])
        assert result.exit_code == 0
        assert (data_dir / "memo.txt").read_text(encoding="utf-8") == ""
        assert "Initialized data file" in result.output

    def test_existing_file(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["-i"])
        assert result.exit_code == 1
        assert "Initialization error" in result.output
        assert "already exists" in result.output
        assert data_file.read_text(encoding="utf-8") == SAMPLE


class TestLoad:
    def test_missing_file_is_fatal(self, runner: CliRunner, data_dir: Path):
        result = runner.invoke(cli, ["hello"])
        assert result.exit_code == 1
        assert "Could not load data file" in result.output
        assert "memo --init" in result.output
        assert not (data_dir / "memo.txt").exists()

    def test_malformed_file_is_fatal(self, runner: CliRunner, data_file: Path):
        data_file.write_text("a: 2001-01-01 01:01:01 one\n", encoding="utf-8")
        result = runner.invoke(cli, ["hello"])
        assert result.exit_code == 1
        assert "Invalid id" in result.output
        assert data_file.read_text(encoding="utf-8") == "a: 2001-01-01 01:01:01 one\n"


class TestList:
    def test_default_lists(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "1: 2001-01-01 01:01:01 one" in result.output
        assert "2: 2002-02-02 02:02:02 two" in result.output
        assert result.output.index("one") < result.output.index("two")

    def test_grouped(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["-l", "-g"])
        assert result.exit_code == 0
        assert "2001-01-01\n  1: 01:01:01 one" in result.output

    def test_empty(self, runner: CliRunner, data_dir: Path):
        runner.invoke(cli, ["--init"])
        result = runner.invoke(cli, ["--list"])
        assert result.exit_code == 0


class TestAdd:
    def test_adds_and_persists(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["buy", "oat", "milk"])
        assert result.exit_code == 0
        lines = data_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 3
        assert lines[2].startswith("3: ")
        assert lines[2].endswith(" buy oat milk")

    def test_add_does_not_list_without_flag(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["three"])
        assert "2002-02-02" not in result.output

    def test_add_and_list(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["three", "-l"])
        assert result.exit_code == 0
        assert "two" in result.output
        assert "three" in result.output


    def test_blank_message_reported(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["  "])
        assert result.exit_code == 1
        assert "Could not add memo: Memo text is empty" in result.output
        assert data_file.read_text(encoding="utf-8") == SAMPLE


class TestRemove:
    def test_remove(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["-r", "1"])
        assert result.exit_code == 0
        assert data_file.read_text(encoding="utf-8") == "2: 2002-02-02 02:02:02 two\n"

    def test_remove_several(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["-r", "1", "-r", "2"])
        assert result.exit_code == 0
        assert data_file.read_text(encoding="utf-8") == ""

    def test_partial_failure_leaves_file(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["-r", "1", "-r", "9"])
        assert result.exit_code == 1
        assert "Could not remove memo: Id '9' not found" in result.output
        assert data_file.read_text(encoding="utf-8") == SAMPLE
        # the listing reflects the file, not the half-applied batch
        assert "1: 2001-01-01 01:01:01 one" in result.output

    def test_zero_id_rejected(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["-r", "0"])
        assert result.exit_code == 2
        assert data_file.read_text(encoding="utf-8") == SAMPLE

    def test_add_survives_failed_remove(self, runner: CliRunner, data_file: Path):
        result = runner.invoke(cli, ["three", "-r", "9"])
        assert result.exit_code == 1
        assert data_file.read_text(encoding="utf-8").count("\n") == 3


def test_bad_config(runner: CliRunner, tmp_path: Path, monkeypatch):
    bad = tmp_path / "memo.toml"
    bad.write_text("[memo\n")
    monkeypatch.setenv("MEMO_CONFIG", str(bad))
    result = runner.invoke(cli, [])
    assert result.exit_code == 1
    assert "Could not read config" in result.output
