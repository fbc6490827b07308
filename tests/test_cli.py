from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from aoc2020.challenge import Example
from aoc2020.cli import main


def test_run_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"1721\n979\n366\n299\n675\n1456\n")))
    assert main(["run", "1a"]) == 0
    assert capsys.readouterr().out.strip() == "514579"


def test_run_from_file(tmp_path: Path, capsys):
    p = tmp_path / "in.txt"
    p.write_text("abc\n\na\nb\nc\n", encoding="utf-8")
    assert main(["run", "6b", "--input", str(p)]) == 0
    assert capsys.readouterr().out.strip() == "3"


def test_run_from_input_dir_with_stats(input_dir: Path, capsys):
    (input_dir / "day_5.txt").write_text("BFFFBBFRRR\nFFFBBBFRRR\n", encoding="utf-8")
    assert main(["run", "5a", "--from-input-dir", "--stats"]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "567"
    assert "lines=2" in captured.err
    assert "solved in" in captured.err


def test_run_unknown_challenge():
    with pytest.raises(SystemExit) as excinfo:
        main(["run", "42a", "--input", "whatever.txt"])
    assert str(excinfo.value.code).startswith("error: Unknown challenge number")


def test_run_reports_parse_errors(tmp_path: Path):
    p = tmp_path / "in.txt"
    p.write_text("..#\n.#..\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["run", "3a", "--input", str(p)])
    assert "items wide" in str(excinfo.value.code)


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert any(line.startswith("1a") and "Report Repair" in line for line in out)
    assert len(out) >= 12


def test_check_all(capsys):
    assert main(["check"]) == 0
    out = capsys.readouterr().out
    assert "FAIL" not in out
    assert out.strip().endswith("0 failure(s)")


def test_check_selected_verbose(capsys, tmp_path: Path):
    log_file = tmp_path / "aoc.log"
    assert main(["--verbose", "--log-file", str(log_file), "check", "4b"]) == 0
    captured = capsys.readouterr()
    assert captured.out.count("ok    4b") == 2
    assert "examples: n=2" in captured.err
    assert "running challenge" not in captured.err
    assert log_file.exists()


def test_requires_a_command():
    with pytest.raises(SystemExit):
        main([])


def test_check_exits_nonzero_on_failing_example(scratch_registry, capsys):
    @scratch_registry.challenge(parse=str, examples=[Example("abc", "3"), Example("ab", "99")])
    def length(text):
        """Day 97x: Length Check"""
        return len(text)

    assert main(["check", "97x"]) == 1
    out = capsys.readouterr().out
    assert "ok    97x example 1: 3" in out
    assert "FAIL  97x example 2: expected 99, got 2" in out
    assert out.strip().endswith("1 failure(s)")


def test_check_counts_solver_errors_as_failures(scratch_registry, capsys):
    @scratch_registry.challenge(parse=int, examples=[Example("nope", "0")])
    def echo(value):
        """Day 97y: Broken Parse"""
        return value

    assert main(["check", "97y"]) == 1
    assert "ERROR 97y example 1" in capsys.readouterr().out


def test_bad_log_level_is_reported(monkeypatch):
    monkeypatch.setenv("AOC2020_LOG_LEVEL", "chatty")
    with pytest.raises(SystemExit) as excinfo:
        main(["list"])
    assert str(excinfo.value.code) == "error: Unknown log level 'chatty'"


def test_unopenable_log_file_is_reported(tmp_path: Path):
    log_file = tmp_path / "missing" / "aoc.log"
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-file", str(log_file), "list"])
    assert str(excinfo.value.code).startswith("error: Unable to open the log file")
