"""Tests for the amida command line."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from amida.__main__ import main


def run(monkeypatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["amida", *argv])
    main()


def test_resolve_identity(monkeypatch, capsys):
    run(monkeypatch, "resolve", "--lines", "3", "--span", "100")
    out = capsys.readouterr().out
    assert "start: 1 2 3" in out
    assert "end:   1 2 3" in out


def test_resolve_with_rungs(monkeypatch, capsys):
    run(monkeypatch, "resolve", "--lines", "3", "--span", "100",
        "--rung", "30,10", "--rung", "60,20")
    out = capsys.readouterr().out
    assert "end:   2 3 1" in out
    assert "(2 rungs)" in out


def test_missed_rung_is_ignored(monkeypatch, capsys):
    run(monkeypatch, "resolve", "--lines", "3", "--span", "100", "--rung", "5,10")
    out = capsys.readouterr().out
    assert "end:   1 2 3" in out
    assert "(0 rungs)" in out


def test_undo(monkeypatch, capsys):
    run(monkeypatch, "resolve", "--lines", "3", "--span", "100",
        "--rung", "30,10", "--rung", "60,20", "--undo", "1")
    out = capsys.readouterr().out
    assert "end:   2 1 3" in out


def test_invalid_line_count_exits(monkeypatch, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(monkeypatch, "resolve", "--lines", "0")
    assert excinfo.value.code == 1
    assert "must be positive" in capsys.readouterr().err


def test_bad_rung_value_is_rejected(monkeypatch):
    with pytest.raises(SystemExit):
        run(monkeypatch, "resolve", "--rung", "30")


def test_export_to_stdout(monkeypatch, capsys):
    run(monkeypatch, "export", "--lines", "2", "--span", "90", "--rung", "45,10")
    data = json.loads(capsys.readouterr().out)
    assert data["verticals"] == [30.0, 60.0]
    assert data["result"] == [2, 1]


def test_export_then_load(monkeypatch, capsys, tmp_path: Path):
    path = tmp_path / "lottery.json"
    run(monkeypatch, "export", "--lines", "3", "--span", "100",
        "--rung", "30,10", "-o", str(path))
    capsys.readouterr()

    run(monkeypatch, "resolve", "--load", str(path), "--rung", "60,20")
    out = capsys.readouterr().out
    assert "end:   2 3 1" in out


def test_draw(monkeypatch, capsys, tmp_path: Path):
    out = tmp_path / "ladder.png"
    run(monkeypatch, "draw", "--lines", "3", "--rung", "200,50", "-o", str(out))
    assert out.exists()
    assert "Ladder saved" in capsys.readouterr().out


def test_no_command_prints_help(monkeypatch, capsys):
    run(monkeypatch)
    assert "usage" in capsys.readouterr().out.lower()
