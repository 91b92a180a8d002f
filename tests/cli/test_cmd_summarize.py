"""Tests for cmd_summarize CLI function."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from contract_governance.interfaces.cli.main import build_parser, cmd_summarize, main


def _write(tmp_path: Path, name: str, records) -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def _parse(*argv):
    return build_parser().parse_args(["summarize", *argv])


def test_budget_summary(tmp_path, valid_budget, capsys):
    path = _write(tmp_path, "budget.json", [valid_budget])
    assert cmd_summarize(_parse("budget", "--input", str(path))) == 0
    out = capsys.readouterr().out
    assert "Period Q1: committed 500000 USD, spent 240000, variance -260000, forecast delta 10000" in out


def test_lag_summary(tmp_path, valid_schedule, capsys):
    path = _write(tmp_path, "schedule.json", valid_schedule)
    assert cmd_summarize(_parse("lag", "--input", str(path), "--reference-date", "2024-07-01")) == 0
    out = capsys.readouterr().out
    assert "T-2" in out
    assert "T-1" not in out  # done
    assert "T-3" not in out  # not yet due


def test_lag_summary_json(tmp_path, valid_schedule, capsys):
    path = _write(tmp_path, "schedule.json", valid_schedule)
    cmd_summarize(_parse("lag", "--input", str(path), "--reference-date", "2025-01-01", "--json"))
    lagging = json.loads(capsys.readouterr().out)
    assert [e["taskId"] for e in lagging] == ["T-2", "T-3"]


def test_lag_rejects_malformed_reference_date(tmp_path, valid_schedule):
    path = _write(tmp_path, "schedule.json", valid_schedule)
    assert cmd_summarize(_parse("lag", "--input", str(path), "--reference-date", "1 July")) == 2


def test_lag_rejects_entries_without_status(tmp_path, valid_schedule, capsys):
    del valid_schedule[1]["status"]
    path = _write(tmp_path, "schedule.json", valid_schedule)
    assert cmd_summarize(_parse("lag", "--input", str(path), "--reference-date", "2025-01-01")) == 2
    assert capsys.readouterr().out == ""


def test_compliance_summary_json(tmp_path, valid_checkpoints, capsys):
    path = _write(tmp_path, "checkpoints.json", valid_checkpoints * 2)
    assert cmd_summarize(_parse("compliance", "--input", str(path), "--json")) == 0
    assert json.loads(capsys.readouterr().out) == {"major:pending": 2, "minor:collected": 2}


def test_invalid_input_is_not_summarized(tmp_path, capsys):
    path = _write(tmp_path, "checkpoints.json", [{"clause": "1.1"}])
    assert cmd_summarize(_parse("compliance", "--input", str(path))) == 2
    out = capsys.readouterr().out
    assert "controlOwner missing at index 0" in out
    assert "1.1:" not in out


def test_overrun_warning_does_not_block_summary(tmp_path, valid_budget, capsys):
    path = _write(tmp_path, "budget.json", [dict(valid_budget, spent=600000)])
    assert cmd_summarize(_parse("budget", "--input", str(path))) == 0
    assert "variance 100000" in capsys.readouterr().out


def test_missing_input_returns_one(tmp_path):
    assert cmd_summarize(_parse("budget", "--input", str(tmp_path / "absent.json"))) == 1


def test_parser_rejects_unknown_summary():
    with pytest.raises(SystemExit):
        _parse("variance", "--input", "a.json")


def test_main_runs_summarize(tmp_path, valid_checkpoints):
    path = _write(tmp_path, "checkpoints.json", valid_checkpoints)
    assert main(["--warnings-only", "summarize", "compliance", "--input", str(path)]) == 0
