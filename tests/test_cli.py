"""Tests for the gridtactics command-line interface."""

import argparse
from pathlib import Path

import pytest

import gridtactics
from gridtactics.cli import main, non_negative_int, parse_cell
from gridtactics.environment import GridCoordinate

LEVELS_DIR = Path(gridtactics.__file__).resolve().parent / "levels"


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.setenv("GRIDTACTICS_NO_COLOR", "1")


def _run(*args: str) -> int:
    return main(["--levels-dir", str(LEVELS_DIR), *args])


def test_parse_cell():
    assert parse_cell("3,2") == GridCoordinate(3, 2)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_cell("3")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_cell("a,b")


def test_list_levels(capsys):
    assert _run("list") == 0
    names = capsys.readouterr().out.split()
    assert "corner" in names
    assert "rocks" in names


def test_check_reachable(capsys):
    assert _run("check", "ambush", "--from", "0,0", "--to", "3,3", "--distance", "6") == 0
    assert capsys.readouterr().out.splitlines()[-1] == "reachable"


def test_check_unreachable(capsys):
    assert _run("check", "corner", "--from", "0,0", "--to", "3,3", "--distance", "100") == 1
    assert capsys.readouterr().out.splitlines()[-1] == "unreachable"


def test_check_uses_player_budget_by_default():
    # rocks: player budget is 6 + 2 = 8, exactly the detour length.
    assert _run("check", "rocks", "--from", "0,0", "--to", "3,3") == 0
    assert _run("check", "rocks", "--from", "0,0", "--to", "3,3", "--distance", "7") == 1


def test_check_from_off_board_player_is_an_error(capsys):
    assert _run("check", "ambush", "--to", "3,3") == 2
    assert "[!]" in capsys.readouterr().out


def test_missing_level_is_an_error(capsys):
    assert _run("render", "nope") == 2
    assert "not found" in capsys.readouterr().out


def test_render(capsys):
    assert _run("render", "rocks", "--from", "0,0", "--to", "3,3") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "|S| | | | |"
    assert lines[2] == "| | | |▒| |"
    assert lines[3] == "| | |▒|F| |"
    assert lines[-1] == "P off-grid at (5, 4)"


def test_check_open_field_budgets():
    assert _run("check", "open_field", "--from", "0,0", "--to", "4,4", "--distance", "3") == 1
    assert _run("check", "open_field", "--from", "0,0", "--to", "4,4", "--distance", "8") == 0


def test_negative_distance_is_a_usage_error(capsys):
    assert non_negative_int("0") == 0
    with pytest.raises(argparse.ArgumentTypeError):
        non_negative_int("-1")

    with pytest.raises(SystemExit) as excinfo:
        _run("check", "corner", "--to", "3,3", "--distance", "-1")
    assert excinfo.value.code == 2
    assert "non-negative" in capsys.readouterr().err
