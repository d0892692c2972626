"""
Tests for the snakeworld-play CLI.
"""

import json
import sys

import pytest

import snakeworld.cli.play as play


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "SNAKE_WORLD_SIZE", "SNAKE_SPAWN_INDEX", "SNAKE_TICK_RATE",
        "SNAKE_MAX_TICKS", "SNAKE_SEED", "SNAKE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def run_main(monkeypatch, argv):
    monkeypatch.setattr(sys, "argv", ["snakeworld-play"] + argv)
    play.main()


def test_json_summary(monkeypatch, capsys):
    run_main(monkeypatch, [
        "--size", "5", "--spawn", "6", "--seed", "1",
        "--max-ticks", "3", "--tick-rate", "0", "--json",
    ])

    summary = json.loads(capsys.readouterr().out)
    assert summary["state"] == "playing"
    assert summary["ticks"] == 3
    assert summary["length"] >= 1


def test_text_summary_with_board(monkeypatch, capsys):
    run_main(monkeypatch, [
        "--size", "5", "--spawn", "6", "--seed", "1", "--moves", "D . L",
        "--max-ticks", "2", "--tick-rate", "0", "--show-board",
    ])

    out = capsys.readouterr().out
    assert out.startswith("Game playing:")
    assert "ticks=2" in out


def test_environment_provides_defaults(monkeypatch, capsys):
    monkeypatch.setenv("SNAKE_WORLD_SIZE", "6")
    monkeypatch.setenv("SNAKE_TICK_RATE", "0")
    monkeypatch.setenv("SNAKE_MAX_TICKS", "4")
    run_main(monkeypatch, ["--json"])

    summary = json.loads(capsys.readouterr().out)
    assert summary["ticks"] == 4
    assert 0 <= summary["head"] < 36


def test_bad_move_script_exits(monkeypatch):
    with pytest.raises(SystemExit) as excinfo:
        run_main(monkeypatch, ["--moves", "R Q", "--tick-rate", "0"])
    assert "Unknown move" in str(excinfo.value)


def test_bad_size_exits(monkeypatch):
    with pytest.raises(SystemExit) as excinfo:
        run_main(monkeypatch, ["--size", "2"])
    assert "Invalid configuration" in str(excinfo.value)


def test_bad_environment_exits(monkeypatch):
    monkeypatch.setenv("SNAKE_WORLD_SIZE", "huge")
    with pytest.raises(SystemExit) as excinfo:
        run_main(monkeypatch, [])
    assert "Invalid environment configuration" in str(excinfo.value)
