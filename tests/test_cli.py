"""Tests for the command-line interface in dry-run mode."""

import json
import logging

import pytest

from mc_chat import cli
from mc_chat.control.focus import WindowNotFoundError


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def game_dir(tmp_path):
    (tmp_path / "options.txt").write_text(
        "key_key.chat:key.keyboard.t\nkey_key.command:key.keyboard.slash\nlang:en_us\n",
        encoding="utf-8",
    )
    return str(tmp_path)


def run_cli(game_dir, *argv):
    return cli.main(["--root", game_dir, "--dry-run", "--settle-ms", "0", "--log-json", *argv])


def test_send(game_dir, capsys):
    assert run_cli(game_dir, "send", "hello world") == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"event": "send", "typed": "hello world", "submitted": True}


def test_command(game_dir, capsys):
    assert run_cli(game_dir, "command", "gamemode", "creative", "Steve") == 0
    out = json.loads(capsys.readouterr().out)
    assert out["typed"] == "/gamemode creative Steve"


def test_bad_command_exits_1(game_dir, capsys):
    assert run_cli(game_dir, "command", "kick") == 1
    assert capsys.readouterr().out == ""


def test_options(game_dir, capsys):
    assert run_cli(game_dir, "options", "lang", "key_key.jump") == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"lang": "en_us", "key_key.jump": "key.keyboard.space"}


def test_commands_listing(game_dir, capsys):
    assert run_cli(game_dir, "commands") == 0
    lines = capsys.readouterr().out.splitlines()
    assert "/msg|tell|w <target> <message>" in lines
    assert "/seed" in lines


def test_missing_root(tmp_path):
    assert run_cli(str(tmp_path / "nowhere"), "send", "hi") == 1


def test_config_from_args(game_dir):
    args = cli.build_parser().parse_args(
        ["--root", game_dir, "--chat-key", "key.keyboard.y", "--settle-ms", "250", "send", "x"]
    )
    config = cli.config_from_args(args)
    assert config.chat.key == "key.keyboard.y"
    assert config.settle_delay == 0.25
    assert not config.dry_run


def test_unpressable_binding_exits_1(tmp_path, capsys):
    (tmp_path / "options.txt").write_text("key_key.chat:key.mouse.middle\n", encoding="utf-8")
    assert run_cli(str(tmp_path), "send", "hi") == 1
    assert capsys.readouterr().out == ""


def test_missing_window_exits_1(game_dir, monkeypatch):
    def run(args):
        raise WindowNotFoundError("Window 'Minecraft' not found")

    monkeypatch.setattr(cli, "run", run)
    assert run_cli(game_dir, "send", "hi") == 1


def test_trailing_words_join_last_parameter(game_dir, capsys):
    assert run_cli(game_dir, "command", "msg", "Alex", "see", "you", "at", "spawn") == 0
    out = json.loads(capsys.readouterr().out)
    assert out["typed"] == "/msg Alex see you at spawn"


def test_surplus_words_for_non_string_parameter(game_dir):
    assert run_cli(game_dir, "command", "difficulty", "hard", "now") == 1
