"""Common vanilla server commands."""

from __future__ import annotations

from typing import List

from .model import Command, Parameter, ParamType

GAMEMODES = ("survival", "creative", "adventure", "spectator")
DIFFICULTIES = ("peaceful", "easy", "normal", "hard")

VANILLA_COMMANDS: List[Command] = [
    Command.of("say", Parameter("message", required=True)),
    Command.of(["msg", "tell", "w"], Parameter("target", required=True), Parameter("message", required=True)),
    Command.of("me", Parameter("action", required=True)),
    Command.of("ban", Parameter("target", required=True), Parameter("reason")),
    Command.of("kick", Parameter("target", required=True), Parameter("reason")),
    Command.of("pardon", Parameter("target", required=True)),
    Command.of("op", Parameter("target", required=True)),
    Command.of("deop", Parameter("target", required=True)),
    Command.of(
        "gamemode",
        Parameter("mode", ParamType.ENUM, required=True, choices=GAMEMODES),
        Parameter("target"),
    ),
    Command.of(
        "difficulty",
        Parameter("level", ParamType.ENUM, choices=DIFFICULTIES),
    ),
    Command.of(
        "time",
        Parameter("action", ParamType.ENUM, required=True, choices=("set", "add", "query")),
        Parameter("value", required=True),
    ),
    Command.of(
        "weather",
        Parameter("type", ParamType.ENUM, required=True, choices=("clear", "rain", "thunder")),
        Parameter("duration", ParamType.NUMBER),
    ),
    Command.of(
        ["tp", "teleport"],
        Parameter("target", required=True),
        Parameter("x"),
        Parameter("y"),
        Parameter("z"),
    ),
    Command.of(
        "give",
        Parameter("target", required=True),
        Parameter("item", required=True),
        Parameter("count", ParamType.NUMBER),
    ),
    Command.of("seed"),
    Command.of("list"),
]


__all__ = ["VANILLA_COMMANDS", "GAMEMODES", "DIFFICULTIES"]
