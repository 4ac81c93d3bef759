"""Command-line interface for the chat client."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import List, Optional

from .client import ClientContext
from .commands.model import ParamType
from .commands.vanilla import VANILLA_COMMANDS
from .config import ChatBindings, ClientConfig
from .control.focus import WindowNotFoundError
from .errors import CommandError, ConfigurationError, StateError
from .utils import log_line, setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the CLI."""

    parser = argparse.ArgumentParser(
        prog="mc-chat", description="Type chat messages and commands into a running game"
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Game directory containing options.txt (default: platform location)",
    )
    parser.add_argument("--chat-key", default=None, help="Override the chat key binding")
    parser.add_argument("--command-key", default=None, help="Override the command key binding")
    parser.add_argument("--prefix", default="/", help="Command prefix")
    parser.add_argument(
        "--settle-ms",
        type=int,
        default=100,
        help="Milliseconds to wait for the chat to open",
    )
    parser.add_argument(
        "--window",
        default=None,
        help="Title of the game window to focus before typing",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the input instead of sending it to the game",
    )
    parser.add_argument(
        "--no-submit",
        action="store_true",
        help="Leave the chat open instead of pressing Enter",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--log-json", action="store_true", help="Print results as JSON")
    parser.add_argument("--log-file", default=None, help="Also log to this file")

    sub = parser.add_subparsers(dest="action", required=True)
    p_send = sub.add_parser("send", help="Type a chat message")
    p_send.add_argument("text")
    p_cmd = sub.add_parser("command", help="Type a registered command")
    p_cmd.add_argument("name")
    p_cmd.add_argument("args", nargs="*")
    p_opts = sub.add_parser("options", help="Show settings from options.txt")
    p_opts.add_argument("keys", nargs="*")
    sub.add_parser("commands", help="List the known commands")
    return parser


def config_from_args(args: argparse.Namespace) -> ClientConfig:
    return ClientConfig(
        root=args.root,
        chat=ChatBindings(key=args.chat_key, command_key=args.command_key, prefix=args.prefix),
        commands=list(VANILLA_COMMANDS),
        settle_delay=max(0, args.settle_ms) / 1000.0,
        window_title=args.window,
        dry_run=bool(args.dry_run),
    )


def fit_words(client: ClientContext, name: str, words: List[str]) -> List[str]:
    """Join surplus words into a trailing string parameter.

    Lets ``command say hello world`` work without quoting the message.
    """

    command = client.commands.resolve(name)
    if command is None or not command.params or len(words) <= len(command.params):
        return words
    if command.params[-1].type is not ParamType.STRING:
        return words
    split = len(command.params) - 1
    return words[:split] + [" ".join(words[split:])]


async def _type(client: ClientContext, args: argparse.Namespace) -> str:
    if args.action == "send":
        await client.chat.send(args.text)
        line = args.text
    else:
        line = await client.chat.send_command(args.name, fit_words(client, args.name, args.args))
    if not args.no_submit:
        client.chat.submit()
    return line


def run(args: argparse.Namespace) -> int:
    client = ClientContext(config_from_args(args))

    if args.action == "options":
        keys = args.keys or sorted(client.options)
        log_line({k: client.option(k) for k in keys}, args.log_json)
        return 0
    if args.action == "commands":
        for command in client.commands.commands():
            params = " ".join(
                f"<{p.name}>" if p.required else f"[{p.name}]" for p in command.params
            )
            log_line(f"{client.chat.command_prefix}{'|'.join(command.names)} {params}".rstrip())
        return 0

    line = asyncio.run(_type(client, args))
    log_line({"event": args.action, "typed": line, "submitted": not args.no_submit}, args.log_json)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""

    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug, args.log_file)

    try:
        return run(args)
    except (ConfigurationError, StateError, CommandError, WindowNotFoundError, OSError) as exc:
        logging.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
