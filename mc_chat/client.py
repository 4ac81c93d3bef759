"""A single running game instance as seen by the chat client.

:class:`ClientContext` ties together the game directory, its parsed
``options.txt``, the chat session and the registered commands.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .chat.session import ChatSession, Keyboard
from .commands.model import Command, CommandRegistry
from .config import ClientConfig
from .control.focus import window_focuser
from .control.input_driver import DryRunDriver, InputDriver
from .control.keys import parse_key
from .errors import ConfigurationError, ParseWarning
from .settings.store import (
    CHAT_KEY,
    COMMAND_KEY,
    UNBOUND,
    Reader,
    load_options,
    lookup,
    options_path,
    platform_family,
    read_text,
    resolve_platform_root,
)


class ClientContext:
    """Client bound to one game installation.

    Key bindings are resolved from, in order: the values in
    ``config.chat``, the user's ``options.txt``, and the bundled defaults.
    Construction fails with :class:`ConfigurationError` if a binding is
    missing from all three or names a key that cannot be pressed.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        keyboard: Optional[Keyboard] = None,
        reader: Reader = read_text,
    ) -> None:
        self.config = config or ClientConfig()
        self.version = self.config.version
        self.root = self.config.root or resolve_platform_root(platform_family())

        self.option_warnings: List[ParseWarning] = []
        if self.config.options is not None:
            self.options: Dict[str, str] = dict(self.config.options)
        else:
            parsed = load_options(options_path(self.root), reader)
            self.options = parsed.values
            self.option_warnings = parsed.warnings
        # The bundled defaults live in the package, not behind the caller's reader.
        if self.config.defaults is not None:
            self.defaults: Dict[str, str] = dict(self.config.defaults)
        else:
            self.defaults = load_options(self.config.default_options_path).values

        bindings = self.config.chat
        chat_key = self._binding(bindings.key, CHAT_KEY)
        command_key = self._binding(bindings.command_key, COMMAND_KEY)

        self.commands = CommandRegistry()
        self.keyboard = keyboard or self._make_keyboard()
        self.chat = ChatSession(
            self.keyboard,
            chat_key,
            command_key,
            command_prefix=bindings.prefix,
            commands=self.commands,
            settle_delay=self.config.settle_delay,
        )
        for command in self.config.commands:
            self.register_command(command)
        logging.info(
            "Client ready: root=%s chat=%s command=%s", self.root, chat_key, command_key
        )

    # ------------------------------------------------------------------
    def _binding(self, explicit: Optional[str], key: str) -> str:
        value = explicit if explicit is not None else lookup(self.options, key, self.defaults)
        if not value or value == UNBOUND:
            raise ConfigurationError(f"No key binding for {key!r}")
        try:
            parse_key(value)
        except ValueError as exc:
            raise ConfigurationError(f"Cannot press binding for {key!r}: {exc}") from exc
        return value

    def _make_keyboard(self) -> Keyboard:
        if self.config.dry_run:
            return DryRunDriver()
        focus = window_focuser(self.config.window_title) if self.config.window_title else None
        return InputDriver(focus=focus)

    # ------------------------------------------------------------------
    def option(self, key: str) -> Optional[str]:
        """Return a raw setting, falling back to the bundled defaults."""

        return lookup(self.options, key, self.defaults)

    def register_command(self, command: Command) -> None:
        """Make ``command`` available to :meth:`ChatSession.send_command`."""

        self.commands.register(command)
        logging.debug("Registered command %s", "/".join(command.names))

    def register_commands(self, commands: List[Command]) -> None:
        for command in commands:
            self.register_command(command)


__all__ = ["ClientContext"]
