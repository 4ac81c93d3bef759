"""Chat console state machine.

The real state of the game's chat console cannot be observed, so
:class:`ChatSession` tracks what it believes the state is and refuses any
operation that would make that belief drift from reality.  Opening the chat
twice, for example, would toggle it closed again in the game.
"""

from __future__ import annotations

import asyncio
from contextlib import contextmanager
from enum import Enum
import logging
from typing import Iterator, Optional, Protocol, Sequence

from ..commands.model import CommandRegistry
from ..control.keys import ENTER, ESCAPE
from ..errors import CommandError, StateError

# Seconds the game needs to show the chat input after the key is pressed.
DEFAULT_SETTLE_DELAY = 0.1


class Keyboard(Protocol):
    def press_key(self, key: str) -> None: ...

    def type_text(self, text: str) -> None: ...


class ChatState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class ChatSession:
    """Open, type into and close the in-game chat.

    Parameters
    ----------
    keyboard:
        Object sending key taps and literal text to the game.
    chat_key:
        Binding that opens an empty chat input.
    command_key:
        Binding that opens the chat with the command prefix already typed.
    command_prefix:
        Text that starts a command, ``/`` in vanilla.
    commands:
        Registry used to resolve command names.  Shared with the owning
        client so later registrations are visible here.
    settle_delay:
        Seconds to wait after an opening key before the input is usable.
    """

    def __init__(
        self,
        keyboard: Keyboard,
        chat_key: str,
        command_key: str,
        command_prefix: str = "/",
        commands: Optional[CommandRegistry] = None,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
    ) -> None:
        self.keyboard = keyboard
        self._chat_key = chat_key
        self._command_key = command_key
        self._command_prefix = command_prefix
        self.commands = commands if commands is not None else CommandRegistry()
        self.settle_delay = settle_delay
        self._state = ChatState.CLOSED
        self._busy = False

    @property
    def chat_key(self) -> str:
        return self._chat_key

    @property
    def command_key(self) -> str:
        return self._command_key

    @property
    def command_prefix(self) -> str:
        return self._command_prefix

    @property
    def state(self) -> ChatState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is ChatState.OPEN

    # ------------------------------------------------------------------
    # Internal utilities
    @contextmanager
    def _operation(self, name: str, required: ChatState) -> Iterator[None]:
        if self._busy:
            raise StateError(f"Cannot {name}: another chat operation is still pending")
        if self._state is not required:
            raise StateError(f"Cannot {name}: chat is {self._state.value}")
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    async def _open_with(self, key: str, name: str) -> None:
        with self._operation(name, ChatState.CLOSED):
            # Key taps hold the key down, so they run off the event loop.
            try:
                await asyncio.to_thread(self.keyboard.press_key, key)
            except asyncio.CancelledError:
                # The tap is already running in its thread.
                self._state = ChatState.OPEN
                raise
            try:
                await asyncio.sleep(self.settle_delay)
            finally:
                # The key went out, so the game is opening the chat whether
                # or not we waited for it.
                self._state = ChatState.OPEN
        logging.debug("Chat open (%s)", key)

    # ------------------------------------------------------------------
    # Public API
    async def open(self) -> None:
        """Open an empty chat input.  Only valid while the chat is closed."""

        await self._open_with(self._chat_key, "open chat")

    async def open_command(self) -> None:
        """Open the chat with the command prefix already typed."""

        await self._open_with(self._command_key, "open command input")

    def close(self) -> None:
        """Dismiss the chat input without sending it."""

        with self._operation("close chat", ChatState.OPEN):
            self.keyboard.press_key(ESCAPE)
            self._state = ChatState.CLOSED
        logging.debug("Chat closed")

    def submit(self) -> None:
        """Send the typed line; the game closes the chat afterwards."""

        with self._operation("submit chat", ChatState.OPEN):
            self.keyboard.press_key(ENTER)
            self._state = ChatState.CLOSED
        logging.debug("Chat submitted")

    def type_text(self, message: str) -> None:
        """Type ``message`` into the open chat input."""

        with self._operation("type", ChatState.OPEN):
            self.keyboard.type_text(message)

    async def send(self, message: str) -> None:
        """Open the chat and type ``message``.  The chat stays open."""

        await self.open()
        with self._operation("type", ChatState.OPEN):
            await asyncio.to_thread(self.keyboard.type_text, message)

    def compose(self, name: str, args: Sequence[object] = ()) -> str:
        """Return the command line for ``name`` with ``args``.

        Raises CommandError for unknown commands and invalid arguments.
        """

        command = self.commands.resolve(name)
        if command is None:
            raise CommandError(f"Unknown command: {name!r}")
        rendered = command.render_args(list(args))
        return self._command_prefix + " ".join([command.canonical, *rendered])

    async def send_command(self, name: str, args: Sequence[object] = ()) -> str:
        """Validate and type a command invocation, returning the typed line.

        Nothing is pressed unless the command and its arguments are valid.
        """

        line = self.compose(name, args)
        await self.send(line)
        return line


__all__ = ["ChatSession", "ChatState", "Keyboard", "DEFAULT_SETTLE_DELAY"]
