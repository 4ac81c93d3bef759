"""Keyboard input drivers.

This module provides a small wrapper around :mod:`pynput` to send key taps
and literal text to the operating system.  Keys are named the way the game
names them in ``options.txt``; see :mod:`mc_chat.control.keys`.
:class:`DryRunDriver` only logs what would have been sent.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from .keys import SPECIAL, parse_key


class InputDriver:
    """Send keyboard input to the focused game window.

    Parameters
    ----------
    keymap:
        Optional overrides from game key names to ``pynput`` keys.
    hold:
        Seconds a key stays down during a tap.
    focus:
        Optional callable run before each key action, usually one that
        activates the game window.
    """

    def __init__(
        self,
        keymap: Optional[Mapping[str, object]] = None,
        hold: float = 0.04,
        focus: Optional[Callable[[], None]] = None,
    ) -> None:
        try:  # Import lazily; pynput needs a display server on Linux.
            from pynput.keyboard import Controller, Key
        except Exception as exc:  # pragma: no cover - dependency error
            raise RuntimeError("pynput could not be loaded to send keyboard input") from exc

        self.keyboard = Controller()
        self._special = Key
        self.keymap: Dict[str, object] = dict(keymap or {})
        self.hold = hold
        self.focus = focus

    # ------------------------------------------------------------------
    # Internal utilities
    def _resolve(self, key: str) -> object:
        if key in self.keymap:
            return self.keymap[key]
        kind, name = parse_key(key)
        if kind == SPECIAL:
            return getattr(self._special, name)
        return name

    # ------------------------------------------------------------------
    # Public API
    def press_key(self, key: str) -> None:
        """Press and release the key named ``key`` once."""

        mapped = self._resolve(key)
        if self.focus is not None:
            self.focus()
        logging.info("Key tap: %s", key)
        self.keyboard.press(mapped)
        time.sleep(self.hold)
        self.keyboard.release(mapped)

    def type_text(self, text: str) -> None:
        """Type ``text`` verbatim."""

        if self.focus is not None:
            self.focus()
        logging.info("Typing %d character(s)", len(text))
        self.keyboard.type(text)


class DryRunDriver:
    """Driver that records and logs input instead of sending it."""

    def __init__(self) -> None:
        self.sent: List[Tuple[str, str]] = []

    def press_key(self, key: str) -> None:
        parse_key(key)
        logging.info("[dry-run] key tap: %s", key)
        self.sent.append(("key", key))

    def type_text(self, text: str) -> None:
        logging.info("[dry-run] type: %r", text)
        self.sent.append(("text", text))


__all__ = ["InputDriver", "DryRunDriver"]
