"""Bring the game window to the foreground before sending input.

Uses ``pygetwindow`` to find the window by title.  The import is lazy so the
rest of the package works on platforms where ``pygetwindow`` is unavailable.
"""

from __future__ import annotations

import logging
import time
from typing import Callable


class WindowNotFoundError(RuntimeError):
    """Raised when a window cannot be located."""


def activate_window(title: str, settle: float = 0.03) -> None:
    """Activate the first window whose title contains ``title``.

    Raises
    ------
    WindowNotFoundError
        If no window title contains ``title``.
    RuntimeError
        If ``pygetwindow`` is not usable on this platform.
    """

    try:  # Import lazily so that the module can be imported without deps.
        import pygetwindow as gw
    except Exception as exc:  # pragma: no cover - dependency error
        raise RuntimeError("pygetwindow is required to focus windows") from exc

    matches = [w for w in gw.getAllWindows() if title in w.title]
    if not matches:
        raise WindowNotFoundError(f"Window '{title}' not found")
    window = matches[0]
    if not window.isActive:
        logging.debug("Activating window %r", window.title)
        window.activate()
        time.sleep(settle)


def window_focuser(title: str) -> Callable[[], None]:
    """Return a no-argument callable that focuses ``title``."""

    return lambda: activate_window(title)


__all__ = ["WindowNotFoundError", "activate_window", "window_focuser"]
