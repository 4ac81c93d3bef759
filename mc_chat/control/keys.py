"""Game key names.

``options.txt`` names keys like ``key.keyboard.t`` or
``key.keyboard.left.shift``.  :func:`parse_key` turns such a name into either
a printable character or the attribute name of a ``pynput.keyboard.Key``.
"""

from __future__ import annotations

from typing import Dict, Tuple

KEY_PREFIX = "key.keyboard."

ESCAPE = "key.keyboard.escape"
ENTER = "key.keyboard.enter"

CHAR = "char"
SPECIAL = "special"

# Game key names that stand for a printable character.
CHAR_KEYS: Dict[str, str] = {
    "slash": "/",
    "backslash": "\\",
    "period": ".",
    "comma": ",",
    "semicolon": ";",
    "apostrophe": "'",
    "grave.accent": "`",
    "minus": "-",
    "equal": "=",
    "left.bracket": "[",
    "right.bracket": "]",
    "keypad.divide": "/",
    "keypad.multiply": "*",
    "keypad.subtract": "-",
    "keypad.add": "+",
    "keypad.decimal": ".",
}

# Game key names and the matching ``pynput.keyboard.Key`` attribute.
SPECIAL_KEYS: Dict[str, str] = {
    "escape": "esc",
    "enter": "enter",
    "keypad.enter": "enter",
    "tab": "tab",
    "space": "space",
    "backspace": "backspace",
    "delete": "delete",
    "insert": "insert",
    "home": "home",
    "end": "end",
    "page.up": "page_up",
    "page.down": "page_down",
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "caps.lock": "caps_lock",
    "left.shift": "shift_l",
    "right.shift": "shift_r",
    "left.control": "ctrl_l",
    "right.control": "ctrl_r",
    "left.alt": "alt_l",
    "right.alt": "alt_r",
    "left.win": "cmd_l",
    "right.win": "cmd_r",
    **{f"f{i}": f"f{i}" for i in range(1, 13)},
}


def parse_key(key: str) -> Tuple[str, str]:
    """Return ``(CHAR, character)`` or ``(SPECIAL, pynput_name)`` for ``key``.

    A bare single character is accepted as is.  Mouse bindings and unknown
    names raise ``ValueError``.
    """

    if len(key) == 1:
        return CHAR, key
    if not key.startswith(KEY_PREFIX):
        raise ValueError(f"Not a keyboard binding: {key!r}")
    name = key[len(KEY_PREFIX):]
    if name in SPECIAL_KEYS:
        return SPECIAL, SPECIAL_KEYS[name]
    if name in CHAR_KEYS:
        return CHAR, CHAR_KEYS[name]
    # key.keyboard.keypad.5 and plain letters/digits
    if name.startswith("keypad.") and len(name) == len("keypad.") + 1:
        return CHAR, name[-1]
    if len(name) == 1:
        return CHAR, name
    raise ValueError(f"Unsupported key binding: {key!r}")


__all__ = ["ESCAPE", "ENTER", "CHAR", "SPECIAL", "parse_key"]
