"""Reading and parsing of the game's ``options.txt``.

The file is a flat list of ``key:value`` lines.  Values are kept as raw
strings since many of them (lists, floats, key names) have formats this
client never needs to understand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import ntpath
import os
import posixpath
import sys
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from ..errors import ConfigurationError, ParseWarning

OPTIONS_FILENAME = "options.txt"

# Bundled vanilla bindings used when neither the caller nor the user's
# options.txt provide one.
DEFAULT_OPTIONS_PATH = os.path.join(os.path.dirname(__file__), "default_options.txt")

CHAT_KEY = "key_key.chat"
COMMAND_KEY = "key_key.command"
# Value the game writes for an action with no key assigned.
UNBOUND = "key.keyboard.unknown"

# Base path segments and path flavour per platform family.  The last segment
# is the game's own data directory.
PLATFORM_ROOTS: Dict[str, Tuple[object, Tuple[str, ...]]] = {
    "windows": (ntpath, ("%APPDATA%", ".minecraft")),
    "macos": (posixpath, ("~", "Library", "Application Support", "minecraft")),
    "linux": (posixpath, ("~", ".minecraft")),
}

Reader = Callable[[str], str]


@dataclass
class ParsedOptions:
    """Settings mapping plus the lines that had to be skipped."""

    values: Dict[str, str] = field(default_factory=dict)
    warnings: List[ParseWarning] = field(default_factory=list)

    def get(self, key: str, fallback: Optional[Mapping[str, str]] = None) -> Optional[str]:
        return lookup(self.values, key, fallback)


def parse_options(text: str) -> ParsedOptions:
    """Parse ``key:value`` lines from ``text``.

    Empty lines are ignored.  The first colon separates key from value and
    neither side is stripped.  Lines without a colon or with an empty key are
    skipped and reported in :attr:`ParsedOptions.warnings`.
    """

    parsed = ParsedOptions()
    for number, line in enumerate(text.splitlines(), start=1):
        if not line:
            continue
        key, sep, value = line.partition(":")
        if not sep or not key:
            logging.warning("Skipping malformed options line %d: %r", number, line)
            parsed.warnings.append(ParseWarning(number, line))
            continue
        parsed.values[key] = value
    return parsed


def read_text(path: str) -> str:
    """Return the whole content of ``path``.

    Raises ``OSError`` (usually ``FileNotFoundError``) when the file cannot be
    read.
    """

    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_options(path: str, reader: Reader = read_text) -> ParsedOptions:
    """Read ``path`` with ``reader`` and parse it."""

    logging.info("Loading options from %s", path)
    parsed = parse_options(reader(path))
    if parsed.warnings:
        logging.warning("%d malformed line(s) skipped in %s", len(parsed.warnings), path)
    return parsed


def lookup(
    mapping: Mapping[str, str],
    key: str,
    fallback: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Return ``mapping[key]``, else ``fallback[key]``, else ``None``."""

    if key in mapping:
        return mapping[key]
    if fallback is not None and key in fallback:
        return fallback[key]
    return None


def platform_family(sys_platform: Optional[str] = None) -> str:
    """Map ``sys.platform`` to one of ``windows``, ``macos`` or ``linux``."""

    name = sys_platform if sys_platform is not None else sys.platform
    if name in ("win32", "cygwin"):
        return "windows"
    if name == "darwin":
        return "macos"
    if name.startswith(("linux", "freebsd", "openbsd", "netbsd", "sunos", "aix")):
        return "linux"
    raise ConfigurationError(f"Unsupported operating system: {name!r}")


def resolve_platform_root(family: str) -> str:
    """Return the default game directory for the platform ``family``."""

    try:
        pathmod, segments = PLATFORM_ROOTS[family]
    except KeyError:
        raise ConfigurationError(f"Unknown platform family: {family!r}") from None
    root = pathmod.join(*segments)
    return pathmod.expanduser(pathmod.expandvars(root))


def options_path(root: str) -> str:
    """Return the location of ``options.txt`` inside ``root``."""

    return os.path.join(root, OPTIONS_FILENAME)


__all__ = [
    "CHAT_KEY",
    "COMMAND_KEY",
    "UNBOUND",
    "DEFAULT_OPTIONS_PATH",
    "OPTIONS_FILENAME",
    "ParsedOptions",
    "parse_options",
    "read_text",
    "load_options",
    "lookup",
    "platform_family",
    "resolve_platform_root",
    "options_path",
]
