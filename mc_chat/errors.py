"""Error types raised by the chat automation client."""

from __future__ import annotations

from dataclasses import dataclass


class ConfigurationError(RuntimeError):
    """Raised when the client cannot be configured.

    Covers an unsupported operating system and key bindings that could not be
    resolved from explicit values, the user's settings or the bundled
    defaults.
    """


class StateError(RuntimeError):
    """Raised when a chat operation is invalid for the current console state."""


class CommandError(ValueError):
    """Raised for unknown commands or arguments that do not fit a command."""


class RegistrationError(ValueError):
    """Raised when a command name or alias is already registered."""


@dataclass(frozen=True)
class ParseWarning:
    """A settings line that was skipped while parsing."""

    line_number: int
    line: str


__all__ = [
    "ConfigurationError",
    "StateError",
    "CommandError",
    "RegistrationError",
    "ParseWarning",
]
