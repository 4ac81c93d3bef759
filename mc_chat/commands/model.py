"""Command and parameter definitions.

A :class:`Command` describes the shape of a chat command: a canonical name,
optional aliases and an ordered list of :class:`Parameter`.  The
:class:`CommandRegistry` maps every name and alias to its command.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import re
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from ..errors import CommandError, RegistrationError

# Decimal notation only: no exponents, underscores, inf or nan.
PLAIN_NUMBER = re.compile(r"\A[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)\Z")


class ParamType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"


@dataclass(frozen=True)
class Parameter:
    """A positional command parameter."""

    name: str
    type: ParamType = ParamType.STRING
    required: bool = False
    choices: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", ParamType(self.type))
        object.__setattr__(self, "choices", tuple(self.choices))
        if self.type is ParamType.ENUM and not self.choices:
            raise ValueError(f"Enum parameter {self.name!r} needs choices")

    def render(self, value: object, last: bool = False) -> str:
        """Return ``value`` as command text, raising CommandError if invalid.

        ``last`` allows whitespace in a trailing string parameter, which the
        game reads as the rest of the line.
        """

        if self.type is ParamType.BOOLEAN:
            if isinstance(value, bool):
                return "true" if value else "false"
            if isinstance(value, str) and value in ("true", "false"):
                return value
            raise CommandError(f"{self.name}: expected true or false, got {value!r}")

        if self.type is ParamType.NUMBER:
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                text = str(value)
            elif isinstance(value, str):
                text = value
            else:
                text = ""
            if not PLAIN_NUMBER.match(text):
                raise CommandError(f"{self.name}: expected a number, got {value!r}")
            return text

        text = str(value)
        if "\r" in text or "\n" in text:
            # A typed line break would submit the chat halfway through.
            raise CommandError(f"{self.name}: line breaks are not allowed, got {text!r}")
        if self.type is ParamType.ENUM:
            if text not in self.choices:
                raise CommandError(
                    f"{self.name}: expected one of {', '.join(self.choices)}, got {text!r}"
                )
            return text
        if not text:
            raise CommandError(f"{self.name}: empty value")
        if text != text.strip():
            raise CommandError(f"{self.name}: leading or trailing whitespace in {text!r}")
        if not last and len(text.split()) != 1:
            raise CommandError(f"{self.name}: value must be a single word, got {text!r}")
        return text


@dataclass(frozen=True)
class Command:
    """An immutable command shape.

    Parameters
    ----------
    names:
        Canonical name first, followed by any aliases.
    params:
        Positional parameters in the order they are typed.
    """

    names: Tuple[str, ...]
    params: Tuple[Parameter, ...] = field(default=())

    def __post_init__(self) -> None:
        names = (self.names,) if isinstance(self.names, str) else tuple(self.names)
        if not names or not all(names):
            raise ValueError("A command needs at least one non-empty name")
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate names in command: {names}")
        object.__setattr__(self, "names", names)
        object.__setattr__(self, "params", tuple(self.params))

    @classmethod
    def of(cls, names: Union[str, Sequence[str]], *params: Parameter) -> "Command":
        """Build a command from a name (or names) and variadic parameters."""

        return cls(names, params)

    @property
    def canonical(self) -> str:
        return self.names[0]

    @property
    def aliases(self) -> Tuple[str, ...]:
        return self.names[1:]

    @property
    def required_count(self) -> int:
        return sum(1 for p in self.params if p.required)

    def render_args(self, args: Sequence[object]) -> List[str]:
        """Validate ``args`` against the parameters and render them in order."""

        if len(args) > len(self.params):
            raise CommandError(
                f"/{self.canonical} takes at most {len(self.params)} argument(s), got {len(args)}"
            )
        for param in self.params[len(args):]:
            if param.required:
                raise CommandError(f"/{self.canonical}: missing required argument {param.name!r}")
        last = len(self.params) - 1
        return [p.render(v, last=i == last) for i, (p, v) in enumerate(zip(self.params, args))]


class CommandRegistry:
    """Lookup table from every command name and alias to its command."""

    def __init__(self, commands: Sequence[Command] = ()) -> None:
        self._by_name: Dict[str, Command] = {}
        for command in commands:
            self.register(command)

    def register(self, command: Command) -> None:
        """Add ``command``; refuse it when any of its names is taken."""

        taken = [n for n in command.names if n in self._by_name]
        if taken:
            raise RegistrationError(f"Command name(s) already registered: {', '.join(taken)}")
        for name in command.names:
            self._by_name[name] = command

    def resolve(self, name: str) -> Optional[Command]:
        return self._by_name.get(name)

    def commands(self) -> List[Command]:
        """Return registered commands once each, in registration order."""

        seen: List[Command] = []
        for command in self._by_name.values():
            if not any(c is command for c in seen):
                seen.append(command)
        return seen

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)


__all__ = ["ParamType", "Parameter", "Command", "CommandRegistry"]
