from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .chat.session import DEFAULT_SETTLE_DELAY
from .commands.model import Command
from .settings.store import DEFAULT_OPTIONS_PATH


@dataclass
class ChatBindings:
    key: Optional[str] = None
    command_key: Optional[str] = None
    prefix: str = "/"


@dataclass
class ClientConfig:
    root: Optional[str] = None
    chat: ChatBindings = field(default_factory=ChatBindings)
    commands: List[Command] = field(default_factory=list)
    version: Optional[str] = None
    options: Optional[Mapping[str, str]] = None
    defaults: Optional[Mapping[str, str]] = None
    settle_delay: float = DEFAULT_SETTLE_DELAY
    default_options_path: str = DEFAULT_OPTIONS_PATH
    window_title: Optional[str] = None
    dry_run: bool = False
