import pytest

from mc_chat.commands.model import Command, CommandRegistry, Parameter
from mc_chat.chat.session import ChatSession


class RecordingKeyboard:
    """Keyboard double counting every call it receives."""

    def __init__(self):
        self.pressed = []
        self.typed = []

    def press_key(self, key):
        self.pressed.append(key)

    def type_text(self, text):
        self.typed.append(text)

    @property
    def calls(self):
        return len(self.pressed) + len(self.typed)


@pytest.fixture
def keyboard():
    return RecordingKeyboard()


@pytest.fixture
def registry():
    return CommandRegistry([
        Command.of("ban", Parameter("target", required=True)),
        Command.of("kick", Parameter("target", required=True), Parameter("reason")),
    ])


@pytest.fixture
def session(keyboard, registry):
    return ChatSession(
        keyboard,
        "key.keyboard.t",
        "key.keyboard.slash",
        command_prefix="/",
        commands=registry,
        settle_delay=0,
    )
