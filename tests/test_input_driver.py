"""Tests for key name translation and the keyboard drivers."""

import sys
import types

import pytest

from mc_chat.control.input_driver import DryRunDriver, InputDriver
from mc_chat.control.keys import CHAR, SPECIAL, parse_key


class FakeController:
    def __init__(self):
        self.events = []

    def press(self, key):
        self.events.append(("press", key))

    def release(self, key):
        self.events.append(("release", key))

    def type(self, text):
        self.events.append(("type", text))


@pytest.fixture
def fake_pynput(monkeypatch):
    """Install a stand-in ``pynput.keyboard`` so no display is needed."""
    keyboard_mod = types.ModuleType("pynput.keyboard")
    keyboard_mod.Controller = FakeController
    keyboard_mod.Key = types.SimpleNamespace(esc="<esc>", enter="<enter>", shift_l="<shift>")
    pynput_mod = types.ModuleType("pynput")
    pynput_mod.keyboard = keyboard_mod
    monkeypatch.setitem(sys.modules, "pynput", pynput_mod)
    monkeypatch.setitem(sys.modules, "pynput.keyboard", keyboard_mod)
    return keyboard_mod


class TestParseKey:
    """Tests for parse_key."""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("key.keyboard.t", (CHAR, "t")),
            ("key.keyboard.7", (CHAR, "7")),
            ("key.keyboard.slash", (CHAR, "/")),
            ("key.keyboard.grave.accent", (CHAR, "`")),
            ("key.keyboard.keypad.5", (CHAR, "5")),
            ("key.keyboard.escape", (SPECIAL, "esc")),
            ("key.keyboard.left.shift", (SPECIAL, "shift_l")),
            ("key.keyboard.f3", (SPECIAL, "f3")),
            ("t", (CHAR, "t")),
        ],
    )
    def test_known_keys(self, key, expected):
        assert parse_key(key) == expected

    @pytest.mark.parametrize("key", ["key.mouse.left", "key.keyboard.world.1", ""])
    def test_unsupported(self, key):
        with pytest.raises(ValueError):
            parse_key(key)


class TestInputDriver:
    """Tests for InputDriver with a fake pynput."""

    def test_press_key(self, fake_pynput):
        driver = InputDriver(hold=0)
        driver.press_key("key.keyboard.t")
        driver.press_key("key.keyboard.escape")
        assert driver.keyboard.events == [
            ("press", "t"),
            ("release", "t"),
            ("press", "<esc>"),
            ("release", "<esc>"),
        ]

    def test_type_text(self, fake_pynput):
        driver = InputDriver(hold=0)
        driver.type_text("/say hi")
        assert driver.keyboard.events == [("type", "/say hi")]

    def test_keymap_override(self, fake_pynput):
        driver = InputDriver(keymap={"key.keyboard.t": "x"}, hold=0)
        driver.press_key("key.keyboard.t")
        assert driver.keyboard.events[0] == ("press", "x")

    def test_focus_runs_before_input(self, fake_pynput):
        calls = []
        driver = InputDriver(hold=0, focus=lambda: calls.append("focus"))
        driver.press_key("key.keyboard.enter")
        driver.type_text("a")
        assert calls == ["focus", "focus"]

    def test_bad_key_sends_nothing(self, fake_pynput):
        driver = InputDriver(hold=0)
        with pytest.raises(ValueError):
            driver.press_key("key.mouse.right")
        assert driver.keyboard.events == []


class TestDryRunDriver:
    """Tests for DryRunDriver."""

    def test_records(self):
        driver = DryRunDriver()
        driver.press_key("key.keyboard.t")
        driver.type_text("hello")
        assert driver.sent == [("key", "key.keyboard.t"), ("text", "hello")]

    def test_validates_keys(self):
        with pytest.raises(ValueError):
            DryRunDriver().press_key("key.mouse.left")
