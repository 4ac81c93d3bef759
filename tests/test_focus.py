"""Tests for game window focusing."""

import sys
import types

import pytest

from mc_chat.control.focus import WindowNotFoundError, activate_window, window_focuser


class FakeWindow:
    def __init__(self, title, active=False):
        self.title = title
        self.isActive = active
        self.activated = 0

    def activate(self):
        self.activated += 1
        self.isActive = True


@pytest.fixture
def windows(monkeypatch):
    found = [FakeWindow("Discord"), FakeWindow("Minecraft 1.20.4 - Multiplayer")]
    module = types.ModuleType("pygetwindow")
    module.getAllWindows = lambda: found
    monkeypatch.setitem(sys.modules, "pygetwindow", module)
    return found


def test_activates_matching_window(windows):
    activate_window("Minecraft", settle=0)
    assert windows[1].activated == 1
    assert windows[0].activated == 0


def test_active_window_left_alone(windows):
    windows[1].isActive = True
    window_focuser("Minecraft")()
    assert windows[1].activated == 0


def test_missing_window(windows):
    with pytest.raises(WindowNotFoundError):
        activate_window("Terraria", settle=0)
