"""Shared fixtures for UI tests."""

import pytest
from blessed import Terminal
from blessed.keyboard import Keystroke

from tui_bounded.ui.blessed.keys import Keymap


@pytest.fixture
def term() -> Terminal:
    """Terminal without styling, so rendered output is plain text."""
    return Terminal(force_styling=None)


@pytest.fixture(autouse=True)
def reset_shared_keymap():
    """Keep the process-wide keymap from leaking between tests."""
    Keymap.set_shared(None)
    yield
    Keymap.set_shared(None)


def named_key(name: str) -> Keystroke:
    """Keystroke for a named key such as KEY_UP, as Terminal.inkey() yields it."""
    return Keystroke("\x1b", code=1, name=name)


def char_key(char: str) -> Keystroke:
    return Keystroke(char)
