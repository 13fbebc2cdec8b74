"""Blessed-based UI: keybindings, layout, components and the demo app."""

from .app import App, Focus, run_app
from .component import Component, Message
from .keys import Keybind, Keymap, key_match
from .layout import Ratio, Rect, centered_rect, h_split, v_split

__all__ = [
    "App",
    "Focus",
    "run_app",
    "Component",
    "Message",
    "Keybind",
    "Keymap",
    "key_match",
    "Ratio",
    "Rect",
    "centered_rect",
    "h_split",
    "v_split",
]
