"""Side panels (selection details, key help) and the key help modal."""

import sys

from blessed import Terminal
from blessed.keyboard import Keystroke

from tui_bounded.state import WrapPolicy

from ..component import Component, Message
from ..helpers import write_at, fit_text
from ..keys import Keymap
from ..layout import Rect
from ..styles import bold_block, default_block
from .list_view import ListView


def _render_lines(term: Terminal, rect: Rect, lines: list[str], dim: bool) -> None:
    for row in range(rect.height):
        text = fit_text(lines[row] if row < len(lines) else "", rect.width)
        if dim:
            text = term.dim(text)
        write_at(term, rect.x, rect.y + row, text, clear=False)


def selection_summary(view: ListView) -> list[str]:
    """
    Describe the list's selection state.

    Args:
        view: List whose selection is described

    Returns:
        Lines for the details panel
    """
    selection = view.selection
    boundary = selection.boundary
    selected = selection.selected
    wrap = "on" if selection.wrap is WrapPolicy.WRAP else "off"

    lines = [
        f"Items: {len(view.items)}",
        f"Boundary: {boundary if boundary is not None else 'none'}",
        f"Selected: {selected if selected is not None else '-'}",
        f"Wrap: {wrap}",
    ]
    item = view.selected_item
    if item is not None:
        lines.append(f"Item: {item}")
    return lines


class SelectionDetails(Component):
    """Shows the boundary, selection and wrap policy of a ListView."""

    def __init__(self, view: ListView, border_color: str = "white"):
        self.view = view
        self.block = default_block("Selection", border_color)

    def render(self, term: Terminal, rect: Rect, dim: bool = False) -> None:
        inner = self.block.render(term, rect, dim=dim)
        _render_lines(term, inner, selection_summary(self.view), dim)


class KeyHelp(Component):
    """Lists the active keybindings."""

    def __init__(self, keymap: Keymap, border_color: str = "white"):
        self.keymap = keymap
        self.block = default_block("Help", border_color)

    def render(self, term: Terminal, rect: Rect, dim: bool = False) -> None:
        inner = self.block.render(term, rect, dim=dim)
        lines = self.keymap.help_lines() + ["1-9: Jump to item"]
        _render_lines(term, inner, lines, dim)


class HelpModal(KeyHelp):
    """
    Key help drawn over the other components.

    While open it owns the keyboard; the quit and help keys close it by
    returning Message.BACK to the owner.
    """

    def __init__(self, keymap: Keymap, border_color: str = "white"):
        super().__init__(keymap, border_color)
        self.block = bold_block("Keys", border_color)

    def render(self, term: Terminal, rect: Rect, dim: bool = False) -> None:
        # Blank the area first so the list underneath does not show through
        for row in range(rect.y, rect.bottom):
            sys.stdout.write(term.move_xy(rect.x, row) + " " * rect.width)
        super().render(term, rect, dim)

    def handle_key(self, key: Keystroke) -> Message:
        if self.keymap.action_for(key) in ("quit", "help"):
            return Message.BACK
        return Message.IDLE
