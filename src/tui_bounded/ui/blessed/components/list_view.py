"""Navigable list component backed by a BoundedSelection."""

import sys
from typing import Iterable, Optional

from blessed import Terminal
from blessed.keyboard import Keystroke
from loguru import logger

from tui_bounded.state import (
    Boundary,
    BoundedSelection,
    OutOfBoundsError,
    StateError,
    WrapPolicy,
)

from ..component import Component, Message
from ..events import parse_key
from ..helpers import calculate_scroll_offset, render_selection_list
from ..keys import Keymap
from ..layout import Rect, centered_rect
from ..styles import bold_block, default_block


class ListView(Component):
    """
    A titled list of strings with keyboard navigation.

    The view owns its items and keeps the selection in sync with them:
    appending moves focus to the new item, removing clamps the selection
    into the shrunk range.
    """

    def __init__(
        self,
        items: Iterable[str],
        *,
        title: str = "List",
        wrap: WrapPolicy = WrapPolicy.WRAP,
        keymap: Optional[Keymap] = None,
        page_size: int = 10,
        border_color: str = "white",
        highlight_symbol: str = ">> ",
        initial_selection: Optional[int] = None,
    ):
        self._items: list[str] = list(items)
        self.block = default_block(title, border_color)
        self.focus_block = bold_block(title, border_color)
        self.keymap = keymap or Keymap.shared()
        self.page_size = page_size
        self.highlight_symbol = highlight_symbol
        self.status = ""
        self._scroll = 0
        self._added = 0

        boundary = Boundary.from_sequence(self._items)
        self.selection = BoundedSelection(boundary, wrap)
        # Nothing to select yet; an empty list is not a config error
        if initial_selection is not None and self._items:
            try:
                self.selection = BoundedSelection.with_selection(
                    boundary, wrap, initial_selection
                )
            except OutOfBoundsError as e:
                # Bad initial selection is a config problem, not a crash
                logger.warning(f"Ignoring initial selection: {e}")
                self.status = str(e)

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    @property
    def selected_item(self) -> Optional[str]:
        idx = self.selection.selected
        if idx is None or idx >= len(self._items):
            return None
        return self._items[idx]

    def add_item(self, text: Optional[str] = None) -> None:
        """Append an item and move focus to it."""
        if text is None:
            self._added += 1
            text = f"New item {self._added}"
        self._items.append(text)
        self.selection.update_upper_and_select(len(self._items) - 1)
        self.status = f"Added '{text}'"
        logger.debug(f"Added item at {len(self._items) - 1}: {text}")

    def remove_selected(self) -> None:
        """Remove the selected item, keeping the selection in range."""
        idx = self.selection.selected
        if idx is None or idx >= len(self._items):
            self.status = "Nothing selected"
            return
        removed = self._items.pop(idx)
        self.selection.update_boundary_from_collection_length(len(self._items))
        self.status = f"Removed '{removed}'"
        logger.debug(f"Removed item at {idx}: {removed}")

    def select_number(self, number: int) -> None:
        """Select the item shown as ``number`` (1-based), reporting misses."""
        try:
            self.selection.select(number - 1)
        except StateError as e:
            logger.warning(f"Rejected selection: {e}")
            self.status = str(e)
        else:
            self.status = ""

    def handle_key(self, key: Keystroke) -> Message:
        action = self.keymap.action_for(key)

        if action == "quit":
            return Message.EXIT
        elif action == "help":
            return Message.SHOW_MODAL
        elif action == "up":
            self.selection.prev()
        elif action == "down":
            self.selection.next()
        elif action == "page_up":
            self.selection.prev_n(self.page_size)
        elif action == "page_down":
            self.selection.next_n(self.page_size)
        elif action == "top":
            self.selection.first()
        elif action == "bottom":
            self.selection.last()
        elif action == "add":
            self.add_item()
        elif action == "remove":
            self.remove_selected()
        elif action == "deselect":
            self.selection.deselect()
        else:
            event = parse_key(key)
            if event["type"] == "char" and event["char"].isdigit():
                self.select_number(int(event["char"]))
            return Message.IDLE

        if action not in ("add", "remove"):
            self.status = ""
        return Message.IDLE

    def _follow_selection(self, visible: int) -> int:
        selected = self.selection.selected
        if selected is not None:
            self._scroll = calculate_scroll_offset(selected, self._scroll, visible)
        # A shrunk list may leave the viewport past the end
        self._scroll = max(0, min(self._scroll, len(self._items) - visible))
        return self._scroll

    def render(self, term: Terminal, rect: Rect, dim: bool = False) -> None:
        block = self.block if dim else self.focus_block
        inner = block.render(term, rect, dim=dim or not self._items)
        if inner.height <= 0:
            return

        if not self._items:
            for row in range(inner.y, inner.bottom):
                sys.stdout.write(term.move_xy(inner.x, row) + " " * inner.width)
            notice = centered_rect(inner)
            message = "(empty - press add)"[: max(0, inner.width)]
            x = inner.x + max(0, (inner.width - len(message)) // 2)
            sys.stdout.write(term.move_xy(x, notice.y + notice.height // 2) + term.dim(message))
            return

        render_selection_list(
            term,
            inner,
            self._items,
            self.selection,
            highlight_symbol=self.highlight_symbol,
            scroll=self._follow_selection(inner.height),
            dim=dim,
        )
