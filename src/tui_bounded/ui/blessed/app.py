"""Main event loop and entry point for the blessed list demo."""

import sys
from enum import Enum
from typing import Optional

from blessed import Terminal
from loguru import logger

from tui_bounded.core.config import Config
from tui_bounded.state import WrapPolicy

from .component import Message
from .components import HelpModal, KeyHelp, ListView, SelectionDetails
from .helpers import fit_text, write_at
from .keys import Keymap
from .layout import Ratio, Rect, centered_rect, h_split, v_split
from .term import EVENT_TIMEOUT, poll_event, terminal_session

STATUS_HEIGHT = 1


class Focus(Enum):
    """Which component receives keystrokes."""

    LIST = "list"
    MODAL = "modal"


def initial_items(config: Config) -> list[str]:
    """Items from config, or generated placeholders when none are listed."""
    if config.ui.items:
        return list(config.ui.items)
    return [f"Item {i}" for i in range(1, config.ui.initial_items + 1)]


class App:
    """
    List view on the left, selection details and key help on the right.

    Keys go to the focused component. The list hands focus to the help
    modal with Message.SHOW_MODAL; the modal hands it back with Message.BACK.
    """

    def __init__(self, config: Config, keymap: Optional[Keymap] = None):
        self.keymap = keymap or Keymap.shared()
        wrap = WrapPolicy.WRAP if config.ui.wrap else WrapPolicy.CLAMP
        self.list_view = ListView(
            initial_items(config),
            title=config.ui.title,
            wrap=wrap,
            keymap=self.keymap,
            page_size=config.ui.page_size,
            border_color=config.ui.border_color,
            highlight_symbol=config.ui.highlight_symbol,
            initial_selection=config.ui.initial_selection,
        )
        self.details = SelectionDetails(self.list_view, config.ui.border_color)
        self.key_help = KeyHelp(self.keymap, config.ui.border_color)
        self.help_modal = HelpModal(self.keymap, config.ui.border_color)
        self.focus = Focus.LIST

    def layout(self, screen: Rect) -> dict[str, Rect]:
        """
        Pure function: calculate regions for every component.

        Returns:
            Dictionary with "list", "details", "help" and "status" rects
        """
        body_height = max(0, screen.height - STATUS_HEIGHT)
        body = Rect(screen.x, screen.y, screen.width, body_height)
        list_rect, side = v_split(body, Ratio(65, 35))
        details_rect, help_rect = h_split(side, Ratio(40, 60))
        status_rect = Rect(screen.x, body.bottom, screen.width, STATUS_HEIGHT)
        return {
            "list": list_rect,
            "details": details_rect,
            "help": help_rect,
            "status": status_rect,
        }

    def draw(self, term: Terminal) -> None:
        screen = Rect.from_terminal(term)
        regions = self.layout(screen)
        modal_open = self.focus is Focus.MODAL

        self.list_view.render(term, regions["list"], dim=modal_open)
        self.details.render(term, regions["details"], dim=True)
        self.key_help.render(term, regions["help"], dim=True)

        status = regions["status"]
        status_text = fit_text(self.list_view.status, status.width)
        write_at(term, status.x, status.y, term.reverse(status_text))

        if modal_open:
            self.help_modal.render(term, centered_rect(screen))
        sys.stdout.flush()

    def handle_key(self, key) -> Message:
        if self.focus is Focus.MODAL:
            message = self.help_modal.handle_key(key)
        else:
            message = self.list_view.handle_key(key)

        if message is Message.SHOW_MODAL:
            self.focus = Focus.MODAL
            logger.debug("Focus: help modal")
            return Message.IDLE
        if message is Message.BACK:
            self.focus = Focus.LIST
            logger.debug("Focus: list")
            return Message.IDLE
        return message


def main_loop(term: Terminal, app: App, timeout: float = EVENT_TIMEOUT) -> None:
    """
    Draw, wait for input, dispatch; until a component asks to exit.

    Args:
        term: blessed Terminal instance
        app: Application to drive
        timeout: Seconds to wait for input before redrawing
    """
    while True:
        app.draw(term)
        key = poll_event(term, timeout)
        if key is None:
            continue
        if app.handle_key(key) is Message.EXIT:
            logger.info("Exit requested")
            return


def run_app(config: Config, keymap: Optional[Keymap] = None) -> None:
    """
    Run the interactive list demo until the quit key is pressed.

    Args:
        config: Loaded configuration
        keymap: Keybindings (default: the shared keymap)
    """
    term = Terminal()
    app = App(config, keymap)

    with terminal_session(term):
        try:
            main_loop(term, app)
        except KeyboardInterrupt:
            logger.info("Ctrl+C detected - exiting")
