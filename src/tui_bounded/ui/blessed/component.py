"""Base class for drawable, input-handling UI components."""

from abc import ABC, abstractmethod
from enum import Enum

from blessed import Terminal
from blessed.keyboard import Keystroke

from .layout import Rect


class Message(Enum):
    """What a component asks its owner to do after handling a key."""

    IDLE = "idle"
    SHOW_MODAL = "show_modal"  # Hand focus to the modal
    BACK = "back"  # Return focus to the main component
    EXIT = "exit"


class Component(ABC):
    """A region of the screen that draws itself and optionally takes input."""

    @abstractmethod
    def render(self, term: Terminal, rect: Rect, dim: bool = False) -> None:
        """
        Draw the component.

        Args:
            term: blessed Terminal instance
            rect: Region to draw in
            dim: Gray out the component (e.g. while another one has focus)
        """

    def handle_key(self, key: Keystroke) -> Message:
        """Handle a keystroke. Components without input ignore it."""
        return Message.IDLE
