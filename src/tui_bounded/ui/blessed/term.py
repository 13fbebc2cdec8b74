"""Terminal setup/teardown and input polling."""

from contextlib import contextmanager
from typing import Iterator, Optional

from blessed import Terminal
from blessed.keyboard import Keystroke
from loguru import logger

EVENT_TIMEOUT = 1.0  # Seconds to wait for a key before redrawing


@contextmanager
def terminal_session(term: Terminal) -> Iterator[Terminal]:
    """
    Enter fullscreen, cbreak mode with a hidden cursor.

    The terminal is restored when the block exits, including on exceptions.
    """
    logger.debug("Entering terminal session")
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            yield term
    finally:
        logger.debug("Terminal restored")


def poll_event(term: Terminal, timeout: float = EVENT_TIMEOUT) -> Optional[Keystroke]:
    """
    Wait up to ``timeout`` seconds for a keystroke.

    Returns:
        The keystroke, or None when the timeout passed without input
    """
    key = term.inkey(timeout=timeout)
    return key if key else None
