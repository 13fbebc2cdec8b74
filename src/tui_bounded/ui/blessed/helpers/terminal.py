"""Terminal output utilities that prevent rendering artifacts."""

import sys

from blessed import Terminal


def write_at(
    term: Terminal, x: int, y: int, content: str, *, clear: bool = True
) -> None:
    """Write content at position, clearing the rest of the line by default.

    Args:
        term: Blessed terminal instance
        x: Column position (0-indexed)
        y: Row position (0-indexed)
        content: Text to write (can include terminal formatting)
        clear: Whether to clear to end of line (default True). Pass False
               when drawing inside a region that shares its rows.
    """
    if clear:
        sys.stdout.write(term.move_xy(x, y) + term.clear_eol + content)
    else:
        sys.stdout.write(term.move_xy(x, y) + content)


def fit_text(text: str, width: int) -> str:
    """Truncate or pad plain text to exactly ``width`` cells.

    Apply styling after fitting; padding a formatted string would count the
    escape sequences as cells.
    """
    if width <= 0:
        return ""
    if len(text) > width:
        if width <= 3:
            return text[:width]
        return text[: width - 3] + "..."
    return text.ljust(width)
