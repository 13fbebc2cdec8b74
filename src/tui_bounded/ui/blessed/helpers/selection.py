"""Selection list rendering driven by a BoundedSelection."""

import sys
from typing import Optional, Sequence

from blessed import Terminal

from tui_bounded.state import BoundedSelection

from ..layout import Rect
from ..styles import DIM_COLOR, highlight_style
from .scrolling import compute_scroll_window
from .terminal import fit_text


def render_selection_list(
    term: Terminal,
    rect: Rect,
    options: Sequence[str],
    selection: BoundedSelection,
    *,
    highlight_symbol: str = ">> ",
    scroll: Optional[int] = None,
    dim: bool = False,
) -> int:
    """
    Render a list of options with the selected row highlighted.

    Only reads the selection; navigation is the caller's job.

    Args:
        term: blessed Terminal instance
        rect: Region to draw in (usually a Block's inner rect)
        options: Option strings to display
        selection: Selection state deciding which row is highlighted
        highlight_symbol: Marker drawn before the selected row
        scroll: First visible index; None centers the selection
        dim: Gray out the rows (for unfocused components)

    Returns:
        Number of rows rendered
    """
    if rect.height <= 0 or rect.width <= 0:
        return 0

    total = len(options)
    if scroll is None:
        start_idx, end_idx = compute_scroll_window(
            selection.selected, total, rect.height
        )
    else:
        start_idx = max(0, scroll)
        end_idx = min(total, start_idx + rect.height)

    highlight = highlight_style(term)
    blank_prefix = " " * len(highlight_symbol)
    line_num = 0

    for idx in range(start_idx, end_idx):
        if selection.is_selected(idx):
            text = fit_text(highlight_symbol + options[idx], rect.width)
            styled = term.color(DIM_COLOR)(text) if dim else highlight(text)
        else:
            text = fit_text(blank_prefix + options[idx], rect.width)
            styled = term.color(DIM_COLOR)(text) if dim else text
        sys.stdout.write(term.move_xy(rect.x, rect.y + line_num) + styled)
        line_num += 1

    # Blank out rows left over from a longer list
    for row in range(line_num, rect.height):
        sys.stdout.write(term.move_xy(rect.x, rect.y + row) + " " * rect.width)

    return line_num
