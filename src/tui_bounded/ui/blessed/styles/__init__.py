"""Styling helpers for blessed UI."""

from typing import Callable

from blessed import Terminal

from .blocks import Block, bold_block, default_block, DIM_COLOR


def highlight_style(term: Terminal) -> Callable[[str], str]:
    """Bold text on a grey background, for the selected row of a list."""
    return lambda text: term.bold(term.on_color(DIM_COLOR)(text))


__all__ = ["Block", "bold_block", "default_block", "highlight_style", "DIM_COLOR"]
