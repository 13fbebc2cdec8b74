"""Bordered, titled blocks drawn with box characters."""

import sys
from dataclasses import dataclass
from typing import Callable

from blessed import Terminal
from loguru import logger

from ..layout import Rect

DIM_COLOR = 8  # Indexed grey used to gray out inactive blocks


def border_formatter(
    term: Terminal, color: str, *, bold: bool = False, dim: bool = False
) -> Callable[[str], str]:
    """Formatter for border text; dimming wins over color and bold."""
    if dim:
        return term.color(DIM_COLOR)
    name = f"bold_{color}" if bold else color
    try:
        return getattr(term, name)
    except (AttributeError, TypeError):
        logger.warning(f"Unknown border color '{color}', using white")
        return term.bold_white if bold else term.white


@dataclass(frozen=True)
class Block:
    """A box with a title in its top border."""

    title: str
    border_color: str = "white"
    bold: bool = False

    def render(self, term: Terminal, rect: Rect, dim: bool = False) -> Rect:
        """
        Draw the block outline.

        Args:
            term: blessed Terminal instance
            rect: Region the block occupies, borders included
            dim: Gray out the border (for unfocused components)

        Returns:
            The inner rect available for content
        """
        if rect.width < 2 or rect.height < 2:
            return Rect(rect.x, rect.y, 0, 0)

        fmt = border_formatter(term, self.border_color, bold=self.bold, dim=dim)
        inner_width = rect.width - 2

        title = f" {self.title} " if self.title else ""
        title = title[:inner_width]
        top = "┌" + title + "─" * (inner_width - len(title)) + "┐"
        bottom = "└" + "─" * inner_width + "┘"

        # Borders only; clearing to end of line would wipe neighbouring blocks
        sys.stdout.write(term.move_xy(rect.x, rect.y) + fmt(top))
        for row in range(rect.y + 1, rect.bottom - 1):
            sys.stdout.write(term.move_xy(rect.x, row) + fmt("│"))
            sys.stdout.write(term.move_xy(rect.right - 1, row) + fmt("│"))
        sys.stdout.write(term.move_xy(rect.x, rect.bottom - 1) + fmt(bottom))

        return rect.inner()


def default_block(title: str, border_color: str = "white") -> Block:
    return Block(title, border_color)


def bold_block(title: str, border_color: str = "white") -> Block:
    return Block(title, border_color, bold=True)
