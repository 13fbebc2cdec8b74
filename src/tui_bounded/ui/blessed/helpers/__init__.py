"""Blessed UI helper functions."""

from .terminal import write_at, fit_text
from .scrolling import compute_scroll_window, calculate_scroll_offset
from .selection import render_selection_list

__all__ = [
    "write_at",
    "fit_text",
    "compute_scroll_window",
    "calculate_scroll_offset",
    "render_selection_list",
]
