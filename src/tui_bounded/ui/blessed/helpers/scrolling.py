"""Pure helper functions for scrolling list-based UI components."""


def compute_scroll_window(
    selected_idx: int | None, total_options: int, visible_rows: int
) -> tuple[int, int]:
    """
    Compute the start and end indices for a scrollable window.

    Ensures the selected item is always visible within the window.

    Args:
        selected_idx: Index of currently selected option, or None
        total_options: Total number of options
        visible_rows: Number of rows available for displaying options

    Returns:
        Tuple of (start_idx, end_idx) for the visible window
    """
    if visible_rows <= 0:
        return 0, 0

    if total_options <= visible_rows:
        # All options fit, no scrolling needed
        return 0, total_options

    if selected_idx is None:
        return 0, visible_rows

    # Center the selected item in the window when possible
    half_window = visible_rows // 2
    start_idx = max(0, selected_idx - half_window)
    end_idx = min(total_options, start_idx + visible_rows)

    # Adjust if we're at the end
    if end_idx - start_idx < visible_rows:
        start_idx = max(0, end_idx - visible_rows)

    return start_idx, end_idx


def calculate_scroll_offset(
    selected: int,
    current_scroll: int,
    visible_items: int,
) -> int:
    """Calculate scroll offset to keep selected item visible in viewport.

    Unlike compute_scroll_window this keeps the viewport still until the
    selection leaves it.

    Args:
        selected: Index of the currently selected item (0-based)
        current_scroll: Current scroll offset (0-based)
        visible_items: Number of items visible in the viewport

    Returns:
        New scroll offset to keep selected item visible

    Examples:
        >>> calculate_scroll_offset(selected=15, current_scroll=0, visible_items=10)
        6
        >>> calculate_scroll_offset(selected=2, current_scroll=10, visible_items=10)
        2
        >>> calculate_scroll_offset(selected=5, current_scroll=0, visible_items=10)
        0
    """
    # Scroll down if selection goes below visible area
    if selected >= current_scroll + visible_items:
        return selected - visible_items + 1

    # Scroll up if selection goes above visible area
    elif selected < current_scroll:
        return selected

    return current_scroll
