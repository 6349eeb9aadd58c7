"""Formatting utilities for feedboat."""

import textwrap


def calculate_visible_range(
    cursor: int,
    total_items: int,
    max_visible: int,
    scroll_offset: int = 0,
) -> tuple[int, int, int]:
    """Calculate visible window for scrolling list.

    Args:
        cursor: Current cursor position
        total_items: Total number of items
        max_visible: Maximum items that fit on screen
        scroll_offset: Current scroll offset

    Returns:
        Tuple of (start_idx, end_idx, new_scroll_offset)
    """
    if max_visible <= 0:
        return 0, 0, scroll_offset
    if total_items <= max_visible:
        return 0, total_items, 0

    # Adjust scroll to keep cursor visible
    if cursor < scroll_offset:
        scroll_offset = cursor
    elif cursor >= scroll_offset + max_visible:
        scroll_offset = cursor - max_visible + 1
    scroll_offset = min(scroll_offset, total_items - max_visible)

    start = scroll_offset
    end = min(start + max_visible, total_items)

    return start, end, scroll_offset


def format_scroll_indicator(hidden_above: int, hidden_below: int) -> tuple[str, str]:
    """Format scroll indicators.

    Returns:
        Tuple of (top_indicator, bottom_indicator)
    """
    top = f"↑ {hidden_above} more" if hidden_above > 0 else ""
    bottom = f"↓ {hidden_below} more" if hidden_below > 0 else ""
    return top, bottom


def truncate(text: str, max_len: int) -> str:
    """Truncate text for a fixed-width band."""
    if max_len <= 0:
        return ""
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return text[:max_len]
    return text[: max_len - 3] + "..."


def wrap_lines(lines: list[str], width: int) -> list[str]:
    """Word-wrap paragraphs to width, keeping blank lines as separators."""
    width = max(1, width)
    wrapped: list[str] = []
    for line in lines:
        line = line.rstrip("\n")
        if not line.strip():
            wrapped.append("")
            continue
        wrapped.extend(
            textwrap.wrap(line, width=width, break_long_words=True, break_on_hyphens=False)
        )
    return wrapped
