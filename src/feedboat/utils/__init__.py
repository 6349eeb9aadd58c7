"""Utilities for feedboat."""

from feedboat.utils.formatting import (
    calculate_visible_range,
    format_scroll_indicator,
    truncate,
    wrap_lines,
)

__all__ = [
    "calculate_visible_range",
    "format_scroll_indicator",
    "truncate",
    "wrap_lines",
]
