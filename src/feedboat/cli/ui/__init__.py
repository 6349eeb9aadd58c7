"""UI components for the terminal dashboard."""

from feedboat.cli.ui.panels import (
    clear_screen,
    console,
    get_terminal_size,
    show_cursor,
)
from feedboat.cli.ui.screen import Screen

__all__ = [
    "Screen",
    "clear_screen",
    "console",
    "get_terminal_size",
    "show_cursor",
]
