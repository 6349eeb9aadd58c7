"""Terminal control helpers shared by the dashboard screen."""

import os
import sys
from typing import IO, Optional

from rich.console import Console
from rich.control import Control

from feedboat.utils.constants import DEFAULT_TERMINAL_HEIGHT, DEFAULT_TERMINAL_WIDTH

console = Console(highlight=False)


def clear_screen(target: Optional[Console] = None) -> None:
    """Clear terminal screen and hide cursor."""
    target = target or console
    target.control(Control.show_cursor(False), Control.clear(), Control.home())


def reset_cursor(target: Optional[Console] = None) -> None:
    """Move cursor to home position without clearing.

    This allows overwriting content in place, avoiding flicker.
    Cursor should already be hidden by clear_screen().
    """
    (target or console).control(Control.home())


def show_cursor(target: Optional[Console] = None) -> None:
    """Show the cursor (call after rendering)."""
    (target or console).control(Control.show_cursor(True))


def hide_cursor(target: Optional[Console] = None) -> None:
    (target or console).control(Control.show_cursor(False))


def move_cursor(column: int, row: int, target: Optional[Console] = None) -> None:
    """Put the terminal cursor at a zero-based (column, row)."""
    (target or console).control(Control.move_to(column, row))


def set_alt_screen(enable: bool, target: Optional[Console] = None) -> None:
    """Switch to (or back from) the terminal's alternate screen buffer."""
    (target or console).control(Control.alt_screen(enable))


def enter_cbreak(stream: Optional[IO] = None) -> Optional[list]:
    """Turn off echo and line buffering on a tty input stream.

    Returns the previous terminal attributes for restore_terminal(), or None
    if the stream is not a tty (nothing is changed then).
    """
    if sys.platform == "win32":
        return None
    stream = stream or sys.stdin
    try:
        fd = stream.fileno()
    except (AttributeError, ValueError, OSError):
        return None
    if not os.isatty(fd):
        return None

    import termios
    import tty

    saved = termios.tcgetattr(fd)
    tty.setcbreak(fd, termios.TCSADRAIN)
    return saved


def restore_terminal(saved: Optional[list], stream: Optional[IO] = None) -> None:
    """Put back the attributes returned by enter_cbreak()."""
    if saved is None:
        return
    import termios

    termios.tcsetattr((stream or sys.stdin).fileno(), termios.TCSADRAIN, saved)


def get_terminal_size(target: Optional[Console] = None) -> tuple[int, int]:
    """Get terminal width and height."""
    size = (target or console).size
    width = size.width if size.width > 0 else DEFAULT_TERMINAL_WIDTH
    height = size.height if size.height > 0 else DEFAULT_TERMINAL_HEIGHT
    return width, height
