"""Paints frames onto the terminal with Rich."""

from typing import IO, Optional

from rich.console import Console
from rich.text import Text

from feedboat.cli.ui.panels import (
    clear_screen,
    console as default_console,
    enter_cbreak,
    get_terminal_size,
    hide_cursor,
    move_cursor,
    reset_cursor,
    restore_terminal,
    set_alt_screen,
    show_cursor,
)
from feedboat.core.dialog_stack import DialogStack
from feedboat.core.frame import Frame
from feedboat.utils.debug import debug_render


class Screen:
    """The whole terminal, repainted once per processed event.

    Use as a context manager. Entering switches to the alternate screen and
    puts the input tty in cbreak mode (no echo, no line buffering) for the
    whole session; leaving undoes both and shows the cursor again.
    """

    def __init__(
        self, console: Optional[Console] = None, input_stream: Optional[IO] = None
    ):
        self.console = console or default_console
        self.input_stream = input_stream
        self._last_size: Optional[tuple[int, int]] = None
        self._saved_tty: Optional[list] = None

    def __enter__(self) -> "Screen":
        self._saved_tty = enter_cbreak(self.input_stream)
        set_alt_screen(True, self.console)
        clear_screen(self.console)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        clear_screen(self.console)
        set_alt_screen(False, self.console)
        show_cursor(self.console)
        restore_terminal(self._saved_tty, self.input_stream)
        self._saved_tty = None

    def new_frame(self) -> Frame:
        width, height = get_terminal_size(self.console)
        return Frame(width=width, height=height)

    def draw(self, stack: DialogStack) -> Frame:
        """Render the current dialog into a fresh frame and paint it."""
        frame = self.new_frame()
        stack.render(frame)
        self.paint(frame)
        return frame

    def paint(self, frame: Frame) -> None:
        size = (frame.width, frame.height)
        if size != self._last_size:
            # Stale cells outside the new bounds would otherwise survive
            debug_render("Full repaint", width=frame.width, height=frame.height)
            clear_screen(self.console)
            self._last_size = size
        else:
            reset_cursor(self.console)

        text = Text(no_wrap=True, overflow="crop")
        for i, (line, style) in enumerate(frame.rows()):
            if i:
                text.append("\n")
            text.append(line, style=style or None)
        self.console.print(text, end="", crop=True, highlight=False)

        if frame.cursor is None:
            hide_cursor(self.console)
        else:
            column, row = frame.cursor
            move_cursor(column, row, self.console)
            show_cursor(self.console)
