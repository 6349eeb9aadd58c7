"""A dialog displaying an article."""

from typing import Iterable

from feedboat.core import events
from feedboat.core.dialogs.base import StackControl
from feedboat.core.events import Char, Key
from feedboat.core.frame import Frame
from feedboat.utils.constants import APP_TITLE, Styles
from feedboat.utils.formatting import wrap_lines

DETAIL_HINTS = "q:Quit UP:Scroll up DOWN:Scroll down PGUP/PGDN:Page"


class DetailDialog:
    """Scrollable, word-wrapped lines of text.

    `scroll_offset` counts wrapped lines skipped at the top. It never goes
    below zero or past the last wrapped line.
    """

    def __init__(self, title: str, lines: Iterable[str], header: Iterable[str] = ()):
        self.title = title
        self.lines = [*header, *lines]
        self.scroll_offset = 0
        # Wrapped line count and page height as of the last render
        self._line_count = len(self.lines)
        self._page_height = 1

    def _scroll_to(self, offset: int) -> None:
        self.scroll_offset = max(0, min(offset, self._line_count - 1))

    def handle_key(self, key: Key, stack: StackControl) -> None:
        if key == Char("q"):
            stack.pop_self()
        elif key in (events.UP, Char("k")):
            self._scroll_to(self.scroll_offset - 1)
        elif key in (events.DOWN, Char("j")):
            self._scroll_to(self.scroll_offset + 1)
        elif key == events.PAGE_UP:
            self._scroll_to(self.scroll_offset - self._page_height)
        elif key in (events.PAGE_DOWN, Char(" ")):
            self._scroll_to(self.scroll_offset + self._page_height)
        elif key == events.HOME:
            self._scroll_to(0)
        elif key == events.END:
            self._scroll_to(self._line_count - 1)

    def render(self, frame: Frame) -> None:
        frame.title = f"{APP_TITLE} - Article '{self.title}'"
        frame.hints = DETAIL_HINTS
        frame.content_style = Styles.TEXT
        frame.highlighted = None
        frame.command_line = None
        frame.hide_cursor()

        wrapped = wrap_lines(self.lines, frame.width)
        self._line_count = len(wrapped)
        self._page_height = max(1, frame.content_height)
        # Re-wrapping after a resize can leave the offset past the end
        self._scroll_to(self.scroll_offset)

        frame.content = wrapped[self.scroll_offset : self.scroll_offset + frame.content_height]
