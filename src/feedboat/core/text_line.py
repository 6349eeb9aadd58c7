"""An input field for a single line of plain text."""

from typing import Optional


class TextLineEditor:
    """Editable line of text with a cursor and a horizontally scrolling viewport.

    The screen might be too narrow to show the whole text, but the cursor
    must always be visible. Two offsets track that:

    - `viewport_offset`: number of characters at the front of the text that
      are scrolled out of the display area;
    - `cursor_position`: the cursor's offset inside the text.

    Invariant: 0 <= viewport_offset <= cursor_position <= len(text). After
    `visible_slice(width)`, cursor_position - viewport_offset <= width - 1,
    i.e. the last column of the area is kept free for the caret.
    """

    def __init__(self, text: str = ""):
        self._text = ""
        self._cursor_position = 0
        self._viewport_offset = 0
        # Width of the area at the last render, if there was one
        self._viewport_width: Optional[int] = None
        if text:
            self.set_text(text)

    @property
    def text(self) -> str:
        """Currently entered text."""
        return self._text

    @property
    def cursor_position(self) -> int:
        return self._cursor_position

    @property
    def viewport_offset(self) -> int:
        return self._viewport_offset

    def display_cursor_offset(self) -> int:
        """Cursor column inside the display area (as of the last render)."""
        return self._cursor_position - self._viewport_offset

    def _reestablish_invariants(self) -> None:
        """Clip the cursor to the text and pull the viewport back to it."""
        self._cursor_position = max(0, min(self._cursor_position, len(self._text)))
        if self._viewport_offset > self._cursor_position:
            self._viewport_offset = self._cursor_position

    def _set_cursor_position(self, new_position: int) -> None:
        self._cursor_position = new_position
        self._reestablish_invariants()

    def insert_char(self, c: str) -> None:
        """Put the character at the cursor and advance the cursor past it."""
        pos = self._cursor_position
        self._text = self._text[:pos] + c + self._text[pos:]
        self.move_right(len(c))

    put_char = insert_char

    def delete_at_cursor(self) -> None:
        """Remove the character under the cursor. No-op at the end of text."""
        pos = self._cursor_position
        if pos >= len(self._text):
            return
        self._text = self._text[:pos] + self._text[pos + 1 :]
        self._reestablish_invariants()

    def delete_before_cursor(self) -> None:
        """Remove the character left of the cursor (backspace)."""
        pos = self._cursor_position
        if pos == 0:
            return
        self._text = self._text[: pos - 1] + self._text[pos:]
        self._set_cursor_position(pos - 1)

    def move_left(self, n: int = 1) -> None:
        """Move cursor left by `n` characters. Stop at the start of the text."""
        self._set_cursor_position(self._cursor_position - max(0, n))

    def move_right(self, n: int = 1) -> None:
        """Move cursor right by `n` characters. Stop at the end of the text."""
        self._set_cursor_position(self._cursor_position + max(0, n))

    def move_home(self) -> None:
        self._set_cursor_position(0)

    def move_end(self) -> None:
        self._set_cursor_position(len(self._text))

    def set_text(self, s: str) -> None:
        """Replace the text and put the cursor at its end."""
        self._text = s
        self._viewport_offset = 0
        self._set_cursor_position(len(s))
        if self._viewport_width is not None:
            self._make_cursor_visible(self._viewport_width)

    def _make_cursor_visible(self, width: int) -> None:
        # One column is reserved for the caret itself
        diff = max(0, (self._cursor_position - self._viewport_offset) - (width - 1))
        if diff > 0:
            # Cursor is past the right edge; shift the viewport so the cursor
            # sits in the last column.
            self._viewport_offset += diff
        if self._viewport_offset > self._cursor_position:
            self._viewport_offset = self._cursor_position

    def visible_slice(self, width: int) -> str:
        """Scroll so the cursor is visible in `width` columns and return that window.

        Widths below 1 are treated as 1.
        """
        width = max(1, width)
        self._viewport_width = width
        self._make_cursor_visible(width)
        return self._text[self._viewport_offset : self._viewport_offset + width]

    def __repr__(self) -> str:
        return (
            f"TextLineEditor(text={self._text!r}, cursor_position={self._cursor_position}, "
            f"viewport_offset={self._viewport_offset})"
        )
