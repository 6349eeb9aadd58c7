"""Drawable surface handed to dialogs.

A frame covers the whole terminal and is split into single-row bands
(title, hints, command line) around one flexible content band:

    row 0            title
    rows 1..h-3      content
    row h-2          hints
    row h-1          command line

On terminals too short for all of them, the fixed bands are kept in the
order title, command line, hints and the content band shrinks first.
"""

from dataclasses import dataclass, field
from typing import Optional

from feedboat.utils.constants import Band, Styles
from feedboat.utils.formatting import truncate

# Fixed bands in the order they get rows when space is short
_FIXED_BANDS = (Band.TITLE, Band.COMMAND_LINE, Band.HINTS)
_BAND_ORDER = (Band.TITLE, Band.CONTENT, Band.HINTS, Band.COMMAND_LINE)


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


def layout_bands(width: int, height: int) -> dict[str, Rect]:
    """Split a width x height area into the frame's bands."""
    width = max(0, width)
    remaining = max(0, height)

    sizes = {}
    for name in _FIXED_BANDS:
        sizes[name] = 1 if remaining > 0 else 0
        remaining -= sizes[name]
    sizes[Band.CONTENT] = remaining

    bands = {}
    y = 0
    for name in _BAND_ORDER:
        bands[name] = Rect(x=0, y=y, width=width, height=sizes[name])
        y += sizes[name]
    return bands


@dataclass
class Frame:
    """What the focused dialog wants on screen for one draw.

    Attributes:
        width: Terminal columns
        height: Terminal rows
        title: Text of the title band
        hints: Text of the hints band
        content: Lines of the content band, top to bottom
        highlighted: Index into content of the highlighted (selected) line
        content_style: Rich style for non-highlighted content lines
        command_line: Text of the command-line band, None if unused
        cursor: (column, row) where the caret should be shown, None to hide it
    """

    width: int
    height: int
    title: str = ""
    hints: str = ""
    content: list[str] = field(default_factory=list)
    highlighted: Optional[int] = None
    content_style: str = Styles.TEXT
    command_line: Optional[str] = None
    cursor: Optional[tuple[int, int]] = None

    def area(self, band: str) -> Rect:
        return layout_bands(self.width, self.height)[band]

    @property
    def content_height(self) -> int:
        return self.area(Band.CONTENT).height

    def set_cursor(self, column: int, row: int) -> None:
        """Show the caret at (column, row), clipped to the frame."""
        column = max(0, min(column, self.width - 1))
        row = max(0, min(row, self.height - 1))
        self.cursor = (column, row)

    def hide_cursor(self) -> None:
        self.cursor = None

    def rows(self) -> list[tuple[str, str]]:
        """Every row of the frame as (text, style), each exactly `width` wide."""
        bands = layout_bands(self.width, self.height)
        rows: list[tuple[str, str]] = []

        def add(text: str, style: str) -> None:
            rows.append((truncate(text, self.width).ljust(self.width), style))

        if bands[Band.TITLE].height:
            add(self.title, Styles.BAR)

        content = bands[Band.CONTENT]
        for i in range(content.height):
            if i < len(self.content):
                style = Styles.SELECTED if i == self.highlighted else self.content_style
                add(self.content[i], style)
            else:
                add("", Styles.TEXT)

        if bands[Band.HINTS].height:
            add(self.hints, Styles.BAR)

        if bands[Band.COMMAND_LINE].height:
            add(self.command_line or "", Styles.COMMAND)

        return rows
