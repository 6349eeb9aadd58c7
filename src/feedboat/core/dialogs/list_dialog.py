"""List-backed dialog (feed list, article list)."""

from typing import TYPE_CHECKING, Callable, Iterable, Optional

from feedboat.core import events
from feedboat.core.dialogs.base import (
    CommandLineFocus,
    Focus,
    NormalFocus,
    StackControl,
)
from feedboat.core.events import Char, Key
from feedboat.core.frame import Frame
from feedboat.core.stateful_list import SelectableList
from feedboat.core.text_line import TextLineEditor
from feedboat.utils.constants import (
    APP_TITLE,
    COMMAND_PROMPT,
    QUIT_COMMAND,
    Band,
    Styles,
)
from feedboat.utils.debug import debug_input
from feedboat.utils.formatting import calculate_visible_range, format_scroll_indicator

if TYPE_CHECKING:
    from feedboat.core.dialogs import Dialog

# Builds the dialog opened by Enter, from (index, item)
Opener = Callable[[int, str], "Dialog"]

LIST_HINTS = "q:Quit UP:Previous DOWN:Next ENTER:Open ::Command"


class ListDialog:
    """A selectable list with an optional command line.

    Attributes:
        title: Shown in the title band
        list: The items and current selection
        focus: NormalFocus, or CommandLineFocus while a command is typed
    """

    def __init__(
        self,
        title: str,
        items: Iterable[str] = (),
        opener: Optional[Opener] = None,
        hints: str = LIST_HINTS,
    ):
        self.title = title
        self.list = SelectableList(items)
        self.focus: Focus = NormalFocus()
        self.hints = hints
        self._opener = opener
        # First visible row at the last render
        self._scroll_offset = 0

    @property
    def command_line(self) -> Optional[TextLineEditor]:
        """The command-line editor while it has focus."""
        if isinstance(self.focus, CommandLineFocus):
            return self.focus.editor
        return None

    def handle_key(self, key: Key, stack: StackControl) -> None:
        if isinstance(self.focus, CommandLineFocus):
            self._handle_command_line_key(key, self.focus.editor, stack)
        else:
            self._handle_list_key(key, stack)

    def _handle_list_key(self, key: Key, stack: StackControl) -> None:
        if key in (events.UP, Char("k")):
            self.list.previous()
        elif key in (events.DOWN, Char("j")):
            self.list.next()
        elif key == events.ENTER:
            self._open_selected(stack)
        elif key == Char("q"):
            stack.pop_self()
        elif key == Char(COMMAND_PROMPT):
            self.focus = CommandLineFocus(TextLineEditor())

    def _open_selected(self, stack: StackControl) -> None:
        index = self.list.selected
        if index is None or self._opener is None:
            return
        stack.push(self._opener(index, self.list.items[index]))

    def _handle_command_line_key(
        self, key: Key, editor: TextLineEditor, stack: StackControl
    ) -> None:
        if key == events.ENTER:
            self._run_command(editor.text, stack)
        elif key == events.ESC:
            self.focus = NormalFocus()
        elif key == events.BACKSPACE:
            editor.delete_before_cursor()
        elif key == events.DELETE:
            editor.delete_at_cursor()
        elif key == events.LEFT:
            editor.move_left(1)
        elif key == events.RIGHT:
            editor.move_right(1)
        elif key == events.HOME:
            editor.move_home()
        elif key == events.END:
            editor.move_end()
        elif isinstance(key, Char) and key.char.isprintable():
            editor.insert_char(key.char)

    def _run_command(self, command: str, stack: StackControl) -> None:
        debug_input("Command entered", command=command, dialog=self.title)
        if command == QUIT_COMMAND:
            stack.set_quit()
        else:
            self.focus = NormalFocus()

    def render(self, frame: Frame) -> None:
        frame.title = f"{APP_TITLE} - {self.title}"
        frame.content_style = Styles.ITEM

        height = frame.content_height
        selected = self.list.selected
        start, end, self._scroll_offset = calculate_visible_range(
            selected or 0, len(self.list), height, self._scroll_offset
        )
        frame.content = list(self.list.items[start:end])
        if selected is not None and start <= selected < end:
            frame.highlighted = selected - start
        else:
            frame.highlighted = None

        top, bottom = format_scroll_indicator(start, len(self.list) - end)
        frame.hints = " • ".join(part for part in (self.hints, top, bottom) if part)

        self._render_command_line(frame)

    def _render_command_line(self, frame: Frame) -> None:
        editor = self.command_line
        area = frame.area(Band.COMMAND_LINE)
        if editor is None or area.height == 0:
            frame.command_line = None
            frame.hide_cursor()
            return

        visible = editor.visible_slice(area.width - len(COMMAND_PROMPT))
        frame.command_line = COMMAND_PROMPT + visible
        frame.set_cursor(
            area.x + len(COMMAND_PROMPT) + editor.display_cursor_offset(), area.y
        )
