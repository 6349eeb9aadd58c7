"""The stack of open dialogs and the quit flag."""

from typing import TYPE_CHECKING

from feedboat.core.events import Key
from feedboat.core.frame import Frame
from feedboat.utils.debug import debug_stack

if TYPE_CHECKING:
    from feedboat.core.dialogs import Dialog


class DialogStack:
    """Ordered collection of open dialogs.

    The stack is seeded with one dialog and never becomes empty: popping the
    last dialog requests quit instead of removing it. The current dialog
    (the one that is drawn and receives keys) is normally the most recently
    pushed one, but cycling can move focus to any other entry.

    Attributes:
        should_quit: Set when the dashboard loop should stop
    """

    def __init__(self, root: "Dialog"):
        self._entries: list["Dialog"] = [root]
        self._current = 0
        self.should_quit = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple["Dialog", ...]:
        """Open dialogs, oldest first."""
        return tuple(self._entries)

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def current(self) -> "Dialog":
        """The dialog that is drawn and receives input."""
        return self._entries[self._current]

    def push(self, dialog: "Dialog") -> None:
        """Add dialog to the top of the stack and make it current."""
        self._entries.append(dialog)
        self._current = len(self._entries) - 1
        debug_stack("Pushed dialog", kind=type(dialog).__name__, depth=len(self))

    def pop_self(self) -> None:
        """Remove the current dialog; the topmost remaining one becomes current.

        With a single dialog open this requests quit and leaves it in place.
        """
        if len(self._entries) == 1:
            debug_stack("Pop on last dialog, quitting")
            self.set_quit()
            return

        removed = self._entries.pop(self._current)
        self._current = len(self._entries) - 1
        debug_stack("Popped dialog", kind=type(removed).__name__, depth=len(self))

    def cycle_next(self) -> None:
        """Switch to the next dialog, wrapping to the first one at the end."""
        self._current = (self._current + 1) % len(self._entries)
        debug_stack("Cycled forward", current=self._current)

    def cycle_previous(self) -> None:
        """Switch to the previous dialog, wrapping to the last one at the start."""
        self._current = (self._current - 1) % len(self._entries)
        debug_stack("Cycled backward", current=self._current)

    def set_quit(self) -> None:
        self.should_quit = True

    def handle_key(self, key: Key) -> None:
        """Pass key to the current dialog.

        Once quit has been requested no more keys are delegated.
        """
        if self.should_quit:
            return
        self.current.handle_key(key, self)

    def render(self, frame: Frame) -> None:
        """Draw the current dialog (only) onto frame."""
        self.current.render(frame)
