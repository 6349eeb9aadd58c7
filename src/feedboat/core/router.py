"""Classify incoming keys before the current dialog sees them."""

from enum import Enum
from typing import Optional

from feedboat.core.dialog_stack import DialogStack
from feedboat.core.events import Event, Key, KeyEvent, ResizeEvent, ctrl
from feedboat.utils.constants import DEFAULT_CYCLE_NEXT_KEY, DEFAULT_CYCLE_PREVIOUS_KEY
from feedboat.utils.debug import debug_input


class Command(Enum):
    """What to do with a key."""

    QUIT = "quit"
    CYCLE_NEXT = "cycle_next"
    CYCLE_PREVIOUS = "cycle_previous"
    DELEGATE = "delegate"


class InputRouter:
    """Turns events into stack operations.

    Global chords (Ctrl+C, Ctrl+<next>, Ctrl+<previous>) act on the stack
    directly; every other key goes to the current dialog. `q` and `:` are
    dialog bindings, since a dialog with command-line focus must receive
    them as ordinary characters.
    """

    def __init__(
        self,
        next_char: str = DEFAULT_CYCLE_NEXT_KEY,
        previous_char: str = DEFAULT_CYCLE_PREVIOUS_KEY,
    ):
        # Quit goes last so no cycle key can shadow Ctrl+C
        self._bindings: dict[Key, Command] = {
            ctrl(next_char): Command.CYCLE_NEXT,
            ctrl(previous_char): Command.CYCLE_PREVIOUS,
            ctrl("c"): Command.QUIT,
        }

    @classmethod
    def from_config(cls, config) -> "InputRouter":
        """Build a router from validated config key bindings."""
        config.validate()
        return cls(config.cycle_next_key, config.cycle_previous_key)

    def classify(self, key: Key) -> Command:
        return self._bindings.get(key, Command.DELEGATE)

    def dispatch(self, stack: DialogStack, event: Event) -> Optional[Command]:
        """Apply one event to the stack and return how its key was classified.

        Resize events change nothing (the next draw picks up the new size)
        and return None.
        """
        if isinstance(event, ResizeEvent):
            debug_input("Terminal resized")
            return None
        if not isinstance(event, KeyEvent):
            debug_input("Dropped unknown event", event=repr(event))
            return None

        command = self.classify(event.key)
        if command is Command.QUIT:
            stack.set_quit()
        elif command is Command.CYCLE_NEXT:
            stack.cycle_next()
        elif command is Command.CYCLE_PREVIOUS:
            stack.cycle_previous()
        else:
            stack.handle_key(event.key)
        return command
