"""Shared pieces of the dialog variants."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, Union

from feedboat.core.text_line import TextLineEditor

if TYPE_CHECKING:
    from feedboat.core.dialogs import Dialog


class StackControl(Protocol):
    """Controller operations a dialog may call while handling a key.

    A dialog that calls pop_self() must not assume it is still on the stack
    afterwards.
    """

    def push(self, dialog: "Dialog") -> None:
        """Open a dialog on top of the current one."""
        ...

    def pop_self(self) -> None:
        """Close the current dialog (quits if it is the last one)."""
        ...

    def set_quit(self) -> None:
        """Ask the dashboard loop to stop."""
        ...


@dataclass(frozen=True)
class NormalFocus:
    """Input goes to the dialog itself."""


@dataclass
class CommandLineFocus:
    """Input goes to the command line editor."""

    editor: TextLineEditor = field(default_factory=TextLineEditor)


Focus = Union[NormalFocus, CommandLineFocus]
