"""Core modules for feedboat.

This package provides:
- DialogStack: The open dialogs, the current one and the quit flag
- InputRouter: Global key chords vs. keys for the current dialog
- EventsSource: Blocking queue of keyboard and resize events
- SelectableList / TextLineEditor: State of the list and command-line widgets
- Frame: Surface the current dialog renders onto
"""

from feedboat.core.dialog_stack import DialogStack
from feedboat.core.events import EventsSource
from feedboat.core.frame import Frame
from feedboat.core.router import Command, InputRouter
from feedboat.core.stateful_list import SelectableList
from feedboat.core.text_line import TextLineEditor

__all__ = [
    "Command",
    "DialogStack",
    "EventsSource",
    "Frame",
    "InputRouter",
    "SelectableList",
    "TextLineEditor",
]
