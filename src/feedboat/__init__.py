"""feedboat - Terminal feed-reader dashboard."""

from importlib.metadata import version

__version__ = version("feedboat")

from feedboat.core.dialog_stack import DialogStack
from feedboat.core.dialogs import DetailDialog, ListDialog
from feedboat.core.router import InputRouter
from feedboat.core.stateful_list import SelectableList
from feedboat.core.text_line import TextLineEditor

__all__ = [
    "DetailDialog",
    "DialogStack",
    "InputRouter",
    "ListDialog",
    "SelectableList",
    "TextLineEditor",
]
