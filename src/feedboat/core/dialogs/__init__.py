"""Dialog variants.

The set of dialogs is closed: the stack holds ListDialog and DetailDialog
instances only.
"""

from typing import Union

from feedboat.core.dialogs.base import (
    CommandLineFocus,
    Focus,
    NormalFocus,
    StackControl,
)
from feedboat.core.dialogs.detail_dialog import DetailDialog
from feedboat.core.dialogs.list_dialog import ListDialog

Dialog = Union[ListDialog, DetailDialog]

__all__ = [
    "CommandLineFocus",
    "DetailDialog",
    "Dialog",
    "Focus",
    "ListDialog",
    "NormalFocus",
    "StackControl",
]
