"""A list of strings with an optional selected index."""

from typing import Iterable, Optional


class SelectableList:
    """Ordered string items plus the index of the selected one.

    Invariant: when there are items, `selected` is a valid index into them;
    when there are none, `selected` is None. Navigation saturates at both
    ends instead of wrapping.
    """

    def __init__(self, items: Optional[Iterable[str]] = None):
        self._items: list[str] = []
        self._selected: Optional[int] = None
        if items is not None:
            self.set_items(items)

    @property
    def items(self) -> tuple[str, ...]:
        """Items in display order."""
        return tuple(self._items)

    @property
    def selected(self) -> Optional[int]:
        """Index of the selected item, or None if the list is empty."""
        return self._selected

    @property
    def selected_item(self) -> Optional[str]:
        """The selected item itself, or None if the list is empty."""
        if self._selected is None:
            return None
        return self._items[self._selected]

    def __len__(self) -> int:
        return len(self._items)

    def set_items(self, items: Iterable[str]) -> None:
        """Replace the contents and select the first item (if any)."""
        self._items = list(items)
        self._selected = 0 if self._items else None

    def next(self) -> None:
        """Move to the next item. If already at the last one, stay there."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
            return
        self._selected = min(self._selected + 1, len(self._items) - 1)

    def previous(self) -> None:
        """Move to the previous item. If already at the first one, stay there."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
            return
        self._selected = max(self._selected - 1, 0)
