"""Selection cursor over the task list."""

from typing import Optional


class SelectionCursor:
    """Tracks the highlighted position in a list of ``length`` items.

    The cursor is absent (``None``) only while the list is empty; otherwise it
    always points inside ``[0, length)``.
    """

    def __init__(self, length: int = 0):
        self._length = max(0, int(length))
        self._selected: Optional[int] = 0 if self._length else None

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    @property
    def length(self) -> int:
        return self._length

    def next(self) -> None:
        if self._selected is None or not self._length:
            return
        self._selected = 0 if self._selected >= self._length - 1 else self._selected + 1

    def previous(self) -> None:
        if self._selected is None or not self._length:
            return
        self._selected = self._length - 1 if self._selected == 0 else self._selected - 1

    def reconcile(self, new_len: int) -> None:
        """Re-validate the cursor after the list changed size.

        An index that is still in bounds is kept (adding must not move the
        selection); one that fell off the end goes back to the top.
        """
        self._length = max(0, int(new_len))
        if not self._length:
            self._selected = None
        elif self._selected is None or self._selected >= self._length:
            self._selected = 0


__all__ = ["SelectionCursor"]
