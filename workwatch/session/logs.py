"""Session log store."""

from typing import Iterator, List, Optional


class SessionLogs:
    """Ordered free-text logs for the current session plus a selection.

    ``selected`` is None exactly when there are no entries; otherwise it
    always points at a valid entry.
    """

    def __init__(self, entries: Optional[List[str]] = None):
        self._entries: List[str] = list(entries or [])
        self.selected: Optional[int] = 0 if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    @property
    def entries(self) -> List[str]:
        """A copy of the entries, safe to hand to another thread."""
        return list(self._entries)

    @property
    def selected_entry(self) -> Optional[str]:
        if self.selected is None:
            return None
        return self[self.selected]

    def is_valid_index(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self._entries)

    def append(self, text: str):
        """Add an entry at the end; select the first entry if none was selected."""
        self._entries.append(text)
        if self.selected is None:
            self.selected = 0

    def replace(self, index: int, text: str) -> bool:
        """Overwrite the entry at ``index``.

        Returns:
            False if the index no longer exists
        """
        if not self.is_valid_index(index):
            return False
        self._entries[index] = text
        return True

    def delete_selected(self) -> Optional[str]:
        """Remove the selected entry and step the selection back by one.

        Returns:
            The removed text, or None when nothing was selected
        """
        if self.selected is None:
            return None

        index = self.selected
        removed = self._entries.pop(index)
        if not self._entries:
            self.selected = None
        else:
            self.selected = min(max(index - 1, 0), len(self._entries) - 1)
        return removed

    def select_previous(self):
        """Move the selection up, wrapping to the last entry."""
        if self.selected is None:
            return
        count = len(self._entries)
        self.selected = (self.selected - 1 + count) % count

    def select_next(self):
        """Move the selection down, wrapping to the first entry."""
        if self.selected is None:
            return
        self.selected = (self.selected + 1) % len(self._entries)

    def clear(self):
        self._entries.clear()
        self.selected = None
