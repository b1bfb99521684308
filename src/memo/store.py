"""In-memory record store.

MemoStore is the public API:
    store = MemoStore()
    store.add(store.next_id(), "buy milk")
    store.remove(1)
    for entry_id in store.sorted_ids():
        print(entry_id, store.get(entry_id))

The store never touches the disk; see memo.codec for the text format and
memo.files for reading and writing it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from memo.errors import DuplicateIdError, EntryNotFoundError
from memo.models import MAX_ID, Entry, now_local

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import datetime


@runtime_checkable
class DataFile(Protocol):
    """Operations a memo data source must support."""

    def add(self, entry_id: int, text: str) -> Entry: ...

    def remove(self, entry_id: int) -> Entry: ...

    def get(self, entry_id: int) -> Entry | None: ...

    def sorted_ids(self) -> list[int]: ...

    def next_id(self) -> int: ...


class MemoStore:
    """Mapping of id -> Entry for one invocation."""

    def __init__(self, entries: dict[int, Entry] | None = None) -> None:
        self._entries: dict[int, Entry] = dict(entries or {})

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __iter__(self) -> Iterator[int]:
        return iter(self.sorted_ids())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemoStore):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"MemoStore({len(self._entries)} entries)"

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get(self, entry_id: int) -> Entry | None:
        return self._entries.get(entry_id)

    def sorted_ids(self) -> list[int]:
        """Ids in ascending order: the canonical listing order."""
        return sorted(self._entries)

    def next_id(self) -> int:
        """One past the highest id, or 1 when empty. Gaps are never reused."""
        ids = self.sorted_ids()
        return ids[-1] + 1 if ids else 1

    def items(self) -> list[tuple[int, Entry]]:
        return [(entry_id, self._entries[entry_id]) for entry_id in self.sorted_ids()]

    def copy(self) -> MemoStore:
        return MemoStore(self._entries)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def add(self, entry_id: int, text: str, created_at: datetime | None = None) -> Entry:
        """Insert a new entry stamped with the current local time.

        Raises DuplicateIdError if the id is taken and InvalidTextError for
        text that could not be written back as one line. The store is left
        unchanged on any failure.
        """
        _check_id(entry_id)
        if entry_id in self._entries:
            raise DuplicateIdError(entry_id)
        entry = Entry(text=text, created_at=created_at or now_local())
        self._entries[entry_id] = entry
        return entry

    def put(self, entry_id: int, entry: Entry) -> Entry | None:
        """Insert or overwrite without the duplicate check. Returns the replaced entry."""
        _check_id(entry_id)
        previous = self._entries.get(entry_id)
        self._entries[entry_id] = entry
        return previous

    def remove(self, entry_id: int) -> Entry:
        """Delete an entry. Raises EntryNotFoundError if absent."""
        try:
            return self._entries.pop(entry_id)
        except KeyError:
            raise EntryNotFoundError(entry_id) from None


def _check_id(entry_id: int) -> None:
    if isinstance(entry_id, bool) or not isinstance(entry_id, int) or not 0 <= entry_id <= MAX_ID:
        msg = f"Id must be an unsigned 32-bit integer, got {entry_id!r}"
        raise ValueError(msg)
