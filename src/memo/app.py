"""Operations the CLI runs against the data file.

    store = load(path)
    new_id = add(store, "water the plants")
    remove_many(store, [3, 4])
    persist(store, path)

Each function either completes or raises a MemoError; none of them retry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from memo import codec, files
from memo.errors import EntryNotFoundError, RemovalError
from memo.models import check_text

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from memo.models import Entry
    from memo.store import DataFile, MemoStore

logger = logging.getLogger("memo.app")


def init(path: Path) -> Path:
    """Create an empty data file (and its directory)."""
    return files.init_file(path)


def load(path: Path) -> MemoStore:
    """Read and parse the data file. Any malformed line fails the whole load."""
    store = codec.parse(files.read_file(path))
    logger.debug("loaded %d memos from %s", len(store), path)
    return store


def persist(store: MemoStore, path: Path) -> None:
    files.write_file(path, codec.serialize(store))


def add(store: DataFile, text: str) -> int:
    """Add a memo under the next free id and return that id."""
    text = text.strip()
    check_text(text)
    entry_id = store.next_id()
    store.add(entry_id, text)
    logger.debug("added memo %d", entry_id)
    return entry_id


def remove_many(store: DataFile, ids: Iterable[int]) -> None:
    """Remove every id in ids, then raise RemovalError if any were missing.

    Removals that succeeded stay applied in memory; the caller decides
    whether to persist.
    """
    errors: list[EntryNotFoundError] = []
    for entry_id in ids:
        try:
            store.remove(entry_id)
        except EntryNotFoundError as exc:
            errors.append(exc)
        else:
            logger.debug("removed memo %d", entry_id)
    if errors:
        raise RemovalError(errors)


def render_sorted(store: DataFile) -> list[tuple[int, Entry]]:
    """(id, Entry) pairs in ascending id order."""
    result = []
    for entry_id in store.sorted_ids():
        entry = store.get(entry_id)
        if entry is not None:
            result.append((entry_id, entry))
    return result
