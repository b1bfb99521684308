"""Line-oriented text encoding of a MemoStore.

Each line has the form:

    <id>: <YYYY-MM-DD> <HH:MM:SS> <text>

e.g. ``3: 2024-05-01 09:15:00 call the bank``. There is no header, footer or
version marker; blank lines are ignored on read.
"""

from __future__ import annotations

import logging
from datetime import datetime

from memo.errors import InvalidDateTimeError, InvalidTextError, MalformedLineError
from memo.models import DATE_TIME_FORMAT, MAX_ID, Entry
from memo.store import MemoStore

logger = logging.getLogger("memo.codec")


def format_line(entry_id: int, entry: Entry) -> str:
    return f"{entry_id}: {entry}\n"


def serialize(store: MemoStore) -> str:
    """Render the store as text, one line per entry in ascending id order."""
    return "".join(format_line(entry_id, entry) for entry_id, entry in store.items())


def parse_line(line: str, lineno: int | None = None) -> tuple[int, Entry]:
    """Parse one line into (id, Entry). Raises MalformedLineError."""
    id_part, sep, rest = line.partition(":")
    if not sep:
        raise MalformedLineError("Missing ':' separator", line, lineno)

    if not id_part.isdigit() or not id_part.isascii():
        raise MalformedLineError("Invalid id", line, lineno)
    entry_id = int(id_part)
    if entry_id > MAX_ID:
        raise MalformedLineError("Id out of range", line, lineno)

    parts = rest.strip().split(maxsplit=2)
    if len(parts) != 3:
        raise MalformedLineError(
            "Expected '%Y-%m-%d %H:%M:%S text' after id", line, lineno
        )
    date_str, time_str, text = parts

    stamp = f"{date_str} {time_str}"
    try:
        created_at = datetime.strptime(stamp, DATE_TIME_FORMAT)
    except ValueError:
        raise InvalidDateTimeError(f"Invalid date time '{stamp}'", line, lineno) from None

    try:
        entry = Entry(text=text, created_at=created_at)
    except InvalidTextError as exc:
        raise MalformedLineError(exc.reason, line, lineno) from None
    return entry_id, entry


def parse(data: str) -> MemoStore:
    """Parse file content into a MemoStore.

    All-or-nothing: the first malformed line (in file order) raises and no
    partial store is returned. A repeated id overwrites the earlier line.
    """
    store = MemoStore()
    for lineno, line in enumerate(data.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line:
            continue
        entry_id, entry = parse_line(line, lineno)
        if store.put(entry_id, entry) is not None:
            logger.warning("duplicate id %d on line %d overrides earlier entry", entry_id, lineno)
    return store
