"""Exceptions raised by the memo data layer.

Every error derives from MemoError so the CLI can catch the whole family in
one place; most also derive from the matching builtin so callers that only
know about FileNotFoundError / LookupError / ValueError still work.
"""

from __future__ import annotations

from pathlib import Path


class MemoError(Exception):
    """Base class for memo errors."""


class DataFileNotFoundError(MemoError, FileNotFoundError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File '{path}' not found")


class DataFileExistsError(MemoError, FileExistsError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File '{path}' already exists")


class DataFileIOError(MemoError, OSError):
    """Wraps an underlying read/write/rename failure."""

    def __init__(self, path: Path, action: str, cause: BaseException) -> None:
        self.path = path
        self.action = action
        self.cause = cause
        super().__init__(f"Could not {action} '{path}': {cause}")


class DuplicateIdError(MemoError):
    def __init__(self, entry_id: int) -> None:
        self.entry_id = entry_id
        super().__init__(f"Id '{entry_id}' already exists")


class EntryNotFoundError(MemoError, LookupError):
    def __init__(self, entry_id: int) -> None:
        self.entry_id = entry_id
        super().__init__(f"Id '{entry_id}' not found")


class MalformedLineError(MemoError, ValueError):
    """A line of the data file does not match `<id>: <date> <time> <text>`."""

    def __init__(self, reason: str, line: str, lineno: int | None = None) -> None:
        self.reason = reason
        self.line = line
        self.lineno = lineno
        where = f"line {lineno}" if lineno is not None else "line"
        super().__init__(f"{reason} in {where} '{line}'")


class InvalidDateTimeError(MalformedLineError):
    pass


class RemovalError(MemoError):
    """One or more ids of a batched removal failed."""

    def __init__(self, errors: list[EntryNotFoundError]) -> None:
        self.errors = errors
        ids = ", ".join(str(e.entry_id) for e in errors)
        super().__init__(f"Id(s) not found: {ids}")

    @property
    def failed_ids(self) -> list[int]:
        return [e.entry_id for e in self.errors]


class InvalidTextError(MemoError, ValueError):
    """Memo text that cannot be stored as one line of the data file."""

    def __init__(self, reason: str, text: str) -> None:
        self.reason = reason
        self.text = text
        super().__init__(f"{reason}: {text!r}")
