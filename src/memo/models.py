"""Data models for the memo file."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from memo.errors import InvalidTextError

# Date time format used on disk and in listings.
DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_ID = 2**32 - 1


def now_local() -> datetime:
    """Current local time, truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)


def check_text(text: str) -> None:
    """Reject text that would not survive a write and re-read unchanged."""
    if not text.strip():
        raise InvalidTextError("Memo text is empty", text)
    if "\n" in text or "\r" in text:
        raise InvalidTextError("Memo text must be a single line", text)
    if text != text.strip():
        raise InvalidTextError("Memo text has leading or trailing whitespace", text)


@dataclass(frozen=True)
class Entry:
    """A single memo: text plus the local time it was written."""

    text: str
    created_at: datetime = field(default_factory=now_local)

    def __post_init__(self) -> None:
        check_text(self.text)

    @property
    def timestamp(self) -> str:
        return self.created_at.strftime(DATE_TIME_FORMAT)

    def __str__(self) -> str:
        return f"{self.timestamp} {self.text}"
