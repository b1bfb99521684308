"""Terminal styling and listing layout."""

from __future__ import annotations

from enum import Enum
from itertools import groupby
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from collections.abc import Sequence

    from memo.models import Entry


class Style(Enum):
    TITLE = "title"
    ERROR = "error"
    MUTED = "muted"


_STYLES: dict[Style, dict[str, object]] = {
    Style.TITLE: {"fg": "green", "bold": True},
    Style.ERROR: {"fg": "red"},
    Style.MUTED: {"dim": True},
}


def styled(text: str, style: Style) -> str:
    return click.style(text, **_STYLES[style])  # type: ignore[arg-type]


def format_entries(entries: Sequence[tuple[int, Entry]]) -> list[str]:
    """One line per memo: ``<id>: <YYYY-MM-DD HH:MM:SS> <text>``."""
    return [
        f"{styled(f'{entry_id}:', Style.MUTED)} {styled(entry.timestamp, Style.MUTED)} {entry.text}"
        for entry_id, entry in entries
    ]


def format_grouped(entries: Sequence[tuple[int, Entry]]) -> list[str]:
    """Group memos under one header per calendar day, in the given order.

    2024-05-01
      3: 09:15:00 call the bank
      4: 18:40:12 water the plants
    """
    lines: list[str] = []
    for day, group in groupby(entries, key=lambda item: item[1].created_at.date()):
        if lines:
            lines.append("")
        lines.append(styled(day.isoformat(), Style.TITLE))
        for entry_id, entry in group:
            clock = entry.created_at.strftime("%H:%M:%S")
            lines.append(f"  {styled(f'{entry_id}:', Style.MUTED)} {styled(clock, Style.MUTED)} {entry.text}")
    return lines
