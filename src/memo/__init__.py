"""Timestamped one-line memos kept in a flat text file.

Layout:
    $XDG_DATA_HOME/memo/
        memo.txt          # one memo per line: "<id>: <YYYY-MM-DD HH:MM:SS> <text>"
        memo.toml         # optional config

The whole file is read into a MemoStore at start, mutated in memory, then
written back through a temporary file and an atomic rename.
"""

from memo.app import add, init, load, persist, remove_many, render_sorted
from memo.config import MemoConfig, load_config
from memo.models import Entry
from memo.store import DataFile, MemoStore

__all__ = [
    "DataFile",
    "Entry",
    "MemoConfig",
    "MemoStore",
    "add",
    "init",
    "load",
    "load_config",
    "persist",
    "remove_many",
    "render_sorted",
]
