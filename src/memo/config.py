"""MemoConfig: where the data file lives and how the CLI behaves.

Default layout:

    $XDG_DATA_HOME/memo/       # ~/.local/share/memo when XDG_DATA_HOME is unset
        memo.txt               # the data file, one memo per line
        memo.toml              # optional config

memo.toml example:

    [memo]
    data_dir = "~/notes"       # default: the directory above
    data_file = "memo.txt"
    log_level = "WARNING"
    group_by_day = false       # list with one header per calendar day

Priority: environment variables (MEMO_DATA_DIR, MEMO_FILE, MEMO_LOG_LEVEL)
> memo.toml > defaults. MEMO_CONFIG points at an alternative memo.toml.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

APP_NAME = "memo"
_CONFIG_FILENAME = "memo.toml"
_DEFAULT_DATA_FILE = "memo.txt"
_DEFAULT_LOG_LEVEL = "WARNING"


def default_data_dir() -> Path:
    base = os.getenv("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(base) / APP_NAME


@dataclass
class MemoConfig:
    """Resolved configuration for one invocation."""

    data_dir: Path
    data_file: str = _DEFAULT_DATA_FILE
    log_level: str = _DEFAULT_LOG_LEVEL
    group_by_day: bool = False

    @property
    def data_file_path(self) -> Path:
        return self.data_dir / self.data_file


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def load_config(config_path: Path | str | None = None) -> MemoConfig:
    """Load memo.toml (explicit path, $MEMO_CONFIG, or <data_dir>/memo.toml)."""
    default_dir = default_data_dir()

    if config_path is None:
        env_path = os.getenv("MEMO_CONFIG")
        config_path = Path(env_path) if env_path else default_dir / _CONFIG_FILENAME
    config_path = Path(config_path).expanduser()

    raw: dict[str, Any] = {}
    if config_path.is_file():
        raw = _read_toml(config_path)
    section = raw.get("memo", {})

    data_dir = os.getenv("MEMO_DATA_DIR") or section.get("data_dir") or str(default_dir)

    return MemoConfig(
        data_dir=Path(data_dir).expanduser(),
        data_file=os.getenv("MEMO_FILE") or section.get("data_file", _DEFAULT_DATA_FILE),
        log_level=os.getenv("MEMO_LOG_LEVEL") or section.get("log_level", _DEFAULT_LOG_LEVEL),
        group_by_day=bool(section.get("group_by_day", False)),
    )
