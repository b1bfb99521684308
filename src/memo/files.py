"""Whole-file read and crash-safe write of the memo data file.

write_file never creates the target: the file must already exist (see
init_file). New content goes to a sibling ``<name>.tmp`` which is then
renamed over the target, so readers see either the old or the new file,
never a partial one.
"""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from memo.errors import DataFileExistsError, DataFileIOError, DataFileNotFoundError

logger = logging.getLogger("memo.files")

_TMP_SUFFIX = ".tmp"


def temp_path(path: Path) -> Path:
    """Sibling path used for staged writes: memo.txt -> memo.txt.tmp."""
    return path.with_name(path.name + _TMP_SUFFIX)


def _ensure_exists(path: Path) -> None:
    if not path.is_file():
        raise DataFileNotFoundError(path)


def read_file(path: Path | str) -> str:
    """Read the whole data file as UTF-8 text."""
    path = Path(path)
    _ensure_exists(path)
    try:
        data = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataFileIOError(path, "read", exc) from exc
    logger.debug("read %d chars from %s", len(data), path)
    return data


def write_file(path: Path | str, content: str) -> None:
    """Atomically replace the content of an existing data file."""
    path = Path(path)
    _ensure_exists(path)
    tmp = temp_path(path)
    try:
        with tmp.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise DataFileIOError(tmp, "write", exc) from exc

    try:
        tmp.replace(path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise DataFileIOError(path, "rename temporary file over", exc) from exc
    logger.debug("wrote %d chars to %s", len(content), path)


def init_file(path: Path | str) -> Path:
    """Create the data directory and an empty data file. Raises if it exists."""
    path = Path(path)
    if path.exists():
        raise DataFileExistsError(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # "x" so a file created between the check and here is not truncated
        with path.open("x", encoding="utf-8"):
            pass
    except FileExistsError:
        raise DataFileExistsError(path) from None
    except OSError as exc:
        raise DataFileIOError(path, "create", exc) from exc
    logger.debug("created %s", path)
    return path
