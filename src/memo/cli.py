"""memo CLI: timestamped one-line notes in a flat text file.

Usage:
    memo --init                 create the data file
    memo call the bank          add a memo
    memo                        list memos (same as memo --list)
    memo -r 3 -r 4              remove memos 3 and 4
    memo -l -g                  list memos grouped by day

Within one invocation the steps run in order: load, add, remove, list. A
failed load stops everything; any other failure is reported and the
remaining steps still run. The exit code is 1 if anything failed.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

import click

from memo import app
from memo.config import MemoConfig, load_config
from memo.errors import MemoError, RemovalError
from memo.models import MAX_ID
from memo.store import MemoStore
from memo.style import Style, format_entries, format_grouped, styled

logger = logging.getLogger("memo.cli")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_cfg(config_path: str | None) -> MemoConfig:
    try:
        return load_config(config_path)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise click.ClickException(f"Could not read config: {exc}") from exc


def _setup_logging(level: str, verbose: int) -> None:
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _report(context: str, exc: BaseException) -> None:
    click.echo(styled(f"{context}: {exc}", Style.ERROR), err=True)


def _add(store: MemoStore, path: Path, text: str) -> tuple[MemoStore, bool]:
    """Add and persist. Returns the store matching the file, and whether it worked."""
    snapshot = store.copy()
    try:
        new_id = app.add(store, text)
        app.persist(store, path)
    except MemoError as exc:
        _report("Could not add memo", exc)
        return snapshot, False
    click.echo(styled(f"Added memo {new_id}", Style.MUTED), err=True)
    return store, True


def _remove(store: MemoStore, path: Path, ids: tuple[int, ...]) -> tuple[MemoStore, bool]:
    """Remove a batch of ids; the file is only written if every id was found."""
    snapshot = store.copy()
    try:
        app.remove_many(store, ids)
    except RemovalError as exc:
        for err in exc.errors:
            _report("Could not remove memo", err)
        logger.info("batch removal failed for %s, data file left untouched", exc.failed_ids)
        return snapshot, False
    try:
        app.persist(store, path)
    except MemoError as exc:
        _report("Could not remove memo", exc)
        return snapshot, False
    return store, True


def _list(store: MemoStore, group_by_day: bool) -> None:
    entries = app.render_sorted(store)
    lines = format_grouped(entries) if group_by_day else format_entries(entries)
    for line in lines:
        click.echo(line)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("message", nargs=-1)
@click.option("--list", "-l", "list_", is_flag=True, help="List all memos")
@click.option("--init", "-i", "init_", is_flag=True, help="Initialize the memo file")
@click.option(
    "--remove",
    "-r",
    "remove_ids",
    multiple=True,
    type=click.IntRange(1, MAX_ID),
    metavar="ID",
    help="Remove a memo by ID (repeatable)",
)
@click.option("--group", "-g", "group", is_flag=True, help="Group listed memos by day")
@click.option("--config", "config_path", default=None, help="Path to memo.toml")
@click.option("--verbose", "-v", count=True, help="More logging (-vv for debug)")
@click.version_option(package_name="memo")
@click.pass_context
def cli(
    ctx: click.Context,
    message: tuple[str, ...],
    list_: bool,
    init_: bool,
    remove_ids: tuple[int, ...],
    group: bool,
    config_path: str | None,
    verbose: int,
) -> None:
    """A simple memo app.

    \b
    memo buy oat milk        add a memo
    memo                     list memos
    memo -r 2                remove memo 2
    """
    cfg = _load_cfg(config_path)
    _setup_logging(cfg.log_level, verbose)
    path = cfg.data_file_path

    if init_:
        try:
            app.init(path)
        except MemoError as exc:
            _report("Initialization error", exc)
            ctx.exit(1)
        click.echo(styled(f"Initialized data file {path}", Style.TITLE), err=True)
        return

    try:
        store = app.load(path)
    except MemoError as exc:
        _report("Could not load data file", exc)
        if isinstance(exc, FileNotFoundError):
            click.echo(styled("Run `memo --init` to create it.", Style.MUTED), err=True)
        ctx.exit(1)

    ok = True
    if message:
        store, added = _add(store, path, " ".join(message))
        ok = ok and added

    if remove_ids:
        store, removed = _remove(store, path, remove_ids)
        ok = ok and removed

    if list_ or not message:
        _list(store, group or cfg.group_by_day)

    if not ok:
        ctx.exit(1)


def main() -> None:
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()
