"""Typer CLI for jot."""

from __future__ import annotations

import contextlib
import logging
import sqlite3
import sys
from collections.abc import Iterator
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer.core import TyperGroup

from jot.core.config import OperationKind, load_config, write_default_config
from jot.core.errors import JotError
from jot.core.query import NoteFilters
from jot.core.settings import load_settings
from jot.render import render_banner, render_notes, render_stats
from jot.services.notes import JotService, NoteDraft

console = Console(soft_wrap=True)

LABEL_HELP = (
    "The label for the notes. Defaults to the one provided in config file. "
    "For no label filter, pass --label no-label."
)


class WriteByDefaultGroup(TyperGroup):
    """Route anything that is not a known command to ``write``."""

    def resolve_command(
        self, ctx: typer.Context, args: list[str]
    ) -> tuple[str | None, Any, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            return "write", self.get_command(ctx, "write"), args
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=WriteByDefaultGroup,
    help=(
        "A simple CLI to jot down your thoughts.\n\n"
        'Quickly note down content: jot "test note"\n\n'
        'Pipe in more content: cat file.txt | jot "look at this file later"\n\n'
        "Show recent notes: jot show"
    ),
    invoke_without_command=True,
    no_args_is_help=False,
    add_completion=False,
    context_settings={"ignore_unknown_options": True},
)
config_app = typer.Typer(help="Configuration")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show logs."),
) -> None:
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        render_banner(console)


@app.command("write")
def write(
    words: list[str] | None = typer.Argument(None, help="The note text."),
    table: str = typer.Option(
        "",
        "--table",
        "-t",
        help="The table to write to. Defaults to the one provided in config file.",
    ),
    label: str = typer.Option(
        "", "--label", "-l", help="The label for the note. Defaults to config."
    ),
    high: bool = typer.Option(
        False, "--high", "--high-severity", "-s", help="Mark the note high severity."
    ),
) -> None:
    """Jot down a note. Piped standard input is appended to the text."""
    with _reporting_errors():
        draft = NoteDraft(
            words=tuple(words or ()),
            piped=_read_piped(),
            label=label,
            high_severity=high,
            table=table,
        )
        table_name, note = _service().write(draft)
    console.print(
        f"Jot noted: #{note.row_id} in [cyan]{escape(table_name)}[/cyan] "
        f"with label [cyan]{escape(note.label)}[/cyan]"
    )


@app.command("show")
def show(
    table: str = typer.Option(
        "",
        "--table",
        "-t",
        help="The table to show notes from. Defaults to config.",
    ),
    label: str = typer.Option("", "--label", "-l", help=LABEL_HELP),
    num_notes: int = typer.Option(
        0, "--num-notes", "-n", help="The number of notes to display."
    ),
    after: str = typer.Option("", "--after", help="Notes on or after YYYY-MM-DD."),
    before: str = typer.Option("", "--before", help="Notes before YYYY-MM-DD."),
    high: bool = typer.Option(False, "--high", help="Only high severity notes."),
    low: bool = typer.Option(False, "--low", help="Only low severity notes."),
    oldest: bool = typer.Option(False, "--oldest", help="Show the oldest N notes."),
    recent: bool = typer.Option(
        False, "--recent", help="Show the most recent N notes."
    ),
) -> None:
    """Show notes. N is --num-notes or the configured default."""
    filters = NoteFilters(
        label=label,
        after=after,
        before=before,
        high=high,
        low=low,
        oldest=oldest,
        recent=recent,
        count=num_notes,
    )
    with _reporting_errors():
        notes = _service().show(table, filters)
        shown = render_notes(console, notes)
    if shown == 0:
        console.print("No notes found")


@app.command("clear")
def clear(
    table: str = typer.Option(
        "",
        "--table",
        "-t",
        help="The table to clear notes from. Defaults to config.",
    ),
    label: str = typer.Option("", "--label", "-l", help=LABEL_HELP),
    num_notes: int = typer.Option(
        0, "--num-notes", "-n", help="The number of notes to clear."
    ),
    after: str = typer.Option("", "--after", help="Notes on or after YYYY-MM-DD."),
    before: str = typer.Option("", "--before", help="Notes before YYYY-MM-DD."),
    high: bool = typer.Option(False, "--high", help="Only high severity notes."),
    low: bool = typer.Option(False, "--low", help="Only low severity notes."),
    oldest: bool = typer.Option(False, "--oldest", help="Clear the oldest N notes."),
    recent: bool = typer.Option(
        False, "--recent", help="Clear the most recent N notes."
    ),
    row_id: int | None = typer.Option(
        None,
        "--row-id",
        help="Clear a single note. Other filters are ignored when passed.",
    ),
) -> None:
    """Clear notes. N is --num-notes or the configured default."""
    filters = NoteFilters(
        label=label,
        after=after,
        before=before,
        high=high,
        low=low,
        oldest=oldest,
        recent=recent,
        count=num_notes,
        row_id=row_id,
    )
    with _reporting_errors():
        table_name, removed = _service().clear(table, filters)
    console.print(f"Jot erased: {removed} note(s) removed from {escape(table_name)}")


@app.command("stats")
def stats() -> None:
    """Show note counts per table, label and severity."""
    with _reporting_errors():
        table_stats = _service().stats()
    render_stats(console, table_stats)


@config_app.command("show")
def config_show() -> None:
    with _reporting_errors():
        settings = load_settings()
        console.print(f"config_path={settings.config_path}")
        console.print(f"db_path={settings.db_path}")
        config = load_config(settings.config_path)
    for kind in OperationKind:
        defaults = config.for_kind(kind)
        view = defaults.view_preference.value if defaults.view_preference else ""
        console.print(
            f"{kind.value}: table={defaults.default_table} "
            f"label={escape(defaults.default_label)} "
            f"count={defaults.note_count} view={view}",
            highlight=False,
        )


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    with _reporting_errors():
        settings = load_settings()
        created = write_default_config(settings.config_path, force=force)
    if created:
        console.print(f"wrote config to {settings.config_path}")
    else:
        console.print(f"config already exists at {settings.config_path}")


app.add_typer(config_app, name="config")


def _service() -> JotService:
    settings = load_settings()
    config = load_config(settings.config_path)
    return JotService(db_path=settings.db_path, config=config)


def _read_piped() -> str:
    stream = sys.stdin
    if stream is None or stream.isatty():
        return ""
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream.read()
    return buffer.read().decode("utf-8", errors="replace")


@contextlib.contextmanager
def _reporting_errors() -> Iterator[None]:
    try:
        yield
    except (JotError, sqlite3.Error, OSError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _configure_logging(verbose: bool) -> None:
    jot_logger = logging.getLogger("jot")
    jot_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in jot_logger.handlers):
        jot_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )
