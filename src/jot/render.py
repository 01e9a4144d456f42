"""Console rendering for notes and stats."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape

from jot.storage.repos.notes import Note
from jot.storage.repos.stats import TableStats

SEPARATOR = "[yellow]" + "-" * 70 + "[/yellow]"

BANNER = r"""
                       _    _______
                      | |  |__   __|
                      | | ___ | |
                  _   | |/ _ \| |
                 | |__| | (_) | |
                  \____/ \___/|_|

      easy and simple cli to jot down your thoughts.
      use jot --help for more.
"""


def severity_token(high_severity: bool) -> str:
    return "high" if high_severity else "low"


def render_banner(console: Console) -> None:
    console.print(BANNER, style="yellow", markup=False, highlight=False)


def render_notes(console: Console, notes: Iterable[Note]) -> int:
    count = 0
    for note in notes:
        severity = severity_token(note.high_severity)
        if note.high_severity:
            severity = f"[red]{severity}[/red]"
        console.print(
            f"[cyan]Label:[/cyan] {escape(note.label)}  "
            f"[dim]#{note.row_id} {escape(note.created_at)}[/dim]",
            highlight=False,
        )
        console.print("[cyan]Content:[/cyan]\n", highlight=False)
        console.print(escape(note.content), highlight=False, soft_wrap=True)
        console.print(f"[cyan]Severity:[/cyan] {severity}", highlight=False)
        console.print(SEPARATOR)
        count += 1
    return count


def render_stats(console: Console, stats: list[TableStats]) -> None:
    console.print(f"[cyan]Total number of tables:[/cyan] {len(stats)}")
    console.print()
    for table in stats:
        console.print(f"[cyan]For table:[/cyan] {escape(table.name)}")
        console.print(f"    [dark_orange]Total # of rows:[/dark_orange] {table.total}")
        for group in table.groups:
            severity = severity_token(group.high_severity)
            color = "red" if group.high_severity else "green"
            label = escape(group.label) if group.label is not None else "-"
            console.print(
                f"    [cyan]Label:[/cyan] {label} "
                f"[cyan]| Severity:[/cyan] [{color}]{severity}[/{color}] "
                f"[cyan]| Count:[/cyan] {group.count}",
                highlight=False,
            )
        console.print(SEPARATOR)
