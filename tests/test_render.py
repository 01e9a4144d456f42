from __future__ import annotations

from rich.console import Console

from jot.render import render_notes, render_stats, severity_token
from jot.storage.repos.notes import Note
from jot.storage.repos.stats import GroupCount, TableStats


def _console() -> Console:
    return Console(record=True, width=120, color_system=None)


def test_severity_token() -> None:
    assert severity_token(True) == "high"
    assert severity_token(False) == "low"


def test_render_notes_keeps_order_and_escapes_markup() -> None:
    console = _console()
    notes = [
        Note(1, "work", "[bold]not markup[/bold]", "2024-01-01 09:00:00", False),
        Note(2, "home", "second", "2024-01-02 09:00:00", True),
    ]

    count = render_notes(console, notes)

    text = console.export_text()
    assert count == 2
    assert "[bold]not markup[/bold]" in text
    assert text.index("not markup") < text.index("second")
    assert "Severity: low" in text
    assert "Severity: high" in text
    assert "#2 2024-01-02 09:00:00" in text


def test_render_stats() -> None:
    console = _console()
    stats = [
        TableStats(
            name="jot",
            total=3,
            groups=[
                GroupCount(label="work", high_severity=False, count=2),
                GroupCount(label=None, high_severity=True, count=1),
            ],
        )
    ]

    render_stats(console, stats)

    text = console.export_text()
    assert "Total number of tables: 1" in text
    assert "Total # of rows: 3" in text
    assert "Label: work | Severity: low | Count: 2" in text
    assert "Label: - | Severity: high | Count: 1" in text
