"""Per-table note counts."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from jot.storage.tables import list_tables, quote_identifier


@dataclass(frozen=True)
class GroupCount:
    label: str | None
    high_severity: bool
    count: int


@dataclass(frozen=True)
class TableStats:
    name: str
    total: int
    groups: list[GroupCount]


def table_stats(conn: sqlite3.Connection) -> list[TableStats]:
    return [_stats_for(conn, name) for name in list_tables(conn)]


def _stats_for(conn: sqlite3.Connection, name: str) -> TableStats:
    table = quote_identifier(name)
    total = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    rows = conn.execute(
        f"SELECT Label, HighSeverity, COUNT(*) FROM {table} "
        "GROUP BY Label, HighSeverity"
    ).fetchall()
    groups = [
        GroupCount(label=row[0], high_severity=bool(row[1]), count=row[2])
        for row in rows
    ]
    return TableStats(name=name, total=total, groups=groups)
