"""Notes repository."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from dataclasses import dataclass

from jot.core.errors import NoteDecodeError
from jot.core.query import Statement
from jot.storage.tables import quote_identifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Note:
    row_id: int
    label: str
    content: str
    created_at: str
    high_severity: bool


def add_note(
    conn: sqlite3.Connection,
    table: str,
    label: str,
    content: str,
    created_at: str,
    high_severity: bool = False,
) -> Note:
    cursor = conn.execute(
        f"INSERT INTO {quote_identifier(table)} "
        "(Label, Content, CreatedAt, HighSeverity) VALUES (?, ?, ?, ?)",
        (label, content, created_at, high_severity),
    )
    conn.commit()
    row_id = cursor.lastrowid
    if row_id is None:
        raise sqlite3.DatabaseError(f"Insert into {table} returned no row id")
    return Note(
        row_id=row_id,
        label=label,
        content=content,
        created_at=created_at,
        high_severity=high_severity,
    )


def iter_notes(conn: sqlite3.Connection, statement: Statement) -> Iterator[Note]:
    logger.debug("select: %s %s", statement.sql, statement.params)
    cursor = conn.execute(statement.sql, statement.params)
    for row in cursor:
        yield _row_to_note(row)


def delete_notes(conn: sqlite3.Connection, statement: Statement) -> int:
    logger.debug("delete: %s %s", statement.sql, statement.params)
    cursor = conn.execute(statement.sql, statement.params)
    conn.commit()
    return max(cursor.rowcount, 0)


def _row_to_note(row: sqlite3.Row) -> Note:
    row_id, label, content, created_at, high = row[0], row[1], row[2], row[3], row[4]
    if not isinstance(label, str) or not isinstance(content, str):
        raise NoteDecodeError(
            f"Cannot decode note {row_id}: label or content is not text"
        )
    if high not in (0, 1):
        raise NoteDecodeError(
            f"Cannot decode note {row_id}: invalid severity {high!r}"
        )
    return Note(
        row_id=row_id,
        label=label,
        content=content,
        created_at=str(created_at) if created_at is not None else "",
        high_severity=bool(high),
    )
