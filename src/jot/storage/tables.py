"""Table resolution and schema management."""

from __future__ import annotations

import logging
import re
import sqlite3

from jot.core.config import JotConfig, OperationKind
from jot.core.errors import InvalidTableNameError, TableNotFoundError

logger = logging.getLogger(__name__)

_TABLE_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS {table} (
    row_id INTEGER PRIMARY KEY AUTOINCREMENT,
    Label TEXT,
    Content TEXT,
    CreatedAt TIMESTAMP,
    HighSeverity BOOLEAN
)
"""


def validate_table_name(name: str) -> str:
    if not _TABLE_NAME_RE.match(name) or name.lower().startswith("sqlite_"):
        raise InvalidTableNameError(name)
    return name


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def resolve_table_name(requested: str, kind: OperationKind, config: JotConfig) -> str:
    name = requested or config.for_kind(kind).default_table
    return validate_table_name(name)


def find_table(conn: sqlite3.Connection, name: str) -> str | None:
    """Return the stored name of table ``name``; identifiers ignore case."""
    row = conn.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' "
        "AND name = ? COLLATE NOCASE",
        (name,),
    ).fetchone()
    return row[0] if row is not None else None


def table_exists(conn: sqlite3.Connection, name: str) -> bool:
    return find_table(conn, name) is not None


def list_tables(conn: sqlite3.Connection) -> list[str]:
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' "
        "AND name NOT LIKE 'sqlite_%'"
    ).fetchall()
    return [row[0] for row in rows]


def create_table(conn: sqlite3.Connection, name: str) -> None:
    conn.execute(_CREATE_TABLE.format(table=quote_identifier(name)))
    conn.commit()


def ensure_table(
    conn: sqlite3.Connection,
    requested: str,
    kind: OperationKind,
    config: JotConfig,
) -> str:
    """Return the effective table name for ``kind``.

    Writes create a missing table with the notes schema. Show and clear never
    create one and raise ``TableNotFoundError`` instead.
    """
    name = resolve_table_name(requested, kind, config)
    stored = find_table(conn, name)
    if stored is not None:
        return stored
    if kind is not OperationKind.WRITE:
        raise TableNotFoundError(name)
    logger.info("creating table %s", name)
    create_table(conn, name)
    return name
