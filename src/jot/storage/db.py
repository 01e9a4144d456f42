"""SQLite database helpers."""

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def connect(db_path_value: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path_value)
    conn.row_factory = sqlite3.Row
    return conn


@contextlib.contextmanager
def open_db(db_path_value: Path, create: bool = False) -> Iterator[sqlite3.Connection]:
    """Open the notes database for one command and close it afterwards.

    With ``create`` the parent directory and the file are made when missing.
    Without it a missing file raises ``FileNotFoundError`` instead of leaving
    an empty database behind.
    """
    if create:
        db_path_value.parent.mkdir(parents=True, exist_ok=True)
    elif not db_path_value.exists():
        raise FileNotFoundError(f"Database file not found: {db_path_value}")
    logger.debug("opening database %s", db_path_value)
    conn = connect(db_path_value)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
