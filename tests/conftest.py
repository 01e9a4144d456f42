from __future__ import annotations

import json
import sqlite3
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from jot.core.config import JotConfig, parse_config
from jot.storage.tables import create_table

TEST_CONFIG = {
    "write": {"default_table": "jot", "default_label": "inbox"},
    "show": {
        "default_table": "jot",
        "default_label": "no-label",
        "note_count": 5,
        "view_preference": "recent",
    },
    "clear": {
        "default_table": "jot",
        "default_label": "no-label",
        "note_count": 1,
        "view_preference": "oldest",
    },
}


@pytest.fixture()
def config() -> JotConfig:
    return parse_config(TEST_CONFIG)


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "jot.db"


@pytest.fixture()
def conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    connection = sqlite3.connect(db_path)
    create_table(connection, "jot")
    yield connection
    connection.close()


@pytest.fixture()
def jot_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps(TEST_CONFIG), encoding="utf-8")
    monkeypatch.setenv("JOT_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("JOT_CONFIG_FILE", raising=False)
    monkeypatch.delenv("JOT_DB_PATH", raising=False)
    return config_dir


@pytest.fixture()
def insert_note(conn: sqlite3.Connection) -> Callable[..., int]:
    def _insert(
        created_at: str,
        label: str = "work",
        content: str = "",
        high: bool = False,
        table: str = "jot",
    ) -> int:
        return insert(conn, created_at, label, content, high, table)

    return _insert


def insert(
    connection: sqlite3.Connection,
    created_at: str,
    label: str = "work",
    content: str = "",
    high: bool = False,
    table: str = "jot",
) -> int:
    cursor = connection.execute(
        f'INSERT INTO "{table}" (Label, Content, CreatedAt, HighSeverity) '
        "VALUES (?, ?, ?, ?)",
        (label, content or f"note at {created_at}", created_at, high),
    )
    connection.commit()
    return cursor.lastrowid
