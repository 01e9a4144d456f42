"""Note operations backed by SQLite."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jot.core.config import FALLBACK_LABEL, JotConfig, OperationKind
from jot.core.errors import EmptyNoteError, TableNotFoundError
from jot.core.query import (
    NoteFilters,
    bounded_select,
    delete_statement,
    display_order,
    resolve_query,
)
from jot.storage.db import open_db
from jot.storage.repos import notes as notes_repo
from jot.storage.repos import stats as stats_repo
from jot.storage.tables import ensure_table, resolve_table_name
from jot.utils.time import now_local

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoteDraft:
    words: tuple[str, ...] = ()
    piped: str = ""
    label: str = ""
    high_severity: bool = False
    table: str = ""


def compose_content(words: tuple[str, ...] | list[str], piped: str = "") -> str:
    content = " ".join(words)
    if piped:
        content = f"{content}\n\n{piped}" if content else piped
    return content


@dataclass(frozen=True)
class JotService:
    db_path: Path
    config: JotConfig

    def write(self, draft: NoteDraft) -> tuple[str, notes_repo.Note]:
        content = compose_content(draft.words, draft.piped)
        if not content.strip():
            raise EmptyNoteError()
        label = self.resolve_write_label(draft.label)
        with open_db(self.db_path, create=True) as conn:
            table = ensure_table(conn, draft.table, OperationKind.WRITE, self.config)
            note = notes_repo.add_note(
                conn,
                table,
                label=label,
                content=content,
                created_at=now_local(),
                high_severity=draft.high_severity,
            )
        return table, note

    def resolve_write_label(self, label: str) -> str:
        if label:
            return label
        default = self.config.write.default_label
        if default:
            logger.info("label is empty, using configured default %r", default)
            return default
        logger.info("label is empty, using %r", FALLBACK_LABEL)
        return FALLBACK_LABEL

    def show(self, table: str, filters: NoteFilters) -> list[notes_repo.Note]:
        query = resolve_query(filters, self.config.show)
        name = resolve_table_name(table, OperationKind.SHOW, self.config)
        self._require_db(name)
        with open_db(self.db_path) as conn:
            name = ensure_table(conn, name, OperationKind.SHOW, self.config)
            fetched = list(notes_repo.iter_notes(conn, bounded_select(name, query)))
        return display_order(fetched)

    def clear(self, table: str, filters: NoteFilters) -> tuple[str, int]:
        query = resolve_query(filters, self.config.clear)
        name = resolve_table_name(table, OperationKind.CLEAR, self.config)
        self._require_db(name)
        with open_db(self.db_path) as conn:
            name = ensure_table(conn, name, OperationKind.CLEAR, self.config)
            removed = notes_repo.delete_notes(conn, delete_statement(name, query))
        return name, removed

    def stats(self) -> list[stats_repo.TableStats]:
        if not self.db_path.exists():
            return []
        with open_db(self.db_path) as conn:
            return stats_repo.table_stats(conn)

    def _require_db(self, table: str) -> None:
        if not self.db_path.exists():
            raise TableNotFoundError(table)
