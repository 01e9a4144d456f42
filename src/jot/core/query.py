"""Statement building for show and clear.

Show and clear share one filter shape. Both bound the matching notes by count
in the primary order; show then reverses that bounded list for display, clear
deletes it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from jot.core.config import NO_LABEL, OperationDefaults, ViewPreference
from jot.core.errors import (
    ConflictingViewError,
    InvalidDateError,
    InvalidNumberError,
)
from jot.storage.tables import quote_identifier, validate_table_name
from jot.utils.time import parse_bound

T = TypeVar("T")

SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1

NOTE_COLUMNS = ("row_id", "Label", "Content", "CreatedAt", "HighSeverity")


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class NoteFilters:
    """Flags of one show or clear invocation, exactly as the user passed them."""

    label: str = ""
    after: str = ""
    before: str = ""
    high: bool = False
    low: bool = False
    oldest: bool = False
    recent: bool = False
    count: int = 0
    row_id: int | None = None


@dataclass(frozen=True)
class NoteQuery:
    """Filters with configuration defaults applied."""

    label: str | None
    after: str | None
    before: str | None
    high: bool
    low: bool
    order: SortOrder
    limit: int
    row_id: int | None = None


@dataclass(frozen=True)
class Statement:
    sql: str
    params: tuple[Any, ...]


def resolve_order(filters: NoteFilters, default: ViewPreference | None) -> SortOrder:
    if filters.oldest and filters.recent:
        raise ConflictingViewError()
    if filters.oldest:
        preference = ViewPreference.OLDEST
    elif filters.recent:
        preference = ViewPreference.RECENT
    else:
        preference = default
    if preference is ViewPreference.OLDEST:
        return SortOrder.ASC
    return SortOrder.DESC


def resolve_query(filters: NoteFilters, defaults: OperationDefaults) -> NoteQuery:
    order = resolve_order(filters, defaults.view_preference)
    if filters.row_id is not None:
        return NoteQuery(
            label=None,
            after=None,
            before=None,
            high=False,
            low=False,
            order=order,
            limit=0,
            row_id=_integer(filters.row_id, "--row-id"),
        )
    label = filters.label or defaults.default_label
    count = filters.count if filters.count != 0 else defaults.note_count
    return NoteQuery(
        label=None if label == NO_LABEL else label,
        after=_bound(filters.after, "--after"),
        before=_bound(filters.before, "--before"),
        high=filters.high,
        low=filters.low,
        order=order,
        limit=max(_integer(count, "--num-notes"), 0),
    )


def where_clause(query: NoteQuery) -> tuple[str, list[Any]]:
    predicates: list[str] = []
    params: list[Any] = []
    if query.label is not None:
        predicates.append("Label = ?")
        params.append(query.label)
    if query.after is not None:
        predicates.append("CreatedAt >= ?")
        params.append(query.after)
    if query.before is not None:
        predicates.append("CreatedAt < ?")
        params.append(query.before)
    if query.high:
        predicates.append("HighSeverity = 1")
    if query.low:
        predicates.append("HighSeverity = 0")
    if not predicates:
        return "", params
    return " WHERE " + " AND ".join(predicates), params


def bounded_select(
    table: str, query: NoteQuery, columns: Sequence[str] = NOTE_COLUMNS
) -> Statement:
    """First ``query.limit`` matching notes in the primary order."""
    where, params = where_clause(query)
    direction = query.order.value
    sql = (
        f"SELECT {', '.join(columns)} FROM {_table(table)}{where} "
        f"ORDER BY CreatedAt {direction}, row_id {direction} LIMIT ?"
    )
    return Statement(sql=sql, params=(*params, query.limit))


def delete_statement(table: str, query: NoteQuery) -> Statement:
    if query.row_id is not None:
        return Statement(
            sql=f"DELETE FROM {_table(table)} WHERE row_id = ?",
            params=(query.row_id,),
        )
    selection = bounded_select(table, query, columns=("row_id",))
    return Statement(
        sql=f"DELETE FROM {_table(table)} WHERE row_id IN ({selection.sql})",
        params=selection.params,
    )


def display_order(notes: Sequence[T]) -> list[T]:
    """Reverse a bounded fetch so the newest of a recent fetch prints last."""
    return list(reversed(notes))


def _bound(value: str, name: str) -> str | None:
    if not value:
        return None
    try:
        return parse_bound(value, name)
    except ValueError as exc:
        raise InvalidDateError(str(exc)) from exc


def _integer(value: int, name: str) -> int:
    if not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        raise InvalidNumberError(f"Invalid value for {name}: {value} is out of range")
    return value


def _table(name: str) -> str:
    return quote_identifier(validate_table_name(name))
