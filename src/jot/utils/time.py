"""Time helpers."""

from __future__ import annotations

import datetime as dt


def now_local() -> str:
    return format_timestamp(dt.datetime.now())


def format_timestamp(value: dt.datetime) -> str:
    return value.isoformat(sep=" ", timespec="microseconds")


def parse_bound(value: str, name: str) -> str:
    """Validate a date bound and return it in the form stored in CreatedAt."""
    raw = value.strip()
    try:
        parsed = dt.datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid date for {name}: {value}. Use YYYY-MM-DD") from exc
    if len(raw) == 10:
        return parsed.date().isoformat()
    if parsed.tzinfo is not None:
        # CreatedAt is naive local time
        parsed = parsed.astimezone().replace(tzinfo=None)
    return format_timestamp(parsed)
