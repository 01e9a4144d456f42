"""User configuration loader.

The config file holds per-operation defaults. Every section and key is
optional; the file itself is not. A show or clear ``default_label`` of
``no-label`` disables label filtering; an empty one filters on ``Label = ''``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from jot.core.errors import ConfigError

NO_LABEL = "no-label"
FALLBACK_LABEL = "default"


class OperationKind(str, Enum):
    WRITE = "write"
    SHOW = "show"
    CLEAR = "clear"


class ViewPreference(str, Enum):
    OLDEST = "oldest"
    RECENT = "recent"


@dataclass(frozen=True)
class OperationDefaults:
    default_table: str
    default_label: str
    note_count: int
    view_preference: ViewPreference | None


@dataclass(frozen=True)
class JotConfig:
    write: OperationDefaults
    show: OperationDefaults
    clear: OperationDefaults

    def for_kind(self, kind: OperationKind) -> OperationDefaults:
        if kind is OperationKind.WRITE:
            return self.write
        if kind is OperationKind.SHOW:
            return self.show
        return self.clear


DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "write": {"default_table": "jot", "default_label": FALLBACK_LABEL},
    "show": {
        "default_table": "jot",
        "default_label": NO_LABEL,
        "note_count": 10,
        "view_preference": "recent",
    },
    "clear": {
        "default_table": "jot",
        "default_label": NO_LABEL,
        "note_count": 1,
        "view_preference": "oldest",
    },
}


def load_config(path: Path) -> JotConfig:
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}. Run `jot config init` to create one"
        )
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Error reading config file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return parse_config(raw)


def parse_config(raw: dict[str, Any]) -> JotConfig:
    return JotConfig(
        write=_parse_section(raw, OperationKind.WRITE),
        show=_parse_section(raw, OperationKind.SHOW),
        clear=_parse_section(raw, OperationKind.CLEAR),
    )


def write_default_config(path: Path, force: bool = False) -> bool:
    if path.exists() and not force:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n", encoding="utf-8")
    return True


def _parse_section(raw: dict[str, Any], kind: OperationKind) -> OperationDefaults:
    name = kind.value
    section = raw.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"Config section {name!r} must be an object")
    defaults = DEFAULT_CONFIG[name]
    return OperationDefaults(
        default_table=_parse_str(
            section.get("default_table", defaults["default_table"]),
            f"{name}.default_table",
        ),
        default_label=_parse_str(
            section.get("default_label", defaults["default_label"]),
            f"{name}.default_label",
        ),
        note_count=_parse_int(
            section.get("note_count", defaults.get("note_count", 0)),
            f"{name}.note_count",
        ),
        view_preference=_parse_view(
            section.get("view_preference", defaults.get("view_preference", "")),
            f"{name}.view_preference",
        ),
    )


def _parse_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"Invalid string for {name}: {value!r}")
    return value


def _parse_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Invalid integer for {name}: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid integer for {name}: {value!r}") from exc


def _parse_view(value: Any, name: str) -> ViewPreference | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"Invalid view preference for {name}: {value!r}")
    normalized = value.strip().lower()
    if not normalized:
        return None
    try:
        return ViewPreference(normalized)
    except ValueError as exc:
        raise ConfigError(
            f"Invalid view preference for {name}: {value!r}. Use 'oldest' or 'recent'"
        ) from exc
