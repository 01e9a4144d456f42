"""Settings loader for jot."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from jot.core.errors import MissingHomeError


@dataclass(frozen=True)
class Settings:
    config_dir: Path
    config_path: Path
    db_path: Path


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    config_dir_value = os.environ.get("JOT_CONFIG_DIR")
    if config_dir_value:
        config_dir = Path(config_dir_value).expanduser()
    else:
        config_dir = _home_dir() / ".config" / "jot"
    config_path = Path(
        os.environ.get("JOT_CONFIG_FILE", str(config_dir / "config.json"))
    ).expanduser()
    db_path = Path(
        os.environ.get("JOT_DB_PATH", str(config_dir / "jot.db"))
    ).expanduser()
    return Settings(config_dir=config_dir, config_path=config_path, db_path=db_path)


def _home_dir() -> Path:
    home = os.environ.get("HOME")
    if not home:
        raise MissingHomeError()
    return Path(home)
