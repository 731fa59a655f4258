from __future__ import annotations

import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".todo_tui_config.yaml"
DEFAULT_DB_PATH = "todo.csv"
DEFAULT_LOG_FILE = Path.home() / ".todo_tui.log"
DEFAULT_THEME = "dark-olive"


def _load_config() -> Dict[str, Any]:
    try:
        if not USER_CONFIG_PATH.exists():
            return {}
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _get_str(key: str) -> str:
    value = _load_config().get(key, "")
    return str(value).strip() if value is not None else ""


def get_db_path() -> Path:
    """Backing file used when no path is given on the command line."""
    return Path(_get_str("db_path") or DEFAULT_DB_PATH).expanduser()


def get_theme() -> str:
    return _get_str("theme") or DEFAULT_THEME


def get_log_file() -> Path:
    raw = _get_str("log_file")
    return Path(raw).expanduser() if raw else DEFAULT_LOG_FILE
