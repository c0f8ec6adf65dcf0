from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_SPECS_DIR = ".specs"
DEFAULT_THEME = "dark-olive"
DEFAULT_POLL_INTERVAL = 0.25


def config_home() -> Path:
    env_home = os.getenv("TINYSPEC_HOME")
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / ".tinyspec"


def config_path() -> Path:
    return config_home() / "config.yaml"


def _load_config() -> Dict[str, Any]:
    path = config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def get_specs_dir(override: Optional[str] = None) -> Path:
    value = override or os.getenv("TINYSPEC_SPECS_DIR") or _load_config().get("specs_dir") or DEFAULT_SPECS_DIR
    return Path(str(value)).expanduser()


def get_theme(override: Optional[str] = None) -> str:
    value = override or os.getenv("TINYSPEC_THEME") or _load_config().get("theme") or DEFAULT_THEME
    return str(value).strip() or DEFAULT_THEME


def get_poll_interval() -> float:
    raw = _load_config().get("poll_interval", DEFAULT_POLL_INTERVAL)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_POLL_INTERVAL
    return value if value > 0 else DEFAULT_POLL_INTERVAL
