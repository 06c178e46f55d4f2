# passforge/config.py
"""
Application configuration for PassForge.
Saved as JSON in %APPDATA%/PassForge/config.json (Windows) or ~/.passforge/config.json (fallback).
Generator settings live in a separate file managed by passforge.settings.
"""

import os
import json
from typing import Dict, Any, Optional

from .log import get_logger
from .storage import app_dir, default_settings_path

logger = get_logger("config")

DEFAULTS: Dict[str, Any] = {
    "settings_path": None,  # if None, storage.default_settings_path() is used
    "log_level": "WARNING",
    "default_length": 16,
}

def config_path() -> str:
    return os.path.join(app_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    if isinstance(data, dict):
        out.update(data)
    return out

def settings_path(cfg: Dict[str, Any]) -> str:
    return cfg.get("settings_path") or default_settings_path()
