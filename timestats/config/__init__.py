"""Unified configuration layer for timestats.

Goals
-----
* Centralize defaults (log level, log format, log file).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external JSON config file pointed to by TIMESTATS_CONFIG_FILE
    3. Environment variables (TIMESTATS_LOG_LEVEL, TIMESTATS_LOG_JSON, TIMESTATS_LOG_FILE)
    4. In-code overrides passed to helper
* Provide a single call site: ``get_timestats_config()``.

External Config File (Optional)
-------------------------------
If TIMESTATS_CONFIG_FILE is set to a path, it is loaded as JSON. Structure example:

```
{"log_level": "DEBUG", "log_json": false, "log_file": "/tmp/timestats.log"}
```

Public API
----------
* get_timestats_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .defaults import (
    TIMESTATS_DEFAULT_LOG_FILE,
    TIMESTATS_DEFAULT_LOG_JSON,
    TIMESTATS_DEFAULT_LOG_LEVEL,
)
from .env import CONFIG_FILE_ENV, get_env, parse_bool


DEFAULTS: Dict[str, Any] = {
    "log_level": TIMESTATS_DEFAULT_LOG_LEVEL,
    "log_json": TIMESTATS_DEFAULT_LOG_JSON,
    "log_file": TIMESTATS_DEFAULT_LOG_FILE,
}


_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        _FILE_CACHE = {}
        return _FILE_CACHE
    p = Path(path)
    if not p.exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        data = {}
    if not isinstance(data, dict):
        data = {}
    # only keep the keys we recognise
    _FILE_CACHE = {k: v for k, v in data.items() if k in DEFAULTS}
    return _FILE_CACHE


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if (level := get_env("log_level")) is not None:
        out["log_level"] = level.strip().upper()
    if (flag := get_env("log_json")) is not None:
        out["log_json"] = parse_bool(flag, TIMESTATS_DEFAULT_LOG_JSON)
    if (path := get_env("log_file")) is not None:
        out["log_file"] = path
    return out


def get_timestats_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged timestats configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget the cached external config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


__all__ = [
    "get_timestats_config",
    "reset_config_cache",
    "DEFAULTS",
]
