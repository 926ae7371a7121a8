"""timestats.config.env
====================

Environment variable names and small parsing helpers for timestats settings.

Failure Modes
-------------
- Helpers never raise on unset or malformed variables; they return the
  caller-provided default so configuration resolution stays predictable.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

# Config field → environment variable
ENV_MAP: Dict[str, str] = {
    "log_level": "TIMESTATS_LOG_LEVEL",
    "log_json": "TIMESTATS_LOG_JSON",
    "log_file": "TIMESTATS_LOG_FILE",
}

# Optional JSON config file
CONFIG_FILE_ENV = "TIMESTATS_CONFIG_FILE"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like an unfilled template value.

    Heuristics: contains 'placeholder' or 'changeme', or is wrapped in
    ``${...}``. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or (v.startswith("${") and v.endswith("}"))


def parse_bool(val: Optional[str], default: bool) -> bool:
    """Parse a boolean flag string (``1/0``, ``true/false``, ``yes/no``, ``on/off``).

    Returns ``default`` for ``None``, placeholders, and unrecognized values.
    """
    if val is None or is_placeholder(val):
        return default
    v = val.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return default


def get_env(field: str) -> Optional[str]:
    """Return the raw env value for a config field, or None when unset/placeholder."""
    name = ENV_MAP.get(field)
    if not name:
        return None
    val = os.environ.get(name)
    if val is None or val.strip() == "" or is_placeholder(val):
        return None
    return val


__all__ = [
    "ENV_MAP",
    "CONFIG_FILE_ENV",
    "is_placeholder",
    "parse_bool",
    "get_env",
]
