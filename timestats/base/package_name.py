"""Best-effort package name extraction from raw layer identifiers.

Examples of what is captured::

    StatusBar#0                                  -> StatusBar
    com.appname/com.appname.activity#0           -> com.appname
    SurfaceView - com.appname/com.appname.activity#0 -> com.appname
"""
from __future__ import annotations

import re

_PACKAGE_RE = re.compile(r"(?:SurfaceView[-\s\t]+)?([^/]+).*#\d+")


def derive_package_name(layer_name: str) -> str:
    """Return the package-like prefix of ``layer_name`` or ``""`` when none is recognized."""
    match = _PACKAGE_RE.fullmatch(layer_name or "")
    if match is None:
        return ""
    return match.group(1)


__all__ = ["derive_package_name"]
