"""Structured logging context object for timestats events.

:class:`LogContext` names the layer and interval kind an event is about.
When a layer is given, its derived package name is added so log lines can be
grouped per app without re-parsing raw layer identifiers downstream.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..package_name import derive_package_name


@dataclass
class LogContext:
    """Layer / interval-kind context for timestats logging events.

    Attributes:
        layer_name: Raw layer identifier.
        delta_name: Interval kind (e.g. ``present2present``).
        extra: Additional fields; they never replace the layer fields.
    """

    layer_name: Optional[str] = None
    delta_name: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {k: v for k, v in self.extra.items() if v is not None}
        if self.layer_name is not None:
            data["layer_name"] = self.layer_name
            package = derive_package_name(self.layer_name)
            if package:
                data["package_name"] = package
        if self.delta_name is not None:
            data["delta_name"] = self.delta_name
        return data


__all__ = ["LogContext"]
