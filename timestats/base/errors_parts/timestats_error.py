"""
Structured timestats error exception type.

Carries a normalized `ErrorCode` plus the layer / interval kind the failure
relates to, for consistent handling and structured logging.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class TimeStatsError(Exception):
    """Represents a structured timestats error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        layer_name: Optional raw layer identifier associated with the failure.
        delta_name: Optional interval-kind name associated with the failure.
    """

    code: ErrorCode
    message: str
    layer_name: Optional[str] = None
    delta_name: Optional[str] = None

    def __str__(self) -> str:
        """Return a compact string combining layer, interval kind, code, and message."""
        return f"{self.layer_name or '-'}:{self.delta_name or '-'} {self.code.value}: {self.message}"


__all__ = ["TimeStatsError"]
