"""Base structured logging utilities for timestats.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup in the aggregate modules; they only call
  ``get_logger(__name__)`` and ``log_event``.

Level, format and optional log file come from ``timestats.config``
(``TIMESTATS_LOG_LEVEL``, ``TIMESTATS_LOG_JSON``, ``TIMESTATS_LOG_FILE``).
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from ..config import get_timestats_config
from ..config.defaults import TIMESTATS_LOGGER_NAME
from .log_support import JsonFormatter, LogContext


_BASE_LOGGER_ATTR = "_timestats_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_timestats_console_handler"
_FILE_HANDLER_ATTR = "_timestats_file_handler"
_JSON_MODE_ATTR = "_timestats_json_mode"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: int | str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name or number into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger() -> logging.Logger:
    """Initialize (once) and return the shared ``timestats`` logger."""

    logger = logging.getLogger(TIMESTATS_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger

    cfg = get_timestats_config()
    level = _parse_level(cfg.get("log_level"))
    json_mode = bool(cfg.get("log_json", True))
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    setattr(logger, _JSON_MODE_ATTR, json_mode)
    if cfg.get("log_file"):
        configure_logger(file_path=cfg["log_file"], json_mode=json_mode)
    return logger


def get_logger(name: str = TIMESTATS_LOGGER_NAME) -> logging.Logger:
    """Return the shared ``timestats`` logger or one of its children.

    Child loggers carry no handlers of their own and propagate to the shared
    logger, so every module emits through the same configured handler(s).
    """
    base_logger = _ensure_base_logger()
    if name == TIMESTATS_LOGGER_NAME:
        return base_logger
    if not name.startswith(TIMESTATS_LOGGER_NAME + "."):
        name = f"{TIMESTATS_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: Optional[bool] = None,
) -> logging.Logger:
    """Reconfigure the shared timestats logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (or reused if already pointing there). When ``None``, any
        previously attached managed file handler is removed.
    json_mode: Optional[bool]
        ``True`` for the JSON formatter, ``False`` for plain text, applied to
        all managed handlers. When ``None``, the current format is kept.

    Returns
    -------
    logging.Logger
        The configured shared logger.

    Notes
    -----
    Only handlers created by this module are touched; user-attached handlers
    are preserved.
    """
    logger = _ensure_base_logger()
    if json_mode is None:
        json_mode = bool(getattr(logger, _JSON_MODE_ATTR, True))
        restyle = False
    else:
        setattr(logger, _JSON_MODE_ATTR, json_mode)
        restyle = True

    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level))
    for h in logger.handlers:
        if getattr(h, _CONSOLE_HANDLER_ATTR, False) or getattr(h, _FILE_HANDLER_ATTR, False):
            h.setLevel(logger.level)
            if restyle:
                h.setFormatter(_make_formatter(json_mode))

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            with contextlib.suppress(OSError):
                h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if getattr(h, "baseFilename", None) == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            with contextlib.suppress(OSError):
                h.close()

    if existing is None:
        # 10MB x 5 backups
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_make_formatter(json_mode))
        logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event.

    The payload is ``{"event": event, **ctx, **fields}`` serialized as a single
    JSON string; keys whose values are ``None`` are dropped.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (normally from ``get_logger``).
    event: str
        Event name (e.g. ``timestats.layer.created``).
    ctx: LogContext | None
        Layer / interval context; merged shallowly.
    level: int
        Logging level for the record (INFO by default).
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False))


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
