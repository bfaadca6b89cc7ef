"""Base structured logging utilities for the HTTP factory provider.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across modules.

All package loggers are children of the shared ``fusible_http`` logger, which
owns the only console handler. The level can be overridden with the
``FUSIBLE_HTTP_LOG_LEVEL`` environment variable.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "fusible_http"
LOG_LEVEL_ENV = "FUSIBLE_HTTP_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_fusible_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_fusible_console_handler"
_FILE_HANDLER_ATTR = "_fusible_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``fusible_http`` logger."""

    logger = logging.getLogger(BASE_LOGGER_NAME)
    env_level = os.getenv(LOG_LEVEL_ENV)
    desired_level = _parse_level(env_level, default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        # Only the env var overrides a level chosen through configure_logger.
        if env_level and logger.level != desired_level:
            logger.setLevel(desired_level)
            for existing in logger.handlers:
                if getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                    existing.setLevel(desired_level)
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger wired to the shared ``fusible_http`` handler.

    Child loggers carry no handler of their own and propagate to the base
    logger, so each record is emitted exactly once.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (or reused if one already points there). When ``None``, any
        file handler previously attached by this function is removed.
    json_mode: bool
        Whether the file handler uses the JSON formatter.

    Returns
    -------
    logging.Logger
        The configured base logger.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)

    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(resolved)
        for h in logger.handlers:
            h.setLevel(resolved)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if getattr(h, "baseFilename", None) == abs_path:
            existing = h  # type: ignore[assignment]
        else:
            logger.removeHandler(h)
            h.close()

    if existing is None:
        # 10MB x 5 backups
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        logger.addHandler(fh)
        existing = fh
    existing.setFormatter(_formatter(json_mode))
    existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON payload.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (normally obtained from ``get_logger``).
    event: str
        Event name (e.g. ``provider.bind``).
    ctx: LogContext | None
        Kind/implementation context; merged shallowly.
    level: int
        Logging level of the emitted record.
    **fields: Any
        Arbitrary serializable key/value pairs; ``None`` values are dropped.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
]
