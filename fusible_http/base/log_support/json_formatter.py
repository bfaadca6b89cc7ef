"""JSON logging formatter used by the package logging setup.

This module defines :class:`JsonFormatter`, a minimal JSON formatter that
serializes standard logging fields and merges non-internal extra attributes
from the ``LogRecord``.
"""
from __future__ import annotations

import contextlib
import json
import logging
from datetime import datetime, timezone

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

_RECORD_INTERNALS = frozenset(
    (
        "msg",
        "args",
        "levelname",
        "levelno",
        "name",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    )
)


class JsonFormatter(logging.Formatter):
    """Lightweight JSON formatter for structured logs.

    The formatter includes a timestamp, level, logger name, and message. When
    the message itself is a JSON object (as produced by ``log_event``) its keys
    are hoisted to the top level instead of being double encoded.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        msg_text = record.getMessage()
        base["msg"] = msg_text
        with contextlib.suppress(ValueError):
            parsed = json.loads(msg_text)
            if isinstance(parsed, dict):
                base.update(parsed)
                base.pop("msg", None)
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RECORD_INTERNALS:
                continue
            if k not in base:
                base[k] = v
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
