"""Structured logging context object for provider wiring events.

This module defines :class:`LogContext`, a dataclass carrying the fields
common to binding, discovery and resolution events (capability kind and
implementation name, plus extra metadata). Its ``to_dict`` helper merges the
``extra`` mapping and prunes ``None`` values for clean structured output.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for wiring log events."""

    kind: Optional[str] = None
    implementation: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
