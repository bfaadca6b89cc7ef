"""Container lookup failure for unknown entry identifiers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .error_code import ErrorCode


@dataclass(eq=False)
class NotFoundError(LookupError):
    """No binding is registered under ``id`` in the container."""

    id: Any
    code: ErrorCode = ErrorCode.NOT_FOUND

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"no entry registered for {getattr(self.id, 'value', self.id)!s}"


__all__ = ["NotFoundError"]
