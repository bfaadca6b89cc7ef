"""ResponseFactory Protocol (single-class module)."""

from __future__ import annotations

from typing import Any, Protocol


class ResponseFactory(Protocol):
    """Create responses with a status code and optional reason phrase."""

    def create_response(self, code: int = 200, reason_phrase: str = "") -> Any:  # pragma: no cover - interface
        ...
