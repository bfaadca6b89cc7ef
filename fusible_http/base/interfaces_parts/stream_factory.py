"""StreamFactory Protocol (single-class module)."""

from __future__ import annotations

from typing import Any, Protocol


class StreamFactory(Protocol):
    """Create message body streams from text, files or open resources."""

    def create_stream(self, content: str = "") -> Any:  # pragma: no cover - interface
        ...

    def create_stream_from_file(self, filename: str, mode: str = "r") -> Any:  # pragma: no cover - interface
        ...

    def create_stream_from_resource(self, resource: Any) -> Any:  # pragma: no cover - interface
        ...
