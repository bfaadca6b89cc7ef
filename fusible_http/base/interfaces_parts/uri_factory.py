"""UriFactory Protocol (single-class module)."""

from __future__ import annotations

from typing import Any, Protocol


class UriFactory(Protocol):
    """Create URI objects from their string form."""

    def create_uri(self, uri: str = "") -> Any:  # pragma: no cover - interface
        ...
