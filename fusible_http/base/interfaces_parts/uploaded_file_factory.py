"""UploadedFileFactory Protocol (single-class module)."""

from __future__ import annotations

from typing import Any, Optional, Protocol


class UploadedFileFactory(Protocol):
    """Create uploaded file objects wrapping an existing stream."""

    def create_uploaded_file(
        self,
        stream: Any,
        size: Optional[int] = None,
        error: int = 0,
        client_filename: Optional[str] = None,
        client_media_type: Optional[str] = None,
    ) -> Any:  # pragma: no cover - interface
        ...
