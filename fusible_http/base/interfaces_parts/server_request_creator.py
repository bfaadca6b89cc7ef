"""ServerRequestCreatorInterface Protocol (single-class module).

Contract of the composite service assembled from the server request, URI,
uploaded file and stream factories.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class ServerRequestCreatorInterface(Protocol):
    """Build a server request from a WSGI ``environ`` mapping."""

    def from_environ(self, environ: Mapping[str, Any]) -> Any:  # pragma: no cover - interface
        ...
