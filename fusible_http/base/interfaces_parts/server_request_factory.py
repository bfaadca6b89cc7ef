"""ServerRequestFactory Protocol (single-class module).

Contract for factories producing server-side request objects, i.e. requests
as seen by an application receiving them.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class ServerRequestFactory(Protocol):
    """Create server requests from a method, URI and server parameters."""

    def create_server_request(
        self,
        method: str,
        uri: Any,
        server_params: Optional[Mapping[str, Any]] = None,
    ) -> Any:  # pragma: no cover - interface
        """Return a new server request.

        ``server_params`` is the raw environment the request was received
        with (for WSGI servers, the ``environ`` mapping).
        """
        ...
