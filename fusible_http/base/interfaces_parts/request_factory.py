"""RequestFactory Protocol (single-class module).

Contract for factories producing client-side HTTP request objects.
"""

from __future__ import annotations

from typing import Any, Protocol


class RequestFactory(Protocol):
    """Create client requests.

    Implementations declare conformance by subclassing this Protocol; the
    provider only trusts the declaration and never calls the method.
    """

    def create_request(self, method: str, uri: Any) -> Any:  # pragma: no cover - interface
        """Return a new request for ``method`` and ``uri`` (string or URI object)."""
        ...
