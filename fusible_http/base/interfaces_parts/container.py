"""ContainerInterface Protocol (single-class module).

Structural contract for the container that resolves provider bindings. Any
object with ``get``/``has`` qualifies, so test doubles need not subclass it.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContainerInterface(Protocol):
    """Resolve entries by identifier."""

    def get(self, id: Any) -> Any:  # pragma: no cover - interface
        """Return the entry registered under ``id``."""
        ...

    def has(self, id: Any) -> bool:  # pragma: no cover - interface
        """Return True if an entry is registered under ``id``."""
        ...
