"""ServiceProvider Protocol (single-class module).

Contract a container expects from anything contributing bindings to it.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ServiceProvider(Protocol):
    """Contribute bindings (new entries) and extensions (wrappers of existing entries)."""

    def get_bindings(self) -> Mapping[Any, Callable[..., Any]]:  # pragma: no cover - interface
        ...

    def get_extensions(self) -> Mapping[Any, Callable[..., Any]]:  # pragma: no cover - interface
        ...
