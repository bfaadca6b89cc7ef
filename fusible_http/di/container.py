"""Minimal dependency injection container for service providers.

Goals:
- Collect bindings and extensions from any object implementing the
  ``ServiceProvider`` contract.
- Resolve each entry lazily and cache it, so every factory is built once per
  container.

Bindings that accept a positional parameter are called with the container
(e.g. the server request creator, which pulls its factories back out of it);
zero-argument bindings are called with nothing. Extensions are called with the
container and the previous value and return the replacement value.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, Iterable, List

from ..base.errors import NotFoundError
from ..base.interfaces import ServiceProvider
from ..base.logging import LogContext, get_logger, log_event

_logger = get_logger("fusible_http.container")


def _wants_container(factory: Callable[..., Any]) -> bool:
    try:
        params = inspect.signature(factory).parameters.values()
    except (TypeError, ValueError):  # pragma: no cover - builtins without signature
        return False
    return any(
        p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL) for p in params
    )


def _entry_name(id: Any) -> str:
    return str(getattr(id, "value", id))


class Container:
    """Dependency injection container resolving provider bindings as singletons."""

    def __init__(self, providers: Iterable[ServiceProvider] = ()) -> None:
        """Initialize the container and register ``providers`` in order.

        Args:
            providers: Service providers to register; later providers override
                bindings of earlier ones.
        """
        self._bindings: Dict[Any, Callable[..., Any]] = {}
        self._extensions: Dict[Any, List[Callable[..., Any]]] = {}
        self._singletons: Dict[Any, Any] = {}
        for provider in providers:
            self.register(provider)

    def register(self, provider: ServiceProvider) -> "Container":
        """Add the bindings and extensions of ``provider``.

        Cached entries touched by the provider are dropped so the next
        ``get`` rebuilds them.
        """
        for id, factory in provider.get_bindings().items():
            self._bindings[id] = factory
            self._singletons.pop(id, None)
        for id, extension in provider.get_extensions().items():
            self._extensions.setdefault(id, []).append(extension)
            self._singletons.pop(id, None)
        return self

    def has(self, id: Any) -> bool:
        """Return True if a binding is registered under ``id``."""
        return id in self._bindings

    def get(self, id: Any) -> Any:
        """Return the entry for ``id``, building and caching it on first use.

        Raises:
            NotFoundError: No binding is registered under ``id``.
        """
        if id in self._singletons:
            return self._singletons[id]
        try:
            factory = self._bindings[id]
        except KeyError:
            raise NotFoundError(id) from None

        value = factory(self) if _wants_container(factory) else factory()
        for extension in self._extensions.get(id, ()):
            value = extension(self, value)
        self._singletons[id] = value
        log_event(_logger, "container.resolve", LogContext(kind=_entry_name(id)), type=type(value).__qualname__, level=logging.DEBUG)
        return value

    def clear(self) -> None:  # testing convenience
        """Drop every cached entry; bindings stay registered."""
        self._singletons.clear()


def build_container(*providers: ServiceProvider) -> Container:
    """Construct and return a new :class:`Container` holding ``providers``."""
    return Container(providers)


__all__ = ["Container", "build_container"]
