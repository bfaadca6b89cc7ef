"""Run-time discovery of installed HTTP factory implementations.

Purpose
-------
Locate an implementation of a capability contract when none was configured
explicitly. One classmethod per capability kind is exposed so that a provider
can bind the method itself and defer the lookup until the binding is resolved.

Candidate sources (in order)
----------------------------
1. References registered with :meth:`FactoryDiscovery.register_candidate`,
   most recently registered first.
2. Entry points in the ``fusible_http.factories`` group whose name equals the
   capability kind value, e.g.::

       [project.entry-points."fusible_http.factories"]
       stream_factory = "my_pkg.http:StreamFactory"

A candidate is accepted when it imports and declares the kind's contract.
Accepted classes are cached per kind; every call returns a new instance.

Failure modes
-------------
- :class:`DiscoveryError` when no candidate is accepted.
"""

from __future__ import annotations

import logging
from importlib import metadata
from typing import Any, ClassVar, Dict, List, Type

from ..base.capabilities import CONTRACTS, CapabilityKind, contract_name
from ..base.errors import DiscoveryError
from ..base.logging import LogContext, get_logger, log_event
from ..base.resolution import ImplementationRef, declares_contract, describe, load_class

ENTRY_POINT_GROUP = "fusible_http.factories"

_logger = get_logger("fusible_http.discovery")


class FactoryDiscovery:
    """Find and instantiate factory implementations by capability kind."""

    _candidates: ClassVar[Dict[CapabilityKind, List[ImplementationRef]]] = {}
    _cache: ClassVar[Dict[CapabilityKind, Type[Any]]] = {}

    # ---- Registration ----
    @classmethod
    def register_candidate(cls, kind: CapabilityKind, ref: ImplementationRef) -> None:
        """Register ``ref`` as the preferred candidate for ``kind``.

        Clears the cached class for ``kind`` so the next lookup sees it.
        """
        kind = CapabilityKind(kind)
        cls._candidates.setdefault(kind, []).insert(0, ref)
        cls._cache.pop(kind, None)

    @classmethod
    def clear_cache(cls) -> None:
        """Forget cached classes and registered candidates (testing convenience)."""
        cls._candidates.clear()
        cls._cache.clear()

    # ---- Lookup ----
    @classmethod
    def _entry_point_refs(cls, kind: CapabilityKind) -> List[str]:
        eps = metadata.entry_points(group=ENTRY_POINT_GROUP)
        return [ep.value for ep in eps if ep.name == kind.value]

    @classmethod
    def find(cls, kind: CapabilityKind) -> Any:
        """Return a new instance of the first accepted candidate for ``kind``.

        Raises
        ------
        DiscoveryError
            If no candidate imports and declares the contract for ``kind``.
        """
        kind = CapabilityKind(kind)
        klass = cls._cache.get(kind)
        if klass is None:
            klass = cls._locate(kind)
            cls._cache[kind] = klass
        return klass()

    @classmethod
    def _locate(cls, kind: CapabilityKind) -> Type[Any]:
        contract = CONTRACTS[kind]
        refs: List[ImplementationRef] = list(cls._candidates.get(kind, ()))
        refs.extend(cls._entry_point_refs(kind))
        tried: List[str] = []
        for ref in refs:
            name = describe(ref)
            tried.append(name)
            ctx = LogContext(kind=kind.value, implementation=name)
            try:
                klass = load_class(ref)
            except (ImportError, AttributeError, TypeError) as exc:
                log_event(_logger, "discovery.skip", ctx, reason=str(exc), level=logging.DEBUG)
                continue
            if not declares_contract(klass, contract):
                log_event(_logger, "discovery.skip", ctx, reason=f"does not implement {contract_name(kind)}", level=logging.DEBUG)
                continue
            log_event(_logger, "discovery.found", ctx)
            return klass
        log_event(_logger, "discovery.miss", LogContext(kind=kind.value), tried=tried, level=logging.WARNING)
        raise DiscoveryError(kind=kind.value, contract=contract_name(kind), tried=tuple(tried))

    # ---- Per-kind delegates ----
    @classmethod
    def find_request_factory(cls) -> Any:
        return cls.find(CapabilityKind.REQUEST_FACTORY)

    @classmethod
    def find_response_factory(cls) -> Any:
        return cls.find(CapabilityKind.RESPONSE_FACTORY)

    @classmethod
    def find_server_request_factory(cls) -> Any:
        return cls.find(CapabilityKind.SERVER_REQUEST_FACTORY)

    @classmethod
    def find_stream_factory(cls) -> Any:
        return cls.find(CapabilityKind.STREAM_FACTORY)

    @classmethod
    def find_uploaded_file_factory(cls) -> Any:
        return cls.find(CapabilityKind.UPLOADED_FILE_FACTORY)

    @classmethod
    def find_uri_factory(cls) -> Any:
        return cls.find(CapabilityKind.URI_FACTORY)


__all__ = ["FactoryDiscovery", "ENTRY_POINT_GROUP"]
