"""HTTP factory service provider.

Purpose
-------
Contribute one binding per HTTP factory capability kind to a container, plus
a composite server request creator binding. Each factory binding is either:

- an explicit implementation, validated now and instantiated (no arguments)
  when the binding is invoked; or
- the :class:`~fusible_http.discovery.FactoryDiscovery` delegate for that
  kind, which looks up an installed implementation when invoked.

The provider never builds HTTP messages and never caches instances; whether a
resolved factory is shared is the container's policy.

Failure modes
-------------
- :class:`ConfigurationError` during construction when an explicit
  implementation cannot be resolved or does not declare its contract. Kinds
  are processed in declared order and construction stops at the first error.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from ..base.capabilities import CONTRACTS, FACTORY_KINDS, CapabilityKind, contract_name
from ..base.errors import ConfigurationError
from ..base.interfaces import ContainerInterface, ServerRequestCreatorInterface
from ..base.logging import LogContext, get_logger, log_event
from ..base.resolution import ImplementationRef, declares_contract, describe, load_class
from ..discovery import FactoryDiscovery
from ..server import ServerRequestCreator

_logger = get_logger("fusible_http.provider")

# Capability kind -> FactoryDiscovery delegate name
DISCOVERY_TABLE: Mapping[CapabilityKind, str] = MappingProxyType(
    {
        CapabilityKind.REQUEST_FACTORY: "find_request_factory",
        CapabilityKind.RESPONSE_FACTORY: "find_response_factory",
        CapabilityKind.SERVER_REQUEST_FACTORY: "find_server_request_factory",
        CapabilityKind.STREAM_FACTORY: "find_stream_factory",
        CapabilityKind.UPLOADED_FILE_FACTORY: "find_uploaded_file_factory",
        CapabilityKind.URI_FACTORY: "find_uri_factory",
    }
)


class HttpProvider:
    """Service provider wiring the six HTTP factories and the server request creator.

    Args:
        request: ``RequestFactory`` implementation, or ``None`` to discover one.
        response: ``ResponseFactory`` implementation, or ``None``.
        server_request: ``ServerRequestFactory`` implementation, or ``None``.
        stream: ``StreamFactory`` implementation, or ``None``.
        upload: ``UploadedFileFactory`` implementation, or ``None``.
        uri: ``UriFactory`` implementation, or ``None``.

    Implementations are classes or dotted class paths (``"pkg.module:Class"``).

    Raises:
        ConfigurationError: An explicit implementation does not implement the
            contract of its kind.
    """

    def __init__(
        self,
        request: Optional[ImplementationRef] = None,
        response: Optional[ImplementationRef] = None,
        server_request: Optional[ImplementationRef] = None,
        stream: Optional[ImplementationRef] = None,
        upload: Optional[ImplementationRef] = None,
        uri: Optional[ImplementationRef] = None,
    ) -> None:
        self._bindings: Dict[CapabilityKind, Callable[..., Any]] = {}
        specs = dict(zip(FACTORY_KINDS, (request, response, server_request, stream, upload, uri)))
        self._define_factories(specs)
        self._bindings[CapabilityKind.SERVER_REQUEST_CREATOR] = self.new_server_request_creator

    # ---- Alternate constructors ----
    @classmethod
    def from_settings(cls, settings: Any) -> "HttpProvider":
        """Build a provider from a :class:`~fusible_http.config.ProviderSettings`."""
        return cls(**settings.model_dump())

    @classmethod
    def from_config(cls, overrides: Optional[Mapping[str, Any]] = None) -> "HttpProvider":
        """Build a provider from the merged file/env/override configuration."""
        from ..config import get_provider_settings

        return cls.from_settings(get_provider_settings(overrides))

    # ---- Provider contract ----
    def get_bindings(self) -> Dict[CapabilityKind, Callable[..., Any]]:
        """Return every binding keyed by capability kind.

        Returns:
            A new dict on each call holding the same seven bindings.
        """
        return dict(self._bindings)

    def get_extensions(self) -> Dict[CapabilityKind, Callable[..., Any]]:
        """Return extensions of existing container entries; this provider has none."""
        return {}

    # ---- Binding construction ----
    def _define_factories(self, specs: Mapping[CapabilityKind, Optional[ImplementationRef]]) -> None:
        for kind, implementation in specs.items():
            if implementation:
                klass = self._assert_implementation(implementation, kind)
                self._bindings[kind] = self._new_factory(klass)
                log_event(_logger, "provider.bind", LogContext(kind=kind.value, implementation=describe(klass)), mode="explicit", level=logging.DEBUG)
            else:
                self._bindings[kind] = self._discover(kind)
                log_event(_logger, "provider.bind", LogContext(kind=kind.value), mode="discovered", level=logging.DEBUG)

    @staticmethod
    def _discover(kind: CapabilityKind) -> Callable[[], Any]:
        """Return the discovery delegate for ``kind``."""
        return getattr(FactoryDiscovery, DISCOVERY_TABLE[kind])

    @staticmethod
    def _new_factory(klass: type) -> Callable[[], Any]:
        def factory() -> Any:
            return klass()

        factory.__qualname__ = f"new_{klass.__name__}"
        return factory

    @staticmethod
    def _assert_implementation(implementation: ImplementationRef, kind: CapabilityKind) -> type:
        """Resolve ``implementation`` and check it declares the contract of ``kind``.

        Returns:
            The resolved class.

        Raises:
            ConfigurationError: The reference cannot be resolved or the class
                does not declare the contract.
        """
        name = describe(implementation)
        contract = contract_name(kind)
        try:
            klass = load_class(implementation)
        except (ImportError, AttributeError, TypeError) as exc:
            log_event(_logger, "provider.reject", LogContext(kind=kind.value, implementation=name), reason=str(exc), level=logging.WARNING)
            raise ConfigurationError(implementation=name, contract=contract, reason=str(exc)) from exc
        if not declares_contract(klass, CONTRACTS[kind]):
            log_event(_logger, "provider.reject", LogContext(kind=kind.value, implementation=name), level=logging.WARNING)
            raise ConfigurationError(implementation=name, contract=contract)
        return klass

    # ---- Composite ----
    def new_server_request_creator(self, container: ContainerInterface) -> ServerRequestCreatorInterface:
        """Create the server request creator from factories held by ``container``."""
        return ServerRequestCreator(
            container.get(CapabilityKind.SERVER_REQUEST_FACTORY),
            container.get(CapabilityKind.URI_FACTORY),
            container.get(CapabilityKind.UPLOADED_FILE_FACTORY),
            container.get(CapabilityKind.STREAM_FACTORY),
        )


__all__ = ["HttpProvider", "DISCOVERY_TABLE"]
