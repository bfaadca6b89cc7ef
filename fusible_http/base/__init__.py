"""
Base package for the HTTP factory provider.

Exports the capability contracts, capability kinds, error taxonomy and
implementation reference helpers shared by the discovery, server and DI
layers. Nothing here depends on those outer layers.
"""

from .capabilities import CONTRACTS, FACTORY_KINDS, CapabilityKind, contract_name
from .errors import ConfigurationError, DiscoveryError, ErrorCode, NotFoundError
from .interfaces import (
    ContainerInterface,
    RequestFactory,
    ResponseFactory,
    ServerRequestCreatorInterface,
    ServerRequestFactory,
    ServiceProvider,
    StreamFactory,
    UploadedFileFactory,
    UriFactory,
)
from .resolution import ImplementationRef, declares_contract, describe, load_class

__all__ = [
    # Capabilities
    "CapabilityKind",
    "FACTORY_KINDS",
    "CONTRACTS",
    "contract_name",
    # Interfaces
    "RequestFactory",
    "ResponseFactory",
    "ServerRequestFactory",
    "StreamFactory",
    "UploadedFileFactory",
    "UriFactory",
    "ServerRequestCreatorInterface",
    "ContainerInterface",
    "ServiceProvider",
    # Errors
    "ErrorCode",
    "ConfigurationError",
    "DiscoveryError",
    "NotFoundError",
    # Resolution
    "ImplementationRef",
    "load_class",
    "declares_contract",
    "describe",
]
