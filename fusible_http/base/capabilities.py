"""Capability kinds and their contracts.

Purpose
-------
Name the six HTTP factory roles the provider wires up, plus the synthetic
server request creator kind, and map each kind to the contract an
implementation must declare.

Notes
-----
- ``FACTORY_KINDS`` fixes the processing order used by the provider; it is
  the same order as the provider's constructor parameters.
- ``CONTRACTS`` is a read-only mapping; it is never mutated after import.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from .interfaces import (
    RequestFactory,
    ResponseFactory,
    ServerRequestCreatorInterface,
    ServerRequestFactory,
    StreamFactory,
    UploadedFileFactory,
    UriFactory,
)


class CapabilityKind(str, Enum):
    """Identifier of a capability slot registered in the container."""

    REQUEST_FACTORY = "request_factory"
    RESPONSE_FACTORY = "response_factory"
    SERVER_REQUEST_FACTORY = "server_request_factory"
    STREAM_FACTORY = "stream_factory"
    UPLOADED_FILE_FACTORY = "uploaded_file_factory"
    URI_FACTORY = "uri_factory"
    SERVER_REQUEST_CREATOR = "server_request_creator"


FACTORY_KINDS: Tuple[CapabilityKind, ...] = (
    CapabilityKind.REQUEST_FACTORY,
    CapabilityKind.RESPONSE_FACTORY,
    CapabilityKind.SERVER_REQUEST_FACTORY,
    CapabilityKind.STREAM_FACTORY,
    CapabilityKind.UPLOADED_FILE_FACTORY,
    CapabilityKind.URI_FACTORY,
)


CONTRACTS: Mapping[CapabilityKind, type] = MappingProxyType(
    {
        CapabilityKind.REQUEST_FACTORY: RequestFactory,
        CapabilityKind.RESPONSE_FACTORY: ResponseFactory,
        CapabilityKind.SERVER_REQUEST_FACTORY: ServerRequestFactory,
        CapabilityKind.STREAM_FACTORY: StreamFactory,
        CapabilityKind.UPLOADED_FILE_FACTORY: UploadedFileFactory,
        CapabilityKind.URI_FACTORY: UriFactory,
        CapabilityKind.SERVER_REQUEST_CREATOR: ServerRequestCreatorInterface,
    }
)


def contract_name(kind: CapabilityKind) -> str:
    """Return the qualified name of the contract for ``kind``."""
    contract = CONTRACTS[kind]
    return f"{contract.__module__}.{contract.__qualname__}"


__all__ = ["CapabilityKind", "FACTORY_KINDS", "CONTRACTS", "contract_name"]
