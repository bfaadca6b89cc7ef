"""
Capability contracts (Protocols) for the HTTP factory provider.

This module re-exports Protocols split into single-class modules under
``fusible_http.base.interfaces_parts`` to satisfy one-class-per-file governance
while keeping imports stable for upstream code.

Factory contracts are nominal: an implementation conforms by subclassing the
Protocol, and the provider checks that declaration rather than the shape of
the class.
"""

from __future__ import annotations

from .interfaces_parts import (
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

__all__ = [
    "RequestFactory",
    "ResponseFactory",
    "ServerRequestFactory",
    "StreamFactory",
    "UploadedFileFactory",
    "UriFactory",
    "ServerRequestCreatorInterface",
    "ContainerInterface",
    "ServiceProvider",
]
