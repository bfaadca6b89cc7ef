"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file to satisfy governance rules
while allowing ``fusible_http.base.interfaces`` to re-export a stable API.
"""

from .request_factory import RequestFactory
from .response_factory import ResponseFactory
from .server_request_factory import ServerRequestFactory
from .stream_factory import StreamFactory
from .uploaded_file_factory import UploadedFileFactory
from .uri_factory import UriFactory
from .server_request_creator import ServerRequestCreatorInterface
from .container import ContainerInterface
from .service_provider import ServiceProvider

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
