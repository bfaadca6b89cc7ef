"""Composite server request creator.

Bundles the server request, URI, uploaded file and stream factories so that a
WSGI application can turn its ``environ`` into a server request object. All
message construction is delegated to the factories.
"""
from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote

from ..base.interfaces import (
    ServerRequestCreatorInterface,
    ServerRequestFactory,
    StreamFactory,
    UploadedFileFactory,
    UriFactory,
)

_DEFAULT_PORTS = {"http": "80", "https": "443"}


def build_uri(environ: Mapping[str, Any]) -> str:
    """Reconstruct the request URL from a WSGI ``environ`` (PEP 3333)."""
    scheme = environ.get("wsgi.url_scheme", "http")
    host = environ.get("HTTP_HOST")
    if not host:
        host = environ.get("SERVER_NAME", "localhost")
        port = str(environ.get("SERVER_PORT", ""))
        if port and port != _DEFAULT_PORTS.get(scheme):
            host = f"{host}:{port}"
    path = quote(environ.get("SCRIPT_NAME", "")) + quote(environ.get("PATH_INFO", ""))
    url = f"{scheme}://{host}{path or '/'}"
    query = environ.get("QUERY_STRING")
    if query:
        url = f"{url}?{query}"
    return url


class ServerRequestCreator(ServerRequestCreatorInterface):
    """Create server requests using four injected factories.

    The server request factory contract carries no body, so ``from_environ``
    returns a request without one. Callers attach the stream returned by
    ``body_from_environ`` (and any uploaded files built with
    ``uploaded_file_factory``) using their message implementation.

    Args:
        server_request_factory: Builds the server request object.
        uri_factory: Builds the URI passed to the request factory.
        uploaded_file_factory: Exposed for applications attaching uploaded files.
        stream_factory: Wraps ``wsgi.input`` in ``body_from_environ``.
    """

    def __init__(
        self,
        server_request_factory: ServerRequestFactory,
        uri_factory: UriFactory,
        uploaded_file_factory: UploadedFileFactory,
        stream_factory: StreamFactory,
    ) -> None:
        self.server_request_factory = server_request_factory
        self.uri_factory = uri_factory
        self.uploaded_file_factory = uploaded_file_factory
        self.stream_factory = stream_factory

    def from_environ(self, environ: Mapping[str, Any]) -> Any:
        """Return a server request for the WSGI ``environ``."""
        method = str(environ.get("REQUEST_METHOD", "GET")).upper()
        uri = self.uri_factory.create_uri(build_uri(environ))
        return self.server_request_factory.create_server_request(method, uri, dict(environ))

    def body_from_environ(self, environ: Mapping[str, Any]) -> Any:
        """Return the request body stream for ``environ``.

        ``wsgi.input`` is wrapped through the stream factory; an environ
        without one yields an empty stream.
        """
        resource = environ.get("wsgi.input")
        if resource is None:
            return self.stream_factory.create_stream("")
        return self.stream_factory.create_stream_from_resource(resource)


__all__ = ["ServerRequestCreator", "build_uri"]
