"""fusible_http package

Service provider wiring HTTP message factories into a dependency injection
container.

Public API (re-exported):
    - Version: ``__version__``
    - Provider: :class:`HttpProvider`, ``DISCOVERY_TABLE``
    - Container: :class:`Container`, :func:`build_container`
    - Capabilities: :class:`CapabilityKind`
    - Exceptions: :class:`ConfigurationError`, :class:`DiscoveryError`,
      :class:`NotFoundError`, :class:`ErrorCode`

Example::

    from fusible_http import CapabilityKind, HttpProvider, build_container

    container = build_container(HttpProvider(stream="my_pkg.http:StreamFactory"))
    creator = container.get(CapabilityKind.SERVER_REQUEST_CREATOR)
"""

from .base.capabilities import CapabilityKind
from .base.errors import ConfigurationError, DiscoveryError, ErrorCode, NotFoundError
from .di import DISCOVERY_TABLE, Container, HttpProvider, build_container
from .discovery import FactoryDiscovery
from .server import ServerRequestCreator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "HttpProvider",
    "DISCOVERY_TABLE",
    "Container",
    "build_container",
    "CapabilityKind",
    "FactoryDiscovery",
    "ServerRequestCreator",
    "ErrorCode",
    "ConfigurationError",
    "DiscoveryError",
    "NotFoundError",
]
