"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `fusible_http.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .configuration_error import ConfigurationError
from .discovery_error import DiscoveryError
from .not_found_error import NotFoundError

__all__ = ["ErrorCode", "ConfigurationError", "DiscoveryError", "NotFoundError"]
