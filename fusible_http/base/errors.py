"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``fusible_http.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.configuration_error import ConfigurationError
from .errors_parts.discovery_error import DiscoveryError
from .errors_parts.not_found_error import NotFoundError

__all__ = ["ErrorCode", "ConfigurationError", "DiscoveryError", "NotFoundError"]
