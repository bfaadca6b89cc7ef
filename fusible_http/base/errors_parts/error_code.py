"""
Normalized error codes for the HTTP factory provider.

Defines the `ErrorCode` enumeration carried by every structured exception in
``fusible_http``. Values are lowercase snake_case and are a stable public
contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFIGURATION = "configuration"
    DISCOVERY = "discovery"
    NOT_FOUND = "not_found"


__all__ = ["ErrorCode"]
