"""
Configuration error raised while building a provider.

Raised synchronously during :class:`~fusible_http.di.provider.HttpProvider`
construction when an explicitly supplied implementation does not declare the
contract of its capability kind, or cannot be resolved at all.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class ConfigurationError(ValueError):
    """Explicit implementation rejected for a capability kind.

    Attributes:
        implementation: Name of the offending implementation (dotted path or class name).
        contract: Name of the contract the implementation failed to satisfy.
        reason: Optional detail when the implementation could not be resolved.
        code: Normalized :class:`ErrorCode`; always ``CONFIGURATION``.
    """

    implementation: str
    contract: str
    reason: Optional[str] = None
    code: ErrorCode = ErrorCode.CONFIGURATION

    def __str__(self) -> str:
        if self.reason:
            return f"{self.implementation} must implement {self.contract}: {self.reason}"
        return f"{self.implementation} must implement {self.contract}"


__all__ = ["ConfigurationError"]
