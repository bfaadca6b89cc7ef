"""
Discovery failure raised when no installed implementation can be located.

Only raised at resolution time, when a discovery binding is invoked.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .error_code import ErrorCode


@dataclass(eq=False)
class DiscoveryError(LookupError):
    """No candidate implementation declared the contract for ``kind``.

    Attributes:
        kind: Capability kind value that was looked up.
        contract: Name of the required contract.
        tried: Candidate references examined, in lookup order.
        code: Normalized :class:`ErrorCode`; always ``DISCOVERY``.
    """

    kind: str
    contract: str
    tried: Tuple[str, ...] = field(default_factory=tuple)
    code: ErrorCode = ErrorCode.DISCOVERY

    def __str__(self) -> str:
        tried = ", ".join(self.tried) if self.tried else "no candidates"
        return f"could not find an implementation of {self.contract} for {self.kind} (tried: {tried})"


__all__ = ["DiscoveryError"]
