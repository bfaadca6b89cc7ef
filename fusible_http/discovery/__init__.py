"""Discovery of installed factory implementations.

Used by the provider as the fallback for capability kinds configured without
an explicit implementation.
"""
from __future__ import annotations

from .factory_discovery import ENTRY_POINT_GROUP, FactoryDiscovery

__all__ = ["FactoryDiscovery", "ENTRY_POINT_GROUP"]
