"""Dependency injection layer: the HTTP factory provider and a reference container.

The container has no external library dependency; any container exposing
``get``/``has`` and honouring the provider contract can consume
:class:`HttpProvider` instead.
"""
from __future__ import annotations

from .container import Container, build_container
from .provider import DISCOVERY_TABLE, HttpProvider

__all__ = ["HttpProvider", "DISCOVERY_TABLE", "Container", "build_container"]
