"""Composite services built from several factories."""
from __future__ import annotations

from .server_request_creator import ServerRequestCreator, build_uri

__all__ = ["ServerRequestCreator", "build_uri"]
