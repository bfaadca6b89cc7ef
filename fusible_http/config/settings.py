"""Typed settings for building an :class:`~fusible_http.di.provider.HttpProvider`.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()`` convenience.

Notes
-----
- Field names match the provider constructor parameters, so
  ``HttpProvider(**settings.model_dump())`` is valid.
- Values are implementation references (dotted class paths); whether they
  name conforming classes is checked by the provider, not here.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ProviderSettings(BaseModel):
    """Explicit factory implementations, one optional dotted path per kind.

    Attributes
    ----------
    request, response, server_request, stream, upload, uri:
        Dotted class path (``"pkg.module:Class"``) of the implementation for
        that kind, or ``None`` to let discovery decide.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    request: Optional[str] = None
    response: Optional[str] = None
    server_request: Optional[str] = None
    stream: Optional[str] = None
    upload: Optional[str] = None
    uri: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


__all__ = ["ProviderSettings"]
