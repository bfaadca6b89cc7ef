"""fusible_http.config.env
=========================

Environment variable mapping for explicit factory implementations.

Purpose
-------
- Single source of truth mapping each provider setting to the environment
  variable that can set it.
- Small helpers to read those variables consistently.

Failure Modes
-------------
- Helpers never raise on unset variables; they return ``None`` and let the
  provider fall back to discovery.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

CONFIG_FILE_ENV = "FUSIBLE_HTTP_CONFIG_FILE"

# Setting field -> env var
ENV_MAP: Dict[str, str] = {
    "request": "FUSIBLE_HTTP_REQUEST_FACTORY",
    "response": "FUSIBLE_HTTP_RESPONSE_FACTORY",
    "server_request": "FUSIBLE_HTTP_SERVER_REQUEST_FACTORY",
    "stream": "FUSIBLE_HTTP_STREAM_FACTORY",
    "upload": "FUSIBLE_HTTP_UPLOADED_FILE_FACTORY",
    "uri": "FUSIBLE_HTTP_URI_FACTORY",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder value.

    Heuristics: contains 'placeholder', 'changeme', or is wrapped in angle
    brackets (``<class path>``). Case-insensitive, ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or (v.startswith("<") and v.endswith(">"))


def get_env_value(field: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the usable env value for a setting ``field`` or ``None``.

    Blank and placeholder values count as unset.
    """
    name = ENV_MAP.get(field)
    if name is None:
        return None
    source = os.environ if environ is None else environ
    value = source.get(name)
    if value is None or not value.strip() or is_placeholder(value):
        return None
    return value.strip()


def env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Return every setting set through the environment."""
    out: Dict[str, str] = {}
    for field in ENV_MAP:
        if (value := get_env_value(field, environ)) is not None:
            out[field] = value
    return out


__all__ = ["CONFIG_FILE_ENV", "ENV_MAP", "is_placeholder", "get_env_value", "env_overrides"]
