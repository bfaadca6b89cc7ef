"""Configuration layer for the HTTP factory provider.

Merges sources in a predictable order (later wins):
    1. Optional external config file (JSON or YAML) pointed to by
       ``FUSIBLE_HTTP_CONFIG_FILE``
    2. Environment variables (``FUSIBLE_HTTP_<KIND>_FACTORY``)
    3. In-code overrides passed to the helper

External config file example::

    stream: my_pkg.http:StreamFactory
    uri: my_pkg.http:UriFactory

A top-level ``http_factories`` section is also accepted so the provider can
share a file with other settings. A file that parses as neither
JSON nor YAML is treated as empty.

Public API
----------
* get_provider_settings(overrides: dict | None = None) -> ProviderSettings
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .env import CONFIG_FILE_ENV, ENV_MAP, env_overrides, is_placeholder
from .settings import ProviderSettings

try:  # Optional YAML support
    import yaml  # type: ignore
except ImportError:  # pragma: no cover
    yaml = None  # type: ignore

FILE_SECTION = "http_factories"


def _load_external_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    source = os.environ if environ is None else environ
    path = source.get(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        if yaml is None:
            return {}
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            return {}
    if not isinstance(data, dict):
        return {}
    section = data.get(FILE_SECTION, data)
    if not isinstance(section, dict):
        return {}
    return {k: v for k, v in section.items() if k in ENV_MAP and v is not None}


def get_provider_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ProviderSettings:
    """Return merged provider settings.

    Merge order (later wins): external config file -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    cfg: Dict[str, Any] = {}
    cfg |= _load_external_config(environ)
    cfg |= env_overrides(environ)
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return ProviderSettings(**cfg)


__all__ = [
    "ProviderSettings",
    "get_provider_settings",
    "ENV_MAP",
    "CONFIG_FILE_ENV",
    "is_placeholder",
]
