"""Pytest configuration for the fusible_http test suite."""

from __future__ import annotations

from typing import Any, Dict, Iterator

import pytest

from fusible_http.discovery import FactoryDiscovery

from fusible_http.tests.fakes import (
    CustomStreamFactory,
    FakeRequestFactory,
    FakeResponseFactory,
    FakeServerRequestFactory,
    FakeUploadedFileFactory,
    FakeUriFactory,
)


@pytest.fixture(autouse=True)
def reset_discovery() -> Iterator[None]:
    """Isolate discovery candidates and caches between tests."""

    FactoryDiscovery.clear_cache()
    yield
    FactoryDiscovery.clear_cache()


@pytest.fixture()
def no_entry_points(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide installed entry points so discovery only sees registered candidates."""

    monkeypatch.setattr(FactoryDiscovery, "_entry_point_refs", classmethod(lambda cls, kind: []))


@pytest.fixture()
def explicit_factories() -> Dict[str, Any]:
    """Constructor kwargs naming a conforming fake for every kind."""

    return {
        "request": FakeRequestFactory,
        "response": FakeResponseFactory,
        "server_request": FakeServerRequestFactory,
        "stream": CustomStreamFactory,
        "upload": FakeUploadedFileFactory,
        "uri": FakeUriFactory,
    }

