"""Reference container resolving provider bindings."""
from __future__ import annotations

import pytest

from fusible_http import CapabilityKind, Container, HttpProvider, NotFoundError, ServerRequestCreator, build_container
from fusible_http.tests.fakes import (
    CustomStreamFactory,
    FakeServerRequestFactory,
    FakeUploadedFileFactory,
    FakeUriFactory,
    OtherUriFactory,
)


class ExtendingProvider:
    def get_bindings(self):
        return {"greeting": lambda: "hello"}

    def get_extensions(self):
        return {"greeting": lambda container, previous: previous + " world"}


def _full_provider(explicit_factories):
    return HttpProvider(**explicit_factories)


def test_container_resolves_and_caches_factories(explicit_factories):
    container = build_container(_full_provider(explicit_factories))
    stream = container.get(CapabilityKind.STREAM_FACTORY)
    assert isinstance(stream, CustomStreamFactory)  # nosec B101
    assert container.get(CapabilityKind.STREAM_FACTORY) is stream  # nosec B101


def test_container_passes_itself_to_server_request_creator(explicit_factories):
    container = build_container(_full_provider(explicit_factories))
    creator = container.get(CapabilityKind.SERVER_REQUEST_CREATOR)
    assert isinstance(creator, ServerRequestCreator)  # nosec B101
    assert isinstance(creator.server_request_factory, FakeServerRequestFactory)  # nosec B101
    assert isinstance(creator.uri_factory, FakeUriFactory)  # nosec B101
    assert isinstance(creator.uploaded_file_factory, FakeUploadedFileFactory)  # nosec B101
    assert creator.stream_factory is container.get(CapabilityKind.STREAM_FACTORY)  # nosec B101


def test_container_resolves_discovered_factory(no_entry_points):
    from fusible_http import FactoryDiscovery

    FactoryDiscovery.register_candidate(CapabilityKind.STREAM_FACTORY, CustomStreamFactory)
    container = Container([HttpProvider()])
    assert isinstance(container.get(CapabilityKind.STREAM_FACTORY), CustomStreamFactory)  # nosec B101


def test_unknown_entry_raises_not_found():
    container = Container()
    assert not container.has("missing")  # nosec B101
    with pytest.raises(NotFoundError) as info:
        container.get("missing")
    assert isinstance(info.value, LookupError)  # nosec B101


def test_extensions_wrap_bindings():
    container = Container([ExtendingProvider()])
    assert container.has("greeting")  # nosec B101
    assert container.get("greeting") == "hello world"  # nosec B101


def test_later_provider_overrides_and_clear_rebuilds(explicit_factories):
    container = Container([HttpProvider(**explicit_factories)])
    first = container.get(CapabilityKind.URI_FACTORY)
    container.clear()
    second = container.get(CapabilityKind.URI_FACTORY)
    assert second is not first  # nosec B101
    creator = container.get(CapabilityKind.SERVER_REQUEST_CREATOR)
    container.register(HttpProvider(**{**explicit_factories, "uri": OtherUriFactory}))
    overridden = container.get(CapabilityKind.URI_FACTORY)
    assert type(overridden) is OtherUriFactory  # nosec B101
    rebuilt = container.get(CapabilityKind.SERVER_REQUEST_CREATOR)
    assert rebuilt is not creator  # nosec B101
    assert rebuilt.uri_factory is overridden  # nosec B101
