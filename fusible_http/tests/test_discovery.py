"""Discovery of factory implementations from registered candidates and entry points."""
from __future__ import annotations

import pytest

from fusible_http import CapabilityKind, DiscoveryError, ErrorCode, FactoryDiscovery
from fusible_http.discovery import ENTRY_POINT_GROUP
from fusible_http.tests.fakes import CustomStreamFactory, FakeUriFactory, InheritedStreamFactory, NotAUriFactory, ref


def test_registered_candidate_is_found(no_entry_points):
    FactoryDiscovery.register_candidate(CapabilityKind.URI_FACTORY, ref(FakeUriFactory))
    found = FactoryDiscovery.find_uri_factory()
    assert isinstance(found, FakeUriFactory)  # nosec B101
    assert FactoryDiscovery.find_uri_factory() is not found  # nosec B101


def test_latest_registration_is_preferred(no_entry_points):
    FactoryDiscovery.register_candidate(CapabilityKind.STREAM_FACTORY, CustomStreamFactory)
    assert type(FactoryDiscovery.find_stream_factory()) is CustomStreamFactory  # nosec B101
    FactoryDiscovery.register_candidate(CapabilityKind.STREAM_FACTORY, InheritedStreamFactory)
    assert type(FactoryDiscovery.find_stream_factory()) is InheritedStreamFactory  # nosec B101


def test_nonconforming_and_broken_candidates_are_skipped(no_entry_points):
    FactoryDiscovery.register_candidate(CapabilityKind.URI_FACTORY, ref(FakeUriFactory))
    FactoryDiscovery.register_candidate(CapabilityKind.URI_FACTORY, NotAUriFactory)
    FactoryDiscovery.register_candidate(CapabilityKind.URI_FACTORY, "nowhere.at.all:Uri")
    assert isinstance(FactoryDiscovery.find_uri_factory(), FakeUriFactory)  # nosec B101


def test_miss_raises_discovery_error(no_entry_points):
    FactoryDiscovery.register_candidate(CapabilityKind.REQUEST_FACTORY, NotAUriFactory)
    with pytest.raises(DiscoveryError) as info:
        FactoryDiscovery.find_request_factory()
    err = info.value
    assert err.kind == CapabilityKind.REQUEST_FACTORY.value  # nosec B101
    assert err.tried == (ref(NotAUriFactory).replace(":", "."),)  # nosec B101
    assert err.code is ErrorCode.DISCOVERY  # nosec B101
    assert "RequestFactory" in str(err)  # nosec B101


def test_entry_points_are_consulted(monkeypatch):
    from importlib import metadata

    ep = metadata.EntryPoint(name="uri_factory", value=ref(FakeUriFactory), group=ENTRY_POINT_GROUP)
    other = metadata.EntryPoint(name="stream_factory", value=ref(CustomStreamFactory), group=ENTRY_POINT_GROUP)
    monkeypatch.setattr(metadata, "entry_points", lambda group: [ep, other] if group == ENTRY_POINT_GROUP else [])
    assert isinstance(FactoryDiscovery.find_uri_factory(), FakeUriFactory)  # nosec B101


@pytest.mark.parametrize(
    "method, kind",
    [
        ("find_request_factory", CapabilityKind.REQUEST_FACTORY),
        ("find_response_factory", CapabilityKind.RESPONSE_FACTORY),
        ("find_server_request_factory", CapabilityKind.SERVER_REQUEST_FACTORY),
        ("find_stream_factory", CapabilityKind.STREAM_FACTORY),
        ("find_uploaded_file_factory", CapabilityKind.UPLOADED_FILE_FACTORY),
        ("find_uri_factory", CapabilityKind.URI_FACTORY),
    ],
)
def test_each_delegate_looks_up_its_own_kind(monkeypatch, method, kind):
    seen = []
    monkeypatch.setattr(FactoryDiscovery, "find", classmethod(lambda cls, k: seen.append(k)))
    getattr(FactoryDiscovery, method)()
    assert seen == [kind]  # nosec B101


def test_class_is_cached_until_cleared(no_entry_points, monkeypatch):
    FactoryDiscovery.register_candidate(CapabilityKind.STREAM_FACTORY, CustomStreamFactory)
    FactoryDiscovery.find_stream_factory()
    calls = []
    real = FactoryDiscovery._locate.__func__
    monkeypatch.setattr(FactoryDiscovery, "_locate", classmethod(lambda cls, k: calls.append(k) or real(cls, k)))
    FactoryDiscovery.find_stream_factory()
    assert calls == []  # nosec B101
    FactoryDiscovery.clear_cache()
    with pytest.raises(DiscoveryError):
        FactoryDiscovery.find_stream_factory()
    assert calls == [CapabilityKind.STREAM_FACTORY]  # nosec B101
