"""Rejection of explicit implementations that do not declare their contract."""
from __future__ import annotations

import pytest

from fusible_http import ConfigurationError, ErrorCode, HttpProvider
from fusible_http.base.capabilities import CapabilityKind, contract_name
from fusible_http.tests.fakes import CustomStreamFactory, FakeUriFactory, NotAUriFactory, ref


def test_not_a_uri_factory_is_rejected():
    with pytest.raises(ConfigurationError) as info:
        HttpProvider(uri=ref(NotAUriFactory))
    err = info.value
    assert err.implementation == ref(NotAUriFactory)  # nosec B101
    assert err.contract == contract_name(CapabilityKind.URI_FACTORY)  # nosec B101
    assert err.code is ErrorCode.CONFIGURATION  # nosec B101
    assert "NotAUriFactory" in str(err) and "UriFactory" in str(err)  # nosec B101
    assert isinstance(err, ValueError)  # nosec B101


def test_structural_match_is_not_enough():
    # NotAUriFactory has create_uri but never subclasses UriFactory
    with pytest.raises(ConfigurationError):
        HttpProvider(uri=NotAUriFactory)


def test_implementation_for_wrong_kind_is_rejected():
    with pytest.raises(ConfigurationError) as info:
        HttpProvider(request=CustomStreamFactory)
    assert info.value.contract.endswith("RequestFactory")  # nosec B101


@pytest.mark.parametrize(
    "implementation",
    [
        "NotAUriFactory",
        "fusible_http.tests.does_not_exist:Thing",
        "fusible_http.tests.fakes:Missing",
        "fusible_http.tests.fakes:NOT_A_CLASS",
    ],
)
def test_unresolvable_reference_is_configuration_error(implementation):
    with pytest.raises(ConfigurationError) as info:
        HttpProvider(uri=implementation)
    assert info.value.implementation == implementation  # nosec B101
    assert info.value.reason  # nosec B101


def test_first_failure_in_declared_order_wins():
    with pytest.raises(ConfigurationError) as info:
        HttpProvider(response=NotAUriFactory, uri=NotAUriFactory)
    assert info.value.contract.endswith("ResponseFactory")  # nosec B101


def test_failure_stops_processing_of_later_kinds(monkeypatch):
    seen = []
    real = HttpProvider._assert_implementation

    def spy(implementation, kind):
        seen.append(kind)
        return real(implementation, kind)

    monkeypatch.setattr(HttpProvider, "_assert_implementation", staticmethod(spy))
    with pytest.raises(ConfigurationError):
        HttpProvider(response=NotAUriFactory, uri=FakeUriFactory)
    assert seen == [CapabilityKind.RESPONSE_FACTORY]  # nosec B101
