from __future__ import annotations

import pytest

from fusible_http.base.interfaces import StreamFactory, UriFactory
from fusible_http.base.resolution import declares_contract, describe, load_class
from fusible_http.tests import fakes


def test_load_class_accepts_colon_and_dot_forms():
    assert load_class("fusible_http.tests.fakes:CustomStreamFactory") is fakes.CustomStreamFactory  # nosec B101
    assert load_class("fusible_http.tests.fakes.CustomStreamFactory") is fakes.CustomStreamFactory  # nosec B101
    assert load_class(fakes.FakeUriFactory) is fakes.FakeUriFactory  # nosec B101


@pytest.mark.parametrize(
    "ref, exc",
    [
        ("Bare", ImportError),
        ("fusible_http.tests.fakes:Nope", AttributeError),
        ("fusible_http.tests.fakes:NOT_A_CLASS", TypeError),
        (42, TypeError),
    ],
)
def test_load_class_failures(ref, exc):
    with pytest.raises(exc):
        load_class(ref)


def test_declares_contract_uses_mro():
    assert declares_contract(fakes.InheritedStreamFactory, StreamFactory)  # nosec B101
    assert not declares_contract(fakes.NotAUriFactory, UriFactory)  # nosec B101


def test_describe():
    assert describe(fakes.FakeUriFactory) == "fusible_http.tests.fakes.FakeUriFactory"  # nosec B101
    assert describe("a.b:C") == "a.b:C"  # nosec B101
