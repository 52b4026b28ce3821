"""Domain Types — UpstreamCredentials immutability and headers."""

import dataclasses

import pytest

from catalog_gateway.core.domain_types import (
    APP_KEY_HEADER, APP_TOKEN_HEADER, UpstreamCredentials,
)


def _creds():
    return UpstreamCredentials("https://vtex.test", "key", "token")


def test_credentials_are_frozen():
    creds = _creds()
    with pytest.raises(dataclasses.FrozenInstanceError):
        creds.app_key = "other"


def test_headers_carry_both_credentials():
    assert _creds().headers() == {
        APP_KEY_HEADER: "key",
        APP_TOKEN_HEADER: "token",
    }


def test_repr_omits_token():
    assert "'token'" not in repr(_creds())
