"""Route helpers — required-value checks for query and path ids."""

import pytest

from catalog_gateway.api.route_helpers import require_param, require_path_id
from catalog_gateway.core.errors import MissingParameterError


def test_require_param_returns_value_unchanged():
    assert require_param(" 55 ", "Collection ID is required", "collectionId") == " 55 "


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_param_rejects_blank(value):
    with pytest.raises(MissingParameterError) as exc_info:
        require_param(value, "SKU ID is required", "skuId")
    assert exc_info.value.http_status == 400


def test_require_path_id_drops_one_trailing_slash():
    assert require_path_id("42/", "SKU ID is required", "skuId") == "42"


def test_require_path_id_keeps_inner_slashes():
    assert require_path_id("a/b", "SKU ID is required", "skuId") == "a/b"


@pytest.mark.parametrize("value", ["", "/", " /"])
def test_require_path_id_rejects_blank(value):
    with pytest.raises(MissingParameterError):
        require_path_id(value, "SKU ID is required", "skuId")
