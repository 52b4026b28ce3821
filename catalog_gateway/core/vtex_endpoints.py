"""VTEX Endpoint Paths — relative paths for every upstream resource the gateway reads.

Invariants:
    - Every identifier is percent-encoded as a single path segment
    - Paths are relative to the configured VTEX API URL (leading slash, no host)
"""

from urllib.parse import quote


def _segment(value) -> str:
    return quote(str(value), safe="")


def collection_products(collection_id) -> str:
    return f"/api/catalog/pvt/collection/{_segment(collection_id)}/products"


def product_search(query: str) -> str:
    return f"/api/catalog_system/pub/products/search/{_segment(query)}"


def product_variations(product_id) -> str:
    return f"/api/catalog_system/pub/products/variations/{_segment(product_id)}"


def sku_by_id(sku_id) -> str:
    return f"/api/catalog_system/pvt/sku/stockkeepingunitbyid/{_segment(sku_id)}"


def sku_price(account: str, sku_id) -> str:
    return f"/{_segment(account)}/pricing/prices/{_segment(sku_id)}"


def cross_selling(product_id) -> str:
    """Who-bought-also-bought recommendations for a product."""
    return (
        "/api/catalog_system/pub/products/crossselling/whoboughtalsobought/"
        f"{_segment(product_id)}"
    )


def order_form(order_form_id=None) -> str:
    """Existing order form, or a fresh one when no id is given."""
    if order_form_id is None:
        return "/api/checkout/pub/orderForm"
    return f"/api/checkout/pub/orderForm/{_segment(order_form_id)}"


def order_form_items(order_form_id) -> str:
    return f"{order_form(order_form_id)}/items"
