"""Checkout Service — order forms and cart items.

Invariants:
    - Cart detail responses always include `productDetails` (possibly [])
    - A failed SKU lookup yields skuDetails=None plus an `error` message on that entry only
"""

from typing import Any

from catalog_gateway.core import vtex_endpoints
from catalog_gateway.core.domain_types import JSONValue
from catalog_gateway.core.merge import children_of, with_collection
from catalog_gateway.infrastructure.upstream_client import UpstreamClient
from catalog_gateway.services.aggregate import aggregate
from catalog_gateway.services.sku import fetch_sku


async def create_order_form(client: UpstreamClient) -> JSONValue:
    return await client.get_json(vtex_endpoints.order_form())


async def add_items_to_cart(
    client: UpstreamClient, order_form_id: str, order_items: list[Any],
) -> tuple[int, JSONValue]:
    """Forward orderItems to the order form; returns (upstream status, body)."""
    return await client.post_json(
        vtex_endpoints.order_form_items(order_form_id),
        {"orderItems": order_items},
    )


async def get_cart_with_product_details(
    client: UpstreamClient, order_form_id: str,
) -> dict:
    order_form = await client.get_json(vtex_endpoints.order_form(order_form_id))
    items = children_of(order_form, "items")
    if not items:
        return with_collection(order_form, "productDetails", [])
    details = await aggregate(
        items,
        lambda sku_id: fetch_sku(client, sku_id),
        reference_key="id",
        merge_key="skuDetails",
        error_flag="error",
    )
    return with_collection(order_form, "productDetails", details)
