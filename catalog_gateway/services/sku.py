"""SKU & Product Service — SKU lookups, pricing, recommendations, product variations."""

from catalog_gateway.core import vtex_endpoints
from catalog_gateway.core.domain_types import JSONValue
from catalog_gateway.core.errors import ResourceNotFoundError
from catalog_gateway.core.merge import children_of, reference_of, with_collection
from catalog_gateway.infrastructure.upstream_client import UpstreamClient
from catalog_gateway.services.aggregate import aggregate


async def fetch_sku(client: UpstreamClient, sku_id) -> JSONValue:
    return await client.get_json(vtex_endpoints.sku_by_id(sku_id))


async def get_sku_pricing(
    client: UpstreamClient, account: str, sku_id: str,
) -> JSONValue:
    return await client.get_json(vtex_endpoints.sku_price(account, sku_id))


async def get_recommendations(client: UpstreamClient, sku_id: str) -> JSONValue:
    """Cross-sell recommendations for the product a SKU belongs to.

    Raises ResourceNotFoundError when the SKU has no ProductId.
    """
    sku = await fetch_sku(client, sku_id)
    product_id = reference_of(sku, "ProductId")
    if product_id is None:
        raise ResourceNotFoundError(
            "Product ID not found for this SKU", "SKU", sku_id,
        )
    return await client.get_json(vtex_endpoints.cross_selling(product_id))


async def get_product_with_sku_details(
    client: UpstreamClient, product_id: str,
) -> dict:
    """Product variations with every SKU's catalog record under `additionalDetails`."""
    variations = await client.get_json(vtex_endpoints.product_variations(product_id))
    skus = children_of(variations, "skus")
    if not skus:
        raise ResourceNotFoundError(
            "No SKUs found for this product", "Product", product_id,
        )
    merged = await aggregate(
        skus,
        lambda sku_id: fetch_sku(client, sku_id),
        reference_key="sku",
        merge_key="additionalDetails",
    )
    return with_collection(variations, "skus", merged)
