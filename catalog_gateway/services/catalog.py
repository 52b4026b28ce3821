"""Catalog Service — collections and product search.

Invariants:
    - Search results always carry a `skus` key (variations, or [] when they failed)
    - Collection details answer 404 when the collection has no products
"""

from catalog_gateway.core import vtex_endpoints
from catalog_gateway.core.domain_types import JSONValue
from catalog_gateway.core.errors import ResourceNotFoundError
from catalog_gateway.core.merge import children_of
from catalog_gateway.infrastructure.upstream_client import UpstreamClient
from catalog_gateway.services.aggregate import aggregate
from catalog_gateway.services.sku import fetch_sku


async def get_collection_products(
    client: UpstreamClient, collection_id: str,
) -> JSONValue:
    return await client.get_json(vtex_endpoints.collection_products(collection_id))


async def search_collections(
    client: UpstreamClient, collection_search_url: str,
) -> JSONValue:
    return await client.get_json(collection_search_url)


async def search_products_with_skus(
    client: UpstreamClient, query: str,
) -> list:
    """Full-text search, each product enriched with its SKU variations."""
    products = await client.get_json(vtex_endpoints.product_search(query))

    async def fetch_variations(product_id):
        return await client.get_json(vtex_endpoints.product_variations(product_id))

    return await aggregate(
        children_of(products),
        fetch_variations,
        reference_key="productId",
        merge_key="skus",
        fallback=[],
    )


async def get_collection_product_details(
    client: UpstreamClient, collection_id: str,
) -> dict:
    """Collection products with each product's SKU merged under `SkuDetails`."""
    listing = await client.get_json(vtex_endpoints.collection_products(collection_id))
    products = children_of(listing, "Data")
    if not products:
        raise ResourceNotFoundError(
            "No products found for this collection",
            "Collection", str(collection_id),
        )
    merged = await aggregate(
        products,
        lambda sku_id: fetch_sku(client, sku_id),
        reference_key="SkuId",
        merge_key="SkuDetails",
    )
    return {"CollectionId": collection_id, "Products": merged}
