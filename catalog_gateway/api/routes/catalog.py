"""Catalog Routes — collections and product search.

Invariants:
    - collectionId / q missing or blank → 400 before any upstream call
    - Upstream failure on the primary request → 500 with the route's generic text
"""

from fastapi import APIRouter, Depends, Query

from catalog_gateway.api.dependencies import get_upstream_client
from catalog_gateway.api.route_helpers import describe_failure, require_param
from catalog_gateway.config import Settings, get_settings
from catalog_gateway.infrastructure.upstream_client import UpstreamClient
from catalog_gateway.services import catalog

router = APIRouter(tags=["catalog"])


@router.get("/collectionProduct")
async def get_collection_products(
    collection_id: str | None = Query(None, alias="collectionId"),
    client: UpstreamClient = Depends(get_upstream_client),
):
    collection_id = require_param(
        collection_id, "Collection ID is required", "collectionId",
    )
    with describe_failure("Error fetching products from VTEX API"):
        return await catalog.get_collection_products(client, collection_id)


@router.get("/collection")
async def search_collections(
    client: UpstreamClient = Depends(get_upstream_client),
    settings: Settings = Depends(get_settings),
):
    with describe_failure("Error fetching collections from VTEX API"):
        return await catalog.search_collections(
            client, settings.collection_search_url,
        )


@router.get("/searchProducts")
async def search_products(
    q: str | None = Query(None),
    client: UpstreamClient = Depends(get_upstream_client),
):
    """Search products; each result carries its SKU variations under `skus`."""
    q = require_param(q, "Search query is required", "q")
    with describe_failure("Error fetching search results from VTEX API"):
        return await catalog.search_products_with_skus(client, q)


@router.get("/collectionProductDetails")
async def get_collection_product_details(
    collection_id: str | None = Query(None, alias="collectionId"),
    client: UpstreamClient = Depends(get_upstream_client),
):
    collection_id = require_param(
        collection_id, "Collection ID is required", "collectionId",
    )
    with describe_failure("Error fetching collection product details from VTEX API"):
        return await catalog.get_collection_product_details(client, collection_id)
