"""SKU & Product Routes — SKU lookup, pricing, recommendations, product variations.

Invariants:
    - Path ids use the `path` converter so an empty trailing segment reaches
      require_path_id and answers 400 instead of a routing 404
    - One trailing slash is dropped: /sku/42/ looks up SKU 42
    - 404 only when a dependent resource is absent (ProductId, SKU list)
"""

from fastapi import APIRouter, Depends

from catalog_gateway.api.dependencies import get_upstream_client
from catalog_gateway.api.route_helpers import describe_failure, require_path_id
from catalog_gateway.config import Settings, get_settings
from catalog_gateway.infrastructure.upstream_client import UpstreamClient
from catalog_gateway.services import sku as sku_service

router = APIRouter(tags=["sku"])


@router.get("/sku/{sku_id:path}")
async def get_sku(
    sku_id: str, client: UpstreamClient = Depends(get_upstream_client),
):
    sku_id = require_path_id(sku_id, "SKU ID is required", "skuId")
    with describe_failure("Error fetching SKU details from VTEX API"):
        return await sku_service.fetch_sku(client, sku_id)


@router.get("/pricing/{sku_id:path}")
async def get_pricing(
    sku_id: str,
    client: UpstreamClient = Depends(get_upstream_client),
    settings: Settings = Depends(get_settings),
):
    sku_id = require_path_id(sku_id, "SKU ID is required", "skuId")
    with describe_failure("Error fetching pricing details from VTEX API"):
        return await sku_service.get_sku_pricing(
            client, settings.vtex_account, sku_id,
        )


@router.get("/recommendations/{sku_id:path}")
async def get_recommendations(
    sku_id: str, client: UpstreamClient = Depends(get_upstream_client),
):
    sku_id = require_path_id(sku_id, "SKU ID is required", "skuId")
    with describe_failure("Error fetching recommendations from VTEX API"):
        return await sku_service.get_recommendations(client, sku_id)


@router.get("/product/{product_id:path}")
async def get_product(
    product_id: str, client: UpstreamClient = Depends(get_upstream_client),
):
    """Product variations with each SKU's details under `additionalDetails`."""
    product_id = require_path_id(product_id, "Product ID is required", "productId")
    with describe_failure("Error fetching product details from VTEX API"):
        return await sku_service.get_product_with_sku_details(client, product_id)
