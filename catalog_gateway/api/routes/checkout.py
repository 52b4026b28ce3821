"""Checkout Routes — order form creation, add-to-cart, cart with product details.

Invariants:
    - /add-to-cart answers a missing orderItems with 400 JSON {"error": ...}
    - /add-to-cart forwards the upstream status code and body on success
    - An empty upstream body is forwarded as an empty body (204 stays body-less)
    - /cart-with-product-details never fails because of a single SKU lookup
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from catalog_gateway.api.dependencies import get_upstream_client
from catalog_gateway.api.route_helpers import describe_failure, require_path_id
from catalog_gateway.core.errors import MissingParameterError
from catalog_gateway.infrastructure.upstream_client import UpstreamClient
from catalog_gateway.schemas.cart import AddToCartRequest
from catalog_gateway.services import checkout

router = APIRouter(tags=["checkout"])


@router.get("/cart/")
async def create_cart(client: UpstreamClient = Depends(get_upstream_client)):
    with describe_failure("Error creating cart in VTEX API"):
        return await checkout.create_order_form(client)


@router.post("/add-to-cart/{order_form_id:path}")
async def add_to_cart(
    order_form_id: str,
    body: AddToCartRequest | None = None,
    client: UpstreamClient = Depends(get_upstream_client),
):
    order_form_id = require_path_id(
        order_form_id, "Order form ID is required", "orderFormId",
    )
    if body is None or body.orderItems is None:
        raise MissingParameterError(
            "Item data is required", "orderItems", json_body=True,
        )
    with describe_failure("Error adding items to cart in VTEX API"):
        status_code, data = await checkout.add_items_to_cart(
            client, order_form_id, body.orderItems,
        )
    if data is None:
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=data)


@router.get("/cart-with-product-details/{order_form_id:path}")
async def get_cart_with_product_details(
    order_form_id: str, client: UpstreamClient = Depends(get_upstream_client),
):
    order_form_id = require_path_id(
        order_form_id, "Order form ID is required", "orderFormId",
    )
    with describe_failure("Error fetching cart details from VTEX API"):
        return await checkout.get_cart_with_product_details(client, order_form_id)
