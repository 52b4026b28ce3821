"""Checkout routes — order form creation, add-to-cart, cart with product details.

Invariants:
    - One failing SKU lookup leaves the cart response at 200 with that entry null + error
    - Missing orderItems → 400 JSON {"error": "Item data is required"}
    - Upstream add-to-cart status is forwarded
"""

ORDER_FORM = "/api/checkout/pub/orderForm"
SKU = "/api/catalog_system/pvt/sku/stockkeepingunitbyid/"


async def test_cart_creates_order_form(client, vtex):
    vtex.add(ORDER_FORM, {"orderFormId": "new1", "items": []})
    res = await client.get("/cart/")
    assert res.status_code == 200
    assert res.json()["orderFormId"] == "new1"


async def test_cart_upstream_failure_is_500(client, vtex):
    vtex.disconnect(ORDER_FORM)
    res = await client.get("/cart/")
    assert res.status_code == 500


# ==============================================================================
# /add-to-cart
# ==============================================================================


async def test_add_to_cart_forwards_body_and_status(client, vtex):
    items = [{"id": "1", "quantity": 1, "seller": "1"}]
    vtex.add(
        ORDER_FORM + "/xyz/items", {"orderFormId": "xyz", "items": items},
        status=201, method="POST",
    )

    res = await client.post("/add-to-cart/xyz", json={"orderItems": items})

    assert res.status_code == 201
    assert res.json()["orderFormId"] == "xyz"
    sent = vtex.requests[0]
    assert sent.method == "POST"
    assert b'"seller"' in sent.content


async def test_add_to_cart_without_order_items_is_400_json(client, vtex):
    res = await client.post("/add-to-cart/xyz", json={})
    assert res.status_code == 400
    assert res.json() == {"error": "Item data is required"}
    assert vtex.requests == []


async def test_add_to_cart_without_body_is_400_json(client):
    res = await client.post("/add-to-cart/xyz")
    assert res.status_code == 400
    assert res.json() == {"error": "Item data is required"}


async def test_add_to_cart_empty_list_is_forwarded(client, vtex):
    vtex.add(ORDER_FORM + "/xyz/items", {"orderFormId": "xyz"}, method="POST")
    res = await client.post("/add-to-cart/xyz", json={"orderItems": []})
    assert res.status_code == 200


async def test_add_to_cart_requires_order_form_id(client):
    res = await client.post("/add-to-cart/", json={"orderItems": [{"id": "1"}]})
    assert res.status_code == 400
    assert res.text == "Order form ID is required"


async def test_add_to_cart_upstream_failure_is_500(client, vtex):
    vtex.add(ORDER_FORM + "/xyz/items", {"Message": "bad"}, status=400, method="POST")
    res = await client.post("/add-to-cart/xyz", json={"orderItems": [{"id": "1"}]})
    assert res.status_code == 500
    assert res.text == "Error adding items to cart in VTEX API"


# ==============================================================================
# /cart-with-product-details
# ==============================================================================


async def test_cart_with_product_details_partial_failure(client, vtex):
    vtex.add(ORDER_FORM + "/abc123", {
        "orderFormId": "abc123", "items": [{"id": "1"}, {"id": "2"}],
    })
    vtex.add(SKU + "1", {"Id": 1, "NameComplete": "One"})
    vtex.add(SKU + "2", {"Message": "boom"}, status=500)

    res = await client.get("/cart-with-product-details/abc123")

    assert res.status_code == 200
    body = res.json()
    assert body["orderFormId"] == "abc123"
    details = body["productDetails"]
    assert len(details) == 2
    assert details[0]["id"] == "1"
    assert details[0]["skuDetails"] == {"Id": 1, "NameComplete": "One"}
    assert "error" not in details[0]
    assert details[1]["id"] == "2"
    assert details[1]["skuDetails"] is None
    assert details[1]["error"]


async def test_cart_with_product_details_no_items(client, vtex):
    vtex.add(ORDER_FORM + "/abc123", {"orderFormId": "abc123", "items": []})
    res = await client.get("/cart-with-product-details/abc123")
    assert res.status_code == 200
    assert res.json()["productDetails"] == []
    assert len(vtex.requests) == 1


async def test_cart_with_product_details_missing_items_key(client, vtex):
    vtex.add(ORDER_FORM + "/abc123", {"orderFormId": "abc123"})
    res = await client.get("/cart-with-product-details/abc123")
    assert res.status_code == 200
    assert res.json()["productDetails"] == []


async def test_cart_with_product_details_order_form_failure_is_500(client, vtex):
    vtex.add(ORDER_FORM + "/abc123", {"Message": "err"}, status=500)
    res = await client.get("/cart-with-product-details/abc123")
    assert res.status_code == 500
    assert res.text == "Error fetching cart details from VTEX API"


async def test_cart_with_product_details_requires_id(client):
    res = await client.get("/cart-with-product-details/")
    assert res.status_code == 400


async def test_add_to_cart_empty_upstream_body_keeps_204_bodyless(client, vtex):
    vtex.add(ORDER_FORM + "/xyz/items", text="", status=204, method="POST")
    res = await client.post("/add-to-cart/xyz", json={"orderItems": [{"id": "1"}]})
    assert res.status_code == 204
    assert res.content == b""


async def test_add_to_cart_trailing_slash_is_not_part_of_id(client, vtex):
    vtex.add(ORDER_FORM + "/xyz/items", {"orderFormId": "xyz"}, method="POST")
    res = await client.post("/add-to-cart/xyz/", json={"orderItems": [{"id": "1"}]})
    assert res.status_code == 200
    assert vtex.paths() == [ORDER_FORM + "/xyz/items"]


async def test_cart_with_product_details_trailing_slash(client, vtex):
    vtex.add(ORDER_FORM + "/abc123", {"orderFormId": "abc123", "items": []})
    res = await client.get("/cart-with-product-details/abc123/")
    assert res.status_code == 200
    assert res.json()["orderFormId"] == "abc123"
