"""Integration tests for the Checkout API endpoints via TestClient."""

import pytest
from checkout.api.routes import cart_router, catalog_router
from checkout.shared.opaque_id import Namespace, decode_opaque_id, encode_opaque_id
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers

ADDRESS = {
    "street": "123 Main St",
    "city": "Springfield",
    "state": "IL",
    "postal_code": "62701",
    "country": "US",
}


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(cart_router)
    app.include_router(catalog_router)
    register_exception_handlers(app)
    return TestClient(app)


def _publish_product(client, product_id="prod-001", variant_ids=("var-001",), media=None):
    response = client.post(
        "/catalog/products",
        json={
            "product_id": product_id,
            "title": "Black T-Shirt",
            "variants": [
                {"variant_id": v, "pricing": {"USD": {"price": 12.0, "compare_at_price": 15.0}}, "quantity": 4}
                for v in variant_ids
            ],
            "media": media or [],
        },
    )
    assert response.status_code == 201


def _create_cart(client, currency_code="USD"):
    response = client.post("/carts", json={"customer_id": "cust-001", "currency_code": currency_code})
    assert response.status_code == 201
    return response.json()["cart_id"]


def _add_item(client, cart_id, product_id="prod-001", variant_id="var-001", quantity=2, amount=10.0):
    return client.post(
        f"/carts/{cart_id}/items",
        json={
            "product_configuration": {
                "product_id": encode_opaque_id(Namespace.PRODUCT, product_id),
                "product_variant_id": encode_opaque_id(Namespace.PRODUCT, variant_id),
            },
            "quantity": quantity,
            "price": {"amount": amount, "currency_code": "USD"},
        },
    )


def _add_shipping(client, cart_id, rate=5.0, handling=1.0):
    response = client.post(f"/carts/{cart_id}/fulfillment-groups", json={"shipping_address": ADDRESS})
    assert response.status_code == 201
    group_id = response.json()["group_id"]
    response = client.put(
        f"/carts/{cart_id}/fulfillment-groups/{group_id}/shipment-method",
        json={"method_id": "ground", "name": "Ground", "label": "Ground (3-5 days)", "rate": rate, "handling": handling},
    )
    assert response.status_code == 200
    return group_id


class TestCartEndpoints:
    def test_cart_id_is_opaque(self, client):
        cart_id = _create_cart(client)
        assert decode_opaque_id(Namespace.CART, cart_id)

    def test_add_item_returns_opaque_item_id(self, client):
        cart_id = _create_cart(client)
        response = _add_item(client, cart_id)
        assert response.status_code == 201
        assert decode_opaque_id(Namespace.CART_ITEM, response.json()["item_id"])

    def test_malformed_cart_id_is_rejected(self, client):
        response = _add_item(client, "not-an-opaque-id")
        assert response.status_code == 400

    def test_negative_tax_ratio_is_rejected(self, client):
        cart_id = _create_cart(client)
        response = client.put(f"/carts/{cart_id}/adjustments", json={"tax": -0.1})
        assert response.status_code == 422


class TestCheckoutEndpoint:
    def test_items_only(self, client):
        _publish_product(client)
        cart_id = _create_cart(client)
        _add_item(client, cart_id)

        response = client.get(f"/carts/{cart_id}/checkout")
        assert response.status_code == 200
        body = response.json()

        assert body["totals"]["item_total"] == {"amount": 20.0, "currency_code": "USD"}
        assert body["totals"]["fulfillment_total"] is None
        assert body["totals"]["tax_total"] is None
        assert body["totals"]["total"]["amount"] == 20.0

        [item] = body["items"]
        assert item["price"]["amount"] == 12.0
        assert item["price_when_added"]["amount"] == 10.0
        assert item["current_quantity"] == 4
        assert decode_opaque_id(Namespace.PRODUCT, item["product_configuration"]["product_id"]) == "prod-001"
        assert decode_opaque_id(Namespace.PRODUCT, item["product_configuration"]["product_variant_id"]) == "var-001"

    def test_full_checkout(self, client):
        _publish_product(client, media=[{"variant_id": "other", "urls": {"small": "first.jpg"}}])
        cart_id = _create_cart(client)
        _add_item(client, cart_id)
        _add_shipping(client, cart_id)
        client.post(f"/carts/{cart_id}/payments", json={"billing_address": ADDRESS})
        client.put(f"/carts/{cart_id}/adjustments", json={"tax": 0.1, "discount": 5.0})

        body = client.get(f"/carts/{cart_id}/checkout").json()

        assert body["totals"]["fulfillment_total"]["amount"] == 6.0
        assert body["totals"]["tax_total"]["amount"] == 2.0
        assert body["totals"]["total"]["amount"] == 23.0
        assert body["payments"][0]["amount"]["amount"] == 23.0
        assert body["payments"][0]["data"]["billing_address"]["city"] == "Springfield"

        [group] = body["fulfillment_groups"]
        assert group["fulfillment_type"] == "shipping"
        assert group["selected_fulfillment_option"]["fulfillment_method"]["display_name"] == "Ground (3-5 days)"
        assert group["items"][0]["image_urls"] == {"small": "first.jpg"}

    def test_unknown_product_returns_404(self, client):
        cart_id = _create_cart(client)
        _add_item(client, cart_id, product_id="prod-missing")

        response = client.get(f"/carts/{cart_id}/checkout")
        assert response.status_code == 404
        assert "prod-missing" in response.json()["error"]

    def test_unknown_variant_returns_400(self, client):
        _publish_product(client)
        cart_id = _create_cart(client)
        _add_item(client, cart_id, variant_id="var-missing")

        response = client.get(f"/carts/{cart_id}/checkout")
        assert response.status_code == 400

    def test_unpublished_product_returns_404(self, client):
        _publish_product(client)
        cart_id = _create_cart(client)
        _add_item(client, cart_id)
        assert client.delete("/catalog/products/prod-001").status_code == 200

        response = client.get(f"/carts/{cart_id}/checkout")
        assert response.status_code == 404
