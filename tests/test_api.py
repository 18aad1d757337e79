"""
Tests for the HTTP API
"""
from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from sampleshop.api import create_app
from sampleshop.api.deps import CART_COOKIE
from sampleshop.services.config_service import ConfigService
from sampleshop.sheets_mock.main import app as sheets_app

FORM = {
    "author_name": "Aki Tanaka",
    "email": "aki@example.com",
    "manga_title": "Night Harbor",
    "postal_code": "100-0001",
    "address": "1-1 Chiyoda, Tokyo",
    "phone_number": "03-0000-0000",
}


@pytest.fixture
def client():
    app = create_app(config_service=ConfigService(webhook_url="", fetch_url=""))
    with TestClient(app) as c:
        yield c


def delete_item(client, **body):
    return client.request("DELETE", "/cart/items", json=body)


class TestHealthAndProducts:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_list_products(self, client):
        products = client.get("/products").json()

        assert len(products) == 7
        assert products[0]["kind"] == "variants"

    def test_filter_products(self, client):
        products = client.get("/products", params={"type": "hoodie"}).json()

        assert [p["id"] for p in products] == ["2"]

    def test_get_product(self, client):
        assert client.get("/products/3").json()["name"] == "Character Cap"
        assert client.get("/products/999").status_code == 404

    def test_refresh_without_url(self, client):
        assert client.post("/products/refresh").json() == {"count": 7}


class TestCartApi:
    def test_empty_cart(self, client):
        assert client.get("/cart").json() == {"items": [], "total": 0, "line_count": 0}

    def test_add_and_limit(self, client):
        body = {"product_id": "1", "variant_id": "1-5", "color": "black", "size": "M"}

        first = client.post("/cart/items", json=body).json()
        assert first["events"] == [
            {"kind": "added", "product_label": "Character T-shirt (black / M)", "quantity": 1}
        ]
        assert first["cart"]["items"][0]["sku"] == "TS-BL-M"

        client.post("/cart/items", json=body)
        third = client.post("/cart/items", json=body).json()

        assert [e["kind"] for e in third["events"]] == ["limited"]
        assert third["cart"]["total"] == 2

    def test_add_unknown_product(self, client):
        assert client.post("/cart/items", json={"product_id": "999"}).status_code == 404

    def test_set_quantity_clamps(self, client):
        resp = client.put("/cart/items", json={"product_id": "4", "variant_id": "4-1", "quantity": 5}).json()

        assert [e["kind"] for e in resp["events"]] == ["limited", "added"]
        assert resp["cart"]["items"][0]["quantity"] == 2

    def test_set_quantity_zero_noop(self, client):
        resp = client.put("/cart/items", json={"product_id": "4", "quantity": 0}).json()

        assert resp == {"cart": {"items": [], "total": 0, "line_count": 0}, "events": []}

    def test_set_quantity_unknown_product(self, client):
        assert client.put("/cart/items", json={"product_id": "999", "quantity": 1}).status_code == 404

    def test_remove(self, client):
        client.post("/cart/items", json={"product_id": "3", "variant_id": "3-1", "color": "navy"})
        client.post("/cart/items", json={"product_id": "3", "variant_id": "3-2", "color": "black"})

        resp = delete_item(client, product_id="3", variant_id="3-1", color="navy").json()

        assert resp["cart"]["line_count"] == 1
        assert resp["events"][0]["kind"] == "removed"

        again = delete_item(client, product_id="3", variant_id="3-1", color="navy").json()
        assert again["events"] == []

    def test_clear(self, client):
        client.post("/cart/items", json={"product_id": "5"})
        resp = client.delete("/cart").json()

        assert resp["cart"]["total"] == 0
        assert resp["events"] == []


class TestOrdersApi:
    def test_checkout_empty_cart(self, client):
        resp = client.post("/orders", json=FORM)

        assert resp.status_code == 400
        assert resp.json()["detail"] == "Cart is empty"

    def test_checkout_invalid_form(self, client):
        client.post("/cart/items", json={"product_id": "5"})

        assert client.post("/orders", json={**FORM, "email": "nope"}).status_code == 422

    def test_checkout_without_webhook(self, client):
        client.post("/cart/items", json={"product_id": "6", "variant_id": "6-1"})

        resp = client.post("/orders", json=FORM).json()

        assert resp["delivered"] is False
        assert resp["total_items"] == 1
        assert "MG-01" in resp["csv_data"]
        assert client.get("/cart").json()["total"] == 1

    def test_checkout_delivered(self, client):
        client.put("/config", json={"webhook_url": "https://hook.test/exec"})
        client.post("/cart/items", json={"product_id": "6", "variant_id": "6-1"})

        with patch("sampleshop.services.order_service.requests.post") as mock_post:
            mock_post.return_value = Mock(raise_for_status=Mock(return_value=None))
            resp = client.post("/orders", json=FORM).json()

        assert resp["delivered"] is True
        assert client.get("/cart").json()["line_count"] == 0

    def test_csv_download(self, client):
        client.post("/cart/items", json={"product_id": "7"})

        resp = client.get("/orders/csv")

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        assert "manga-samples.csv" in resp.headers["content-disposition"]
        assert "Character Stickers" in resp.text


class TestConfigApi:
    def test_get_default(self, client):
        assert client.get("/config").json() == {"webhook_url": "", "fetch_url": ""}

    def test_save(self, client):
        body = {"webhook_url": "https://hook.test/exec", "fetch_url": "https://sheet.test/exec"}

        assert client.put("/config", json=body).json() == body
        assert client.get("/config").json() == body

    def test_webhook_required(self, client):
        assert client.put("/config", json={"webhook_url": "  "}).status_code == 422

    def test_rejects_non_http_url(self, client):
        assert client.put("/config", json={"webhook_url": "ftp://x"}).status_code == 422

    def test_blank_fetch_url_allowed(self, client):
        body = {"webhook_url": "https://hook.test/exec", "fetch_url": "  "}

        assert client.put("/config", json=body).json() == {"webhook_url": "https://hook.test/exec", "fetch_url": ""}


class TestSheetsMock:
    def test_products_sheet(self):
        data = TestClient(sheets_app).get("/products").json()

        assert len(data["products"]) == 3

    def test_receive_order(self):
        mock = TestClient(sheets_app)

        assert mock.post("/orders", json={"products": [{"name": "x"}]}).json()["result"] == "success"
        assert mock.post("/orders", json={"products": []}).status_code == 400


class TestCartSessions:
    """Each shopper session has its own cart"""

    @pytest.fixture
    def app(self):
        return create_app(config_service=ConfigService(webhook_url="", fetch_url=""))

    def test_shoppers_have_separate_carts(self, app):
        alice, bob = TestClient(app), TestClient(app)

        alice.post("/cart/items", json={"product_id": "4"})

        assert alice.get("/cart").json()["line_count"] == 1
        assert bob.get("/cart").json() == {"items": [], "total": 0, "line_count": 0}
        assert alice.cookies.get(CART_COOKIE) != bob.cookies.get(CART_COOKIE)

    def test_checkout_only_touches_own_cart(self, app):
        alice, bob = TestClient(app), TestClient(app)
        alice.put("/config", json={"webhook_url": "https://hook.test/exec"})
        alice.post("/cart/items", json={"product_id": "6", "variant_id": "6-1"})
        bob.post("/cart/items", json={"product_id": "7", "variant_id": "7-1"})

        with patch("sampleshop.services.order_service.requests.post") as mock_post:
            mock_post.return_value = Mock(raise_for_status=Mock(return_value=None))
            resp = alice.post("/orders", json=FORM).json()

        products = mock_post.call_args.kwargs["json"]["products"]
        assert [p["sku"] for p in products] == ["MG-01"]
        assert resp["delivered"] is True
        assert alice.get("/cart").json()["line_count"] == 0
        assert bob.get("/cart").json()["items"][0]["sku"] == "ST-01"

    def test_session_cookie_kept_across_requests(self, app):
        client = TestClient(app)

        client.post("/cart/items", json={"product_id": "5"})
        session = client.cookies.get(CART_COOKIE)
        resp = client.post("/cart/items", json={"product_id": "5"})

        assert CART_COOKIE not in resp.cookies
        assert client.cookies.get(CART_COOKIE) == session
        assert len(app.state.cart_registry) == 1

    def test_unknown_session_id_is_replaced(self, app):
        client = TestClient(app, cookies={CART_COOKIE: "made-up"})

        resp = client.get("/cart")

        assert resp.cookies.get(CART_COOKIE) not in (None, "made-up")
        assert len(app.state.cart_registry) == 1
