"""
==============================================================================
Variant API Tests
==============================================================================

Tests for /api/variants endpoints.

==============================================================================
"""

import uuid

from fastapi.testclient import TestClient


def _create_variant(client: TestClient, product_id: str, **overrides) -> dict:
    payload = {"productId": product_id, "size": "M", "price": 20, "sku": "TS-M"}
    payload.update(overrides)
    return client.post("/api/variants", json=payload)


class TestCreateVariant:
    """Tests for variant creation."""

    def test_create_variant(self, client: TestClient, t_shirt: dict):
        response = _create_variant(client, t_shirt["id"], color="Red", stock=4, price=19.99)
        assert response.status_code == 201
        data = response.json()
        assert data["size"] == "M"
        assert data["color"] == "Red"
        assert data["price"] == 19.99
        assert data["stock"] == 4
        assert data["sku"] == "TS-M"
        assert data["product"]["name"] == "T-Shirt"
        assert data["product"]["productType"]["name"] == "Clothing"

    def test_stock_defaults_to_zero(self, client: TestClient, t_shirt: dict):
        response = _create_variant(client, t_shirt["id"])
        assert response.status_code == 201
        assert response.json()["stock"] == 0

    def test_duplicate_sku_is_conflict(self, client: TestClient, t_shirt: dict, pizza: dict):
        assert _create_variant(client, t_shirt["id"], sku="DUP-1").status_code == 201

        response = _create_variant(client, pizza["id"], sku="DUP-1")
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "SKU must be unique"
        assert data["code"] == "CONFLICT"

        skus = [v["sku"] for v in client.get(f"/api/variants/product/{pizza['id']}").json()]
        assert "DUP-1" not in skus

    def test_unknown_product(self, client: TestClient):
        response = _create_variant(client, str(uuid.uuid4()))
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid product ID"

    def test_negative_price_rejected(self, client: TestClient, t_shirt: dict):
        response = _create_variant(client, t_shirt["id"], price=-1)
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_negative_stock_rejected(self, client: TestClient, t_shirt: dict):
        response = _create_variant(client, t_shirt["id"], stock=-5)
        assert response.status_code == 400

    def test_missing_sku_rejected(self, client: TestClient, t_shirt: dict):
        response = client.post("/api/variants", json={"productId": t_shirt["id"], "price": 5})
        assert response.status_code == 400
        assert "sku" in response.json()["error"]

    def test_duplicate_size_color_pairs_allowed(self, client: TestClient, t_shirt: dict):
        assert _create_variant(client, t_shirt["id"], color="Red", sku="A").status_code == 201
        assert _create_variant(client, t_shirt["id"], color="Red", sku="B").status_code == 201


class TestListVariants:
    """Tests for listing a product's variants."""

    def test_list_by_product_cheapest_first(self, client: TestClient, t_shirt: dict):
        _create_variant(client, t_shirt["id"], size="L", price=25, sku="TS-L")
        _create_variant(client, t_shirt["id"], size="S", price=15, sku="TS-S")

        response = client.get(f"/api/variants/product/{t_shirt['id']}")
        assert response.status_code == 200
        assert [v["sku"] for v in response.json()] == ["TS-S", "TS-L"]

    def test_prices_below_ten_sort_numerically(self, client: TestClient, t_shirt: dict):
        for size, price in (("L", 7.99), ("S", 3.99), ("M", 5.99)):
            assert _create_variant(client, t_shirt["id"], size=size, price=price, sku=f"TS-{size}").status_code == 201

        listed = client.get(f"/api/variants/product/{t_shirt['id']}").json()
        assert [v["price"] for v in listed] == [3.99, 5.99, 7.99]

        nested = client.get(f"/api/products/{t_shirt['id']}").json()["variants"]
        assert [v["price"] for v in nested] == [3.99, 5.99, 7.99]

    def test_unknown_product_gives_empty_list(self, client: TestClient):
        response = client.get(f"/api/variants/product/{uuid.uuid4()}")
        assert response.status_code == 200
        assert response.json() == []


class TestGetVariant:
    """Tests for fetching a single variant."""

    def test_get_variant(self, client: TestClient, t_shirt: dict):
        created = _create_variant(client, t_shirt["id"]).json()
        response = client.get(f"/api/variants/{created['id']}")
        assert response.status_code == 200
        assert response.json()["product"]["id"] == t_shirt["id"]

    def test_get_unknown_variant(self, client: TestClient):
        response = client.get(f"/api/variants/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"] == "Variant not found"


class TestUpdateVariant:
    """Tests for variant updates."""

    def test_update_price_and_stock(self, client: TestClient, t_shirt: dict):
        created = _create_variant(client, t_shirt["id"]).json()
        response = client.put(f"/api/variants/{created['id']}", json={"price": 18.5, "stock": 7})
        assert response.status_code == 200
        data = response.json()
        assert data["price"] == 18.5
        assert data["stock"] == 7
        assert data["sku"] == "TS-M"

    def test_update_to_taken_sku(self, client: TestClient, t_shirt: dict):
        _create_variant(client, t_shirt["id"], sku="TAKEN")
        other = _create_variant(client, t_shirt["id"], sku="OTHER").json()

        response = client.put(f"/api/variants/{other['id']}", json={"sku": "TAKEN"})
        assert response.status_code == 400
        assert response.json()["error"] == "SKU must be unique"

    def test_keep_own_sku(self, client: TestClient, t_shirt: dict):
        created = _create_variant(client, t_shirt["id"], sku="SAME").json()
        response = client.put(f"/api/variants/{created['id']}", json={"sku": "SAME", "color": "Blue"})
        assert response.status_code == 200
        assert response.json()["color"] == "Blue"

    def test_update_unknown_variant(self, client: TestClient):
        response = client.put(f"/api/variants/{uuid.uuid4()}", json={"stock": 1})
        assert response.status_code == 404


class TestDeleteVariant:
    """Tests for variant deletion."""

    def test_delete_variant(self, client: TestClient, t_shirt: dict):
        created = _create_variant(client, t_shirt["id"]).json()
        response = client.delete(f"/api/variants/{created['id']}")
        assert response.status_code == 200
        assert response.json()["message"] == "Variant deleted successfully"
        assert client.get(f"/api/variants/{created['id']}").status_code == 404

    def test_delete_unknown_variant(self, client: TestClient):
        response = client.delete(f"/api/variants/{uuid.uuid4()}")
        assert response.status_code == 404
