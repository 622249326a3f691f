"""
Storefront API — Product Endpoint Tests
=========================================

What:  HTTP-level tests for /api/products.
How:   HTTPX AsyncClient over ASGITransport against a fresh app per test.
"""

import json
from decimal import Decimal

import pytest


class TestListAndGetProducts:

    @pytest.mark.asyncio
    async def test_list_seeded_products(self, test_client):
        response = await test_client.get("/api/products")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "name": "Laptop", "price": 1000},
            {"id": 2, "name": "Mouse", "price": 25},
            {"id": 3, "name": "Keyboard", "price": 45},
        ]

    @pytest.mark.asyncio
    async def test_get_product(self, test_client):
        response = await test_client.get("/api/products/2")

        assert response.status_code == 200
        assert response.json() == {"id": 2, "name": "Mouse", "price": 25}

    @pytest.mark.asyncio
    async def test_get_missing_product_returns_404(self, test_client):
        response = await test_client.get("/api/products/42")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["details"] == {"resource": "product", "resource_id": 42}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("segment", ["abc", "1.5", "2x"])
    async def test_non_integer_id_does_not_match(self, test_client, segment):
        for method in ("GET", "PUT", "DELETE"):
            response = await test_client.request(method, f"/api/products/{segment}")
            assert response.status_code == 404


class TestCreateProduct:

    @pytest.mark.asyncio
    async def test_create_returns_201_with_location(self, test_client):
        payload = {"id": 4, "name": "Monitor", "price": 199.99}
        response = await test_client.post("/api/products", json=payload)

        assert response.status_code == 201
        assert response.headers["Location"] == "/api/products/4"
        assert response.json() == payload

        follow_up = await test_client.get("/api/products/4")
        assert follow_up.json() == payload

    @pytest.mark.asyncio
    async def test_create_appends_to_listing(self, test_client):
        await test_client.post("/api/products", json={"id": 10, "name": "Cable", "price": 5})
        response = await test_client.get("/api/products")
        assert [p["id"] for p in response.json()] == [1, 2, 3, 10]

    @pytest.mark.asyncio
    async def test_duplicate_id_returns_409_and_keeps_original(self, test_client):
        response = await test_client.post(
            "/api/products", json={"id": 1, "name": "Netbook", "price": 300}
        )

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"
        assert response.json()["message"] == "Product with id 1 already exists."

        original = await test_client.get("/api/products/1")
        assert original.json() == {"id": 1, "name": "Laptop", "price": 1000}

    @pytest.mark.asyncio
    async def test_negative_id_round_trips(self, test_client):
        response = await test_client.post(
            "/api/products", json={"id": -5, "name": "Refund", "price": -10}
        )
        assert response.status_code == 201
        assert response.headers["Location"] == "/api/products/-5"

        fetched = await test_client.get("/api/products/-5")
        assert fetched.status_code == 200
        assert fetched.json()["price"] == -10

    @pytest.mark.asyncio
    async def test_wrongly_typed_field_returns_400(self, test_client):
        response = await test_client.post(
            "/api/products", json={"id": "seven", "name": "P", "price": 1}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"


class TestUpdateProduct:

    @pytest.mark.asyncio
    async def test_update_changes_name_and_price(self, test_client):
        response = await test_client.put(
            "/api/products/2", json={"name": "Wireless Mouse", "price": 30.5}
        )

        assert response.status_code == 200
        assert response.json() == {"id": 2, "name": "Wireless Mouse", "price": 30.5}

    @pytest.mark.asyncio
    async def test_body_id_is_ignored(self, test_client):
        response = await test_client.put(
            "/api/products/2", json={"id": 99, "name": "Mouse II", "price": 26}
        )

        assert response.json()["id"] == 2
        assert (await test_client.get("/api/products/99")).status_code == 404
        assert (await test_client.get("/api/products/2")).json()["name"] == "Mouse II"

    @pytest.mark.asyncio
    async def test_update_missing_returns_404(self, test_client):
        response = await test_client.put(
            "/api/products/42", json={"name": "Ghost", "price": 1}
        )
        assert response.status_code == 404


class TestDeleteProduct:

    @pytest.mark.asyncio
    async def test_delete_returns_204_then_404(self, test_client):
        response = await test_client.delete("/api/products/1")

        assert response.status_code == 204
        assert response.content == b""
        assert (await test_client.get("/api/products/1")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_returns_404_and_leaves_store(self, test_client):
        response = await test_client.delete("/api/products/42")

        assert response.status_code == 404
        listing = await test_client.get("/api/products")
        assert len(listing.json()) == 3


class TestProductBodyDefaults:

    @pytest.mark.asyncio
    async def test_missing_name_and_price_default_to_null_and_zero(self, test_client):
        response = await test_client.post("/api/products", json={"id": 7})

        assert response.status_code == 201
        assert response.json() == {"id": 7, "name": None, "price": 0}

    @pytest.mark.asyncio
    async def test_update_without_price_sets_zero(self, test_client):
        response = await test_client.put("/api/products/2", json={"name": "X"})

        assert response.status_code == 200
        assert response.json() == {"id": 2, "name": "X", "price": 0}

    @pytest.mark.asyncio
    async def test_missing_id_is_still_rejected(self, test_client):
        response = await test_client.post("/api/products", json={"name": "No id"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_field_names_are_case_insensitive(self, test_client):
        response = await test_client.post(
            "/api/products", json={"Id": 8, "NAME": "Dock", "Price": 120}
        )

        assert response.status_code == 201
        assert response.json() == {"id": 8, "name": "Dock", "price": 120}


class TestPricePrecision:

    @pytest.mark.asyncio
    async def test_price_digits_survive_round_trip(self, test_client):
        body = '{"id": 11, "name": "P", "price": 12345678901234567.89}'
        response = await test_client.post(
            "/api/products", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 201
        assert '"price":12345678901234567.89' in response.text
        created = json.loads(response.text, parse_float=Decimal)
        assert created["price"] == Decimal("12345678901234567.89")

        fetched = await test_client.get("/api/products/11")
        assert json.loads(fetched.text, parse_float=Decimal)["price"] == Decimal(
            "12345678901234567.89"
        )

    @pytest.mark.asyncio
    async def test_update_keeps_decimal_scale(self, test_client):
        response = await test_client.put(
            "/api/products/1",
            content='{"name": "Laptop", "price": 999.10}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 200
        assert '"price":999.10' in response.text

    @pytest.mark.asyncio
    async def test_non_finite_price_returns_400(self, test_client):
        response = await test_client.post(
            "/api/products",
            content='{"id": 9, "name": "P", "price": NaN}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"]["errors"][0]["loc"] == ["body", "price"]

    @pytest.mark.asyncio
    async def test_infinite_quantity_returns_400(self, test_client):
        response = await test_client.post(
            "/api/orders",
            content='{"id": 9, "productId": 1, "quantity": 1e400}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
