"""
Anjali Furniture Backend — Product Route Tests
================================================

What:  Full CRUD over /api/products against the in-memory store.

What we test:
    ✅ Create returns the submitted fields plus a store-assigned id
    ✅ Create → get → delete → get scenario
    ✅ Listing is newest first whatever the insertion order
    ✅ Store failures become 500 envelopes carrying the store message
"""

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.exceptions import StoreError, StoreErrorKind
from app.services.store_base import Collection


class TestProductLifecycle:
    """Create, read, update, delete through the HTTP surface."""

    @pytest.mark.asyncio
    async def test_create_returns_fields_and_generated_id(self, test_client):
        response = await test_client.post(
            "/api/products", json={"name": "Oak Table", "price": 499}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["name"] == "Oak Table"
        assert body["data"]["price"] == 499
        assert body["data"]["id"]
        assert "created_at" in body["data"]

    @pytest.mark.asyncio
    async def test_create_get_delete_scenario(self, test_client):
        created = (
            await test_client.post("/api/products", json={"name": "Oak Table", "price": 499})
        ).json()["data"]

        fetched = await test_client.get(f"/api/products/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == {"success": True, "data": created}

        deleted = await test_client.delete(f"/api/products/{created['id']}")
        assert deleted.status_code == 200
        assert deleted.json() == {"success": True, "message": "Product deleted"}

        missing = await test_client.get(f"/api/products/{created['id']}")
        assert missing.status_code == 500
        assert missing.json()["success"] is False
        assert created["id"] in missing.json()["error"]

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, test_client, store):
        product = store.seed(Collection.PRODUCTS, {"name": "Teak Chair", "price": 120})

        response = await test_client.put(
            f"/api/products/{product['id']}", json={"price": 135}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["price"] == 135
        assert data["name"] == "Teak Chair"
        assert store.calls == [("update", Collection.PRODUCTS)]

    @pytest.mark.asyncio
    async def test_fields_are_forwarded_unexamined(self, test_client, store):
        payload = {"name": "Bed", "dimensions": {"w": 180, "l": 200}, "anything": [1, 2]}

        response = await test_client.post("/api/products", json=payload)

        assert response.status_code == 200
        stored = next(iter(store.tables[Collection.PRODUCTS].values()))
        for key, value in payload.items():
            assert stored[key] == value


class TestProductListing:

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self, test_client, store):
        store.seed(Collection.PRODUCTS, {
            "name": "middle", "created_at": datetime(2026, 3, 1, tzinfo=timezone.utc),
        })
        store.seed(Collection.PRODUCTS, {
            "name": "newest", "created_at": datetime(2026, 5, 1, tzinfo=timezone.utc),
        })
        store.seed(Collection.PRODUCTS, {
            "name": "oldest", "created_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
        })

        response = await test_client.get("/api/products")

        assert response.status_code == 200
        names = [row["name"] for row in response.json()["data"]]
        assert names == ["newest", "middle", "oldest"]

    @pytest.mark.asyncio
    async def test_empty_list(self, test_client):
        response = await test_client.get("/api/products")
        assert response.json() == {"success": True, "data": []}


class TestProductFailures:

    @pytest.mark.asyncio
    async def test_delete_missing_id_is_500(self, test_client):
        response = await test_client.delete("/api/products/does-not-exist")

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert "does-not-exist" in response.json()["error"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", list(StoreErrorKind))
    async def test_every_store_error_kind_is_flattened_to_500(self, test_client, store, kind):
        store.fail_with = StoreError(message="database said no", kind=kind)

        response = await test_client.get("/api/products")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "database said no"}

    @pytest.mark.asyncio
    async def test_non_object_body_is_rejected_before_the_store(self, test_client, store):
        response = await test_client.post("/api/products", json=["not", "an", "object"])

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert store.calls == []


class TestProductDocumentRoundTrip:
    """GET a product and PUT the whole document back, against real SQL."""

    @pytest_asyncio.fixture
    async def sql_client(self, test_app, sql_store):
        from app.dependencies import get_store

        test_app.dependency_overrides[get_store] = lambda: sql_store
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    @pytest.mark.asyncio
    async def test_fetched_document_can_be_put_back(self, sql_client):
        created = await sql_client.post("/api/products", json={"name": "Oak Table", "price": 499})
        product_id = created.json()["data"]["id"]
        document = (await sql_client.get(f"/api/products/{product_id}")).json()["data"]

        response = await sql_client.put(
            f"/api/products/{product_id}", json={**document, "price": 550}
        )

        assert response.status_code == 200
        assert response.json()["data"]["price"] == 550
        assert response.json()["data"]["name"] == "Oak Table"

    @pytest.mark.asyncio
    async def test_wood_with_zulu_created_at(self, sql_client):
        response = await sql_client.post(
            "/api/woods", json={"name": "Teak", "created_at": "2026-01-01T00:00:00Z"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["created_at"].startswith("2026-01-01T00:00:00")
