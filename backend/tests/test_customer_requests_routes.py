"""
Anjali Furniture Backend — Customer Request Route Tests
=========================================================

What we test:
    ✅ Creation stamps created_at (and overrides a client-supplied value)
    ✅ Stamps of sequential creations never go backwards
    ✅ Listing requires the bearer secret and never reaches the store without it
    ✅ PATCH applies only `status`
    ✅ DELETE stays public
"""

from datetime import datetime, timezone

import pytest

from app.services.store_base import Collection


class TestCreateRequest:

    @pytest.mark.asyncio
    async def test_created_at_is_stamped(self, test_client, store, parse_timestamp):
        before = datetime.now(timezone.utc)

        response = await test_client.post(
            "/api/requests",
            json={"name": "Priya", "phone": "9876543210", "message": "Custom wardrobe"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Priya"
        stamped = parse_timestamp(data["created_at"])
        assert stamped >= before

        stored = store.tables[Collection.CUSTOMER_REQUESTS][data["id"]]
        assert stored["created_at"].tzinfo is not None

    @pytest.mark.asyncio
    async def test_client_created_at_is_overwritten(self, test_client, parse_timestamp):
        response = await test_client.post(
            "/api/requests",
            json={"name": "Ravi", "created_at": "1999-01-01T00:00:00Z"},
        )

        stamped = parse_timestamp(response.json()["data"]["created_at"])
        assert stamped.year != 1999

    @pytest.mark.asyncio
    async def test_sequential_stamps_are_non_decreasing(self, test_client, parse_timestamp):
        first = await test_client.post("/api/requests", json={"name": "A"})
        second = await test_client.post("/api/requests", json={"name": "B"})

        assert parse_timestamp(second.json()["data"]["created_at"]) >= parse_timestamp(
            first.json()["data"]["created_at"]
        )

    @pytest.mark.asyncio
    async def test_creation_is_public(self, test_client):
        response = await test_client.post("/api/requests", json={"name": "Guest"})
        assert response.status_code == 200


class TestListRequests:

    @pytest.mark.asyncio
    async def test_missing_token_is_401_without_store_access(self, test_client, store):
        response = await test_client.get("/api/requests")

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized"}
        assert store.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "header",
        [
            "Bearer wrong-token",
            "test-admin-token",
            "bearer test-admin-token",
            "Basic dGVzdDp0ZXN0",
            "Bearer",
        ],
    )
    async def test_wrong_token_is_401(self, test_client, store, header):
        response = await test_client.get("/api/requests", headers={"Authorization": header})

        assert response.status_code == 401
        assert store.calls == []

    @pytest.mark.asyncio
    async def test_admin_lists_newest_first(self, test_client, store, admin_headers):
        store.seed(Collection.CUSTOMER_REQUESTS, {
            "name": "old", "created_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
        })
        store.seed(Collection.CUSTOMER_REQUESTS, {
            "name": "new", "created_at": datetime(2026, 2, 1, tzinfo=timezone.utc),
        })

        response = await test_client.get("/api/requests", headers=admin_headers)

        assert response.status_code == 200
        assert [row["name"] for row in response.json()["data"]] == ["new", "old"]


class TestUpdateStatus:

    @pytest.mark.asyncio
    async def test_only_status_is_applied(self, test_client, store):
        request = store.seed(Collection.CUSTOMER_REQUESTS, {
            "name": "Priya", "email": "priya@example.com", "status": "pending",
        })

        response = await test_client.patch(
            f"/api/requests/{request['id']}",
            json={"status": "approved", "name": "Hacked", "email": "x@example.com"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "approved"
        assert data["name"] == "Priya"
        assert data["email"] == "priya@example.com"

    @pytest.mark.asyncio
    async def test_missing_status_is_400(self, test_client, store):
        request = store.seed(Collection.CUSTOMER_REQUESTS, {"name": "Priya"})

        response = await test_client.patch(f"/api/requests/{request['id']}", json={})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "status" in response.json()["error"]
        assert store.calls == []

    @pytest.mark.asyncio
    async def test_unknown_id_is_500(self, test_client):
        response = await test_client.patch("/api/requests/nope", json={"status": "approved"})
        assert response.status_code == 500


class TestDeleteRequest:

    @pytest.mark.asyncio
    async def test_delete_needs_no_token(self, test_client, store):
        request = store.seed(Collection.CUSTOMER_REQUESTS, {"name": "Priya"})

        response = await test_client.delete(f"/api/requests/{request['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Request deleted"}
