"""
Users API Backend - Endpoint Tests
===================================

What:  HTTP-level tests for every route, through the full middleware stack.
How:   HTTPX AsyncClient over ASGITransport against a fresh app per test.

What we test:
    ✅ Envelope shape, status codes and messages for every route
    ✅ `data` omitted (not null) on error and delete responses
    ✅ Create → get round trip returns identical fields
    ✅ Payload validation never mutates the store
    ✅ Non-numeric ids fall through to the framework's 404
"""

import re

import pytest

RFC3339_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


class TestHealthEndpoint:

    @pytest.mark.asyncio
    async def test_health_check(self, test_client):
        response = await test_client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "API is healthy"
        assert body["data"]["version"] == "1.0.0"
        assert body["data"]["service"] == "go-backend-api"
        assert RFC3339_UTC.match(body["data"]["timestamp"])

    @pytest.mark.asyncio
    async def test_health_independent_of_store(self, test_client, store):
        for user in store.list():
            store.remove(str(user.id))

        response = await test_client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "success"


class TestListUsers:

    @pytest.mark.asyncio
    async def test_list_seeded_users(self, test_client):
        response = await test_client.get("/api/v1/users")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "Users retrieved successfully"
        assert [u["id"] for u in body["data"]] == [1, 2]
        assert set(body["data"][0]) == {"id", "name", "email", "created"}

    @pytest.mark.asyncio
    async def test_list_empty_store_keeps_data_list(self, test_client):
        await test_client.delete("/api/v1/users/1")
        await test_client.delete("/api/v1/users/2")

        response = await test_client.get("/api/v1/users")

        assert response.status_code == 200
        assert response.json()["data"] == []


class TestGetUser:

    @pytest.mark.asyncio
    async def test_get_existing_user(self, test_client):
        response = await test_client.get("/api/v1/users/2")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User found"
        assert body["data"]["name"] == "Jane Smith"
        assert body["data"]["email"] == "jane@example.com"

    @pytest.mark.asyncio
    async def test_get_missing_user(self, test_client):
        response = await test_client.get("/api/v1/users/99")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": "User not found"}

    @pytest.mark.asyncio
    async def test_get_zero_padded_id_is_not_found(self, test_client):
        response = await test_client.get("/api/v1/users/001")

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    @pytest.mark.asyncio
    async def test_non_numeric_id_does_not_route(self, test_client):
        response = await test_client.get("/api/v1/users/abc")

        assert response.status_code == 404
        body = response.json()
        assert "status" not in body
        assert body == {"detail": "Not Found"}


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_create_user(self, test_client, store):
        response = await test_client.post(
            "/api/v1/users", json={"name": "Ann", "email": "ann@x.com"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "User created successfully"
        assert body["data"]["id"] == 3
        assert body["data"]["name"] == "Ann"
        assert RFC3339_UTC.match(body["data"]["created"])
        assert store.next_id == 4

    @pytest.mark.asyncio
    async def test_create_then_get_round_trip(self, test_client):
        created = (
            await test_client.post("/api/v1/users", json={"name": "Ann", "email": "ann@x.com"})
        ).json()["data"]

        fetched = (await test_client.get(f"/api/v1/users/{created['id']}")).json()["data"]

        assert fetched == created

    @pytest.mark.asyncio
    async def test_create_appears_in_list(self, test_client):
        await test_client.post("/api/v1/users", json={"name": "Ann", "email": "ann@x.com"})

        names = [u["name"] for u in (await test_client.get("/api/v1/users")).json()["data"]]
        assert names == ["John Doe", "Jane Smith", "Ann"]

    @pytest.mark.asyncio
    async def test_extra_fields_ignored(self, test_client):
        response = await test_client.post(
            "/api/v1/users", json={"name": "Ann", "email": "ann@x.com", "role": "admin"}
        )

        assert response.status_code == 201
        assert "role" not in response.json()["data"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        [
            b'{"name": "", "email": "x@x.com"}',
            b'{"name": "Ann", "email": ""}',
            b'{"email": "x@x.com"}',
            b"{}",
            b"null",
            b'{"name": null, "email": "x@x.com"}',
            b'{"name": "Ann", "email": null}',
        ],
    )
    async def test_missing_fields_rejected(self, test_client, store, content):
        response = await test_client.post(
            "/api/v1/users",
            content=content,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "status": "error",
            "message": "Name and email are required",
        }
        assert len(store) == 2
        assert store.next_id == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        [
            b"{not json",
            b"",
            b"[1, 2, 3]",
            b'"just a string"',
            b'{"name": 5, "email": "x@x.com"}',
            b'{"name": "Ann", "email": ["ann@x.com"]}',
        ],
    )
    async def test_invalid_payload_rejected(self, test_client, store, content):
        response = await test_client.post(
            "/api/v1/users",
            content=content,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"status": "error", "message": "Invalid JSON payload"}
        assert len(store) == 2
        assert store.next_id == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content_type",
        [None, "application/x-www-form-urlencoded", "text/plain"],
    )
    async def test_json_body_accepted_whatever_content_type(self, test_client, content_type):
        headers = {"Content-Type": content_type} if content_type else {}

        response = await test_client.post(
            "/api/v1/users",
            content=b'{"name": "Ann", "email": "ann@x.com"}',
            headers=headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["name"] == "Ann"
        assert response.json()["data"]["id"] == 3


class TestDeleteUser:

    @pytest.mark.asyncio
    async def test_delete_then_get(self, test_client):
        response = await test_client.delete("/api/v1/users/1")

        assert response.status_code == 200
        assert response.json() == {
            "status": "success",
            "message": "User deleted successfully",
        }

        response = await test_client.get("/api/v1/users/1")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, test_client, store):
        response = await test_client.delete("/api/v1/users/99")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": "User not found"}
        assert len(store) == 2

    @pytest.mark.asyncio
    async def test_delete_keeps_order_and_counter(self, test_client):
        await test_client.post("/api/v1/users", json={"name": "Ann", "email": "ann@x.com"})
        await test_client.delete("/api/v1/users/2")

        ids = [u["id"] for u in (await test_client.get("/api/v1/users")).json()["data"]]
        assert ids == [1, 3]

        created = await test_client.post(
            "/api/v1/users", json={"name": "Bob", "email": "bob@x.com"}
        )
        assert created.json()["data"]["id"] == 4


class TestUnroutedRequests:

    @pytest.mark.asyncio
    async def test_unknown_path(self, test_client):
        response = await test_client.get("/api/v1/nope")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unsupported_method(self, test_client):
        response = await test_client.put("/api/v1/users/1", json={"name": "X"})

        assert response.status_code == 405
