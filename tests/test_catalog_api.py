"""
BookStore Backend: Authors & Categories Endpoint Tests
=========================================================
"""

import pytest


@pytest.mark.parametrize("collection", ["/authors", "/categories"])
class TestNamedEntityEndpoints:
    """Authors and categories share one contract: {id, name}."""

    @pytest.mark.asyncio
    async def test_create_then_get(self, test_client, collection):
        response = await test_client.post(collection, json={"name": "First"})

        assert response.status_code == 201
        created = response.json()
        assert created == {"id": 1, "name": "First"}
        assert response.headers["location"] == f"{collection}/1"

        fetched = await test_client.get(f"{collection}/1")
        assert fetched.status_code == 200
        assert fetched.json() == created

    @pytest.mark.asyncio
    async def test_list(self, test_client, collection):
        await test_client.post(collection, json={"name": "First"})
        await test_client.post(collection, json={"name": "Second"})

        response = await test_client.get(collection)

        assert response.status_code == 200
        assert response.json() == [{"id": 1, "name": "First"}, {"id": 2, "name": "Second"}]

    @pytest.mark.asyncio
    async def test_update_only_changes_name(self, test_client, collection):
        await test_client.post(collection, json={"name": "First"})

        response = await test_client.put(f"{collection}/1", json={"id": 9, "name": "Renamed"})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Renamed"}
        assert (await test_client.get(f"{collection}/9")).status_code == 404

    @pytest.mark.asyncio
    async def test_update_missing(self, test_client, collection):
        response = await test_client.put(f"{collection}/3", json={"name": "Nobody"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_then_get(self, test_client, collection):
        await test_client.post(collection, json={"name": "First"})

        assert (await test_client.delete(f"{collection}/1")).status_code == 204
        assert (await test_client.get(f"{collection}/1")).status_code == 404
        assert (await test_client.delete(f"{collection}/1")).status_code == 204

    @pytest.mark.asyncio
    async def test_missing_name_is_rejected(self, test_client, collection):
        response = await test_client.post(collection, json={})

        assert response.status_code == 422
