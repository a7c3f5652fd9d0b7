"""
BookStore Backend: Books Endpoint Tests
==========================================

What:  HTTP-level tests for /books through the full app (middleware,
       exception handlers, camelCase serialization).
"""

import pytest


async def _seed_links(client):
    await client.post("/authors", json={"name": "Orwell"})
    await client.post("/authors", json={"name": "Huxley"})
    await client.post("/categories", json={"name": "Fiction"})
    await client.post("/categories", json={"name": "Essays"})


class TestBookLifecycle:

    @pytest.mark.asyncio
    async def test_orwell_scenario(self, test_client):
        """Create author, category and book; read it resolved; delete it."""
        response = await test_client.post("/authors", json={"name": "Orwell"})
        assert response.status_code == 201
        assert response.json()["id"] == 1

        response = await test_client.post("/categories", json={"name": "Fiction"})
        assert response.status_code == 201
        assert response.json()["id"] == 1

        response = await test_client.post(
            "/books", json={"title": "1984", "authorId": 1, "categoryId": 1}
        )
        assert response.status_code == 201
        assert response.json()["id"] == 1
        assert response.headers["location"] == "/books/1"

        response = await test_client.get("/books/1")
        assert response.status_code == 200
        body = response.json()
        assert body["author"]["name"] == "Orwell"
        assert body["category"]["name"] == "Fiction"

        response = await test_client.delete("/books/1")
        assert response.status_code == 204
        assert response.content == b""

        response = await test_client.get("/books/1")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_response_uses_camel_case(self, test_client):
        await _seed_links(test_client)

        response = await test_client.post(
            "/books",
            json={"title": "1984", "description": "Dystopia", "authorId": 1, "categoryId": 1},
        )

        assert response.json() == {
            "id": 1,
            "title": "1984",
            "description": "Dystopia",
            "authorId": 1,
            "categoryId": 1,
            "author": {"id": 1, "name": "Orwell"},
            "category": {"id": 1, "name": "Fiction"},
        }

    @pytest.mark.asyncio
    async def test_create_ignores_body_id_and_nested_objects(self, test_client):
        await _seed_links(test_client)

        response = await test_client.post(
            "/books",
            json={
                "id": 40,
                "title": "1984",
                "authorId": 1,
                "categoryId": 1,
                "author": {"id": 2, "name": "Someone Else"},
            },
        )

        body = response.json()
        assert body["id"] == 1
        assert body["author"] == {"id": 1, "name": "Orwell"}

    @pytest.mark.asyncio
    async def test_list_resolves_every_book(self, test_client):
        await _seed_links(test_client)
        await test_client.post("/books", json={"title": "1984", "authorId": 1, "categoryId": 1})
        await test_client.post(
            "/books", json={"title": "Brave New World", "authorId": 2, "categoryId": 1}
        )
        await test_client.post("/books", json={"title": "Untitled"})

        response = await test_client.get("/books")

        assert response.status_code == 200
        books = response.json()
        assert [b["title"] for b in books] == ["1984", "Brave New World", "Untitled"]
        assert [b["author"] and b["author"]["name"] for b in books] == ["Orwell", "Huxley", None]
        assert books[2]["category"] is None

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/books")

        assert response.status_code == 200
        assert response.json() == []


class TestBookUpdate:

    @pytest.mark.asyncio
    async def test_update_relinks_author_and_category(self, test_client):
        await _seed_links(test_client)
        await test_client.post("/books", json={"title": "1984", "authorId": 1, "categoryId": 1})

        response = await test_client.put(
            "/books/1",
            json={"title": "1984", "description": "Revised", "authorId": 2, "categoryId": 2},
        )

        assert response.status_code == 200
        assert response.json()["author"]["name"] == "Huxley"

        body = (await test_client.get("/books/1")).json()
        assert body["description"] == "Revised"
        assert body["author"] == {"id": 2, "name": "Huxley"}
        assert body["category"] == {"id": 2, "name": "Essays"}

    @pytest.mark.asyncio
    async def test_update_missing_returns_404(self, test_client):
        response = await test_client.put("/books/5", json={"title": "Ghost"})

        assert response.status_code == 404
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_renamed_author_shows_on_next_read(self, test_client):
        await _seed_links(test_client)
        await test_client.post("/books", json={"title": "1984", "authorId": 1, "categoryId": 1})

        await test_client.put("/authors/1", json={"name": "George Orwell"})

        body = (await test_client.get("/books/1")).json()
        assert body["author"]["name"] == "George Orwell"


class TestBookErrors:

    @pytest.mark.asyncio
    async def test_get_missing_returns_empty_404(self, test_client):
        response = await test_client.get("/books/99")

        assert response.status_code == 404
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_delete_missing_returns_204(self, test_client):
        response = await test_client.delete("/books/99")

        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_missing_title_is_rejected(self, test_client):
        response = await test_client.post("/books", json={"authorId": 1})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_non_integer_id_is_rejected(self, test_client):
        response = await test_client.get("/books/abc")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_deleted_author_resolves_to_null(self, test_client):
        await _seed_links(test_client)
        await test_client.post("/books", json={"title": "1984", "authorId": 1, "categoryId": 1})

        assert (await test_client.delete("/authors/1")).status_code == 204

        body = (await test_client.get("/books/1")).json()
        assert body["authorId"] == 1
        assert body["author"] is None
