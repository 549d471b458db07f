"""Tests for the posts and health endpoints."""

import pytest

NEW_POST = {
    "title": "Hello community",
    "content": "First post on DeepTalk.",
    "author_id": "user-1",
    "author_name": "Mina",
    "author_avatar": "https://cdn.example.com/avatars/mina.png",
}


async def _create(client, **overrides):
    response = await client.post("/api/v1/posts", json={**NEW_POST, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
class TestPostsAPI:
    """Post endpoints end to end over SQLite."""

    async def test_create_post(self, client):
        body = await _create(client)

        assert body["id"]
        assert body["created_at"]
        assert body["likes_count"] == 0
        assert body["author"] is None

    async def test_create_rejects_oversized_content(self, client):
        response = await client.post("/api/v1/posts", json={**NEW_POST, "content": "x" * 1001})

        assert response.status_code == 422

    async def test_create_rejects_blank_title(self, client):
        response = await client.post("/api/v1/posts", json={**NEW_POST, "title": "   "})

        assert response.status_code == 422

    async def test_create_ignores_client_supplied_id_and_likes(self, client):
        body = await _create(client, id="chosen-by-client", likes_count=50)

        assert body["id"] != "chosen-by-client"
        assert body["likes_count"] == 0

    async def test_get_post_attaches_author(self, client):
        created = await _create(client)

        response = await client.get(f"/api/v1/posts/{created['id']}")

        assert response.status_code == 200
        author = response.json()["author"]
        assert author["id"] == "user-1"
        assert author["name"] == "Mina"

    async def test_get_missing_post(self, client):
        response = await client.get("/api/v1/posts/missing")

        assert response.status_code == 404

    async def test_list_posts(self, client):
        for index in range(3):
            await _create(client, title=f"post {index}")

        response = await client.get("/api/v1/posts", params={"page_size": 2, "include_author": True})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert len(body["items"]) == 2
        assert all(item["author"]["name"] == "Mina" for item in body["items"])

    async def test_update_post(self, client):
        created = await _create(client)

        response = await client.patch(f"/api/v1/posts/{created['id']}", json={"content": "Edited body"})

        assert response.status_code == 200
        body = response.json()
        assert body["content"] == "Edited body"
        assert body["title"] == created["title"]
        assert body["created_at"] == created["created_at"]

    async def test_delete_post(self, client):
        created = await _create(client)

        response = await client.delete(f"/api/v1/posts/{created['id']}")
        assert response.status_code == 204

        response = await client.get(f"/api/v1/posts/{created['id']}")
        assert response.status_code == 404

    async def test_like_and_unlike(self, client):
        created = await _create(client)
        url = f"/api/v1/posts/{created['id']}/like"

        assert (await client.post(url)).json()["likes_count"] == 1
        assert (await client.post(url)).json()["likes_count"] == 2

        response = await client.delete(url)
        assert response.json() == {"post_id": created["id"], "likes_count": 1, "liked": False}

        await client.delete(url)
        response = await client.delete(url)
        assert response.json()["likes_count"] == 0

    async def test_like_missing_post(self, client):
        response = await client.post("/api/v1/posts/missing/like")

        assert response.status_code == 404


@pytest.mark.asyncio
class TestHealthAPI:
    """Liveness and readiness."""

    async def test_health(self, client):
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_ready(self, client):
        response = await client.get("/api/v1/ready")

        assert response.status_code == 200
        assert response.json()["database"] == "healthy"
