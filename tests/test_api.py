"""Tests for API endpoints."""

import pytest
from httpx import AsyncClient, ASGITransport

from shortlink.lib.service import URLShortenerService
from shortlink.lib.database.memory import InMemoryLinkStore
from shortlink.lib.exceptions import PersistenceError
from shortlink.web_app import create_app


class UnavailableStore(InMemoryLinkStore):
    async def put(self, short_code, original_url, created_at=None):
        raise PersistenceError("connection refused")

    async def get_link(self, short_code):
        raise PersistenceError("connection refused")

    async def health_check(self):
        return False


@pytest.fixture
async def unavailable_client(config, logger):
    service = URLShortenerService(store=UnavailableStore(logger=logger), logger=logger)
    app = create_app(service_instance=service, config=config)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


class TestAPIEndpoints:
    """Test API endpoints."""

    async def test_shorten_url(self, client, sample_urls):
        """Test POST /api/shorten."""
        response = await client.post(
            "/api/shorten",
            json={"url": sample_urls[0]}
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data["short_code"]) == 6
        assert data["original_url"] == sample_urls[0]
        assert data["short_url"] == f"http://localhost:8080/short/{data['short_code']}"
        assert "created_at" in data

    async def test_shorten_then_redirect(self, client, sample_urls):
        response = await client.post("/api/shorten", json={"url": sample_urls[1]})
        short_code = response.json()["short_code"]

        redirect = await client.get(f"/short/{short_code}", follow_redirects=False)

        assert redirect.status_code == 301
        assert redirect.headers["location"] == sample_urls[1]

    async def test_shorten_empty_url(self, client, store):
        response = await client.post("/api/shorten", json={"url": ""})

        assert response.status_code == 400
        assert response.json()["detail"] == "URL is required"
        assert len(store) == 0

    async def test_shorten_long_url(self, client):
        long_url = "http://example.com/" + "a" * 3000
        response = await client.post("/api/shorten", json={"url": long_url})

        assert response.status_code == 200
        assert len(response.json()["short_code"]) == 6
        assert response.json()["original_url"] == long_url

    async def test_shorten_missing_body_field(self, client):
        response = await client.post("/api/shorten", json={"link": "http://example.com"})

        assert response.status_code == 422

    async def test_get_url_info(self, client, sample_urls):
        """Test GET /api/urls/{short_code}."""
        create_response = await client.post(
            "/api/shorten",
            json={"url": sample_urls[0]}
        )
        short_code = create_response.json()["short_code"]

        response = await client.get(f"/api/urls/{short_code}")

        assert response.status_code == 200
        data = response.json()
        assert data["short_code"] == short_code
        assert data["original_url"] == sample_urls[0]
        assert data["created_at"] == create_response.json()["created_at"]

    async def test_get_url_info_not_found(self, client):
        response = await client.get("/api/urls/nonexistent")

        assert response.status_code == 404
        assert "nonexistent" in response.json()["detail"]

    async def test_health_check(self, client):
        response = await client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "healthy"
        assert data["cache"] == "healthy"
        assert data["backend"] == "memory"


class TestAPIStorageFailures:

    async def test_shorten_storage_failure(self, unavailable_client):
        response = await unavailable_client.post("/api/shorten", json={"url": "http://example.com"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to save URL: connection refused"

    async def test_get_url_info_storage_failure(self, unavailable_client):
        response = await unavailable_client.get("/api/urls/aB3xYz")

        assert response.status_code == 500
        assert response.json()["detail"] == "Database error: connection refused"

    async def test_health_reports_unhealthy(self, unavailable_client):
        response = await unavailable_client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "unhealthy"
