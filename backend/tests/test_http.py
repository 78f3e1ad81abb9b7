"""
CookHub Backend — HTTP Surface Tests
======================================

What we test:
    ✅ CORS headers on every response, narrower allowed headers on / and /api/search
    ✅ OPTIONS preflight answered with an empty 200
    ✅ /static responses carry no CORS headers
    ✅ X-Request-ID generated or echoed
    ✅ Landing page served from INDEX_FILE at / and at any unregistered GET path, 404 when missing
    ✅ /health reports store connectivity
"""

import pytest

from cookhub.config import settings


class TestCORSPolicy:
    @pytest.mark.asyncio
    async def test_default_headers_on_api(self, test_client):
        response = await test_client.get("/api/chefs")

        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"
        assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"
        assert response.headers["access-control-max-age"] == "3600"

    @pytest.mark.asyncio
    async def test_search_uses_narrow_headers(self, test_client):
        response = await test_client.get("/api/search", params={"q": "борщ"})
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    @pytest.mark.asyncio
    async def test_headers_present_on_errors(self, test_client):
        response = await test_client.get("/api/shopping-list")

        assert response.status_code == 400
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/recipes", "/api/enroll", "/anything"])
    async def test_options_short_circuits(self, test_client, path):
        response = await test_client.options(path)

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/static/styles.css", "/static/missing.css"])
    async def test_static_is_not_stamped(self, test_client, path):
        response = await test_client.get(path)
        assert "access-control-allow-origin" not in response.headers

    @pytest.mark.asyncio
    async def test_static_file_served(self, test_client):
        response = await test_client.get("/static/styles.css")

        assert response.status_code == 200
        assert "text/css" in response.headers["content-type"]


class TestRequestID:
    @pytest.mark.asyncio
    async def test_generated(self, test_client):
        response = await test_client.get("/api/stats")
        assert len(response.headers["x-request-id"]) == 8

    @pytest.mark.asyncio
    async def test_echoed(self, test_client):
        response = await test_client.get("/api/stats", headers={"X-Request-ID": "trace-42"})
        assert response.headers["x-request-id"] == "trace-42"

    @pytest.mark.asyncio
    async def test_in_error_body(self, test_client):
        response = await test_client.get(
            "/api/recommendations", headers={"X-Request-ID": "trace-43"}
        )
        assert response.json()["request_id"] == "trace-43"


class TestLandingPage:
    @pytest.mark.asyncio
    async def test_serves_index_file(self, test_client, tmp_path, monkeypatch):
        index = tmp_path / "index.html"
        index.write_text("<html><body>CookHub</body></html>", encoding="utf-8")
        monkeypatch.setattr(settings, "index_file", str(index))

        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "CookHub" in response.text
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    @pytest.mark.asyncio
    async def test_missing_index_is_404(self, test_client, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "index_file", str(tmp_path / "nope.html"))

        response = await test_client.get("/")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestLandingPageFallback:
    @pytest.fixture
    def index_file(self, tmp_path, monkeypatch):
        index = tmp_path / "index.html"
        index.write_text("<html><body>CookHub</body></html>", encoding="utf-8")
        monkeypatch.setattr(settings, "index_file", str(index))
        return index

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/some/page", "/recipes/5", "/api/unknown"])
    async def test_unregistered_path_serves_landing_page(self, test_client, index_file, path):
        response = await test_client.get(path)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "CookHub" in response.text
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    @pytest.mark.asyncio
    async def test_api_routes_still_win(self, test_client, index_file):
        response = await test_client.get("/api/stats")

        assert response.headers["content-type"].startswith("application/json")
        assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"

    @pytest.mark.asyncio
    async def test_wrong_verb_on_api_route_is_still_405(self, test_client, index_file):
        response = await test_client.delete("/api/chefs")
        assert response.status_code == 405

    @pytest.mark.asyncio
    async def test_fallback_without_index_is_404(self, test_client, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "index_file", str(tmp_path / "nope.html"))

        response = await test_client.get("/some/page")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestHealth:
    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_unhealthy_after_dispose(self, test_client, store):
        await store.dispose()

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"
