"""Tests for the redirect route."""

import pytest


@pytest.mark.api
class TestRedirectRoute:

    def test_redirect(self, client, url_repository):
        client.post("/shorturls", json={"url": "https://example.com/page", "shortcode": "abcd"})

        response = client.get("/shorturls/abcd", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/page"
        assert url_repository.get_by_short_code("abcd").click_count == 1

    def test_redirect_unknown_code(self, client):
        response = client.get("/shorturls/nope", follow_redirects=False)

        assert response.status_code == 404
        assert "not found" in response.json()["detail"]

    def test_redirect_expired_code(self, client, clock, url_repository):
        client.post("/shorturls", json={"url": "https://example.com", "shortcode": "abcd", "validity": 1})
        clock.advance(61)

        response = client.get("/shorturls/abcd", follow_redirects=False)

        assert response.status_code == 410
        assert url_repository.get_by_short_code("abcd").click_count == 0

    def test_redirect_code_named_stats(self, client):
        # /stats/{code} needs a second segment, so a bare "stats" code still redirects
        client.post("/shorturls", json={"url": "https://example.com/s", "shortcode": "stats"})

        response = client.get("/shorturls/stats", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/s"

    def test_request_id_header(self, client):
        response = client.get("/shorturls/allurls")
        assert response.headers.get("X-Request-ID")


@pytest.mark.api
class TestMiscRoutes:

    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Hello"

    def test_health(self, client):
        client.post("/shorturls", json={"url": "https://example.com"})

        data = client.get("/api/health").json()

        assert data["status"] == "healthy"
        assert data["components"]["registry"]["url_count"] == 1

    def test_liveness_and_readiness(self, client):
        assert client.get("/api/health/live").json() == {"alive": True}
        assert client.get("/api/health/ready").json()["ready"] is True
