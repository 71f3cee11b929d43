"""Tests for the forwarding proxy (proxy/server.py)."""

from unittest.mock import MagicMock, patch

import pytest
import requests
from fastapi.testclient import TestClient

from shotsto30.api.transport import NBA_HEADERS
from shotsto30.proxy.server import create_app, is_allowed_target

TARGET = "https://stats.nba.com/stats/commonallplayers?LeagueID=00&Season=2024-25&IsOnlyCurrentSeason=0"


def make_upstream(status_code=200, body=b'{"resultSets": []}', content_type="application/json; charset=utf-8"):
    upstream = MagicMock()
    upstream.status_code = status_code
    upstream.headers = {"Content-Type": content_type} if content_type else {}
    upstream.iter_content.return_value = iter([body])
    return upstream


@pytest.fixture
def client():
    return TestClient(create_app(timeout=5))


class TestIsAllowedTarget:
    def test_stats_url(self):
        assert is_allowed_target(TARGET)

    @pytest.mark.parametrize("url", [
        None,
        "",
        "http://stats.nba.com/stats/x",
        "https://stats.nba.com.evil.example/stats",
        "https://www.nba.com/stats",
    ])
    def test_rejected(self, url):
        assert not is_allowed_target(url)


class TestForward:
    @pytest.mark.parametrize("method", ["post", "put", "delete"])
    def test_non_get_is_405(self, client, method):
        with patch("shotsto30.proxy.server.requests.get") as mock_get:
            response = client.request(method.upper(), "/", params={"url": TARGET})

        assert response.status_code == 405
        mock_get.assert_not_called()

    def test_missing_url_is_400(self, client):
        response = client.get("/")

        assert response.status_code == 400
        assert "error" in response.json()

    def test_foreign_url_is_400(self, client):
        with patch("shotsto30.proxy.server.requests.get") as mock_get:
            response = client.get("/", params={"url": "https://example.com/stats"})

        assert response.status_code == 400
        mock_get.assert_not_called()

    def test_mirrors_upstream(self, client):
        upstream = make_upstream(body=b'{"resultSets": [1]}')
        with patch("shotsto30.proxy.server.requests.get", return_value=upstream) as mock_get:
            response = client.get("/", params={"url": TARGET})

        assert response.status_code == 200
        assert response.content == b'{"resultSets": [1]}'
        assert response.headers["content-type"].startswith("application/json")
        mock_get.assert_called_once_with(TARGET, headers=NBA_HEADERS, stream=True, timeout=5)
        upstream.close.assert_called_once()

    def test_any_path_is_forwarded(self, client):
        with patch("shotsto30.proxy.server.requests.get", return_value=make_upstream()):
            response = client.get("/some/nested/path", params={"url": TARGET})

        assert response.status_code == 200

    def test_upstream_error_status_passes_through(self, client):
        upstream = make_upstream(status_code=403, body=b"Access Denied", content_type="text/html")
        with patch("shotsto30.proxy.server.requests.get", return_value=upstream):
            response = client.get("/", params={"url": TARGET})

        assert response.status_code == 403
        assert response.text == "Access Denied"
        assert response.headers["content-type"].startswith("text/html")

    def test_missing_content_type_defaults_to_json(self, client):
        upstream = make_upstream(content_type=None)
        with patch("shotsto30.proxy.server.requests.get", return_value=upstream):
            response = client.get("/", params={"url": TARGET})

        assert response.headers["content-type"].startswith("application/json")

    def test_network_failure_is_502(self, client):
        with patch(
            "shotsto30.proxy.server.requests.get",
            side_effect=requests.ConnectionError("connection reset"),
        ):
            response = client.get("/", params={"url": TARGET})

        assert response.status_code == 502
        assert response.json() == {"error": "Proxy fetch failed", "message": "connection reset"}
