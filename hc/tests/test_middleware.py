"""Tests for the origin check and its predicates."""

import pytest
from fastapi.testclient import TestClient

from hc import main
from hc.config import Settings
from hc.main import create_app
from hc.middleware import OriginValidatorMiddleware, is_allowed_origin, is_api_route


class TestPredicates:

    @pytest.mark.parametrize("path,expected", [
        ("/api", True),
        ("/api/", True),
        ("/api/folders/1", True),
        ("/apiary", False),
        ("/", False),
        ("/index.html", False),
    ])
    def test_is_api_route(self, path, expected):
        assert is_api_route(path) is expected

    @pytest.mark.parametrize("origin", [
        "http://localhost:8080",
        "http://127.0.0.1:8080",
        "http://[::1]:8080",
    ])
    def test_loopback_origins_allowed(self, origin):
        assert is_allowed_origin(origin, 8080)

    @pytest.mark.parametrize("origin", [
        "http://localhost:3000",
        "https://localhost:8080",
        "http://evil.example.com",
        "http://localhost:8080/",
    ])
    def test_other_origins_rejected(self, origin):
        assert not is_allowed_origin(origin, 8080)


@pytest.fixture
def guarded_client(tmp_path):
    app = create_app(Settings(db_path=tmp_path / "origin.db", port=8080), check_origin=True)
    with TestClient(app) as test_client:
        yield test_client


class TestOriginValidatorMiddleware:

    def test_allowed_origin(self, guarded_client):
        response = guarded_client.get("/api/folders", headers={"Origin": "http://localhost:8080"})

        assert response.status_code == 200

    def test_disallowed_origin(self, guarded_client):
        response = guarded_client.get("/api/folders", headers={"Origin": "http://evil.example.com"})

        assert response.status_code == 403
        assert response.json() == {"messages": ["Forbidden: Invalid origin"]}

    def test_referer_fallback(self, guarded_client):
        allowed = guarded_client.get(
            "/api/folders", headers={"Referer": "http://127.0.0.1:8080/index.html"}
        )
        rejected = guarded_client.get(
            "/api/folders", headers={"Referer": "http://evil.example.com/page"}
        )

        assert allowed.status_code == 200
        assert rejected.status_code == 403

    def test_missing_origin_is_allowed(self, guarded_client):
        assert guarded_client.get("/api/folders").status_code == 200

    def test_non_api_routes_are_not_checked(self, guarded_client):
        response = guarded_client.get("/health", headers={"Origin": "http://evil.example.com"})

        assert response.status_code == 200

    def test_module_app_checks_origin(self):
        middleware = [entry.cls for entry in main.app.user_middleware]

        assert OriginValidatorMiddleware in middleware
