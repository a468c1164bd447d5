"""
Tests for application wiring: root route, error handling and configuration.
"""

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from pydantic import ValidationError

from app.config import Settings
from app.main import create_app
from app.services.book_store import BookStore


class TestRoot:
    def test_root_lists_endpoints(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Welcome to the Library Books API"
        assert set(data["endpoints"]) == {
            "GET /api/books",
            "GET /api/books/:id",
            "POST /api/books",
            "PUT /api/books/:id",
            "DELETE /api/books/:id",
        }

    def test_responses_are_json(self, client):
        response = client.get("/api/books")

        assert response.headers["content-type"].startswith("application/json")


class TestUnmatchedRoutes:
    @pytest.mark.parametrize(
        "method,path",
        [
            ("GET", "/api/authors"),
            ("GET", "/api/books/1/reviews"),
            ("POST", "/nowhere"),
            ("DELETE", "/api/books"),
            ("PATCH", "/api/books/1"),
            ("POST", "/api/books/1"),
        ],
    )
    def test_route_not_found(self, client, method, path):
        response = client.request(method, path)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Route not found"}


class TestRequestBodies:
    def test_malformed_json(self, client, store):
        response = client.post(
            "/api/books",
            content='{"title": "Dune",',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Malformed JSON in request body."}
        assert len(store) == 4

    def test_body_is_array(self, client):
        response = client.post("/api/books", json=[{"title": "A", "author": "B"}])

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Request body must be a JSON object."}

    def test_missing_body(self, client):
        response = client.post("/api/books")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "error" in response.json()


class TestErrorHandling:
    def test_unhandled_error_is_hidden(self, settings):
        class BrokenStore(BookStore):
            def list_books(self):
                raise RuntimeError("disk on fire")

        app = create_app(settings.model_copy(update={"debug": False}), store=BrokenStore())
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/books")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "An internal error occurred."}

    def test_unhandled_error_detail_in_debug(self, settings):
        class BrokenStore(BookStore):
            def list_books(self):
                raise RuntimeError("disk on fire")

        app = create_app(settings.model_copy(update={"debug": True}), store=BrokenStore())
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/books")

        assert response.json() == {"error": "disk on fire"}


class TestAppFactory:
    def test_apps_do_not_share_state(self, settings):
        first = TestClient(create_app(settings))
        second = TestClient(create_app(settings))

        first.delete("/api/books/1")

        assert len(first.get("/api/books").json()) == 3
        assert len(second.get("/api/books").json()) == 4

    def test_seed_disabled(self, settings):
        app = create_app(settings.model_copy(update={"seed_books": False}))

        with TestClient(app) as client:
            assert client.get("/api/books").json() == []
            created = client.post("/api/books", json={"title": "A", "author": "B"})
            assert created.json()["id"] == 5

    def test_docs_enabled(self, client):
        assert client.get("/openapi.json").status_code == status.HTTP_200_OK

    def test_docs_disabled(self, settings):
        app = create_app(settings.model_copy(update={"docs_enabled": False}))
        client = TestClient(app)

        response = client.get("/openapi.json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Route not found"}


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.seed_books is True
        assert settings.allowed_origins_list == ["*"]

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="qa")

    def test_origins_list(self):
        settings = Settings(_env_file=None, allowed_origins="http://a.test, http://b.test")

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("SEED_BOOKS", "false")

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.seed_books is False
