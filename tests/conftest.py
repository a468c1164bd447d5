"""
pytest Fixtures for Books API Tests

Shared fixtures used across all test files.

Every test gets a brand new application from create_app(), which means a
brand new BookStore seeded with the four fixture books and an id counter
starting at 5. Nothing leaks between tests.

FIXTURE SCOPES:
- function (default): New instance per test function
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app
import os

os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["ENVIRONMENT"] = "development"

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import create_app
from app.services.book_store import BookStore


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def store() -> BookStore:
    """A freshly seeded book store."""
    return BookStore()


@pytest.fixture
def app(settings: Settings, store: BookStore) -> FastAPI:
    """Application wired to the store fixture, so tests can inspect it directly."""
    return create_app(settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create a test client.

    The test client makes HTTP requests to our FastAPI app without running
    a server. Using it as a context manager runs the lifespan events.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def new_book_payload() -> dict:
    return {
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "year": 2008,
        "genre": "Tech",
        "copiesAvailable": 5,
    }
