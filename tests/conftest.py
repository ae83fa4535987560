# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Provides a TestClient bound to a fresh in-memory database per test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("FRONTEND_URL", "http://localhost:5173")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """TestClient over an app with its own empty in-memory database."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def make_client():
    """
    Build TestClients with overridden settings.

    Usage:
        client = make_client(DATABASE_URL="sqlite+aiosqlite:///...")
    """
    clients = []

    def _make(**overrides) -> TestClient:
        test_client = TestClient(create_app(Settings(**overrides)))
        test_client.__enter__()
        clients.append(test_client)
        return test_client

    yield _make

    for test_client in clients:
        test_client.__exit__(None, None, None)


@pytest.fixture
def sample_product():
    """Valid create payload."""
    return {"name": "Monitor", "price": 300}


@pytest.fixture
def created_product(client, sample_product):
    """A product already stored through the API."""
    response = client.post("/api/products", json=sample_product)
    assert response.status_code == 201
    return response.json()
