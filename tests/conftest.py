"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- Ledger, decision engine and order repository wired to an in-memory store
- A TestClient for the FastAPI app
- Redis availability checks for integration tests
"""

import os
import socket
from urllib.parse import urlparse

import pytest
from fastapi.testclient import TestClient

from fake_braspag.api.main import create_app
from fake_braspag.config import Settings
from fake_braspag.domain import DecisionEngine, RequestLedger
from fake_braspag.infrastructure import InMemoryKeyValueStore, OrderRepository

# Redis used by integration tests - a dedicated database index keeps them isolated
TEST_REDIS_URL = os.getenv("TEST_REDIS_URL", "redis://localhost:6379/15")


def redis_available(url: str = TEST_REDIS_URL) -> bool:
    """Check whether a Redis server accepts TCP connections."""
    parsed = urlparse(url)
    try:
        with socket.create_connection((parsed.hostname or "localhost", parsed.port or 6379), timeout=1):
            return True
    except OSError:
        return False


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when Redis is not running."""
    if redis_available():
        return

    skip_integration = pytest.mark.skip(
        reason=f"Redis is not reachable at {TEST_REDIS_URL} (start it with: docker run -p 6379:6379 redis)"
    )
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip_integration)


@pytest.fixture
def ledger() -> RequestLedger:
    return RequestLedger()


@pytest.fixture
def engine(ledger: RequestLedger) -> DecisionEngine:
    return DecisionEngine(ledger)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def order_repository(store: InMemoryKeyValueStore) -> OrderRepository:
    return OrderRepository(store)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(store_backend="memory", environment="test")


@pytest.fixture
def client(test_settings: Settings):
    """TestClient with the lifespan running (fresh ledger and store per test)."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client
