"""
Storefront API — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Every test gets its own store and app, so no state leaks between tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── store: InMemoryStore seeded with the demo catalog
    ├── empty_store: InMemoryStore with no products
    ├── weather_service: WeatherService with a seeded RNG and a fixed date
    └── test_client: HTTPX AsyncClient bound to a fresh app over `store`
"""

import os
import random
from datetime import date

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENVIRONMENT"] = "production"
os.environ["SEED_PRODUCTS"] = "true"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import create_app
from app.services.weather_service import WeatherService
from app.store import InMemoryStore, default_seed_products

WEATHER_SEED = 1234
WEATHER_TODAY = date(2024, 1, 15)


@pytest.fixture
def store():
    """Store holding products 1 Laptop/1000, 2 Mouse/25, 3 Keyboard/45 and no orders."""
    return InMemoryStore(seed=default_seed_products())


@pytest.fixture
def empty_store():
    return InMemoryStore()


@pytest.fixture
def weather_service():
    """
    Deterministic forecast generator.

    Replaying random.Random(WEATHER_SEED) reproduces the exact values.
    """
    return WeatherService(rng=random.Random(WEATHER_SEED), today=lambda: WEATHER_TODAY)


@pytest_asyncio.fixture
async def test_client(store, weather_service):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    app = create_app(store=store, weather_service=weather_service)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
