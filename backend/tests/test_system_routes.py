"""
Storefront API — Informational Endpoint Tests
===============================================

What:  /, /health, /info, /weatherforecast, request IDs and docs gating.
"""

import random

import pytest

from app.config import settings
from app.services.weather_service import SUMMARIES
from conftest import WEATHER_SEED


class TestLiveness:

    @pytest.mark.asyncio
    async def test_root_is_plain_text(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.text == "Root OK"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_health_returns_ok(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == "OK"

    @pytest.mark.asyncio
    async def test_info(self, test_client):
        response = await test_client.get("/info")

        assert response.status_code == 200
        assert response.json() == {"app": settings.app_name, "version": settings.app_version}


class TestWeatherForecastRoute:

    @pytest.mark.asyncio
    async def test_five_deterministic_forecasts(self, test_client):
        response = await test_client.get("/weatherforecast")

        assert response.status_code == 200
        forecasts = response.json()
        assert [f["date"] for f in forecasts] == [
            "2024-01-16",
            "2024-01-17",
            "2024-01-18",
            "2024-01-19",
            "2024-01-20",
        ]

        replay = random.Random(WEATHER_SEED)
        for forecast in forecasts:
            celsius = replay.randrange(-20, 55)
            assert forecast["temperatureC"] == celsius
            assert forecast["summary"] == replay.choice(SUMMARIES)
            assert forecast["temperatureF"] == 32 + int(celsius / 0.5556)
            assert set(forecast) == {"date", "temperatureC", "summary", "temperatureF"}


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated_request_id(self, test_client):
        response = await test_client.get("/api/products")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_request_id_echoed_in_header_and_error(self, test_client):
        response = await test_client.get(
            "/api/products/42", headers={"X-Request-ID": "trace-123"}
        )

        assert response.headers["X-Request-ID"] == "trace-123"
        assert response.json()["request_id"] == "trace-123"


class TestDocs:

    @pytest.mark.asyncio
    async def test_docs_hidden_outside_development(self, test_client):
        assert (await test_client.get("/docs")).status_code == 404
        assert (await test_client.get("/openapi.json")).status_code == 404
