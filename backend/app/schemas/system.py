"""
Storefront API — Informational & Error Schemas
================================================

What:  Response models for /info and /weatherforecast, plus the error body
       shared by every failing endpoint.
Who:   Used by routes/health.py, routes/weather.py and the exception
       handlers in main.py.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.models.weather import WeatherForecast


class InfoResponse(BaseModel):
    """Application identity reported by GET /info."""

    app: str = Field(description="Application name")
    version: str = Field(description="Application version")


class WeatherForecastResponse(BaseModel):
    """
    One day of the demo forecast.

    temperatureF is derived from temperatureC on serialization and is
    never accepted as input.
    """

    model_config = ConfigDict(populate_by_name=True)

    date: datetime.date = Field(description="Forecast day (ISO date)")
    temperature_c: int = Field(alias="temperatureC", description="Temperature in Celsius")
    summary: Optional[str] = Field(default=None, description="Short description")

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        return WeatherForecast(self.date, self.temperature_c, self.summary).temperature_f

    @classmethod
    def from_entity(cls, forecast: WeatherForecast) -> "WeatherForecastResponse":
        return cls(
            date=forecast.date,
            temperature_c=forecast.temperature_c,
            summary=forecast.summary,
        )


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code ("not_found", "conflict", "validation_error")
        message: Human-readable description
        details: Optional extra context (resource, resource_id, field)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "conflict",
            "message": "Product with id 1 already exists.",
            "details": {"resource": "product", "resource_id": 1},
            "request_id": "1f0c9a2e"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
