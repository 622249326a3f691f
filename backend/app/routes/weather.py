"""
Storefront API — Weather Forecast Route
=========================================

What:  GET /weatherforecast, a five-day randomly generated demo forecast.
How:   Delegates to WeatherService; a new forecast is drawn on every call.
"""

from typing import List

from fastapi import APIRouter, Depends

from app.schemas.system import WeatherForecastResponse
from app.services.weather_service import WeatherService, get_weather_service

router = APIRouter(tags=["Weather"])


@router.get(
    "/weatherforecast",
    response_model=List[WeatherForecastResponse],
    name="GetWeatherForecast",
    operation_id="GetWeatherForecast",
    summary="Five-day demo forecast",
)
async def get_weather_forecast(
    weather: WeatherService = Depends(get_weather_service),
) -> List[WeatherForecastResponse]:
    return [WeatherForecastResponse.from_entity(f) for f in weather.forecast()]
