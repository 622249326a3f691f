"""
Storefront API — Weather Forecast Service
===========================================

What:  Builds the five-day demo forecast served by GET /weatherforecast.
Why:   Keeps randomness and the clock out of the route so both can be
       replaced in tests.
How:   Draws temperatures and summaries from an injected random.Random and
       dates from an injected "today" callable.
Who:   Built by create_app() and stored on app.state; routes receive it
       through the get_weather_service dependency.

Generation rules:
    - dates: today + 1 .. today + 5
    - temperatureC: integer in [-20, 55)
    - summary: one of SUMMARIES
    Nothing is cached; every call produces a new forecast.
"""

import random
from datetime import date, timedelta
from typing import Callable, List, Optional, Sequence

from fastapi import Request

from app.models.weather import WeatherForecast

SUMMARIES: Sequence[str] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55  # exclusive
FORECAST_DAYS = 5


class WeatherService:
    """
    Stateless forecast generator.

    Args:
        rng:   Random source. Defaults to a fresh random.Random().
        today: Returns the reference date. Defaults to date.today.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self.rng = rng or random.Random()
        self.today = today or date.today

    def forecast(self, days: int = FORECAST_DAYS) -> List[WeatherForecast]:
        start = self.today()
        return [
            WeatherForecast(
                date=start + timedelta(days=index),
                temperature_c=self.rng.randrange(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C),
                summary=self.rng.choice(SUMMARIES),
            )
            for index in range(1, days + 1)
        ]


def get_weather_service(request: Request) -> WeatherService:
    """FastAPI dependency returning the application's WeatherService."""
    return request.app.state.weather_service
