"""
Storefront API — Weather Forecast Value
=========================================

What:  A demo forecast composed at request time. Never stored.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class WeatherForecast:
    date: date
    temperature_c: int
    summary: Optional[str]

    @property
    def temperature_f(self) -> int:
        # int() truncates toward zero
        return 32 + int(self.temperature_c / 0.5556)
