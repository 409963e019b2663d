"""
models/weather.py
-----------------
Domain model for a current-weather report.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherReport:
    """
    Current conditions for a single city (metric units).

    Attributes:
        city: City name the report was requested for.
        description: Human-readable conditions, e.g. 'light rain'.
        temp: Current temperature in °C.
        temp_min: Minimum temperature in °C.
        temp_max: Maximum temperature in °C.
        humidity: Relative humidity in %.
        wind_speed: Wind speed in m/s.
    """
    city: str
    description: str
    temp: float
    temp_min: float
    temp_max: float
    humidity: int
    wind_speed: float

    def __str__(self) -> str:
        return f"{self.city}: {self.description}, {self.temp:.1f}°C"
