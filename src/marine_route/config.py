"""Centralized settings for the marine-route backend."""
from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "MARINE_ROUTE_"}

    # OpenWeatherMap: empty key means the primary source is unavailable (simulated fallback)
    openweather_api_key: str = ""
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"

    # NWS text forecasts (secondary, best effort)
    nws_base_url: str = "https://api.weather.gov/points"

    user_agent: str = "MarineRoute/0.1.0 (contact: ops@example.com)"
    http_timeout_s: int = 25

    default_vessel_type: str = "cargo"
    default_base_speed_kt: float = 15.0

    # Used by the simulated fallback when no air temperature is known
    fallback_temperature_c: float = 15.0

    log_level: str = "INFO"


settings = Settings()
