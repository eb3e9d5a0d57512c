from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from marine_route.core.errors import UpstreamUnavailable
from marine_route.core.models import AtmosphericSample, Coordinates
from marine_route.providers.base import WeatherSource
from marine_route.providers.http import HTTPClient

log = logging.getLogger(__name__)


def _opt_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


def parse_current_weather(data: Dict[str, Any]) -> AtmosphericSample:
    """
    OpenWeatherMap /weather payload (units=metric):
      main.temp (°C), wind.speed (m/s), wind.deg, visibility (m), weather[].main
    """
    try:
        temp = float(data["main"]["temp"])
    except (KeyError, TypeError, ValueError) as e:
        raise UpstreamUnavailable("openweather", "payload missing main.temp") from e

    wind = data.get("wind") or {}
    conditions = tuple(
        str(w.get("main", "")) for w in (data.get("weather") or []) if isinstance(w, dict) and w.get("main")
    )
    wind_dir = _opt_float(wind.get("deg"))

    return AtmosphericSample(
        temperature_c=temp,
        wind_speed_ms=max(0.0, _opt_float(wind.get("speed")) or 0.0),
        wind_direction_deg=(wind_dir % 360.0) if wind_dir is not None else None,
        visibility_m=_opt_float(data.get("visibility")),
        conditions=conditions,
        location_name=data.get("name") or None,
        observed_at=data.get("dt"),
    )


class OpenWeatherSource(WeatherSource):
    """
    OpenWeatherMap current conditions:
      GET {base_url}/weather?lat=..&lon=..&units=metric&appid=..

    No marine fields here; the estimator derives those.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openweathermap.org/data/2.5",
        user_agent: str = "MarineRoute/0.1.0",
        timeout_s: int = 25,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.http = HTTPClient(user_agent=user_agent, source="openweather", timeout_s=timeout_s)

    def fetch_current(self, point: Coordinates) -> AtmosphericSample:
        if not self.api_key:
            raise UpstreamUnavailable("openweather", "no API key configured")

        params = {"lat": point.lat, "lon": point.lon, "units": "metric", "appid": self.api_key}
        data = self.http.get_json(f"{self.base_url}/weather", params=params)
        sample = parse_current_weather(data)
        log.debug(
            "OpenWeather (%.4f, %.4f): %.1f m/s wind, %.1f °C",
            point.lat, point.lon, sample.wind_speed_ms, sample.temperature_c,
        )
        return sample
