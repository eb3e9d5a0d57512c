from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from marine_route.core.errors import MarineRouteError, ParseFailure
from marine_route.core.models import Coordinates, ForecastDocument, ForecastPeriod
from marine_route.providers.base import MarineForecastSource
from marine_route.providers.http import HTTPClient

log = logging.getLogger(__name__)


def parse_forecast(data: Dict[str, Any]) -> ForecastDocument:
    """NWS forecast JSON -> ForecastDocument (properties.periods[].detailedForecast)."""
    props = data.get("properties") if isinstance(data, dict) else None
    periods = props.get("periods") if isinstance(props, dict) else None
    if not isinstance(periods, list):
        raise ParseFailure("forecast payload has no properties.periods list")

    out = []
    for p in periods:
        if not isinstance(p, dict):
            continue
        out.append(
            ForecastPeriod(
                name=str(p.get("name") or ""),
                detailed_forecast=str(p.get("detailedForecast") or ""),
            )
        )
    return ForecastDocument(periods=tuple(out))


class NWSForecastSource(MarineForecastSource):
    """
    NWS text forecast, two hops:
      - /points/{lat},{lon} -> properties.forecast URL
      - forecast URL -> properties.periods[].detailedForecast

    Coverage is US-only; everywhere else this quietly yields None.
    """

    def __init__(
        self,
        base_url: str = "https://api.weather.gov/points",
        user_agent: str = "MarineRoute/0.1.0",
        timeout_s: int = 25,
    ):
        self.base_url = base_url.rstrip("/")
        self.http = HTTPClient(user_agent=user_agent, source="nws", timeout_s=timeout_s)

    def _forecast_url(self, point: Coordinates) -> Optional[str]:
        data = self.http.get_json(f"{self.base_url}/{point.lat:.4f},{point.lon:.4f}")
        props = data.get("properties") or {}
        return props.get("forecast")

    def fetch_forecast_text(self, point: Coordinates) -> Optional[ForecastDocument]:
        try:
            url = self._forecast_url(point)
            if not url:
                return None
            return parse_forecast(self.http.get_json(url))
        except MarineRouteError as e:
            log.debug("NWS forecast unavailable for (%.4f, %.4f): %s", point.lat, point.lon, e)
            return None
        except Exception as e:
            log.debug("NWS forecast failed for (%.4f, %.4f): %s: %s", point.lat, point.lon, type(e).__name__, e)
            return None
