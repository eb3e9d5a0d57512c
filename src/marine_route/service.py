"""Exposed request/response contract and source wiring."""
from __future__ import annotations

import logging
import random
import time
from typing import Callable, List, Optional

from marine_route.config import Settings, settings as default_settings
from marine_route.core.estimator import MarineConditionsEstimator
from marine_route.core.models import DEFAULT_BASE_SPEED_KT, Coordinates, MaritimeAlert, MarineWeatherReport, Route
from marine_route.core.route_engine import RouteEngine
from marine_route.providers.base import AlertSource

log = logging.getLogger(__name__)


class MarineWeatherService:
    def __init__(
        self,
        estimator: MarineConditionsEstimator,
        alerts: Optional[AlertSource] = None,
        default_vessel_type: str = "cargo",
        default_speed_kt: float = DEFAULT_BASE_SPEED_KT,
    ):
        self.estimator = estimator
        self.engine = RouteEngine(estimator, default_speed_kt=default_speed_kt)
        self.alerts = alerts
        self.default_vessel_type = default_vessel_type

    def get_marine_weather(self, point: Coordinates) -> MarineWeatherReport:
        return self.estimator.estimate_report(point)

    def get_optimal_routes(
        self,
        origin: Coordinates,
        dest: Coordinates,
        vessel_type: Optional[str] = None,
    ) -> List[Route]:
        return self.engine.optimize(origin, dest, vessel_type or self.default_vessel_type)

    def get_maritime_alerts(self, point: Coordinates) -> List[MaritimeAlert]:
        if self.alerts is None:
            return []
        try:
            return self.alerts.fetch_alerts(point)
        except Exception as e:
            log.warning("Alert source failed at (%.4f, %.4f): %s", point.lat, point.lon, e)
            return []


def build_service(
    provider: str = "live",
    seed: Optional[int] = None,
    cfg: Optional[Settings] = None,
    clock: Callable[[], float] = time.time,
) -> MarineWeatherService:
    """
    Build a service from a provider token:
      "live" -> OpenWeatherMap + NWS text forecasts
      "mock" -> deterministic offline sources
    """
    cfg = cfg or default_settings
    token = (provider or "live").strip().lower()

    # Local imports to keep provider modules optional at import time
    from marine_route.providers.alerts import SimulatedAlertSource

    if token == "live":
        from marine_route.providers.nws import NWSForecastSource
        from marine_route.providers.openweather import OpenWeatherSource

        weather = OpenWeatherSource(
            api_key=cfg.openweather_api_key,
            base_url=cfg.openweather_base_url,
            user_agent=cfg.user_agent,
            timeout_s=cfg.http_timeout_s,
        )
        forecast = NWSForecastSource(
            base_url=cfg.nws_base_url,
            user_agent=cfg.user_agent,
            timeout_s=cfg.http_timeout_s,
        )
    elif token == "mock":
        from marine_route.providers.mock import MockForecastSource, MockWeatherSource

        weather = MockWeatherSource(clock=clock)
        forecast = MockForecastSource()
    else:
        raise ValueError(f"Unknown provider token: '{provider}' (supported: live, mock)")

    # Separate generators so alert draws never shift simulated marine values
    estimator = MarineConditionsEstimator(
        weather,
        forecast,
        rng=random.Random(seed),
        clock=clock,
        fallback_temp_c=cfg.fallback_temperature_c,
    )
    alerts = SimulatedAlertSource(rng=random.Random(None if seed is None else seed + 1), clock=clock)
    return MarineWeatherService(
        estimator,
        alerts=alerts,
        default_vessel_type=cfg.default_vessel_type,
        default_speed_kt=cfg.default_base_speed_kt,
    )
