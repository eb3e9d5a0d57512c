from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from marine_route.core.models import AtmosphericSample, Coordinates, ForecastDocument, MaritimeAlert


class WeatherSource(ABC):
    """Primary atmospheric conditions at a point."""

    @abstractmethod
    def fetch_current(self, point: Coordinates) -> AtmosphericSample:
        """Raises ``UpstreamUnavailable`` on network/HTTP/payload errors."""
        raise NotImplementedError


class MarineForecastSource(ABC):
    """Secondary free-text marine forecast. Best effort: never raises."""

    @abstractmethod
    def fetch_forecast_text(self, point: Coordinates) -> Optional[ForecastDocument]:
        raise NotImplementedError


class AlertSource(ABC):
    @abstractmethod
    def fetch_alerts(self, point: Coordinates) -> List[MaritimeAlert]:
        raise NotImplementedError
