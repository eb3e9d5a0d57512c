from __future__ import annotations

import math
import time
from typing import Callable, Optional

from marine_route.core.models import AtmosphericSample, Coordinates, ForecastDocument, ForecastPeriod
from marine_route.providers.base import MarineForecastSource, WeatherSource


class MockWeatherSource(WeatherSource):
    """
    Deterministic fake data so the pipeline runs end-to-end without APIs.
    Produces slightly different conditions across time + geography.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock

    def fetch_current(self, point: Coordinates) -> AtmosphericSample:
        # Time-driven "weather" signal on a 6h cycle
        phase = (self.clock() % 21600.0) / 21600.0
        wiggle = math.sin(phase * math.tau)

        # Location-driven variation
        geo = math.sin((point.lat + point.lon) * 10)

        wind = 6 + 4 * max(0.0, wiggle) + 1.5 * geo
        temp = 24 - 0.4 * abs(point.lat) + 2 * wiggle

        if wiggle > 0.6:
            conditions = ("Rain",)
        elif geo > 0.5:
            conditions = ("Clouds",)
        else:
            conditions = ("Clear",)

        return AtmosphericSample(
            temperature_c=float(round(temp, 2)),
            wind_speed_ms=float(round(max(0.0, wind), 2)),
            wind_direction_deg=float(round((220 + 40 * wiggle + 20 * geo) % 360, 1)),
            visibility_m=None,
            conditions=conditions,
            location_name="mock",
            observed_at=int(self.clock()),
        )


class MockForecastSource(MarineForecastSource):
    """Canned forecast text; ``None`` text means "no secondary data"."""

    def __init__(self, text: Optional[str] = "Tonight: Northwest wind 10 to 15 kt. Waves 2 to 3 feet."):
        self.text = text

    def fetch_forecast_text(self, point: Coordinates) -> Optional[ForecastDocument]:
        if self.text is None:
            return None
        return ForecastDocument(periods=(ForecastPeriod(name="Tonight", detailed_forecast=self.text),))
