"""Shared pytest fixtures: in-memory weather/forecast sources, fixed clock, seeded rng."""

import random
import threading
from typing import Dict, Optional

import pytest

from marine_route.core.errors import UpstreamUnavailable
from marine_route.core.estimator import MarineConditionsEstimator
from marine_route.core.models import AtmosphericSample, Coordinates, ForecastDocument, ForecastPeriod
from marine_route.providers.base import MarineForecastSource, WeatherSource

FIXED_NOW_S = 1_700_000_000.0


class StubWeatherSource(WeatherSource):
    """Returns the same sample everywhere unless a per-point override is given."""

    def __init__(self, sample: AtmosphericSample, overrides: Optional[Dict[tuple, object]] = None):
        self.sample = sample
        self.overrides = overrides or {}
        self.calls = []
        self._lock = threading.Lock()

    def fetch_current(self, point: Coordinates) -> AtmosphericSample:
        with self._lock:
            self.calls.append(point)
        value = self.overrides.get((round(point.lat, 4), round(point.lon, 4)), self.sample)
        if isinstance(value, Exception):
            raise value
        return value


class FailingWeatherSource(WeatherSource):
    def __init__(self):
        self.calls = 0

    def fetch_current(self, point: Coordinates) -> AtmosphericSample:
        self.calls += 1
        raise UpstreamUnavailable("openweather", "HTTP 503")


class StubForecastSource(MarineForecastSource):
    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls = 0

    def fetch_forecast_text(self, point: Coordinates) -> Optional[ForecastDocument]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        if self.text is None:
            return None
        return ForecastDocument(periods=(ForecastPeriod(name="Today", detailed_forecast=self.text),))


def calm_sample(**overrides) -> AtmosphericSample:
    data = dict(
        temperature_c=12.0,
        wind_speed_ms=3.0,
        wind_direction_deg=200.0,
        visibility_m=None,
        conditions=("Clear",),
    )
    data.update(overrides)
    return AtmosphericSample(**data)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW_S


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def make_estimator(fixed_clock):
    def _make(weather: WeatherSource, forecast: Optional[MarineForecastSource] = None, seed: int = 42):
        return MarineConditionsEstimator(weather, forecast, rng=random.Random(seed), clock=fixed_clock)

    return _make


@pytest.fixture
def antwerp():
    return Coordinates(lat=51.0, lon=4.0)


@pytest.fixture
def rotterdam_offshore():
    return Coordinates(lat=52.0, lon=4.5)
