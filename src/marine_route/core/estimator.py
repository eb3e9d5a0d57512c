"""
Marine conditions estimator.

Primary (atmospheric) source -> best-effort secondary forecast text -> heuristic
fusion. Any primary failure degrades to a fully simulated record, so callers
always get every field populated.
"""
from __future__ import annotations

import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from marine_route.core import heuristics as h
from marine_route.core.concurrency import settle
from marine_route.core.errors import UpstreamUnavailable
from marine_route.core.models import (
    AtmosphericSample,
    Coordinates,
    ForecastDocument,
    MarineConditions,
    MarineWeatherReport,
)
from marine_route.providers.base import MarineForecastSource, WeatherSource

log = logging.getLogger(__name__)


class MarineConditionsEstimator:
    def __init__(
        self,
        weather: WeatherSource,
        forecast: Optional[MarineForecastSource] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
        fallback_temp_c: float = 15.0,
    ):
        self.weather = weather
        self.forecast = forecast
        self.rng = rng or random.Random()
        self.clock = clock
        self.fallback_temp_c = fallback_temp_c

    # ---------- Public API ----------

    def estimate(self, point: Coordinates) -> MarineConditions:
        return self.estimate_report(point).marine

    def estimate_report(self, point: Coordinates) -> MarineWeatherReport:
        pool: Optional[ThreadPoolExecutor] = None
        forecast_future = None
        if self.forecast is not None:
            pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="marine-forecast")
            forecast_future = pool.submit(self.forecast.fetch_forecast_text, point)

        try:
            try:
                sample = self.weather.fetch_current(point)
            except UpstreamUnavailable as e:
                log.warning("Primary weather unavailable at (%.4f, %.4f), simulating: %s", point.lat, point.lon, e)
                return self._simulated(point)
            except Exception:
                log.exception("Primary weather failed at (%.4f, %.4f), simulating", point.lat, point.lon)
                return self._simulated(point)

            doc: Optional[ForecastDocument] = None
            if forecast_future is not None:
                outcome = settle(forecast_future)
                if outcome.ok:
                    doc = outcome.value
                else:
                    log.debug("Secondary forecast rejected at (%.4f, %.4f): %r", point.lat, point.lon, outcome.error)

            try:
                return self._fused(point, sample, doc)
            except Exception:
                log.exception("Marine fusion failed at (%.4f, %.4f), simulating", point.lat, point.lon)
                return self._simulated(point, sample)
        finally:
            if pool is not None:
                # Never wait on the secondary request once we have an answer
                pool.shutdown(wait=False, cancel_futures=True)

    # ---------- Fusion ----------

    def _fused(
        self,
        point: Coordinates,
        sample: AtmosphericSample,
        doc: Optional[ForecastDocument],
    ) -> MarineWeatherReport:
        wind_ms = sample.wind_speed_ms
        wind_dir = sample.wind_direction_deg

        est_wave = h.estimate_wave_height(wind_ms)
        period = h.wave_period(est_wave)
        swell_height, swell_period, swell_dir = h.swell_from_wind_sea(est_wave, period, wind_dir)

        text_wave = h.extract_wave_height(doc)
        if text_wave is not None and text_wave <= 0:
            # "Waves 0 ft" is no usable reading; keep the heuristic height
            text_wave = None
        wave_height = text_wave if text_wave is not None else est_wave

        def direction() -> float:
            return wind_dir % 360.0 if wind_dir is not None else h.random_direction(self.rng)

        marine = MarineConditions(
            wave_height=wave_height,
            wave_direction=direction(),
            wave_period=period,
            swell_height=swell_height,
            swell_direction=swell_dir,
            swell_period=swell_period,
            sea_surface_temperature=h.sea_surface_temperature(sample.temperature_c, point.lat),
            visibility=h.visibility_km(sample.visibility_m, sample.conditions),
            sea_state=h.sea_state(h.beaufort_from_ms(wind_ms)),
            tide_height=h.tide_height(point.lat, point.lon, self.clock() * 1000.0),
            current_speed=h.current_speed(wind_ms, point.lat),
            current_direction=direction(),
        )
        return MarineWeatherReport(
            point=point,
            sample=sample,
            marine=marine,
            simulated=False,
            wave_source="forecast_text" if text_wave is not None else "heuristic",
        )

    # ---------- Fallback ----------

    def _simulated(self, point: Coordinates, partial: Optional[AtmosphericSample] = None) -> MarineWeatherReport:
        marine = h.simulate_marine_conditions(
            self.rng,
            now_s=self.clock(),
            air_temp_c=partial.temperature_c if partial is not None else None,
            fallback_temp_c=self.fallback_temp_c,
        )
        return MarineWeatherReport(
            point=point,
            sample=partial,
            marine=marine,
            simulated=True,
            wave_source="simulated",
        )
