from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from marine_route.core.concurrency import Settled, settle_all
from marine_route.core.errors import PartialDataset
from marine_route.core.estimator import MarineConditionsEstimator
from marine_route.core.geodesy import haversine_nm, midpoint, offset, path_distance_nm
from marine_route.core.models import DEFAULT_BASE_SPEED_KT, Coordinates, MarineWeatherReport, Route, vessel_profile
from marine_route.core.scoring import (
    PointSample,
    average_risk,
    average_wind,
    fuel_efficiency,
    mean_wind_direction,
    rank_routes,
    speed_adjustment,
    two_sample_risk,
)

log = logging.getLogger(__name__)

SAMPLE_NAMES = ("origin", "destination", "midpoint")

OPTIMIZED_OFFSET_DEG = 0.5
OPTIMIZED_SPEED_BONUS = 1.05
COASTAL_SPEED_FACTOR = 0.8

# Fallback set: (speed kt, risk, fuel efficiency, distance factor)
FALLBACK_DIRECT = (15.0, "medium", 85.0, 1.0)
FALLBACK_OPTIMIZED = (16.0, "low", 92.0, 1.1)
FALLBACK_COASTAL = (12.0, "low", 78.0, 1.2)


def _duration(distance_nm: float, speed_kt: float) -> float:
    return distance_nm / speed_kt if speed_kt > 0 else 0.0


def coastal_waypoints(origin: Coordinates, dest: Coordinates) -> List[Coordinates]:
    return [origin, offset(origin, 0.2, 0.3), offset(dest, -0.2, -0.3), dest]


def _as_sample(outcome: Settled[MarineWeatherReport]) -> Optional[PointSample]:
    if not outcome.ok or outcome.value is None:
        return None
    report = outcome.value
    if report.simulated or report.sample is None:
        return None
    return PointSample(
        wind_speed=report.sample.wind_speed_ms,
        wind_direction=report.sample.wind_direction_deg,
        wave_height=report.marine.wave_height,
    )


class RouteEngine:
    """
    Builds three candidate routes (direct, weather-optimized, coastal) from
    conditions sampled at origin, destination and midpoint, then ranks them.
    """

    def __init__(self, estimator: MarineConditionsEstimator, default_speed_kt: float = DEFAULT_BASE_SPEED_KT):
        self.estimator = estimator
        self.default_speed_kt = default_speed_kt

    # ---------- Public API ----------

    def optimize(self, origin: Coordinates, dest: Coordinates, vessel_type: str = "cargo") -> List[Route]:
        mid = midpoint(origin, dest)
        try:
            samples = self._gather(origin, dest, mid)
            if all(s is None for s in samples):
                log.warning("No weather data for any sample point; using fallback routes")
                return self.fallback_routes(origin, dest)

            o, d, m = samples
            base_speed = vessel_profile(vessel_type, self.default_speed_kt).base_speed_kt
            routes = [
                self._direct(origin, dest, o, d, base_speed),
                self._weather_optimized(origin, dest, mid, (o, m, d), base_speed),
                self._coastal(origin, dest, o, d, base_speed),
            ]
            return rank_routes(routes)
        except Exception:
            log.exception("Route generation failed; using fallback routes")
            return self.fallback_routes(origin, dest)

    # ---------- Sampling ----------

    def _gather(self, origin: Coordinates, dest: Coordinates, mid: Coordinates) -> List[Optional[PointSample]]:
        outcomes = settle_all(
            [
                lambda: self.estimator.estimate_report(origin),
                lambda: self.estimator.estimate_report(dest),
                lambda: self.estimator.estimate_report(mid),
            ]
        )
        samples = [_as_sample(o) for o in outcomes]

        missing = [name for name, s in zip(SAMPLE_NAMES, samples) if s is None]
        if missing:
            log.warning("%s", PartialDataset(missing))
        return samples

    # ---------- Variants ----------

    def _direct(
        self,
        origin: Coordinates,
        dest: Coordinates,
        o: Optional[PointSample],
        d: Optional[PointSample],
        base_speed: float,
    ) -> Route:
        distance = haversine_nm(origin, dest)
        risk = two_sample_risk(o, d)
        speed = base_speed * speed_adjustment(average_wind([o, d]), risk)
        return Route(
            id="route-1",
            name="Direct Route",
            waypoints=[origin, dest],
            distance=distance,
            estimated_duration=_duration(distance, speed),
            weather_risk=risk,
            fuel_efficiency=fuel_efficiency(speed, risk),
        )

    def _weather_optimized(
        self,
        origin: Coordinates,
        dest: Coordinates,
        mid: Coordinates,
        samples: Sequence[Optional[PointSample]],
        base_speed: float,
    ) -> Route:
        # Push the midpoint across the mean wind
        angle = math.radians(mean_wind_direction(samples) + 90.0)
        shifted = offset(mid, math.cos(angle) * OPTIMIZED_OFFSET_DEG, math.sin(angle) * OPTIMIZED_OFFSET_DEG)

        waypoints = [origin, shifted, dest]
        distance = path_distance_nm(waypoints)
        risk = average_risk(samples)
        speed = base_speed * OPTIMIZED_SPEED_BONUS * speed_adjustment(average_wind(samples), risk)
        return Route(
            id="route-2",
            name="Weather Optimized Route",
            waypoints=waypoints,
            distance=distance,
            estimated_duration=_duration(distance, speed),
            weather_risk=risk,
            fuel_efficiency=fuel_efficiency(speed, risk, bonus=1.05),
        )

    def _coastal(
        self,
        origin: Coordinates,
        dest: Coordinates,
        o: Optional[PointSample],
        d: Optional[PointSample],
        base_speed: float,
    ) -> Route:
        waypoints = coastal_waypoints(origin, dest)
        distance = path_distance_nm(waypoints)
        # Sheltered-water assumption: coastal is always reported low risk
        speed = base_speed * COASTAL_SPEED_FACTOR * speed_adjustment(average_wind([o, d]), "low")
        return Route(
            id="route-3",
            name="Coastal Route",
            waypoints=waypoints,
            distance=distance,
            estimated_duration=_duration(distance, speed),
            weather_risk="low",
            fuel_efficiency=fuel_efficiency(speed, "low", bonus=0.95),
        )

    # ---------- Fallback ----------

    @staticmethod
    def fallback_routes(origin: Coordinates, dest: Coordinates) -> List[Route]:
        """Static set from distance and preset speeds; same ids/shape as the live set."""
        distance = haversine_nm(origin, dest)
        mid = midpoint(origin, dest)

        variants = (
            ("route-1", "Direct Route", [origin, dest], FALLBACK_DIRECT),
            ("route-2", "Weather Optimized Route", [origin, offset(mid, 0.5, 0.0), dest], FALLBACK_OPTIMIZED),
            ("route-3", "Coastal Route", coastal_waypoints(origin, dest), FALLBACK_COASTAL),
        )
        return [
            Route(
                id=rid,
                name=name,
                waypoints=waypoints,
                distance=distance * factor,
                # Durations use the direct distance for every variant
                estimated_duration=_duration(distance, speed),
                weather_risk=risk,
                fuel_efficiency=eff,
            )
            for rid, name, waypoints, (speed, risk, eff, factor) in variants
        ]
