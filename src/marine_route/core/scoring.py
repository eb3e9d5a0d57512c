"""
Route scoring rules: weather risk, speed adjustment, fuel efficiency, rank score.

Wind speeds are in the primary source's units (m/s); wave heights in metres.
A ``None`` sample means that point could not be fetched.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from marine_route.core.models import RiskLevel, Route

# Defaults for a point whose data is unknown
UNKNOWN_WIND = 5.0
UNKNOWN_WAVE = 1.0
UNKNOWN_WIND_DIR = 180.0

RISK_PENALTY = {"low": 0.0, "medium": 10.0, "high": 20.0}


@dataclass(frozen=True)
class PointSample:
    """The slice of a marine report the route engine cares about."""

    wind_speed: float
    wind_direction: Optional[float]
    wave_height: float


def _risk_from(wind: float, wave: float) -> int:
    if wind > 15 or wave > 3:
        return 2
    if wind > 10 or wave > 2:
        return 1
    return 0


def two_sample_risk(a: Optional[PointSample], b: Optional[PointSample]) -> RiskLevel:
    if a is None or b is None:
        return "medium"
    level = _risk_from((a.wind_speed + b.wind_speed) / 2, (a.wave_height + b.wave_height) / 2)
    return ("low", "medium", "high")[level]


def average_risk(samples: Sequence[Optional[PointSample]]) -> RiskLevel:
    """Discretize each sample (0/1/2, unknown=1) and average."""
    if not samples:
        return "medium"
    scores = [1 if s is None else _risk_from(s.wind_speed, s.wave_height) for s in samples]
    avg = sum(scores) / len(scores)
    if avg >= 1.5:
        return "high"
    if avg >= 0.5:
        return "medium"
    return "low"


def average_wind(samples: Sequence[Optional[PointSample]]) -> float:
    if not samples:
        return UNKNOWN_WIND
    return sum(UNKNOWN_WIND if s is None else s.wind_speed for s in samples) / len(samples)


def mean_wind_direction(samples: Sequence[Optional[PointSample]]) -> float:
    """Arithmetic mean of directions; unknown directions count as 180."""
    if not samples:
        return UNKNOWN_WIND_DIR
    dirs = [
        s.wind_direction if s is not None and s.wind_direction is not None else UNKNOWN_WIND_DIR
        for s in samples
    ]
    return sum(dirs) / len(dirs)


def speed_adjustment(wind: float, risk: RiskLevel) -> float:
    adj = 1.0

    if wind > 20:
        adj *= 0.7
    elif wind > 15:
        adj *= 0.8
    elif wind > 10:
        adj *= 0.9
    elif wind < 5:
        adj *= 1.1

    if risk == "high":
        adj *= 0.8
    elif risk == "medium":
        adj *= 0.9
    else:
        adj *= 1.05

    return max(0.5, min(1.3, adj))


def fuel_efficiency(speed_kt: float, risk: RiskLevel, bonus: float = 1.0) -> float:
    eff = 85.0

    if 12 <= speed_kt <= 16:
        eff += 10
    elif speed_kt < 10 or speed_kt > 20:
        eff -= 15
    else:
        eff -= 5

    if risk == "low":
        eff += 5
    elif risk == "high":
        eff -= 10

    return max(50.0, min(100.0, eff * bonus))


def route_score(route: Route) -> float:
    score = route.fuel_efficiency - RISK_PENALTY[route.weather_risk]
    return score - min(15.0, route.estimated_duration * 0.5)


def rank_routes(routes: Sequence[Route]) -> list[Route]:
    """Best first; stable, so ties keep generation order."""
    return sorted(routes, key=route_score, reverse=True)
