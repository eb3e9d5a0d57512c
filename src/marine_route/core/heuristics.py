"""
Marine heuristics: derive sea conditions from atmospheric fields.

Approximate stand-ins, used whenever authoritative marine
observations are unavailable. All angles are degrees unless stated.
"""
from __future__ import annotations

import math
import random
import re
from typing import Iterable, Optional

from marine_route.core.models import ForecastDocument, MarineConditions

MS_TO_KNOTS = 1.944
FEET_TO_METERS = 0.3048

# Upper knot bound (exclusive) for Beaufort forces 0..11; >= 64 kt is force 12
BEAUFORT_KNOT_LIMITS = (1, 4, 7, 11, 16, 22, 28, 34, 41, 48, 56, 64)

TIDAL_PERIOD_MS = 12.42 * 60 * 60 * 1000


# ---------------------------------------------------------------------------
# Wind / sea state
# ---------------------------------------------------------------------------

def knots_to_beaufort(knots: float) -> int:
    for force, limit in enumerate(BEAUFORT_KNOT_LIMITS):
        if knots < limit:
            return force
    return 12


def beaufort_from_ms(wind_ms: float) -> int:
    return knots_to_beaufort(wind_ms * MS_TO_KNOTS)


def sea_state(beaufort: int) -> int:
    return max(0, min(6, beaufort // 2))


# ---------------------------------------------------------------------------
# Waves
# ---------------------------------------------------------------------------

def estimate_wave_height(wind_ms: float) -> float:
    """Pierson–Moskowitz-flavoured proxy (m)."""
    return max(0.1, (wind_ms / 3.6) ** 2 / 10)


def wave_period(wave_height_m: float) -> float:
    return max(2.0, 3.86 * math.sqrt(max(0.0, wave_height_m)))


def swell_from_wind_sea(wave_height_m: float, period_s: float, wind_dir_deg: Optional[float]):
    """Returns (swell_height_m, swell_period_s, swell_direction_deg)."""
    direction = ((wind_dir_deg or 0.0) + 15.0) % 360.0
    return wave_height_m * 0.7, period_s * 1.5, direction


# ---------------------------------------------------------------------------
# Temperature / visibility
# ---------------------------------------------------------------------------

def sea_surface_temperature(air_temp_c: float, lat: float) -> float:
    return air_temp_c + math.cos(math.radians(lat)) * 2 - 1


def visibility_km(visibility_m: Optional[float], conditions: Iterable[str] = ()) -> float:
    if visibility_m is not None:
        return visibility_m / 1000.0

    text = " ".join(c.lower() for c in conditions)
    if "fog" in text or "mist" in text:
        return 2.0
    if "rain" in text or "snow" in text:
        return 8.0
    if "cloud" in text:
        return 15.0
    return 25.0


# ---------------------------------------------------------------------------
# Tide / current
# ---------------------------------------------------------------------------

def tide_height(lat: float, lon: float, now_ms: float) -> float:
    """
    Synthetic semidiurnal tide (m). Deterministic in location and time;
    not a real tidal model.
    """
    amplitude = 2 + abs(math.sin(math.radians(lat)) * math.cos(math.radians(lon)))
    phase = (now_ms % TIDAL_PERIOD_MS) / TIDAL_PERIOD_MS * 2 * math.pi
    return math.sin(phase) * amplitude


def current_speed(wind_ms: float, lat: float) -> float:
    return max(0.1, wind_ms * 0.025 * (1 + abs(math.sin(math.radians(lat)))))


# ---------------------------------------------------------------------------
# Forecast text
# ---------------------------------------------------------------------------

# "Waves 3 to 5 feet", "waves 3-5 ft", "wave heights around 1.5 m", "seas and waves of 2 metres"
_WAVE_HEIGHT_RE = re.compile(
    r"\bwaves?\b[^.\d]*?(\d+(?:\.\d+)?)\s*(?:(?:to|-|–)\s*(\d+(?:\.\d+)?)\s*)?"
    r"(foot|feet|ft|meters?|metres?|m)\b",
    re.IGNORECASE,
)


def parse_wave_height_text(text: str) -> Optional[float]:
    """First wave height mentioned in a forecast sentence, in metres (low end of ranges)."""
    if not text or "wave" not in text.lower():
        return None
    m = _WAVE_HEIGHT_RE.search(text)
    if not m:
        return None
    height = float(m.group(1))
    if m.group(3).lower() in ("foot", "feet", "ft"):
        height *= FEET_TO_METERS
    return height


def extract_wave_height(doc: Optional[ForecastDocument]) -> Optional[float]:
    if doc is None:
        return None
    for period in doc.periods:
        h = parse_wave_height_text(period.detailed_forecast)
        if h is not None:
            return h
    return None


# ---------------------------------------------------------------------------
# Simulation
# ---------------------------------------------------------------------------

def random_direction(rng: random.Random) -> float:
    return rng.uniform(0.0, 360.0) % 360.0


def simulate_marine_conditions(
    rng: random.Random,
    now_s: float,
    air_temp_c: Optional[float],
    fallback_temp_c: float = 15.0,
) -> MarineConditions:
    """Fully synthesized record within the documented bounds."""
    base_temp = air_temp_c if air_temp_c is not None else fallback_temp_c
    return MarineConditions(
        wave_height=rng.uniform(0.5, 4.5),
        wave_direction=random_direction(rng),
        wave_period=rng.uniform(4.0, 12.0),
        swell_height=rng.uniform(0.3, 3.3),
        swell_direction=random_direction(rng),
        swell_period=rng.uniform(8.0, 18.0),
        sea_surface_temperature=base_temp + rng.uniform(-2.0, 2.0),
        visibility=rng.uniform(5.0, 25.0),
        sea_state=rng.randint(0, 5),
        tide_height=math.sin(now_s / 1000.0) * 2,
        current_speed=rng.uniform(0.0, 2.0),
        current_direction=random_direction(rng),
    )
