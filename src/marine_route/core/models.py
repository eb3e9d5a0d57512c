from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

RiskLevel = Literal["low", "medium", "high"]
WaveSource = Literal["forecast_text", "heuristic", "simulated"]


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class AtmosphericSample(BaseModel):
    """Raw weather snapshot as reported by the primary source (metric units)."""

    model_config = ConfigDict(frozen=True)

    temperature_c: float
    wind_speed_ms: float = Field(default=0.0, ge=0.0)
    wind_direction_deg: Optional[float] = None
    visibility_m: Optional[float] = Field(default=None, ge=0.0)

    # e.g. ("Clouds",) or ("Rain", "Mist")
    conditions: Tuple[str, ...] = ()

    location_name: Optional[str] = None
    observed_at: Optional[int] = None  # epoch seconds


class ForecastPeriod(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    detailed_forecast: str = ""


class ForecastDocument(BaseModel):
    """Free-text marine forecast from the secondary source."""

    model_config = ConfigDict(frozen=True)

    periods: Tuple[ForecastPeriod, ...] = ()


class MarineConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    wave_height: float = Field(ge=0.0)  # m
    wave_direction: float = Field(ge=0.0, lt=360.0)
    wave_period: float = Field(ge=2.0)  # s
    swell_height: float = Field(ge=0.0)
    swell_direction: float = Field(ge=0.0, lt=360.0)
    swell_period: float = Field(ge=2.0)
    sea_surface_temperature: float  # °C
    visibility: float = Field(ge=0.0)  # km
    sea_state: int = Field(ge=0, le=6)
    tide_height: float  # m, signed
    current_speed: float = Field(ge=0.0)  # kt
    current_direction: float = Field(ge=0.0, lt=360.0)


class MarineWeatherReport(BaseModel):
    """Atmospheric sample augmented with the derived marine record."""

    model_config = ConfigDict(frozen=True)

    point: Coordinates
    sample: Optional[AtmosphericSample] = None
    marine: MarineConditions
    simulated: bool = False
    wave_source: WaveSource = "heuristic"


class Route(BaseModel):
    """
    A candidate route. ``estimated_duration`` is 0 only when origin and
    destination coincide (zero distance); otherwise it is positive.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    waypoints: List[Coordinates] = Field(min_length=2)
    distance: float = Field(ge=0.0)  # nm
    estimated_duration: float = Field(ge=0.0)  # hours
    weather_risk: RiskLevel
    fuel_efficiency: float = Field(ge=50.0, le=100.0)


class VesselProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    ship_type: str
    base_speed_kt: float = Field(gt=0.0)


DEFAULT_BASE_SPEED_KT = 15.0

VESSEL_PROFILES: Dict[str, VesselProfile] = {
    t: VesselProfile(ship_type=t, base_speed_kt=kt)
    for t, kt in (
        ("cargo", 14.0),
        ("tanker", 13.0),
        ("container", 18.0),
        ("passenger", 20.0),
        ("fishing", 10.0),
        ("naval", 25.0),
    )
}


def vessel_profile(ship_type: Optional[str], default_kt: float = DEFAULT_BASE_SPEED_KT) -> VesselProfile:
    """Look up a vessel profile; unknown types cruise at the default speed."""
    key = (ship_type or "cargo").strip().lower()
    prof = VESSEL_PROFILES.get(key)
    if prof is None:
        return VesselProfile(ship_type=key or "cargo", base_speed_kt=default_kt)
    return prof


class MaritimeAlert(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: Literal["storm", "fog", "ice", "navigation", "security"]
    severity: Literal["low", "medium", "high", "critical"]
    title: str
    description: str
    area: List[Coordinates] = []
    valid_from: str
    valid_until: str
    issued_by: str
