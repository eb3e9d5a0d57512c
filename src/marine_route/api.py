"""FastAPI REST backend for marine conditions and route optimization."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from marine_route.config import settings
from marine_route.core.models import Coordinates, MaritimeAlert, MarineWeatherReport, Route
from marine_route.service import MarineWeatherService, build_service

log = logging.getLogger(__name__)

app = FastAPI(title="Marine Route", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Module-level service singletons (one per provider token)
# ---------------------------------------------------------------------------
_service_cache: Dict[str, MarineWeatherService] = {}


def get_service(provider: str = "live") -> MarineWeatherService:
    if provider not in _service_cache:
        _service_cache[provider] = build_service(provider)
    return _service_cache[provider]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
def health() -> Dict[str, Any]:
    return {"status": "ok", "primary_configured": bool(settings.openweather_api_key)}


@app.get("/marine-weather", response_model=MarineWeatherReport)
def marine_weather(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lon: float = Query(..., ge=-180.0, le=180.0),
    provider: str = "live",
):
    try:
        svc = get_service(provider)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return svc.get_marine_weather(Coordinates(lat=lat, lon=lon))


@app.get("/routes/optimal", response_model=List[Route])
def optimal_routes(
    from_lat: float = Query(..., ge=-90.0, le=90.0),
    from_lon: float = Query(..., ge=-180.0, le=180.0),
    to_lat: float = Query(..., ge=-90.0, le=90.0),
    to_lon: float = Query(..., ge=-180.0, le=180.0),
    vessel_type: str = "cargo",
    provider: str = "live",
):
    try:
        svc = get_service(provider)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return svc.get_optimal_routes(
        Coordinates(lat=from_lat, lon=from_lon),
        Coordinates(lat=to_lat, lon=to_lon),
        vessel_type,
    )


@app.get("/alerts", response_model=List[MaritimeAlert])
def alerts(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lon: float = Query(..., ge=-180.0, le=180.0),
    provider: str = "live",
):
    try:
        svc = get_service(provider)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return svc.get_maritime_alerts(Coordinates(lat=lat, lon=lon))
