"""Tests for the REST endpoints."""

import pytest
from fastapi.testclient import TestClient

from conftest import FIXED_NOW_S, FailingWeatherSource, StubWeatherSource, calm_sample
from marine_route import api
from marine_route.providers.alerts import SimulatedAlertSource
from marine_route.service import MarineWeatherService, build_service


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(api, "_service_cache", {})
    api._service_cache["live"] = build_service("mock", seed=4, clock=lambda: FIXED_NOW_S)
    return TestClient(api.app)


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"
        assert "primary_configured" in resp.json()


class TestMarineWeather:
    def test_report_shape(self, client):
        resp = client.get("/marine-weather", params={"lat": 51.0, "lon": 4.0})
        assert resp.status_code == 200
        body = resp.json()
        assert body["point"] == {"lat": 51.0, "lon": 4.0}
        marine = body["marine"]
        for field in (
            "wave_height", "wave_direction", "wave_period",
            "swell_height", "swell_direction", "swell_period",
            "sea_surface_temperature", "visibility", "sea_state",
            "tide_height", "current_speed", "current_direction",
        ):
            assert field in marine
        assert body["wave_source"] == "forecast_text"

    @pytest.mark.parametrize("lat,lon", [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.5), (0.0, -181.0)])
    def test_out_of_range_rejected(self, client, lat, lon):
        assert client.get("/marine-weather", params={"lat": lat, "lon": lon}).status_code == 422

    def test_unknown_provider(self, client):
        resp = client.get("/marine-weather", params={"lat": 1.0, "lon": 1.0, "provider": "carrier-pigeon"})
        assert resp.status_code == 400


class TestRoutes:
    PARAMS = {"from_lat": 51.0, "from_lon": 4.0, "to_lat": 52.0, "to_lon": 4.5}

    def test_three_ranked_routes(self, client):
        resp = client.get("/routes/optimal", params={**self.PARAMS, "vessel_type": "passenger"})
        assert resp.status_code == 200
        routes = resp.json()
        assert sorted(r["id"] for r in routes) == ["route-1", "route-2", "route-3"]
        assert all(len(r["waypoints"]) >= 2 for r in routes)
        assert all(50 <= r["fuel_efficiency"] <= 100 for r in routes)

    def test_fallback_when_primary_down(self, client, make_estimator):
        api._service_cache["live"] = MarineWeatherService(make_estimator(FailingWeatherSource()))
        routes = client.get("/routes/optimal", params=self.PARAMS).json()
        assert [r["weather_risk"] for r in routes] == ["medium", "low", "low"]

    def test_missing_param(self, client):
        params = dict(self.PARAMS)
        params.pop("to_lon")
        assert client.get("/routes/optimal", params=params).status_code == 422

    def test_out_of_range_destination(self, client):
        assert client.get("/routes/optimal", params={**self.PARAMS, "to_lat": 95}).status_code == 422


class TestAlerts:
    def test_alerts_are_a_list(self, client):
        resp = client.get("/alerts", params={"lat": 51.0, "lon": 4.0})
        assert resp.status_code == 200
        assert isinstance(resp.json(), list)

    def test_alert_payload(self, client, make_estimator):
        class AlwaysDraws:
            def random(self):
                return 0.99

        api._service_cache["live"] = MarineWeatherService(
            make_estimator(StubWeatherSource(calm_sample())),
            alerts=SimulatedAlertSource(rng=AlwaysDraws(), clock=lambda: FIXED_NOW_S),
        )
        alerts = client.get("/alerts", params={"lat": 51.0, "lon": 4.0}).json()
        assert [a["title"] for a in alerts] == ["Small Craft Advisory", "Dense Fog Warning"]
        assert alerts[0]["valid_from"].endswith("Z")
