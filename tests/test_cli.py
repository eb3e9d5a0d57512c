"""Tests for the command line entry points (offline provider only)."""

import argparse
import json

import pytest

from marine_route import cli
from marine_route.tools import make_map


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestParsePoint:
    def test_valid(self):
        p = cli._parse_point("51.0,4.0")
        assert (p.lat, p.lon) == (51.0, 4.0)

    @pytest.mark.parametrize("text", ["51.0", "abc,4", "95,4", "10,200"])
    def test_invalid(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            cli._parse_point(text)


class TestRoutesCommand:
    def test_writes_last_run(self, workdir, capsys):
        cli.main(["--provider", "mock", "--seed", "1", "routes", "--from", "51.0,4.0", "--to", "52.0,4.5"])

        saved = json.loads((workdir / "trips" / "last_run_routes.json").read_text(encoding="utf-8"))
        assert sorted(r["name"] for r in saved) == ["Coastal Route", "Direct Route", "Weather Optimized Route"]
        assert "Saved:" in capsys.readouterr().out

    def test_custom_output_and_vessel(self, workdir):
        out = workdir / "runs" / "tanker.json"
        cli.main([
            "--provider", "mock", "routes",
            "--from", "51.0,4.0", "--to", "52.0,4.5",
            "--vessel", "tanker", "--out", str(out),
        ])
        assert len(json.loads(out.read_text(encoding="utf-8"))) == 3

    def test_bad_point_exits(self, workdir):
        with pytest.raises(SystemExit):
            cli.main(["--provider", "mock", "routes", "--from", "north", "--to", "52.0,4.5"])

    def test_unknown_provider(self, workdir):
        with pytest.raises(ValueError):
            cli.main(["--provider", "nope", "routes", "--from", "51,4", "--to", "52,4.5"])


class TestWeatherCommand:
    def test_prints_table(self, workdir, capsys):
        cli.main(["--provider", "mock", "--seed", "2", "weather", "--lat", "51.0", "--lon", "4.0"])
        out = capsys.readouterr().out
        assert "Wave height" in out
        assert "forecast_text" in out


class TestMakeMap:
    def test_renders_last_run(self, workdir):
        cli.main(["--provider", "mock", "--seed", "1", "routes", "--from", "51.0,4.0", "--to", "52.0,4.5"])
        make_map.main([])

        html = (workdir / "trips" / "last_run_map.html").read_text(encoding="utf-8")
        assert "L.polyline" in html
        assert "Coastal Route" in html

    def test_empty_routes_file(self, workdir):
        routes = workdir / "empty.json"
        routes.write_text("[]", encoding="utf-8")
        with pytest.raises(SystemExit):
            make_map.main(["--routes", str(routes), "--out", str(workdir / "map.html")])

    def test_render_html_colors_by_risk(self):
        html = make_map.render_html([
            {"id": "route-1", "name": "Direct Route", "weather_risk": "high",
             "waypoints": [{"lat": 0, "lon": 0}, {"lat": 1, "lon": 1}]},
        ])
        assert make_map.RISK_COLOR["high"] in html
