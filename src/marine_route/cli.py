from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from marine_route.config import settings
from marine_route.core.models import Coordinates
from marine_route.service import build_service

RISK_STYLE = {"low": "green", "medium": "yellow", "high": "red"}


def _parse_point(text: str) -> Coordinates:
    """'51.0,4.0' -> Coordinates"""
    try:
        lat_s, lon_s = text.split(",", 1)
        return Coordinates(lat=float(lat_s), lon=float(lon_s))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected LAT,LON within range, got '{text}'") from e


def _save_json(path: Path, obj) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2), encoding="utf-8")


def _cmd_weather(args, console: Console) -> None:
    svc = build_service(args.provider, seed=args.seed)
    report = svc.get_marine_weather(Coordinates(lat=args.lat, lon=args.lon))
    m = report.marine

    table = Table(title=f"Marine conditions at {args.lat:.4f}, {args.lon:.4f}")
    table.add_column("Field")
    table.add_column("Value", justify="right")

    rows = [
        ("Wave height (m)", f"{m.wave_height:.2f}"),
        ("Wave direction (°)", f"{m.wave_direction:.0f}"),
        ("Wave period (s)", f"{m.wave_period:.1f}"),
        ("Swell height (m)", f"{m.swell_height:.2f}"),
        ("Swell direction (°)", f"{m.swell_direction:.0f}"),
        ("Swell period (s)", f"{m.swell_period:.1f}"),
        ("Sea surface temp (°C)", f"{m.sea_surface_temperature:.1f}"),
        ("Visibility (km)", f"{m.visibility:.1f}"),
        ("Sea state", str(m.sea_state)),
        ("Tide height (m)", f"{m.tide_height:+.2f}"),
        ("Current (kt)", f"{m.current_speed:.2f}"),
        ("Current direction (°)", f"{m.current_direction:.0f}"),
        ("Wave source", report.wave_source),
    ]
    for name, val in rows:
        table.add_row(name, val)
    console.print(table)

    if report.simulated:
        console.print("[yellow]Primary weather unavailable; values are simulated.[/yellow]")


def _cmd_routes(args, console: Console) -> None:
    svc = build_service(args.provider, seed=args.seed)
    routes = svc.get_optimal_routes(args.origin, args.dest, args.vessel)

    table = Table(title=f"Routes for {args.vessel}")
    table.add_column("#")
    table.add_column("Route")
    table.add_column("Distance nm", justify="right")
    table.add_column("Duration h", justify="right")
    table.add_column("Risk")
    table.add_column("Fuel %", justify="right")
    table.add_column("Waypoints", justify="right")

    for i, r in enumerate(routes, start=1):
        style = RISK_STYLE.get(r.weather_risk, "")
        table.add_row(
            str(i),
            r.name,
            f"{r.distance:.1f}",
            f"{r.estimated_duration:.1f}",
            f"[{style}]{r.weather_risk}[/{style}]" if style else r.weather_risk,
            f"{r.fuel_efficiency:.0f}",
            str(len(r.waypoints)),
        )
    console.print(table)

    # save last run
    out = Path(args.out)
    _save_json(out, [r.model_dump() for r in routes])
    console.print(f"Saved: {out.resolve()}")


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="marine-route")
    ap.add_argument("--provider", default="live", help="live | mock")
    ap.add_argument("--seed", type=int, default=None, help="Seed for simulated values")
    ap.add_argument("--log-level", default=settings.log_level)
    sub = ap.add_subparsers(dest="command", required=True)

    w = sub.add_parser("weather", help="Estimate marine conditions at a point")
    w.add_argument("--lat", type=float, required=True)
    w.add_argument("--lon", type=float, required=True)

    r = sub.add_parser("routes", help="Rank candidate routes between two points")
    r.add_argument("--from", dest="origin", type=_parse_point, required=True, help="LAT,LON")
    r.add_argument("--to", dest="dest", type=_parse_point, required=True, help="LAT,LON")
    r.add_argument("--vessel", default=settings.default_vessel_type)
    r.add_argument("--out", default="trips/last_run_routes.json")

    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    )

    console = Console()
    if args.command == "weather":
        _cmd_weather(args, console)
    else:
        _cmd_routes(args, console)


if __name__ == "__main__":
    main()
