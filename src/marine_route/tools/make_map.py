from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional


RISK_COLOR = {
    "low": "#2ecc71",
    "medium": "#f1c40f",
    "high": "#e74c3c",
}


def render_html(routes: list) -> str:
    lines = []
    for rank, r in enumerate(routes, start=1):
        lines.append(
            {
                "latlngs": [[p["lat"], p["lon"]] for p in r.get("waypoints", [])],
                "color": RISK_COLOR.get(r.get("weather_risk"), "#3498db"),
                "name": r.get("name", r.get("id", "")),
                "rank": rank,
                "risk": r.get("weather_risk"),
                "distance": r.get("distance"),
                "duration": r.get("estimated_duration"),
                "fuel": r.get("fuel_efficiency"),
            }
        )

    return f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <title>Marine Route – Last Run Map</title>
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <link rel="stylesheet" href="https://unpkg.com/leaflet@1.9.4/dist/leaflet.css" />
  <style>
    body {{ margin: 0; font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; }}
    #map {{ height: 100vh; width: 100vw; }}
  </style>
</head>
<body>
<div id="map"></div>
<script src="https://unpkg.com/leaflet@1.9.4/dist/leaflet.js"></script>
<script>
  const routes = {json.dumps(lines)};

  const map = L.map('map');

  L.tileLayer('https://{{s}}.tile.openstreetmap.org/{{z}}/{{x}}/{{y}}.png', {{
    maxZoom: 18,
    attribution: '&copy; OpenStreetMap contributors'
  }}).addTo(map);

  const all = [];
  routes.forEach((r) => {{
    const popup = `
      <b>#${{r.rank}} ${{r.name}}</b><br/>
      <b>Risk:</b> ${{r.risk}}<br/>
      <b>Distance:</b> ${{Number(r.distance).toFixed(1)}} nm<br/>
      <b>Duration:</b> ${{Number(r.duration).toFixed(1)}} h<br/>
      <b>Fuel efficiency:</b> ${{Number(r.fuel).toFixed(0)}}%
    `;
    L.polyline(r.latlngs, {{ color: r.color, weight: r.rank === 1 ? 7 : 4, opacity: 0.9 }})
      .addTo(map).bindPopup(popup);
    r.latlngs.forEach((p) => {{ L.circleMarker(p, {{ radius: 4 }}).addTo(map); all.push(p); }});
  }});

  map.fitBounds(L.latLngBounds(all).pad(0.2));
</script>
</body>
</html>
"""


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="marine-route-map")
    ap.add_argument("--routes", default="trips/last_run_routes.json")
    ap.add_argument("--out", default="trips/last_run_map.html")
    args = ap.parse_args(argv)

    routes_path = Path(args.routes)
    out_path = Path(args.out)

    routes = json.loads(routes_path.read_text(encoding="utf-8"))
    if not routes:
        raise SystemExit(f"No routes found in {routes_path}")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_html(routes), encoding="utf-8")
    print(f"Wrote: {out_path.resolve()}")


if __name__ == "__main__":
    main()
