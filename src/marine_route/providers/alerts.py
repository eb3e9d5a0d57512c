from __future__ import annotations

import random
import time
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from marine_route.core.geodesy import offset
from marine_route.core.models import Coordinates, MaritimeAlert
from marine_route.providers.base import AlertSource


def _iso(ts: datetime) -> str:
    return ts.isoformat().replace("+00:00", "Z")


class SimulatedAlertSource(AlertSource):
    """
    Stochastic hazard notices around a point:
      - small craft advisory (storm) with probability 0.3
      - dense fog warning with probability 0.2
    """

    def __init__(self, rng: Optional[random.Random] = None, clock: Callable[[], float] = time.time):
        self.rng = rng or random.Random()
        self.clock = clock

    def fetch_alerts(self, point: Coordinates) -> List[MaritimeAlert]:
        now = datetime.fromtimestamp(self.clock(), tz=timezone.utc)
        alerts: List[MaritimeAlert] = []

        if self.rng.random() > 0.7:
            alerts.append(
                MaritimeAlert(
                    id="alert-1",
                    type="storm",
                    severity="medium",
                    title="Small Craft Advisory",
                    description="Winds 15-25 knots with gusts to 30 knots expected",
                    area=[offset(point, -1.0, -1.0), offset(point, 1.0, 1.0)],
                    valid_from=_iso(now),
                    valid_until=_iso(now + timedelta(hours=24)),
                    issued_by="Maritime Weather Service",
                )
            )

        if self.rng.random() > 0.8:
            alerts.append(
                MaritimeAlert(
                    id="alert-2",
                    type="fog",
                    severity="low",
                    title="Dense Fog Warning",
                    description="Visibility reduced to less than 1 nautical mile",
                    area=[offset(point, -0.5, -0.5), offset(point, 0.5, 0.5)],
                    valid_from=_iso(now),
                    valid_until=_iso(now + timedelta(hours=12)),
                    issued_by="Coast Guard",
                )
            )

        return alerts
