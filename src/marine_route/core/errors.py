"""Error taxonomy for the estimator and route engine.

None of these cross the public service boundary: they are raised by sources and
absorbed into degraded-but-valid output.
"""
from __future__ import annotations

from typing import Sequence


class MarineRouteError(Exception):
    """Base class for marine-route errors."""


class UpstreamUnavailable(MarineRouteError):
    """Primary/secondary source unreachable, non-2xx, or returned an unusable payload."""

    def __init__(self, source: str, detail: str = ""):
        self.source = source
        self.detail = detail
        msg = f"{source} unavailable"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class ParseFailure(MarineRouteError):
    """Secondary forecast present but not in the expected shape."""


class PartialDataset(MarineRouteError):
    """One or more route sample points could not be fetched."""

    def __init__(self, missing: Sequence[str]):
        self.missing = tuple(missing)
        super().__init__(f"missing samples: {', '.join(self.missing) or 'none'}")
