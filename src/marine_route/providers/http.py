from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from marine_route.core.errors import UpstreamUnavailable


@dataclass
class HTTPClient:
    """Thin requests.Session wrapper. One attempt per call; no retries."""

    user_agent: str
    source: str = "http"
    timeout_s: int = 25

    def __post_init__(self) -> None:
        self.s = requests.Session()
        self.s.headers.update(
            {
                "User-Agent": self.user_agent,
                "Accept": "application/geo+json, application/json;q=0.9, */*;q=0.8",
            }
        )

    def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        timeout_s: Optional[int] = None,
    ) -> Dict[str, Any]:
        timeout = timeout_s if timeout_s is not None else self.timeout_s
        try:
            r = self.s.get(url, params=params, timeout=timeout)
            r.raise_for_status()
            return r.json()
        except requests.HTTPError as e:
            status = getattr(e.response, "status_code", "err")
            raise UpstreamUnavailable(self.source, f"HTTP {status}") from e
        except requests.RequestException as e:
            raise UpstreamUnavailable(self.source, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise UpstreamUnavailable(self.source, "response was not JSON") from e
