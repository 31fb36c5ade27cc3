from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from .errors import DecodeError, UpstreamRequestError

logger = logging.getLogger(__name__)


@dataclass
class HttpClient:
    """One requests session with a fixed deadline, shared by both lookups."""

    timeout: float = 10.0
    session: requests.Session = field(default_factory=requests.Session)

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        logger.debug("GET %s", _redact(url))
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            # str(e) repeats the raw request path and query, API keys included
            raise UpstreamRequestError(
                f"Error in request to {_redact(url)}: {type(e).__name__}"
            ) from e

        if not 200 <= response.status_code < 300:
            raise UpstreamRequestError(
                f"{_redact(url)} error {response.status_code}: {response.text}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"Error in JSON decoding: {e}") from e
        if not isinstance(payload, dict):
            raise DecodeError(
                f"Error in JSON decoding: expected an object, got {type(payload).__name__}"
            )
        return payload

    def close(self) -> None:
        self.session.close()


def _redact(url: str) -> str:
    # Dark Sky carries its key in the path: .../forecast/<key>/<lat>,<lon>
    parts = url.split("/")
    if "forecast" in parts:
        idx = parts.index("forecast") + 1
        if idx < len(parts) - 1:
            parts[idx] = "***"
    return "/".join(parts)
