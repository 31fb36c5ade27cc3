from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .http_client import HttpClient
from .models import Forecast

UNIT_SYSTEMS = ("auto", "ca", "uk2", "us", "si")


@dataclass
class ForecastClient:
    """Dark Sky forecast API client."""

    http: HttpClient
    api_key: str
    base_url: str = "https://api.darksky.net/forecast"
    units: Optional[str] = None

    def get_forecast(self, latitude: float, longitude: float) -> Forecast:
        if not self.api_key:
            raise ConfigurationError("DARK_SKY_API_KEY is not set.")

        url = f"{self.base_url}/{self.api_key}/{latitude},{longitude}"
        params = {"units": self.units} if self.units else None
        return Forecast.from_payload(self.http.get_json(url, params=params))
