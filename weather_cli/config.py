from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigurationError


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    dark_sky_api_key: str | None
    google_maps_api_key: str | None
    geocoder: str = "google"
    units: str | None = None
    request_timeout: float = 10.0

    @classmethod
    def load(cls) -> "Settings":
        # Load .env file if present (no-op if not)
        load_dotenv()

        timeout = os.getenv("WEATHER_REQUEST_TIMEOUT", "10")
        try:
            request_timeout = float(timeout)
        except ValueError as e:
            raise ConfigurationError(
                f"WEATHER_REQUEST_TIMEOUT must be a number of seconds, got {timeout!r}."
            ) from e

        return cls(
            dark_sky_api_key=os.getenv("DARK_SKY_API_KEY"),
            google_maps_api_key=os.getenv("GOOGLE_MAPS_API_KEY"),
            geocoder=os.getenv("WEATHER_GEOCODER", "google"),
            units=os.getenv("WEATHER_UNITS") or None,
            request_timeout=request_timeout,
        )

    def require(self, name: str) -> str:
        """Return the named API key, or fail with the variable that supplies it."""
        value = getattr(self, name)
        if not value:
            raise ConfigurationError(f"{name.upper()} is not set.")
        return value
