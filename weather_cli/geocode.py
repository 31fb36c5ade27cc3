from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol

from .config import Settings
from .errors import (
    ConfigurationError,
    InvalidLocationError,
    UpstreamStatusError,
)
from .http_client import HttpClient
from .models import (
    GoogleGeocodeResponse,
    Location,
    OpenMeteoSearchResponse,
    decode,
)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
OPEN_METEO_GEOCODE_URL = "https://geocoding-api.open-meteo.com/v1/search"

GEOCODERS = ("google", "open-meteo")


class LocationResolver(Protocol):
    def resolve(self, query: str) -> Location:
        ...


@dataclass
class GoogleGeocoder:
    """Google Maps geocoding API client."""

    http: HttpClient
    api_key: str
    base_url: str = GOOGLE_GEOCODE_URL

    def resolve(self, query: str) -> Location:
        data = self.http.get_json(self.base_url, params={"address": query, "key": self.api_key})
        response = decode(GoogleGeocodeResponse, data, "geocoding")

        if response.status != "OK" or not response.results:
            raise UpstreamStatusError(
                f"Invalid location. Please try again. (status: {response.status or None})"
            )

        first = response.results[0]
        return Location(
            latitude=first.geometry.location.lat,
            longitude=first.geometry.location.lng,
            address=first.formatted_address or query,
        )


@dataclass
class OpenMeteoGeocoder:
    """Open-Meteo geocoding, free and keyless."""

    http: HttpClient
    base_url: str = OPEN_METEO_GEOCODE_URL

    def resolve(self, query: str) -> Location:
        data = self.http.get_json(self.base_url, params={"name": query, "count": 1})
        response = decode(OpenMeteoSearchResponse, data, "geocoding")
        if not response.results:
            raise UpstreamStatusError(f"Invalid location. Please try again. (no match for {query!r})")

        first = response.results[0]
        parts = [first.name, first.admin1, first.country]
        return Location(
            latitude=first.latitude,
            longitude=first.longitude,
            address=", ".join(p for p in parts if p) or query,
        )


def validate_postal_code(code: str) -> str:
    code = code.strip()
    if len(code) != 5 or not code.isdigit():
        raise InvalidLocationError("Please enter a 5 digit zip code")
    return code


def random_postal_code() -> str:
    """Demo default when no location is given."""
    return f"{random.randint(10000, 99999)}"


def build_resolver(name: str, http: HttpClient, settings: Settings) -> LocationResolver:
    if name == "google":
        return GoogleGeocoder(http=http, api_key=settings.require("google_maps_api_key"))
    if name == "open-meteo":
        return OpenMeteoGeocoder(http=http)
    raise ConfigurationError(
        f"Unknown geocoder {name!r}; expected one of: {', '.join(GEOCODERS)}."
    )
