from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import DecodeError

PayloadT = TypeVar("PayloadT", bound="Payload")


class Payload(BaseModel):
    """Base for decoded service responses; NaN and Infinity are rejected."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False, frozen=True)


def decode(model: Type[PayloadT], data: Any, what: str) -> PayloadT:
    """Validate a JSON body against `model`, reporting failures as DecodeError."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(part) for part in first["loc"]) or "body"
        raise DecodeError(f"Unexpected {what} payload at '{where}': {first['msg']}") from e


@dataclass(frozen=True)
class Location:
    """Coordinates plus the canonical address the geocoder matched."""

    latitude: float
    longitude: float
    address: str


# Forecast service


class CurrentConditions(Payload):
    """The `currently` block of a forecast payload."""

    icon: str = ""
    summary: str = ""
    time: int
    temperature: float = 0.0
    apparent_temperature: float = Field(0.0, alias="apparentTemperature")
    wind_speed: float = Field(0.0, alias="windSpeed")
    wind_gust: float = Field(0.0, alias="windGust")
    wind_bearing: float = Field(0.0, alias="windBearing")
    humidity: float = Field(0.0, description="0-1 fraction")
    dew_point: float = Field(0.0, alias="dewPoint")
    uv_index: float = Field(0.0, alias="uvIndex")
    visibility: float = 0.0
    pressure: float = 0.0
    precip_probability: float = Field(0.0, alias="precipProbability")
    cloud_cover: float = Field(0.0, alias="cloudCover")


class Outlook(Payload):
    """Summary line of a minutely, hourly or daily block."""

    summary: str = ""
    icon: str = ""


class Flags(Payload):
    units: str = "us"


class Forecast(Payload):
    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = Field(min_length=1)
    currently: CurrentConditions
    minutely: Optional[Outlook] = None
    hourly: Optional[Outlook] = None
    daily: Optional[Outlook] = None
    flags: Flags = Field(default_factory=Flags)

    @property
    def units(self) -> str:
        return self.flags.units

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Forecast":
        return decode(cls, payload, "forecast")


# Geocoding services


class LatLng(Payload):
    lat: float
    lng: float


class GoogleGeometry(Payload):
    location: LatLng


class GoogleResult(Payload):
    formatted_address: str = ""
    geometry: GoogleGeometry


class GoogleGeocodeResponse(Payload):
    status: str = ""
    results: Optional[List[GoogleResult]] = None


class OpenMeteoPlace(Payload):
    name: str = ""
    admin1: Optional[str] = None
    country: Optional[str] = None
    latitude: float
    longitude: float


class OpenMeteoSearchResponse(Payload):
    results: Optional[List[OpenMeteoPlace]] = None
