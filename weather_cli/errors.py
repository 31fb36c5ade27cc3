from __future__ import annotations


class WeatherCLIError(Exception):
    """Base class for every failure that ends a lookup."""


class ConfigurationError(WeatherCLIError):
    """Raised when a required setting is missing or invalid."""


class InvalidLocationError(WeatherCLIError):
    """Raised when the location given on the command line is unusable."""


class UpstreamRequestError(WeatherCLIError):
    """Raised when an HTTP request fails or returns a non-2xx status."""


class UpstreamStatusError(WeatherCLIError):
    """Raised when the geocoder answers but reports a failure status."""


class DecodeError(WeatherCLIError):
    """Raised when a response body is not the JSON we expect."""
