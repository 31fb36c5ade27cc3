"""
CLI entry point.

Usage:
    weather-cli [--location TEXT | --zip CODE] [--geocoder NAME] [--units SYSTEM]
                [--outlook] [--verbose]

Exit Codes:
    0 - Conditions printed
    1 - Lookup failed (configuration, input, network, or decoding error)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import Settings
from .errors import InvalidLocationError, WeatherCLIError
from .geocode import GEOCODERS, build_resolver, random_postal_code, validate_postal_code
from .http_client import HttpClient
from .present import render_report
from .weather import UNIT_SYSTEMS, ForecastClient

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="weather-cli",
        description="Print current weather conditions for an address or zip code.",
    )
    where = parser.add_mutually_exclusive_group()
    where.add_argument(
        "--location",
        help="Enter a location (e.g. address, zip) to obtain weather forecast "
        "(default: a random zip code)",
    )
    where.add_argument("--zip", help="5 digit zip code to obtain weather forecast")
    parser.add_argument(
        "--geocoder",
        choices=GEOCODERS,
        help="Geocoding backend (default: $WEATHER_GEOCODER or google)",
    )
    parser.add_argument(
        "--units",
        choices=UNIT_SYSTEMS,
        help="Unit system requested from the forecast service (default: $WEATHER_UNITS)",
    )
    parser.add_argument(
        "--outlook",
        action="store_true",
        help="Also print the next-hour, 48-hour and weekly summaries",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(args: argparse.Namespace, settings: Settings) -> str:
    """Resolve the location, fetch its forecast and return the rendered report."""
    if args.zip is not None:
        query = validate_postal_code(args.zip)
    elif args.location is not None:
        query = args.location.strip()
    else:
        query = random_postal_code()
    if not query:
        raise InvalidLocationError("Please enter a location")

    dark_sky_key = settings.require("dark_sky_api_key")
    http = HttpClient(timeout=settings.request_timeout)
    try:
        resolver = build_resolver(args.geocoder or settings.geocoder, http, settings)
        forecasts = ForecastClient(
            http=http, api_key=dark_sky_key, units=args.units or settings.units
        )

        logger.debug("Resolving %r", query)
        location = resolver.resolve(query)
        logger.debug("Resolved to %s (%s, %s)", location.address, location.latitude, location.longitude)

        forecast = forecasts.get_forecast(location.latitude, location.longitude)
    finally:
        http.close()

    return render_report(location, forecast, outlook=args.outlook)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr,
    )
    # urllib3 debug lines carry request paths, forecast API key included
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    try:
        report = run(args, Settings.load())
    except WeatherCLIError as e:
        logger.error("%s", e)
        return 1

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
