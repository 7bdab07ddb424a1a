"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

from maharashtra_weather import __version__
from maharashtra_weather.config import get_settings
from maharashtra_weather.datasources.weather.forecast import fetch_city_forecast
from maharashtra_weather.errors import NoCitySelectedError, WeatherLookupError
from maharashtra_weather.flows.build import build_site
from maharashtra_weather.reference.cities import CITIES, resolve
from maharashtra_weather.renderers.report import build_report, format_report_text
from maharashtra_weather.web import create_server
from maharashtra_weather.widget import connection_error_message


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="maharashtra-weather",
        description="Current weather and 9-day forecast for Maharashtra cities",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")
    subparsers.add_parser("cities", help="List the available cities")

    lookup_parser = subparsers.add_parser("lookup", help="Print the weather for a city")
    lookup_parser.add_argument("city", help="City id, e.g. pune (see 'cities')")

    # 'build' command - render a static page for one city
    build_parser = subparsers.add_parser("build", help="Build a static page for a city")
    build_parser.add_argument(
        "--city",
        type=str,
        default=None,
        help="City id (default: default_city from settings)",
    )

    # 'serve' command - interactive widget page
    serve_parser = subparsers.add_parser("serve", help="Serve the widget page locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    """Send library logs to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Provider: {settings.open_meteo_url}")
    return 0


def cmd_cities(_args: argparse.Namespace) -> int:
    """Handle the 'cities' command."""
    for city in CITIES.values():
        print(f"{city.id:<12} {city.name:<12} {city.latitude:>8.4f} {city.longitude:>8.4f}")
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Handle the 'lookup' command: fetch one city and print the report."""
    city = resolve(args.city)
    if city is None:
        print(str(NoCitySelectedError(args.city)), file=sys.stderr)
        print("Run 'maharashtra-weather cities' for valid ids.", file=sys.stderr)
        return 1

    settings = get_settings()
    try:
        forecast = fetch_city_forecast(city, url=settings.open_meteo_url)
    except WeatherLookupError as exc:
        logging.getLogger(__name__).error("Lookup failed: %s: %s", type(exc).__name__, exc)
        print(connection_error_message(exc), file=sys.stderr)
        return 1

    print(format_report_text(build_report(city, forecast)))
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: run the static page flow."""
    result = build_site(city_id=args.city)
    print("Done.")
    return 0 if result.get("ok") else 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the interactive widget page."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port

    with create_server(port) as server:
        print(f"Serving widget on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    configure_logging(getattr(args, "debug", False) or get_settings().debug)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "cities": cmd_cities,
        "lookup": cmd_lookup,
        "build": cmd_build,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
