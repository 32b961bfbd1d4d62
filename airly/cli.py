"""Command-line access to the Airly API: one sub-command per endpoint, JSON on stdout."""

import argparse
import json
import sys
from typing import Optional, Sequence

from airly import config
from airly.client import AirlyClient
from airly.errors import AirlyError
from airly.geo import GeoCircle, GeoPoint
from airly.models import IndexType
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="airly/cli")

DEFAULT_INDEX_TYPE = "AIRLY_CAQI"
DEFAULT_RADIUS_KM = 3.0
DEFAULT_MAX_RESULTS = 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all sub-commands."""
    parser = argparse.ArgumentParser(prog="airly", description="Query the Airly air-quality API.")
    parser.add_argument("--api-key", help="32-character API key (defaults to AIRLY_API_KEY)")
    parser.add_argument("--log-level", default=None, help="Log level (defaults to AIRLY_LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("installation", help="Fetch one installation by id")
    p.add_argument("installation_id", type=int)

    p = sub.add_parser("nearest", help="Fetch installations nearest to a point")
    _add_point_args(p)
    p.add_argument("--radius", type=float, default=DEFAULT_RADIUS_KM, help="Search radius in km")
    p.add_argument("--max-results", type=int, default=DEFAULT_MAX_RESULTS)

    sub.add_parser("indexes", help="List available index types")
    sub.add_parser("measurement-types", help="List measurement metadata")

    p = sub.add_parser("measurements", help="Fetch measurements for an installation")
    p.add_argument("installation_id", type=int)
    _add_index_arg(p)
    p.add_argument("--include-wind", action="store_true")

    p = sub.add_parser("measurements-nearest", help="Fetch measurements of the nearest installation")
    _add_point_args(p)
    p.add_argument("--radius", type=float, default=DEFAULT_RADIUS_KM, help="Search radius in km")
    _add_index_arg(p)

    p = sub.add_parser("measurements-point", help="Fetch interpolated measurements for a point")
    _add_point_args(p)
    _add_index_arg(p)

    return parser


def _add_point_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("lat", type=float)
    parser.add_argument("lng", type=float)


def _add_index_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--index-type", default=DEFAULT_INDEX_TYPE, help="Index type name")


def run_command(client: AirlyClient, args: argparse.Namespace):
    """Dispatch parsed arguments to the matching client call and return its result."""
    command = args.command
    if command == "installation":
        return client.get_installation(args.installation_id)
    if command == "nearest":
        circle = GeoCircle(GeoPoint(args.lat, args.lng), args.radius)
        return client.get_nearest(circle, args.max_results)
    if command == "indexes":
        return client.get_indexes()
    if command == "measurement-types":
        return client.get_measurements_types()
    if command == "measurements":
        return client.get_installation_measurements(
            args.installation_id, IndexType(name=args.index_type), include_wind=args.include_wind
        )
    if command == "measurements-nearest":
        circle = GeoCircle(GeoPoint(args.lat, args.lng), args.radius)
        return client.get_measurements_nearest(IndexType(name=args.index_type), circle)
    if command == "measurements-point":
        return client.get_measurements_point(IndexType(name=args.index_type), GeoPoint(args.lat, args.lng))
    raise ValueError(f"Unknown command '{command}'")


def to_json(result) -> str:
    """Serialize a model or list of models using the API's field names."""
    if isinstance(result, list):
        payload = [item.model_dump(by_alias=True) for item in result]
    else:
        payload = result.model_dump(by_alias=True)
    return json.dumps(payload, indent=2, ensure_ascii=False)


def main(argv: Optional[Sequence[str]] = None, settings: Optional[config.Settings] = None) -> int:
    """Entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)
    settings = settings or config.settings
    setup_logging(level=(args.log_level or settings.log_level).upper(), job_name="airly_cli")

    try:
        if args.api_key:
            client = AirlyClient(args.api_key, settings=settings)
        else:
            client = AirlyClient.from_settings(settings)
        with client:
            result = run_command(client, args)
    except AirlyError as exc:
        logger.error(f"{type(exc).__name__}: {exc}")
        return 1

    print(to_json(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
