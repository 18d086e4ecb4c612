from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from truck_routes.core.config import get_settings
from truck_routes.core.exceptions import AppError
from truck_routes.core.logging import configure_logging
from truck_routes.schemas.route import Waypoint
from truck_routes.services.routes_client import RoutesClient, parse_route_response

logger = logging.getLogger("truck_routes")

# South Side of Chicago to Hammond, IN.
DEFAULT_ORIGIN = (41.82999557797065, -87.6650479101103)
DEFAULT_DESTINATION = (41.66217983799244, -87.4769040416346)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="truck_routes",
        description="Request a truck route token from the Google Routes API.",
    )
    parser.add_argument("origin_lat", type=float, nargs="?", default=DEFAULT_ORIGIN[0])
    parser.add_argument("origin_lng", type=float, nargs="?", default=DEFAULT_ORIGIN[1])
    parser.add_argument("destination_lat", type=float, nargs="?", default=DEFAULT_DESTINATION[0])
    parser.add_argument("destination_lng", type=float, nargs="?", default=DEFAULT_DESTINATION[1])
    return parser.parse_args(argv)


async def _run(client: RoutesClient, args: argparse.Namespace) -> dict:
    return await client.generate_route(
        Waypoint.from_lat_lng(args.origin_lat, args.origin_lng),
        Waypoint.from_lat_lng(args.destination_lat, args.destination_lng),
    )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        client = RoutesClient()
        payload = asyncio.run(_run(client, args))
    except AppError as exc:
        logger.error("Route generation failed", extra={"code": exc.code, "error": exc.message})
        print(exc.message, file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=2))
    try:
        routes = parse_route_response(payload).routes
    except AppError as exc:
        logger.warning("Response is not a route payload", extra={"error": exc.message})
        return 0
    if not routes:
        logger.warning("Routes API returned no routes")
    for route in routes:
        logger.info(
            "Route token generated",
            extra={"restrictions_partially_ignored": route.travel_advisory.route_restrictions_partially_ignored},
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
