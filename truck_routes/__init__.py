"""Truck-constrained route token client for the Google Routes API."""

__version__ = "0.1.0"

from truck_routes.services.routes_client import RoutesClient, generate_route, get_routes_client

__all__ = [
    "RoutesClient",
    "generate_route",
    "get_routes_client",
]
