from truck_routes.services.request_builder import BuiltRequest, RouteRequestBuilder, create_request_url
from truck_routes.services.routes_client import RoutesClient, parse_route_response

__all__ = [
    "BuiltRequest",
    "RouteRequestBuilder",
    "RoutesClient",
    "create_request_url",
    "parse_route_response",
]
