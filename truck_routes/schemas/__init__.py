from truck_routes.schemas.route import (
    LatLng,
    Location,
    Route,
    RouteModifiers,
    RouteRequest,
    RouteResponse,
    TrailerInfo,
    TravelAdvisory,
    VehicleInfo,
    Waypoint,
)

__all__ = [
    "LatLng",
    "Location",
    "Route",
    "RouteModifiers",
    "RouteRequest",
    "RouteResponse",
    "TrailerInfo",
    "TravelAdvisory",
    "VehicleInfo",
    "Waypoint",
]
