from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from truck_routes.core.config import Settings, get_settings
from truck_routes.core.enums import HttpMethod
from truck_routes.core.exceptions import ConfigurationError, ValidationAppError
from truck_routes.schemas.route import LatLng, Location, RouteRequest, Waypoint

COMPUTE_ROUTES_ENDPOINT = "directions/v2:computeRoutes"
ROUTE_TOKEN_FIELD_MASK = "routes.routeToken,routes.travelAdvisory"

WaypointInput = Waypoint | LatLng | Mapping[str, Any]


def create_request_url(url: str, params: Mapping[str, Any]) -> str:
    """Append ``params`` to ``url`` in insertion order.

    Values are rendered with their default text form and are not URL-encoded,
    matching what the Routes API receives from the other clients of this key.
    """
    result = url
    for index, (key, value) in enumerate(params.items()):
        result += f"{'?' if index == 0 else '&'}{key}={value}"
    return result


def _as_waypoint(name: str, value: WaypointInput) -> Waypoint:
    if isinstance(value, Waypoint):
        return value
    if isinstance(value, LatLng):
        return Waypoint(location=Location(lat_lng=value))
    try:
        return Waypoint.model_validate(value)
    except ValidationError as exc:
        raise ValidationAppError(
            f"Invalid {name} waypoint: {exc.error_count()} validation error(s)",
            details={"field": name, "errors": exc.errors(include_url=False)},
        ) from exc


@dataclass(slots=True)
class BuiltRequest:
    url: str
    body: RouteRequest
    headers: dict[str, str] = field(default_factory=dict)
    method: HttpMethod = HttpMethod.POST


class RouteRequestBuilder:
    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        if not settings.maps_api_key:
            raise ConfigurationError("[RoutesApi] MAPS_API_KEY is not set")
        self._api_key = settings.maps_api_key
        self.base_url = settings.routes_api_base_url

    def request_url(self, endpoint: str) -> str:
        return create_request_url(f"{self.base_url}/{endpoint.lstrip('/')}", {"key": self._api_key})

    def redact(self, url: str) -> str:
        base, _, query = url.partition("?")
        params = dict(pair.partition("=")[::2] for pair in query.split("&") if pair)
        if "key" in params:
            params["key"] = "***"
        return create_request_url(base, params)

    def build_route_request(self, origin: WaypointInput, destination: WaypointInput) -> BuiltRequest:
        body = RouteRequest(
            origin=_as_waypoint("origin", origin),
            destination=_as_waypoint("destination", destination),
        )
        return BuiltRequest(
            url=self.request_url(COMPUTE_ROUTES_ENDPOINT),
            body=body,
            headers={
                "Content-Type": "application/json",
                "X-Goog-FieldMask": ROUTE_TOKEN_FIELD_MASK,
            },
        )
