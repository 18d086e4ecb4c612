from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from truck_routes.core.enums import RoutingPreference, TravelMode, Units


class RoutesModel(BaseModel):
    """Base for Routes API shapes: snake_case attributes, camelCase on the wire."""

    # Unknown fields are kept so payloads survive a round trip through to_wire().
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LatLng(RoutesModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class Location(RoutesModel):
    model_config = ConfigDict(frozen=True)

    lat_lng: LatLng
    heading: int | None = None


class Waypoint(RoutesModel):
    model_config = ConfigDict(frozen=True)

    location: Location

    @classmethod
    def from_lat_lng(cls, latitude: float, longitude: float) -> Waypoint:
        return cls(location=Location(lat_lng=LatLng(latitude=latitude, longitude=longitude)))


# Request side


class TrailerInfo(RoutesModel):
    model_config = ConfigDict(frozen=True)

    length_mm: int = 16154


class VehicleInfo(RoutesModel):
    """Physical constraints of the single supported truck.

    Defaults describe a 5-axle tractor with a 53 ft trailer: 13'6" high,
    72 ft overall, 8'6" wide, 72,000 lb gross.
    """

    model_config = ConfigDict(frozen=True)

    total_axle_count: int = 5
    total_height_mm: int = 4114
    total_length_mm: int = 21945
    total_width_mm: int = 2590
    total_weight_kg: int = 32658
    trailer_info: TrailerInfo = Field(default_factory=TrailerInfo)


class RouteModifiers(RoutesModel):
    model_config = ConfigDict(frozen=True)

    vehicle_info: VehicleInfo = Field(default_factory=VehicleInfo)
    avoid_tolls: bool = False
    avoid_highways: bool = False
    avoid_ferries: bool = False


class RouteRequest(RoutesModel):
    """Body of a directions/v2:computeRoutes call."""

    origin: Waypoint
    destination: Waypoint
    travel_mode: TravelMode = TravelMode.TRUCK
    routing_preference: RoutingPreference = RoutingPreference.TRAFFIC_AWARE_OPTIMAL
    route_modifiers: RouteModifiers = Field(default_factory=RouteModifiers)
    compute_alternative_routes: Literal[False] = False
    language_code: Literal["en-US"] = "en-US"
    units: Units = Units.IMPERIAL


# Response side. Everything except the token and the advisory is carried
# through without interpretation.


class ResponseLatLng(RoutesModel):
    # proto3 JSON omits zero values.
    latitude: float = 0.0
    longitude: float = 0.0


class ResponseLocation(RoutesModel):
    lat_lng: ResponseLatLng | None = None
    heading: int | None = None


class Polyline(RoutesModel):
    encoded_polyline: str | None = None


class LocalizedText(RoutesModel):
    text: str | None = None


class LocalizedValues(RoutesModel):
    distance: LocalizedText | None = None
    duration: LocalizedText | None = None
    static_duration: LocalizedText | None = None


class NavigationInstruction(RoutesModel):
    maneuver: str | None = None
    instructions: str | None = None


class Step(RoutesModel):
    distance_meters: int | None = None
    static_duration: str | None = None
    polyline: Polyline | None = None
    start_location: ResponseLocation | None = None
    end_location: ResponseLocation | None = None
    navigation_instruction: NavigationInstruction | None = None
    localized_values: LocalizedValues | None = None
    travel_mode: str | None = None


class Leg(RoutesModel):
    distance_meters: int | None = None
    duration: str | None = None
    static_duration: str | None = None
    polyline: Polyline | None = None
    start_location: ResponseLocation | None = None
    end_location: ResponseLocation | None = None
    steps: list[Step] | None = None
    localized_values: LocalizedValues | None = None


class Viewport(RoutesModel):
    low: ResponseLatLng | None = None
    high: ResponseLatLng | None = None


class TravelAdvisory(RoutesModel):
    route_restrictions_partially_ignored: bool | None = None


class Route(RoutesModel):
    route_token: str
    travel_advisory: TravelAdvisory
    legs: list[Leg] | None = None
    distance_meters: int | None = None
    duration: str | None = None
    static_duration: str | None = None
    polyline: Polyline | None = None
    description: str | None = None
    warnings: list[str] | None = None
    viewport: Viewport | None = None
    localized_values: LocalizedValues | None = None
    route_labels: list[str] | None = None
    polyline_details: dict[str, Any] | None = None


class RouteResponse(RoutesModel):
    routes: list[Route] = Field(default_factory=list)
