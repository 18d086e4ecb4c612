from enum import Enum


class TravelMode(str, Enum):
    TRUCK = "TRUCK"


class RoutingPreference(str, Enum):
    TRAFFIC_AWARE_OPTIMAL = "TRAFFIC_AWARE_OPTIMAL"


class Units(str, Enum):
    IMPERIAL = "IMPERIAL"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
