from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from truck_routes.core.config import Settings
from truck_routes.services.request_builder import RouteRequestBuilder
from truck_routes.services.routes_client import RoutesClient

TEST_API_KEY = "test-key"


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, maps_api_key=TEST_API_KEY)


@pytest.fixture()
def builder(settings: Settings) -> RouteRequestBuilder:
    return RouteRequestBuilder(settings)


@pytest.fixture()
def make_client(builder: RouteRequestBuilder) -> Callable[[Callable], RoutesClient]:
    def _make(handler: Callable) -> RoutesClient:
        return RoutesClient(builder, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture()
def origin() -> dict:
    return {"location": {"latLng": {"latitude": 41.82999557797065, "longitude": -87.6650479101103}}}


@pytest.fixture()
def destination() -> dict:
    return {"location": {"latLng": {"latitude": 41.66217983799244, "longitude": -87.4769040416346}}}
