from __future__ import annotations

import json

import httpx

import truck_routes.__main__ as cli
from truck_routes.core.config import Settings
from truck_routes.core.exceptions import ConfigurationError
from truck_routes.services.request_builder import RouteRequestBuilder
from truck_routes.services.routes_client import RoutesClient


def test_main_prints_route_payload(monkeypatch, capsys, settings):
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"routes": [{"routeToken": "abc123", "travelAdvisory": {}}]})

    client = RoutesClient(RouteRequestBuilder(settings), transport=httpx.MockTransport(handler))
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    monkeypatch.setattr(cli, "RoutesClient", lambda: client)

    exit_code = cli.main(["1.5", "2.5", "3.5", "4.5"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["routes"][0]["routeToken"] == "abc123"
    assert seen[0]["origin"]["location"]["latLng"] == {"latitude": 1.5, "longitude": 2.5}
    assert seen[0]["destination"]["location"]["latLng"] == {"latitude": 3.5, "longitude": 4.5}


def test_main_uses_default_coordinates(monkeypatch, capsys, settings):
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"routes": []})

    client = RoutesClient(RouteRequestBuilder(settings), transport=httpx.MockTransport(handler))
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    monkeypatch.setattr(cli, "RoutesClient", lambda: client)

    assert cli.main([]) == 0
    assert seen[0]["origin"]["location"]["latLng"]["latitude"] == cli.DEFAULT_ORIGIN[0]
    assert seen[0]["destination"]["location"]["latLng"]["longitude"] == cli.DEFAULT_DESTINATION[1]


def test_main_reports_missing_api_key(monkeypatch, capsys):
    empty = Settings(_env_file=None, maps_api_key="")
    monkeypatch.setattr(cli, "get_settings", lambda: empty)

    def _client():
        return RoutesClient(RouteRequestBuilder(empty))

    monkeypatch.setattr(cli, "RoutesClient", _client)

    assert cli.main([]) == 1
    assert "MAPS_API_KEY" in capsys.readouterr().err


def test_main_reports_transport_failure(monkeypatch, capsys, settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = RoutesClient(RouteRequestBuilder(settings), transport=httpx.MockTransport(handler))
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    monkeypatch.setattr(cli, "RoutesClient", lambda: client)

    assert cli.main([]) == 1
    assert "Failed to generate route token: connection refused" in capsys.readouterr().err


def test_configuration_error_is_an_app_error():
    error = ConfigurationError("missing")
    assert error.code == "configuration_error"
    assert str(error) == "missing"
