from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from truck_routes.core.enums import HttpMethod
from truck_routes.core.exceptions import RoutesApiError
from truck_routes.schemas.route import RouteResponse
from truck_routes.services.request_builder import RouteRequestBuilder, WaypointInput

logger = logging.getLogger(__name__)

FETCH_ERROR_PREFIX = "Failed to fetch data from Google Routes API"
ROUTE_TOKEN_ERROR_PREFIX = "Failed to generate route token"


def _encode_body(body: BaseModel | dict[str, Any] | None) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    return json.dumps(body).encode("utf-8")


def parse_route_response(payload: Any) -> RouteResponse:
    try:
        return RouteResponse.model_validate(payload)
    except ValidationError as exc:
        raise RoutesApiError(
            f"Unexpected Routes API payload: {exc.error_count()} validation error(s)",
            details={"errors": exc.errors(include_url=False)},
        ) from exc


class RoutesClient:
    """Single-attempt client for the Routes API.

    Every call opens its own ``httpx.AsyncClient`` with no timeout, so
    concurrent calls share nothing but the builder's read-only settings.
    Pass ``transport`` to route requests through a custom httpx transport.
    """

    def __init__(
        self,
        builder: RouteRequestBuilder | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.builder = builder or RouteRequestBuilder()
        self._transport = transport

    async def _send(
        self,
        url: str,
        *,
        method: HttpMethod,
        body: BaseModel | dict[str, Any] | None,
        headers: dict[str, str] | None,
        error_prefix: str,
    ) -> Any:
        content = _encode_body(body)
        request_headers = httpx.Headers(headers)
        if content is not None:
            request_headers.setdefault("Content-Type", "application/json")
        safe_url = self.builder.redact(url)
        logger.debug("Routes API request", extra={"method": method.value, "url": safe_url})
        try:
            async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
                response = await client.request(method.value, url, headers=request_headers, content=content)
            payload = response.json()
        except Exception as exc:
            logger.warning(
                "Routes API request failed",
                extra={"method": method.value, "url": safe_url, "error": str(exc)},
            )
            raise RoutesApiError(f"{error_prefix}: {exc}", details={"url": safe_url}) from exc

        if response.is_error:
            logger.warning(
                "Routes API returned an error status",
                extra={"method": method.value, "url": safe_url, "status_code": response.status_code},
            )
        return payload

    async def fetch_routes_api(
        self,
        endpoint: str,
        body: BaseModel | dict[str, Any] | None = None,
        method: HttpMethod | str = HttpMethod.POST,
        headers: dict[str, str] | None = None,
        *,
        error_prefix: str = FETCH_ERROR_PREFIX,
    ) -> Any:
        return await self._send(
            self.builder.request_url(endpoint),
            method=HttpMethod(method),
            body=body,
            headers=headers,
            error_prefix=error_prefix,
        )

    async def generate_route(self, origin: WaypointInput, destination: WaypointInput) -> dict[str, Any]:
        """Request one truck route and return the decoded body as received.

        The field mask limits each route to ``routeToken`` and
        ``travelAdvisory``. The payload is not checked for a non-empty
        ``routes`` list; use :func:`parse_route_response` for a typed view.
        Malformed origin or destination input raises ``ValidationAppError``
        before anything is sent.
        """
        request = self.builder.build_route_request(origin, destination)
        return await self._send(
            request.url,
            method=request.method,
            body=request.body,
            headers=request.headers,
            error_prefix=ROUTE_TOKEN_ERROR_PREFIX,
        )


@lru_cache(maxsize=1)
def get_routes_client() -> RoutesClient:
    return RoutesClient()


async def generate_route(origin: WaypointInput, destination: WaypointInput) -> dict[str, Any]:
    return await get_routes_client().generate_route(origin, destination)
