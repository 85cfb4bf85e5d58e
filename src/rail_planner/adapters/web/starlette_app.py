"""Starlette web adapter exposing the itinerary search and booking API."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import BaseRoute, Route

from rail_planner.adapters.config import AppConfig
from rail_planner.adapters.formatters import ItineraryFormatter
from rail_planner.domain.errors import BookingValidationError
from rail_planner.domain.models.itinerary import SearchQuery
from rail_planner.domain.ports import (
    BookingService,
    DisplayAdapter,
    ItinerarySearchService,
    RouteLoadingService,
)

from .rate_limit_middleware import RateLimitMiddleware
from .request_logger import log_api_request
from .request_models import BookingRequest
from .servers import StaticFileServer

if TYPE_CHECKING:
    import uvicorn

logger = logging.getLogger(__name__)


def _error(message: str, status_code: int, **extra: Any) -> JSONResponse:
    return JSONResponse({"error": message, **extra}, status_code=status_code)


class StarletteWebAdapter(DisplayAdapter):
    """Serves the JSON API and the front-end files with Starlette on uvicorn."""

    def __init__(
        self,
        search_service: ItinerarySearchService,
        booking_service: BookingService,
        config: AppConfig,
        route_loader: RouteLoadingService | None = None,
        formatter: ItineraryFormatter | None = None,
    ) -> None:
        """Initialize the web adapter.

        Args:
            search_service: Service finding and ranking itineraries.
            booking_service: Service booking itineraries and listing trips.
            config: Application configuration.
            route_loader: Service reloading the network; enables the admin reload endpoint.
            formatter: Formatter for JSON payloads.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        # Protocols can't be checked with isinstance, verify required methods exist
        if not callable(getattr(search_service, "search", None)):
            raise TypeError("search_service must implement ItinerarySearchService protocol")
        if not callable(getattr(booking_service, "book", None)):
            raise TypeError("booking_service must implement BookingService protocol")

        self.search_service = search_service
        self.booking_service = booking_service
        self.config = config
        self.route_loader = route_loader
        self.formatter = formatter or ItineraryFormatter()
        self._server: uvicorn.Server | None = None

    def api_routes(self) -> list[BaseRoute]:
        """Routes of the JSON API, health check and admin endpoints."""
        return [
            Route("/api/search", self.search, methods=["GET"]),
            Route("/api/cities", self.cities, methods=["GET"]),
            Route("/api/bookings", self.create_booking, methods=["POST"]),
            Route("/api/trips", self.trips, methods=["GET"]),
            Route("/api/admin/reload", self.reload_routes, methods=["POST"]),
            Route("/healthz", self.healthz, methods=["GET"]),
        ]

    def build_app(self) -> Starlette:
        """Assemble the ASGI application with middleware and static files."""
        routes = self.api_routes()
        # Static mount matches every path, so it must come last
        routes.extend(StaticFileServer(self.config.static_dir).build_routes())

        middleware = [
            Middleware(
                CORSMiddleware,
                allow_origins=self.config.cors_allow_origins,
                allow_methods=["GET", "POST", "OPTIONS"],
                allow_headers=["*"],
            ),
            Middleware(RateLimitMiddleware, requests_per_minute=self.config.rate_limit_per_minute),
        ]
        return Starlette(routes=routes, middleware=middleware)

    async def search(self, request: Request) -> Response:
        """``GET /api/search?from=&to=&day=&sort=``."""
        params = dict(request.query_params)
        log_api_request(request.method, request.url.path, params=params)

        from_city = params.get("from", "").strip()
        to_city = params.get("to", "").strip()
        if not from_city or not to_city:
            return _error("Both 'from' and 'to' are required", 400)

        query = SearchQuery(
            from_city=from_city,
            to_city=to_city,
            day=params.get("day") or None,
            sort=params.get("sort") or self.config.default_sort,
        )
        result = await run_in_threadpool(self.search_service.search, query)
        return JSONResponse(self.formatter.search_result_to_dict(result))

    async def cities(self, _request: Request) -> Response:
        """``GET /api/cities``."""
        cities = await run_in_threadpool(self.search_service.available_cities)
        return JSONResponse({"cities": cities})

    async def create_booking(self, request: Request) -> Response:
        """``POST /api/bookings`` with a connection and its travellers."""
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return _error("Request body must be valid JSON", 400)
        log_api_request(request.method, request.url.path, payload=body)

        try:
            booking = BookingRequest.model_validate(body)
        except ValidationError as e:
            details = e.errors(include_url=False, include_context=False, include_input=False)
            return _error("Invalid booking request", 400, details=details)

        try:
            confirmation = await run_in_threadpool(
                self.booking_service.book, booking.route_ids, booking.domain_travellers()
            )
        except BookingValidationError as e:
            return _error(str(e), 400)

        return JSONResponse(self.formatter.confirmation_to_dict(confirmation), status_code=201)

    async def trips(self, request: Request) -> Response:
        """``GET /api/trips?lastName=&idNumber=``."""
        last_name = request.query_params.get("lastName", "")
        id_number = request.query_params.get("idNumber", "")
        log_api_request(request.method, request.url.path, params={"lastName": last_name})

        try:
            trips = await run_in_threadpool(
                self.booking_service.trips_for_passenger, last_name, id_number
            )
        except BookingValidationError as e:
            return _error(str(e), 400)

        return JSONResponse({"trips": [self.formatter.trip_details_to_dict(t) for t in trips]})

    async def reload_routes(self, request: Request) -> Response:
        """Re-read the route network and publish it to searches.

        Guarded by the X-Admin-Token header; disabled when no token is configured.
        Typical usage:
            curl -X POST http://localhost:3001/api/admin/reload -H "X-Admin-Token: $ADMIN_COMMAND_TOKEN"
        """
        expected_token = self.config.admin_command_token
        if not expected_token or self.route_loader is None:
            return _error("admin endpoint disabled - ADMIN_COMMAND_TOKEN not configured", 503)

        provided_token = request.headers.get("X-Admin-Token", "")
        if provided_token != expected_token:
            logger.warning("Unauthorized attempt to call reload admin endpoint")
            return _error("forbidden", 403)

        try:
            count = await run_in_threadpool(self.route_loader.reload)
        except FileNotFoundError as e:
            logger.error(f"Route reload failed: {e}")
            return _error(str(e), 500)

        logger.info(f"Admin reload completed: {count} route(s) published")
        return JSONResponse({"status": "ok", "routes": count})

    async def healthz(self, _request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return PlainTextResponse("Ok")

    async def start(self) -> None:
        """Start the web server and block until it exits."""
        import uvicorn

        server_config = uvicorn.Config(
            self.build_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Serving itinerary API on http://{self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Ask the web server to exit."""
        if self._server:
            self._server.should_exit = True
