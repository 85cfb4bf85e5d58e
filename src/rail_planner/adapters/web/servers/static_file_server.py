"""Static file server implementation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.routing import BaseRoute, Mount
from starlette.staticfiles import StaticFiles

from rail_planner.domain.contracts.static_file_server import StaticFileServerProtocol

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

logger = logging.getLogger(__name__)

CACHE_CONTROL = b"public, max-age=60, must-revalidate"


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(self, static_files: StaticFiles) -> None:
        """Initialize with a StaticFiles instance."""
        self.static_files = static_files

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Handle ASGI request and add cache headers."""
        original_send = send

        async def send_with_cache_headers(
            message: MutableMapping[str, Any],
        ) -> None:
            """Add cache headers before sending response."""
            if message["type"] == "http.response.start":
                # Headers in ASGI are already a list of (bytes, bytes) tuples
                headers = list(message.get("headers", []))
                has_cache_control = any(header[0].lower() == b"cache-control" for header in headers)
                if not has_cache_control:
                    headers.append((b"cache-control", CACHE_CONTROL))
                    message["headers"] = headers
            await original_send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


class StaticFileServer(StaticFileServerProtocol):
    """Serves the front-end directory, with index.html for directory requests."""

    def __init__(self, static_dir: str | Path) -> None:
        """Initialize with the configured static directory.

        Args:
            static_dir: Directory to serve; relative paths are tried against the
                working directory first, then the project root.
        """
        self.static_dir = Path(static_dir)

    def candidate_paths(self) -> list[Path]:
        """Locations tried for the static directory, in order."""
        if self.static_dir.is_absolute():
            return [self.static_dir]
        return [
            Path.cwd() / self.static_dir,
            Path(__file__).parent.parent.parent.parent.parent.parent / self.static_dir,
        ]

    def build_routes(self) -> list[BaseRoute]:
        """Return a mount at '/' for the first existing static directory, if any."""
        static_paths = self.candidate_paths()
        static_path = next((path for path in static_paths if path.is_dir()), None)
        if static_path is None:
            logger.warning(
                f"Static directory not found at any of: {[str(p) for p in static_paths]}"
            )
            return []

        static_files = StaticFiles(directory=str(static_path), html=True)
        logger.info(f"Mounted static files from {static_path} with 1-minute cache headers")
        return [Mount("/", app=StaticFileCacheApp(static_files), name="static")]
