"""Protocol for static file serving."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from starlette.routing import BaseRoute


class StaticFileServerProtocol(Protocol):
    """Protocol for serving the front-end files."""

    def build_routes(self) -> list["BaseRoute"]:
        """Return the routes serving static files.

        They must be appended after the API routes, since they may match any path.

        Returns:
            Routes to append to the application's route list, possibly empty.
        """
        ...
