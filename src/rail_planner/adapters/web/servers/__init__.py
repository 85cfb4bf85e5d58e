"""Static file serving."""

from rail_planner.adapters.web.servers.static_file_server import StaticFileServer

__all__ = ["StaticFileServer"]
