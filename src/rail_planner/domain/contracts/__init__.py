"""Contracts (protocols) for adapter collaborators."""

from rail_planner.domain.contracts.static_file_server import StaticFileServerProtocol

__all__ = ["StaticFileServerProtocol"]
