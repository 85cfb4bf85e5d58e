"""Route loading service port."""

from typing import Protocol


class RouteLoadingService(Protocol):
    """Port for (re)loading the route network into the search catalog."""

    def reload(self) -> int:
        """Read the network again and publish it atomically.

        Returns:
            The number of routes now available to searches.
        """
        ...
