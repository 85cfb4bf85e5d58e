"""Display adapter port."""

from abc import ABC, abstractmethod


class DisplayAdapter(ABC):
    """Port for presenting itinerary search and booking to users."""

    @abstractmethod
    async def start(self) -> None:
        """Start the display adapter."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop the display adapter."""
        ...
