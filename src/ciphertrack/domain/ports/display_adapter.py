"""Display adapter port."""

from abc import ABC, abstractmethod

from ciphertrack.domain.models.tracking_view import TrackingView


class DisplayAdapter(ABC):
    """Port for displaying live train status to users."""

    @abstractmethod
    async def display(self, view: TrackingView) -> None:
        """Render a tracking view."""
        ...

    @abstractmethod
    async def start(self) -> None:
        """Start the display adapter."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop the display adapter."""
        ...
