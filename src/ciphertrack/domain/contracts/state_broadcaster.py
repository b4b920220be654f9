"""Protocol for broadcasting tracking views."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ciphertrack.domain.models.tracking_view import TrackingView


class StateBroadcasterProtocol(Protocol):
    """Protocol for publishing tracking views to the presentation layer."""

    async def broadcast_update(self, view: "TrackingView") -> None:
        """Publish a view to every subscriber.

        Args:
            view: The view to publish.
        """
        ...
