"""Broadcaster for tracking views."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ciphertrack.domain.contracts.state_broadcaster import StateBroadcasterProtocol

if TYPE_CHECKING:
    from ciphertrack.domain.models.tracking_view import TrackingView
    from ciphertrack.domain.ports.display_adapter import DisplayAdapter

logger = logging.getLogger(__name__)


class StateBroadcaster(StateBroadcasterProtocol):
    """Fans tracking views out to subscribed display adapters."""

    def __init__(self) -> None:
        """Initialize with no subscribers."""
        self._subscribers: list[DisplayAdapter] = []

    @property
    def subscriber_count(self) -> int:
        """Number of subscribed display adapters."""
        return len(self._subscribers)

    def subscribe(self, adapter: DisplayAdapter) -> None:
        """Register a display adapter for updates. Idempotent."""
        if adapter not in self._subscribers:
            self._subscribers.append(adapter)
            logger.info(f"Subscribed {type(adapter).__name__}, total: {len(self._subscribers)}")

    def unsubscribe(self, adapter: DisplayAdapter) -> None:
        """Remove a display adapter. Idempotent."""
        if adapter in self._subscribers:
            self._subscribers.remove(adapter)
            logger.info(f"Unsubscribed {type(adapter).__name__}, total: {len(self._subscribers)}")

    async def broadcast_update(self, view: TrackingView) -> None:
        """Send a view to every subscriber.

        A failing subscriber is logged and does not stop delivery to the others.

        Args:
            view: The view to publish.
        """
        for adapter in list(self._subscribers):
            try:
                await adapter.display(view)
            except Exception as e:
                logger.error(
                    f"Failed to display update on {type(adapter).__name__}: {e}", exc_info=True
                )
        logger.debug(
            f"Broadcasted {view.state.phase.value} view to {len(self._subscribers)} subscriber(s)"
        )
