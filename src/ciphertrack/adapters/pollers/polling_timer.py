"""Cancellable periodic timer driving background refreshes."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ciphertrack.domain.contracts.refresh_timer import RefreshTimerProtocol

logger = logging.getLogger(__name__)


class PollingTimer(RefreshTimerProtocol):
    """Calls a coroutine function every interval until stopped.

    The first call happens one interval after start. A failing callback is
    logged and the next tick is still scheduled.
    """

    def __init__(self, interval_seconds: float) -> None:
        """Initialize the timer.

        Args:
            interval_seconds: Delay between ticks in seconds.
        """
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        """Whether the timer task is alive."""
        return self._task is not None and not self._task.done()

    async def start(self, on_tick: Callable[[], Awaitable[None]]) -> None:
        """Start the timer."""
        if self.is_running:
            logger.warning("Polling timer already running")
            return

        self._task = asyncio.create_task(self._tick_loop(on_tick))
        logger.debug(f"Started polling timer ({self.interval_seconds}s interval)")

    async def stop(self) -> None:
        """Stop the timer."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.debug("Polling timer cancelled")
            logger.debug("Stopped polling timer")
        self._task = None

    async def _tick_with_error_handling(self, on_tick: Callable[[], Awaitable[None]]) -> None:
        """Run one tick, logging errors so the loop keeps going."""
        try:
            await on_tick()
        except Exception as e:
            logger.error(f"Error in polling timer tick (will retry): {e}", exc_info=True)

    async def _tick_loop(self, on_tick: Callable[[], Awaitable[None]]) -> None:
        """Main timer loop."""
        try:
            while True:
                await asyncio.sleep(self.interval_seconds)
                await self._tick_with_error_handling(on_tick)
        except asyncio.CancelledError:
            logger.debug("Polling timer loop cancelled")
            raise
