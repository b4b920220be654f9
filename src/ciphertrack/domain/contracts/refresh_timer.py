"""Protocol for the periodic refresh timer."""

from collections.abc import Awaitable, Callable
from typing import Protocol


class RefreshTimerProtocol(Protocol):
    """Protocol for a cancellable periodic task."""

    @property
    def is_running(self) -> bool:
        """Whether the timer is currently armed."""
        ...

    async def start(self, on_tick: Callable[[], Awaitable[None]]) -> None:
        """Arm the timer, calling on_tick after every interval."""
        ...

    async def stop(self) -> None:
        """Cancel the timer and wait for it to finish."""
        ...
