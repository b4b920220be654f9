"""Refresh controller orchestrating fetches, polling and publication."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ciphertrack.application.services.position_interpolator import PositionScale, locate
from ciphertrack.application.services.refresh_reducer import reduce
from ciphertrack.application.services.route_model import consolidate
from ciphertrack.application.services.viewport_centering import ViewportCenteringTrigger
from ciphertrack.domain.models.fetch_error import FetchError
from ciphertrack.domain.models.refresh_event import (
    BackgroundFetchStarted,
    FetchFailed,
    FetchSucceeded,
    NavigatedBack,
    RefreshEvent,
    SearchSubmitted,
)
from ciphertrack.domain.models.refresh_state import RefreshPhase, RefreshState
from ciphertrack.domain.models.tracking_view import TrackingView

if TYPE_CHECKING:
    from ciphertrack.domain.contracts.refresh_timer import RefreshTimerProtocol
    from ciphertrack.domain.contracts.snapshot_fetcher import SnapshotFetcherProtocol
    from ciphertrack.domain.contracts.state_broadcaster import StateBroadcasterProtocol

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Something went wrong while loading live status."


def _utc_now() -> datetime:
    return datetime.now(UTC)


class RefreshController:
    """Owns one tracking session: its state, its polling timer and its requests.

    Foreground fetches (a new search) block the view and surface failures.
    Background fetches (timer ticks and manual refreshes) only raise a
    non-blocking updating indicator, and their failures are logged and
    discarded. Every request is tagged with a sequence number so that late
    completions for a superseded request are ignored.
    """

    def __init__(
        self,
        fetcher: SnapshotFetcherProtocol,
        timer: RefreshTimerProtocol,
        broadcaster: StateBroadcasterProtocol,
        scale: PositionScale | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the refresh controller.

        Args:
            fetcher: Fetcher used for every request.
            timer: Periodic timer driving background refreshes.
            broadcaster: Broadcaster receiving every new view.
            scale: Visual scale for the interpolated position.
            clock: Source of local timestamps for last_updated_at.
        """
        self.fetcher = fetcher
        self.timer = timer
        self.broadcaster = broadcaster
        self.scale = scale or PositionScale()
        self._clock = clock
        self._sequence = itertools.count(1)
        self._centering = ViewportCenteringTrigger()
        self._state = RefreshState()
        self._view = TrackingView(state=self._state)

    @property
    def state(self) -> RefreshState:
        """Current session state."""
        return self._state

    @property
    def view(self) -> TrackingView:
        """Last published view."""
        return self._view

    async def submit_search(self, entity_id: str) -> None:
        """Start tracking a train with a blocking foreground fetch.

        Allowed from any phase. Any previous snapshot, error, timer and
        in-flight request are abandoned.

        Args:
            entity_id: Train number entered by the user.

        Raises:
            ValueError: If entity_id is blank.
        """
        entity_id = entity_id.strip()
        if not entity_id:
            raise ValueError("entity_id must not be empty")

        await self.timer.stop()
        sequence = next(self._sequence)
        logger.info(f"Searching for train {entity_id} (request #{sequence})")
        await self._apply(SearchSubmitted(entity_id=entity_id, sequence=sequence))

        await self._fetch(entity_id, sequence)

        if self._state.phase is RefreshPhase.READY and self._state.entity_id == entity_id:
            await self.timer.stop()
            await self.timer.start(self.tick)

    async def tick(self) -> None:
        """Run one periodic background refresh."""
        await self._refresh_in_background(visible=False)

    async def manual_refresh(self) -> bool:
        """Refresh the current train on user request.

        Has the data effect of a background tick but shows the updating
        affordance. Never enters the foreground loading phase.

        Returns:
            True if a refresh was issued, False if it was not allowed now.
        """
        return await self._refresh_in_background(visible=True)

    async def navigate_back(self) -> None:
        """Leave the tracking screen, discarding the session."""
        await self.timer.stop()
        logger.info(f"Stopped tracking train {self._state.entity_id}")
        await self._apply(NavigatedBack())

    async def set_scale(self, scale: PositionScale) -> None:
        """Change the visual scale and republish the current view."""
        self.scale = scale
        await self._publish()

    async def close(self) -> None:
        """Tear down the session timer."""
        await self.timer.stop()

    async def _refresh_in_background(self, visible: bool) -> bool:
        state = self._state
        if state.phase is not RefreshPhase.READY or state.entity_id is None:
            logger.debug(f"Skipping refresh in phase {state.phase.value}")
            return False
        if state.has_request_in_flight:
            logger.debug(
                f"Skipping refresh for {state.entity_id}: "
                f"request #{state.in_flight_sequence} still outstanding"
            )
            return False

        entity_id = state.entity_id
        sequence = next(self._sequence)
        kind = "Manual" if visible else "Background"
        logger.debug(f"{kind} refresh for train {entity_id} (request #{sequence})")
        await self._apply(BackgroundFetchStarted(sequence=sequence, visible=visible))
        await self._fetch(entity_id, sequence)
        return True

    async def _fetch(self, entity_id: str, sequence: int) -> None:
        foreground = self._state.phase is RefreshPhase.FETCHING_FOREGROUND
        try:
            snapshot = await self.fetcher.fetch(entity_id)
        except FetchError as e:
            if foreground:
                logger.warning(f"Fetching train {entity_id} failed: {e}")
            else:
                # Background failures are for diagnostics only
                logger.warning(f"Background refresh for train {entity_id} failed (ignored): {e}")
            await self._apply(FetchFailed(sequence=sequence, message=e.user_message))
            return
        except Exception:
            logger.error(f"Unexpected error fetching train {entity_id}", exc_info=True)
            await self._apply(FetchFailed(sequence=sequence, message=UNEXPECTED_ERROR_MESSAGE))
            raise

        await self._apply(
            FetchSucceeded(sequence=sequence, snapshot=snapshot, received_at=self._clock())
        )
        logger.debug(f"Applied snapshot for train {entity_id} from request #{sequence}")

    async def _apply(self, event: RefreshEvent) -> None:
        new_state = reduce(self._state, event)
        if new_state is self._state:
            return
        self._state = new_state
        await self._publish()

    async def _publish(self) -> None:
        state = self._state
        snapshot = state.last_snapshot
        if snapshot is None:
            ordered_stations = ()
            position = None
        else:
            ordered_stations = consolidate(snapshot.visited_stations, snapshot.upcoming_stations)
            position = locate(ordered_stations, snapshot.distance_traveled, self.scale)

        self._view = TrackingView(
            state=state,
            ordered_stations=ordered_stations,
            position=position,
            center_viewport=self._centering.should_center(state.entity_id, position is not None),
        )
        await self.broadcaster.broadcast_update(self._view)
