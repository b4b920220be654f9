"""Pure state transitions for the refresh state machine."""

import logging
from dataclasses import replace

from ciphertrack.domain.models.refresh_event import (
    BackgroundFetchStarted,
    FetchFailed,
    FetchSucceeded,
    NavigatedBack,
    RefreshEvent,
    SearchSubmitted,
)
from ciphertrack.domain.models.refresh_state import RefreshPhase, RefreshState

logger = logging.getLogger(__name__)


def _is_current(state: RefreshState, sequence: int) -> bool:
    """Whether a completion belongs to the request currently in flight."""
    return state.in_flight_sequence is not None and state.in_flight_sequence == sequence


def _on_search_submitted(state: RefreshState, event: SearchSubmitted) -> RefreshState:  # noqa: ARG001
    return RefreshState(
        phase=RefreshPhase.FETCHING_FOREGROUND,
        entity_id=event.entity_id,
        in_flight_sequence=event.sequence,
    )


def _on_background_started(state: RefreshState, event: BackgroundFetchStarted) -> RefreshState:
    if state.phase is not RefreshPhase.READY or state.has_request_in_flight:
        logger.debug(f"Ignoring background fetch #{event.sequence} in phase {state.phase.value}")
        return state
    return replace(
        state,
        is_updating=True,
        is_manual_refresh=event.visible,
        in_flight_sequence=event.sequence,
    )


def _on_fetch_succeeded(state: RefreshState, event: FetchSucceeded) -> RefreshState:
    if not _is_current(state, event.sequence):
        logger.debug(f"Discarding stale snapshot from request #{event.sequence}")
        return state
    return replace(
        state,
        phase=RefreshPhase.READY,
        last_snapshot=event.snapshot,
        last_error=None,
        last_updated_at=event.received_at,
        is_updating=False,
        is_manual_refresh=False,
        in_flight_sequence=None,
    )


def _on_fetch_failed(state: RefreshState, event: FetchFailed) -> RefreshState:
    if not _is_current(state, event.sequence):
        logger.debug(f"Discarding stale failure from request #{event.sequence}")
        return state
    if state.phase is RefreshPhase.FETCHING_FOREGROUND:
        return replace(
            state,
            phase=RefreshPhase.ERROR_SHOWN,
            last_snapshot=None,
            last_error=event.message,
            is_updating=False,
            is_manual_refresh=False,
            in_flight_sequence=None,
        )
    # Background failures leave the visible state untouched
    return replace(state, is_updating=False, is_manual_refresh=False, in_flight_sequence=None)


def reduce(state: RefreshState, event: RefreshEvent) -> RefreshState:
    """Apply one event to a refresh state.

    Completions are matched against the in-flight sequence number; anything
    else is stale and leaves the state unchanged.

    Args:
        state: Current state.
        event: Event to apply.

    Returns:
        The next state (possibly the same object).
    """
    if isinstance(event, SearchSubmitted):
        return _on_search_submitted(state, event)
    if isinstance(event, BackgroundFetchStarted):
        return _on_background_started(state, event)
    if isinstance(event, FetchSucceeded):
        return _on_fetch_succeeded(state, event)
    if isinstance(event, FetchFailed):
        return _on_fetch_failed(state, event)
    if isinstance(event, NavigatedBack):
        return RefreshState()
    raise TypeError(f"Unknown refresh event: {event!r}")
