"""Domain models for train tracking."""

from ciphertrack.domain.models.display_preferences import DisplayPreferences
from ciphertrack.domain.models.error_details import ErrorDetails
from ciphertrack.domain.models.fetch_error import (
    FetchError,
    MalformedResponse,
    NetworkError,
    NotFound,
)
from ciphertrack.domain.models.next_stop import NextStop
from ciphertrack.domain.models.refresh_event import (
    BackgroundFetchStarted,
    FetchFailed,
    FetchSucceeded,
    NavigatedBack,
    RefreshEvent,
    SearchSubmitted,
)
from ciphertrack.domain.models.refresh_state import RefreshPhase, RefreshState
from ciphertrack.domain.models.route_position import START_OF_ROUTE, RoutePosition
from ciphertrack.domain.models.snapshot import Snapshot
from ciphertrack.domain.models.station import Station
from ciphertrack.domain.models.tracking_view import TrackingView

__all__ = [
    "START_OF_ROUTE",
    "BackgroundFetchStarted",
    "DisplayPreferences",
    "ErrorDetails",
    "FetchError",
    "FetchFailed",
    "FetchSucceeded",
    "MalformedResponse",
    "NavigatedBack",
    "NetworkError",
    "NextStop",
    "NotFound",
    "RefreshEvent",
    "RefreshPhase",
    "RefreshState",
    "RoutePosition",
    "SearchSubmitted",
    "Snapshot",
    "Station",
    "TrackingView",
]
