"""Events that drive the refresh state machine."""

from dataclasses import dataclass
from datetime import datetime

from ciphertrack.domain.models.snapshot import Snapshot


@dataclass(frozen=True)
class SearchSubmitted:
    """The user asked to track a train; starts a foreground fetch."""

    entity_id: str
    sequence: int


@dataclass(frozen=True)
class BackgroundFetchStarted:
    """A timer tick or manual refresh issued a non-blocking fetch."""

    sequence: int
    visible: bool = False  # True for user-triggered refreshes


@dataclass(frozen=True)
class FetchSucceeded:
    """A fetch tagged with sequence completed with a snapshot."""

    sequence: int
    snapshot: Snapshot
    received_at: datetime


@dataclass(frozen=True)
class FetchFailed:
    """A fetch tagged with sequence failed."""

    sequence: int
    message: str


@dataclass(frozen=True)
class NavigatedBack:
    """The user left the tracking screen."""


RefreshEvent = SearchSubmitted | BackgroundFetchStarted | FetchSucceeded | FetchFailed | NavigatedBack
