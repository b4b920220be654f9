"""Refresh state domain model."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ciphertrack.domain.models.snapshot import Snapshot


class RefreshPhase(Enum):
    """Visible phase of a tracking session."""

    IDLE = "idle"
    FETCHING_FOREGROUND = "fetching_foreground"
    READY = "ready"
    ERROR_SHOWN = "error_shown"


@dataclass(frozen=True)
class RefreshState:
    """State of one tracking session, owned by the refresh controller."""

    phase: RefreshPhase = RefreshPhase.IDLE
    last_snapshot: Snapshot | None = None
    last_error: str | None = None
    last_updated_at: datetime | None = None
    entity_id: str | None = None
    is_updating: bool = False  # Non-blocking indicator, never the full-screen loading view
    is_manual_refresh: bool = False  # The running refresh was requested by the user
    in_flight_sequence: int | None = None  # Sequence number of the outstanding request

    @property
    def has_request_in_flight(self) -> bool:
        """Whether a fetch has been issued and not yet applied."""
        return self.in_flight_sequence is not None
