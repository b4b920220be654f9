"""Published tracking view."""

from dataclasses import dataclass

from ciphertrack.domain.models.refresh_state import RefreshState
from ciphertrack.domain.models.route_position import RoutePosition
from ciphertrack.domain.models.station import Station


@dataclass(frozen=True)
class TrackingView:
    """Everything the presentation layer needs to render one session."""

    state: RefreshState
    ordered_stations: tuple[Station, ...] = ()
    position: RoutePosition | None = None
    center_viewport: bool = False  # True only on the first view for a new train
