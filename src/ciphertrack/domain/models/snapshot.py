"""Snapshot domain model."""

from dataclasses import dataclass
from datetime import datetime

from ciphertrack.domain.models.next_stop import NextStop
from ciphertrack.domain.models.station import Station

# Delays above this many minutes are shown as "Delayed"
DEFAULT_DELAY_THRESHOLD_MINUTES = 10


@dataclass(frozen=True)
class Snapshot:
    """The full observed state of a train at one instant.

    Snapshots are immutable. A newer successful fetch supersedes a snapshot,
    it never mutates it. Station sequences are kept exactly as received, so
    they may be unsorted or overlap; use the route model to consolidate them.
    """

    entity_id: str
    display_name: str
    origin_name: str
    destination_name: str
    current_location_name: str
    current_location_code: str
    delay_minutes: int
    distance_traveled: float
    total_distance: float
    observed_at: datetime | None
    visited_stations: tuple[Station, ...] = ()
    upcoming_stations: tuple[Station, ...] = ()
    next_stop: NextStop | None = None
    ahead_distance_text: str | None = None

    @property
    def journey_percentage(self) -> float:
        """Share of the total distance already covered, clamped to [0, 100]."""
        if self.total_distance <= 0:
            return 0.0
        return min(100.0, max(0.0, self.distance_traveled / self.total_distance * 100))

    @property
    def is_delayed(self) -> bool:
        """Whether the delay exceeds the default threshold."""
        return self.is_delayed_by(DEFAULT_DELAY_THRESHOLD_MINUTES)

    def is_delayed_by(self, threshold_minutes: int) -> bool:
        """Whether the delay exceeds the given threshold in minutes."""
        return self.delay_minutes > threshold_minutes

    @property
    def current_location_display(self) -> str:
        """Current location name without the upstream '~' approximation markers."""
        return self.current_location_name.replace("~", "").strip()

    @property
    def current_station_index(self) -> int:
        """Index of the first upcoming stop when visited and upcoming are concatenated."""
        return len(self.visited_stations)
