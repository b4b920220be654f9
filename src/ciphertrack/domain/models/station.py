"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents one stop on a train's route."""

    code: str
    name: str
    distance_from_source: float  # km along the route; defines the route order
    scheduled_arrival: str = ""
    scheduled_departure: str = ""
    estimated_arrival: str = ""
    estimated_departure: str = ""
    halt_minutes: int = 0
    arrival_delay_minutes: int = 0  # Positive means late
    platform: str | None = None
    distance_from_current_text: str | None = None  # Upstream text, e.g. "12 km ahead"

    @property
    def is_late(self) -> bool:
        """Whether the train is expected to arrive here late."""
        return self.arrival_delay_minutes > 0
