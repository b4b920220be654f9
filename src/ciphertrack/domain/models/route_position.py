"""Route position domain model."""

from dataclasses import dataclass

# Segment index reported when the train has not reached the first station
START_OF_ROUTE = -1


@dataclass(frozen=True)
class RoutePosition:
    """Where the train sits between two consecutive stations of a route.

    segment_index is the index of the last station passed (START_OF_ROUTE
    before the first one), fraction is the share of the following segment
    already covered, and normalized_progress is the continuous visual offset
    derived from both.
    """

    segment_index: int
    fraction: float
    normalized_progress: float

    @property
    def is_at_start(self) -> bool:
        """Whether the train is positioned before the first station."""
        return self.segment_index == START_OF_ROUTE
