"""Position interpolation along a consolidated route."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from ciphertrack.domain.models.route_position import START_OF_ROUTE, RoutePosition
from ciphertrack.domain.models.station import Station

# Height of one timeline row, in display units
DEFAULT_UNIT_SIZE = 100.0
COMPACT_UNIT_SIZE = 80.0
# Offset of the first station marker from the top of the timeline
DEFAULT_LEADING_OFFSET = 24.0


@dataclass(frozen=True)
class PositionScale:
    """Maps (segment_index, fraction) onto a continuous visual offset."""

    unit_size: float = DEFAULT_UNIT_SIZE
    leading_offset: float = DEFAULT_LEADING_OFFSET

    @classmethod
    def for_layout(cls, compact: bool) -> "PositionScale":
        """Scale matching the comfortable or compact timeline layout."""
        return cls(unit_size=COMPACT_UNIT_SIZE if compact else DEFAULT_UNIT_SIZE)

    def offset(self, segment_index: int, fraction: float) -> float:
        """Visual offset for a position; the start marker maps to leading_offset."""
        return self.leading_offset + (max(segment_index, 0) + fraction) * self.unit_size


def _last_passed_index(stations: Sequence[Station], distance: float) -> int:
    """Greatest index whose station lies at or before distance, or START_OF_ROUTE."""
    index = START_OF_ROUTE
    for i, station in enumerate(stations):
        if station.distance_from_source <= distance:
            index = i
        else:
            break
    return index


def locate(
    ordered_stations: Sequence[Station],
    distance_traveled: float,
    scale: PositionScale | None = None,
) -> RoutePosition:
    """Locate the train between two consecutive stations.

    Stations must already be consolidated (ordered by distance). Distances
    before the first station report the start-of-route marker, distances at or
    after the last station pin the train to the final stop. Segments of zero
    length never divide; the fraction is clamped to [0, 1].

    Args:
        ordered_stations: Consolidated route.
        distance_traveled: Distance from source reported by the snapshot.
        scale: Visual scale for normalized_progress. Defaults to the
            comfortable layout.

    Returns:
        The interpolated position.
    """
    scale = scale or PositionScale()
    # NaN and negative distances count as not started; +inf pins to the end
    if math.isnan(distance_traveled) or distance_traveled < 0:
        distance_traveled = 0.0

    index = _last_passed_index(ordered_stations, distance_traveled)
    if index == START_OF_ROUTE:
        return RoutePosition(START_OF_ROUTE, 0.0, scale.offset(START_OF_ROUTE, 0.0))

    if index == len(ordered_stations) - 1:
        return RoutePosition(index, 0.0, scale.offset(index, 0.0))

    current = ordered_stations[index].distance_from_source
    dist_diff = ordered_stations[index + 1].distance_from_source - current
    if dist_diff <= 0:
        fraction = 0.0
    else:
        fraction = min(1.0, max(0.0, (distance_traveled - current) / dist_diff))

    return RoutePosition(index, fraction, scale.offset(index, fraction))
