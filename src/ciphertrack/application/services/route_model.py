"""Route consolidation."""

import logging
from collections.abc import Iterable

from ciphertrack.domain.models.station import Station

logger = logging.getLogger(__name__)


def consolidate(visited: Iterable[Station], upcoming: Iterable[Station]) -> tuple[Station, ...]:
    """Merge visited and upcoming stations into one ordered route.

    The two lists are concatenated (visited first), sorted by distance from
    source and de-duplicated by station code, keeping the first occurrence
    after sorting. The sort is stable, so stations sharing a distance keep
    their concatenation order.

    Args:
        visited: Stations the train has already passed, in any order.
        upcoming: Stations still ahead, in any order.

    Returns:
        The consolidated route, ordered by distance from source.
    """
    combined = [*visited, *upcoming]
    ordered = sorted(combined, key=lambda station: station.distance_from_source)

    seen: set[str] = set()
    route: list[Station] = []
    for station in ordered:
        if station.code in seen:
            continue
        seen.add(station.code)
        route.append(station)

    if len(route) != len(combined):
        logger.debug(f"Dropped {len(combined) - len(route)} duplicate station(s) from route")

    return tuple(route)
