"""Tests for position interpolation."""

import math

import pytest

from ciphertrack.application.services import PositionScale, consolidate, locate
from ciphertrack.application.services.position_interpolator import (
    COMPACT_UNIT_SIZE,
    DEFAULT_LEADING_OFFSET,
    DEFAULT_UNIT_SIZE,
)
from ciphertrack.domain.models import START_OF_ROUTE
from tests.factories import make_station


@pytest.fixture
def three_stations() -> tuple:
    """Stations A at 0 km, B at 100 km and C at 250 km."""
    return (make_station("A", 0), make_station("B", 100), make_station("C", 250))


def test_when_between_stations_then_fraction_is_share_of_segment(three_stations: tuple) -> None:
    """Given d=150 between B (100) and C (250), when locating, then segment 1 with fraction 1/3."""
    position = locate(three_stations, 150)

    assert position.segment_index == 1
    assert position.fraction == pytest.approx(1 / 3)
    assert position.normalized_progress == pytest.approx(
        DEFAULT_LEADING_OFFSET + (1 + 1 / 3) * DEFAULT_UNIT_SIZE
    )


def test_when_no_upcoming_and_at_last_station_then_pinned_at_end() -> None:
    """Given visited [A 0, B 50] and no upcoming, when d=50, then pinned at index 1 with fraction 0."""
    route = consolidate([make_station("A", 0), make_station("B", 50)], [])

    position = locate(route, 50)

    assert position.segment_index == 1
    assert position.fraction == 0


def test_when_past_last_station_then_no_interpolation_beyond_end(three_stations: tuple) -> None:
    """Given d beyond the final stop, when locating, then pinned at the last index."""
    position = locate(three_stations, 900)

    assert position.segment_index == 2
    assert position.fraction == 0
    assert position.normalized_progress == pytest.approx(
        DEFAULT_LEADING_OFFSET + 2 * DEFAULT_UNIT_SIZE
    )


def test_when_before_first_station_then_start_of_route() -> None:
    """Given d before the first station, when locating, then start-of-route marker."""
    stations = (make_station("A", 10), make_station("B", 100))

    position = locate(stations, 5)

    assert position.segment_index == START_OF_ROUTE
    assert position.is_at_start
    assert position.fraction == 0
    assert position.normalized_progress == DEFAULT_LEADING_OFFSET


def test_when_route_empty_then_start_of_route() -> None:
    """Given no stations, when locating, then start-of-route marker."""
    position = locate((), 42)

    assert position.segment_index == START_OF_ROUTE
    assert position.fraction == 0


def test_when_exactly_at_station_then_fraction_is_zero(three_stations: tuple) -> None:
    """Given d equal to a station distance, when locating, then that station with fraction 0."""
    position = locate(three_stations, 100)

    assert position.segment_index == 1
    assert position.fraction == 0


def test_when_adjacent_stations_share_distance_then_fraction_is_finite() -> None:
    """Given a zero-length segment, when locating, then fraction is 0 and never NaN."""
    stations = (make_station("A", 0), make_station("B", 100), make_station("C", 100))

    position = locate(stations, 100)

    assert math.isfinite(position.fraction)
    assert math.isfinite(position.normalized_progress)
    assert position.segment_index == 2


def test_when_stations_share_distance_before_train_then_last_of_them_is_passed() -> None:
    """Given two stations at the same distance, when the train is past them, then the later index is used."""
    stations = (make_station("A", 0), make_station("B", 0), make_station("C", 50))

    position = locate(stations, 25)

    assert position.segment_index == 1
    assert position.fraction == pytest.approx(0.5)


@pytest.mark.parametrize("distance", [-10.0, float("nan"), float("-inf")])
def test_when_distance_is_invalid_then_treated_as_zero(distance: float) -> None:
    """Given a negative or NaN distance, when locating, then it is treated as 0."""
    stations = (make_station("A", 0), make_station("B", 100))

    position = locate(stations, distance)

    assert position.segment_index == 0
    assert position.fraction == 0


def test_when_distance_is_infinite_then_pinned_like_any_overshoot(three_stations: tuple) -> None:
    """Given d=+inf, when locating, then the position matches a huge finite overshoot."""
    overshoot = locate(three_stations, 1e300)

    position = locate(three_stations, math.inf)

    assert position == overshoot
    assert position.segment_index == 2
    assert position.fraction == 0
    assert position.normalized_progress == pytest.approx(
        DEFAULT_LEADING_OFFSET + 2 * DEFAULT_UNIT_SIZE
    )


def test_compact_layout_uses_smaller_unit_size(three_stations: tuple) -> None:
    """Given the compact scale, when locating, then progress uses the compact unit size."""
    position = locate(three_stations, 250, PositionScale.for_layout(compact=True))

    assert position.normalized_progress == pytest.approx(
        DEFAULT_LEADING_OFFSET + 2 * COMPACT_UNIT_SIZE
    )


def test_progress_is_monotonic_and_bounded() -> None:
    """Given a route with a degenerate segment, when sweeping d, then progress never decreases."""
    stations = (
        make_station("A", 10),
        make_station("B", 60),
        make_station("C", 60),
        make_station("D", 200),
        make_station("E", 205),
    )
    scale = PositionScale(unit_size=50, leading_offset=7)
    lower = scale.leading_offset
    upper = scale.leading_offset + (len(stations) - 1) * scale.unit_size

    previous = -math.inf
    for step in range(0, 2600):
        progress = locate(stations, step / 10, scale).normalized_progress
        assert progress >= previous
        assert lower <= progress <= upper
        previous = progress
