"""Parser for live-status responses wrapped in the proxy envelope."""

import json
import logging
import math
from datetime import datetime
from typing import Any

from ciphertrack.domain.models.fetch_error import MalformedResponse, NotFound
from ciphertrack.domain.models.next_stop import NextStop
from ciphertrack.domain.models.snapshot import Snapshot
from ciphertrack.domain.models.station import Station

logger = logging.getLogger(__name__)


class SnapshotParser:
    """Parses proxy envelopes into Snapshot objects."""

    @staticmethod
    def parse(body: str) -> Snapshot:
        """Parse a raw proxy response body.

        Args:
            body: Envelope text, {"contents": "<upstream JSON as a string>"}.

        Returns:
            The validated snapshot.

        Raises:
            MalformedResponse: If the envelope or the inner payload is not a JSON object.
            NotFound: If the payload names no train.
        """
        payload = SnapshotParser.unwrap_envelope(body)
        return SnapshotParser.parse_payload(payload)

    @staticmethod
    def unwrap_envelope(body: str) -> dict[str, Any]:
        """Decode the envelope and parse its contents a second time."""
        try:
            envelope = json.loads(body)
        except (TypeError, ValueError) as e:
            raise MalformedResponse(f"Envelope is not valid JSON: {e}") from e
        if not isinstance(envelope, dict):
            raise MalformedResponse("Envelope is not a JSON object")

        contents = envelope.get("contents")
        if not isinstance(contents, str):
            raise MalformedResponse("Envelope has no 'contents' string")

        try:
            payload = json.loads(contents)
        except ValueError as e:
            raise MalformedResponse(f"Envelope contents are not valid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise MalformedResponse("Envelope contents are not a JSON object")
        return payload

    @staticmethod
    def parse_payload(payload: dict[str, Any]) -> Snapshot:
        """Build a Snapshot from the decoded live-status payload."""
        entity_id = SnapshotParser._text(payload.get("train_number"))
        display_name = SnapshotParser._text(payload.get("train_name"))
        if not entity_id and not display_name:
            raise NotFound("Response names no train (no train_number or train_name)")

        next_stop = SnapshotParser._parse_next_stop(payload.get("next_stoppage_info"))

        return Snapshot(
            entity_id=entity_id,
            display_name=display_name,
            origin_name=SnapshotParser._text(payload.get("source_stn_name")),
            destination_name=SnapshotParser._text(payload.get("dest_stn_name")),
            current_location_name=SnapshotParser._text(payload.get("current_station_name")),
            current_location_code=SnapshotParser._text(payload.get("current_station_code")),
            delay_minutes=SnapshotParser._int(payload.get("delay")),
            distance_traveled=SnapshotParser._distance(payload.get("distance_from_source")),
            total_distance=SnapshotParser._distance(payload.get("total_distance")),
            observed_at=SnapshotParser._parse_time(payload.get("update_time")),
            visited_stations=SnapshotParser._parse_stations(payload.get("previous_stations")),
            upcoming_stations=SnapshotParser._parse_stations(payload.get("upcoming_stations")),
            next_stop=next_stop,
            ahead_distance_text=SnapshotParser._text(payload.get("ahead_distance_text")) or None,
        )

    @staticmethod
    def _parse_stations(raw: Any) -> tuple[Station, ...]:
        """Parse a station list, skipping entries that are not objects or name no station."""
        if raw is None:
            return ()
        if not isinstance(raw, list):
            logger.warning(f"Expected a list of stations, got {type(raw).__name__}")
            return ()

        stations = []
        for entry in raw:
            if not isinstance(entry, dict):
                logger.warning(f"Skipping station entry that is not an object: {entry!r}")
                continue
            station = SnapshotParser._parse_station(entry)
            if station is not None:
                stations.append(station)
        return tuple(stations)

    @staticmethod
    def _parse_station(entry: dict[str, Any]) -> Station | None:
        """Parse a single station entry.

        The station code identifies a station within the route. Entries
        without a code fall back to the station name; entries with neither are
        dropped.
        """
        code = SnapshotParser._text(entry.get("station_code"))
        name = SnapshotParser._text(entry.get("station_name"))
        if not code:
            if not name:
                logger.warning(f"Skipping station entry without code or name: {entry!r}")
                return None
            logger.warning(f"Station {name!r} has no station_code, using its name as code")
            code = name

        return Station(
            code=code,
            name=name,
            distance_from_source=SnapshotParser._distance(entry.get("distance_from_source")),
            scheduled_arrival=SnapshotParser._text(entry.get("sta")),
            scheduled_departure=SnapshotParser._text(entry.get("std")),
            estimated_arrival=SnapshotParser._text(entry.get("eta")),
            estimated_departure=SnapshotParser._text(entry.get("etd")),
            halt_minutes=max(0, SnapshotParser._int(entry.get("halt"))),
            arrival_delay_minutes=SnapshotParser._int(entry.get("arrival_delay")),
            platform=SnapshotParser._platform(entry.get("platform_number")),
            distance_from_current_text=(
                SnapshotParser._text(entry.get("distance_from_current_station_txt")) or None
            ),
        )

    @staticmethod
    def _parse_next_stop(raw: Any) -> NextStop | None:
        """Parse next_stoppage_info if it names a stop."""
        if not isinstance(raw, dict):
            return None
        name = SnapshotParser._text(raw.get("next_stoppage"))
        if not name:
            return None
        return NextStop(name=name, eta_text=SnapshotParser._text(raw.get("next_stoppage_time_diff")))

    @staticmethod
    def _text(value: Any) -> str:
        """Stringify a scalar, mapping None to an empty string."""
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _int(value: Any) -> int:
        """Parse an integer, defaulting to 0 on noisy data."""
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return 0

    @staticmethod
    def _distance(value: Any) -> float:
        """Parse a non-negative finite distance, defaulting to 0."""
        try:
            distance = float(value)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(distance) or distance < 0:
            return 0.0
        return distance

    @staticmethod
    def _platform(value: Any) -> str | None:
        """Platform as text; 0 and empty values mean unknown."""
        text = SnapshotParser._text(value)
        if not text or text == "0":
            return None
        return text

    @staticmethod
    def _parse_time(value: Any) -> datetime | None:
        """Parse ISO 8601 time string."""
        if not isinstance(value, str) or not value:
            return None

        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.debug(f"Unparseable update_time: {value!r}")
            return None
