"""Plain-text display adapter for terminals."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from ciphertrack.domain.models.display_preferences import DisplayPreferences
from ciphertrack.domain.models.refresh_state import RefreshPhase
from ciphertrack.domain.ports.display_adapter import DisplayAdapter

if TYPE_CHECKING:
    from ciphertrack.domain.models.route_position import RoutePosition
    from ciphertrack.domain.models.snapshot import Snapshot
    from ciphertrack.domain.models.station import Station
    from ciphertrack.domain.models.tracking_view import TrackingView

logger = logging.getLogger(__name__)

PROGRESS_BAR_WIDTH = 30
RESET = "\033[0m"
# (accent, muted) ANSI colors per theme
THEMES = {
    False: ("\033[34m", "\033[90m"),
    True: ("\033[96m", "\033[37m"),
}


class ConsoleDisplayAdapter(DisplayAdapter):
    """Renders tracking views as text on a stream."""

    def __init__(
        self,
        stream: TextIO | None = None,
        preferences: DisplayPreferences | None = None,
        delay_threshold_minutes: int = 10,
        use_color: bool = False,
    ) -> None:
        """Initialize the console adapter.

        Args:
            stream: Output stream, stdout by default.
            preferences: Dark mode and compact layout toggles.
            delay_threshold_minutes: Delays above this are shown as 'Delayed'.
            use_color: Emit ANSI colors (themed by dark mode).
        """
        self.stream = stream or sys.stdout
        self.preferences = preferences or DisplayPreferences()
        self.delay_threshold_minutes = delay_threshold_minutes
        self.use_color = use_color

    async def start(self) -> None:
        """Start the console adapter."""
        logger.debug("Console display adapter started")

    async def stop(self) -> None:
        """Stop the console adapter."""
        self.stream.flush()

    async def display(self, view: TrackingView) -> None:
        """Write a rendered view to the stream."""
        self.stream.write(self.render(view) + "\n")
        self.stream.flush()

    def render(self, view: TrackingView) -> str:
        """Render a view as text."""
        state = view.state
        if state.phase is RefreshPhase.IDLE:
            return "Enter a train number to start tracking."
        if state.phase is RefreshPhase.FETCHING_FOREGROUND:
            return f"Locating train {state.entity_id}..."
        if state.phase is RefreshPhase.ERROR_SHOWN:
            return self._accent(f"Error: {state.last_error}") + "\nSubmit a train number to retry."

        snapshot = state.last_snapshot
        if snapshot is None:
            return ""

        lines = self._render_header(snapshot)
        if state.is_updating:
            lines.append(self._muted("Refreshing..." if state.is_manual_refresh else "Updating..."))
        if state.last_updated_at is not None:
            lines.append(self._muted(f"Updated {state.last_updated_at.astimezone():%H:%M:%S}"))
        lines.append("")
        lines.extend(self._render_timeline(view.ordered_stations, view.position))
        return "\n".join(lines)

    def _render_header(self, snapshot: Snapshot) -> list[str]:
        if snapshot.is_delayed_by(self.delay_threshold_minutes):
            badge = f"Delayed {snapshot.delay_minutes} min"
        else:
            badge = "On Time"
        filled = round(snapshot.journey_percentage / 100 * PROGRESS_BAR_WIDTH)
        bar = "#" * filled + "-" * (PROGRESS_BAR_WIDTH - filled)

        lines = [
            self._accent(f"{snapshot.entity_id} {snapshot.display_name}") + f"  [{badge}]",
            f"{snapshot.origin_name} -> {snapshot.destination_name}",
            f"[{bar}] {snapshot.journey_percentage:.0f}%  "
            f"{snapshot.distance_traveled:g} / {snapshot.total_distance:g} km",
            f"Now at: {snapshot.current_location_display}",
        ]
        if snapshot.ahead_distance_text and not self.preferences.compact_layout:
            lines.append(f"        {snapshot.ahead_distance_text}")
        if snapshot.next_stop is not None:
            lines.append(f"Next:   {snapshot.next_stop.name} ({snapshot.next_stop.eta_text})")
        return lines

    def _render_timeline(
        self, stations: tuple[Station, ...], position: RoutePosition | None
    ) -> list[str]:
        lines = [f"Live Route - {len(stations)} stations"]
        if position is not None and position.is_at_start:
            lines.append(self._accent("  >> train"))
        for index, station in enumerate(stations):
            passed = position is not None and index <= position.segment_index
            marker = "o" if passed else "."
            line = f"  {marker} {station.name} ({station.code})  {station.estimated_arrival}"
            if station.is_late:
                line += f" +{station.arrival_delay_minutes}m"
            if not self.preferences.compact_layout:
                line += f"  sch {station.scheduled_arrival}/{station.scheduled_departure}"
                if station.platform:
                    line += f"  PF {station.platform}"
            lines.append(line if not passed else self._muted(line))
            if position is not None and index == position.segment_index:
                lines.append(self._accent(f"  >> train ({position.fraction:.0%} to next stop)"))
        return lines

    def _accent(self, text: str) -> str:
        if not self.use_color:
            return text
        return f"{THEMES[self.preferences.dark_mode][0]}{text}{RESET}"

    def _muted(self, text: str) -> str:
        if not self.use_color:
            return text
        return f"{THEMES[self.preferences.dark_mode][1]}{text}{RESET}"
