"""Domain layer - core models and interfaces."""

from ciphertrack.domain.models import (
    RefreshPhase,
    RefreshState,
    RoutePosition,
    Snapshot,
    Station,
    TrackingView,
)
from ciphertrack.domain.ports import DisplayAdapter

__all__ = [
    "DisplayAdapter",
    "RefreshPhase",
    "RefreshState",
    "RoutePosition",
    "Snapshot",
    "Station",
    "TrackingView",
]
