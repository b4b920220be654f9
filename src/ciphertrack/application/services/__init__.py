"""Application services."""

from ciphertrack.application.services.position_interpolator import PositionScale, locate
from ciphertrack.application.services.refresh_controller import RefreshController
from ciphertrack.application.services.refresh_reducer import reduce
from ciphertrack.application.services.route_model import consolidate
from ciphertrack.application.services.viewport_centering import ViewportCenteringTrigger

__all__ = [
    "PositionScale",
    "RefreshController",
    "ViewportCenteringTrigger",
    "consolidate",
    "locate",
    "reduce",
]
