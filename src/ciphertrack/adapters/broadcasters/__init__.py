"""Broadcasters for tracking views."""

from ciphertrack.adapters.broadcasters.state_broadcaster import StateBroadcaster

__all__ = ["StateBroadcaster"]
