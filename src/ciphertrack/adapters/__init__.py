"""Adapters layer - external system integrations."""

from ciphertrack.adapters.config import AppConfig
from ciphertrack.adapters.live_status_api import LiveStatusSnapshotFetcher

__all__ = [
    "AppConfig",
    "LiveStatusSnapshotFetcher",
]
