"""Live-status API adapter."""

from ciphertrack.adapters.live_status_api.http_client import LiveStatusHttpClient
from ciphertrack.adapters.live_status_api.snapshot_fetcher import LiveStatusSnapshotFetcher
from ciphertrack.adapters.live_status_api.snapshot_parser import SnapshotParser

__all__ = ["LiveStatusHttpClient", "LiveStatusSnapshotFetcher", "SnapshotParser"]
