"""Protocols (contracts) between the application core and its adapters."""

from ciphertrack.domain.contracts.preferences_store import PreferencesStoreProtocol
from ciphertrack.domain.contracts.refresh_timer import RefreshTimerProtocol
from ciphertrack.domain.contracts.snapshot_fetcher import SnapshotFetcherProtocol
from ciphertrack.domain.contracts.state_broadcaster import StateBroadcasterProtocol

__all__ = [
    "PreferencesStoreProtocol",
    "RefreshTimerProtocol",
    "SnapshotFetcherProtocol",
    "StateBroadcasterProtocol",
]
