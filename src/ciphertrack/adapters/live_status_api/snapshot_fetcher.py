"""Live-status snapshot fetcher adapter."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from ciphertrack.adapters.live_status_api.http_client import LiveStatusHttpClient
from ciphertrack.adapters.live_status_api.snapshot_parser import SnapshotParser
from ciphertrack.domain.contracts.snapshot_fetcher import SnapshotFetcherProtocol

if TYPE_CHECKING:
    import aiohttp

    from ciphertrack.adapters.config.app_config import AppConfig
    from ciphertrack.domain.models.snapshot import Snapshot

logger = logging.getLogger(__name__)


class LiveStatusSnapshotFetcher(SnapshotFetcherProtocol):
    """Fetches and validates one snapshot per call. Never retries or caches."""

    def __init__(self, session: aiohttp.ClientSession, config: AppConfig) -> None:
        """Initialize the fetcher.

        Args:
            session: Shared aiohttp session.
            config: Application configuration.
        """
        self._client = LiveStatusHttpClient(session, config)

    async def fetch(self, entity_id: str) -> Snapshot:
        """Fetch the current snapshot for a train.

        Raises:
            NetworkError: On transport failure.
            MalformedResponse: If the body cannot be parsed.
            NotFound: If the response names no train.
        """
        started = time.monotonic()
        body = await self._client.get_envelope(entity_id)
        snapshot = SnapshotParser.parse(body)
        logger.info(
            f"Fetched train {snapshot.entity_id or entity_id} "
            f"({len(snapshot.visited_stations)} visited, "
            f"{len(snapshot.upcoming_stations)} upcoming stations, "
            f"{time.monotonic() - started:.1f}s)"
        )
        return snapshot
