"""Protocol for fetching train snapshots."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ciphertrack.domain.models.snapshot import Snapshot


class SnapshotFetcherProtocol(Protocol):
    """Protocol for one round trip to the live-status source."""

    async def fetch(self, entity_id: str) -> "Snapshot":
        """Fetch the current snapshot for a train.

        Performs exactly one outbound request and never caches or retries.

        Args:
            entity_id: The train number to look up.

        Returns:
            The validated snapshot.

        Raises:
            FetchError: NetworkError, MalformedResponse or NotFound.
        """
        ...
