"""HTTP client for the live-status service.

Requests go through an intermediary proxy that wraps the upstream response
in a JSON envelope: {"contents": "<upstream body as a string>"}.
"""

from __future__ import annotations

import codecs
import logging
from typing import TYPE_CHECKING

import aiohttp

from ciphertrack.adapters.api_request_logger import log_api_request, log_api_response
from ciphertrack.domain.models.error_details import ErrorDetails
from ciphertrack.domain.models.fetch_error import MalformedResponse, NetworkError

if TYPE_CHECKING:
    from ciphertrack.adapters.config.app_config import AppConfig

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "accept": "application/json",
    "user-agent": "Mozilla/5.0",
}


class LiveStatusHttpClient:
    """Performs the raw GET through the proxy and returns the envelope body."""

    def __init__(self, session: aiohttp.ClientSession, config: AppConfig) -> None:
        """Initialize with a shared aiohttp session.

        Args:
            session: Session used for every request.
            config: Application configuration (proxy, upstream template, timeout).
        """
        self._session = session
        self._config = config

    def build_upstream_url(self, entity_id: str) -> str:
        """Upstream live-status URL for a train."""
        return self._config.upstream_url_template.format(entity_id=entity_id)

    def build_params(self, entity_id: str) -> dict[str, str]:
        """Query parameters asking the proxy for the upstream URL."""
        return {"url": self.build_upstream_url(entity_id)}

    async def get_envelope(self, entity_id: str) -> str:
        """Fetch the raw proxy envelope for a train.

        Args:
            entity_id: Train number.

        Returns:
            The response body text (not yet parsed).

        Raises:
            NetworkError: On non-success status, timeout or connection error.
            MalformedResponse: If a successful body cannot be decoded.
        """
        url = self._config.proxy_url
        params = self.build_params(entity_id)
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout_seconds)
        log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, params=params, headers=DEFAULT_HEADERS, timeout=timeout
            ) as response:
                raw = await response.read()
                charset = self._charset(response.charset)
                body = raw.decode(charset, errors="replace")
                log_api_response(url, response.status, body)
                if response.status != 200:
                    details = ErrorDetails.from_status(response.status)
                    logger.error(
                        f"Live-status proxy returned status {response.status} for train "
                        f"{entity_id}: {body[:200] if body else '(empty response body)'}"
                    )
                    raise NetworkError(
                        f"{details.reason} (status: {details.status_code})", details=details
                    )
                return self._decode_strict(raw, charset, entity_id)
        except TimeoutError as e:
            raise NetworkError(
                f"Request for train {entity_id} timed out",
                details=ErrorDetails(reason="Timeout"),
            ) from e
        except aiohttp.ClientError as e:
            raise NetworkError(
                f"Connection error for train {entity_id}: {e}",
                details=ErrorDetails(reason="Connection error"),
            ) from e

    @staticmethod
    def _decode_strict(raw: bytes, charset: str, entity_id: str) -> str:
        """Decode a successful response body, rejecting undecodable bytes."""
        try:
            return raw.decode(charset)
        except UnicodeDecodeError as e:
            raise MalformedResponse(
                f"Response for train {entity_id} is not valid {charset}: {e}"
            ) from e

    @staticmethod
    def _charset(declared: str | None) -> str:
        """Declared response charset, or utf-8 when missing or unknown."""
        if not declared:
            return "utf-8"
        try:
            codecs.lookup(declared)
        except LookupError:
            logger.warning(f"Unknown response charset {declared!r}, decoding as utf-8")
            return "utf-8"
        return declared
