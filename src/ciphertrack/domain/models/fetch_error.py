"""Errors raised when a snapshot cannot be fetched."""

from ciphertrack.domain.models.error_details import ErrorDetails


class FetchError(Exception):
    """Base class for every failure to obtain a snapshot.

    Carries a message suitable for showing to the user and, where the failure
    came from the transport, the HTTP details behind it.
    """

    default_user_message = "Could not load live status."

    def __init__(
        self,
        message: str,
        details: ErrorDetails | None = None,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.details = details
        self.user_message = user_message or self.default_user_message


class NetworkError(FetchError):
    """Transport failure: non-success status, timeout or connection error."""

    default_user_message = "Network error. Check your connection and try again."


class MalformedResponse(FetchError):
    """The response body could not be parsed."""

    default_user_message = "Received an unreadable response from the live-status service."


class NotFound(FetchError):
    """The response was well-formed but identified no train."""

    default_user_message = "Train not found. Check the number and try again."
