"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any

from .constants import RATE_LIMIT_STATUS


class PushError(Exception):
    """Base exception for all library errors."""

    pass


class ApiError(PushError):
    """Error reported by the Expo push service.

    Built from the first entry of an ``{"errors": [...]}`` envelope. When the
    service reports several errors at once, the remaining entries are kept in
    ``others`` in the order the server sent them.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
        details: Any = None,
        server_stack: str | None = None,
        others: list[ApiError] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details
        self.server_stack = server_stack
        self.others = others or []

    @property
    def is_rate_limited(self) -> bool:
        """Whether the service asked the client to slow down."""
        return self.status_code == RATE_LIMIT_STATUS


class TextResponseError(ApiError):
    """Response that carried no usable errors envelope.

    Raised for non-JSON bodies and for JSON error bodies without a non-empty
    ``errors`` list. ``error_data`` holds the parsed body in the latter case.
    """

    def __init__(self, status_code: int, error_text: str, error_data: Any = None) -> None:
        super().__init__(
            f"Expo responded with an error with status code {status_code}: {error_text}",
            status_code=status_code,
        )
        self.error_text = error_text
        self.error_data = error_data


class ProtocolError(PushError):
    """Service responded successfully but with a payload of the wrong shape."""

    def __init__(self, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.data = data


class TicketCountMismatchError(ProtocolError):
    """Number of tickets differs from the number of recipients sent."""

    def __init__(self, expected: int, actual: int | None, data: Any = None) -> None:
        noun = "ticket" if expected == 1 else "tickets"
        got = actual if actual is not None else f"data of type {type(data).__name__}"
        super().__init__(
            f"Expected Expo to respond with {expected} {noun} but got {got}",
            data=data,
        )
        self.expected = expected
        self.actual = actual


class UnexpectedPayloadError(ProtocolError):
    """Payload could not be read as tickets or receipts."""

    pass


def is_rate_limit_error(error: BaseException) -> bool:
    """Retry predicate: only rate-limited API errors are retried."""
    return isinstance(error, ApiError) and error.is_rate_limited
