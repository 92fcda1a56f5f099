"""Core components."""

from .constants import (
    BASE_API_URL,
    BASE_URL,
    COMPRESSION_THRESHOLD_BYTES,
    DEFAULT_CONCURRENT_REQUEST_LIMIT,
    PUSH_NOTIFICATION_CHUNK_LIMIT,
    PUSH_NOTIFICATION_RECEIPT_CHUNK_LIMIT,
    RATE_LIMIT_STATUS,
    RECEIPTS_PATH,
    SEND_PATH,
    USER_AGENT,
)
from .enums import Compression, PushErrorCode, PushPriority, PushTicketStatus
from .exceptions import (
    ApiError,
    ProtocolError,
    PushError,
    TextResponseError,
    TicketCountMismatchError,
    UnexpectedPayloadError,
    is_rate_limit_error,
)

__all__ = [
    "BASE_URL",
    "BASE_API_URL",
    "SEND_PATH",
    "RECEIPTS_PATH",
    "PUSH_NOTIFICATION_CHUNK_LIMIT",
    "PUSH_NOTIFICATION_RECEIPT_CHUNK_LIMIT",
    "DEFAULT_CONCURRENT_REQUEST_LIMIT",
    "COMPRESSION_THRESHOLD_BYTES",
    "RATE_LIMIT_STATUS",
    "USER_AGENT",
    "Compression",
    "PushErrorCode",
    "PushPriority",
    "PushTicketStatus",
    "PushError",
    "ApiError",
    "TextResponseError",
    "ProtocolError",
    "TicketCountMismatchError",
    "UnexpectedPayloadError",
    "is_rate_limit_error",
]
