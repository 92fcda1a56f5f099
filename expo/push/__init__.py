"""Expo Push - async client for the Expo push notification service."""

from .clients import PushClient
from .core import (
    BASE_API_URL,
    BASE_URL,
    PUSH_NOTIFICATION_CHUNK_LIMIT,
    PUSH_NOTIFICATION_RECEIPT_CHUNK_LIMIT,
    ApiError,
    Compression,
    ProtocolError,
    PushError,
    PushErrorCode,
    PushPriority,
    PushTicketStatus,
    TextResponseError,
    TicketCountMismatchError,
    UnexpectedPayloadError,
)
from .models import (
    PushErrorDetails,
    PushErrorReceipt,
    PushErrorTicket,
    PushMessage,
    PushReceipt,
    PushSound,
    PushSuccessReceipt,
    PushSuccessTicket,
    PushTicket,
)
from .utils import RetryPolicy, is_push_token

__version__ = "0.1.0"

__all__ = [
    # Client
    "PushClient",
    # Models
    "PushMessage",
    "PushSound",
    "PushTicket",
    "PushSuccessTicket",
    "PushErrorTicket",
    "PushReceipt",
    "PushSuccessReceipt",
    "PushErrorReceipt",
    "PushErrorDetails",
    # Enums
    "Compression",
    "PushErrorCode",
    "PushPriority",
    "PushTicketStatus",
    # Exceptions
    "PushError",
    "ApiError",
    "TextResponseError",
    "ProtocolError",
    "TicketCountMismatchError",
    "UnexpectedPayloadError",
    # Utilities
    "RetryPolicy",
    "is_push_token",
    # Constants
    "BASE_URL",
    "BASE_API_URL",
    "PUSH_NOTIFICATION_CHUNK_LIMIT",
    "PUSH_NOTIFICATION_RECEIPT_CHUNK_LIMIT",
]
