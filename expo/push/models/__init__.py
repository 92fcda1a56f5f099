"""Data models for push messages and outcomes.

Architecture:
    This module exports the Pydantic v2 models used throughout the library.
    All models are immutable (frozen=True) so a message fragment produced by
    the chunker can never alias and mutate the caller's original message.

Model Categories:
    - Requests: PushMessage, PushSound
    - Outcomes: PushTicket, PushReceipt and their ok/error variants
    - Wire: ApiErrorPayload
"""

from .envelope import ApiErrorPayload
from .message import (
    Message,
    PushMessage,
    PushSound,
    count_recipients,
    get_recipients,
    message_payload,
    recipient_count,
    with_recipients,
)
from .ticket import (
    PUSH_RECEIPT_ADAPTER,
    PUSH_TICKET_ADAPTER,
    PushErrorDetails,
    PushErrorReceipt,
    PushErrorTicket,
    PushReceipt,
    PushSuccessReceipt,
    PushSuccessTicket,
    PushTicket,
)

__all__ = [
    "ApiErrorPayload",
    "Message",
    "PushMessage",
    "PushSound",
    "count_recipients",
    "get_recipients",
    "message_payload",
    "recipient_count",
    "with_recipients",
    "PUSH_RECEIPT_ADAPTER",
    "PUSH_TICKET_ADAPTER",
    "PushErrorDetails",
    "PushErrorReceipt",
    "PushErrorTicket",
    "PushReceipt",
    "PushSuccessReceipt",
    "PushSuccessTicket",
    "PushTicket",
]
