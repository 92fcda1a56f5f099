"""Core enumerations for the push client.

Design Decisions:
    - String enums: values are the exact wire strings, so models and request
      options serialize without a mapping table
    - Closed error-code set: per-recipient delivery errors reported by Expo
"""

from __future__ import annotations

from enum import Enum


class Compression(str, Enum):
    """Request body compression mode.

    ENABLED streams the gzipped body to the server. NODE_COMPAT materializes
    the compressed body as bytes first, for transports that cannot send a
    streaming body. DISABLED always sends plain JSON.
    """

    ENABLED = "enabled"
    NODE_COMPAT = "node_compat"
    DISABLED = "disabled"

    @classmethod
    def from_value(cls, value: Compression | str) -> Compression:
        """Coerce a string option into a Compression member."""
        if isinstance(value, Compression):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(repr(member.value) for member in cls)
            raise ValueError(f"Invalid compression mode {value!r}; expected one of {valid}") from None


class PushTicketStatus(str, Enum):
    """Outcome status shared by tickets and receipts."""

    OK = "ok"
    ERROR = "error"


class PushErrorCode(str, Enum):
    """Machine-readable reason attached to an error ticket or receipt."""

    DEVICE_NOT_REGISTERED = "DeviceNotRegistered"
    INVALID_CREDENTIALS = "InvalidCredentials"
    MESSAGE_TOO_BIG = "MessageTooBig"
    MESSAGE_RATE_EXCEEDED = "MessageRateExceeded"


class PushPriority(str, Enum):
    """Delivery priority of a push message."""

    DEFAULT = "default"
    NORMAL = "normal"
    HIGH = "high"
