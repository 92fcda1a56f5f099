"""Push message data model and recipient helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import PushPriority


class PushSound(BaseModel):
    """iOS sound options for a push message."""

    critical: bool | None = None
    name: Literal["default"] | None = None
    volume: float | None = Field(None, ge=0, le=1)

    model_config = ConfigDict(frozen=True)


class PushMessage(BaseModel):
    """A single push notification request.

    ``to`` is either one push token or a list of tokens. Every other field is
    opaque to the dispatch pipeline and is sent to Expo as-is; unknown fields
    are preserved so new service features do not require a client release.
    """

    to: str | list[str]
    data: dict[str, Any] | None = None
    title: str | None = None
    subtitle: str | None = None
    body: str | None = None
    sound: Literal["default"] | PushSound | None = None
    ttl: int | None = Field(None, ge=0)
    expiration: int | None = None
    priority: PushPriority | None = None
    badge: int | None = Field(None, ge=0)
    channel_id: str | None = Field(None, alias="channelId")
    category_id: str | None = Field(None, alias="categoryId")
    mutable_content: bool | None = Field(None, alias="mutableContent")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @property
    def recipient_count(self) -> int:
        """Number of tickets Expo returns for this message."""
        return len(self.to) if isinstance(self.to, list) else 1

    def to_payload(self) -> dict[str, Any]:
        """Wire representation (camelCase keys, unset fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


# Plain dicts are accepted wherever a PushMessage is
Message = Union[PushMessage, Mapping[str, Any]]


def get_recipients(message: Message) -> Any:
    """Return the raw ``to`` field of a message."""
    if isinstance(message, PushMessage):
        return message.to
    return message.get("to")


def recipient_count(message: Message) -> int:
    """Count recipients: a list counts by length, a scalar counts as one."""
    to = get_recipients(message)
    if isinstance(to, (list, tuple)):
        return len(to)
    return 1


def count_recipients(messages: Iterable[Message]) -> int:
    """Total number of tickets expected for a send request."""
    return sum(recipient_count(message) for message in messages)


def with_recipients(message: Message, to: list[str]) -> Message:
    """Shallow copy of ``message`` with only its ``to`` field replaced."""
    if isinstance(message, PushMessage):
        return message.model_copy(update={"to": list(to)})
    return {**message, "to": list(to)}


def message_payload(message: Message) -> dict[str, Any]:
    """JSON-ready body entry for a message."""
    if isinstance(message, PushMessage):
        return message.to_payload()
    return dict(message)
