"""Push ticket and receipt models.

A ticket is returned for every recipient of a send request, in the same
order as the flattened recipient list. A receipt is fetched later by the
ticket's id and reports whether delivery to the platform service worked.

Both are tagged on ``status``: ``"ok"`` or ``"error"``. Error outcomes are
data, not exceptions; they concern a single recipient only.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..core.enums import PushErrorCode


class PushErrorDetails(BaseModel):
    """Structured reason of an error outcome.

    Codes outside the known set are kept as plain strings.
    """

    error: Annotated[Union[PushErrorCode, str], Field(union_mode="left_to_right")] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class PushSuccessTicket(BaseModel):
    """Expo accepted the message for this recipient."""

    status: Literal["ok"]
    id: str | None = Field(None, description="Receipt id")
    details: dict[str, Any] | None = None
    debug: Any = Field(None, alias="__debug")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class PushErrorReceipt(BaseModel):
    """Expo could not deliver to this recipient."""

    status: Literal["error"]
    message: str = ""
    details: PushErrorDetails | None = None
    debug: Any = Field(None, alias="__debug")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @property
    def error_code(self) -> PushErrorCode | str | None:
        return self.details.error if self.details else None


# Error tickets and error receipts share one shape
PushErrorTicket = PushErrorReceipt


class PushSuccessReceipt(BaseModel):
    """Delivery to the platform push service succeeded."""

    status: Literal["ok"]
    details: dict[str, Any] | None = None
    debug: Any = Field(None, alias="__debug")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


PushTicket = Annotated[Union[PushSuccessTicket, PushErrorTicket], Field(discriminator="status")]
PushReceipt = Annotated[Union[PushSuccessReceipt, PushErrorReceipt], Field(discriminator="status")]

# Single-outcome adapters; batches are parsed entry by entry
PUSH_TICKET_ADAPTER: TypeAdapter[PushTicket] = TypeAdapter(PushTicket)
PUSH_RECEIPT_ADAPTER: TypeAdapter[PushReceipt] = TypeAdapter(PushReceipt)
