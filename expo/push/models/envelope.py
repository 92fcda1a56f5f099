"""Raw Expo API error entries.

Every response body has the shape ``{"data": ...}`` on success or
``{"errors": [{"message", "code", "details"?, "stack"?}, ...]}`` on failure.
The errors form may arrive with any HTTP status, including 200.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ApiErrorPayload(BaseModel):
    """One entry of the ``errors`` list.

    Fields are copied leniently: a missing or null message becomes ``""`` and
    non-string codes are stringified, so one sloppy entry never hides the
    others.
    """

    message: str = ""
    code: str | None = None
    details: Any = None
    stack: str | None = Field(None, description="Server stack trace (diagnostic only)")

    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("message", mode="before")
    @classmethod
    def _coerce_message(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("code", "stack", mode="before")
    @classmethod
    def _coerce_optional_text(cls, value: Any) -> str | None:
        return None if value is None else str(value)
