"""Response adapters for Expo push endpoints."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ...core.exceptions import TicketCountMismatchError, UnexpectedPayloadError
from ...models.ticket import (
    PUSH_RECEIPT_ADAPTER,
    PUSH_TICKET_ADAPTER,
    PushReceipt,
    PushTicket,
)
from .runner import ResponseAdapter

logger = logging.getLogger(__name__)


def _read_outcome(adapter: Any, entry: Any, key: int | str) -> Any:
    """Parse one ticket or receipt, keeping the raw entry if it is unreadable."""
    try:
        return adapter.validate_python(entry)
    except ValidationError as e:
        logger.warning(
            "outcome_unreadable",
            extra={"key": key, "error_count": e.error_count()},
        )
        return entry


class PushTicketsAdapter(ResponseAdapter):
    """Validates that one ticket came back per recipient, in order.

    Tickets that do not match a known shape are returned as the raw dicts
    Expo sent; the batch was already accepted, so nothing is dropped.
    """

    def parse(
        self, response: Any, params: dict[str, Any]
    ) -> list[PushTicket | dict[str, Any]]:
        expected = params["expected_count"]
        if not isinstance(response, list) or len(response) != expected:
            actual = len(response) if isinstance(response, list) else None
            logger.error(
                "ticket_count_mismatch",
                extra={"expected": expected, "actual": actual},
            )
            raise TicketCountMismatchError(expected, actual, data=response)

        return [
            _read_outcome(PUSH_TICKET_ADAPTER, entry, index)
            for index, entry in enumerate(response)
        ]


class PushReceiptsAdapter(ResponseAdapter):
    """Validates a mapping from receipt id to receipt."""

    def parse(
        self, response: Any, params: dict[str, Any]
    ) -> dict[str, PushReceipt | dict[str, Any]]:
        if not isinstance(response, dict):
            raise UnexpectedPayloadError(
                "Expected Expo to respond with a map from receipt IDs to receipts "
                "but received data of another type",
                data=response,
            )

        return {
            receipt_id: _read_outcome(PUSH_RECEIPT_ADAPTER, entry, receipt_id)
            for receipt_id, entry in response.items()
        }
