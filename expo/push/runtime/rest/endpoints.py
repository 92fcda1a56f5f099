"""Expo push endpoint specifications."""

from __future__ import annotations

from typing import Any

from ...core.constants import RECEIPTS_PATH, SEND_PATH
from ...models.message import message_payload
from ...utils.retry import DEFAULT_RETRY_POLICY, RetryPolicy
from .runner import RestEndpointSpec


def send_spec(retry_policy: RetryPolicy = DEFAULT_RETRY_POLICY) -> RestEndpointSpec:
    """POST /push/send: concurrency limited, retried when rate limited."""

    def build_body(params: dict[str, Any]) -> list[dict[str, Any]]:
        return [message_payload(message) for message in params["messages"]]

    return RestEndpointSpec(
        id="push_send",
        method="POST",
        build_path=lambda p: SEND_PATH,
        build_body=build_body,
        concurrency_limited=True,
        retry_policy=retry_policy,
    )


def receipts_spec() -> RestEndpointSpec:
    """POST /push/getReceipts: a single plain request."""
    return RestEndpointSpec(
        id="push_get_receipts",
        method="POST",
        build_path=lambda p: RECEIPTS_PATH,
        build_body=lambda p: {"ids": list(p["receipt_ids"])},
    )
