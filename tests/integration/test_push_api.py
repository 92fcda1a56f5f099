"""Integration tests against the live Expo push service."""

from __future__ import annotations

import os

import pytest

from expo.push import PushErrorTicket, PushSuccessTicket

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_EXPO_NETWORK_TESTS") != "1",
    reason="Requires network access to the Expo push service",
)


@pytest.mark.asyncio
async def test_send_returns_one_ticket_per_recipient(push_client, fake_token):
    tickets = await push_client.send_push_notifications(
        [{"to": [fake_token, fake_token], "body": "integration test"}]
    )

    assert len(tickets) == 2
    assert all(isinstance(t, (PushSuccessTicket, PushErrorTicket)) for t in tickets)


@pytest.mark.asyncio
async def test_chunked_send_keeps_alignment(push_client, fake_token):
    messages = [{"to": [fake_token] * 3, "body": "chunked"}, {"to": fake_token}]

    tickets = await push_client.send_push_notifications_in_chunks(messages)

    assert len(tickets) == 4


@pytest.mark.asyncio
async def test_unknown_receipt_ids_return_mapping(push_client):
    receipts = await push_client.get_push_notification_receipts(
        ["00000000-0000-0000-0000-000000000000"]
    )

    assert isinstance(receipts, dict)
