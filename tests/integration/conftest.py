"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from expo.push import PushClient

# Skip all integration tests unless RUN_EXPO_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_EXPO_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_EXPO_NETWORK_TESTS=1 to run",
)

# Expo accepts well-formed tokens it has never seen and reports them per ticket
FAKE_TOKEN = "ExponentPushToken[xxxxxxxxxxxxxxxxxxxxxx]"


@pytest.fixture
def fake_token() -> str:
    return FAKE_TOKEN


@pytest_asyncio.fixture
async def push_client():
    """Live client, using EXPO_ACCESS_TOKEN when the project enforces tokens."""
    async with PushClient(access_token=os.environ.get("EXPO_ACCESS_TOKEN")) as client:
        yield client
