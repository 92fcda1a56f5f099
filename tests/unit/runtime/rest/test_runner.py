"""Precise unit tests for RestRunner.

Tests focus on endpoint execution, retry wiring and concurrency limiting.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from expo.push.core import ApiError
from expo.push.runtime.rest import (
    ConcurrencyLimiter,
    ResponseAdapter,
    RestEndpointSpec,
    RESTTransport,
    RestRunner,
)
from expo.push.utils import RetryPolicy

NO_WAIT = RetryPolicy(retries=2, min_timeout=0)


class TestRestRunner:
    """Test RestRunner endpoint execution."""

    @pytest.fixture
    def mock_transport(self):
        """Create mock REST transport."""
        transport = MagicMock(spec=RESTTransport)
        transport.post = AsyncMock(return_value=[{"status": "ok", "id": "r1"}])
        return transport

    @pytest.fixture
    def mock_adapter(self):
        """Create mock response adapter."""
        adapter = MagicMock(spec=ResponseAdapter)
        adapter.parse = MagicMock(return_value={"parsed": "data"})
        return adapter

    @pytest.mark.asyncio
    async def test_run_post_endpoint(self, mock_transport, mock_adapter):
        runner = RestRunner(mock_transport)
        spec = RestEndpointSpec(
            id="test",
            method="POST",
            build_path=lambda p: "/test",
            build_body=lambda p: {"ids": p["ids"]},
        )

        result = await runner.run(spec=spec, adapter=mock_adapter, params={"ids": ["r1"]})

        assert result == {"parsed": "data"}
        mock_transport.post.assert_called_once_with(
            "/test", json_body={"ids": ["r1"]}, headers=None
        )
        mock_adapter.parse.assert_called_once_with(
            [{"status": "ok", "id": "r1"}], {"ids": ["r1"]}
        )

    @pytest.mark.asyncio
    async def test_unsupported_method(self, mock_transport, mock_adapter):
        runner = RestRunner(mock_transport)
        spec = RestEndpointSpec(id="test", method="GET", build_path=lambda p: "/test")

        with pytest.raises(ValueError, match="Unsupported method"):
            await runner.run(spec=spec, adapter=mock_adapter, params={})

    @pytest.mark.asyncio
    async def test_retry_policy_retries_rate_limit(self, mock_transport, mock_adapter):
        mock_transport.post = AsyncMock(
            side_effect=[ApiError("slow", status_code=429), [{"status": "ok", "id": "r1"}]]
        )
        runner = RestRunner(mock_transport)
        spec = RestEndpointSpec(
            id="test", method="POST", build_path=lambda p: "/test", retry_policy=NO_WAIT
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={})

        assert mock_transport.post.await_count == 2

    @pytest.mark.asyncio
    async def test_no_retry_policy_no_retry(self, mock_transport, mock_adapter):
        mock_transport.post = AsyncMock(side_effect=ApiError("slow", status_code=429))
        runner = RestRunner(mock_transport)
        spec = RestEndpointSpec(id="test", method="POST", build_path=lambda p: "/test")

        with pytest.raises(ApiError):
            await runner.run(spec=spec, adapter=mock_adapter, params={})

        mock_transport.post.assert_awaited_once()
        mock_adapter.parse.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrency_limited_spec_uses_limiter(self, mock_transport, mock_adapter):
        limiter = ConcurrencyLimiter(2)
        runner = RestRunner(mock_transport, limiter)
        spec = RestEndpointSpec(
            id="test", method="POST", build_path=lambda p: "/test", concurrency_limited=True
        )

        with patch.object(limiter, "run", wraps=limiter.run) as run:
            await runner.run(spec=spec, adapter=mock_adapter, params={})

        run.assert_called_once()

    @pytest.mark.asyncio
    async def test_unlimited_spec_bypasses_limiter(self, mock_transport, mock_adapter):
        limiter = ConcurrencyLimiter(1)
        runner = RestRunner(mock_transport, limiter)
        spec = RestEndpointSpec(id="test", method="POST", build_path=lambda p: "/test")

        with patch.object(limiter, "run", wraps=limiter.run) as run:
            await runner.run(spec=spec, adapter=mock_adapter, params={})

        run.assert_not_called()
