"""Unit tests for chunk execution logic."""

from __future__ import annotations

import asyncio

import pytest

from expo.push.core import ApiError
from expo.push.runtime.chunking import ChunkExecutor, ChunkPolicy


class TestChunkExecutor:
    """Test ChunkExecutor functionality."""

    @pytest.mark.asyncio
    async def test_results_concatenated_in_chunk_order(self):
        """Test results keep chunk order even when chunks finish out of order."""
        executor = ChunkExecutor(policy=ChunkPolicy(max_items=2))

        async def send_chunk(chunk):
            # Earlier chunks finish later
            await asyncio.sleep(0.01 * (3 - len(chunk[0]["to"])))
            return [f"ticket-{m['to']}" for m in chunk]

        chunks = [[{"to": "a"}, {"to": "b"}], [{"to": "cc"}], [{"to": "ddd"}]]
        result = await executor.execute(chunks=chunks, send_chunk=send_chunk)

        assert result.data == ["ticket-a", "ticket-b", "ticket-cc", "ticket-ddd"]
        assert result.chunks_used == 3
        assert result.total_points == 4
        assert result.chunk_sizes == [2, 1, 1]

    @pytest.mark.asyncio
    async def test_chunks_run_concurrently(self):
        """Test all chunks are in flight at the same time."""
        executor = ChunkExecutor(policy=ChunkPolicy(max_items=1))
        running = 0
        peak = 0

        async def send_chunk(chunk):
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1
            return list(chunk)

        await executor.execute(chunks=[[1], [2], [3]], send_chunk=send_chunk)

        assert peak == 3

    @pytest.mark.asyncio
    async def test_failure_aborts_and_cancels_others(self):
        """Test the first failure propagates and in-flight chunks are cancelled."""
        executor = ChunkExecutor(policy=ChunkPolicy(max_items=1))
        cancelled = []

        async def send_chunk(chunk):
            if chunk[0] == "bad":
                raise ApiError("rejected", status_code=400)
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(chunk[0])
                raise
            return list(chunk)

        with pytest.raises(ApiError, match="rejected"):
            await executor.execute(chunks=[["slow"], ["bad"]], send_chunk=send_chunk)

        assert cancelled == ["slow"]

    @pytest.mark.asyncio
    async def test_empty_plan(self):
        async def send_chunk(chunk):
            raise AssertionError("should not be called")

        result = await ChunkExecutor(ChunkPolicy(max_items=1)).execute(
            chunks=[], send_chunk=send_chunk
        )
        assert result.data == []
        assert result.chunks_used == 0
