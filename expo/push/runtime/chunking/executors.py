"""Chunk execution logic for submitting batches and stitching results.

This module provides the ChunkExecutor class that submits every planned
batch concurrently and concatenates the per-batch results in batch order, so
the combined result stays positionally aligned with the flattened input.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from time import perf_counter
from typing import Any, TypeVar

from .definitions import ChunkPolicy, ChunkResult
from .telemetry import log_chunk_completed, log_chunk_error, log_chunk_execution_complete

T = TypeVar("T")


class ChunkExecutor:
    """Executes planned chunks and aggregates results.

    Parallelism is not bounded here; ``send_chunk`` is expected to go through
    the client's concurrency limiter.
    """

    def __init__(self, policy: ChunkPolicy) -> None:
        """Initialize chunk executor.

        Args:
            policy: Chunking policy for the endpoint
        """
        self._policy = policy

    async def execute(
        self,
        *,
        chunks: Sequence[Sequence[T]],
        send_chunk: Callable[[Sequence[T]], Awaitable[list[Any]]],
    ) -> ChunkResult:
        """Submit all chunks and concatenate their results in chunk order.

        Args:
            chunks: Planned batches
            send_chunk: Async function submitting one batch and returning its results

        Returns:
            ChunkResult with the concatenated results

        Raises:
            Exception: The first chunk failure. Chunks still in flight are
                cancelled before the error propagates.
        """
        start = perf_counter()
        tasks = [
            asyncio.ensure_future(self._run_chunk(index, chunk, send_chunk))
            for index, chunk in enumerate(chunks)
        ]
        try:
            per_chunk = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        aggregated: list[Any] = []
        for chunk_data in per_chunk:
            aggregated.extend(chunk_data)

        result = ChunkResult(
            data=aggregated,
            chunks_used=len(per_chunk),
            total_points=len(aggregated),
            chunk_sizes=[len(chunk_data) for chunk_data in per_chunk],
        )
        log_chunk_execution_complete(
            endpoint_id=self._policy.endpoint_id,
            result=result,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return result

    async def _run_chunk(
        self,
        index: int,
        chunk: Sequence[T],
        send_chunk: Callable[[Sequence[T]], Awaitable[list[Any]]],
    ) -> list[Any]:
        chunk_start = perf_counter()
        try:
            data = await send_chunk(chunk)
        except Exception as e:
            log_chunk_error(
                endpoint_id=self._policy.endpoint_id,
                chunk_index=index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        log_chunk_completed(
            endpoint_id=self._policy.endpoint_id,
            chunk_index=index,
            rows_aggregated=len(data),
            latency_ms=(perf_counter() - chunk_start) * 1000.0,
        )
        return data
