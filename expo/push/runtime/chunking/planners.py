"""Chunk planning logic.

This module provides the ChunkPlanner class that splits push messages and
receipt ids into batches that respect the provider's per-request limits.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from ...models.message import Message, count_recipients, get_recipients, with_recipients
from .definitions import ChunkPolicy
from .telemetry import log_chunk_plan

T = TypeVar("T")


class ChunkPlanner:
    """Plans request batches for an endpoint.

    Planning is pure: the same input always yields the same batches, inputs
    are never mutated, and order is preserved within and across batches.
    """

    def __init__(self, policy: ChunkPolicy) -> None:
        """Initialize chunk planner.

        Args:
            policy: Chunking policy for the endpoint
        """
        self._policy = policy

    @property
    def policy(self) -> ChunkPolicy:
        return self._policy

    def plan_messages(self, messages: Sequence[Message]) -> list[list[Message]]:
        """Split messages into batches of at most ``max_items`` recipients.

        A message whose recipient list does not fit in the current batch is
        split: the tokens that fit close the batch as a copy of the message
        with a partial ``to``, and the remaining tokens continue into the next
        batch. Only ``to`` differs between fragments.

        Args:
            messages: Messages in send order

        Returns:
            List of batches, each a list of messages
        """
        limit = self._policy.max_items
        chunks: list[list[Message]] = []
        chunk: list[Message] = []
        chunk_count = 0

        for message in messages:
            to = get_recipients(message)
            if isinstance(to, (list, tuple)):
                partial_to: list[str] = []
                for recipient in to:
                    partial_to.append(recipient)
                    chunk_count += 1
                    if chunk_count >= limit:
                        # Close the batch here; remaining recipients of this
                        # message continue in the next one
                        chunk.append(with_recipients(message, partial_to))
                        chunks.append(chunk)
                        chunk = []
                        chunk_count = 0
                        partial_to = []
                if partial_to:
                    chunk.append(with_recipients(message, partial_to))
            else:
                chunk.append(message)
                chunk_count += 1

            if chunk_count >= limit:
                chunks.append(chunk)
                chunk = []
                chunk_count = 0

        if chunk:
            chunks.append(chunk)

        log_chunk_plan(
            endpoint_id=self._policy.endpoint_id,
            total_chunks=len(chunks),
            total_items=sum(count_recipients(c) for c in chunks),
            chunk_limit=limit,
        )
        return chunks

    def plan_items(self, items: Sequence[T]) -> list[list[T]]:
        """Split a flat list into consecutive batches of at most ``max_items``.

        Args:
            items: Atomic items such as receipt ids

        Returns:
            List of batches
        """
        limit = self._policy.max_items
        chunks = [list(items[i : i + limit]) for i in range(0, len(items), limit)]
        log_chunk_plan(
            endpoint_id=self._policy.endpoint_id,
            total_chunks=len(chunks),
            total_items=len(items),
            chunk_limit=limit,
        )
        return chunks
