"""Chunking metadata definitions and policy structures.

This module defines the data structures used to describe how requests are
split to respect the provider's per-request limits, and the result of
executing a chunked send.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...core.constants import (
    PUSH_NOTIFICATION_CHUNK_LIMIT,
    PUSH_NOTIFICATION_RECEIPT_CHUNK_LIMIT,
)


@dataclass(frozen=True)
class ChunkPolicy:
    """Chunking policy for an endpoint.

    Attributes:
        max_items: Maximum number of items per request. For push messages an
            item is one recipient, so a list-valued ``to`` counts by length.
        endpoint_id: Identifier used in telemetry
    """

    max_items: int
    endpoint_id: str = "unknown"

    def __post_init__(self) -> None:
        if self.max_items < 1:
            raise ValueError("ChunkPolicy max_items must be a positive integer")


PUSH_NOTIFICATION_CHUNK_POLICY = ChunkPolicy(
    max_items=PUSH_NOTIFICATION_CHUNK_LIMIT, endpoint_id="push_send"
)
PUSH_RECEIPT_CHUNK_POLICY = ChunkPolicy(
    max_items=PUSH_NOTIFICATION_RECEIPT_CHUNK_LIMIT, endpoint_id="push_get_receipts"
)


@dataclass
class ChunkResult:
    """Result of chunked execution.

    Attributes:
        data: Results of all chunks, concatenated in chunk order
        chunks_used: Number of chunks that were submitted
        total_points: Total number of results aggregated
        chunk_sizes: Number of results contributed by each chunk
    """

    data: list[Any]
    chunks_used: int
    total_points: int = 0
    chunk_sizes: list[int] = field(default_factory=list)
