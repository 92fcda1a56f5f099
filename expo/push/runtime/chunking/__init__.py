"""Chunking layer for provider batch limits.

Expo caps the number of recipients per send request and the number of ids
per receipt lookup. This module splits caller input into compliant batches
and, optionally, submits them and stitches the results back together.

Architecture:
    - definitions.py: Chunk policies and results (ChunkPolicy, ChunkResult)
    - planners.py: Batch planning (splits messages and flat id lists)
    - executors.py: Concurrent batch submission and ordered aggregation
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import (
    PUSH_NOTIFICATION_CHUNK_POLICY,
    PUSH_RECEIPT_CHUNK_POLICY,
    ChunkPolicy,
    ChunkResult,
)
from .executors import ChunkExecutor
from .planners import ChunkPlanner

__all__ = [
    "ChunkPolicy",
    "ChunkResult",
    "ChunkPlanner",
    "ChunkExecutor",
    "PUSH_NOTIFICATION_CHUNK_POLICY",
    "PUSH_RECEIPT_CHUNK_POLICY",
]
