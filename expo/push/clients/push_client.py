"""Expo push notification client.

Architecture:
    PushClient is a thin facade over the REST runtime. Each public call
    builds endpoint params and hands them to RestRunner together with an
    endpoint spec and a response adapter:

        messages -> RestRunner -> ConcurrencyLimiter -> retry_async
                 -> RESTTransport -> HTTPClient -> normalize_response
                 -> PushTicketsAdapter (cardinality check) -> tickets

Design Decisions:
    - One ConcurrencyLimiter per client: bounds in-flight send requests
      issued by this instance, retries included
    - Only rate-limited (429) send requests are retried; receipts are a
      single plain request
    - Chunking is explicit: send_push_notifications sends exactly what it is
      given; send_push_notifications_in_chunks is the batteries-included path
    - Stateless: nothing survives a call except the HTTP session
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from typing import Any

from ..core.constants import (
    BASE_API_URL,
    DEFAULT_CONCURRENT_REQUEST_LIMIT,
    DEFAULT_TIMEOUT,
    PUSH_NOTIFICATION_CHUNK_LIMIT,
    PUSH_NOTIFICATION_RECEIPT_CHUNK_LIMIT,
)
from ..core.enums import Compression
from ..models.message import Message, count_recipients
from ..models.ticket import PushReceipt, PushTicket
from ..runtime.chunking import (
    PUSH_NOTIFICATION_CHUNK_POLICY,
    PUSH_RECEIPT_CHUNK_POLICY,
    ChunkExecutor,
    ChunkPlanner,
    ChunkPolicy,
)
from ..runtime.rest import (
    ConcurrencyLimiter,
    HTTPClient,
    PushReceiptsAdapter,
    PushTicketsAdapter,
    RESTTransport,
    RestRunner,
    receipts_spec,
    send_spec,
)
from ..utils.retry import DEFAULT_RETRY_POLICY, RetryPolicy
from ..utils.tokens import is_push_token


class PushClient:
    """Client for the Expo push notification service."""

    push_notification_chunk_size_limit = PUSH_NOTIFICATION_CHUNK_LIMIT
    push_notification_receipt_chunk_size_limit = PUSH_NOTIFICATION_RECEIPT_CHUNK_LIMIT

    def __init__(
        self,
        *,
        max_concurrent_requests: int | None = None,
        access_token: str | None = None,
        compression: Compression | str = Compression.ENABLED,
        base_url: str = BASE_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_policy: RetryPolicy = DEFAULT_RETRY_POLICY,
        http_client: HTTPClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            max_concurrent_requests: Max send requests in flight at once (default 6)
            access_token: Expo access token, sent as a Bearer token when set
            compression: "enabled", "node_compat" or "disabled"
            base_url: API root, override for testing
            timeout: Total timeout per HTTP request, in seconds
            retry_policy: Backoff schedule for rate-limited send requests
            http_client: Pre-configured HTTP client (session reuse, testing)
        """
        limit = (
            DEFAULT_CONCURRENT_REQUEST_LIMIT
            if max_concurrent_requests is None
            else max_concurrent_requests
        )
        self._limiter = ConcurrencyLimiter(limit)
        self._transport = RESTTransport(
            base_url,
            access_token=access_token,
            compression=compression,
            timeout=timeout,
            http_client=http_client,
        )
        self._runner = RestRunner(self._transport, self._limiter)
        self._message_planner = ChunkPlanner(PUSH_NOTIFICATION_CHUNK_POLICY)
        self._receipt_planner = ChunkPlanner(PUSH_RECEIPT_CHUNK_POLICY)
        # Registry: key -> (spec_builder, adapter_class)
        self._ENDPOINTS: dict[str, tuple[Callable[..., Any], type]] = {
            "send": (functools.partial(send_spec, retry_policy), PushTicketsAdapter),
            "receipts": (receipts_spec, PushReceiptsAdapter),
        }

    @property
    def limiter(self) -> ConcurrencyLimiter:
        return self._limiter

    @staticmethod
    def is_push_token(token: Any) -> bool:
        """Return True if ``token`` looks like an Expo push token."""
        return is_push_token(token)

    async def fetch(self, endpoint: str, params: dict[str, Any]) -> Any:
        if endpoint not in self._ENDPOINTS:
            raise ValueError(f"Unknown REST endpoint: {endpoint}")
        spec_fn, adapter_cls = self._ENDPOINTS[endpoint]
        spec = spec_fn()
        adapter = adapter_cls()
        return await self._runner.run(spec=spec, adapter=adapter, params=params)

    async def send_push_notifications(self, messages: Sequence[Message]) -> list[PushTicket]:
        """Send messages and return one ticket per recipient.

        The nth ticket belongs to the nth recipient of the flattened
        recipient list (a message with a list ``to`` yields one ticket per
        token). Tickets carry the receipt ids to poll later. A ticket of an
        unknown shape is passed through as the raw dict Expo sent.

        At most ``push_notification_chunk_size_limit`` recipients may be sent
        at once; use chunk_push_notifications or
        send_push_notifications_in_chunks for larger sends.

        Raises:
            ApiError: Expo rejected the request (after retries when rate limited)
            TicketCountMismatchError: Ticket count differs from recipient count
        """
        messages = list(messages)
        params = {"messages": messages, "expected_count": count_recipients(messages)}
        return await self.fetch("send", params)

    async def get_push_notification_receipts(
        self, receipt_ids: Sequence[str]
    ) -> dict[str, PushReceipt]:
        """Fetch delivery receipts by id.

        Ids that Expo does not know yet (or anymore) are absent from the
        result. At most ``push_notification_receipt_chunk_size_limit`` ids may
        be requested at once.

        Raises:
            ApiError: Expo rejected the request
            UnexpectedPayloadError: Response was not a receipt mapping
        """
        return await self.fetch("receipts", {"receipt_ids": list(receipt_ids)})

    def chunk_push_notifications(
        self, messages: Sequence[Message], limit: int | None = None
    ) -> list[list[Message]]:
        """Split messages into sendable batches (default 100 recipients each)."""
        return self._planner(self._message_planner, limit).plan_messages(messages)

    def chunk_push_notification_receipt_ids(
        self, receipt_ids: Sequence[str], limit: int | None = None
    ) -> list[list[str]]:
        """Split receipt ids into requestable batches (default 300 ids each)."""
        return self._planner(self._receipt_planner, limit).plan_items(receipt_ids)

    async def send_push_notifications_in_chunks(
        self, messages: Sequence[Message]
    ) -> list[PushTicket]:
        """Chunk, send all chunks concurrently and return tickets in input order.

        Chunks share this client's concurrency limit. Any failing chunk fails
        the whole call and cancels chunks still in flight.
        """
        chunks = self.chunk_push_notifications(messages)
        if not chunks:
            return []
        executor = ChunkExecutor(PUSH_NOTIFICATION_CHUNK_POLICY)
        result = await executor.execute(chunks=chunks, send_chunk=self.send_push_notifications)
        return result.data

    def _planner(self, default: ChunkPlanner, limit: int | None) -> ChunkPlanner:
        if limit is None:
            return default
        return ChunkPlanner(ChunkPolicy(max_items=limit, endpoint_id=default.policy.endpoint_id))

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> PushClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
