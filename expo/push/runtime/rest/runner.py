"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...core.exceptions import is_rate_limit_error
from ...utils.retry import RetryPolicy, retry_async
from .limiter import ConcurrencyLimiter
from .transport import RESTTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # only "POST" is used by the Expo API
    build_path: Callable[[dict[str, Any]], str]
    build_body: Callable[[dict[str, Any]], Any] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # Run inside the client's concurrency limiter
    concurrency_limited: bool = False
    # Retry rate-limited responses with this backoff schedule
    retry_policy: RetryPolicy | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(
        self, transport: RESTTransport, limiter: ConcurrencyLimiter | None = None
    ) -> None:
        self._t = transport
        self._limiter = limiter

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        if spec.method.upper() != "POST":
            raise ValueError(f"Unsupported method for {spec.id}: {spec.method}")

        path = spec.build_path(params)
        body = spec.build_body(params) if spec.build_body else None
        headers = spec.build_headers(params) if spec.build_headers else None

        async def request() -> Any:
            return await self._t.post(path, json_body=body, headers=headers)

        async def attempt() -> Any:
            if spec.retry_policy is None:
                return await request()
            return await retry_async(
                request, policy=spec.retry_policy, should_retry=is_rate_limit_error
            )

        try:
            if spec.concurrency_limited and self._limiter is not None:
                data = await self._limiter.run(attempt)
            else:
                data = await attempt()
        except Exception as e:
            logger.error(
                "request_failed",
                extra={
                    "endpoint_id": spec.id,
                    "error_type": type(e).__name__,
                    "status_code": getattr(e, "status_code", None),
                },
            )
            raise

        return adapter.parse(data, params)
