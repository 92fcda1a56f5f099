"""Retry with exponential backoff for async operations."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Exponential backoff schedule.

    Attributes:
        retries: Retries after the first attempt (total attempts = retries + 1)
        factor: Multiplier applied to the delay after every retry
        min_timeout: Delay before the first retry, in seconds
        max_timeout: Upper bound for any single delay (None = unbounded)
    """

    retries: int = 2
    factor: float = 2.0
    min_timeout: float = 1.0
    max_timeout: float | None = None

    def __post_init__(self) -> None:
        if self.retries < 0:
            raise ValueError("RetryPolicy retries must be >= 0")
        if self.factor < 1:
            raise ValueError("RetryPolicy factor must be >= 1")
        if self.min_timeout < 0:
            raise ValueError("RetryPolicy min_timeout must be >= 0")

    def delay_for(self, attempt: int) -> float:
        """Delay in seconds before retry number ``attempt`` (0-based)."""
        delay = self.min_timeout * self.factor**attempt
        if self.max_timeout is not None:
            delay = min(delay, self.max_timeout)
        return delay


# Expo: 2 retries, waiting 1s then 2s
DEFAULT_RETRY_POLICY = RetryPolicy()


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    *,
    policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    should_retry: Callable[[Exception], bool] = lambda error: True,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Run ``operation`` until it succeeds or the policy gives up.

    Args:
        operation: Zero-argument coroutine factory, called once per attempt
        policy: Backoff schedule
        should_retry: Predicate deciding whether an error is retryable
        sleep: Awaitable used for the backoff wait

    Returns:
        Result of the first successful attempt

    Raises:
        Exception: The first non-retryable error, or the last error once all
            retries are exhausted. Cancellation is never retried and interrupts
            a pending backoff wait.
    """
    for attempt in range(policy.retries):
        try:
            return await operation()
        except Exception as e:
            if not should_retry(e):
                raise
            delay = policy.delay_for(attempt)
            logger.warning(
                "request_retry_scheduled",
                extra={
                    "attempt": attempt + 1,
                    "max_attempts": policy.retries + 1,
                    "delay_s": delay,
                    "error_type": type(e).__name__,
                    "status_code": getattr(e, "status_code", None),
                },
            )
            await sleep(delay)

    # Last attempt: its error propagates as is
    return await operation()
