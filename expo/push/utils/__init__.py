"""Utility functions."""

from .retry import DEFAULT_RETRY_POLICY, RetryPolicy, retry_async
from .tokens import is_push_token

__all__ = ["DEFAULT_RETRY_POLICY", "RetryPolicy", "retry_async", "is_push_token"]
