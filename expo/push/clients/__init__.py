"""High-level clients."""

from .push_client import PushClient

__all__ = ["PushClient"]
