"""Push token format check."""

from __future__ import annotations

import re
from typing import Any

_TOKEN_PREFIXES = ("ExponentPushToken[", "ExpoPushToken[")
_UUID_RE = re.compile(r"[a-z\d]{8}-[a-z\d]{4}-[a-z\d]{4}-[a-z\d]{4}-[a-z\d]{12}", re.IGNORECASE)


def is_push_token(token: Any) -> bool:
    """Return True if ``token`` looks like an Expo push token.

    Accepts the bracketed forms ``ExponentPushToken[...]`` and
    ``ExpoPushToken[...]`` as well as bare UUID-shaped device ids. This is a
    format check only; it says nothing about whether the device is registered.
    """
    if not isinstance(token, str):
        return False
    if token.startswith(_TOKEN_PREFIXES) and token.endswith("]"):
        return True
    return _UUID_RE.fullmatch(token) is not None
