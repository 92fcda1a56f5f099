"""Expo push service constants.

This module centralizes the base URLs, endpoint paths and provider limits
used by the REST runtime and the push client so they can be overridden in
one place.
"""

from __future__ import annotations

BASE_URL = "https://exp.host"
BASE_API_URL = f"{BASE_URL}/--/api/v2"

SEND_PATH = "/push/send"
RECEIPTS_PATH = "/push/getReceipts"

# Max push notifications (recipients) per send request. Clients in the wild
# depend on this value, so it should never be decreased.
PUSH_NOTIFICATION_CHUNK_LIMIT = 100

# Max receipt ids per getReceipts request
PUSH_NOTIFICATION_RECEIPT_CHUNK_LIMIT = 300

DEFAULT_CONCURRENT_REQUEST_LIMIT = 6

# Request bodies larger than this are gzipped unless compression is disabled
COMPRESSION_THRESHOLD_BYTES = 1024

RATE_LIMIT_STATUS = 429

USER_AGENT = "expo-push-api-python"

DEFAULT_TIMEOUT = 30.0
