"""REST transport for the Expo push API.

Builds request headers, encodes JSON bodies (gzipping large ones), sends
them through HTTPClient and normalizes the response.
"""

from __future__ import annotations

import gzip
import json
import logging
import zlib
from collections.abc import AsyncIterator
from typing import Any

from ...core.constants import COMPRESSION_THRESHOLD_BYTES, DEFAULT_TIMEOUT, USER_AGENT
from ...core.enums import Compression
from .http_client import HTTPClient
from .responses import normalize_response

logger = logging.getLogger(__name__)

_STREAM_CHUNK_SIZE = 64 * 1024


async def _gzip_stream(data: bytes) -> AsyncIterator[bytes]:
    """Yield ``data`` gzip-compressed, piece by piece."""
    compressor = zlib.compressobj(wbits=31)  # 31 = gzip container
    for start in range(0, len(data), _STREAM_CHUNK_SIZE):
        piece = compressor.compress(data[start : start + _STREAM_CHUNK_SIZE])
        if piece:
            yield piece
    yield compressor.flush()


class RESTTransport:
    """Transport that sends JSON requests and returns normalized payloads."""

    def __init__(
        self,
        base_url: str,
        *,
        access_token: str | None = None,
        compression: Compression | str = Compression.ENABLED,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: HTTPClient | None = None,
    ) -> None:
        self._http = http_client or HTTPClient(base_url=base_url, timeout=timeout)
        if self._http.base_url is None:
            self._http.base_url = base_url
        self._access_token = access_token
        self._compression = Compression.from_value(compression)

    @property
    def compression(self) -> Compression:
        return self._compression

    def build_headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
            "User-Agent": USER_AGENT,
        }
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    def encode_body(self, json_body: Any) -> tuple[bytes | AsyncIterator[bytes], dict[str, str]]:
        """Serialize ``json_body``, compressing it when large enough.

        Returns:
            Request body and the content headers that describe it
        """
        payload = json.dumps(json_body, separators=(",", ":")).encode("utf-8")
        headers = {"Content-Type": "application/json"}

        if len(payload) <= COMPRESSION_THRESHOLD_BYTES or self._compression is Compression.DISABLED:
            return payload, headers

        headers["Content-Encoding"] = "gzip"
        if self._compression is Compression.NODE_COMPAT:
            return gzip.compress(payload), headers
        return _gzip_stream(payload), headers

    async def post(
        self,
        path: str,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST ``json_body`` to ``path`` and return the response ``data``.

        Raises:
            ApiError: Error response from Expo
            aiohttp.ClientError: Transport failure
        """
        request_headers = self.build_headers()
        body: bytes | AsyncIterator[bytes] | None = None
        if json_body is not None:
            body, content_headers = self.encode_body(json_body)
            request_headers.update(content_headers)
        if headers:
            request_headers.update(headers)

        response = await self._http.post(path, data=body, headers=request_headers)
        return normalize_response(response.status, response.text)

    async def close(self) -> None:
        await self._http.close()
