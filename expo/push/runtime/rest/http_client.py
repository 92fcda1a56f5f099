"""HTTP client helper."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...core.constants import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    """Status and fully-read text body of a response."""

    status: int
    text: str
    headers: Mapping[str, str] = field(default_factory=dict)


class HTTPClient:
    """Async HTTP client wrapper.

    Responses are returned whatever their status; interpreting them is the
    caller's job. Connection errors and timeouts propagate as raised by
    aiohttp.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = session
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    def _resolve_url(self, url: str) -> str:
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def post(
        self,
        url: str,
        data: bytes | AsyncIterable[bytes] | None = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """POST request returning the status and text body."""
        url = self._resolve_url(url)
        logger.debug("http_request", extra={"method": "POST", "url": url})

        async with self.session.post(url, data=data, headers=headers) as response:
            text = await response.text(errors="replace")
            logger.debug(
                "http_response",
                extra={"method": "POST", "url": url, "status": response.status},
            )
            return HTTPResponse(
                status=response.status,
                text=text,
                headers=dict(response.headers or {}),
            )

    async def close(self) -> None:
        """Close session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        await self.close()
