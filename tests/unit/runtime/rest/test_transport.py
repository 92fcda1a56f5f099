"""Precise unit tests for RESTTransport.

Tests focus on headers, body encoding, compression and HTTPClient delegation.
"""

from __future__ import annotations

import gzip
import json
from unittest.mock import AsyncMock

import pytest

from expo.push.core import ApiError, Compression
from expo.push.runtime.rest import HTTPResponse, RESTTransport

BASE = "https://exp.host/--/api/v2"


def _large_body() -> list[dict[str, str]]:
    return [{"to": f"ExponentPushToken[{i:04d}]", "body": "x" * 40} for i in range(30)]


async def _collect(body) -> bytes:
    if isinstance(body, bytes):
        return body
    return b"".join([piece async for piece in body])


class TestHeaders:
    """Test request headers."""

    def test_default_headers(self):
        transport = RESTTransport(BASE)
        assert transport.build_headers() == {
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
            "User-Agent": "expo-push-api-python",
        }

    def test_access_token_header(self):
        transport = RESTTransport(BASE, access_token="secret")
        assert transport.build_headers()["Authorization"] == "Bearer secret"

    def test_invalid_compression_rejected(self):
        with pytest.raises(ValueError):
            RESTTransport(BASE, compression="zip")


class TestEncodeBody:
    """Test JSON encoding and compression."""

    def test_small_body_not_compressed(self):
        transport = RESTTransport(BASE)
        body, headers = transport.encode_body([{"to": "a"}])

        assert body == b'[{"to":"a"}]'
        assert headers == {"Content-Type": "application/json"}

    @pytest.mark.asyncio
    async def test_large_body_streamed_gzip(self):
        """Test enabled compression yields a gzip stream."""
        transport = RESTTransport(BASE, compression=Compression.ENABLED)
        payload = _large_body()

        body, headers = transport.encode_body(payload)

        assert not isinstance(body, bytes)
        assert headers["Content-Encoding"] == "gzip"
        assert json.loads(gzip.decompress(await _collect(body))) == payload

    def test_large_body_node_compat_materialized(self):
        """Test node_compat compression produces bytes."""
        transport = RESTTransport(BASE, compression="node_compat")
        payload = _large_body()

        body, headers = transport.encode_body(payload)

        assert isinstance(body, bytes)
        assert headers["Content-Encoding"] == "gzip"
        assert json.loads(gzip.decompress(body)) == payload

    def test_large_body_compression_disabled(self):
        transport = RESTTransport(BASE, compression="disabled")
        payload = _large_body()

        body, headers = transport.encode_body(payload)

        assert json.loads(body) == payload
        assert "Content-Encoding" not in headers


class TestPost:
    """Test RESTTransport.post."""

    @pytest.mark.asyncio
    async def test_post_delegates_and_returns_data(self):
        transport = RESTTransport(BASE, access_token="tok")
        transport._http.post = AsyncMock(
            return_value=HTTPResponse(status=200, text='{"data": {"r1": {"status": "ok"}}}')
        )

        result = await transport.post("/push/getReceipts", json_body={"ids": ["r1"]})

        assert result == {"r1": {"status": "ok"}}
        transport._http.post.assert_called_once_with(
            "/push/getReceipts",
            data=b'{"ids":["r1"]}',
            headers={
                "Accept": "application/json",
                "Accept-Encoding": "gzip, deflate",
                "User-Agent": "expo-push-api-python",
                "Authorization": "Bearer tok",
                "Content-Type": "application/json",
            },
        )

    @pytest.mark.asyncio
    async def test_post_without_body(self):
        transport = RESTTransport(BASE)
        transport._http.post = AsyncMock(return_value=HTTPResponse(status=200, text='{"data": []}'))

        await transport.post("/push/send")

        kwargs = transport._http.post.call_args.kwargs
        assert kwargs["data"] is None
        assert "Content-Type" not in kwargs["headers"]

    @pytest.mark.asyncio
    async def test_post_raises_normalized_error(self):
        transport = RESTTransport(BASE)
        transport._http.post = AsyncMock(
            return_value=HTTPResponse(
                status=401,
                text='{"errors": [{"message": "bad token", "code": "UNAUTHORIZED"}]}',
            )
        )

        with pytest.raises(ApiError) as exc_info:
            await transport.post("/push/send", json_body=[{"to": "a"}])

        assert exc_info.value.code == "UNAUTHORIZED"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_base_url_set_on_http_client(self):
        transport = RESTTransport(BASE)
        assert transport._http.base_url == BASE

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self):
        transport = RESTTransport(BASE)
        transport._http.close = AsyncMock()

        await transport.close()

        transport._http.close.assert_called_once()
