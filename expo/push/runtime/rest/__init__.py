"""REST runtime abstractions."""

from .adapters import PushReceiptsAdapter, PushTicketsAdapter
from .endpoints import receipts_spec, send_spec
from .http_client import HTTPClient, HTTPResponse
from .limiter import ConcurrencyLimiter
from .responses import error_from_response, error_from_result, normalize_response
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RESTTransport",
    "ConcurrencyLimiter",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "PushTicketsAdapter",
    "PushReceiptsAdapter",
    "send_spec",
    "receipts_spec",
    "normalize_response",
    "error_from_response",
    "error_from_result",
]
