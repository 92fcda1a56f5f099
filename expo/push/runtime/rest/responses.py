"""Response normalization.

Maps a raw Expo response (status code plus text body) to either the success
payload or a raised ApiError. The rules, in order:

1. Non-200 status: read the body as an errors envelope. Without a non-empty
   ``errors`` list, fall back to a TextResponseError built from the raw text.
2. 200 with a body that is not JSON: TextResponseError.
3. 200 with an ``errors`` entry: ApiError from the first error, remaining
   errors attached as ``others``.
4. 200 with a ``data`` entry: the payload, returned untouched.

Anything else is an error too; an unrecognized shape is never passed on.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ...core.exceptions import ApiError, TextResponseError
from ...models.envelope import ApiErrorPayload


def normalize_response(status_code: int, text: str) -> Any:
    """Return the ``data`` payload of a successful response or raise.

    Args:
        status_code: HTTP status
        text: Response body

    Returns:
        The ``data`` value, unchanged

    Raises:
        ApiError: For every non-success response
    """
    if status_code != 200:
        raise error_from_response(status_code, text)

    try:
        result = json.loads(text)
    except ValueError:
        raise TextResponseError(status_code, text) from None

    if not isinstance(result, dict):
        raise TextResponseError(status_code, text, error_data=result)

    if result.get("errors") is not None:
        raise error_from_result(status_code, result, text)

    if "data" not in result:
        raise TextResponseError(status_code, text, error_data=result)

    return result["data"]


def error_from_response(status_code: int, text: str) -> ApiError:
    """Build the error for a non-200 response."""
    try:
        result = json.loads(text)
    except ValueError:
        return TextResponseError(status_code, text)

    errors = result.get("errors") if isinstance(result, dict) else None
    if not isinstance(errors, list) or not errors:
        return TextResponseError(status_code, text, error_data=result)

    return error_from_result(status_code, result, text)


def error_from_result(status_code: int, result: Mapping[str, Any], text: str) -> ApiError:
    """Build an ApiError for the first entry of ``result["errors"]``.

    Each entry is read on its own. Remaining entries become ``others``, in
    server order; a malformed sibling never replaces the primary error.
    """
    errors = result.get("errors")
    if not isinstance(errors, list) or not errors:
        return ApiError("Expected at least one error from Expo", status_code=status_code)

    first, *rest = errors
    try:
        primary = ApiErrorPayload.model_validate(first)
    except ValidationError:
        return TextResponseError(status_code, text, error_data=dict(result))

    error = _error_from_payload(primary)
    error.status_code = status_code
    error.others = [_sibling_error(entry) for entry in rest]
    return error


def _sibling_error(entry: Any) -> ApiError:
    try:
        return _error_from_payload(ApiErrorPayload.model_validate(entry))
    except ValidationError:
        # Not an object: keep its text so nothing the server said is lost
        return ApiError(str(entry))


def _error_from_payload(payload: ApiErrorPayload) -> ApiError:
    return ApiError(
        payload.message,
        code=payload.code,
        details=payload.details,
        server_stack=payload.stack,
    )
