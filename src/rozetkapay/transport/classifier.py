"""
Failure classification for HTTP responses and transport exceptions.

Classification answers "what went wrong" and produces a safe message; it
never decides whether to retry (that is the executor's job, driven by the
RetryPolicy). The mapping is total: every status code and every httpx
error resolves to exactly one ErrorKind.

Status mapping:
    400 -> VALIDATION      401 -> UNAUTHORIZED    403 -> FORBIDDEN
    404 -> NOT_FOUND       408 -> TRANSPORT       429 -> RATE_LIMITED
    5xx -> SERVER_ERROR    other -> UNKNOWN
"""

import json
from typing import Any, Mapping

import httpx
import structlog

from rozetkapay.transport.exceptions import ErrorKind
from rozetkapay.transport.metadata import AttemptFailure
from rozetkapay.transport.redaction import mask_card_numbers


logger = structlog.get_logger(__name__)

DEFAULT_RETRY_AFTER_SECONDS = 60.0

_STATUS_KINDS: dict[int, ErrorKind] = {
    400: ErrorKind.VALIDATION,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
    408: ErrorKind.TRANSPORT,
    429: ErrorKind.RATE_LIMITED,
}


def classify_status(status_code: int) -> ErrorKind:
    """Map a non-success HTTP status to its ErrorKind."""
    if status_code in _STATUS_KINDS:
        return _STATUS_KINDS[status_code]
    if 500 <= status_code <= 599:
        return ErrorKind.SERVER_ERROR
    return ErrorKind.UNKNOWN


def extract_message(body: str | bytes | None) -> str | None:
    """
    Pull a human-readable message out of an error body.

    Looks for a string `message` field, then `error`. Anything else
    (empty body, invalid JSON, a JSON array, missing fields) yields None.
    Never raises.
    """
    if not body:
        return None
    try:
        data: Any = json.loads(body)
    except (ValueError, TypeError):
        return None
    if not isinstance(data, dict):
        return None

    for key in ("message", "error"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return mask_card_numbers(value.strip())
    return None


def parse_retry_after(headers: Mapping[str, str]) -> float:
    """Seconds from a delta-seconds Retry-After header, default 60."""
    raw = headers.get("Retry-After")
    if raw is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        seconds = float(raw.strip())
    except ValueError:
        # HTTP-date form is not used by the upstream API
        return DEFAULT_RETRY_AFTER_SECONDS
    if seconds < 0 or seconds != seconds:
        return DEFAULT_RETRY_AFTER_SECONDS
    return seconds


def _format_seconds(seconds: float) -> str:
    return str(int(seconds)) if seconds == int(seconds) else str(seconds)


def classify_response(response: httpx.Response) -> AttemptFailure:
    """
    Classify a non-success response into an AttemptFailure with a safe message.

    The raw body is never copied into the message; only the `message`/`error`
    field is used, and only where the status allows it.
    """
    status = response.status_code
    kind = classify_status(status)
    error_message = extract_message(response.content)
    retry_after: float | None = None

    if status == 401:
        message = "Unauthorized: Invalid credentials or deactivated account"
    elif status == 403:
        message = "Forbidden: Access denied"
    elif status == 400:
        message = error_message or "Bad request"
    elif status == 404:
        message = "Resource not found"
    elif status == 429:
        retry_after = parse_retry_after(response.headers)
        message = f"Rate limit exceeded. Retry after {_format_seconds(retry_after)} seconds"
    elif status == 500:
        message = "Internal server error"
    elif error_message:
        message = f"API error: {status} - {error_message}"
    else:
        message = f"API error: {status}"

    logger.warning(
        "API error response received",
        status_code=status,
        kind=kind.value,
        error_message=error_message,
    )

    return AttemptFailure(
        kind=kind,
        message=message,
        status_code=status,
        retry_after=retry_after,
    )


def classify_exception(exc: Exception) -> AttemptFailure:
    """
    Classify an exception raised while sending a request.

    httpx transport errors and OS-level socket errors are TRANSPORT;
    any other httpx error is UNKNOWN.
    """
    if isinstance(exc, (httpx.TransportError, OSError)):
        kind = ErrorKind.TRANSPORT
        if isinstance(exc, httpx.TimeoutException):
            message = "Request timed out"
        else:
            message = f"Transport error: {type(exc).__name__}"
    else:
        kind = ErrorKind.UNKNOWN
        message = f"Request failed: {type(exc).__name__}"

    return AttemptFailure(kind=kind, message=message, exception=exc)
