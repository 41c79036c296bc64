"""
HTTP error taxonomy for the RozetkaPay client.

Every failed logical call surfaces exactly one RozetkaPayAPIError tagged
with an ErrorKind. The kind carries the classification; the payload
(status code, retry-after, attempt count) travels on the error instance,
so callers branch on `error.kind` instead of an exception hierarchy.
"""

from enum import Enum
from typing import Any

from rozetkapay.exceptions import RozetkaPayError


class ErrorKind(str, Enum):
    """Closed set of failure classifications."""

    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    TRANSPORT = "transport"
    UNKNOWN = "unknown"


# Kinds the executor may retry; everything else is terminal on first sight.
RETRYABLE_KINDS: frozenset[ErrorKind] = frozenset(
    {ErrorKind.TRANSPORT, ErrorKind.SERVER_ERROR, ErrorKind.RATE_LIMITED}
)


class RozetkaPayAPIError(RozetkaPayError):
    """
    Terminal failure of a logical API call.

    The message is safe to log and display: it never contains the request
    payload or the raw response body.

    Attributes:
        kind: Classification of the last failed attempt
        status_code: HTTP status of the last attempt (None for transport failures)
        retry_after: Seconds to wait before retrying (RATE_LIMITED only)
        attempts: Total number of attempts made, including retries
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status_code: int | None = None,
        retry_after: float | None = None,
        attempts: int = 1,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.kind = kind
        self.status_code = status_code
        self.retry_after = retry_after
        self.attempts = attempts

    def __str__(self) -> str:
        if self.attempts > 1:
            return f"{self.message} (after {self.attempts} attempts)"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r}, "
            f"status_code={self.status_code!r}, attempts={self.attempts!r})"
        )

    @property
    def is_not_found(self) -> bool:
        return self.kind is ErrorKind.NOT_FOUND

    @property
    def is_rate_limited(self) -> bool:
        return self.kind is ErrorKind.RATE_LIMITED

    @property
    def is_authorization_error(self) -> bool:
        return self.kind in (ErrorKind.UNAUTHORIZED, ErrorKind.FORBIDDEN)

    @property
    def is_validation_error(self) -> bool:
        return self.kind is ErrorKind.VALIDATION

    @property
    def is_transient(self) -> bool:
        """Whether the failure class is one the executor would retry."""
        return self.kind in RETRYABLE_KINDS
