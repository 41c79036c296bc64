"""
Per-attempt outcomes and per-call request metadata.

AttemptSuccess / AttemptFailure are transient values produced once per
attempt inside a single executor invocation. RequestMetadata summarises
the whole logical call (attempts, failures, latency) for logging and
for callers that ask for it via execute_with_metadata().
"""

from dataclasses import dataclass, field
from typing import Union

from rozetkapay.transport.exceptions import ErrorKind


@dataclass(frozen=True)
class AttemptSuccess:
    """A non-error HTTP response; body is the raw response text."""

    status_code: int
    body: str


@dataclass(frozen=True)
class AttemptFailure:
    """
    A classified failure of a single attempt.

    Attributes:
        kind: Error classification
        message: Safe, user-facing message (never the raw body)
        status_code: HTTP status, None for transport failures
        retry_after: Seconds reported by the server (RATE_LIMITED only)
        exception: Underlying transport exception, if any
    """

    kind: ErrorKind
    message: str
    status_code: int | None = None
    retry_after: float | None = None
    exception: BaseException | None = field(default=None, compare=False, repr=False)


AttemptOutcome = Union[AttemptSuccess, AttemptFailure]


@dataclass(frozen=True)
class RequestMetadata:
    """
    Summary of one logical call.

    Attributes:
        method: HTTP method
        path: Request path (without query string)
        attempts: Number of transport calls made (>= 1)
        failures: Classified failures of the attempts that did not succeed
        status_code: Status of the final response (None if none was received)
        latency_ms: Wall time from first attempt to result, in milliseconds
    """

    method: str
    path: str
    attempts: int
    failures: tuple[AttemptFailure, ...] = ()
    status_code: int | None = None
    latency_ms: int = 0

    def __post_init__(self) -> None:
        """Validate metadata invariants."""
        if self.attempts < 1:
            raise ValueError("attempts must be >= 1")

        if self.latency_ms < 0:
            raise ValueError("latency_ms must be >= 0")

    @property
    def retried(self) -> bool:
        return self.attempts > 1
