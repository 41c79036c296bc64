"""
Retry policy and backoff strategies for HTTP requests.

The policy is an immutable value built once per client configuration and
shared read-only by every concurrent call. It answers two questions for
the request executor:

    1. Should this failure be retried? (status allow-list, transport allow-list)
    2. How long to wait before retry N? (backoff strategy)

Retries are disabled by default; RetryPolicy.standard() enables three
retries with exponential backoff and jitter.
"""

import random
import socket
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from rozetkapay.config import Settings


DEFAULT_RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({500, 502, 503, 504, 429, 408})

# Connection reset, timeouts and DNS/socket failures. Fixed, not configurable.
RETRYABLE_TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
    ConnectionError,
    TimeoutError,
    socket.gaierror,
)

JITTER_RATIO = 0.25


class BackoffStrategy(str, Enum):
    """Delay growth between consecutive retries."""

    FIXED = "fixed"
    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    EXPONENTIAL_JITTER = "exponential_jitter"


@dataclass(frozen=True)
class RetryPolicy:
    """
    Immutable retry configuration.

    Attributes:
        enabled: Master switch; when False nothing is ever retried
        max_attempts: Number of retries after the first attempt (0 = disabled)
        base_delay: Base delay in seconds
        max_delay: Upper bound in seconds for the exponential strategies
        backoff_strategy: How the delay grows with the retry number
        retryable_status_codes: HTTP statuses eligible for retry
    """

    enabled: bool = False
    max_attempts: int = 0
    base_delay: float = 1.0
    max_delay: float = 30.0
    backoff_strategy: BackoffStrategy = BackoffStrategy.EXPONENTIAL_JITTER
    retryable_status_codes: frozenset[int] = field(
        default_factory=lambda: DEFAULT_RETRYABLE_STATUS_CODES
    )

    def __post_init__(self) -> None:
        if self.max_attempts < 0:
            raise ValueError("max_attempts must be >= 0")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("delays must be >= 0")
        # Accept any iterable of codes but store a frozenset
        object.__setattr__(
            self, "retryable_status_codes", frozenset(self.retryable_status_codes)
        )

    @classmethod
    def default(cls) -> "RetryPolicy":
        """Retries disabled (the default)."""
        return cls()

    @classmethod
    def none(cls) -> "RetryPolicy":
        """Retries explicitly disabled."""
        return cls(enabled=False, max_attempts=0)

    @classmethod
    def standard(cls) -> "RetryPolicy":
        """Three retries, 1s base, 30s cap, exponential backoff with jitter."""
        return cls(
            enabled=True,
            max_attempts=3,
            base_delay=1.0,
            max_delay=30.0,
            backoff_strategy=BackoffStrategy.EXPONENTIAL_JITTER,
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RetryPolicy":
        return cls(
            enabled=settings.RETRY_ENABLED,
            max_attempts=settings.RETRY_MAX_ATTEMPTS,
            base_delay=settings.RETRY_BASE_DELAY,
            max_delay=settings.RETRY_MAX_DELAY,
            backoff_strategy=settings.RETRY_BACKOFF_STRATEGY,
            retryable_status_codes=frozenset(settings.RETRY_STATUS_CODES),
        )

    @property
    def is_active(self) -> bool:
        """True when at least one retry may happen."""
        return self.enabled and self.max_attempts > 0

    def delay(self, attempt: int) -> float:
        """
        Delay in seconds before retry number `attempt` (1-based).

        Unrecognised strategies fall back to base_delay; never raises.
        """
        strategy = self.backoff_strategy
        if strategy == BackoffStrategy.FIXED:
            return self.base_delay
        if strategy == BackoffStrategy.LINEAR:
            return self.base_delay * attempt
        if strategy == BackoffStrategy.EXPONENTIAL:
            return self._exponential_delay(attempt)
        if strategy == BackoffStrategy.EXPONENTIAL_JITTER:
            return self._jittered(self._exponential_delay(attempt))
        return self.base_delay

    def should_retry_status(self, status_code: int) -> bool:
        return self.enabled and status_code in self.retryable_status_codes

    def should_retry_exception(self, exc: BaseException) -> bool:
        return self.enabled and isinstance(exc, RETRYABLE_TRANSPORT_ERRORS)

    def _exponential_delay(self, attempt: int) -> float:
        exponent = max(attempt - 1, 0)
        # Cap the exponent so huge attempt numbers cannot overflow
        if exponent >= 64:
            return self.max_delay
        return min(self.base_delay * (2 ** exponent), self.max_delay)

    @staticmethod
    def _jittered(delay: float) -> float:
        # Fresh generator per call: no shared state between concurrent requests
        rng = random.Random()
        jitter = rng.uniform(-JITTER_RATIO, JITTER_RATIO) * delay
        return max(0.0, delay + jitter)
