"""
Retry policy and backoff strategies.

Main Components:
    - RetryPolicy: Immutable retry configuration and backoff calculation
    - BackoffStrategy: Fixed, linear, exponential, exponential with jitter
    - RETRYABLE_TRANSPORT_ERRORS: Fixed allow-list of transient transport errors

Usage:
    >>> from rozetkapay.retry import RetryPolicy
    >>> policy = RetryPolicy.standard()
    >>> policy.delay(2)  # ~2.0s, +/-25% jitter
"""

from rozetkapay.retry.policy import (
    DEFAULT_RETRYABLE_STATUS_CODES,
    RETRYABLE_TRANSPORT_ERRORS,
    BackoffStrategy,
    RetryPolicy,
)

__all__ = [
    "RetryPolicy",
    "BackoffStrategy",
    "DEFAULT_RETRYABLE_STATUS_CODES",
    "RETRYABLE_TRANSPORT_ERRORS",
]
