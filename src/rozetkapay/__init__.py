"""
Async client for the RozetkaPay payment API.

Exposes payments, payouts, subscriptions, installment (PayParts) orders,
alternative payment methods, reports, customer wallets, merchant settings,
batch payments and FinMon limits through thin service classes that share
one resilient request engine:

- RetryPolicy: configurable backoff (fixed, linear, exponential, jitter)
- RequestExecutor: classifies failures, retries transient ones, raises typed errors
- FallbackRouter: retries a call on a legacy path when the new one returns 404
- Tolerant codec: numbers-as-strings, several date layouts, Unix timestamps

Usage:
    >>> async with RozetkaPayClient.create(base_url, login, password) as client:
    ...     payment = await client.payments.get_info("order-42")
"""

from rozetkapay.client import RozetkaPayClient
from rozetkapay.config import Settings
from rozetkapay.exceptions import ConfigurationError, RozetkaPayError
from rozetkapay.retry.policy import BackoffStrategy, RetryPolicy
from rozetkapay.transport.exceptions import ErrorKind, RozetkaPayAPIError
from rozetkapay.codec.exceptions import DecodeError, ResponseDecodeError

__version__ = "0.1.0"

__all__ = [
    "RozetkaPayClient",
    "Settings",
    "RetryPolicy",
    "BackoffStrategy",
    "ErrorKind",
    "RozetkaPayError",
    "RozetkaPayAPIError",
    "ConfigurationError",
    "DecodeError",
    "ResponseDecodeError",
]
