"""Unit test fixtures (executor, router and sleep stubs)."""

from unittest.mock import AsyncMock, patch

import pytest

from rozetkapay.retry.policy import BackoffStrategy, RetryPolicy
from rozetkapay.transport.executor import RequestExecutor
from rozetkapay.transport.fallback import FallbackRouter


@pytest.fixture
def no_sleep():
    """Replace the executor's backoff sleep with an AsyncMock recording delays."""
    with patch("rozetkapay.transport.executor.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


@pytest.fixture
def fixed_retry_policy() -> RetryPolicy:
    """Three retries with a fixed 1s delay (deterministic)."""
    return RetryPolicy(
        enabled=True,
        max_attempts=3,
        base_delay=1.0,
        max_delay=30.0,
        backoff_strategy=BackoffStrategy.FIXED,
    )


@pytest.fixture
def executor(http_client) -> RequestExecutor:
    """Executor with retries disabled."""
    return RequestExecutor(http_client, RetryPolicy.default())


@pytest.fixture
def retrying_executor(http_client, fixed_retry_policy) -> RequestExecutor:
    return RequestExecutor(http_client, fixed_retry_policy)


@pytest.fixture
def router(executor) -> FallbackRouter:
    return FallbackRouter(executor)
