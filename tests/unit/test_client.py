"""
Unit tests for RozetkaPayClient construction and lifecycle.
"""

import httpx
import pytest

from rozetkapay import ConfigurationError, RozetkaPayClient
from rozetkapay.retry.policy import RetryPolicy
from rozetkapay.services import CustomerService, FinMonService, PaymentService, PayPartsService
from tests.fixtures.http import json_response


# ============================================================================
# Construction
# ============================================================================


def test_missing_settings_rejected():
    with pytest.raises(ConfigurationError):
        RozetkaPayClient(None)


def test_invalid_settings_rejected(test_settings):
    settings = test_settings.model_copy(update={"LOGIN": ""})

    with pytest.raises(ConfigurationError) as exc_info:
        RozetkaPayClient(settings)

    assert exc_info.value.details["base_url"] == test_settings.BASE_URL
    assert "test-password" not in str(exc_info.value)


@pytest.mark.asyncio
async def test_services_share_one_executor(test_settings):
    async with RozetkaPayClient(test_settings) as client:
        assert isinstance(client.payments, PaymentService)
        assert isinstance(client.payparts, PayPartsService)
        assert isinstance(client.customers, CustomerService)
        assert isinstance(client.finmon, FinMonService)
        for service in (
            client.payments,
            client.payouts,
            client.subscriptions,
            client.payparts,
            client.alternative_payments,
            client.reports,
            client.customers,
            client.merchants,
            client.batch_payments,
            client.finmon,
        ):
            assert service.executor is client.executor
            assert service.router is client.router


@pytest.mark.asyncio
async def test_retry_policy_from_settings(test_settings):
    settings = test_settings.model_copy(update={"RETRY_ENABLED": True, "RETRY_MAX_ATTEMPTS": 2})

    async with RozetkaPayClient(settings) as client:
        assert client.executor.policy.is_active is True
        assert client.executor.policy.max_attempts == 2


@pytest.mark.asyncio
async def test_explicit_retry_policy_wins(test_settings):
    policy = RetryPolicy.standard()

    async with RozetkaPayClient(test_settings, retry_policy=policy) as client:
        assert client.executor.policy is policy


# ============================================================================
# HTTP Client Ownership
# ============================================================================


@pytest.mark.asyncio
async def test_owned_client_closed(test_settings):
    client = RozetkaPayClient(test_settings)

    assert client.owns_http_client is True
    await client.close()
    await client.close()

    assert client.http_client.is_closed


@pytest.mark.asyncio
async def test_external_client_left_open(test_settings, scripted_api):
    scripted_api.script(json_response(200, {"id": "p1"}))
    external = httpx.AsyncClient(transport=httpx.MockTransport(scripted_api))

    async with RozetkaPayClient(test_settings, http_client=external) as client:
        assert client.owns_http_client is False
        payment = await client.payments.get_info("o1")

    assert payment.id == "p1"
    assert external.is_closed is False
    assert str(scripted_api.requests[0].url).startswith(test_settings.BASE_URL)
    assert scripted_api.requests[0].headers["Authorization"].startswith("Basic ")
    await external.aclose()


@pytest.mark.asyncio
async def test_create_from_credentials(scripted_api):
    external = httpx.AsyncClient(transport=httpx.MockTransport(scripted_api))

    client = RozetkaPayClient.create(
        "https://sandbox.rozetkapay.local", "login", "secret", http_client=external
    )

    assert client.settings.LOGIN == "login"
    assert client.http_client.base_url == httpx.URL("https://sandbox.rozetkapay.local")
    await client.close()
    await external.aclose()
