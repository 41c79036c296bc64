"""
Integration tests against the RozetkaPay sandbox.

Run with:
    ROZETKAPAY_LOGIN=... ROZETKAPAY_PASSWORD=... pytest -m integration
"""

import uuid
from decimal import Decimal

import pytest

from rozetkapay import ErrorKind, RozetkaPayAPIError, RozetkaPayClient
from rozetkapay.models.merchants import MerchantValidationResponse
from rozetkapay.models.payments import CreatePaymentRequest, PaymentResponse
from rozetkapay.models.payparts import PayPartsBanksResponse


pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_create_and_fetch_payment(sandbox_settings):
    external_id = f"it-{uuid.uuid4()}"

    async with RozetkaPayClient(sandbox_settings) as client:
        created = await client.payments.create(
            CreatePaymentRequest(amount=Decimal("1.00"), external_id=external_id)
        )
        fetched = await client.payments.get_info(external_id)

    assert isinstance(created, PaymentResponse)
    assert fetched.external_id == external_id


@pytest.mark.asyncio
async def test_unknown_payment_not_found(sandbox_settings):
    async with RozetkaPayClient(sandbox_settings) as client:
        with pytest.raises(RozetkaPayAPIError) as exc_info:
            await client.payments.get_info(f"missing-{uuid.uuid4()}")

    assert exc_info.value.kind in (ErrorKind.NOT_FOUND, ErrorKind.VALIDATION)


@pytest.mark.asyncio
async def test_wrong_credentials_unauthorized(sandbox_settings):
    settings = sandbox_settings.model_copy(update={"PASSWORD": "definitely-wrong"})

    async with RozetkaPayClient(settings) as client:
        with pytest.raises(RozetkaPayAPIError) as exc_info:
            await client.payments.get_info("any")

    assert exc_info.value.kind is ErrorKind.UNAUTHORIZED
    assert exc_info.value.attempts == 1


@pytest.mark.asyncio
async def test_payparts_banks_with_fallback(sandbox_settings):
    async with RozetkaPayClient(sandbox_settings) as client:
        banks = await client.payparts.get_banks()

    assert isinstance(banks, PayPartsBanksResponse)


@pytest.mark.asyncio
async def test_merchant_credentials_accepted(sandbox_settings):
    async with RozetkaPayClient(sandbox_settings) as client:
        info = await client.merchants.get_info()

    assert isinstance(info, MerchantValidationResponse)
