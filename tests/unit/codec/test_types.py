"""
Unit tests for the tolerant pydantic field types and wire models.

Verifies that models decode the mixed-format fixture, that DecodeError
propagates out of model validation, that requests serialize with null
fields omitted, and that card data never shows up in repr() or str().
"""

import json
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from pydantic import BaseModel

from rozetkapay.codec import (
    DATETIME_MIN,
    DecodeError,
    FlexibleDateTime,
    FlexibleDecimal,
    FlexibleInt32,
    Int32,
    RequiredDateTime,
    ResponseDecodeError,
    StrictAmount,
)
from rozetkapay.models.customers import WalletCardDetails
from rozetkapay.models.payments import (
    CardDetails,
    CardLookupRequest,
    CreatePaymentRequest,
    CustomerInfo,
    PaymentListRequest,
    PaymentMethod,
    PaymentResponse,
)
from rozetkapay.models.payouts import CardData
from rozetkapay.models.payparts import PayPartsBanksResponse
from rozetkapay.models.reports import PaymentsReportRequest
from rozetkapay.models.subscriptions import SubscriptionCard
from rozetkapay.models.webhooks import PaymentWebhook


class Sample(BaseModel):
    amount: FlexibleDecimal = None
    total: StrictAmount = Decimal("0")
    count: FlexibleInt32 = None
    index: Int32 = 0
    at: FlexibleDateTime = None
    due: RequiredDateTime = DATETIME_MIN


# ============================================================================
# Field Types
# ============================================================================


def test_flexible_fields_accept_strings():
    sample = Sample.model_validate(
        {"amount": "10.50", "total": "", "count": "7", "index": "3", "at": "28.02.2026"}
    )

    assert sample.amount == Decimal("10.50")
    assert sample.total == Decimal("0")
    assert sample.count == 7
    assert sample.index == 3
    assert sample.at == datetime(2026, 2, 28, tzinfo=timezone.utc)


def test_nullable_fields_accept_null_and_empty():
    sample = Sample.model_validate({"amount": None, "count": "", "at": None})

    assert sample.amount is None
    assert sample.count is None
    assert sample.at is None


def test_non_nullable_int_null_is_zero():
    assert Sample.model_validate({"index": None}).index == 0


def test_decode_error_propagates_from_validation():
    with pytest.raises(DecodeError) as exc_info:
        Sample.model_validate({"count": "12.5"})

    assert exc_info.value.precision_loss is True


def test_required_datetime_rejects_null():
    with pytest.raises(DecodeError):
        Sample.model_validate({"due": None})


def test_json_serialization_formats():
    sample = Sample(
        amount=Decimal("10.50"),
        total=Decimal("3"),
        at=datetime(2026, 2, 28, 10, 20, 30, tzinfo=timezone.utc),
    )

    data = sample.model_dump(mode="json")

    assert data["amount"] == "10.50"
    assert data["total"] == "3"
    assert data["at"] == "2026-02-28T10:20:30.000Z"
    assert data["count"] is None


def test_python_dump_keeps_decimal():
    assert Sample(amount=Decimal("1.10")).model_dump()["amount"] == Decimal("1.10")


# ============================================================================
# Wire Models
# ============================================================================


def test_payment_response_decodes_mixed_formats(sample_payment_body):
    data = json.loads(sample_payment_body, parse_float=Decimal)

    payment = PaymentResponse.model_validate(data)

    assert payment.id == "pay_7f3a9c"
    assert payment.status_code == 0
    assert payment.amount == Decimal("1250.50")
    assert payment.amount_canceled is None
    assert payment.amount_confirmed == Decimal("1250.5")
    assert payment.amount_refunded is None
    assert payment.created_at == datetime(2026, 2, 28, 10, 20, 30, tzinfo=timezone.utc)
    assert payment.updated_at == datetime(2026, 2, 28, 10, 25, tzinfo=timezone.utc)
    assert payment.processed_at == datetime(2026, 2, 28, 10, 20, 30, tzinfo=timezone.utc)
    assert payment.customer.email == "buyer@example.com"
    assert payment.purchase_details[0].amount == Decimal("1250.50")
    assert payment.is_success is True


def test_unknown_fields_are_preserved(sample_payment_body):
    payment = PaymentResponse.model_validate_json(sample_payment_body)

    assert payment.model_extra["loyalty_points"] == 12


def test_banks_response_decodes_string_limits(sample_banks_data):
    banks = PayPartsBanksResponse.model_validate(sample_banks_data)

    assert banks.total_count == 2
    assert banks.banks[0].limits.max_amount == Decimal("100000.00")
    assert banks.banks[0].periods[0].period == 3
    assert banks.banks[0].periods[0].fee == Decimal("1.9")
    assert banks.banks[1].limits.max_amount is None


def test_request_serialization_omits_none():
    request = CreatePaymentRequest(
        amount=Decimal("100.00"),
        external_id="order-1",
        customer=CustomerInfo(email="buyer@example.com"),
    )

    wire = request.to_wire()

    assert wire == {
        "amount": "100.00",
        "currency": "UAH",
        "external_id": "order-1",
        "customer": {"email": "buyer@example.com"},
    }


def test_request_amount_accepts_string():
    request = CreatePaymentRequest(amount="99.99", external_id="order-2")

    assert request.amount == Decimal("99.99")
    assert request.to_wire()["amount"] == "99.99"


def test_list_request_dates_as_iso_dates():
    request = PaymentListRequest(date_from=date(2026, 1, 1), limit="50")

    assert request.to_wire() == {"date_from": "2026-01-01", "limit": 50}


def test_report_request_defaults():
    request = PaymentsReportRequest(date_from=date(2026, 1, 1), date_to=date(2026, 1, 31))

    assert request.to_wire() == {
        "date_from": "2026-01-01",
        "date_to": "2026-01-31",
        "scope": "current_login",
        "register_type": "transactions_list",
    }


# ============================================================================
# Card Data Redaction
# ============================================================================


CARD_MODELS = [
    CardDetails(number="4111111111111111", exp_month="12", exp_year="29", cvv="123"),
    CardLookupRequest(card_number="4111111111111111"),
    CardData(number="4111111111111111", token="tok_secret", option_id="opt-1"),
    SubscriptionCard(
        number="4111111111111111", expiration_month=12, expiration_year=2029, cvv="123"
    ),
    WalletCardDetails(number="4111111111111111", exp_month="12", exp_year="29", cvv="123"),
]


@pytest.mark.parametrize("card", CARD_MODELS, ids=lambda card: type(card).__name__)
@pytest.mark.parametrize("render", [repr, str, lambda card: f"{card}", lambda card: f"{card!r}"])
def test_card_data_never_rendered(card, render):
    text = render(card)

    assert "4111111111111111" not in text
    assert "'123'" not in text
    assert "tok_secret" not in text


def test_redacted_card_fields_still_serialize():
    card = CardDetails(number="4111111111111111", cvv="123")

    assert card.to_wire() == {"number": "4111111111111111", "cvv": "123"}


def test_payment_method_with_card_hides_number():
    method = PaymentMethod(card=CardDetails(number="4111111111111111", cvv="123"))

    assert "4111111111111111" not in str(method)
    assert "4111111111111111" not in repr(method)


# ============================================================================
# Payment Webhooks
# ============================================================================


WEBHOOK_BODY = """{
    "id": "pay_7f3a9c",
    "external_id": "order-1001",
    "operation": "payment",
    "is_success": true,
    "action_required": false,
    "details": {
        "amount": 1250.50,
        "currency": "UAH",
        "status": "success",
        "status_code": "1001",
        "created_at": "2026-02-28T10:20:30Z",
        "processed_at": 1772274030,
        "fee": {"amount": "18.76", "currency": "UAH"}
    },
    "payment_method": {
        "type": "cc_token",
        "cc_token": {"token": "tok_secret", "mask": "411111******1111", "expires_at": ""}
    },
    "customer": {"email": "buyer@example.com"},
    "loyalty_points": 12
}"""


def test_webhook_parse_decodes_mixed_formats():
    webhook = PaymentWebhook.parse(WEBHOOK_BODY.encode("utf-8"))

    assert webhook.is_success is True
    assert webhook.operation == "payment"
    assert webhook.details.amount == Decimal("1250.50")
    assert webhook.details.status_code == "1001"
    assert webhook.details.created_at == datetime(2026, 2, 28, 10, 20, 30, tzinfo=timezone.utc)
    assert webhook.details.processed_at.year == 2026
    assert webhook.details.fee.amount == Decimal("18.76")
    assert webhook.payment_method.cc_token.expires_at == DATETIME_MIN
    assert webhook.customer.email == "buyer@example.com"
    assert webhook.model_extra["loyalty_points"] == 12


def test_webhook_repr_hides_card_token():
    webhook = PaymentWebhook.parse(WEBHOOK_BODY)

    assert "tok_secret" not in repr(webhook)
    assert "tok_secret" not in str(webhook)
    assert "411111******1111" in repr(webhook)


@pytest.mark.parametrize("body", ["not json", "[1, 2]", b"\xff"])
def test_webhook_parse_rejects_bad_bodies(body):
    with pytest.raises(ResponseDecodeError) as exc_info:
        PaymentWebhook.parse(body)

    assert exc_info.value.target_type == "PaymentWebhook"


def test_webhook_bad_amount_raises_decode_error():
    with pytest.raises(DecodeError):
        PaymentWebhook.parse('{"details": {"amount": "n/a"}}')
