"""
Payment webhook (callback) models.

RozetkaPay POSTs one of these to the callback_url of a payment whenever
an operation on it changes state. Parse the raw request body with
PaymentWebhook.parse() so amounts keep full precision:

    webhook = PaymentWebhook.parse(await request.body())
    if webhook.is_success:
        mark_paid(webhook.external_id, webhook.details.amount)
"""

import json
from decimal import Decimal
from typing import Optional, Union

from pydantic import Field, ValidationError

from rozetkapay.codec import FlexibleDateTime, FlexibleDecimal
from rozetkapay.codec.exceptions import ResponseDecodeError
from rozetkapay.models.base import WireModel
from rozetkapay.models.common import UserAction


class WebhookFee(WireModel):
    amount: FlexibleDecimal = None
    currency: Optional[str] = None


class PaymentWebhookDetails(WireModel):
    payment_id: Optional[str] = None
    operation_id: Optional[str] = None
    transaction_id: Optional[str] = None
    billing_order_id: Optional[str] = None
    gateway_order_id: Optional[str] = None
    rrn: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    status: Optional[str] = None
    # Sent as a string code ("1001"), unlike payment responses
    status_code: Optional[str] = None
    status_description: Optional[str] = None
    created_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None
    description: Optional[str] = None
    payload: Optional[str] = None
    auth_code: Optional[str] = None
    terminal_name: Optional[str] = None
    bank_name: Optional[str] = None
    fee: Optional[WebhookFee] = None
    comment: Optional[str] = None
    method: Optional[str] = None
    recipient_cc_mask: Optional[str] = None


class WebhookCardToken(WireModel):
    token: Optional[str] = Field(default=None, repr=False)
    mask: Optional[str] = None
    expires_at: FlexibleDateTime = None
    bank_short_name: Optional[str] = None
    payment_system: Optional[str] = None


class WebhookPaymentMethod(WireModel):
    type: Optional[str] = None
    cc_token: Optional[WebhookCardToken] = None


class WebhookCustomer(WireModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    patronym: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    ip_address: Optional[str] = None
    browser_user_agent: Optional[str] = None
    fingerprint: Optional[str] = None


class PaymentWebhook(WireModel):
    id: Optional[str] = None
    external_id: Optional[str] = None
    unified_external_id: Optional[str] = None
    project_id: Optional[str] = None
    operation: Optional[str] = None
    is_success: bool = False
    details: Optional[PaymentWebhookDetails] = None
    receipt_url: Optional[str] = None
    action_required: bool = False
    action: Optional[UserAction] = None
    payment_method: Optional[WebhookPaymentMethod] = None
    customer: Optional[WebhookCustomer] = None

    @classmethod
    def parse(cls, body: Union[bytes, str]) -> "PaymentWebhook":
        """
        Decode a raw webhook body.

        Raises:
            ResponseDecodeError: Body is not JSON or does not match the model
            DecodeError: A numeric or date field has an unusable value
        """
        try:
            data = json.loads(body, parse_float=Decimal)
        except ValueError as e:
            raise ResponseDecodeError(cls.__name__, "body is not valid JSON") from e
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ResponseDecodeError(
                cls.__name__, f"{e.error_count()} validation error(s)"
            ) from e
