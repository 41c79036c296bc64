"""
Payment request and response models.

All amounts use FlexibleDecimal and all timestamps FlexibleDateTime, so
responses with numbers-as-strings, empty strings or Unix timestamps decode
without errors.
"""

from datetime import date
from typing import Any, Optional

from pydantic import Field

from rozetkapay.codec import FlexibleDateTime, FlexibleDecimal, FlexibleInt32, StrictAmount
from rozetkapay.models.base import WireModel
from rozetkapay.models.common import (
    BrowserFingerprint,
    PaymentMode,
    PaymentMethodType,
    Product,
    UserAction,
    UserInfo,
)


# === Requests ===


class CardDetails(WireModel):
    # Card data must never end up in logs or tracebacks; repr=False keeps
    # every field out of both repr() and str()
    number: Optional[str] = Field(default=None, repr=False)
    exp_month: Optional[str] = Field(default=None, repr=False)
    exp_year: Optional[str] = Field(default=None, repr=False)
    cvv: Optional[str] = Field(default=None, repr=False)
    holder_name: Optional[str] = Field(default=None, repr=False)


class PaymentMethod(WireModel):
    type: Optional[PaymentMethodType] = None
    card: Optional[CardDetails] = None
    cc_token: Optional[dict[str, Any]] = None
    apple_pay_token: Optional[dict[str, Any]] = None
    google_pay_token: Optional[dict[str, Any]] = None
    wallet_token: Optional[dict[str, Any]] = None


class CustomerInfo(WireModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    patronym: Optional[str] = None
    phone: Optional[str] = None
    external_id: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    color_mode: Optional[str] = None
    locale: Optional[str] = None
    account_number: Optional[str] = None
    ip_address: Optional[str] = None
    fingerprint: Optional[BrowserFingerprint] = None
    user_info: Optional[UserInfo] = None


class RecipientInfo(WireModel):
    payment_method: Optional[dict[str, Any]] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None


class CreatePaymentRequest(WireModel):
    amount: StrictAmount
    currency: str = "UAH"
    external_id: str
    mode: Optional[PaymentMode] = None
    callback_url: Optional[str] = None
    result_url: Optional[str] = None
    confirm: Optional[bool] = None
    description: Optional[str] = None
    payload: Optional[str] = None
    customer: Optional[CustomerInfo] = None
    products: Optional[list[Product]] = None
    recipient: Optional[RecipientInfo] = None
    init_recurrent_payment: Optional[bool] = None
    unified_external_id: Optional[str] = None


class CreateRecurrentPaymentRequest(WireModel):
    amount: StrictAmount
    currency: str = "UAH"
    external_id: str
    recurrent_id: str
    description: Optional[str] = None
    callback_url: Optional[str] = None
    customer: Optional[CustomerInfo] = None
    metadata: Optional[dict[str, Any]] = None


class ConfirmPaymentRequest(WireModel):
    external_id: str
    amount: FlexibleDecimal = None


class CancelPaymentRequest(WireModel):
    external_id: str
    reason: Optional[str] = None


class RefundPaymentRequest(WireModel):
    external_id: str
    amount: FlexibleDecimal = None
    reason: Optional[str] = None
    external_refund_id: Optional[str] = None
    callback_url: Optional[str] = None


class RefundActionRequest(WireModel):
    """Body of refund/retry and refund/cancel."""

    external_id: str


class PaymentListRequest(WireModel):
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    status: Optional[str] = None
    limit: FlexibleInt32 = None
    offset: FlexibleInt32 = None


class CardLookupRequest(WireModel):
    card_number: str = Field(repr=False)


class ResendCallbackRequest(WireModel):
    external_id: str
    callback_url: Optional[str] = None


class P2PConfirmationRequest(WireModel):
    external_id: str
    amount: FlexibleDecimal = None
    description: Optional[str] = None
    callback_url: Optional[str] = None


# === Responses ===


class PaymentCustomer(WireModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    patronym: Optional[str] = None
    phone: Optional[str] = None
    ip: Optional[str] = None


class PaymentMethodInfo(WireModel):
    type: Optional[str] = None
    title: Optional[str] = None
    payment_system: Optional[str] = None


class CardInfo(WireModel):
    mask: Optional[str] = None
    bin: Optional[str] = None
    payment_system: Optional[str] = None
    type: Optional[str] = None
    bank_name: Optional[str] = None
    country: Optional[str] = None
    token: Optional[str] = None


class ThreeDsInfo(WireModel):
    version: Optional[str] = None
    acs_url: Optional[str] = None
    pareq: Optional[str] = None
    term_url: Optional[str] = None
    creq: Optional[str] = None
    status: Optional[str] = None


class PaymentError(WireModel):
    code: Optional[str] = None
    message: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None


class CallbackInfo(WireModel):
    url: Optional[str] = None
    status: Optional[str] = None
    attempts: FlexibleInt32 = None
    last_attempt_at: FlexibleDateTime = None
    next_attempt_at: FlexibleDateTime = None


class TransactionDetails(WireModel):
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    status: Optional[str] = None
    transaction_id: Optional[str] = None
    created_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None
    auth_code: Optional[str] = None
    rrn: Optional[str] = None


class PaymentDetails(WireModel):
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    payment_method: Optional[PaymentMethodInfo] = None


class PaymentResponse(WireModel):
    """Payment state as returned by create/confirm/cancel/refund/info."""

    id: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    status_code: FlexibleInt32 = None
    status_description: Optional[str] = None
    amount: FlexibleDecimal = None
    amount_canceled: FlexibleDecimal = None
    amount_confirmed: FlexibleDecimal = None
    amount_refunded: FlexibleDecimal = None
    currency: Optional[str] = None
    description: Optional[str] = None
    mode: Optional[str] = None
    confirm: Optional[bool] = None
    purchased: Optional[bool] = None
    canceled: Optional[bool] = None
    confirmed: Optional[bool] = None
    refunded: Optional[bool] = None
    action_required: Optional[bool] = None
    created_at: FlexibleDateTime = None
    updated_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None
    checkout_url: Optional[str] = None
    action: Optional[UserAction] = None
    qr_code_url: Optional[str] = None
    receipt_url: Optional[str] = None
    customer: Optional[PaymentCustomer] = None
    payment_method: Optional[PaymentMethodInfo] = None
    card: Optional[CardInfo] = None
    three_ds: Optional[ThreeDsInfo] = None
    auth_code: Optional[str] = None
    rrn: Optional[str] = None
    transaction_id: Optional[str] = None
    unified_external_id: Optional[str] = None
    batch_external_id: Optional[str] = None
    recurrent_token: Optional[str] = None
    recurrent_id: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None
    error: Optional[PaymentError] = None
    actions: Optional[list[str]] = None
    callback: Optional[CallbackInfo] = None
    details: Optional[PaymentDetails] = None
    purchase_details: Optional[list[TransactionDetails]] = None
    confirmation_details: Optional[list[TransactionDetails]] = None
    cancellation_details: Optional[list[TransactionDetails]] = None
    refund_details: Optional[list[TransactionDetails]] = None

    @property
    def is_success(self) -> bool:
        return (self.status or "").lower() == "success"


class PaymentListResponse(WireModel):
    payments: list[PaymentResponse] = []
    count: FlexibleInt32 = None
    offset: FlexibleInt32 = None


class PaymentReceiptResponse(WireModel):
    receipt_url: Optional[str] = None
    receipt_pdf: Optional[str] = None
    receipt_html: Optional[str] = None


class BinInfo(WireModel):
    payment_system: Optional[str] = None
    type: Optional[str] = None
    bank_name: Optional[str] = None
    country: Optional[str] = None
    country_name: Optional[str] = None


class CardLookupResponse(WireModel):
    bin: Optional[BinInfo] = None
    payment_methods: Optional[list[str]] = None


class CallbackResendResponse(WireModel):
    status: Optional[str] = None
    message: Optional[str] = None
