"""
Wire models for RozetkaPay API requests and responses.

Every model derives from WireModel: snake_case field names matching the
API, unknown fields preserved, and tolerant numeric/date field types so
that inconsistent upstream formats decode cleanly.
"""

from rozetkapay.models.base import WireModel
from rozetkapay.models.common import ApiMessage, PaymentMode, PaymentMethodType, Product, UserAction
from rozetkapay.models.payments import (
    CancelPaymentRequest,
    CardLookupRequest,
    CardLookupResponse,
    CallbackResendResponse,
    ConfirmPaymentRequest,
    CreatePaymentRequest,
    CreateRecurrentPaymentRequest,
    CustomerInfo,
    P2PConfirmationRequest,
    PaymentListRequest,
    PaymentListResponse,
    PaymentReceiptResponse,
    PaymentResponse,
    RefundActionRequest,
    RefundPaymentRequest,
    ResendCallbackRequest,
)
from rozetkapay.models.webhooks import PaymentWebhook

__all__ = [
    "ApiMessage",
    "CallbackResendResponse",
    "CancelPaymentRequest",
    "CardLookupRequest",
    "CardLookupResponse",
    "ConfirmPaymentRequest",
    "CreatePaymentRequest",
    "CreateRecurrentPaymentRequest",
    "CustomerInfo",
    "P2PConfirmationRequest",
    "PaymentListRequest",
    "PaymentListResponse",
    "PaymentMethodType",
    "PaymentMode",
    "PaymentReceiptResponse",
    "PaymentResponse",
    "PaymentWebhook",
    "Product",
    "RefundActionRequest",
    "RefundPaymentRequest",
    "ResendCallbackRequest",
    "UserAction",
    "WireModel",
]
