"""PayParts (installment) order models."""

from typing import Any, Optional

from rozetkapay.codec import FlexibleDateTime, FlexibleDecimal, FlexibleInt32, Int32, StrictAmount
from rozetkapay.models.base import WireModel
from rozetkapay.models.common import UserAction


class PayPartsCustomer(WireModel):
    first_name: str
    last_name: str
    patronym: Optional[str] = None
    phone: str
    email: Optional[str] = None
    birth_date: FlexibleDateTime = None


class PayPartsProduct(WireModel):
    name: str
    price: StrictAmount
    quantity: Int32 = 1
    category: Optional[str] = None
    url: Optional[str] = None


class CreatePayPartsOrderRequest(WireModel):
    external_id: str
    amount: StrictAmount
    currency: str = "UAH"
    parts_count: int
    description: Optional[str] = None
    bank: Optional[str] = None
    merchant_id: Optional[str] = None
    callback_url: Optional[str] = None
    success_url: Optional[str] = None
    failure_url: Optional[str] = None
    customer: Optional[PayPartsCustomer] = None
    products: Optional[list[PayPartsProduct]] = None
    metadata: Optional[dict[str, Any]] = None


class ConfirmPayPartsRequest(WireModel):
    external_id: str
    callback_url: Optional[str] = None
    payload: Optional[str] = None


class CancelPayPartsRequest(WireModel):
    external_id: str
    callback_url: Optional[str] = None
    payload: Optional[str] = None


class RefundPayPartsOrderRequest(WireModel):
    external_id: str
    amount: FlexibleDecimal = None
    reason: Optional[str] = None
    external_refund_id: Optional[str] = None


class PayPartsError(WireModel):
    code: Optional[str] = None
    message: Optional[str] = None
    description: Optional[str] = None


class PayPartsOrderResponse(WireModel):
    id: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    parts_count: FlexibleInt32 = None
    bank: Optional[str] = None
    checkout_url: Optional[str] = None
    qr_code: Optional[str] = None
    created_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None
    customer: Optional[PayPartsCustomer] = None
    products: Optional[list[PayPartsProduct]] = None
    error: Optional[PayPartsError] = None


class PayPartsRefundResponse(WireModel):
    refund_id: Optional[str] = None
    external_refund_id: Optional[str] = None
    status: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    reason: Optional[str] = None
    created_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None


class PayPartsOperationDetails(WireModel):
    method: Optional[str] = None
    operation_id: Optional[str] = None
    transaction_id: Optional[str] = None
    billing_order_id: Optional[str] = None
    gateway_order_id: Optional[str] = None
    rrn: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    status_description: Optional[str] = None
    created_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None
    payload: Optional[str] = None
    auth_code: Optional[str] = None
    bank_name: Optional[str] = None


class PayPartsOperationResult(WireModel):
    """Single operation of an order (/info/operation and its legacy path)."""

    id: Optional[str] = None
    external_id: Optional[str] = None
    unified_external_id: Optional[str] = None
    is_success: bool = False
    details: Optional[PayPartsOperationDetails] = None
    action_required: bool = False
    action: Optional[UserAction] = None
    receipt_url: Optional[str] = None


class PayPartsOperationsResult(WireModel):
    """All operations of an order (/info)."""

    external_id: Optional[str] = None
    unified_external_id: Optional[str] = None
    amount: FlexibleDecimal = None
    amount_confirmed: FlexibleDecimal = None
    amount_canceled: FlexibleDecimal = None
    amount_refunded: FlexibleDecimal = None
    currency: Optional[str] = None
    purchased: bool = False
    purchase_details: Optional[PayPartsOperationDetails] = None
    confirmed: bool = False
    confirmation_details: Optional[list[PayPartsOperationDetails]] = None
    refunded: bool = False
    refund_details: Optional[list[PayPartsOperationDetails]] = None
    canceled: bool = False
    cancellation_details: Optional[list[PayPartsOperationDetails]] = None
    receipt_url: Optional[str] = None
    created_at: FlexibleDateTime = None
    action_required: bool = False
    action: Optional[UserAction] = None


class PayPartsBankLimits(WireModel):
    min_amount: FlexibleDecimal = None
    max_amount: FlexibleDecimal = None


class PayPartsPeriodInfo(WireModel):
    fee: FlexibleDecimal = None
    period: FlexibleInt32 = None


class PayPartsBankInfo(WireModel):
    name: Optional[str] = None
    available_periods: Optional[list[int]] = None
    limits: Optional[PayPartsBankLimits] = None
    periods: Optional[list[PayPartsPeriodInfo]] = None


class PayPartsBanksResponse(WireModel):
    banks: list[PayPartsBankInfo] = []
    status: Optional[str] = None
    message: Optional[str] = None
    total_count: FlexibleInt32 = None


class PayPartsResendCallbackRequest(WireModel):
    external_id: str
    callback_url: Optional[str] = None
