"""
Batch payment models.

A batch charges one customer for several orders in a single operation;
each order carries its own external_id and amount and gets its own
operation in the response.
"""

from typing import Optional

from pydantic import Field

from rozetkapay.codec import FlexibleDateTime, FlexibleDecimal, FlexibleInt32, StrictAmount
from rozetkapay.models.base import WireModel
from rozetkapay.models.common import BrowserFingerprint, PaymentMode, Product, UserAction
from rozetkapay.models.payments import PaymentMethod


# === Requests ===


class BatchCustomer(WireModel):
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    email: Optional[str] = None
    external_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    patronym: Optional[str] = None
    phone: Optional[str] = None
    postal_code: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    locale: Optional[str] = None
    fingerprint: Optional[BrowserFingerprint] = None


class BatchOrder(WireModel):
    amount: StrictAmount
    external_id: str
    api_key: Optional[str] = None
    description: Optional[str] = None
    unified_external_id: Optional[str] = None
    products: Optional[list[Product]] = None


class CreateBatchPaymentRequest(WireModel):
    batch_external_id: str
    currency: str
    customer: BatchCustomer
    orders: list[BatchOrder]
    mode: PaymentMode = PaymentMode.DIRECT
    confirm: bool = True
    callback_url: Optional[str] = None
    result_url: Optional[str] = None
    payload: Optional[str] = None


class BatchConfirmOrder(WireModel):
    external_id: str
    amount: FlexibleDecimal = None
    api_key: Optional[str] = None


class ConfirmBatchPaymentRequest(WireModel):
    external_id: str
    batch_external_id: str
    orders: Optional[list[BatchConfirmOrder]] = None
    callback_url: Optional[str] = None
    payload: Optional[str] = None


class CancelBatchPaymentRequest(WireModel):
    external_id: str
    callback_url: Optional[str] = None
    payload: Optional[str] = None


# === Responses ===


class BatchDetails(WireModel):
    amount: FlexibleDecimal = None
    auth_code: Optional[str] = None
    comment: Optional[str] = None
    created_at: FlexibleDateTime = None
    currency: Optional[str] = None
    mid: Optional[str] = None
    payload: Optional[str] = None
    processed_at: FlexibleDateTime = None
    rrn: Optional[str] = None
    terminal_name: Optional[str] = None
    bank_name: Optional[str] = None
    tid: Optional[str] = None


class BatchPaymentMethod(WireModel):
    type: Optional[str] = None
    masked_card: Optional[str] = None
    brand: Optional[str] = None


class BatchFee(WireModel):
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    rate: FlexibleDecimal = None


class BatchOrderDetails(WireModel):
    external_id: Optional[str] = None
    unified_external_id: Optional[str] = None
    description: Optional[str] = None
    operation_id: Optional[str] = None
    transaction_id: Optional[str] = None
    amount: FlexibleDecimal = None
    status: Optional[str] = None
    status_code: FlexibleInt32 = None
    status_description: Optional[str] = None
    method: Optional[str] = None
    fee: Optional[BatchFee] = None


class BatchPaymentResponse(WireModel):
    id: Optional[str] = None
    batch_external_id: Optional[str] = None
    action_required: bool = False
    action: Optional[UserAction] = None
    batch_details: Optional[BatchDetails] = None
    payment_method: Optional[BatchPaymentMethod] = None
    order_details: list[BatchOrderDetails] = Field(default_factory=list)
    receipt_url: Optional[str] = None

