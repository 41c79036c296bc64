"""Alternative payment method (BLIK, Przelewy24, ...) models."""

from typing import Any, Optional

from rozetkapay.codec import FlexibleDateTime, FlexibleDecimal, FlexibleInt32, StrictAmount
from rozetkapay.models.base import WireModel
from rozetkapay.models.common import UserAction


class AlternativePaymentCustomerDetails(WireModel):
    country: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None


class CreateAlternativePaymentRequest(WireModel):
    provider: str
    amount: StrictAmount
    currency: str
    external_id: str
    description: Optional[str] = None
    callback_url: Optional[str] = None
    return_url: Optional[str] = None
    customer: Optional[AlternativePaymentCustomerDetails] = None
    payment_method_data: Optional[dict[str, Any]] = None


class AlternativePaymentResponse(WireModel):
    id: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    payment_url: Optional[str] = None
    payment_method: Optional[str] = None


class AlternativePaymentOperationDetails(WireModel):
    method: Optional[str] = None
    operation_id: Optional[str] = None
    transaction_id: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    status_description: Optional[str] = None
    created_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None
    action: Optional[UserAction] = None
    action_required: bool = False
    receipt_url: Optional[str] = None
    payment_method_type: Optional[str] = None


class AlternativePaymentOperationResult(WireModel):
    id: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    payment_method: Optional[str] = None
    created_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None


class AlternativePaymentOperationsResult(WireModel):
    operations: list[AlternativePaymentOperationResult] = []
    total: FlexibleInt32 = None
    count: FlexibleInt32 = None


class AlternativePaymentMethodInfo(WireModel):
    code: Optional[str] = None
    name: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: bool = False


class AlternativePaymentMethodsResponse(WireModel):
    methods: list[AlternativePaymentMethodInfo] = []
