"""Subscription and subscription-plan models."""

from typing import Optional

from pydantic import Field

from rozetkapay.codec import FlexibleDateTime, FlexibleDecimal, FlexibleInt32, StrictAmount
from rozetkapay.models.base import WireModel


class SubscriptionCustomer(WireModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


class SubscriptionCard(WireModel):
    number: str = Field(repr=False)
    expiration_month: int = Field(repr=False)
    expiration_year: int = Field(repr=False)
    cvv: str = Field(repr=False)
    holder_name: Optional[str] = Field(default=None, repr=False)


class SubscriptionPaymentMethod(WireModel):
    type: str
    card: Optional[SubscriptionCard] = None
    recurrent_token: Optional[str] = None


class SubscriptionInitialPayment(WireModel):
    amount: FlexibleDecimal = None
    payment_method: Optional[SubscriptionPaymentMethod] = None


# === Plans ===


class CreateSubscriptionPlanRequest(WireModel):
    name: str
    description: Optional[str] = None
    amount: StrictAmount
    currency: str
    frequency: str
    trial_days: Optional[int] = None


class UpdateSubscriptionPlanRequest(WireModel):
    name: Optional[str] = None
    description: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    frequency: Optional[str] = None
    trial_days: Optional[int] = None


class SubscriptionPlanResponse(WireModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    frequency: Optional[str] = None
    trial_days: FlexibleInt32 = None
    status: Optional[str] = None
    created_at: FlexibleDateTime = None
    updated_at: FlexibleDateTime = None


class SubscriptionPlansResponse(WireModel):
    plans: list[SubscriptionPlanResponse] = []
    total: FlexibleInt32 = None
    count: FlexibleInt32 = None


# === Subscriptions ===


class CreateSubscriptionRequest(WireModel):
    external_id: str
    amount: StrictAmount
    currency: str
    description: Optional[str] = None
    frequency: str
    period_count: Optional[int] = None
    customer: Optional[SubscriptionCustomer] = None
    initial_payment: Optional[SubscriptionInitialPayment] = None
    callback_url: Optional[str] = None
    start_date: Optional[str] = None


class GiftSubscriptionRequest(WireModel):
    plan_id: str
    recurrent_id: str
    callback_url: str
    result_url: str
    start_date: str
    customer: SubscriptionCustomer
    auto_renew: Optional[bool] = None
    delegate_api_key: Optional[str] = None
    description: Optional[str] = None
    external_id: Optional[str] = None
    external_premium_id: Optional[str] = None
    price: FlexibleDecimal = None
    trial_periods: Optional[int] = None
    unified_external_id: Optional[str] = None
    use_plan_price_on_auto_renew: Optional[bool] = None
    gifted_periods: Optional[int] = None
    gifted_unified_external_id: Optional[str] = None


class UpdateSubscriptionRequest(WireModel):
    amount: FlexibleDecimal = None
    frequency: Optional[str] = None
    period_count: Optional[int] = None
    description: Optional[str] = None


class CancelSubscriptionRequest(WireModel):
    external_id: str
    reason: Optional[str] = None
    immediate: bool = False


class SubscriptionError(WireModel):
    code: Optional[str] = None
    message: Optional[str] = None


class SubscriptionResponse(WireModel):
    id: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    description: Optional[str] = None
    frequency: Optional[str] = None
    period_count: FlexibleInt32 = None
    completed_payments: FlexibleInt32 = None
    customer: Optional[SubscriptionCustomer] = None
    created_at: FlexibleDateTime = None
    next_payment_date: Optional[str] = None
    error: Optional[SubscriptionError] = None


class Subscription(WireModel):
    id: Optional[str] = None
    plan_id: Optional[str] = None
    state: Optional[str] = None
    auto_renew: bool = False
    price: FlexibleDecimal = None
    currency: Optional[str] = None
    description: Optional[str] = None
    callback_url: Optional[str] = None
    result_url: Optional[str] = None
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    next_payment_date: Optional[str] = None
    next_notification_date: Optional[str] = None
    use_plan_price_on_auto_renew: bool = False
    created_at: FlexibleDateTime = None
    updated_at: FlexibleDateTime = None


class SubscriptionPayment(WireModel):
    id: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    status: Optional[str] = None
    created_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None


class CreateSubscriptionResponse(WireModel):
    payment: Optional[SubscriptionPayment] = None
    subscription: Optional[Subscription] = None


class CustomerSubscriptionsResponse(WireModel):
    subscriptions: list[SubscriptionResponse] = []
    total: FlexibleInt32 = None
    count: FlexibleInt32 = None


class SubscriptionPaymentsResponse(WireModel):
    payments: list[SubscriptionPayment] = []
    total: FlexibleInt32 = None
    count: FlexibleInt32 = None
