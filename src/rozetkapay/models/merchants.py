"""Merchant account and settings models."""

from enum import Enum
from typing import Optional

from pydantic import Field

from rozetkapay.codec import FlexibleDecimal
from rozetkapay.models.base import WireModel


class MerchantStatus(str, Enum):
    ONBOARDING = "onboarding"
    ACTIVATED = "activated"
    BLOCKED = "blocked"
    EXTERNAL_MERCHANT = "external_merchant"


class MerchantValidationResponse(WireModel):
    """Answer of /me: a status string when the credentials are accepted."""

    status: Optional[str] = None


class EntityStatusDetails(WireModel):
    id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    bank_details_number: Optional[str] = None
    business_registration_number: Optional[str] = None


class MerchantStatusResponse(WireModel):
    entity: Optional[EntityStatusDetails] = None
    project: Optional[EntityStatusDetails] = None
    status: Optional[MerchantStatus] = None


class PaymentMethodConfig(WireModel):
    type: Optional[str] = None
    enabled: Optional[bool] = None
    commission_rate: FlexibleDecimal = None


class NotificationSettings(WireModel):
    webhook_url: Optional[str] = None
    email_notifications: Optional[bool] = None
    sms_notifications: Optional[bool] = None


class SecuritySettings(WireModel):
    ip_whitelist: Optional[list[str]] = None
    require_3ds: Optional[bool] = None


class MerchantSettingsResponse(WireModel):
    payment_methods: list[PaymentMethodConfig] = Field(default_factory=list)
    notifications: Optional[NotificationSettings] = None
    security: Optional[SecuritySettings] = None


class UpdateMerchantSettingsRequest(WireModel):
    """Partial update; sections left as None are not sent."""

    payment_methods: Optional[list[PaymentMethodConfig]] = None
    notifications: Optional[NotificationSettings] = None
    security: Optional[SecuritySettings] = None


class CommissionRate(WireModel):
    payment_method: Optional[str] = None
    rate: FlexibleDecimal = None
    fixed_fee: FlexibleDecimal = None
    currency: Optional[str] = None


class CommissionRatesResponse(WireModel):
    rates: list[CommissionRate] = Field(default_factory=list)
