"""Payment and transaction report models."""

from datetime import date
from typing import Optional

from rozetkapay.codec import FlexibleDateTime, FlexibleDecimal, FlexibleInt32
from rozetkapay.models.base import WireModel


class PaymentsReportRequest(WireModel):
    date_from: date
    date_to: date
    fields: Optional[list[str]] = None
    scope: str = "current_login"
    register_type: str = "transactions_list"


class TransactionsReportRequest(WireModel):
    date_from: date
    date_to: date
    register_type: str = "transactions_list"
    operation_types: Optional[list[str]] = None
    statuses: Optional[list[str]] = None


class PaymentReportItem(WireModel):
    amount: FlexibleDecimal = None
    card_pan: Optional[str] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    external_id: Optional[str] = None
    internal_commission: FlexibleDecimal = None
    payer_external_fee: FlexibleDecimal = None
    payment_id: Optional[str] = None
    payment_method: Optional[str] = None
    payment_pay_parts: FlexibleInt32 = None
    payment_system: Optional[str] = None
    payment_type: Optional[str] = None
    payout_amount: FlexibleDecimal = None
    payout_date: FlexibleDateTime = None
    processing_date: FlexibleDateTime = None
    project_name: Optional[str] = None
    client_email: Optional[str] = None
    client_first_name: Optional[str] = None
    client_last_name: Optional[str] = None
    client_patronym: Optional[str] = None


class PaymentsReportResponse(WireModel):
    payments: list[PaymentReportItem] = []


class TransactionReportItem(WireModel):
    order_id: Optional[str] = None
    transaction_id: Optional[str] = None
    external_id: Optional[str] = None
    operation_type: Optional[str] = None
    status: Optional[str] = None
    status_code: FlexibleInt32 = None
    payment_method: Optional[str] = None
    project_name: Optional[str] = None
    order_description: Optional[str] = None
    payer_card_mask: Optional[str] = None
    payer_bank_name: Optional[str] = None
    bin_payment_system: Optional[str] = None
    bin_country_digit_code: Optional[str] = None
    payer_ip: Optional[str] = None
    original_amount: FlexibleDecimal = None
    payer_amount: FlexibleDecimal = None
    currency: Optional[str] = None
    payer_fee: FlexibleDecimal = None
    merchant_fee: FlexibleDecimal = None
    auth_code: Optional[str] = None
    rrn: Optional[str] = None
    created_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None


class TransactionsReportResponse(WireModel):
    transactions: list[TransactionReportItem] = []
