"""Payout request and response models."""

from enum import Enum
from typing import Optional

from pydantic import Field

from rozetkapay.codec import FlexibleDateTime, FlexibleDecimal, FlexibleInt32, StrictAmount
from rozetkapay.models.base import WireModel


class PayoutType(str, Enum):
    CARD = "card"
    CASH = "cash"


class RecipientUser(WireModel):
    email: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    middle_name: Optional[str] = None
    phone: Optional[str] = None
    rid: Optional[str] = None
    ipn: Optional[str] = None
    external_id: Optional[str] = None


class CardData(WireModel):
    number: Optional[str] = Field(default=None, repr=False)
    token: Optional[str] = Field(default=None, repr=False)
    option_id: Optional[str] = None


class CardRecipient(WireModel):
    card_data: CardData


class CashRecipient(WireModel):
    phone: str


class PayoutRecipient(WireModel):
    payout_type: PayoutType = PayoutType.CARD
    card: Optional[CardRecipient] = None
    cash: Optional[CashRecipient] = None


class CreatePayoutRequest(WireModel):
    amount: StrictAmount
    currency: str
    external_id: str
    description: Optional[str] = None
    recipient: PayoutRecipient
    callback_url: Optional[str] = None


class PayoutOrderDetails(WireModel):
    callback_url: Optional[str] = None
    currency: str
    description: str
    external_id: str
    # Sent as a string by the API contract
    original_amount: str


class PayoutPayer(WireModel):
    entity_id: str


class RequestPayoutRequest(WireModel):
    order: PayoutOrderDetails
    payer: PayoutPayer
    recipient: PayoutRecipient


class PayoutListRequest(WireModel):
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    status: Optional[str] = None
    limit: FlexibleInt32 = None
    offset: FlexibleInt32 = None


class ResendPayoutCallbackRequest(WireModel):
    external_id: str


class CancelCashPayoutRequest(WireModel):
    external_id: str


class PayoutError(WireModel):
    code: Optional[str] = None
    message: Optional[str] = None


class PayoutResponse(WireModel):
    id: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    description: Optional[str] = None
    recipient: Optional[PayoutRecipient] = None
    created_at: FlexibleDateTime = None
    processed_at: FlexibleDateTime = None
    error: Optional[PayoutError] = None


class PayoutListResponse(WireModel):
    payouts: list[PayoutResponse] = []
    total: FlexibleInt32 = None
    count: FlexibleInt32 = None


class CurrencyBalance(WireModel):
    currency: Optional[str] = None
    available: FlexibleDecimal = None
    pending: FlexibleDecimal = None
    reserved: FlexibleDecimal = None


class BalanceResponse(WireModel):
    balances: list[CurrencyBalance] = []
    total_balance: FlexibleDecimal = None
    base_currency: Optional[str] = None


class PayerAccount(WireModel):
    entity_id: Optional[str] = None


class PayoutTransactionResult(WireModel):
    currency: Optional[str] = None
    description: Optional[str] = None
    external_id: Optional[str] = None
    fc_id: FlexibleInt32 = None
    original_amount: FlexibleDecimal = None
    partner_key_id: Optional[str] = None
    payer_account: Optional[PayerAccount] = None
    payer_amount: FlexibleDecimal = None
    payer_outer_fee: FlexibleDecimal = None
    payment_type: Optional[str] = None
    payout_type: Optional[str] = None
    recipient_user: Optional[RecipientUser] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    status_code_description: Optional[str] = None
    transaction_id: Optional[str] = None
