"""Customer wallet (saved cards) models."""

from typing import Optional

from pydantic import Field

from rozetkapay.codec import FlexibleDateTime, FlexibleDecimal, FlexibleInt32
from rozetkapay.models.base import WireModel


class WalletCard(WireModel):
    """Saved card as listed in a wallet; only the masked number is returned."""

    id: Optional[str] = None
    mask: Optional[str] = None
    payment_system: Optional[str] = None
    type: Optional[str] = None
    bank_name: Optional[str] = None
    is_default: bool = False
    status: Optional[str] = None
    created_at: FlexibleDateTime = None


class CustomerWalletResponse(WireModel):
    customer_id: Optional[str] = None
    cards: list[WalletCard] = Field(default_factory=list)
    default_card_id: Optional[str] = None


class CustomerCardsResponse(WireModel):
    customer_id: Optional[str] = None
    cards: list[WalletCard] = Field(default_factory=list)
    total_count: FlexibleInt32 = None


class WalletCardDetails(WireModel):
    number: str = Field(repr=False)
    exp_month: str = Field(repr=False)
    exp_year: str = Field(repr=False)
    cvv: str = Field(repr=False)
    holder_name: Optional[str] = Field(default=None, repr=False)


class AddCardToWalletRequest(WireModel):
    card: WalletCardDetails
    set_as_default: bool = False
    # Amount held to verify the card, in minor units
    verification_amount: FlexibleInt32 = None


class AddCardToWalletResponse(WireModel):
    card_id: Optional[str] = None
    status: Optional[str] = None
    verification_required: bool = False
    card: Optional[WalletCard] = None


class DeleteCardFromWalletResponse(WireModel):
    status: Optional[str] = None
    message: Optional[str] = None


class WalletTransaction(WireModel):
    id: Optional[str] = None
    type: Optional[str] = None
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    status: Optional[str] = None
    created_at: FlexibleDateTime = None


class WalletItemResponse(WireModel):
    card: Optional[WalletCard] = None
    transactions: list[WalletTransaction] = Field(default_factory=list)


class CardConfirmationStatusResponse(WireModel):
    card_id: Optional[str] = None
    status: Optional[str] = None
    confirmation_required: bool = False
    verification_amount: FlexibleInt32 = None


class SetDefaultCardRequest(WireModel):
    card_id: str


class SetDefaultCardResponse(WireModel):
    status: Optional[str] = None
    default_card_id: Optional[str] = None
    message: Optional[str] = None
