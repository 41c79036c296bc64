"""
Customer wallets: cards saved for repeat payments.

Wallet endpoints were reorganised in the current API generation: the
customer (and card) identifiers moved from the path into the query
string. Calls are issued against the current path first and repeated on
the legacy per-customer path, without the query, when it answers 404.
Deleting and listing cards exist only on the legacy paths.
"""

from rozetkapay.models.customers import (
    AddCardToWalletRequest,
    AddCardToWalletResponse,
    CardConfirmationStatusResponse,
    CustomerCardsResponse,
    CustomerWalletResponse,
    DeleteCardFromWalletResponse,
    SetDefaultCardRequest,
    SetDefaultCardResponse,
    WalletItemResponse,
)
from rozetkapay.services.base import BaseService, path_segment
from rozetkapay.transport.fallback import EndpointPair


WALLET_PATH = "/api/customers/v1/wallet"
WALLET_FIND_PATH = "/api/customers/v1/wallet/find"
WALLET_CONFIRMATION_PATH = "/api/customers/v1/wallet/confirmation/status"
WALLET_DEFAULT_PATH = "/api/customers/v1/wallet/settings/set"

LEGACY_WALLET_PATH = "/api/customers/v1/{customer_id}/wallet"
LEGACY_CARDS_PATH = "/api/customers/v1/{customer_id}/cards"
LEGACY_CARD_PATH = "/api/customers/v1/{customer_id}/cards/{card_id}"
LEGACY_CONFIRMATION_PATH = "/api/customers/v1/{customer_id}/cards/{card_id}/confirmation"
LEGACY_DEFAULT_PATH = "/api/customers/v1/{customer_id}/cards/default"


class CustomerService(BaseService):
    """Saved cards of a customer, addressed by the merchant's customer external_id."""

    async def get_wallet(self, customer_id: str) -> CustomerWalletResponse:
        endpoints = EndpointPair(
            WALLET_PATH, LEGACY_WALLET_PATH.format(customer_id=path_segment(customer_id))
        )
        return await self._get_with_fallback(
            endpoints,
            CustomerWalletResponse,
            params={"external_id": customer_id},
            fallback_params={},
        )

    async def add_card(
        self, customer_id: str, request: AddCardToWalletRequest
    ) -> AddCardToWalletResponse:
        endpoints = EndpointPair(
            WALLET_PATH, LEGACY_CARDS_PATH.format(customer_id=path_segment(customer_id))
        )
        return await self._post_with_fallback(
            endpoints,
            request,
            AddCardToWalletResponse,
            params={"external_id": customer_id},
            fallback_params={},
        )

    async def get_wallet_item(self, customer_id: str, card_id: str) -> WalletItemResponse:
        """One saved card with its recent transactions."""
        endpoints = EndpointPair(
            WALLET_FIND_PATH,
            LEGACY_CARD_PATH.format(
                customer_id=path_segment(customer_id), card_id=path_segment(card_id)
            ),
        )
        return await self._get_with_fallback(
            endpoints,
            WalletItemResponse,
            params={"external_id": customer_id, "option_id": card_id},
            fallback_params={},
        )

    async def get_card_confirmation_status(
        self, customer_id: str, card_id: str
    ) -> CardConfirmationStatusResponse:
        endpoints = EndpointPair(
            WALLET_CONFIRMATION_PATH,
            LEGACY_CONFIRMATION_PATH.format(
                customer_id=path_segment(customer_id), card_id=path_segment(card_id)
            ),
        )
        return await self._get_with_fallback(
            endpoints,
            CardConfirmationStatusResponse,
            params={"external_id": customer_id, "option_id": card_id},
            fallback_params={},
        )

    async def set_default_card(
        self, customer_id: str, request: SetDefaultCardRequest
    ) -> SetDefaultCardResponse:
        endpoints = EndpointPair(
            WALLET_DEFAULT_PATH,
            LEGACY_DEFAULT_PATH.format(customer_id=path_segment(customer_id)),
        )
        return await self._post_with_fallback(
            endpoints,
            request,
            SetDefaultCardResponse,
            params={"external_id": customer_id},
            fallback_params={},
        )

    async def delete_card(self, customer_id: str, card_id: str) -> DeleteCardFromWalletResponse:
        path = LEGACY_CARD_PATH.format(
            customer_id=path_segment(customer_id), card_id=path_segment(card_id)
        )
        return await self._delete(path, DeleteCardFromWalletResponse)

    async def get_cards(self, customer_id: str) -> CustomerCardsResponse:
        path = LEGACY_CARDS_PATH.format(customer_id=path_segment(customer_id))
        return await self._get(path, CustomerCardsResponse)
