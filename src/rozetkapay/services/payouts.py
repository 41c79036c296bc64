"""Payouts to cards and cash, and merchant balances."""

from typing import Optional

from rozetkapay.models.common import ApiMessage
from rozetkapay.models.payouts import (
    BalanceResponse,
    CancelCashPayoutRequest,
    CreatePayoutRequest,
    PayoutListRequest,
    PayoutListResponse,
    PayoutResponse,
    PayoutTransactionResult,
    RequestPayoutRequest,
    ResendPayoutCallbackRequest,
)
from rozetkapay.services.base import BaseService


BASE_PATH = "/api/payouts/v1"


class PayoutService(BaseService):
    """Operations under /api/payouts/v1."""

    async def create(self, request: CreatePayoutRequest) -> PayoutResponse:
        return await self._post(f"{BASE_PATH}/new", request, PayoutResponse)

    async def request_payout(self, request: RequestPayoutRequest) -> PayoutTransactionResult:
        """Payout on behalf of a payer entity (partner flow)."""
        return await self._post(f"{BASE_PATH}/request-payout", request, PayoutTransactionResult)

    async def get_info(self, external_id: str) -> PayoutResponse:
        return await self._get(
            f"{BASE_PATH}/info", PayoutResponse, params={"external_id": external_id}
        )

    async def get_list(self, request: Optional[PayoutListRequest] = None) -> PayoutListResponse:
        params = request.to_wire() if request is not None else None
        return await self._get(f"{BASE_PATH}/list", PayoutListResponse, params=params)

    async def get_balance(self) -> BalanceResponse:
        return await self._get(f"{BASE_PATH}/balance", BalanceResponse)

    async def get_account_balance(self, merchant_entity_id: str) -> BalanceResponse:
        return await self._get(
            f"{BASE_PATH}/account-balance",
            BalanceResponse,
            params={"merchant_entity_id": merchant_entity_id},
        )

    async def resend_callback(self, request: ResendPayoutCallbackRequest) -> ApiMessage:
        """Resend the payout callback; a 204 answer yields an empty ApiMessage."""
        return await self._post(f"{BASE_PATH}/resend-callback", request, ApiMessage)

    async def cancel_cash_payout(self, request: CancelCashPayoutRequest) -> PayoutTransactionResult:
        return await self._post(f"{BASE_PATH}/cancel-payout", request, PayoutTransactionResult)
