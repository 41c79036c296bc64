"""
PayParts installment orders.

Order endpoints moved between API generations. Every call that has a
legacy counterpart is issued against the current path first and repeated
on the legacy path when the current one answers 404.
"""

from rozetkapay.models.common import ApiMessage
from rozetkapay.models.payparts import (
    CancelPayPartsRequest,
    ConfirmPayPartsRequest,
    CreatePayPartsOrderRequest,
    PayPartsBanksResponse,
    PayPartsOperationResult,
    PayPartsOperationsResult,
    PayPartsOrderResponse,
    PayPartsRefundResponse,
    PayPartsResendCallbackRequest,
    RefundPayPartsOrderRequest,
)
from rozetkapay.services.base import BaseService, path_segment
from rozetkapay.transport.fallback import EndpointPair


CREATE_ORDER = EndpointPair("/api/payparts/v1/order/create", "/api/payparts/v1/new")
CONFIRM_ORDER = EndpointPair("/api/payparts/v1/order/confirm", "/api/payments/v1/payparts/confirm")
CANCEL_ORDER = EndpointPair("/api/payparts/v1/order/cancel", "/api/payments/v1/payparts/cancel")
REFUND_ORDER = EndpointPair("/api/payparts/v1/refund", "/api/payments/v1/payparts/refund")
BANKS = EndpointPair("/api/payparts/v1/banks/info", "/api/payparts/v1/banks")

OPERATION_INFO_PATH = "/api/payparts/v1/info/operation"
LEGACY_OPERATION_PATH = "/api/payparts/v1/operation/{operation_id}"


class PayPartsService(BaseService):
    """Installment orders under /api/payparts/v1 (with legacy fallbacks)."""

    async def create_order(self, request: CreatePayPartsOrderRequest) -> PayPartsOrderResponse:
        return await self._post_with_fallback(CREATE_ORDER, request, PayPartsOrderResponse)

    async def confirm_order(self, request: ConfirmPayPartsRequest) -> PayPartsOrderResponse:
        return await self._post_with_fallback(CONFIRM_ORDER, request, PayPartsOrderResponse)

    async def cancel_order(self, request: CancelPayPartsRequest) -> PayPartsOrderResponse:
        return await self._post_with_fallback(CANCEL_ORDER, request, PayPartsOrderResponse)

    async def refund_order(self, request: RefundPayPartsOrderRequest) -> PayPartsRefundResponse:
        return await self._post_with_fallback(REFUND_ORDER, request, PayPartsRefundResponse)

    async def get_operation_info(self, external_id: str, operation_id: str) -> PayPartsOperationResult:
        """
        Fetch one operation of an order.

        Current API: /info/operation?external_id=..&operation_id=..
        Legacy API: /operation/{operation_id} (no query)
        """
        endpoints = EndpointPair(
            OPERATION_INFO_PATH,
            LEGACY_OPERATION_PATH.format(operation_id=path_segment(operation_id)),
        )
        return await self._get_with_fallback(
            endpoints,
            PayPartsOperationResult,
            params={"external_id": external_id, "operation_id": operation_id},
            fallback_params={},
        )

    async def get_info(self, external_id: str) -> PayPartsOperationsResult:
        return await self._get(
            "/api/payparts/v1/info", PayPartsOperationsResult, params={"external_id": external_id}
        )

    async def get_banks(self) -> PayPartsBanksResponse:
        """Banks offering installments, with limits and available periods."""
        return await self._get_with_fallback(BANKS, PayPartsBanksResponse)

    async def resend_callback(self, request: PayPartsResendCallbackRequest) -> ApiMessage:
        return await self._post("/api/payparts/v1/callback/resend", request, ApiMessage)
