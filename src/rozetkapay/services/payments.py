"""Card and wallet payments: create, confirm, cancel, refund and lookups."""

from typing import Optional

import structlog

from rozetkapay.models.payments import (
    CallbackResendResponse,
    CancelPaymentRequest,
    CardLookupRequest,
    CardLookupResponse,
    ConfirmPaymentRequest,
    CreatePaymentRequest,
    CreateRecurrentPaymentRequest,
    P2PConfirmationRequest,
    PaymentListRequest,
    PaymentListResponse,
    PaymentReceiptResponse,
    PaymentResponse,
    RefundActionRequest,
    RefundPaymentRequest,
    ResendCallbackRequest,
)
from rozetkapay.services.base import BaseService


logger = structlog.get_logger(__name__)

BASE_PATH = "/api/payments/v1"


class PaymentService(BaseService):
    """Operations under /api/payments/v1."""

    async def create(self, request: CreatePaymentRequest) -> PaymentResponse:
        """
        Create a payment.

        Args:
            request: Amount, currency, external_id and payer details

        Returns:
            PaymentResponse; check action/checkout_url for 3-DS or hosted flows
        """
        logger.debug("Creating payment", external_id=request.external_id)
        return await self._post(f"{BASE_PATH}/new", request, PaymentResponse)

    async def create_recurrent(self, request: CreateRecurrentPaymentRequest) -> PaymentResponse:
        return await self._post(f"{BASE_PATH}/recurrent", request, PaymentResponse)

    async def confirm(self, request: ConfirmPaymentRequest) -> PaymentResponse:
        """Confirm (capture) a two-step payment, fully or partially."""
        return await self._post(f"{BASE_PATH}/confirm", request, PaymentResponse)

    async def cancel(self, request: CancelPaymentRequest) -> PaymentResponse:
        return await self._post(f"{BASE_PATH}/cancel", request, PaymentResponse)

    async def refund(self, request: RefundPaymentRequest) -> PaymentResponse:
        return await self._post(f"{BASE_PATH}/refund", request, PaymentResponse)

    async def retry_refund(self, external_id: str) -> PaymentResponse:
        return await self._post(
            f"{BASE_PATH}/refund/retry", RefundActionRequest(external_id=external_id), PaymentResponse
        )

    async def cancel_refund(self, external_id: str) -> PaymentResponse:
        return await self._post(
            f"{BASE_PATH}/refund/cancel", RefundActionRequest(external_id=external_id), PaymentResponse
        )

    async def get_info(self, external_id: str) -> PaymentResponse:
        return await self._get(
            f"{BASE_PATH}/info", PaymentResponse, params={"external_id": external_id}
        )

    async def get_list(self, request: Optional[PaymentListRequest] = None) -> PaymentListResponse:
        """List payments; filters are sent as query parameters."""
        params = request.to_wire() if request is not None else None
        return await self._get(f"{BASE_PATH}/list", PaymentListResponse, params=params)

    async def get_receipt(self, external_id: str) -> PaymentReceiptResponse:
        return await self._get(
            f"{BASE_PATH}/receipt", PaymentReceiptResponse, params={"external_id": external_id}
        )

    async def card_lookup(self, request: CardLookupRequest) -> CardLookupResponse:
        return await self._post(f"{BASE_PATH}/lookup", request, CardLookupResponse)

    async def resend_callback(self, request: ResendCallbackRequest) -> CallbackResendResponse:
        """
        Ask the API to resend the merchant callback.

        The endpoint may answer 204 No Content; an empty CallbackResendResponse
        is returned in that case.
        """
        return await self._post(f"{BASE_PATH}/callback/resend", request, CallbackResendResponse)

    async def confirm_p2p(self, request: P2PConfirmationRequest) -> PaymentResponse:
        return await self._post(f"{BASE_PATH}/p2p/confirm", request, PaymentResponse)
