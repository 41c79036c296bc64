"""Batch payments: several orders of one customer charged together."""

from rozetkapay.models.batch import (
    BatchPaymentResponse,
    CancelBatchPaymentRequest,
    ConfirmBatchPaymentRequest,
    CreateBatchPaymentRequest,
)
from rozetkapay.services.base import BaseService


BASE_PATH = "/api/payments/batch/v1"


class BatchPaymentService(BaseService):
    """Operations under /api/payments/batch/v1."""

    async def create(self, request: CreateBatchPaymentRequest) -> BatchPaymentResponse:
        return await self._post(f"{BASE_PATH}/new", request, BatchPaymentResponse)

    async def confirm(self, request: ConfirmBatchPaymentRequest) -> BatchPaymentResponse:
        """Capture a batch created with confirm=False, optionally per order amount."""
        return await self._post(f"{BASE_PATH}/confirm", request, BatchPaymentResponse)

    async def cancel(self, request: CancelBatchPaymentRequest) -> BatchPaymentResponse:
        return await self._post(f"{BASE_PATH}/cancel", request, BatchPaymentResponse)
