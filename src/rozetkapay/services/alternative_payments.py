"""Alternative payment methods (BLIK, bank redirects, ...)."""

from rozetkapay.models.alternative_payments import (
    AlternativePaymentMethodsResponse,
    AlternativePaymentOperationsResult,
    AlternativePaymentResponse,
    CreateAlternativePaymentRequest,
)
from rozetkapay.services.base import BaseService
from rozetkapay.transport.fallback import EndpointPair


BASE_PATH = "/api/alternative-payments/v1"

CREATE = EndpointPair(f"{BASE_PATH}/create", f"{BASE_PATH}/new")


class AlternativePaymentService(BaseService):
    """Operations under /api/alternative-payments/v1."""

    async def create(self, request: CreateAlternativePaymentRequest) -> AlternativePaymentResponse:
        return await self._post_with_fallback(CREATE, request, AlternativePaymentResponse)

    async def get_info(self, external_id: str) -> AlternativePaymentOperationsResult:
        return await self._get(
            f"{BASE_PATH}/info",
            AlternativePaymentOperationsResult,
            params={"external_id": external_id},
        )

    async def get_methods(self) -> AlternativePaymentMethodsResponse:
        return await self._get(f"{BASE_PATH}/methods", AlternativePaymentMethodsResponse)
