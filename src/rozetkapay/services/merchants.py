"""Merchant account checks and settings."""

from rozetkapay.models.merchants import (
    CommissionRatesResponse,
    MerchantSettingsResponse,
    MerchantValidationResponse,
    UpdateMerchantSettingsRequest,
)
from rozetkapay.services.base import BaseService


SETTINGS_PATH = "/api/merchant/v1/settings"


class MerchantService(BaseService):
    """The merchant behind the configured credentials."""

    async def get_info(self) -> MerchantValidationResponse:
        """Validate the configured credentials against /api/merchants/v1/me."""
        return await self._get("/api/merchants/v1/me", MerchantValidationResponse)

    async def get_settings(self) -> MerchantSettingsResponse:
        return await self._get(SETTINGS_PATH, MerchantSettingsResponse)

    async def update_settings(
        self, request: UpdateMerchantSettingsRequest
    ) -> MerchantSettingsResponse:
        return await self._post(SETTINGS_PATH, request, MerchantSettingsResponse)

    async def get_commission_rates(self) -> CommissionRatesResponse:
        return await self._get("/api/merchant/v1/commission-rates", CommissionRatesResponse)
