"""Financial monitoring checks."""

from rozetkapay.models.finmon import FinMonP2PPaymentPreLimitsResponse
from rozetkapay.services.base import BaseService


class FinMonService(BaseService):
    async def get_rules(self, recipient_ipn: int) -> FinMonP2PPaymentPreLimitsResponse:
        """
        Remaining P2P limits for a recipient before monitoring applies.

        Args:
            recipient_ipn: Recipient's individual tax number
        """
        return await self._get(
            "/api/finmon/v1/p2p-payment/pre-limits",
            FinMonP2PPaymentPreLimitsResponse,
            params={"recipient_ipn": recipient_ipn},
        )
