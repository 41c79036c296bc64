"""Payment and transaction registers."""

from rozetkapay.models.reports import (
    PaymentsReportRequest,
    PaymentsReportResponse,
    TransactionsReportRequest,
    TransactionsReportResponse,
)
from rozetkapay.services.base import BaseService


class ReportService(BaseService):
    async def get_payments_report(self, request: PaymentsReportRequest) -> PaymentsReportResponse:
        return await self._post("/api/reports/v1/payments", request, PaymentsReportResponse)

    async def get_transactions_report(
        self, request: TransactionsReportRequest
    ) -> TransactionsReportResponse:
        return await self._post(
            "/api/reports/v1/transactions", request, TransactionsReportResponse
        )
