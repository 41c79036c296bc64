"""API area services sharing one RequestExecutor."""

from rozetkapay.services.alternative_payments import AlternativePaymentService
from rozetkapay.services.base import BaseService
from rozetkapay.services.batch_payments import BatchPaymentService
from rozetkapay.services.customers import CustomerService
from rozetkapay.services.finmon import FinMonService
from rozetkapay.services.merchants import MerchantService
from rozetkapay.services.payments import PaymentService
from rozetkapay.services.payouts import PayoutService
from rozetkapay.services.payparts import PayPartsService
from rozetkapay.services.reports import ReportService
from rozetkapay.services.subscriptions import SubscriptionService

__all__ = [
    "AlternativePaymentService",
    "BaseService",
    "BatchPaymentService",
    "CustomerService",
    "FinMonService",
    "MerchantService",
    "PaymentService",
    "PayoutService",
    "PayPartsService",
    "ReportService",
    "SubscriptionService",
]
