"""
RozetkaPay client facade.

Builds one shared httpx.AsyncClient, one RequestExecutor and one
FallbackRouter from Settings, and exposes every API area as a service
attribute:

    client.payments             PaymentService
    client.payouts              PayoutService
    client.subscriptions        SubscriptionService
    client.payparts             PayPartsService
    client.alternative_payments AlternativePaymentService
    client.reports              ReportService
    client.customers            CustomerService
    client.merchants            MerchantService
    client.batch_payments       BatchPaymentService
    client.finmon               FinMonService

Usage:
    async with RozetkaPayClient(Settings()) as client:
        payment = await client.payments.create(request)

A caller-supplied httpx.AsyncClient is configured (base URL, timeout,
headers) but never closed by this class.
"""

from typing import Optional

import httpx
import structlog

from rozetkapay.config import Settings
from rozetkapay.exceptions import ConfigurationError
from rozetkapay.retry.policy import RetryPolicy
from rozetkapay.services import (
    AlternativePaymentService,
    BatchPaymentService,
    CustomerService,
    FinMonService,
    MerchantService,
    PaymentService,
    PayoutService,
    PayPartsService,
    ReportService,
    SubscriptionService,
)
from rozetkapay.transport.base_client import configure_http_client, create_http_client
from rozetkapay.transport.executor import RequestExecutor
from rozetkapay.transport.fallback import FallbackRouter


logger = structlog.get_logger(__name__)


class RozetkaPayClient:
    """Entry point to the RozetkaPay API."""

    def __init__(
        self,
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        """
        Args:
            settings: Credentials, base URL and retry configuration
            http_client: Optional externally owned AsyncClient
            retry_policy: Overrides the policy derived from settings

        Raises:
            ConfigurationError: Missing credentials or invalid base URL
        """
        if settings is None:
            raise ConfigurationError("settings must be provided")
        if not settings.is_valid():
            raise ConfigurationError(
                "Invalid RozetkaPay configuration: BASE_URL must be an absolute "
                "http(s) URL and LOGIN/PASSWORD must be set",
                details={"base_url": settings.BASE_URL},
            )

        self.settings = settings
        self._owns_http_client = http_client is None
        if http_client is None:
            self.http_client = create_http_client(settings)
        else:
            self.http_client = configure_http_client(http_client, settings)
        self._closed = False

        self.executor = RequestExecutor(
            self.http_client, retry_policy or settings.retry_policy()
        )
        self.router = FallbackRouter(self.executor)

        self.payments = PaymentService(self.executor, self.router)
        self.payouts = PayoutService(self.executor, self.router)
        self.subscriptions = SubscriptionService(self.executor, self.router)
        self.payparts = PayPartsService(self.executor, self.router)
        self.alternative_payments = AlternativePaymentService(self.executor, self.router)
        self.reports = ReportService(self.executor, self.router)
        self.customers = CustomerService(self.executor, self.router)
        self.merchants = MerchantService(self.executor, self.router)
        self.batch_payments = BatchPaymentService(self.executor, self.router)
        self.finmon = FinMonService(self.executor, self.router)

        logger.info(
            "RozetkaPay client initialized",
            base_url=settings.BASE_URL,
            owns_http_client=self._owns_http_client,
            on_behalf_of=bool(settings.ON_BEHALF_OF),
        )

    @classmethod
    def create(
        cls,
        base_url: str,
        login: str,
        password: str,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "RozetkaPayClient":
        """Build a client from explicit credentials; other settings keep their defaults."""
        settings = Settings(BASE_URL=base_url, LOGIN=login, PASSWORD=password)
        return cls(settings, http_client=http_client)

    @property
    def owns_http_client(self) -> bool:
        return self._owns_http_client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it. Idempotent."""
        if self._closed:
            return
        self._closed = True
        if self._owns_http_client:
            await self.http_client.aclose()
            logger.debug("RozetkaPay client closed")

    async def __aenter__(self) -> "RozetkaPayClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
