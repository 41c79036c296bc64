"""
HTTP client construction for the RozetkaPay API.

One httpx.AsyncClient is shared by every service of a RozetkaPayClient.
It carries the base URL, timeout, Basic authentication and the optional
partnership/customer headers, so individual requests only add a path and
a body.
"""

from typing import Optional

import httpx
import structlog

from rozetkapay.config import Settings


logger = structlog.get_logger(__name__)

ON_BEHALF_OF_HEADER = "X-ON-BEHALF-OF"
CUSTOMER_AUTH_HEADER = "X-CUSTOMER-AUTH"


def build_default_headers(settings: Settings) -> dict[str, str]:
    """
    Headers sent with every request.

    X-ON-BEHALF-OF and X-CUSTOMER-AUTH are attached only when configured
    with a non-blank value.
    """
    headers = {
        "Authorization": settings.basic_auth_header(),
        "Accept": "application/json",
    }
    if settings.USER_AGENT and settings.USER_AGENT.strip():
        headers["User-Agent"] = settings.USER_AGENT

    for name, value in (
        (ON_BEHALF_OF_HEADER, settings.ON_BEHALF_OF),
        (CUSTOMER_AUTH_HEADER, settings.CUSTOMER_AUTH),
    ):
        if value and value.strip():
            headers[name] = value
    return headers


def create_http_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create an AsyncClient configured for the API.

    Args:
        settings: Client settings
        transport: Optional custom transport (e.g. httpx.MockTransport in tests)
    """
    client = httpx.AsyncClient(
        base_url=settings.BASE_URL,
        headers=build_default_headers(settings),
        timeout=httpx.Timeout(settings.TIMEOUT),
        verify=settings.VALIDATE_SSL,
        transport=transport,
    )
    logger.debug(
        "Created httpx AsyncClient",
        base_url=settings.BASE_URL,
        timeout=settings.TIMEOUT,
        validate_ssl=settings.VALIDATE_SSL,
    )
    return client


def configure_http_client(client: httpx.AsyncClient, settings: Settings) -> httpx.AsyncClient:
    """
    Apply base URL, timeout and headers to a caller-supplied AsyncClient.

    Stale optional headers from a previous configuration are removed so a
    shared client never sends another merchant's X-ON-BEHALF-OF.
    """
    client.base_url = httpx.URL(settings.BASE_URL)
    client.timeout = httpx.Timeout(settings.TIMEOUT)
    for name in (ON_BEHALF_OF_HEADER, CUSTOMER_AUTH_HEADER):
        client.headers.pop(name, None)
    client.headers.update(build_default_headers(settings))
    logger.debug("Configured external httpx AsyncClient", base_url=settings.BASE_URL)
    return client
