"""Integration test fixtures (sandbox prerequisites).

Integration tests talk to the RozetkaPay development API and are skipped
unless ROZETKAPAY_LOGIN and ROZETKAPAY_PASSWORD are set and the sandbox is
reachable.
"""

import os

import httpx
import pytest

from rozetkapay.config import Settings


SANDBOX_BASE_URL = "https://api-epdev.rozetkapay.com"


@pytest.fixture(scope="session")
def sandbox_settings() -> Settings:
    """Settings for the sandbox; skips when credentials are not configured."""
    if not os.getenv("ROZETKAPAY_LOGIN") or not os.getenv("ROZETKAPAY_PASSWORD"):
        pytest.skip("Sandbox credentials not set (ROZETKAPAY_LOGIN / ROZETKAPAY_PASSWORD)")

    settings = Settings(
        _env_file=None,
        BASE_URL=os.getenv("ROZETKAPAY_BASE_URL", SANDBOX_BASE_URL),
        RETRY_ENABLED=True,
        RETRY_MAX_ATTEMPTS=2,
    )
    try:
        httpx.get(settings.BASE_URL, timeout=5)
    except httpx.HTTPError as e:
        pytest.skip(f"Sandbox not reachable: {e}")
    return settings
