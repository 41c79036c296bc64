"""Shared test fixtures and configuration for all tests.

Provides settings with safe defaults and a scripted httpx transport so
unit tests never touch the network.
"""

import json
from pathlib import Path
from typing import Any, Dict

import httpx
import pytest

from rozetkapay.config import Settings
from rozetkapay.transport.base_client import create_http_client
from tests.fixtures.http import ScriptedAPI


TEST_BASE_URL = "https://api.test.rozetkapay.local"


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults.

    The .env file is ignored so a developer's local credentials never leak
    into unit tests. Override fields in individual tests:
        settings = test_settings.model_copy(update={"ON_BEHALF_OF": "merchant-1"})
    """
    return Settings(
        _env_file=None,
        BASE_URL=TEST_BASE_URL,
        LOGIN="test-login",
        PASSWORD="test-password",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_payment_body(fixtures_dir: Path) -> str:
    """Raw payment info body (kept as text so numbers reach the decoder untouched)."""
    return (fixtures_dir / "payment_response.json").read_text(encoding="utf-8")


@pytest.fixture
def sample_banks_data(fixtures_dir: Path) -> Dict[str, Any]:
    with open(fixtures_dir / "payparts_banks.json") as f:
        return json.load(f)


@pytest.fixture
def scripted_api() -> ScriptedAPI:
    return ScriptedAPI()


@pytest.fixture
async def http_client(test_settings: Settings, scripted_api: ScriptedAPI):
    """AsyncClient wired to scripted_api, configured like the real client."""
    client = create_http_client(test_settings, transport=httpx.MockTransport(scripted_api))
    yield client
    await client.aclose()
