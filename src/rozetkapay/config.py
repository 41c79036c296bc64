"""
Configuration settings for the RozetkaPay client.

All settings are loaded from environment variables prefixed with
ROZETKAPAY_ (e.g. ROZETKAPAY_LOGIN) or passed explicitly. Use a .env file
for local development.
"""

import base64
from urllib.parse import urlparse

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rozetkapay.retry.policy import (
    DEFAULT_RETRYABLE_STATUS_CODES,
    BackoffStrategy,
    RetryPolicy,
)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ROZETKAPAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === API ===
    # Production: https://api.rozetkapay.com
    # Development: https://api-epdev.rozetkapay.com
    BASE_URL: str = "https://api.rozetkapay.com"
    LOGIN: str = ""
    PASSWORD: str = ""
    ON_BEHALF_OF: str | None = None  # X-ON-BEHALF-OF, partnership mode
    CUSTOMER_AUTH: str | None = None  # X-CUSTOMER-AUTH, customer wallet token
    TIMEOUT: float = 30.0  # seconds
    USER_AGENT: str = "RozetkaPaySDK/Python"
    VALIDATE_SSL: bool = True

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Retry (disabled by default) ===
    RETRY_ENABLED: bool = False
    RETRY_MAX_ATTEMPTS: int = 0
    RETRY_BASE_DELAY: float = 1.0  # seconds
    RETRY_MAX_DELAY: float = 30.0  # seconds
    RETRY_BACKOFF_STRATEGY: BackoffStrategy = BackoffStrategy.EXPONENTIAL_JITTER
    RETRY_STATUS_CODES: list[int] = sorted(DEFAULT_RETRYABLE_STATUS_CODES)

    @field_validator("RETRY_MAX_ATTEMPTS")
    @classmethod
    def _non_negative_attempts(cls, value: int) -> int:
        if value < 0:
            raise ValueError("RETRY_MAX_ATTEMPTS must be >= 0")
        return value

    def is_valid(self) -> bool:
        """Check that the base URL is absolute and credentials are present."""
        if not self.LOGIN or not self.PASSWORD or not self.BASE_URL:
            return False
        parsed = urlparse(self.BASE_URL)
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)

    def basic_auth_header(self) -> str:
        """Authorization header value for HTTP Basic authentication."""
        credentials = base64.b64encode(
            f"{self.LOGIN}:{self.PASSWORD}".encode("utf-8")
        ).decode("ascii")
        return f"Basic {credentials}"

    def retry_policy(self) -> RetryPolicy:
        """Build the immutable retry policy described by these settings."""
        return RetryPolicy.from_settings(self)
