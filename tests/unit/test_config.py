"""
Unit tests for Settings.
"""

import base64

import pytest
from pydantic import ValidationError

from rozetkapay.config import Settings
from rozetkapay.retry.policy import BackoffStrategy


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.BASE_URL == "https://api.rozetkapay.com"
    assert settings.TIMEOUT == 30.0
    assert settings.VALIDATE_SSL is True
    assert settings.RETRY_ENABLED is False
    assert settings.RETRY_BACKOFF_STRATEGY == BackoffStrategy.EXPONENTIAL_JITTER
    assert settings.is_valid() is False


def test_loaded_from_prefixed_environment(monkeypatch):
    monkeypatch.setenv("ROZETKAPAY_LOGIN", "env-login")
    monkeypatch.setenv("ROZETKAPAY_PASSWORD", "env-password")
    monkeypatch.setenv("ROZETKAPAY_RETRY_MAX_ATTEMPTS", "2")
    monkeypatch.setenv("ROZETKAPAY_RETRY_BACKOFF_STRATEGY", "fixed")

    settings = Settings(_env_file=None)

    assert settings.LOGIN == "env-login"
    assert settings.RETRY_MAX_ATTEMPTS == 2
    assert settings.RETRY_BACKOFF_STRATEGY == BackoffStrategy.FIXED
    assert settings.is_valid() is True


def test_negative_retry_attempts_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, RETRY_MAX_ATTEMPTS=-1)


@pytest.mark.parametrize(
    "base_url",
    ["", "api.rozetkapay.com", "ftp://api.rozetkapay.com", "https://"],
)
def test_invalid_base_url(test_settings, base_url):
    assert test_settings.model_copy(update={"BASE_URL": base_url}).is_valid() is False


def test_missing_password_invalid(test_settings):
    assert test_settings.model_copy(update={"PASSWORD": ""}).is_valid() is False


def test_basic_auth_header(test_settings):
    header = test_settings.basic_auth_header()

    assert header.startswith("Basic ")
    assert base64.b64decode(header[6:]) == b"test-login:test-password"


def test_basic_auth_header_non_ascii():
    settings = Settings(_env_file=None, LOGIN="мерчант", PASSWORD="пароль")

    decoded = base64.b64decode(settings.basic_auth_header()[6:]).decode("utf-8")

    assert decoded == "мерчант:пароль"
