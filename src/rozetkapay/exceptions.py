"""
Base exceptions for the RozetkaPay client.

Every error raised by this package derives from RozetkaPayError so callers
can catch any SDK failure with a single except clause. The HTTP error
taxonomy lives in rozetkapay.transport.exceptions and the decode errors in
rozetkapay.codec.exceptions.
"""

from typing import Any


class RozetkaPayError(Exception):
    """
    Base exception for all RozetkaPay client errors.

    Attributes:
        message: Human-readable description, safe to log and display
        details: Structured data for logging/metrics (never request payloads)
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RozetkaPayError):
    """Raised when the client is constructed with an unusable configuration."""
    pass
