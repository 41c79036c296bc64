"""
HTTP transport layer for the RozetkaPay API.

Main Components:
- RequestExecutor: single-call execution with retry, backoff and decoding
- FallbackRouter / EndpointPair: 404 fallback to legacy endpoint paths
- classify_response / classify_exception: failure taxonomy (ErrorKind)
- RozetkaPayAPIError: the typed error every failed call raises
- RequestMetadata: per-call attempt history

Usage:
    from rozetkapay.transport import RequestExecutor, FallbackRouter, EndpointPair

    executor = RequestExecutor(http_client, policy)
    router = FallbackRouter(executor)
    result = await router.route("POST", EndpointPair(new_path, legacy_path), payload=req)
"""

from rozetkapay.transport.base_client import (
    CUSTOMER_AUTH_HEADER,
    ON_BEHALF_OF_HEADER,
    build_default_headers,
    configure_http_client,
    create_http_client,
)
from rozetkapay.transport.classifier import (
    classify_exception,
    classify_response,
    classify_status,
)
from rozetkapay.transport.exceptions import RETRYABLE_KINDS, ErrorKind, RozetkaPayAPIError
from rozetkapay.transport.executor import RequestExecutor
from rozetkapay.transport.fallback import EndpointPair, FallbackRouter
from rozetkapay.transport.metadata import (
    AttemptFailure,
    AttemptOutcome,
    AttemptSuccess,
    RequestMetadata,
)

__all__ = [
    "AttemptFailure",
    "AttemptOutcome",
    "AttemptSuccess",
    "CUSTOMER_AUTH_HEADER",
    "EndpointPair",
    "ErrorKind",
    "FallbackRouter",
    "ON_BEHALF_OF_HEADER",
    "RETRYABLE_KINDS",
    "RequestExecutor",
    "RequestMetadata",
    "RozetkaPayAPIError",
    "build_default_headers",
    "classify_exception",
    "classify_response",
    "classify_status",
    "configure_http_client",
    "create_http_client",
]
