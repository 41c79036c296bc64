"""
Request executor with retry/backoff and typed error translation.

This is the single entry point every service uses to talk to the API.
One call to execute() is one logical call; internally it runs a
sequential attempt loop:

    Attempting(n) -> Success                          -> decode -> return
                  -> Failure (terminal)               -> raise RozetkaPayAPIError
                  -> Failure (retryable) -> sleep(delay(n)) -> Attempting(n+1)

A failure is retried only when all of the following hold:
    1. the policy is enabled and has retries left
    2. its kind is TRANSPORT, SERVER_ERROR or RATE_LIMITED
    3. its status code (or exception type) is on the policy's allow-list

UNAUTHORIZED, FORBIDDEN, VALIDATION, NOT_FOUND and UNKNOWN are never
retried. Cancelling the calling task aborts the in-flight request or the
backoff sleep and propagates asyncio.CancelledError.

The executor holds no per-call state on self, so one instance is safely
shared by concurrent calls.

Usage:
    executor = RequestExecutor(http_client, RetryPolicy.standard())
    payment = await executor.execute("POST", "/api/payments/v1/new",
                                     payload=request, response_model=PaymentResponse)
"""

import asyncio
import json
import time
import typing
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from rozetkapay.codec.exceptions import ResponseDecodeError
from rozetkapay.codec.tolerant import encode_datetime, encode_decimal
from rozetkapay.monitoring.metrics import (
    request_latency_seconds,
    requests_total,
    retries_total,
)
from rozetkapay.retry.policy import RetryPolicy
from rozetkapay.transport.classifier import classify_exception, classify_response
from rozetkapay.transport.exceptions import RETRYABLE_KINDS, ErrorKind, RozetkaPayAPIError
from rozetkapay.transport.metadata import (
    AttemptFailure,
    AttemptOutcome,
    AttemptSuccess,
    RequestMetadata,
)


logger = structlog.get_logger(__name__)


def _encode_json(value: Any) -> str:
    """
    Compact JSON text for a payload tree with null mapping values omitted.

    json.dumps cannot write a Decimal as a number without going through
    float, so containers are walked here and Decimals are emitted as their
    exact text. Leaves are delegated to json.dumps.
    """
    if isinstance(value, Decimal):
        return encode_decimal(value)
    if isinstance(value, BaseModel):
        return _encode_json(value.model_dump(exclude_none=True))
    if isinstance(value, Mapping):
        items = (
            f"{json.dumps(str(key))}:{_encode_json(item)}"
            for key, item in value.items()
            if item is not None
        )
        return "{" + ",".join(items) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_encode_json(item) for item in value) + "]"
    if isinstance(value, datetime):
        return json.dumps(encode_datetime(value))
    if isinstance(value, date):
        return json.dumps(value.isoformat())
    if isinstance(value, Enum):
        return _encode_json(value.value)
    return json.dumps(value)


def serialize_payload(payload: Any) -> bytes | None:
    """
    Encode a request payload as compact JSON with null fields omitted.

    Accepts a pydantic model, a mapping, or None (no body). Decimal amounts
    are written with their exact digits (Decimal("100.00") -> 100.00).
    """
    if payload is None:
        return None
    return _encode_json(payload).encode("utf-8")


def _type_name(response_model: Any) -> str:
    return getattr(response_model, "__name__", None) or str(response_model)


def _empty_result(response_model: Any) -> Any:
    """Zero value for a 204/empty body: a default-constructed model, {} or []."""
    if response_model is None or response_model is dict:
        return {}
    if typing.get_origin(response_model) is list or response_model is list:
        return []
    if isinstance(response_model, type) and issubclass(response_model, BaseModel):
        try:
            return response_model()
        except ValidationError as e:
            raise ResponseDecodeError(
                _type_name(response_model), "empty body for a model with required fields"
            ) from e
    raise ResponseDecodeError(_type_name(response_model), "empty body")


def decode_body(success: AttemptSuccess, response_model: Any = None) -> Any:
    """
    Decode a successful response body.

    Floats are parsed as Decimal so amounts keep full precision before the
    tolerant field types see them. Tolerant-codec DecodeErrors propagate
    unchanged; structural problems become ResponseDecodeError.
    """
    if success.status_code == 204 or not success.body.strip():
        return _empty_result(response_model)

    try:
        data = json.loads(success.body, parse_float=Decimal)
    except ValueError as e:
        raise ResponseDecodeError(_type_name(response_model or dict), "body is not valid JSON") from e

    if response_model is None or response_model is dict:
        return data

    try:
        if isinstance(response_model, type) and issubclass(response_model, BaseModel):
            return response_model.model_validate(data)
        return TypeAdapter(response_model).validate_python(data)
    except ValidationError as e:
        raise ResponseDecodeError(
            _type_name(response_model), f"{e.error_count()} validation error(s)"
        ) from e


class RequestExecutor:
    """
    Executes API calls with retry, backoff and failure classification.

    Attributes:
        http_client: Shared httpx.AsyncClient (base URL and auth already set)
        policy: Immutable retry policy shared by all calls
    """

    def __init__(self, http_client: httpx.AsyncClient, policy: Optional[RetryPolicy] = None):
        self.http_client = http_client
        self.policy = policy or RetryPolicy.default()

        logger.info(
            "RequestExecutor initialized",
            retry_enabled=self.policy.enabled,
            max_attempts=self.policy.max_attempts,
            backoff_strategy=getattr(self.policy.backoff_strategy, "value", self.policy.backoff_strategy),
            base_delay=self.policy.base_delay,
            max_delay=self.policy.max_delay,
        )

    async def execute(
        self,
        method: str,
        path: str,
        *,
        payload: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        response_model: Any = None,
    ) -> Any:
        """
        Execute one logical call and return the decoded result.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: Path relative to the configured base URL
            payload: Request body (pydantic model or mapping), None for no body
            params: Query parameters; None values are dropped
            response_model: Pydantic model (or type) for the body; None returns a dict

        Returns:
            Decoded response; a zero value for 204/empty bodies

        Raises:
            RozetkaPayAPIError: Non-success response or transport failure
            DecodeError: Success body could not be decoded (never retried)
        """
        result, _ = await self.execute_with_metadata(
            method, path, payload=payload, params=params, response_model=response_model
        )
        return result

    async def execute_with_metadata(
        self,
        method: str,
        path: str,
        *,
        payload: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        response_model: Any = None,
    ) -> tuple[Any, RequestMetadata]:
        """Same as execute(), also returning the RequestMetadata of the call."""
        method = method.upper()
        body = serialize_payload(payload)
        query = {k: v for k, v in (params or {}).items() if v is not None}
        log = logger.bind(method=method, path=path)

        start_time = time.monotonic()
        failures: list[AttemptFailure] = []
        attempt = 0

        while True:
            attempt += 1
            log.info("Sending API request", attempt=attempt)
            outcome = await self._attempt(method, path, body, query)

            if isinstance(outcome, AttemptSuccess):
                latency_ms = int((time.monotonic() - start_time) * 1000)
                request_latency_seconds.labels(method=method).observe(latency_ms / 1000.0)
                try:
                    result = decode_body(outcome, response_model)
                except Exception:
                    requests_total.labels(method=method, outcome="decode_error").inc()
                    log.warning(
                        "API response could not be decoded",
                        status_code=outcome.status_code,
                        attempts=attempt,
                        latency_ms=latency_ms,
                    )
                    raise
                requests_total.labels(method=method, outcome="success").inc()
                log.debug(
                    "API request succeeded",
                    status_code=outcome.status_code,
                    attempts=attempt,
                    latency_ms=latency_ms,
                )
                metadata = RequestMetadata(
                    method=method,
                    path=path,
                    attempts=attempt,
                    failures=tuple(failures),
                    status_code=outcome.status_code,
                    latency_ms=latency_ms,
                )
                return result, metadata

            failures.append(outcome)

            if self.should_retry(outcome, retries_done=attempt - 1):
                delay = self.policy.delay(attempt)
                retries_total.labels(kind=outcome.kind.value).inc()
                log.warning(
                    "API request attempt failed, retrying",
                    attempt=attempt,
                    max_retries=self.policy.max_attempts,
                    kind=outcome.kind.value,
                    status_code=outcome.status_code,
                    error=outcome.message,
                    delay_ms=int(delay * 1000),
                )
                if delay > 0:
                    await asyncio.sleep(delay)
                continue

            raise self._terminal_error(outcome, attempt, method, path, start_time)

    def should_retry(self, failure: AttemptFailure, retries_done: int) -> bool:
        """
        Decide whether a classified failure gets another attempt.

        Args:
            failure: Classified failure of the latest attempt
            retries_done: Retries already made for this call (0 after the first attempt)
        """
        if not self.policy.is_active or retries_done >= self.policy.max_attempts:
            return False
        if failure.kind not in RETRYABLE_KINDS:
            return False
        if failure.exception is not None:
            return self.policy.should_retry_exception(failure.exception)
        return failure.status_code is not None and self.policy.should_retry_status(
            failure.status_code
        )

    async def _attempt(
        self,
        method: str,
        path: str,
        body: bytes | None,
        query: dict[str, Any],
    ) -> AttemptOutcome:
        headers = {"Content-Type": "application/json"} if body is not None else None
        try:
            response = await self.http_client.request(
                method,
                path,
                content=body,
                params=query or None,
                headers=headers,
            )
        except (httpx.HTTPError, OSError) as e:
            return classify_exception(e)

        logger.debug("Response status", status_code=response.status_code, path=path)
        if response.is_success:
            return AttemptSuccess(status_code=response.status_code, body=response.text)
        return classify_response(response)

    @staticmethod
    def _terminal_error(
        failure: AttemptFailure,
        attempts: int,
        method: str,
        path: str,
        start_time: float,
    ) -> RozetkaPayAPIError:
        latency_ms = int((time.monotonic() - start_time) * 1000)
        requests_total.labels(method=method, outcome="failure").inc()
        request_latency_seconds.labels(method=method).observe(latency_ms / 1000.0)

        log_method = logger.info if failure.kind is ErrorKind.NOT_FOUND else logger.error
        log_method(
            "API request failed",
            method=method,
            path=path,
            attempts=attempts,
            kind=failure.kind.value,
            status_code=failure.status_code,
            error=failure.message,
        )

        error = RozetkaPayAPIError(
            failure.kind,
            failure.message,
            status_code=failure.status_code,
            retry_after=failure.retry_after,
            attempts=attempts,
            details={"method": method, "path": path},
        )
        if failure.exception is not None:
            error.__cause__ = failure.exception
        return error
