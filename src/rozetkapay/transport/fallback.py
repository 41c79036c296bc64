"""
Fallback routing between current and legacy endpoint paths.

Some API operations are served under a new path on recent deployments and
under a legacy path on older ones. The router issues the call to the
primary path and, only when that fails with NOT_FOUND, repeats it against
the fallback path with the same method, payload and query.

Every other failure from the primary path propagates unchanged, and a
failure from the fallback path propagates as-is: the caller never sees a
wrapped or combined error. Each path gets its own full retry budget since
both go through the same RequestExecutor.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

import structlog

from rozetkapay.monitoring.metrics import fallbacks_total
from rozetkapay.transport.exceptions import ErrorKind, RozetkaPayAPIError
from rozetkapay.transport.executor import RequestExecutor


logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EndpointPair:
    """Primary (current) path and its legacy fallback for one operation."""

    primary: str
    fallback: str

    def __post_init__(self) -> None:
        if not self.primary or not self.fallback:
            raise ValueError("primary and fallback paths must be non-empty")
        if self.primary == self.fallback:
            raise ValueError("fallback path must differ from primary path")


class FallbackRouter:
    """
    Call the primary path, retrying once on the legacy path after a 404.

    Attributes:
        executor: RequestExecutor used for both paths
    """

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def call(
        self,
        method: str,
        primary_path: str,
        fallback_path: str,
        *,
        payload: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        response_model: Any = None,
        fallback_params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Execute against primary_path, falling back to fallback_path on NOT_FOUND.

        fallback_params replaces the query on the legacy path when the two
        paths carry identifiers differently; by default the same params are sent.

        Raises:
            RozetkaPayAPIError: Non-404 failure on the primary path, or any
                failure on the fallback path
        """
        try:
            return await self.executor.execute(
                method,
                primary_path,
                payload=payload,
                params=params,
                response_model=response_model,
            )
        except RozetkaPayAPIError as e:
            if e.kind is not ErrorKind.NOT_FOUND:
                raise

        fallbacks_total.labels(method=method.upper()).inc()
        logger.info(
            "Primary endpoint not found, using legacy endpoint",
            method=method.upper(),
            primary_path=primary_path,
            fallback_path=fallback_path,
        )
        return await self.executor.execute(
            method,
            fallback_path,
            payload=payload,
            params=params if fallback_params is None else fallback_params,
            response_model=response_model,
        )

    async def route(
        self,
        method: str,
        pair: EndpointPair,
        *,
        payload: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        response_model: Any = None,
        fallback_params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return await self.call(
            method,
            pair.primary,
            pair.fallback,
            payload=payload,
            params=params,
            response_model=response_model,
            fallback_params=fallback_params,
        )
