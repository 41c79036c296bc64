"""
Base class for API area services.

Services are thin: each public method is one call to the shared
RequestExecutor (or FallbackRouter), naming the path, the request model
and the response model. Retry, error translation and decoding all live in
the transport layer.
"""

from typing import Any, Mapping, Optional
from urllib.parse import quote

from rozetkapay.transport.executor import RequestExecutor
from rozetkapay.transport.fallback import EndpointPair, FallbackRouter


def path_segment(value: str) -> str:
    """Percent-encode a caller-supplied identifier for use inside a path."""
    if value is None or not str(value).strip():
        raise ValueError("identifier must be a non-empty string")
    return quote(str(value), safe="")


class BaseService:
    """
    Shared plumbing for all services.

    Attributes:
        executor: RequestExecutor shared by the whole client
        router: FallbackRouter over the same executor
    """

    def __init__(self, executor: RequestExecutor, router: Optional[FallbackRouter] = None):
        self.executor = executor
        self.router = router or FallbackRouter(executor)

    async def _get(
        self,
        path: str,
        response_model: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return await self.executor.execute(
            "GET", path, params=params, response_model=response_model
        )

    async def _post(self, path: str, payload: Any, response_model: Any = None) -> Any:
        return await self.executor.execute(
            "POST", path, payload=payload, response_model=response_model
        )

    async def _patch(self, path: str, payload: Any, response_model: Any = None) -> Any:
        return await self.executor.execute(
            "PATCH", path, payload=payload, response_model=response_model
        )

    async def _delete(self, path: str, response_model: Any = None) -> Any:
        return await self.executor.execute("DELETE", path, response_model=response_model)

    async def _get_with_fallback(
        self,
        endpoints: EndpointPair,
        response_model: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        fallback_params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        GET with legacy fallback.

        fallback_params lets the legacy path use a different query (e.g. the
        identifier moved from the query into the path); it defaults to params.
        """
        return await self.router.route(
            "GET",
            endpoints,
            params=params,
            response_model=response_model,
            fallback_params=fallback_params,
        )

    async def _post_with_fallback(
        self,
        endpoints: EndpointPair,
        payload: Any,
        response_model: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        fallback_params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return await self.router.route(
            "POST",
            endpoints,
            payload=payload,
            params=params,
            response_model=response_model,
            fallback_params=fallback_params,
        )
