"""
Unit tests for FallbackRouter and EndpointPair.
"""

import httpx
import pytest

from rozetkapay.models.payparts import PayPartsBanksResponse
from rozetkapay.transport.exceptions import ErrorKind, RozetkaPayAPIError
from rozetkapay.transport.fallback import EndpointPair, FallbackRouter
from tests.fixtures.http import json_response


PAIR = EndpointPair(primary="/api/payparts/v1/banks", fallback="/api/payparts/banks")


# ============================================================================
# EndpointPair
# ============================================================================


def test_endpoint_pair_rejects_identical_paths():
    with pytest.raises(ValueError):
        EndpointPair(primary="/a", fallback="/a")


@pytest.mark.parametrize("primary,fallback", [("", "/b"), ("/a", "")])
def test_endpoint_pair_rejects_empty_paths(primary, fallback):
    with pytest.raises(ValueError):
        EndpointPair(primary=primary, fallback=fallback)


# ============================================================================
# Routing
# ============================================================================


@pytest.mark.asyncio
async def test_primary_success_does_not_touch_fallback(router, scripted_api, sample_banks_data):
    scripted_api.script(json_response(200, sample_banks_data))

    result = await router.route("GET", PAIR, response_model=PayPartsBanksResponse)

    assert result.total_count == 2
    assert scripted_api.paths == ["/api/payparts/v1/banks"]


@pytest.mark.asyncio
async def test_not_found_falls_back_once(router, scripted_api, sample_banks_data):
    scripted_api.script(
        json_response(404),
        json_response(200, sample_banks_data),
    )

    result = await router.route("GET", PAIR, response_model=PayPartsBanksResponse)

    assert result.total_count == 2
    assert scripted_api.paths == ["/api/payparts/v1/banks", "/api/payparts/banks"]


@pytest.mark.asyncio
async def test_fallback_sends_same_payload_and_method(router, scripted_api):
    scripted_api.script(json_response(404), json_response(200, {"id": "x"}))

    await router.call(
        "post",
        "/api/payparts/v1/order/create",
        "/api/payparts/order/create",
        payload={"external_id": "o1", "amount": 10},
    )

    first, second = scripted_api.requests
    assert second.method == first.method == "POST"
    assert second.content == first.content


@pytest.mark.asyncio
async def test_fallback_reuses_params_by_default(router, scripted_api):
    scripted_api.script(json_response(404), json_response(200))

    await router.route("GET", PAIR, params={"external_id": "o1"})

    assert [dict(r.url.params) for r in scripted_api.requests] == [
        {"external_id": "o1"},
        {"external_id": "o1"},
    ]


@pytest.mark.asyncio
async def test_fallback_params_override(router, scripted_api):
    scripted_api.script(json_response(404), json_response(200))

    await router.call(
        "GET",
        "/api/payparts/v1/info/operation",
        "/api/payparts/v1/operation/op-1",
        params={"external_id": "o1", "operation_id": "op-1"},
        fallback_params={},
    )

    assert scripted_api.requests[1].url.path == "/api/payparts/v1/operation/op-1"
    assert scripted_api.requests[1].url.query == b""


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 401, 403, 409, 500])
async def test_other_failures_do_not_fall_back(router, scripted_api, status):
    scripted_api.script(json_response(status))

    with pytest.raises(RozetkaPayAPIError) as exc_info:
        await router.route("GET", PAIR)

    assert exc_info.value.status_code == status
    assert scripted_api.call_count == 1


@pytest.mark.asyncio
async def test_transport_failure_does_not_fall_back(router, scripted_api):
    scripted_api.script(httpx.ConnectError("refused"))

    with pytest.raises(RozetkaPayAPIError) as exc_info:
        await router.route("GET", PAIR)

    assert exc_info.value.kind is ErrorKind.TRANSPORT
    assert scripted_api.call_count == 1


@pytest.mark.asyncio
async def test_fallback_failure_propagates_unwrapped(router, scripted_api):
    scripted_api.script(json_response(404), json_response(401))

    with pytest.raises(RozetkaPayAPIError) as exc_info:
        await router.route("GET", PAIR)

    assert exc_info.value.kind is ErrorKind.UNAUTHORIZED
    assert exc_info.value.details["path"] == "/api/payparts/banks"
    assert scripted_api.call_count == 2


@pytest.mark.asyncio
async def test_both_paths_not_found(router, scripted_api):
    scripted_api.script(json_response(404))

    with pytest.raises(RozetkaPayAPIError) as exc_info:
        await router.route("GET", PAIR)

    assert exc_info.value.is_not_found
    assert scripted_api.call_count == 2


@pytest.mark.asyncio
async def test_each_path_gets_its_own_retry_budget(retrying_executor, scripted_api, no_sleep):
    router = FallbackRouter(retrying_executor)
    scripted_api.script(
        json_response(503),
        json_response(404),
        json_response(503),
        json_response(200, {"ok": True}),
    )

    result = await router.route("GET", PAIR)

    assert result == {"ok": True}
    assert scripted_api.paths == [
        "/api/payparts/v1/banks",
        "/api/payparts/v1/banks",
        "/api/payparts/banks",
        "/api/payparts/banks",
    ]
