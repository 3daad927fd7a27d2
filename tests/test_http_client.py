"""Tests for the Klarna HTTP client, against a mocked transport."""

import json

import httpx
import pytest

from klarna_checkout.engine.retry import PermanentError, ProviderError, RateLimitError
from klarna_checkout.providers.http_client import KlarnaHttpClient


def make_client(handler) -> KlarnaHttpClient:
    return KlarnaHttpClient(
        base_url="https://api.test.klarna.com",
        username="PK_test",
        password="secret",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_place_order_success():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={
            "order_id": "f3392f8b-6116-4073-ab96-e330819e2c07",
            "redirect_url": "https://payments.klarna.com/redirect/abc",
            "fraud_status": "ACCEPTED",
        })

    client = make_client(handler)
    response = await client.place_order("TOKEN-1", {"merchant_reference1": "R100", "order_amount": 1999})
    await client.aclose()

    assert response.order_id == "f3392f8b-6116-4073-ab96-e330819e2c07"
    assert response.provider == "klarna"
    assert response.redirect_url == "https://payments.klarna.com/redirect/abc"
    assert seen["path"] == "/payments/v1/authorizations/TOKEN-1/order"
    assert seen["auth"].startswith("Basic ")
    assert seen["body"] == {"merchant_reference1": "R100", "order_amount": 1999}


@pytest.mark.asyncio
async def test_rate_limit_carries_retry_after():
    client = make_client(lambda request: httpx.Response(429, headers={"Retry-After": "2"}))
    with pytest.raises(RateLimitError) as excinfo:
        await client.place_order("TOKEN-1", {})
    assert excinfo.value.retry_after == 2.0
    assert excinfo.value.retriable


@pytest.mark.asyncio
async def test_unavailable_is_retriable():
    client = make_client(lambda request: httpx.Response(503, text="unavailable"))
    with pytest.raises(ProviderError) as excinfo:
        await client.place_order("TOKEN-1", {})
    assert excinfo.value.status_code == 503
    assert excinfo.value.retriable


@pytest.mark.asyncio
async def test_internal_error_is_not_retriable():
    client = make_client(lambda request: httpx.Response(500, json={"error_code": "INTERNAL_ERROR"}))
    with pytest.raises(ProviderError) as excinfo:
        await client.place_order("TOKEN-1", {})
    assert not excinfo.value.retriable


@pytest.mark.asyncio
async def test_client_error_is_permanent_with_klarna_messages():
    def handler(request):
        return httpx.Response(400, json={
            "error_code": "BAD_VALUE",
            "error_messages": ["Bad value: order_lines"],
            "correlation_id": "abc",
        })

    client = make_client(handler)
    with pytest.raises(PermanentError, match="BAD_VALUE: Bad value: order_lines"):
        await client.place_order("TOKEN-1", {})


@pytest.mark.asyncio
async def test_connect_timeout_is_retriable_provider_error():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    client = make_client(handler)
    with pytest.raises(ProviderError) as excinfo:
        await client.place_order("TOKEN-1", {})
    assert excinfo.value.status_code == 503
    assert excinfo.value.retriable
    assert isinstance(excinfo.value.__cause__, httpx.ConnectTimeout)


@pytest.mark.asyncio
async def test_non_object_error_body():
    client = make_client(lambda request: httpx.Response(400, json=["unexpected"]))
    with pytest.raises(PermanentError, match="unexpected"):
        await client.place_order("TOKEN-1", {})


@pytest.mark.asyncio
async def test_aclose_closes_connection_pool():
    client = make_client(lambda request: httpx.Response(200, json={"order_id": "x"}))
    assert not client.is_closed
    await client.aclose()
    assert client.is_closed
