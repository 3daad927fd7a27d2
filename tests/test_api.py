"""API tests for the order and placement endpoints."""

import httpx
import pytest
import pytest_asyncio

from klarna_checkout.api.orders import get_client
from klarna_checkout.config import settings
from klarna_checkout.database import get_session
from klarna_checkout.engine.retry import PermanentError
from klarna_checkout.main import app
from klarna_checkout.providers.base import PaymentsClient, PlaceOrderResponse
from klarna_checkout.providers.http_client import KlarnaHttpClient
from klarna_checkout.providers.mock_provider import MockPaymentsClient

ORDER = {
    "number": "R100",
    "email": "jane@example.com",
    "currency": "usd",
    "total": "19.99",
    "line_items": [
        {"sku": "TS-1", "name": "T-Shirt", "quantity": 2, "price": "5.00"},
        {"sku": "MUG-1", "name": "Mug", "quantity": 1, "price": "4.00", "promo_total": "-1.00"},
    ],
    "shipments": [{"number": "H100", "shipping_method": "UPS Ground", "cost": "5.99"}],
    "billing_address": {
        "first_name": "Jane",
        "last_name": "Doe",
        "address1": "1 Main St",
        "city": "Springfield",
        "zipcode": "62701",
        "country_iso": "us",
        "state_abbr": "IL",
    },
    "additional_tax_total": "1.00",
}


class RejectingClient(PaymentsClient):
    @property
    def name(self) -> str:
        return "rejecting"

    async def place_order(self, authorization_token, payload) -> PlaceOrderResponse:
        raise PermanentError("Authorization token expired", status_code=404)


@pytest_asyncio.fixture
async def api(db_session):
    client = MockPaymentsClient(failure_rate=0.0, latency_ms=0)

    async def override_session():
        yield db_session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_client] = lambda: client
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_health(api):
    response = await api.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_preview_payload(api):
    response = await api.post("/api/orders/payload", json={
        "order": ORDER,
        "region": "US",
        "store_url": "shop.example.com",
    })
    assert response.status_code == 200
    payload = response.json()
    assert payload["purchase_currency"] == "USD"
    assert payload["order_amount"] == 1999
    assert payload["merchant_reference1"] == "R100"
    assert "intent" not in payload
    assert "shipping_address" not in payload
    assert payload["billing_address"]["country"] == "US"
    assert payload["merchant_urls"]["confirmation"] == "http://shop.example.com/orders/R100"
    assert [line["type"] for line in payload["order_lines"]] == [
        "physical", "physical", "shipping_fee", "sales_tax",
    ]


@pytest.mark.asyncio
async def test_preview_rejects_blank_region(api):
    response = await api.post("/api/orders/payload", json={"order": ORDER, "region": " "})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_place_order_and_trace(api):
    response = await api.post("/api/orders/place", json={
        "order": ORDER,
        "region": "us",
        "authorization_token": "AUTHORIZATION_TOKEN",
    })
    assert response.status_code == 201
    result = response.json()
    assert result["order_number"] == "R100"
    assert result["fraud_status"] == "ACCEPTED"
    assert result["placement_id"]

    trace = await api.get(f"/api/placements/{result['placement_id']}/trace")
    assert trace.status_code == 200
    body = trace.json()
    assert body["placement"]["klarna_order_id"] == result["klarna_order_id"]
    assert [entry["action"] for entry in body["audit_trail"]] == ["payload_built", "order_placed"]

    listing = await api.get("/api/placements", params={"order_number": "R100"})
    assert [p["id"] for p in listing.json()] == [result["placement_id"]]


@pytest.mark.asyncio
async def test_place_order_provider_failure(api):
    app.dependency_overrides[get_client] = lambda: RejectingClient()
    response = await api.post("/api/orders/place", json={
        "order": ORDER,
        "authorization_token": "EXPIRED",
    })
    assert response.status_code == 502
    assert "expired" in response.json()["detail"]

    listing = await api.get("/api/placements", params={"status": "failed"})
    assert len(listing.json()) == 1


@pytest.mark.asyncio
async def test_trace_not_found(api):
    response = await api.get("/api/placements/missing/trace")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_http_client_dependency_is_closed_after_request(monkeypatch):
    monkeypatch.setattr(settings, "use_mock_client", False)
    dependency = get_client()
    client = await dependency.__anext__()
    assert isinstance(client, KlarnaHttpClient)
    assert not client.is_closed

    await dependency.aclose()
    assert client.is_closed


@pytest.mark.asyncio
async def test_mock_client_dependency(monkeypatch):
    monkeypatch.setattr(settings, "use_mock_client", True)
    dependency = get_client()
    assert isinstance(await dependency.__anext__(), MockPaymentsClient)
    await dependency.aclose()
