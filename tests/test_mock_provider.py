"""Tests for the mock Klarna client."""

import pytest

from klarna_checkout.engine.retry import ProviderError
from klarna_checkout.providers.mock_provider import MockPaymentsClient


@pytest.mark.asyncio
async def test_always_fails_at_full_failure_rate():
    client = MockPaymentsClient(failure_rate=1.0, latency_ms=0)
    with pytest.raises(ProviderError):
        await client.place_order("TOKEN", {})
    assert client.placed == []


@pytest.mark.asyncio
async def test_records_placed_payloads():
    client = MockPaymentsClient(failure_rate=0.0, latency_ms=0)
    response = await client.place_order("TOKEN", {"merchant_reference1": "R1"})
    assert response.provider == "mock_klarna"
    assert response.redirect_url is None
    assert client.placed == [("TOKEN", {"merchant_reference1": "R1"})]
