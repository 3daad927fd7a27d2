"""
Mock Klarna client for demonstration and tests.

Simulates the Payments API:
  - Configurable latency
  - Configurable failure rate (rate limits, 503s, rejected tokens)
  - Realistic order ids

Every placed payload is kept in `placed` so callers can inspect what was sent.
"""

import asyncio
import random
import uuid
from typing import Any, Optional

from klarna_checkout.config import settings
from klarna_checkout.engine.retry import PermanentError, ProviderError, RateLimitError
from klarna_checkout.providers.base import PaymentsClient, PlaceOrderResponse


class MockPaymentsClient(PaymentsClient):
    def __init__(
        self,
        failure_rate: Optional[float] = None,
        latency_ms: Optional[int] = None,
    ):
        self._failure_rate = failure_rate if failure_rate is not None else settings.mock_failure_rate
        self._latency_ms = latency_ms if latency_ms is not None else settings.mock_latency_ms
        self.placed: list[tuple[str, dict[str, Any]]] = []

    @property
    def name(self) -> str:
        return "mock_klarna"

    async def place_order(self, authorization_token: str, payload: dict[str, Any]) -> PlaceOrderResponse:
        if self._latency_ms > 0:
            jitter = random.uniform(0.5, 1.5)
            await asyncio.sleep(self._latency_ms * jitter / 1000)

        roll = random.random()

        if roll < self._failure_rate * 0.3:
            raise RateLimitError(message="Mock rate limit: too many requests", retry_after=1.0)

        if roll < self._failure_rate * 0.6:
            raise ProviderError(
                message="Mock transient error: service temporarily unavailable",
                status_code=503,
                retriable=True,
            )

        if roll < self._failure_rate:
            raise PermanentError(
                message=f"Mock permanent error: authorization token {authorization_token} is invalid",
                status_code=404,
            )

        self.placed.append((authorization_token, payload))
        order_id = str(uuid.uuid4())

        return PlaceOrderResponse(
            order_id=order_id,
            provider=self.name,
            fraud_status="ACCEPTED",
            redirect_url=(payload.get("merchant_urls") or {}).get("confirmation"),
        )
