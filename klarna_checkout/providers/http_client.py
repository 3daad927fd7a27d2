"""
Klarna Payments API client over HTTP.

POST /payments/v1/authorizations/{authorizationToken}/order with HTTP basic
auth (API username and password). Status codes map onto the retry error types:

  - 429              → RateLimitError (Retry-After honoured)
  - 502, 503, 504    → ProviderError, retriable
  - other 5xx        → ProviderError, not retriable
  - other 4xx        → PermanentError
  - timeouts and connection failures → ProviderError (503), retriable
"""

import logging
from typing import Any, Optional

import httpx

from klarna_checkout.config import settings
from klarna_checkout.engine.retry import RETRIABLE_STATUS_CODES, PermanentError, ProviderError, RateLimitError
from klarna_checkout.providers.base import PaymentsClient, PlaceOrderResponse

logger = logging.getLogger("klarna_checkout.http_client")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if not isinstance(body, dict):
        return response.text or f"HTTP {response.status_code}"
    messages = body.get("error_messages") or []
    code = body.get("error_code", "")
    return f"{code}: {'; '.join(messages)}" if messages else (code or f"HTTP {response.status_code}")


def _retry_after(response: httpx.Response) -> Optional[float]:
    value = response.headers.get("Retry-After")
    try:
        return float(value) if value is not None else None
    except ValueError:
        return None


class KlarnaHttpClient(PaymentsClient):
    def __init__(
        self,
        base_url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.klarna_api_url,
            auth=(username or settings.klarna_username, password or settings.klarna_password),
            timeout=timeout if timeout is not None else settings.klarna_timeout,
            transport=transport,
        )

    @property
    def name(self) -> str:
        return "klarna"

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def place_order(self, authorization_token: str, payload: dict[str, Any]) -> PlaceOrderResponse:
        try:
            response = await self._client.post(
                f"/payments/v1/authorizations/{authorization_token}/order",
                json=payload,
            )
        except httpx.TransportError as e:
            logger.warning("Transport error talking to Klarna: %r", e)
            raise ProviderError(
                message=f"Klarna unreachable: {e!r}",
                status_code=503,
                retriable=True,
            ) from e

        if response.status_code == 429:
            raise RateLimitError(message=_error_message(response), retry_after=_retry_after(response))

        if response.status_code >= 500:
            raise ProviderError(
                message=_error_message(response),
                status_code=response.status_code,
                retriable=response.status_code in RETRIABLE_STATUS_CODES,
            )

        if response.status_code >= 400:
            raise PermanentError(message=_error_message(response), status_code=response.status_code)

        data = response.json()
        logger.info(
            "Klarna order %s placed for %s (fraud_status=%s)",
            data.get("order_id"),
            payload.get("merchant_reference1"),
            data.get("fraud_status"),
        )
        return PlaceOrderResponse(
            order_id=data["order_id"],
            provider=self.name,
            fraud_status=data.get("fraud_status", "ACCEPTED"),
            redirect_url=data.get("redirect_url"),
        )
