"""
Abstract payments client interface.

The serializer output is submitted through one of these. The HTTP client
talks to the Klarna Payments API; the mock client stands in for it in demos
and tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class PlaceOrderResponse:
    """Response from placing an order with an authorization token."""

    order_id: str
    provider: str  # e.g. "klarna", "mock_klarna"
    fraud_status: str = "ACCEPTED"  # "ACCEPTED", "PENDING", "REJECTED"
    redirect_url: Optional[str] = None


class PaymentsClient(ABC):
    """Abstract base class for Klarna Payments API clients."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Client identifier (e.g. 'klarna')."""
        ...

    @abstractmethod
    async def place_order(self, authorization_token: str, payload: dict[str, Any]) -> PlaceOrderResponse:
        """
        Create a Klarna order from an authorization token.

        Raises:
            ProviderError: On transient failure (will be retried).
            PermanentError: On non-retriable failure.
        """
        ...
