from klarna_checkout.providers.base import PaymentsClient, PlaceOrderResponse
from klarna_checkout.providers.http_client import KlarnaHttpClient
from klarna_checkout.providers.mock_provider import MockPaymentsClient

__all__ = ["KlarnaHttpClient", "MockPaymentsClient", "PaymentsClient", "PlaceOrderResponse"]
