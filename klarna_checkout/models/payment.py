"""Klarna payment method preferences and the per-checkout payment source."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class KlarnaPaymentMethod:
    """Merchant-configured Klarna preferences."""

    region: str = "us"
    design: Optional[str] = None
    skip_personal_data: bool = False
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class KlarnaPaymentSource:
    """
    The shopper's Klarna authorization for one checkout.

    order_id and fraud_status are filled in once the order has been placed.
    """

    authorization_token: str
    payment_method: KlarnaPaymentMethod
    intent: Optional[str] = None
    order_id: Optional[str] = None
    fraud_status: Optional[str] = None
