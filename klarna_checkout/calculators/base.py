"""
Abstract amount calculator interface.

A calculator encapsulates the pricing conventions of one Klarna market:
whether line prices include tax, which locale the widget uses, and which
order-level lines (sales tax, discounts) are appended once the base payload
has been built. Serializers never compute amounts themselves; they ask the
line calculators handed out here.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Union

from klarna_checkout.models.enums import OrderLineType
from klarna_checkout.models.order import LineItem, Order, Shipment, to_cents

Line = Union[LineItem, Shipment]


def klarna_tax_rate(rate: Decimal) -> int:
    """Klarna wants tax rates as integers with two implicit decimals (25% -> 2500)."""
    return to_cents(rate * 100)


class LineCalculator(ABC):
    """Computes the per-line amounts of one order line, in minor units."""

    @abstractmethod
    def unit_price(self, line: Line) -> int:
        ...

    @abstractmethod
    def total_amount(self, line: Line) -> int:
        ...

    @abstractmethod
    def tax_rate(self, line: Line) -> int:
        ...

    @abstractmethod
    def total_tax_amount(self, line: Line) -> int:
        ...

    def total_discount_amount(self, line: Line) -> int:
        return -to_cents(line.promo_total)


class OrderCalculator(ABC):
    """Region-specific pricing strategy for a whole order."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Calculator identifier (e.g. 'us')."""
        ...

    @abstractmethod
    def locale(self, region: str) -> str:
        ...

    @property
    @abstractmethod
    def line_item_strategy(self) -> LineCalculator:
        ...

    @property
    @abstractmethod
    def shipment_strategy(self) -> LineCalculator:
        ...

    @abstractmethod
    def adjust_with(self, order: Order, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Apply order-level amount adjustments to a freshly built payload.

        Implementations may add keys and append order lines. The payload is
        returned so calls can be chained.
        """
        ...

    def discount_line(self, order: Order) -> dict[str, Any] | None:
        """Order-level promotions as a single negative `discount` line."""
        amount = to_cents(order.order_promo_total)
        if amount == 0:
            return None
        return {
            "type": OrderLineType.DISCOUNT.value,
            "reference": "discount",
            "name": "Discount",
            "quantity": 1,
            "unit_price": amount,
            "total_amount": amount,
            "tax_rate": 0,
            "total_tax_amount": 0,
        }
