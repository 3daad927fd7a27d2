"""Serialization of a single line item into a Klarna order line."""

from typing import Any

from klarna_checkout.calculators.base import LineCalculator
from klarna_checkout.models.enums import OrderLineType
from klarna_checkout.models.order import LineItem


class LineItemSerializer:
    def __init__(self, line_item: LineItem, strategy: LineCalculator):
        self.line_item = line_item
        self.strategy = strategy

    def to_hash(self) -> dict[str, Any]:
        item = self.line_item
        return {
            "type": OrderLineType.PHYSICAL.value,
            "reference": item.sku,
            "name": item.name,
            "quantity": item.quantity,
            "unit_price": self.strategy.unit_price(item),
            "total_amount": self.strategy.total_amount(item),
            "total_discount_amount": self.strategy.total_discount_amount(item),
            "tax_rate": self.strategy.tax_rate(item),
            "total_tax_amount": self.strategy.total_tax_amount(item),
            "image_url": item.image_url,
            "product_url": item.product_url,
        }
