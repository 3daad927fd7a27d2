"""Serialization of a shipment into a `shipping_fee` order line."""

from typing import Any

from klarna_checkout.calculators.base import LineCalculator
from klarna_checkout.models.enums import OrderLineType
from klarna_checkout.models.order import Shipment


class ShipmentSerializer:
    def __init__(self, shipment: Shipment, strategy: LineCalculator):
        self.shipment = shipment
        self.strategy = strategy

    def to_hash(self) -> dict[str, Any]:
        shipment = self.shipment
        return {
            "type": OrderLineType.SHIPPING_FEE.value,
            "reference": shipment.number,
            "name": shipment.shipping_method.name,
            "quantity": 1,
            "unit_price": self.strategy.unit_price(shipment),
            "total_amount": self.strategy.total_amount(shipment),
            "total_discount_amount": self.strategy.total_discount_amount(shipment),
            "tax_rate": self.strategy.tax_rate(shipment),
            "total_tax_amount": self.strategy.total_tax_amount(shipment),
        }
