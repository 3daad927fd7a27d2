from klarna_checkout.serializers.address import AddressSerializer
from klarna_checkout.serializers.line_item import LineItemSerializer
from klarna_checkout.serializers.order import OrderPayload, OrderSerializer
from klarna_checkout.serializers.shipment import ShipmentSerializer

__all__ = ["AddressSerializer", "LineItemSerializer", "OrderPayload", "OrderSerializer", "ShipmentSerializer"]
