from klarna_checkout.models.enums import OrderLineType, PlacementStatus, Region, UnsupportedRegionError
from klarna_checkout.models.order import (
    Address,
    Country,
    LineItem,
    Money,
    Order,
    Shipment,
    ShippingMethod,
    State,
    Store,
)
from klarna_checkout.models.payment import KlarnaPaymentMethod, KlarnaPaymentSource
from klarna_checkout.models.records import AuditLog, Base, OrderPlacement

__all__ = [
    "Address",
    "AuditLog",
    "Base",
    "Country",
    "KlarnaPaymentMethod",
    "KlarnaPaymentSource",
    "LineItem",
    "Money",
    "Order",
    "OrderLineType",
    "OrderPlacement",
    "PlacementStatus",
    "Region",
    "Shipment",
    "ShippingMethod",
    "State",
    "Store",
    "UnsupportedRegionError",
]
