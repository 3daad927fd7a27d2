"""
Order serializer: builds the Klarna "place order" request body.

The payload is assembled as an OrderPayload of optional fields. Unset fields
are left out of the resulting dict entirely (one level deep; nested address
and order line dicts are passed through untouched). The region calculator then
gets the final say over amounts via adjust_with.

Address handling is tolerant:
  - No billing address → the shipping address block is reused.
  - No shipping address → no shipping_address key.
  - purchase_country comes from the billing country, then the shipping
    country, then the region token itself.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Optional

from klarna_checkout.calculators.base import OrderCalculator
from klarna_checkout.calculators.locales import MARKETS
from klarna_checkout.calculators.selector import select_calculator
from klarna_checkout.models.order import Address, Order, Store
from klarna_checkout.serializers.address import AddressSerializer
from klarna_checkout.serializers.line_item import LineItemSerializer
from klarna_checkout.serializers.shipment import ShipmentSerializer
from klarna_checkout.serializers.urls import merchant_urls

logger = logging.getLogger("klarna_checkout.serializer")


@dataclass
class OrderPayload:
    """Top-level fields of a Klarna order request. None means "omit"."""

    purchase_country: Optional[str] = None
    purchase_currency: Optional[str] = None
    locale: Optional[str] = None
    order_amount: Optional[int] = None  # Minor units, taxes and adjustments included
    billing_address: Optional[dict[str, Any]] = None
    shipping_address: Optional[dict[str, Any]] = None
    order_lines: Optional[list[dict[str, Any]]] = None
    merchant_reference1: Optional[str] = None
    options: Optional[dict[str, Any]] = None
    design: Optional[str] = None
    merchant_urls: Optional[dict[str, str]] = None
    intent: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


class OrderSerializer:
    def __init__(
        self,
        order: Order,
        region: str = "us",
        *,
        options: Optional[dict[str, Any]] = None,
        design: Optional[str] = None,
        skip_personal_data: bool = False,
        store: Optional[Store] = None,
        intent: Optional[str] = None,
    ):
        self.order = order
        self.region = (region or "").strip().lower()
        self.options = {} if options is None else options
        self.design = design
        self.store = store
        self.intent = intent
        self._skip_personal_data = skip_personal_data
        self.strategy: OrderCalculator = select_calculator(self.region, skip_personal_data)

    @property
    def skip_personal_data(self) -> bool:
        return self._skip_personal_data

    def to_hash(self) -> dict[str, Any]:
        payload = self.strategy.adjust_with(self.order, self.order_information().as_dict())
        logger.debug(
            "Serialized order %s for region %s: %d order lines, amount=%s",
            self.order.number,
            self.region,
            len(payload.get("order_lines", [])),
            payload.get("order_amount"),
        )
        return payload

    def addresses(self) -> dict[str, Optional[dict[str, Any]]]:
        return {
            "billing_address": self.billing_address(),
            "shipping_address": self.shipping_address(),
        }

    def shipping_info(self) -> list[dict[str, Optional[str]]]:
        """Per-shipment tracking details, as sent along with a capture."""
        return [
            {
                "shipping_company": shipment.shipping_method.name,
                "tracking_number": shipment.tracking,
                "tracking_uri": shipment.tracking_url,
            }
            for shipment in self.order.shipments
        ]

    def order_information(self) -> OrderPayload:
        order = self.order
        return OrderPayload(
            purchase_country=self.purchase_country(),
            purchase_currency=order.currency,
            locale=self.strategy.locale(self.region),
            order_amount=order.display_total.cents,
            billing_address=self.billing_address(),
            shipping_address=self.shipping_address(),
            order_lines=self.order_lines(),
            merchant_reference1=order.number,
            options=self.options,
            design=self.design,
            merchant_urls=merchant_urls(self.store, order),
            intent=self.intent,
        )

    def purchase_country(self) -> str:
        for address in (self.order.billing_address, self.order.shipping_address):
            if address is not None and address.country is not None and address.country.iso:
                return address.country.iso
        market = MARKETS.get(self.region)
        return market["country"] if market else self.region.upper()

    def order_lines(self) -> list[dict[str, Any]]:
        return self.line_items() + self.shipments()

    def line_items(self) -> list[dict[str, Any]]:
        strategy = self.strategy.line_item_strategy
        return [LineItemSerializer(item, strategy).to_hash() for item in self.order.line_items]

    def shipments(self) -> list[dict[str, Any]]:
        strategy = self.strategy.shipment_strategy
        return [ShipmentSerializer(shipment, strategy).to_hash() for shipment in self.order.shipments]

    def billing_address(self) -> Optional[dict[str, Any]]:
        if self.order.billing_address is None:
            return self.shipping_address()
        return self._address_block(self.order.billing_address)

    def shipping_address(self) -> Optional[dict[str, Any]]:
        if self.order.shipping_address is None:
            return None
        return self._address_block(self.order.shipping_address)

    def _address_block(self, address: Address) -> dict[str, Any]:
        return {"email": self.order.email, **AddressSerializer(address).to_hash()}
