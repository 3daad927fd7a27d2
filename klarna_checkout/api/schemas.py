"""Request bodies for the order endpoints, converted to domain objects."""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field

from klarna_checkout.config import settings
from klarna_checkout.models.order import (
    Address,
    Country,
    LineItem,
    Order,
    Shipment,
    ShippingMethod,
    State,
    Store,
)


class AddressIn(BaseModel):
    first_name: str
    last_name: str
    address1: str
    address2: Optional[str] = None
    city: str
    zipcode: str
    country_iso: Optional[str] = None
    state_abbr: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None

    def to_domain(self) -> Address:
        return Address(
            first_name=self.first_name,
            last_name=self.last_name,
            address1=self.address1,
            address2=self.address2,
            city=self.city,
            zipcode=self.zipcode,
            country=Country(iso=self.country_iso.upper()) if self.country_iso else None,
            state=State(abbr=self.state_abbr) if self.state_abbr else None,
            phone=self.phone,
            company=self.company,
        )


class LineItemIn(BaseModel):
    sku: str
    name: str
    quantity: int = Field(gt=0)
    price: Decimal
    promo_total: Decimal = Decimal("0")
    additional_tax_total: Decimal = Decimal("0")
    included_tax_total: Decimal = Decimal("0")
    tax_rate: Decimal = Decimal("0")
    image_url: Optional[str] = None
    product_url: Optional[str] = None

    def to_domain(self) -> LineItem:
        return LineItem(**self.model_dump())


class ShipmentIn(BaseModel):
    number: str
    shipping_method: str
    cost: Decimal
    promo_total: Decimal = Decimal("0")
    additional_tax_total: Decimal = Decimal("0")
    included_tax_total: Decimal = Decimal("0")
    tax_rate: Decimal = Decimal("0")
    tracking: Optional[str] = None
    tracking_url: Optional[str] = None

    def to_domain(self) -> Shipment:
        data = self.model_dump()
        data["shipping_method"] = ShippingMethod(name=self.shipping_method)
        return Shipment(**data)


class OrderIn(BaseModel):
    number: str
    email: str
    currency: str = Field(min_length=3, max_length=3)
    total: Decimal
    line_items: list[LineItemIn] = []
    shipments: list[ShipmentIn] = []
    billing_address: Optional[AddressIn] = None
    shipping_address: Optional[AddressIn] = None
    additional_tax_total: Decimal = Decimal("0")
    included_tax_total: Decimal = Decimal("0")
    order_promo_total: Decimal = Decimal("0")

    def to_domain(self) -> Order:
        return Order(
            number=self.number,
            email=self.email,
            currency=self.currency.upper(),
            total=self.total,
            line_items=[item.to_domain() for item in self.line_items],
            shipments=[shipment.to_domain() for shipment in self.shipments],
            billing_address=self.billing_address.to_domain() if self.billing_address else None,
            shipping_address=self.shipping_address.to_domain() if self.shipping_address else None,
            additional_tax_total=self.additional_tax_total,
            included_tax_total=self.included_tax_total,
            order_promo_total=self.order_promo_total,
        )


class PayloadRequest(BaseModel):
    order: OrderIn
    region: str = Field(default_factory=lambda: settings.default_region)
    design: Optional[str] = None
    intent: Optional[str] = None
    skip_personal_data: bool = False
    options: dict[str, Any] = {}
    store_url: Optional[str] = None

    def store(self) -> Store:
        return Store(name=settings.store_name, url=self.store_url or settings.store_url)


class PlaceOrderRequest(PayloadRequest):
    authorization_token: str = Field(min_length=1)


class PlaceOrderResult(BaseModel):
    placement_id: Optional[str] = None
    order_number: str
    klarna_order_id: str
    fraud_status: str
    redirect_url: Optional[str] = None
