"""
Shopping-cart domain objects consumed by the serializers.

These mirror the fields a storefront order exposes at checkout time. Amounts
are Decimals in major currency units; conversion to the minor units Klarna
expects happens at serialization time via Money.cents / to_cents.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

ZERO = Decimal("0")


def to_cents(amount: Decimal) -> int:
    """Convert a major-unit amount to minor units, rounding half up."""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str

    @property
    def cents(self) -> int:
        return to_cents(self.amount)


@dataclass
class Country:
    iso: str  # ISO 3166-1 alpha-2
    name: str = ""


@dataclass
class State:
    abbr: str = ""
    name: str = ""


@dataclass
class Address:
    first_name: str
    last_name: str
    address1: str
    city: str
    zipcode: str
    country: Optional[Country] = None
    address2: Optional[str] = None
    phone: Optional[str] = None
    state: Optional[State] = None
    company: Optional[str] = None


@dataclass
class ShippingMethod:
    name: str


@dataclass
class LineItem:
    sku: str
    name: str
    quantity: int
    price: Decimal  # Unit price
    promo_total: Decimal = ZERO  # Negative for discounts
    additional_tax_total: Decimal = ZERO  # Tax charged on top (US sales tax)
    included_tax_total: Decimal = ZERO  # Tax contained in the price (VAT)
    tax_rate: Decimal = ZERO  # Fraction, e.g. 0.2 for 20%
    image_url: Optional[str] = None
    product_url: Optional[str] = None

    @property
    def amount(self) -> Decimal:
        return self.price * self.quantity

    @property
    def discounted_amount(self) -> Decimal:
        return self.amount + self.promo_total


@dataclass
class Shipment:
    number: str
    shipping_method: ShippingMethod
    cost: Decimal
    promo_total: Decimal = ZERO
    additional_tax_total: Decimal = ZERO
    included_tax_total: Decimal = ZERO
    tax_rate: Decimal = ZERO
    tracking: Optional[str] = None
    tracking_url: Optional[str] = None

    @property
    def discounted_amount(self) -> Decimal:
        return self.cost + self.promo_total


@dataclass
class Order:
    """A checkout-ready order. `total` includes taxes and all adjustments."""

    number: str
    email: str
    currency: str
    total: Decimal
    line_items: list[LineItem] = field(default_factory=list)
    shipments: list[Shipment] = field(default_factory=list)
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    additional_tax_total: Decimal = ZERO
    included_tax_total: Decimal = ZERO
    order_promo_total: Decimal = ZERO  # Order-level promotions, negative

    @property
    def display_total(self) -> Money:
        return Money(self.total, self.currency)


@dataclass
class Store:
    name: str
    url: str  # May hold several newline-separated hosts; the first one wins
