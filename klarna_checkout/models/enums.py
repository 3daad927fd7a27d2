"""Enumerations for the checkout domain model."""

from enum import Enum
from typing import Optional


class UnsupportedRegionError(ValueError):
    """Raised when no region token is given at all."""


class Region(str, Enum):
    """Amount calculation regions. Closed: everything that is not US is UK."""

    US = "us"
    UK = "uk"

    @classmethod
    def from_token(cls, token: Optional[str]) -> "Region":
        normalized = (token or "").strip().lower()
        if not normalized:
            raise UnsupportedRegionError("Region token is required")
        if normalized == cls.US.value:
            return cls.US
        # Catch-all: every other market is priced VAT-inclusive
        return cls.UK


class OrderLineType(str, Enum):
    """Klarna order line types."""

    PHYSICAL = "physical"
    SHIPPING_FEE = "shipping_fee"
    SALES_TAX = "sales_tax"
    DISCOUNT = "discount"


class PlacementStatus(str, Enum):
    """Lifecycle states for an order placement attempt."""

    PENDING = "pending"
    PLACED = "placed"
    FAILED = "failed"
