"""
UK (and every other VAT market) amount calculator.

Prices already contain VAT, so each line reports its own tax rate and tax
amount and order_tax_amount is the sum over all lines. Merchants that must
not forward customer data can set skip_personal_data to drop the address
blocks from the payload.
"""

from typing import Any

from klarna_checkout.calculators.base import Line, LineCalculator, OrderCalculator, klarna_tax_rate
from klarna_checkout.calculators.locales import market_for
from klarna_checkout.models.order import LineItem, Order, to_cents

PERSONAL_DATA_KEYS = ("billing_address", "shipping_address")


class TaxInclusiveLineCalculator(LineCalculator):
    def unit_price(self, line: Line) -> int:
        if isinstance(line, LineItem):
            return to_cents(line.price)
        return to_cents(line.cost)

    def total_amount(self, line: Line) -> int:
        return to_cents(line.discounted_amount + line.additional_tax_total)

    def tax_rate(self, line: Line) -> int:
        return klarna_tax_rate(line.tax_rate)

    def total_tax_amount(self, line: Line) -> int:
        return to_cents(line.included_tax_total + line.additional_tax_total)


class UkOrderCalculator(OrderCalculator):
    def __init__(self, skip_personal_data: bool = False):
        self.skip_personal_data = bool(skip_personal_data)
        self._lines = TaxInclusiveLineCalculator()

    @property
    def name(self) -> str:
        return "uk"

    def locale(self, region: str) -> str:
        return market_for(region)["locale"]

    @property
    def line_item_strategy(self) -> LineCalculator:
        return self._lines

    @property
    def shipment_strategy(self) -> LineCalculator:
        return self._lines

    def adjust_with(self, order: Order, payload: dict[str, Any]) -> dict[str, Any]:
        order_lines = payload.setdefault("order_lines", [])

        discount = self.discount_line(order)
        if discount:
            order_lines.append(discount)

        payload["order_tax_amount"] = sum(line.get("total_tax_amount", 0) for line in order_lines)

        if self.skip_personal_data:
            for key in PERSONAL_DATA_KEYS:
                payload.pop(key, None)

        return payload
