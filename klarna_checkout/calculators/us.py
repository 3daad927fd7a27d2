"""
US amount calculator.

US prices are quoted before sales tax. Order lines therefore carry no tax of
their own; the order's sales tax is submitted as one extra `sales_tax` line
and reported as order_tax_amount.
"""

from typing import Any

from klarna_checkout.calculators.base import Line, LineCalculator, OrderCalculator
from klarna_checkout.calculators.locales import MARKETS
from klarna_checkout.models.enums import OrderLineType
from klarna_checkout.models.order import LineItem, Order, to_cents


class TaxExclusiveLineCalculator(LineCalculator):
    def unit_price(self, line: Line) -> int:
        if isinstance(line, LineItem):
            return to_cents(line.price)
        return to_cents(line.cost)

    def total_amount(self, line: Line) -> int:
        return to_cents(line.discounted_amount)

    def tax_rate(self, line: Line) -> int:
        return 0

    def total_tax_amount(self, line: Line) -> int:
        return 0


class UsOrderCalculator(OrderCalculator):
    def __init__(self):
        self._lines = TaxExclusiveLineCalculator()

    @property
    def name(self) -> str:
        return "us"

    def locale(self, region: str) -> str:
        return MARKETS["us"]["locale"]

    @property
    def line_item_strategy(self) -> LineCalculator:
        return self._lines

    @property
    def shipment_strategy(self) -> LineCalculator:
        return self._lines

    def adjust_with(self, order: Order, payload: dict[str, Any]) -> dict[str, Any]:
        sales_tax = to_cents(order.additional_tax_total)
        order_lines = payload.setdefault("order_lines", [])

        if sales_tax:
            order_lines.append({
                "type": OrderLineType.SALES_TAX.value,
                "reference": "sales_tax",
                "name": "Sales Tax",
                "quantity": 1,
                "unit_price": sales_tax,
                "total_amount": sales_tax,
                "tax_rate": 0,
                "total_tax_amount": 0,
            })

        discount = self.discount_line(order)
        if discount:
            order_lines.append(discount)

        payload["order_tax_amount"] = sales_tax
        return payload
