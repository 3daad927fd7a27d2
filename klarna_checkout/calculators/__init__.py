from klarna_checkout.calculators.base import LineCalculator, OrderCalculator
from klarna_checkout.calculators.selector import select_calculator
from klarna_checkout.calculators.uk import UkOrderCalculator
from klarna_checkout.calculators.us import UsOrderCalculator

__all__ = ["LineCalculator", "OrderCalculator", "UkOrderCalculator", "UsOrderCalculator", "select_calculator"]
