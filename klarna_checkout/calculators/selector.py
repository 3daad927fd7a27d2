"""
Region calculator selection.

The set of calculators is closed: "us" gets tax-exclusive US pricing and every
other token falls through to the VAT-inclusive UK calculator, which also
covers the continental markets listed in calculators.locales.
"""

import logging

from klarna_checkout.calculators.base import OrderCalculator
from klarna_checkout.calculators.uk import UkOrderCalculator
from klarna_checkout.calculators.us import UsOrderCalculator
from klarna_checkout.models.enums import Region

logger = logging.getLogger("klarna_checkout.calculators")


def select_calculator(region: str, skip_personal_data: bool = False) -> OrderCalculator:
    """
    Select the amount calculator for a region token.

    Args:
        region: Region token, case-insensitive (e.g. "us", "UK", "de").
        skip_personal_data: Only honoured by the UK calculator.

    Raises:
        UnsupportedRegionError: If the token is empty.
    """
    variant = Region.from_token(region)

    if variant is Region.US:
        calculator: OrderCalculator = UsOrderCalculator()
    else:
        calculator = UkOrderCalculator(skip_personal_data)

    logger.debug("Region %r -> %s calculator", region, calculator.name)
    return calculator
