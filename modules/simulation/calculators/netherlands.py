"""
Dutch Calculator (overdrachtsbelasting + vermogenswinst)

- Transfer tax 6%, notary emoluments 0.8%, disbursements 0.1%, EUR 600 misc
- Capital gains: 30% within 2 years, 20% within 5 years, exempt afterwards

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from datetime import date

from modules.simulation.models import CapitalGainBreakdown, SimulationInput
from modules.simulation.calculators.base import (
    JurisdictionCalculator,
    flat_rate_capital_gain,
    holding_period_years,
    register_calculator,
)


@register_calculator("pays-bas")
class NetherlandsCalculator(JurisdictionCalculator):
    """Calculator for the Netherlands."""

    REGISTRATION_TAX_RATE = 0.06
    NOTARY_EMOLUMENTS_RATE = 0.008
    MISC_FEES = 600.0

    def get_jurisdiction_code(self) -> str:
        return "pays-bas"

    def capital_gain_rate(self, years: int) -> float:
        if years < 2:
            return 0.30
        elif years < 5:
            return 0.20
        return 0.0

    def compute_capital_gain(self, simulation: SimulationInput, as_of: date) -> CapitalGainBreakdown:
        sale_price, purchase_price = self.require_prices(simulation)
        years = holding_period_years(simulation.acquisition_date, as_of)

        return flat_rate_capital_gain(sale_price, purchase_price, years, self.capital_gain_rate(years))
