"""
Luxembourg Calculator (droits d'enregistrement + plus-value de cession)

- Registration duty 7%, notary emoluments 1%, disbursements 0.1%, EUR 600 misc
- Speculative gain (held < 2 years): 42%, no allowance
- Long-term gain (held >= 2 years): half rate (21%) AND a EUR 50,000 allowance

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


@register_calculator("luxembourg")
class LuxembourgCalculator(JurisdictionCalculator):
    """Calculator for Luxembourg."""

    REGISTRATION_TAX_RATE = 0.07
    NOTARY_EMOLUMENTS_RATE = 0.01
    MISC_FEES = 600.0

    LONG_TERM_YEARS = 2
    LONG_TERM_RATE = 0.21
    SPECULATIVE_RATE = 0.42
    LONG_TERM_ALLOWANCE = 50000.0

    def get_jurisdiction_code(self) -> str:
        return "luxembourg"

    def compute_capital_gain(self, simulation: SimulationInput, as_of: date) -> CapitalGainBreakdown:
        sale_price, purchase_price = self.require_prices(simulation)
        years = holding_period_years(simulation.acquisition_date, as_of)

        if years >= self.LONG_TERM_YEARS:
            rate, allowance = self.LONG_TERM_RATE, self.LONG_TERM_ALLOWANCE
        else:
            rate, allowance = self.SPECULATIVE_RATE, 0.0

        return flat_rate_capital_gain(sale_price, purchase_price, years, rate, allowance=allowance)
