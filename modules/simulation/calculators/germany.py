"""
German Calculator (Grunderwerbsteuer + Spekulationssteuer)

Implements the rules for private real-estate transactions:
- 3.5% Grunderwerbsteuer, 1.2% notary, 0.1% disbursements, EUR 700 misc
- Gains taxed at 26.375% (25% + 5.5% Solidaritätszuschlag) when sold
  within the 10-year speculation period, tax-free afterwards

References:
- §23 EStG (private Veräußerungsgeschäfte)

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


@register_calculator("allemagne")
class GermanyCalculator(JurisdictionCalculator):
    """
    Calculator for Germany.

    Key Rules:
    - Speculation period of 10 years
    - No allowance, no deductible costs
    """

    REGISTRATION_TAX_RATE = 0.035
    NOTARY_EMOLUMENTS_RATE = 0.012
    MISC_FEES = 700.0

    SPECULATION_PERIOD_YEARS = 10
    CAPITAL_GAINS_TAX_RATE = 0.26375  # 25% + 5.5% Soli

    def get_jurisdiction_code(self) -> str:
        return "allemagne"

    def compute_capital_gain(self, simulation: SimulationInput, as_of: date) -> CapitalGainBreakdown:
        sale_price, purchase_price = self.require_prices(simulation)
        years = holding_period_years(simulation.acquisition_date, as_of)

        rate = self.CAPITAL_GAINS_TAX_RATE if years < self.SPECULATION_PERIOD_YEARS else 0.0
        return flat_rate_capital_gain(sale_price, purchase_price, years, rate)
