"""
Swiss Calculator (droits de mutation + impôt sur les gains immobiliers)

Both the transfer tax and the gains tax are cantonal:
- Transfer tax rate looked up per canton (2.5% when unknown or absent)
- Notary emoluments 0.5%, disbursements 0.1%, flat CHF 500 misc
- Gains tax rate per canton (6% when unlisted), reduced for long holdings:
  x0.75 beyond 10 years, x0.50 beyond 15, x0.25 beyond 25

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from modules.simulation.models import CapitalGainBreakdown, SimulationInput
from modules.simulation.calculators.base import (
    JurisdictionCalculator,
    flat_rate_capital_gain,
    holding_period_years,
    register_calculator,
)
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

TRANSFER_TAX_RATES: Mapping[str, float] = MappingProxyType({
    "Genève": 0.03,
    "Vaud": 0.033,
    "Zurich": 0.02,
    "Berne": 0.018,
    "Bâle-Ville": 0.025,
    "Bâle-Campagne": 0.02,
    "Lucerne": 0.015,
    "Saint-Gall": 0.015,
    "Argovie": 0.02,
    "Thurgovie": 0.015,
    "Tessin": 0.025,
    "Valais": 0.018,
    "Neuchâtel": 0.033,
    "Fribourg": 0.025,
    "Soleure": 0.022,
    "Schaffhouse": 0.02,
    "Zoug": 0.01,
    "Schwyz": 0.015,
    "Glaris": 0.015,
    "Appenzell": 0.015,
    "Grisons": 0.02,
    "Jura": 0.03,
    "Nidwald": 0.01,
    "Obwald": 0.012,
    "Uri": 0.012,
})
DEFAULT_TRANSFER_TAX_RATE = 0.025

GAINS_TAX_RATES: Mapping[str, float] = MappingProxyType({
    "Genève": 0.08,
    "Vaud": 0.07,
    "Zurich": 0.06,
    "Berne": 0.05,
    "Bâle-Ville": 0.06,
    "Tessin": 0.08,
    "Valais": 0.06,
    "Neuchâtel": 0.06,
    "Fribourg": 0.05,
    "Zoug": 0.03,
    "Schwyz": 0.04,
})
DEFAULT_GAINS_TAX_RATE = 0.06

# (held more than N years, multiplier), longest first
HOLDING_REDUCTIONS: Tuple[Tuple[int, float], ...] = (
    (25, 0.25),
    (15, 0.50),
    (10, 0.75),
)


def transfer_tax_rate(canton: Optional[str]) -> float:
    return TRANSFER_TAX_RATES.get(canton or "", DEFAULT_TRANSFER_TAX_RATE)


def gains_tax_rate(canton: Optional[str], years: int) -> float:
    """Cantonal gains tax rate after the holding-period reduction."""
    rate = GAINS_TAX_RATES.get(canton or "", DEFAULT_GAINS_TAX_RATE)
    for min_years, multiplier in HOLDING_REDUCTIONS:
        if years > min_years:
            return rate * multiplier
    return rate


@register_calculator("suisse")
class SwitzerlandCalculator(JurisdictionCalculator):
    """Calculator for Switzerland; every rate depends on the canton."""

    NOTARY_EMOLUMENTS_RATE = 0.005  # 0.5%
    MISC_FEES = 500.0

    def get_jurisdiction_code(self) -> str:
        return "suisse"

    def registration_tax_rate(self, simulation: SimulationInput) -> float:
        if simulation.canton and simulation.canton not in TRANSFER_TAX_RATES:
            logger.debug(f"Unknown canton '{simulation.canton}', using default transfer tax rate")
        return transfer_tax_rate(simulation.canton)

    def compute_capital_gain(self, simulation: SimulationInput, as_of: date) -> CapitalGainBreakdown:
        sale_price, purchase_price = self.require_prices(simulation)
        years = holding_period_years(simulation.acquisition_date, as_of)
        rate = gains_tax_rate(simulation.canton, years)

        return flat_rate_capital_gain(sale_price, purchase_price, years, rate)
