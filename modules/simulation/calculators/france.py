"""
French Calculator (frais de notaire + plus-value immobilière)

Acquisition fees:
- Droits de mutation: 5.807% of the price
- Notary emoluments: regressive bracket schedule (marginal slices)
- Disbursements: 0.1% of the price
- Miscellaneous: EUR 400 + 0.1% of the price

Capital gains:
- Acquisition costs deducted at a flat 7.5% of the purchase price, plus works
- Income tax 19% after the holding-period allowance (exempt from year 22)
- Social levies 17.2% after a two-slope allowance (exempt from year 30)
- Surtax on income-tax bases above EUR 50,000 (highest threshold only)

References:
- Arrêté du 26 février 2016 (emolument schedule)
- CGI art. 150 U and following, art. 1609 nonies G (surtax)

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math
from datetime import date
from typing import Tuple

from core.money import round2, round_cents
from modules.simulation.models import CapitalGainBreakdown, SimulationInput
from modules.simulation.calculators.base import (
    JurisdictionCalculator,
    holding_period_years,
    register_calculator,
)
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

# (upper limit, rate)
EMOLUMENT_BRACKETS: Tuple[Tuple[float, float], ...] = (
    (6500.0, 0.03870),
    (17000.0, 0.01596),
    (60000.0, 0.01064),
    (math.inf, 0.00799),
)

# Checked top-down, first match wins. Rate applies to the whole base.
SURTAX_THRESHOLDS: Tuple[Tuple[float, float], ...] = (
    (260000.0, 0.06),
    (250000.0, 0.05),
    (200000.0, 0.04),
    (150000.0, 0.03),
    (100000.0, 0.02),
    (50000.0, 0.02),
)


def compute_notary_emoluments(price: float) -> float:
    """
    Apply the emolument brackets to the price.

    Each rate only applies to the slice of the price inside its bracket,
    so the result is continuous at the bracket limits. Slices are summed
    unrounded; the total is rounded once.
    """
    price = float(price)
    total = 0.0
    previous = 0.0

    for limit, rate in EMOLUMENT_BRACKETS:
        current = min(price, limit)
        if current > previous:
            total += (current - previous) * rate
            previous = current
        if price <= limit:
            break

    return round_cents(total)


def income_tax_allowance_percent(years: int) -> float:
    """6% per year held beyond the 5th; full exemption from year 22."""
    if years >= 22:
        return 100
    if years > 5:
        return (years - 5) * 6
    return 0


def social_tax_allowance_percent(years: int) -> float:
    """
    Allowance on social levies.

    1.65% per year for years 6-21, then 1.60% per year on top of a fixed
    9-point bonus for years 22-29, full exemption from year 30.
    """
    if years >= 30:
        return 100
    if years > 5:
        if years <= 21:
            return (years - 5) * 1.65
        return 16 * 1.65 + (years - 21) * 1.60 + 9
    return 0


def compute_surtax(taxable_gain_income_tax: float) -> float:
    for threshold, rate in SURTAX_THRESHOLDS:
        if taxable_gain_income_tax > threshold:
            return round_cents(taxable_gain_income_tax * rate)
    return 0.0


@register_calculator("france")
class FranceCalculator(JurisdictionCalculator):
    """
    Calculator for France.

    Key Rules:
    - Only jurisdiction with deductible expenses (flat 7.5% + renovation)
    - Missing acquisition date means the property was bought today
    - Separate allowances and bases for income tax and social levies
    """

    REGISTRATION_TAX_RATE = 0.05807  # 5.807%
    MISC_FEES_BASE = 400
    MISC_FEES_RATE = 0.001

    ACQUISITION_COSTS_RATE = 0.075  # forfait 7.5%
    INCOME_TAX_RATE = 0.19
    SOCIAL_TAX_RATE = 0.172

    def get_jurisdiction_code(self) -> str:
        return "france"

    def notary_emoluments(self, price: float) -> float:
        return compute_notary_emoluments(price)

    def misc_fees(self, price: float) -> float:
        return round_cents(self.MISC_FEES_BASE + price * self.MISC_FEES_RATE)

    def compute_capital_gain(self, simulation: SimulationInput, as_of: date) -> CapitalGainBreakdown:
        """
        Calculate French capital-gains tax (IR + prélèvements sociaux + surtaxe).

        Args:
            simulation: Transaction with both prices; renovation_cost optional
            as_of: Sale date; also stands in for a missing acquisition date

        Returns:
            CapitalGainBreakdown with the full income/social split
        """
        sale_price, purchase_price = self.require_prices(simulation)
        renovation_cost = float(simulation.renovation_cost or 0)

        years = holding_period_years(simulation.acquisition_date or as_of, as_of)

        acquisition_costs = round_cents(purchase_price * self.ACQUISITION_COSTS_RATE)
        deductible_expenses = round_cents(acquisition_costs + renovation_cost)
        gross_gain = round_cents(sale_price - purchase_price)
        net_gain = round_cents(gross_gain - deductible_expenses)

        ir_allowance = income_tax_allowance_percent(years)
        ps_allowance = social_tax_allowance_percent(years)

        taxable_gain_income_tax = round_cents(max(0.0, net_gain * (1 - ir_allowance / 100)))
        taxable_gain_social_tax = round_cents(max(0.0, net_gain * (1 - ps_allowance / 100)))

        income_tax = round_cents(taxable_gain_income_tax * self.INCOME_TAX_RATE)
        social_tax = round_cents(taxable_gain_social_tax * self.SOCIAL_TAX_RATE)
        surtax = compute_surtax(taxable_gain_income_tax)

        total_tax = round_cents(income_tax + social_tax + surtax)
        net_proceeds = round_cents(sale_price - total_tax)

        logger.debug(
            f"France capital gain: {years}y held, net €{net_gain:,.2f}, "
            f"allowances IR {ir_allowance:g}% / PS {ps_allowance:g}%, tax €{total_tax:,.2f}"
        )

        return CapitalGainBreakdown(
            gross_gain=round2(gross_gain),
            deductible_expenses=round2(deductible_expenses),
            net_gain=round2(net_gain),
            holding_period_years=years,
            income_tax_allowance_percent=round2(ir_allowance),
            social_tax_allowance_percent=round2(ps_allowance),
            taxable_gain_income_tax=round2(taxable_gain_income_tax),
            taxable_gain_social_tax=round2(taxable_gain_social_tax),
            income_tax=round2(income_tax),
            social_tax=round2(social_tax),
            surtax=round2(surtax),
            total_tax=round2(total_tax),
            net_proceeds=round2(net_proceeds),
        )
