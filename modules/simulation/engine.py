"""
Simulation Engine - Orchestrator

Turns one SimulationInput into a SimulationResult:
1. Resolves the jurisdiction calculator from the registry
2. Runs the acquisition-fee and capital-gain calculators the operation needs
3. Runs the loan calculator whenever loan terms are given
4. Derives the total investment and the narrative summary

The engine is a pure function of its input and the as-of date. Missing
inputs never raise: the matching section is simply left out of the result.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from datetime import date
from typing import Optional, Union, Dict, Any

from core.money import round2
from modules.simulation.calculators import find_calculator
from modules.simulation.loan import compute_loan
from modules.simulation.models import SimulationInput, SimulationResult
from modules.simulation.summary import DISCLAIMER, build_summary
from utils.logging_config import get_perf_logger, setup_logger, simulation_context

logger = setup_logger(__name__)


def run_simulation(
    simulation: Union[SimulationInput, Dict[str, Any]],
    as_of: Optional[date] = None
) -> SimulationResult:
    """
    Run a full simulation.

    Args:
        simulation: Transaction description (model or plain dict with
            snake_case or camelCase keys)
        as_of: Date treated as "today" for holding periods. Defaults to
            date.today(); pass a fixed date for reproducible results

    Returns:
        SimulationResult whose notary_fees / capital_gain / loan /
        total_investment are None when not computed
    """
    if not isinstance(simulation, SimulationInput):
        simulation = SimulationInput.model_validate(simulation)
    if as_of is None:
        as_of = date.today()

    context = simulation_context(simulation.country, simulation.operation_type)
    operation = f"run_simulation[{simulation.country}/{simulation.operation_type}]"

    with get_perf_logger(logger, operation, extra=context):
        calculator = find_calculator(simulation.country)
        if calculator is None:
            logger.info(
                f"No calculator for country '{simulation.country}', skipping fees and capital gain",
                extra=context,
            )

        country_label = calculator.get_jurisdiction_name() if calculator else simulation.country

        notary_fees = None
        if simulation.includes_purchase and simulation.purchase_price:
            if calculator:
                notary_fees = calculator.compute_notary_fees(simulation)
        elif simulation.includes_purchase:
            logger.debug("Purchase without price, notary fees skipped", extra=context)

        capital_gain = None
        if simulation.includes_sale and simulation.sale_price and simulation.purchase_price:
            if calculator:
                capital_gain = calculator.compute_capital_gain(simulation, as_of)
        elif simulation.includes_sale:
            logger.debug("Sale without both prices, capital gain skipped", extra=context)

        loan = None
        if simulation.has_loan_terms:
            loan = compute_loan(simulation.loan_amount, simulation.loan_rate, simulation.loan_duration)

        total_investment = None
        if simulation.includes_purchase and simulation.purchase_price:
            total = float(simulation.purchase_price)
            if notary_fees:
                total += float(notary_fees.total)
            if loan:
                total += float(loan.total_interest)
            total_investment = round2(total)

        summary = build_summary(
            city=simulation.city,
            country_label=country_label,
            notary_fees=notary_fees,
            capital_gain=capital_gain,
            loan=loan,
            total_investment=total_investment,
        )

    return SimulationResult(
        country=simulation.country,
        country_label=country_label,
        city=simulation.city,
        operation_type=simulation.operation_type,
        summary=summary,
        disclaimer=DISCLAIMER,
        notary_fees=notary_fees,
        capital_gain=capital_gain,
        loan=loan,
        total_investment=total_investment,
    )
