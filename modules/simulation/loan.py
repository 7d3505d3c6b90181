"""
Loan Amortization Calculator

Fixed-rate annuity (mensualités constantes), independent of the country:

    M = P * r(1+r)^n / ((1+r)^n - 1)

with r the monthly rate (annual percent / 100 / 12) and n the number of
monthly payments.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math

from core.money import Number, round2, round_cents
from modules.simulation.models import InvalidSimulationInputError, LoanBreakdown
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


def compute_monthly_payment(principal: Number, annual_rate_percent: Number, months: int) -> float:
    """
    Unrounded annuity payment.

    A 0% rate has no annuity formula (the denominator vanishes); the loan
    is then repaid in equal principal-only installments.
    """
    principal = float(principal)
    monthly_rate = float(annual_rate_percent) / 100 / 12

    if monthly_rate == 0:
        return principal / months

    growth = math.pow(1 + monthly_rate, months)
    return principal * (monthly_rate * growth) / (growth - 1)


def compute_loan(amount: Number, rate: Number, duration: int) -> LoanBreakdown:
    """
    Calculate the repayment profile of a fixed-rate loan.

    Args:
        amount: Borrowed principal
        rate: Annual interest rate in percent (3.5 means 3.5%)
        duration: Duration in years

    Returns:
        LoanBreakdown; total_cost equals total_interest

    Raises:
        InvalidSimulationInputError: If duration is not a positive number of years
    """
    if duration is None or duration <= 0:
        raise InvalidSimulationInputError(f"Loan duration must be at least one year, got {duration}")

    principal = float(amount)
    months = int(duration) * 12

    monthly_payment = round_cents(compute_monthly_payment(principal, rate, months))
    total_repaid = round_cents(monthly_payment * months)
    total_interest = round_cents(total_repaid - principal)

    logger.debug(
        f"Loan €{principal:,.2f} @ {rate}% over {duration}y: "
        f"€{monthly_payment:,.2f}/month, interest €{total_interest:,.2f}"
    )

    return LoanBreakdown(
        monthly_payment=round2(monthly_payment),
        total_interest=round2(total_interest),
        total_cost=round2(total_interest),
        total_repaid=round2(total_repaid),
    )
