"""
Abstract Base Class for Jurisdiction Calculators

Defines the interface that all country-specific calculators must implement.
Each calculator turns a SimulationInput into:
- a NotaryFeesBreakdown (acquisition side)
- a CapitalGainBreakdown (sale side)

Arithmetic runs on floats with round_cents() after every step; amounts are
converted to 2-place Decimals only when the breakdown is built.

Calculators register themselves under their country identifier, so adding a
jurisdiction means adding one module; the engine never changes.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math
from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List, Optional, Tuple, Type

from core.money import round2, round_cents
from modules.simulation.models import (
    CapitalGainBreakdown,
    Country,
    InvalidSimulationInputError,
    NotaryFeesBreakdown,
    SimulationInput,
)

DAYS_PER_YEAR = 365.25


class UnsupportedJurisdictionError(ValueError):
    """Raised when no calculator is registered for a country."""
    pass


def holding_period_years(acquisition_date: Optional[date], as_of: date) -> int:
    """
    Whole years between acquisition and the as-of date.

    Uses 365.25-day years and rounds down. A missing acquisition date
    counts as zero years.
    """
    if acquisition_date is None:
        return 0
    return math.floor((as_of - acquisition_date).days / DAYS_PER_YEAR)


def assemble_notary_fees(
    price: float,
    registration_tax: float,
    notary_emoluments: float,
    disbursements: float,
    misc_fees: float
) -> NotaryFeesBreakdown:
    """Sum the rounded fee components and derive the effective rate (percent of price)."""
    total = round_cents(registration_tax + notary_emoluments + disbursements + misc_fees)
    effective_rate = round_cents(total / price * 100)

    return NotaryFeesBreakdown(
        total=round2(total),
        effective_rate=round2(effective_rate),
        registration_tax=round2(registration_tax),
        notary_emoluments=round2(notary_emoluments),
        disbursements=round2(disbursements),
        misc_fees=round2(misc_fees),
    )


def flat_rate_capital_gain(
    sale_price: float,
    purchase_price: float,
    years: int,
    tax_rate: float,
    allowance: Optional[float] = None
) -> CapitalGainBreakdown:
    """
    Capital gain taxed at a single rate, with an optional flat allowance.

    Used by every jurisdiction except France. No expenses are deductible,
    so the net gain equals the gross gain. The whole tax is reported as
    income tax.

    Without an allowance the reported taxable base is the raw net gain
    (negative for a loss). With one, even a zero allowance, it is the
    floored gain after the allowance.
    """
    gross_gain = round_cents(sale_price - purchase_price)
    net_gain = gross_gain

    if allowance is not None:
        taxable_gain = max(0.0, net_gain - allowance)
        reported_taxable = taxable_gain
    else:
        taxable_gain = max(0.0, net_gain)
        reported_taxable = net_gain

    total_tax = round_cents(taxable_gain * tax_rate)
    net_proceeds = round_cents(sale_price - total_tax)

    return CapitalGainBreakdown(
        gross_gain=round2(gross_gain),
        deductible_expenses=round2(0),
        net_gain=round2(net_gain),
        holding_period_years=years,
        income_tax_allowance_percent=round2(0),
        social_tax_allowance_percent=round2(0),
        taxable_gain_income_tax=round2(reported_taxable),
        taxable_gain_social_tax=round2(0),
        income_tax=round2(total_tax),
        social_tax=round2(0),
        surtax=round2(0),
        total_tax=round2(total_tax),
        net_proceeds=round2(net_proceeds),
    )


class JurisdictionCalculator(ABC):
    """
    Abstract base class for jurisdiction-specific calculators.

    Fee calculation is table-driven: subclasses set the rate constants and
    override the hooks only where the jurisdiction deviates from
    "price x rate" (French emolument brackets, Swiss canton rates).
    """

    REGISTRATION_TAX_RATE: float = 0.0
    NOTARY_EMOLUMENTS_RATE: float = 0.0
    DISBURSEMENTS_RATE: float = 0.001  # 0.1%
    MISC_FEES: float = 0.0

    @abstractmethod
    def get_jurisdiction_code(self) -> str:
        """Return the country identifier (e.g. "belgique")."""
        pass

    @abstractmethod
    def compute_capital_gain(self, simulation: SimulationInput, as_of: date) -> CapitalGainBreakdown:
        """
        Calculate the capital-gains tax of a sale.

        Args:
            simulation: Transaction with sale_price and purchase_price set
            as_of: Date the sale is assumed to happen (usually today)

        Returns:
            CapitalGainBreakdown
        """
        pass

    def get_jurisdiction_name(self) -> str:
        """Return the display label (e.g. "Belgique")."""
        return Country(self.get_jurisdiction_code()).label

    def registration_tax_rate(self, simulation: SimulationInput) -> float:
        return self.REGISTRATION_TAX_RATE

    def notary_emoluments(self, price: float) -> float:
        return round_cents(price * self.NOTARY_EMOLUMENTS_RATE)

    def misc_fees(self, price: float) -> float:
        return round_cents(self.MISC_FEES)

    def compute_notary_fees(self, simulation: SimulationInput) -> NotaryFeesBreakdown:
        """
        Calculate the acquisition costs of a purchase.

        Raises:
            InvalidSimulationInputError: If the purchase price is missing or
                zero (the effective rate would divide by zero)
        """
        if not simulation.purchase_price:
            raise InvalidSimulationInputError(
                f"{self.get_jurisdiction_name()}: notary fees need a non-zero purchase price"
            )
        price = float(simulation.purchase_price)

        registration_tax = round_cents(price * self.registration_tax_rate(simulation))
        notary_emoluments = self.notary_emoluments(price)
        disbursements = round_cents(price * self.DISBURSEMENTS_RATE)
        misc_fees = self.misc_fees(price)

        return assemble_notary_fees(price, registration_tax, notary_emoluments, disbursements, misc_fees)

    def require_prices(self, simulation: SimulationInput) -> Tuple[float, float]:
        """Return (sale_price, purchase_price) or raise if either is missing."""
        if simulation.sale_price is None or simulation.purchase_price is None:
            raise InvalidSimulationInputError(
                f"{self.get_jurisdiction_name()}: capital gain needs both sale and purchase prices"
            )
        return float(simulation.sale_price), float(simulation.purchase_price)


# Registry of available calculators
_CALCULATOR_REGISTRY: Dict[str, Type[JurisdictionCalculator]] = {}


def register_calculator(country_code: str):
    """
    Decorator to register a jurisdiction calculator class.

    Usage:
        @register_calculator("belgique")
        class BelgiumCalculator(JurisdictionCalculator):
            ...
    """
    def decorator(cls: Type[JurisdictionCalculator]):
        _CALCULATOR_REGISTRY[country_code.lower()] = cls
        return cls
    return decorator


def find_calculator(country_code: Optional[str]) -> Optional[JurisdictionCalculator]:
    """Return a calculator instance, or None when the country is not supported."""
    if not country_code:
        return None
    calculator_class = _CALCULATOR_REGISTRY.get(country_code.strip().lower())
    return calculator_class() if calculator_class else None


def get_calculator(country_code: str) -> JurisdictionCalculator:
    """
    Factory method to get a jurisdiction calculator instance.

    Args:
        country_code: Country identifier (e.g. "france", "pays-bas")

    Returns:
        Instance of the appropriate JurisdictionCalculator subclass

    Raises:
        UnsupportedJurisdictionError: If the country is not supported
    """
    calculator = find_calculator(country_code)

    if calculator is None:
        available = ", ".join(list_available_jurisdictions())
        raise UnsupportedJurisdictionError(
            f"Calculator for '{country_code}' not found. "
            f"Available: {available}"
        )

    return calculator


def list_available_jurisdictions() -> List[str]:
    """
    Get list of all supported jurisdictions.

    Returns:
        Sorted country identifiers (e.g. ["allemagne", "belgique", ...])
    """
    return sorted(_CALCULATOR_REGISTRY.keys())
