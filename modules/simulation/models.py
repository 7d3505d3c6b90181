"""
Simulation Data Models

Defines the data structures exchanged with the simulation engine:
- SimulationInput: lenient engine input (unknown countries pass through)
- SimulationRequest: validated boundary model for API-style callers
- NotaryFeesBreakdown / CapitalGainBreakdown / LoanBreakdown: per-section results
- SimulationResult: composite result with optional sections

Every monetary value is a Decimal rounded to 2 places. Optional result
sections are None when they were not computed, never a zero placeholder.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass, asdict
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from core.hashing import calculate_sha256
from core.money import optional_decimal


class InvalidSimulationInputError(ValueError):
    """Raised when a calculator is called with values it cannot compute on."""
    pass


class Country(str, Enum):
    """Supported jurisdictions (values are the wire identifiers)."""

    FRANCE = "france"
    SWITZERLAND = "suisse"
    BELGIUM = "belgique"
    LUXEMBOURG = "luxembourg"
    NETHERLANDS = "pays-bas"
    GERMANY = "allemagne"

    @property
    def label(self) -> str:
        """Display label used in summaries and reports."""
        return COUNTRY_LABELS[self.value]


COUNTRY_LABELS: Dict[str, str] = {
    "france": "France",
    "suisse": "Suisse",
    "belgique": "Belgique",
    "luxembourg": "Luxembourg",
    "pays-bas": "Pays-Bas",
    "allemagne": "Allemagne",
}


class OperationType(str, Enum):
    """Kind of transaction being simulated."""

    PURCHASE = "achat"
    SALE = "vente"
    PURCHASE_AND_SALE = "achat_vente"

    @property
    def label(self) -> str:
        return OPERATION_LABELS[self.value]


OPERATION_LABELS: Dict[str, str] = {
    "achat": "Achat immobilier",
    "vente": "Vente immobilière",
    "achat_vente": "Achat et vente",
}

_MONEY_FIELDS = (
    'purchase_price', 'sale_price', 'renovation_cost', 'loan_amount', 'loan_rate'
)


def _enum_value(v):
    return v.value if isinstance(v, Enum) else v


def _empty_to_none(v):
    return None if v == "" else v


class SimulationInput(BaseModel):
    """
    One transaction to simulate.

    This model is deliberately lenient: it does not restrict the country or
    operation type, and it does not check signs. Sections whose inputs are
    missing are skipped by the engine instead of raising. Use
    SimulationRequest when the values come from an untrusted source.

    Accepts both snake_case field names and the camelCase wire names
    (purchasePrice, operationType, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    country: str
    canton: Optional[str] = None
    city: str = ""
    operation_type: str

    purchase_price: Optional[Decimal] = None
    sale_price: Optional[Decimal] = None
    acquisition_date: Optional[date] = None
    renovation_cost: Optional[Decimal] = None

    loan_amount: Optional[Decimal] = None
    loan_rate: Optional[Decimal] = None  # annual percent, e.g. 3.5
    loan_duration: Optional[int] = None  # years

    @field_validator('country', 'operation_type', mode='before')
    @classmethod
    def unwrap_enum(cls, v):
        """Store enum members as their plain wire value."""
        return _enum_value(v)

    @field_validator(*_MONEY_FIELDS, mode='before')
    @classmethod
    def parse_money(cls, v):
        """Parse amounts through str() so floats keep their printed value."""
        return optional_decimal(v)

    @field_validator('acquisition_date', 'canton', mode='before')
    @classmethod
    def blank_is_missing(cls, v):
        return _empty_to_none(v)

    @property
    def includes_purchase(self) -> bool:
        return self.operation_type in (OperationType.PURCHASE.value, OperationType.PURCHASE_AND_SALE.value)

    @property
    def includes_sale(self) -> bool:
        return self.operation_type in (OperationType.SALE.value, OperationType.PURCHASE_AND_SALE.value)

    @property
    def has_loan_terms(self) -> bool:
        """True when amount and rate are given and the duration is positive (a 0% rate counts)."""
        return (
            bool(self.loan_amount)
            and self.loan_rate is not None
            and self.loan_duration is not None
            and self.loan_duration > 0
        )


class SimulationRequest(BaseModel):
    """
    Validated simulation request, as accepted at an API boundary.

    Raises pydantic.ValidationError for unknown countries or operation
    types, non-positive prices, negative renovation costs, loan rates
    outside [0, 20] and loan durations outside [1, 50] years.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Contact fields, not used by the engine
    full_name: Optional[str] = Field(default=None, min_length=2)
    email: Optional[str] = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    country: Country
    canton: Optional[str] = None
    city: str = Field(min_length=1)
    operation_type: OperationType

    purchase_price: Optional[Decimal] = Field(default=None, gt=0)
    sale_price: Optional[Decimal] = Field(default=None, gt=0)
    acquisition_date: Optional[date] = None
    renovation_cost: Optional[Decimal] = Field(default=None, ge=0)

    loan_amount: Optional[Decimal] = Field(default=None, gt=0)
    loan_rate: Optional[Decimal] = Field(default=None, ge=0, le=20)
    loan_duration: Optional[int] = Field(default=None, ge=1, le=50)

    @field_validator(*_MONEY_FIELDS, mode='before')
    @classmethod
    def parse_money(cls, v):
        return optional_decimal(v)

    @field_validator('acquisition_date', 'canton', mode='before')
    @classmethod
    def blank_is_missing(cls, v):
        return _empty_to_none(v)

    def to_input(self) -> SimulationInput:
        """Drop the contact fields and hand the rest to the engine model."""
        data = self.model_dump(exclude={'full_name', 'email'})
        return SimulationInput(**data)


@dataclass(frozen=True)
class NotaryFeesBreakdown:
    """Acquisition costs of a purchase."""

    total: Decimal
    effective_rate: Decimal  # percent of the purchase price
    registration_tax: Decimal
    notary_emoluments: Decimal
    disbursements: Decimal
    misc_fees: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CapitalGainBreakdown:
    """
    Capital-gains tax on a sale.

    The income/social split only carries meaning for France. Other
    jurisdictions report their whole tax as income_tax, with zero
    allowances, zero social tax and zero surtax.
    """

    gross_gain: Decimal
    deductible_expenses: Decimal
    net_gain: Decimal
    holding_period_years: int
    income_tax_allowance_percent: Decimal
    social_tax_allowance_percent: Decimal
    taxable_gain_income_tax: Decimal
    taxable_gain_social_tax: Decimal
    income_tax: Decimal
    social_tax: Decimal
    surtax: Decimal
    total_tax: Decimal
    net_proceeds: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LoanBreakdown:
    """Fixed-rate annuity loan. total_cost mirrors total_interest."""

    monthly_payment: Decimal
    total_interest: Decimal
    total_cost: Decimal
    total_repaid: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SimulationResult:
    """Composite result of one simulation run."""

    country: str
    country_label: str
    city: str
    operation_type: str
    summary: str
    disclaimer: str
    notary_fees: Optional[NotaryFeesBreakdown] = None
    capital_gain: Optional[CapitalGainBreakdown] = None
    loan: Optional[LoanBreakdown] = None
    total_investment: Optional[Decimal] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def fingerprint(self) -> str:
        """SHA256 of the canonical JSON form, stable across identical runs."""
        return calculate_sha256(self.to_dict())

    def preview(self) -> Dict[str, Any]:
        """Headline figures shown before a full report is purchased."""
        return {
            "summary": self.summary,
            "notary_fees_total": self.notary_fees.total if self.notary_fees else None,
            "capital_gain_tax": self.capital_gain.total_tax if self.capital_gain else None,
            "loan_monthly": self.loan.monthly_payment if self.loan else None,
            "total_investment": self.total_investment,
        }
