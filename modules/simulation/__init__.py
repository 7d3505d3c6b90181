"""
Simulation Module

Pure, multi-jurisdiction real-estate simulation engine.

Features:
- Acquisition fees (notary / registration) per country
- Capital-gains tax with holding-period allowances
- Fixed-rate loan amortization
- Narrative summary and report tables

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from .models import (
    Country,
    OperationType,
    SimulationInput,
    SimulationRequest,
    SimulationResult,
    NotaryFeesBreakdown,
    CapitalGainBreakdown,
    LoanBreakdown,
    InvalidSimulationInputError,
)
from .engine import run_simulation

__all__ = [
    'Country',
    'OperationType',
    'SimulationInput',
    'SimulationRequest',
    'SimulationResult',
    'NotaryFeesBreakdown',
    'CapitalGainBreakdown',
    'LoanBreakdown',
    'InvalidSimulationInputError',
    'run_simulation',
]
