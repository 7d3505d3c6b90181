"""
Jurisdiction Calculator System

Provides country-specific acquisition-fee and capital-gains calculators.
Importing this package registers every supported jurisdiction.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from .base import (
    JurisdictionCalculator,
    UnsupportedJurisdictionError,
    find_calculator,
    get_calculator,
    list_available_jurisdictions,
)
from .france import FranceCalculator
from .switzerland import SwitzerlandCalculator
from .belgium import BelgiumCalculator
from .luxembourg import LuxembourgCalculator
from .netherlands import NetherlandsCalculator
from .germany import GermanyCalculator

__all__ = [
    "JurisdictionCalculator",
    "UnsupportedJurisdictionError",
    "FranceCalculator",
    "SwitzerlandCalculator",
    "BelgiumCalculator",
    "LuxembourgCalculator",
    "NetherlandsCalculator",
    "GermanyCalculator",
    "find_calculator",
    "get_calculator",
    "list_available_jurisdictions",
]
