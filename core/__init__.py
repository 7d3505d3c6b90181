"""
Core Kernel Module

Foundational helpers shared by the simulation modules.

Components:
- money: Decimal coercion and step-wise rounding (round2)
- hashing: Canonical JSON + SHA256 fingerprints of results
- settings: Environment-driven configuration

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['money', 'hashing', 'settings']
