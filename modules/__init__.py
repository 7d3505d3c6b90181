"""
Modules Package

Modular Monolith Architecture - Business Logic Layer

Modules:
- simulation: Real-estate simulation engine (fees, capital gains, loans)

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['simulation']
