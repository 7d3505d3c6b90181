"""
Money Helpers - Amount Parsing and Cent Rounding

Calculators work on binary doubles and round to the cent after every step
with round_cents(), which reproduces the published figures exactly:

    round_cents(x) == Math.round(x * 100) / 100

i.e. the product is taken in double precision first and halves go toward
+infinity. round2() turns such a value into the 2-place Decimal stored in
the result objects.

Example:
    >>> round2(102500 * 0.05807)    # 5952.175 exactly, 5952.1749... as a double
    Decimal('5952.17')

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

CENT = Decimal("0.01")

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Parse an amount into a Decimal without inheriting float noise.

    Floats go through str() first, so 0.1 becomes Decimal("0.1") and not
    Decimal("0.1000000000000000055511151231257827...").

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value!r}") from None

    if not result.is_finite():
        raise ValueError(f"Amount must be a finite number, got {value!r}")
    return result


def optional_decimal(value: Any) -> Optional[Decimal]:
    """Like to_decimal() but passes None (and empty strings) through."""
    if value is None or value == "":
        return None
    return to_decimal(value)


def round_half_up(x: float) -> int:
    """Nearest integer, halves toward +infinity (-2.5 -> -2, 2.5 -> 3)."""
    whole = math.floor(x)
    if x - whole >= 0.5:
        whole += 1
    return whole


def round_cents(value: Number) -> float:
    """Round a double to the cent the way the step-wise calculations do."""
    return round_half_up(float(value) * 100) / 100


def round2(value: Number) -> Decimal:
    """
    Round to the cent and return a 2-place Decimal.

    Example:
        >>> round2(17421.000000000004)
        Decimal('17421.00')
    """
    return Decimal(repr(round_cents(value))).quantize(CENT)
