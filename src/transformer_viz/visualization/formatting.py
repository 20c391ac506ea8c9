"""String formatting helpers for displayed numbers.

Ties round half away from zero (``0.125 -> "0.13"``), matching
JavaScript's ``toFixed`` rather than Python's round-half-even ``:.Nf``.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from transformer_viz.config import DEFAULT_NUMBER_DECIMALS, DEFAULT_PERCENT_DECIMALS
from transformer_viz.errors import InvalidInputError


def _check_decimals(decimals: int) -> int:
    if decimals < 0:
        raise InvalidInputError(f"decimals must be >= 0, got {decimals}")
    return int(decimals)


def _to_fixed(value: float, decimals: int) -> str:
    decimals = _check_decimals(decimals)
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(f"Cannot format non-finite value {value}")

    # + 0.0 turns -0.0 into 0.0 so zero never renders as "-0.000"
    exact = Decimal(value + 0.0)
    with localcontext() as ctx:
        # Enough digits for any finite float at the requested precision
        ctx.prec = 400 + decimals
        rounded = exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def format_percent(value: float, decimals: int = DEFAULT_PERCENT_DECIMALS) -> str:
    """Format a fraction as a percentage, e.g. ``0.42 -> "42.0%"``."""
    return f"{_to_fixed(float(value) * 100, decimals)}%"


def format_number(value: float, decimals: int = DEFAULT_NUMBER_DECIMALS) -> str:
    """Format a number with a fixed number of decimal places."""
    return _to_fixed(value, decimals)
