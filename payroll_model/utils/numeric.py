# payroll_model/utils/numeric.py
"""
Finite-value helpers used at every aggregation site.

Any sum, ratio or rounded amount that would come out as NaN or infinite is
replaced with 0.0, so report consumers can rely on plain finite floats.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# Standard quantization unit for money
TWO_PLACES = Decimal("0.01")

# Every float at or above 2**53 is a whole number
_INTEGRAL_FLOAT_LIMIT = 2.0 ** 53


def finite_or_zero(value: Any) -> float:
    """Return ``value`` as a float, or 0.0 if it is missing, NaN or infinite."""
    try:
        as_float = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not np.isfinite(as_float):
        return 0.0
    return as_float


def safe_sum(values: Union[pd.Series, Iterable[Any]]) -> float:
    """
    Sum ``values`` without skipping missing entries, then zero a non-finite total.

    A single NaN (or non-numeric entry) poisons the whole sum, exactly as a
    plain fold would; the poisoned total is then replaced with 0.0.
    """
    if not isinstance(values, pd.Series):
        values = pd.Series(list(values), dtype=object)
    numeric = pd.to_numeric(values, errors="coerce")
    if numeric.empty:
        return 0.0
    return finite_or_zero(numeric.sum(skipna=False))


def safe_divide(numerator: Any, denominator: Any) -> float:
    """Divide, returning 0.0 for a zero denominator or a non-finite quotient."""
    num = finite_or_zero(numerator)
    den = finite_or_zero(denominator)
    if den == 0.0:
        return 0.0
    return finite_or_zero(num / den)


def round_money(value: Any, places: Decimal = TWO_PLACES) -> float:
    """
    Round the exact binary value to two places with ROUND_HALF_UP, so 1.005
    (stored as 1.00499...) rounds down. Non-finite input rounds to 0.0.
    """
    as_float = finite_or_zero(value)
    # Floats this large have no fractional part, and quantizing them would
    # overflow the decimal context precision
    if abs(as_float) >= _INTEGRAL_FLOAT_LIMIT:
        return as_float
    return float(Decimal(as_float).quantize(places, rounding=ROUND_HALF_UP))


__all__ = ["finite_or_zero", "safe_sum", "safe_divide", "round_money", "TWO_PLACES"]
