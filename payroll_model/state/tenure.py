# payroll_model/state/tenure.py
"""Loyalty (hire-year) bands used for the cost-by-seniority breakdown."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

import numpy as np


class LoyaltyBand(Enum):
    """Enumeration of loyalty bands, oldest tenure first."""

    TEN_PLUS = "loyalty-10plus"
    FIVE_TO_TEN = "loyalty-5-10"
    TWO_TO_FIVE = "loyalty-2-5"
    UNDER_TWO = "loyalty-2less"


@dataclass(frozen=True)
class LoyaltyCutoff:
    band: LoyaltyBand
    label: str
    first_year: Optional[int]
    last_year: Optional[int]
    color: str

    def contains(self, year: float) -> bool:
        if self.first_year is not None and year < self.first_year:
            return False
        if self.last_year is not None and year > self.last_year:
            return False
        return True


# Inclusive hire-year ranges; None means open-ended on that side
LOYALTY_CUTOFFS: List[LoyaltyCutoff] = [
    LoyaltyCutoff(LoyaltyBand.TEN_PLUS, "≤ 2016 (10+ yrs)", None, 2016, "#064e3b"),
    LoyaltyCutoff(LoyaltyBand.FIVE_TO_TEN, "2017-2021 (5-10 yrs)", 2017, 2021, "#059669"),
    LoyaltyCutoff(LoyaltyBand.TWO_TO_FIVE, "2022-2024 (2-5 yrs)", 2022, 2024, "#10b981"),
    LoyaltyCutoff(LoyaltyBand.UNDER_TWO, "2025+ (< 2 yrs)", 2025, None, "#34d399"),
]

__all__ = [
    "LoyaltyBand",
    "LoyaltyCutoff",
    "LOYALTY_CUTOFFS",
    "loyalty_band_for_year",
]


def loyalty_band_for_year(start: Any) -> Optional[LoyaltyCutoff]:
    """
    Return the loyalty cutoff whose range holds hire year ``start``.

    The four inclusive ranges cover every whole year exactly once. Missing or
    non-finite years, and fractional years between two ranges, fall into no
    band.
    """
    try:
        year = float(start)
    except (TypeError, ValueError):
        return None
    if not np.isfinite(year):
        return None

    for cutoff in LOYALTY_CUTOFFS:
        if cutoff.contains(year):
            return cutoff
    return None
