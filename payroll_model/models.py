# payroll_model/models.py
"""
Immutable record types shared by the aggregation engine and the view layer.

Every structure here is a frozen dataclass: derived views are recomputed,
never mutated in place, and frozen records can be compared and hashed when
used as cache keys.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from payroll_model.schema import Category


@dataclass(frozen=True)
class Employee:
    """One roster entry with current and proposed net salary."""

    category: str
    start: int
    ma: bool
    current_net: float
    target_net: float
    employee_id: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.category, Category):
            object.__setattr__(self, "category", self.category.value)

    @property
    def net_increase(self) -> float:
        return self.target_net - self.current_net

    def raise_cost_gross(self, bruto_factor: float) -> float:
        """
        Employer cost of moving this employee from current to target net.
        Pass the session factor, ``EngineConfig.bruto_factor``.
        """
        return (self.target_net - self.current_net) * bruto_factor


@dataclass(frozen=True)
class CategorySummary:
    category: str
    headcount: int = 0
    total_current_net: float = 0.0
    total_target_net: float = 0.0
    total_raise_cost_gross: float = 0.0
    average_raise_cost_gross: float = 0.0


@dataclass(frozen=True)
class StatsReport:
    """Sustainability verdict and per-category costs for one tuition increase."""

    tuition_increase_pct: float
    additional_revenue: float
    category_summaries: Tuple[CategorySummary, ...]
    total_raise_cost_gross: float
    net_profit: float
    is_sustainable: bool

    def summary_for(self, category: str) -> CategorySummary:
        """Summary for ``category``; an all-zero summary if it is not reported."""
        for summary in self.category_summaries:
            if summary.category == category:
                return summary
        return CategorySummary(category=category)

    def raise_cost_for(self, *categories: str) -> float:
        return sum(self.summary_for(c).total_raise_cost_gross for c in categories)


@dataclass(frozen=True)
class RosterTotals:
    headcount: int = 0
    total_current_net: float = 0.0
    total_target_net: float = 0.0
    total_net_increase: float = 0.0
    total_raise_cost_gross: float = 0.0


# Totals over the filtered table rows and over the whole roster share one shape
FilteredTotals = RosterTotals
GlobalTotals = RosterTotals


@dataclass(frozen=True)
class LoyaltyBucket:
    id: str
    label: str
    first_year: Optional[int]
    last_year: Optional[int]
    color: str
    headcount: int = 0
    total_raise_cost_gross: float = 0.0


@dataclass(frozen=True)
class WaterfallStep:
    id: str
    name: str
    value: float
    color: str


__all__ = [
    "Employee",
    "CategorySummary",
    "StatsReport",
    "RosterTotals",
    "FilteredTotals",
    "GlobalTotals",
    "LoyaltyBucket",
    "WaterfallStep",
]
