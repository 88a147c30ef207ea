# payroll_model/reporting/views.py
"""
Pure derivations of the presentation views from the roster, the filter
selections and the statistics report.

None of these functions keep state; ``payroll_model.reporting.session``
wraps them in a dependency-scoped cache.
"""

import logging
from typing import Iterable, Optional, Tuple, Union

from payroll_model.config.models import DEFAULT_CONFIG, EngineConfig
from payroll_model.engines.stats import roster_to_frame
from payroll_model.models import (
    Employee,
    FilteredTotals,
    GlobalTotals,
    LoyaltyBucket,
    RosterTotals,
    StatsReport,
    WaterfallStep,
)
from payroll_model.schema import (
    EMP_CURRENT_NET,
    EMP_RAISE_COST_GROSS,
    EMP_START_YEAR,
    EMP_TARGET_NET,
    HIRE_YEAR_PIVOT,
    Category,
    CategoryFilter,
    DegreeFilter,
    HireYearFilter,
)
from payroll_model.state.tenure import LOYALTY_CUTOFFS, loyalty_band_for_year
from payroll_model.utils.numeric import finite_or_zero, round_money, safe_sum

logger = logging.getLogger(__name__)

LOYALTY_BAND_COL = "loyalty_band"

COLOR_REVENUE = "#10B981"
COLOR_MANAGEMENT = "#0f172a"
COLOR_EDUCATORS = "#334155"
COLOR_AUXILIARY = "#64748b"
COLOR_SURPLUS = "#10B981"
COLOR_DEFICIT = "#EF4444"

_CD = {Category.SUPPORT.value, Category.AUXILIARY.value}
_AB = {Category.MANAGEMENT.value, Category.EDUCATORS.value}


def _passes_category(employee: Employee, category_filter: CategoryFilter) -> bool:
    if category_filter is CategoryFilter.CD:
        return employee.category in _CD
    if category_filter is CategoryFilter.AB:
        return employee.category in _AB
    return True


def _passes_degree(employee: Employee, degree_filter: DegreeFilter) -> bool:
    if degree_filter is DegreeFilter.MA_ONLY:
        return bool(employee.ma)
    if degree_filter is DegreeFilter.NO_MA:
        return not employee.ma
    return True


def _passes_hire_year(employee: Employee, hire_year_filter: HireYearFilter) -> bool:
    # Hires from exactly the pivot year pass neither BEFORE nor AFTER
    if hire_year_filter is HireYearFilter.BEFORE_2020:
        return employee.start < HIRE_YEAR_PIVOT
    if hire_year_filter is HireYearFilter.AFTER_2020:
        return employee.start > HIRE_YEAR_PIVOT
    return True


def visible_roster(
    roster: Iterable[Employee],
    category_filter: Union[CategoryFilter, str] = CategoryFilter.ALL,
    degree_filter: Union[DegreeFilter, str] = DegreeFilter.ALL,
    hire_year_filter: Union[HireYearFilter, str] = HireYearFilter.ALL,
) -> Tuple[Employee, ...]:
    """
    Employees passing all three table filters, in roster order.

    Filters accept their enum members or string values ("ALL", "CD", ...);
    an unknown string raises ValueError.
    """
    category_filter = CategoryFilter(category_filter)
    degree_filter = DegreeFilter(degree_filter)
    hire_year_filter = HireYearFilter(hire_year_filter)

    return tuple(
        e
        for e in roster
        if _passes_category(e, category_filter)
        and _passes_degree(e, degree_filter)
        and _passes_hire_year(e, hire_year_filter)
    )


def _roster_totals(roster: Iterable[Employee], config: EngineConfig) -> RosterTotals:
    df = roster_to_frame(roster, config.bruto_factor)
    # Unguarded sums first so a poisoned total also zeroes the net increase
    current = df[EMP_CURRENT_NET].sum(skipna=False)
    target = df[EMP_TARGET_NET].sum(skipna=False)
    return RosterTotals(
        headcount=len(df),
        total_current_net=finite_or_zero(current),
        total_target_net=finite_or_zero(target),
        total_net_increase=finite_or_zero(target - current),
        total_raise_cost_gross=safe_sum(df[EMP_RAISE_COST_GROSS]),
    )


def filtered_totals(
    visible: Iterable[Employee], config: Optional[EngineConfig] = None
) -> FilteredTotals:
    """Sums over the rows currently shown in the table."""
    return _roster_totals(visible, config or DEFAULT_CONFIG)


def global_totals(
    roster: Iterable[Employee], config: Optional[EngineConfig] = None
) -> GlobalTotals:
    """Sums over the entire roster, independent of the table filters."""
    return _roster_totals(roster, config or DEFAULT_CONFIG)


def _band_id(year) -> Optional[str]:
    cutoff = loyalty_band_for_year(year)
    return cutoff.band.value if cutoff is not None else None


def loyalty_buckets(
    roster: Iterable[Employee], config: Optional[EngineConfig] = None
) -> Tuple[LoyaltyBucket, ...]:
    """
    Gross raise cost per loyalty band over the full roster, oldest band first.
    Amounts are rounded to two decimals.
    """
    config = config or DEFAULT_CONFIG
    df = roster_to_frame(roster, config.bruto_factor)
    df[LOYALTY_BAND_COL] = df[EMP_START_YEAR].map(_band_id)

    buckets = []
    for cutoff in LOYALTY_CUTOFFS:
        members = df[df[LOYALTY_BAND_COL] == cutoff.band.value]
        buckets.append(
            LoyaltyBucket(
                id=cutoff.band.value,
                label=cutoff.label,
                first_year=cutoff.first_year,
                last_year=cutoff.last_year,
                color=cutoff.color,
                headcount=len(members),
                total_raise_cost_gross=round_money(safe_sum(members[EMP_RAISE_COST_GROSS])),
            )
        )

    unbanded = len(df) - sum(b.headcount for b in buckets)
    if unbanded:
        logger.warning(f"{unbanded} employee(s) have no usable hire year and fall in no loyalty band")
    return tuple(buckets)


def waterfall_series(stats: StatsReport) -> Tuple[WaterfallStep, ...]:
    """
    Ordered signed deltas for the revenue-to-surplus waterfall chart:
    revenue, management cost, educator cost, support and auxiliary cost
    combined, then the net result.
    """
    cost_a = stats.raise_cost_for(Category.MANAGEMENT.value)
    cost_b = stats.raise_cost_for(Category.EDUCATORS.value)
    cost_cd = stats.raise_cost_for(Category.SUPPORT.value, Category.AUXILIARY.value)

    return (
        WaterfallStep("wf-rev", "Revenue", finite_or_zero(stats.additional_revenue), COLOR_REVENUE),
        WaterfallStep("wf-mgmt", "Management", finite_or_zero(-cost_a), COLOR_MANAGEMENT),
        WaterfallStep("wf-teach", "Educators", finite_or_zero(-cost_b), COLOR_EDUCATORS),
        WaterfallStep("wf-aux", "Auxiliary", finite_or_zero(-cost_cd), COLOR_AUXILIARY),
        WaterfallStep(
            "wf-net",
            "Surplus",
            finite_or_zero(stats.net_profit),
            COLOR_SURPLUS if stats.is_sustainable else COLOR_DEFICIT,
        ),
    )


__all__ = [
    "visible_roster",
    "filtered_totals",
    "global_totals",
    "loyalty_buckets",
    "waterfall_series",
]
