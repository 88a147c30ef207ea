# payroll_model/engines/stats.py
"""
Aggregation engine: turns the roster and a tuition increase into a
sustainability report.

The engine never raises on numeric input. Empty categories, NaN salaries and
absurd percentages all produce finite figures, with any non-finite sum
replaced by 0.0.
"""

import logging
from typing import Iterable, List, Optional

import pandas as pd

from payroll_model.config.models import DEFAULT_CONFIG, EngineConfig
from payroll_model.models import CategorySummary, Employee, StatsReport
from payroll_model.schema import (
    CATEGORY_ORDER,
    EMP_CATEGORY,
    EMP_CURRENT_NET,
    EMP_HAS_MA,
    EMP_ID,
    EMP_NET_INCREASE,
    EMP_RAISE_COST_GROSS,
    EMP_START_YEAR,
    EMP_TARGET_NET,
)
from payroll_model.utils.numeric import finite_or_zero, safe_divide, safe_sum

logger = logging.getLogger(__name__)

FRAME_COLS: List[str] = [
    EMP_ID,
    EMP_CATEGORY,
    EMP_START_YEAR,
    EMP_HAS_MA,
    EMP_CURRENT_NET,
    EMP_TARGET_NET,
    EMP_NET_INCREASE,
    EMP_RAISE_COST_GROSS,
]


def roster_to_frame(
    roster: Iterable[Employee], bruto_factor: float = DEFAULT_CONFIG.bruto_factor
) -> pd.DataFrame:
    """
    Load the roster into a DataFrame with net increase and gross raise cost
    columns. Row order follows the roster; an empty roster gives an empty
    frame with the same columns.
    """
    rows = [
        {
            EMP_ID: e.employee_id,
            EMP_CATEGORY: e.category,
            EMP_START_YEAR: e.start,
            EMP_HAS_MA: e.ma,
            EMP_CURRENT_NET: e.current_net,
            EMP_TARGET_NET: e.target_net,
        }
        for e in roster
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLS[:6])
    df[EMP_CURRENT_NET] = pd.to_numeric(df[EMP_CURRENT_NET], errors="coerce").astype(float)
    df[EMP_TARGET_NET] = pd.to_numeric(df[EMP_TARGET_NET], errors="coerce").astype(float)
    df[EMP_NET_INCREASE] = df[EMP_TARGET_NET] - df[EMP_CURRENT_NET]
    df[EMP_RAISE_COST_GROSS] = df[EMP_NET_INCREASE] * bruto_factor
    return df


def additional_revenue(tuition_increase_pct: float, config: EngineConfig = DEFAULT_CONFIG) -> float:
    """
    Yearly revenue gained by raising tuition by ``tuition_increase_pct`` percent.

    No bounds are enforced: zero, negative and very large percentages are all
    accepted. A non-finite result is reported as 0.0.
    """
    pct = finite_or_zero(tuition_increase_pct)
    return finite_or_zero(config.revenue_base.annual_amount * pct / 100.0)


def _summarize_category(category: str, members: pd.DataFrame) -> CategorySummary:
    headcount = len(members)
    total_cost = safe_sum(members[EMP_RAISE_COST_GROSS])
    return CategorySummary(
        category=category,
        headcount=headcount,
        total_current_net=safe_sum(members[EMP_CURRENT_NET]),
        total_target_net=safe_sum(members[EMP_TARGET_NET]),
        total_raise_cost_gross=total_cost,
        average_raise_cost_gross=safe_divide(total_cost, headcount),
    )


def compute_stats(
    roster: Iterable[Employee],
    tuition_increase_pct: float,
    config: Optional[EngineConfig] = None,
) -> StatsReport:
    """
    Compute the statistics report for a roster and a tuition increase.

    Steps:
      1. Additional revenue from the tuition increase and the revenue base.
      2. Per category A-D: headcount, current/target net totals and the gross
         raise cost ``(target_net - current_net) * bruto_factor``.
         Unrecognized categories are left out of every summary.
      3. Net profit = additional revenue - total raise cost.
      4. Sustainable when net profit >= 0 (zero counts as sustainable).

    Args:
        roster: Employee records; may be empty.
        tuition_increase_pct: Tuition increase in percent; not validated.
        config: Engine constants; defaults to DEFAULT_CONFIG.

    Returns:
        A StatsReport whose numeric fields are all finite.
    """
    config = config or DEFAULT_CONFIG
    df = roster_to_frame(roster, config.bruto_factor)

    revenue = additional_revenue(tuition_increase_pct, config)

    grouped = {cat: members for cat, members in df.groupby(EMP_CATEGORY, sort=False)}
    empty = df.iloc[0:0]
    summaries = tuple(
        _summarize_category(cat, grouped.get(cat, empty)) for cat in CATEGORY_ORDER
    )

    excluded = len(df) - sum(s.headcount for s in summaries)
    if excluded:
        logger.debug(f"{excluded} employee(s) with unrecognized categories excluded from summaries")

    total_cost = finite_or_zero(sum(s.total_raise_cost_gross for s in summaries))
    net_profit = finite_or_zero(revenue - total_cost)

    report = StatsReport(
        tuition_increase_pct=finite_or_zero(tuition_increase_pct),
        additional_revenue=revenue,
        category_summaries=summaries,
        total_raise_cost_gross=total_cost,
        net_profit=net_profit,
        is_sustainable=net_profit >= 0,
    )
    logger.debug(
        f"Stats for {len(df)} employees at {tuition_increase_pct}%: "
        f"revenue={revenue:.2f}, cost={total_cost:.2f}, net={net_profit:.2f}"
    )
    return report


__all__ = ["FRAME_COLS", "roster_to_frame", "additional_revenue", "compute_stats"]
