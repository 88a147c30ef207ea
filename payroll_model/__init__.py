"""
Payroll-adjustment analytics: raise costs, tuition revenue and the
sustainability verdict for a fixed employee roster.

Example Usage:
    >>> from payroll_model import compute_stats, read_roster
    >>> roster = read_roster("roster.csv")
    >>> report = compute_stats(roster, tuition_increase_pct=6)
    >>> report.is_sustainable
"""

from .config import DEFAULT_CONFIG, ConfigLoadError, EngineConfig, RevenueBase, load_engine_config
from .data import DataReadError, read_roster, roster_from_records
from .engines import additional_revenue, compute_stats
from .models import (
    CategorySummary,
    Employee,
    FilteredTotals,
    GlobalTotals,
    LoyaltyBucket,
    RosterTotals,
    StatsReport,
    WaterfallStep,
)
from .reporting import (
    DashboardViews,
    SessionContext,
    ViewCache,
    derive_views,
    filtered_totals,
    global_totals,
    loyalty_buckets,
    visible_roster,
    waterfall_series,
)
from .schema import BRUTO_FACTOR, Category, CategoryFilter, DegreeFilter, HireYearFilter

__all__ = [
    "BRUTO_FACTOR",
    "Category",
    "CategoryFilter",
    "DegreeFilter",
    "HireYearFilter",
    "DEFAULT_CONFIG",
    "ConfigLoadError",
    "EngineConfig",
    "RevenueBase",
    "load_engine_config",
    "DataReadError",
    "read_roster",
    "roster_from_records",
    "additional_revenue",
    "compute_stats",
    "CategorySummary",
    "Employee",
    "FilteredTotals",
    "GlobalTotals",
    "LoyaltyBucket",
    "RosterTotals",
    "StatsReport",
    "WaterfallStep",
    "DashboardViews",
    "SessionContext",
    "ViewCache",
    "derive_views",
    "filtered_totals",
    "global_totals",
    "loyalty_buckets",
    "visible_roster",
    "waterfall_series",
]

__version__ = "0.1.0"
