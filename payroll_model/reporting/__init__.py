from .session import DashboardViews, SessionContext, ViewCache, derive_views
from .views import (
    filtered_totals,
    global_totals,
    loyalty_buckets,
    visible_roster,
    waterfall_series,
)

__all__ = [
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
