# payroll_model/reporting/session.py
"""
Session context and dependency-scoped caching for the dashboard views.

The presentation layer owns a ``SessionContext`` (roster, tuition increase,
the three table filters) and passes it by value into ``ViewCache.derive``.
Each derived view is recomputed only when its own dependencies change, so a
filter toggle re-filters the table without recomputing the roster-wide
figures.

Example:
    >>> cache = ViewCache()
    >>> ctx = SessionContext(roster=roster, tuition_increase_pct=6)
    >>> views = cache.derive(ctx)
    >>> views = cache.derive(ctx.with_filters(category_filter="CD"))
    >>> cache.recompute_counts["global_totals"]
    1
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from payroll_model.config.models import DEFAULT_CONFIG, EngineConfig
from payroll_model.engines.stats import compute_stats
from payroll_model.models import (
    Employee,
    FilteredTotals,
    GlobalTotals,
    LoyaltyBucket,
    StatsReport,
    WaterfallStep,
)
from payroll_model.reporting.views import (
    filtered_totals,
    global_totals,
    loyalty_buckets,
    visible_roster,
    waterfall_series,
)
from payroll_model.schema import CategoryFilter, DegreeFilter, HireYearFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """Externally owned parameters the views are derived from."""

    roster: Tuple[Employee, ...] = ()
    tuition_increase_pct: float = DEFAULT_CONFIG.default_tuition_increase_pct
    category_filter: CategoryFilter = CategoryFilter.ALL
    degree_filter: DegreeFilter = DegreeFilter.ALL
    hire_year_filter: HireYearFilter = HireYearFilter.ALL
    config: EngineConfig = DEFAULT_CONFIG

    def __post_init__(self):
        # frozen, so normalize through object.__setattr__
        object.__setattr__(self, "roster", tuple(self.roster))
        object.__setattr__(self, "category_filter", CategoryFilter(self.category_filter))
        object.__setattr__(self, "degree_filter", DegreeFilter(self.degree_filter))
        object.__setattr__(self, "hire_year_filter", HireYearFilter(self.hire_year_filter))

    def with_tuition_increase(self, pct: float) -> "SessionContext":
        return replace(self, tuition_increase_pct=pct)

    def with_filters(
        self,
        category_filter: Union[CategoryFilter, str, None] = None,
        degree_filter: Union[DegreeFilter, str, None] = None,
        hire_year_filter: Union[HireYearFilter, str, None] = None,
    ) -> "SessionContext":
        """Return a copy with the given filters replaced; None keeps the current one."""
        return replace(
            self,
            category_filter=self.category_filter if category_filter is None else category_filter,
            degree_filter=self.degree_filter if degree_filter is None else degree_filter,
            hire_year_filter=self.hire_year_filter if hire_year_filter is None else hire_year_filter,
        )


@dataclass(frozen=True)
class DashboardViews:
    stats: StatsReport
    visible_roster: Tuple[Employee, ...]
    filtered_totals: FilteredTotals
    global_totals: GlobalTotals
    loyalty_buckets: Tuple[LoyaltyBucket, ...]
    waterfall: Tuple[WaterfallStep, ...]


_UNSET = object()


def _same_deps(previous: Sequence[Any], current: Sequence[Any]) -> bool:
    if len(previous) != len(current):
        return False
    return all(p is c or p == c for p, c in zip(previous, current))


@dataclass
class MemoSlot:
    """Remembers the last value computed for one derivation and its inputs."""

    name: str
    deps: Any = _UNSET
    value: Any = None
    recomputes: int = 0

    def get(self, deps: Tuple[Any, ...], compute: Callable[[], Any]) -> Any:
        if self.deps is not _UNSET and _same_deps(self.deps, deps):
            return self.value
        logger.debug(f"Recomputing view '{self.name}'")
        self.value = compute()
        self.deps = deps
        self.recomputes += 1
        return self.value

    def clear(self) -> None:
        self.deps = _UNSET
        self.value = None


VIEW_NAMES = (
    "stats",
    "visible_roster",
    "filtered_totals",
    "global_totals",
    "loyalty_buckets",
    "waterfall",
)


@dataclass
class ViewCache:
    """One memo slot per derived view, keyed on that view's declared inputs."""

    slots: Dict[str, MemoSlot] = field(
        default_factory=lambda: {name: MemoSlot(name) for name in VIEW_NAMES}
    )

    @property
    def recompute_counts(self) -> Dict[str, int]:
        return {name: slot.recomputes for name, slot in self.slots.items()}

    def clear(self) -> None:
        for slot in self.slots.values():
            slot.clear()

    def stats(self, ctx: SessionContext) -> StatsReport:
        return self.slots["stats"].get(
            (ctx.roster, ctx.tuition_increase_pct, ctx.config),
            lambda: compute_stats(ctx.roster, ctx.tuition_increase_pct, ctx.config),
        )

    def visible_roster(self, ctx: SessionContext) -> Tuple[Employee, ...]:
        return self.slots["visible_roster"].get(
            (ctx.roster, ctx.category_filter, ctx.degree_filter, ctx.hire_year_filter),
            lambda: visible_roster(
                ctx.roster, ctx.category_filter, ctx.degree_filter, ctx.hire_year_filter
            ),
        )

    def filtered_totals(self, ctx: SessionContext) -> FilteredTotals:
        visible = self.visible_roster(ctx)
        return self.slots["filtered_totals"].get(
            (visible, ctx.config),
            lambda: filtered_totals(visible, ctx.config),
        )

    def global_totals(self, ctx: SessionContext) -> GlobalTotals:
        return self.slots["global_totals"].get(
            (ctx.roster, ctx.config),
            lambda: global_totals(ctx.roster, ctx.config),
        )

    def loyalty_buckets(self, ctx: SessionContext) -> Tuple[LoyaltyBucket, ...]:
        return self.slots["loyalty_buckets"].get(
            (ctx.roster, ctx.config),
            lambda: loyalty_buckets(ctx.roster, ctx.config),
        )

    def waterfall(self, ctx: SessionContext) -> Tuple[WaterfallStep, ...]:
        stats = self.stats(ctx)
        return self.slots["waterfall"].get((stats,), lambda: waterfall_series(stats))

    def derive(self, ctx: SessionContext) -> DashboardViews:
        """Bring every view up to date with ``ctx`` and return them together."""
        return DashboardViews(
            stats=self.stats(ctx),
            visible_roster=self.visible_roster(ctx),
            filtered_totals=self.filtered_totals(ctx),
            global_totals=self.global_totals(ctx),
            loyalty_buckets=self.loyalty_buckets(ctx),
            waterfall=self.waterfall(ctx),
        )


def derive_views(ctx: SessionContext, cache: Optional[ViewCache] = None) -> DashboardViews:
    """Derive all views for ``ctx``; without a cache every view is computed fresh."""
    return (cache or ViewCache()).derive(ctx)


__all__ = [
    "SessionContext",
    "DashboardViews",
    "MemoSlot",
    "ViewCache",
    "VIEW_NAMES",
    "derive_views",
]
