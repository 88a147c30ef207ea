import math

import pytest

from payroll_model.engines.stats import compute_stats
from payroll_model.models import Employee
from payroll_model.reporting.views import (
    COLOR_DEFICIT,
    COLOR_SURPLUS,
    filtered_totals,
    global_totals,
    loyalty_buckets,
    visible_roster,
    waterfall_series,
)
from payroll_model.schema import CategoryFilter, DegreeFilter, HireYearFilter


def _ids(roster):
    return [e.employee_id for e in roster]


# --- visible_roster ---


def test_all_filters_is_identity(sample_roster):
    assert visible_roster(sample_roster) == sample_roster


@pytest.mark.parametrize(
    "cat, ma, year, expected",
    [
        ("CD", "ALL", "ALL", ["e5", "e6"]),
        ("AB", "ALL", "ALL", ["e1", "e2", "e3", "e4"]),
        ("ALL", "MA_ONLY", "ALL", ["e2", "e3"]),
        ("ALL", "NO_MA", "ALL", ["e1", "e4", "e5", "e6"]),
        ("ALL", "ALL", "BEFORE_2020", ["e1", "e3", "e5"]),
        ("ALL", "ALL", "AFTER_2020", ["e4", "e6"]),
        ("AB", "MA_ONLY", "ALL", ["e2", "e3"]),
        ("CD", "NO_MA", "AFTER_2020", ["e6"]),
        ("CD", "MA_ONLY", "ALL", []),
    ],
)
def test_filters_are_conjunctive(sample_roster, cat, ma, year, expected):
    assert _ids(visible_roster(sample_roster, cat, ma, year)) == expected


def test_category_groups_are_complements(sample_roster):
    cd = visible_roster(sample_roster, CategoryFilter.CD)
    ab = visible_roster(sample_roster, CategoryFilter.AB)
    assert sorted(_ids(cd) + _ids(ab)) == sorted(_ids(sample_roster))


def test_hire_year_2020_passes_only_all():
    roster = (Employee("A", 2020, False, 1000.0, 1100.0, employee_id="pivot"),)
    assert visible_roster(roster, hire_year_filter=HireYearFilter.ALL) == roster
    assert visible_roster(roster, hire_year_filter=HireYearFilter.BEFORE_2020) == ()
    assert visible_roster(roster, hire_year_filter=HireYearFilter.AFTER_2020) == ()


def test_unknown_filter_value_raises(sample_roster):
    with pytest.raises(ValueError):
        visible_roster(sample_roster, category_filter="XY")


# --- totals ---


def test_filtered_totals_over_visible_rows(sample_roster):
    totals = filtered_totals(visible_roster(sample_roster, CategoryFilter.AB))
    assert totals.headcount == 4
    assert totals.total_current_net == pytest.approx(4200.0)
    assert totals.total_target_net == pytest.approx(4600.0)
    assert totals.total_net_increase == pytest.approx(400.0)
    assert totals.total_raise_cost_gross == pytest.approx(652.0)


def test_filtered_totals_of_nothing_are_zero():
    totals = filtered_totals(())
    assert totals.headcount == 0
    assert totals.total_current_net == 0.0
    assert totals.total_net_increase == 0.0
    assert totals.total_raise_cost_gross == 0.0


def test_totals_guard_each_field_independently():
    roster = (
        Employee("A", 2015, False, float("nan"), 1100.0),
        Employee("B", 2016, False, 900.0, 1000.0),
    )
    totals = filtered_totals(roster)
    assert totals.total_current_net == 0.0
    assert totals.total_target_net == pytest.approx(2100.0)
    assert totals.total_net_increase == 0.0
    assert totals.total_raise_cost_gross == 0.0


def test_global_totals_ignore_filters(sample_roster):
    totals = global_totals(sample_roster)
    assert totals.headcount == 6
    assert totals.total_target_net == pytest.approx(5990.0)
    assert totals.total_raise_cost_gross == pytest.approx(798.7)


def test_global_totals_follow_roster_changes(sample_roster):
    before = global_totals(sample_roster)
    after = global_totals(sample_roster[:-1])
    assert after != before
    assert after.total_raise_cost_gross == pytest.approx(798.7 - 48.9)


# --- loyalty buckets ---


def test_loyalty_buckets(sample_roster):
    buckets = loyalty_buckets(sample_roster)

    assert [b.id for b in buckets] == ["loyalty-10plus", "loyalty-5-10", "loyalty-2-5", "loyalty-2less"]
    assert [b.color for b in buckets] == ["#064e3b", "#059669", "#10b981", "#34d399"]
    assert [b.headcount for b in buckets] == [2, 2, 1, 1]
    assert [b.total_raise_cost_gross for b in buckets] == pytest.approx([260.8, 407.5, 81.5, 48.9])


def test_loyalty_buckets_are_rounded_to_cents():
    roster = (Employee("A", 2010, False, 1000.0, 1000.333),)
    (ten_plus, *_rest) = loyalty_buckets(roster)
    assert ten_plus.total_raise_cost_gross == 0.54


def test_loyalty_buckets_huge_raise_cost():
    roster = (Employee("A", 2010, False, 0.0, 1e30),)
    (ten_plus, *_rest) = loyalty_buckets(roster)
    assert ten_plus.total_raise_cost_gross == pytest.approx(1.63e30)
    assert math.isfinite(ten_plus.total_raise_cost_gross)


def test_loyalty_buckets_empty_roster():
    buckets = loyalty_buckets(())
    assert len(buckets) == 4
    assert all(b.total_raise_cost_gross == 0.0 for b in buckets)


def test_loyalty_bucket_costs_cover_roster(sample_roster):
    total = sum(b.total_raise_cost_gross for b in loyalty_buckets(sample_roster))
    assert total == pytest.approx(global_totals(sample_roster).total_raise_cost_gross)


# --- waterfall ---


def test_waterfall_steps(sample_roster):
    steps = waterfall_series(compute_stats(sample_roster, 6))

    assert [s.id for s in steps] == ["wf-rev", "wf-mgmt", "wf-teach", "wf-aux", "wf-net"]
    rev, mgmt, teach, aux, net = steps
    assert rev.value == pytest.approx(25920.0)
    assert mgmt.value == pytest.approx(-407.5)
    assert teach.value == pytest.approx(-244.5)
    # C and D are merged into one step
    assert aux.value == pytest.approx(-146.7)
    assert net.value == pytest.approx(rev.value + mgmt.value + teach.value + aux.value)
    assert net.color == COLOR_SURPLUS


def test_waterfall_deficit_color(sample_roster):
    steps = waterfall_series(compute_stats(sample_roster, 0))
    net = steps[-1]
    assert net.value < 0
    assert net.color == COLOR_DEFICIT


def test_waterfall_empty_roster():
    steps = waterfall_series(compute_stats((), 6))
    assert len(steps) == 5
    assert [s.value for s in steps[1:4]] == [0.0, 0.0, 0.0]
    assert steps[-1].value == steps[0].value
