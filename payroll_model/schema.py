# payroll_model/schema.py
# flake8: noqa
"""Centralized schema constants for payroll_model.

This module defines:
  - Roster column constants used by readers and the aggregation engine
  - The four organizational categories and the table filter enums
  - The net-to-gross employer cost factor

All other modules should import from here for consistency.
"""
from __future__ import annotations

from enum import Enum
from typing import List

# -----------------------------------------------------------------------------
# Roster column constants (single source of truth)
# -----------------------------------------------------------------------------
EMP_ID = "employee_id"
EMP_NAME = "name"
EMP_CATEGORY = "category"
EMP_START_YEAR = "start"
EMP_HAS_MA = "ma"
EMP_CURRENT_NET = "current_net"
EMP_TARGET_NET = "target_net"

# Derived columns
EMP_NET_INCREASE = "net_increase"
EMP_RAISE_COST_GROSS = "raise_cost_gross"

ROSTER_COLS: List[str] = [
    EMP_ID,
    EMP_NAME,
    EMP_CATEGORY,
    EMP_START_YEAR,
    EMP_HAS_MA,
    EMP_CURRENT_NET,
    EMP_TARGET_NET,
]

REQUIRED_ROSTER_COLS: List[str] = [
    EMP_CATEGORY,
    EMP_START_YEAR,
    EMP_HAS_MA,
    EMP_CURRENT_NET,
    EMP_TARGET_NET,
]

# Employer cost per unit of net salary (statutory contributions included)
BRUTO_FACTOR = 1.63

# Hire year separating the "before" and "after" table filters
HIRE_YEAR_PIVOT = 2020


class Category(str, Enum):
    """Organizational role tier used for cost grouping."""

    MANAGEMENT = "A"
    EDUCATORS = "B"
    SUPPORT = "C"
    AUXILIARY = "D"


CATEGORY_ORDER: List[str] = [c.value for c in Category]


class CategoryFilter(str, Enum):
    ALL = "ALL"
    CD = "CD"
    AB = "AB"


class DegreeFilter(str, Enum):
    ALL = "ALL"
    MA_ONLY = "MA_ONLY"
    NO_MA = "NO_MA"


class HireYearFilter(str, Enum):
    ALL = "ALL"
    BEFORE_2020 = "BEFORE_2020"
    AFTER_2020 = "AFTER_2020"


__all__ = [
    "EMP_ID",
    "EMP_NAME",
    "EMP_CATEGORY",
    "EMP_START_YEAR",
    "EMP_HAS_MA",
    "EMP_CURRENT_NET",
    "EMP_TARGET_NET",
    "EMP_NET_INCREASE",
    "EMP_RAISE_COST_GROSS",
    "ROSTER_COLS",
    "REQUIRED_ROSTER_COLS",
    "BRUTO_FACTOR",
    "HIRE_YEAR_PIVOT",
    "Category",
    "CATEGORY_ORDER",
    "CategoryFilter",
    "DegreeFilter",
    "HireYearFilter",
]
