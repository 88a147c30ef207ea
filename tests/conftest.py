"""Shared fixtures for the payroll_model test suite."""
import pytest

from payroll_model.config.models import EngineConfig, RevenueBase
from payroll_model.models import Employee


@pytest.fixture
def sample_roster():
    # Raise costs at factor 1.63: 163.0, 244.5, 163.0, 81.5, 97.8, 48.9
    return (
        Employee("A", 2015, False, 1000.0, 1100.0, employee_id="e1"),
        Employee("A", 2020, True, 1500.0, 1650.0, employee_id="e2"),
        Employee("B", 2018, True, 900.0, 1000.0, employee_id="e3"),
        Employee("B", 2023, False, 800.0, 850.0, employee_id="e4"),
        Employee("C", 2010, False, 700.0, 760.0, employee_id="e5"),
        Employee("D", 2025, False, 600.0, 630.0, employee_id="e6"),
    )


@pytest.fixture
def unit_config():
    """Factor 1.0 and a revenue base of exactly 1000 per year."""
    return EngineConfig(
        bruto_factor=1.0,
        revenue_base=RevenueBase(enrolled_children=1, monthly_tuition=100.0, billing_months=10),
    )
