# payroll_model/config/models.py
"""
Pydantic models for validating the engine configuration loaded from YAML
files (e.g., configs/default.yaml).
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, model_validator

from payroll_model.schema import BRUTO_FACTOR

logger = logging.getLogger(__name__)


class RevenueBase(BaseModel):
    """Tuition revenue that a percentage increase is applied to."""

    model_config = ConfigDict(frozen=True)

    enrolled_children: int = Field(
        120, ge=0, description="Number of enrolled children paying tuition"
    )
    monthly_tuition: float = Field(
        300.0, ge=0.0, description="Current monthly tuition per child"
    )
    billing_months: int = Field(
        12, ge=0, le=12, description="Billed months per year"
    )

    @property
    def annual_amount(self) -> float:
        return self.enrolled_children * self.monthly_tuition * self.billing_months


class EngineConfig(BaseModel):
    """Constants supplied once per session to the aggregation engine."""

    model_config = ConfigDict(frozen=True)

    bruto_factor: float = Field(
        BRUTO_FACTOR,
        gt=0.0,
        description="Employer cost per unit of net salary (e.g., 1.63)",
    )
    default_tuition_increase_pct: float = Field(
        6.0, description="Tuition increase the dashboard starts with, in percent"
    )
    revenue_base: RevenueBase = Field(default_factory=RevenueBase)

    @model_validator(mode='after')
    def warn_on_empty_revenue_base(self) -> 'EngineConfig':
        if self.revenue_base.annual_amount == 0:
            logger.warning(
                "Revenue base is zero; any tuition increase yields no additional revenue."
            )
        return self


DEFAULT_CONFIG = EngineConfig()

__all__ = ["RevenueBase", "EngineConfig", "DEFAULT_CONFIG"]
