"""Pydantic v2 input models for firstmillion."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

MONTHS_PER_YEAR = 12

# Upper bound on the simulated horizon (100 years).
MAX_MONTHS = 1200


class RateType(str, Enum):
    """Period the nominal interest rate refers to."""

    YEARLY = "anual"
    MONTHLY = "mensal"


class PeriodType(str, Enum):
    """Unit of the projection horizon."""

    YEARS = "anos"
    MONTHS = "meses"


class ProjectionInputs(BaseModel):
    """Validated parameters for one projection run.

    The engine accepts whatever numbers it is given; this model is where
    user-provided values are checked before the engine is invoked.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initial: float = Field(default=0.0, ge=0, description="Balance at month 0 (R$)")
    monthly: float = Field(
        default=0.0, ge=0, description="Contribution added at the end of every month (R$)"
    )
    rate: float = Field(default=0.0, ge=0, description="Nominal interest rate in percent")
    rate_type: RateType = RateType.YEARLY
    period: float = Field(default=0.0, ge=0, description="Length of the horizon")
    period_type: PeriodType = PeriodType.YEARS

    @property
    def total_months(self) -> float:
        """Horizon expressed in months, before truncation."""
        if self.period_type == PeriodType.YEARS:
            return self.period * MONTHS_PER_YEAR
        return self.period

    @model_validator(mode="after")
    def _validate_horizon(self) -> ProjectionInputs:
        if self.total_months > MAX_MONTHS:
            raise ValueError(
                f"horizon of {self.total_months:g} months exceeds the maximum of {MAX_MONTHS}"
            )
        return self
