"""Tests for ProjectionInputs validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from firstmillion.config.schema import MAX_MONTHS, PeriodType, ProjectionInputs, RateType


class TestProjectionInputs:
    def test_defaults(self) -> None:
        inputs = ProjectionInputs()
        assert inputs.initial == 0.0
        assert inputs.rate_type is RateType.YEARLY
        assert inputs.period_type is PeriodType.YEARS

    def test_enum_values_parse(self) -> None:
        inputs = ProjectionInputs(rate_type="mensal", period_type="meses", period=6)
        assert inputs.rate_type is RateType.MONTHLY
        assert inputs.period_type is PeriodType.MONTHS

    def test_unknown_unit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectionInputs(rate_type="semanal")
        with pytest.raises(ValidationError):
            ProjectionInputs(period_type="dias")

    @pytest.mark.parametrize("field", ["initial", "monthly", "rate", "period"])
    def test_negative_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            ProjectionInputs(**{field: -1})

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectionInputs(initial=float("inf"))
        with pytest.raises(ValidationError):
            ProjectionInputs(rate=float("nan"))

    def test_extra_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectionInputs(inflation=3.0)  # type: ignore[call-arg]

    def test_total_months(self) -> None:
        assert ProjectionInputs(period=2.5).total_months == 30
        assert ProjectionInputs(period=7, period_type=PeriodType.MONTHS).total_months == 7

    def test_horizon_cap(self) -> None:
        ProjectionInputs(period=100)
        ProjectionInputs(period=MAX_MONTHS, period_type=PeriodType.MONTHS)
        with pytest.raises(ValidationError, match="exceeds the maximum"):
            ProjectionInputs(period=101)
        with pytest.raises(ValidationError):
            ProjectionInputs(period=MAX_MONTHS + 1, period_type=PeriodType.MONTHS)
